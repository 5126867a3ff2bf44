"""Country identity API.

Simple entry points over the territory enumeration, calling codes and the
lenient resolver:

  - country_id: strict canonical code -> Id (raises InvalidCountryCode)
  - country_identifier(s): lenient name -> canonical code (or None)
  - calling_code: build a Code from a number and a source name
  - list_countries: every Id with its ISO 3166 details as a DataFrame
"""

from functools import lru_cache
from typing import Iterable, List, Optional, Union

import pandas as pd

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

from phonecountry.countries.callingcode import Code, Source, as_source
from phonecountry.countries.countryid import ALL_IDS, PSEUDO_REGIONS, Id, from_text
from phonecountry.countries.fuzzycountry import (
    resolve_country_id as _resolve_country_id,
    resolve_country_ids as _resolve_country_ids,
)


# Display details for pseudo-regions outside ISO 3166-1
_PSEUDO_DETAILS = {
    Id.AC: {"alpha3": None, "numeric": None, "name": "Ascension Island"},
    Id.TA: {"alpha3": None, "numeric": None, "name": "Tristan da Cunha"},
    Id.XK: {"alpha3": "XKX", "numeric": None, "name": "Kosovo"},
}


def country_id(text: str) -> Id:
    """Parse a canonical two-letter code.

    Strict: only exact uppercase codes are accepted.

    Args:
        text: Canonical code, e.g. "FR"

    Returns:
        Id member

    Raises:
        InvalidCountryCode: for anything else ("fr", "FRA", "", "ZZ", ...)

    Examples:
        >>> country_id("FR")
        <Id.FR: 'FR'>
    """
    return from_text(text)


def country_identifier(name: str) -> Optional[str]:
    """Get the canonical territory code for a country hint.

    Resolves country names, codes, and common variations to the two-letter
    code of a territory in the Id set.

    Args:
        name: Country name or code in any format (e.g., "USA", "Holland", "FR")

    Returns:
        Two-letter code (e.g., "US") or None if not recognized

    Examples:
        >>> country_identifier("United Kingdom")
        'GB'

        >>> country_identifier("Holland")
        'NL'

        >>> country_identifier("Kosovo")
        'XK'
    """
    country = _resolve_country_id(name)
    return None if country is None else country.value


def country_identifiers(names: Iterable[str]) -> List[Optional[str]]:
    """Batch resolve country hints to canonical territory codes.

    Examples:
        >>> country_identifiers(["USA", "Holland", "England"])
        ['US', 'NL', 'GB']
    """
    return [None if c is None else c.value for c in _resolve_country_ids(names)]


def calling_code(value: int, source: Union[Source, str] = Source.DEFAULT) -> Code:
    """Build a calling Code.

    Args:
        value: Numeric calling code, e.g. 33
        source: Source member or its name ('plus', 'idd', 'number', 'default')

    Examples:
        >>> calling_code(33, "plus")
        Code(value=33, source=<Source.PLUS: 1>)
    """
    return Code(value, as_source(source))


@lru_cache(maxsize=1)
def _countries_frame() -> pd.DataFrame:
    rows = []
    for country in ALL_IDS:
        if country in _PSEUDO_DETAILS:
            details = _PSEUDO_DETAILS[country]
        else:
            c = pycountry.countries.get(alpha_2=country.value)
            details = {
                "alpha3": getattr(c, "alpha_3", None),
                "numeric": getattr(c, "numeric", None),
                "name": getattr(c, "name", None),
            }
        rows.append({
            "country_id": country.value,
            **details,
            "pseudo_region": country in PSEUDO_REGIONS,
        })
    return pd.DataFrame(rows, columns=["country_id", "alpha3", "numeric", "name", "pseudo_region"])


def list_countries(*, pseudo_regions: bool = True) -> pd.DataFrame:
    """List every territory Id with its ISO 3166 details.

    Args:
        pseudo_regions: include AC, TA and XK (default True)

    Returns:
        DataFrame with columns country_id, alpha3, numeric, name,
        pseudo_region; one row per Id in declaration order

    Examples:
        >>> df = list_countries()
        >>> df[df["country_id"] == "FR"][["alpha3", "name"]].values
        array([['FRA', 'France']], dtype=object)
    """
    df = _countries_frame()
    if not pseudo_regions:
        df = df[~df["pseudo_region"]]
    return df.reset_index(drop=True).copy()


__all__ = [
    "country_id",
    "country_identifier",
    "country_identifiers",
    "calling_code",
    "list_countries",
]
