"""
Lenient Country Resolution
--------------------------

Maps free-form country hints onto the closed Id set. The strict parser
(Id.from_text) is separate and never goes through here.

Pipeline:
  1) exact canonical code ("FR")
  2) alias table (ISO names, colloquialisms, numbering-plan pseudo-regions)
  3) country_converter (coco) conversion to ISO2 (handles lots of aliases)
  4) pycountry lookup (official ISO 3166 names and alpha-3 codes)
  5) rapidfuzz fuzzy match over the alias table (whole-string token_sort_ratio,
     hints of 4+ characters only)

Names are accent-folded before lookup, so "México" matches "mexico".

A hint that stages 3-4 recognize as a real territory without its own Id
(e.g. Antarctica) resolves to None; it is not fuzzy-matched to a neighbour.

API:
  resolve_country_id(name, fuzzy=True, fuzzy_threshold=85)
  resolve_country_ids(names, fuzzy=True, fuzzy_threshold=85)

Examples:
  >>> resolve_country_id("USA")             # Id.US
  >>> resolve_country_id("Holland")         # Id.NL
  >>> resolve_country_id("Ascension")       # Id.AC
  >>> resolve_country_id("Antarctica")      # None
"""

from __future__ import annotations
from functools import lru_cache
from typing import Dict, Iterable, List, Optional
import logging
import unicodedata

# ---- Optional imports with helpful error messages ----
try:
    import country_converter as coco
except ImportError as e:
    raise ImportError("country_converter not installed. pip install country_converter") from e

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from phonecountry.countries.countryid import Id, from_text
from phonecountry.errors import InvalidCountryCode

logger = logging.getLogger(__name__)


# Returned by the resolution stages for a known territory outside the Id set
_OUTSIDE = object()

# Hints shorter than this skip the fuzzy stage
_MIN_FUZZY_LENGTH = 4


# ---- Helpers: canonicalization and alias expansion ----
def _norm(s: str) -> str:
    s = s.replace("’", "'")
    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")
    return s.strip().lower()


def _lookup_text(code: Optional[str]) -> Optional[Id]:
    try:
        return from_text(code)
    except InvalidCountryCode:
        return None


def _alias_catalog() -> Dict[str, Id]:
    """
    Build a catalog keyed by many name variants -> Id.
    Only territories in the closed Id set are included.
    """
    catalog: Dict[str, Id] = {}

    def put(name: Optional[str], country: Id):
        if not name:
            return
        catalog[_norm(name)] = country

    for c in pycountry.countries:
        country = _lookup_text(getattr(c, "alpha_2", None))
        if country is None:
            continue

        put(getattr(c, "name", None), country)
        put(getattr(c, "official_name", None), country)
        put(getattr(c, "common_name", None), country)

        name = getattr(c, "name", "")
        if ", The" in name:
            put(name.replace(", The", ""), country)

    # Colloquialisms plus the pseudo-regions pycountry does not know
    manual_aliases = {
        "usa": Id.US,
        "america": Id.US,
        "england": Id.GB,
        "scotland": Id.GB,
        "wales": Id.GB,
        "northern ireland": Id.GB,
        "great britain": Id.GB,
        "uk": Id.GB,
        "holland": Id.NL,
        "ivory coast": Id.CI,
        "cote d'ivoire": Id.CI,
        "laos": Id.LA,
        "moldova": Id.MD,
        "russia": Id.RU,
        "south korea": Id.KR,
        "north korea": Id.KP,
        "vietnam": Id.VN,
        "viet nam": Id.VN,
        "syria": Id.SY,
        "palestine": Id.PS,
        "bolivia": Id.BO,
        "brunei": Id.BN,
        "cape verde": Id.CV,
        "czechia": Id.CZ,
        "eswatini": Id.SZ,
        "swaziland": Id.SZ,
        "micronesia": Id.FM,
        "vatican": Id.VA,
        "venezuela": Id.VE,
        "uae": Id.AE,
        "emirates": Id.AE,
        "burma": Id.MM,
        "taiwan": Id.TW,
        "kosovo": Id.XK,
        "ascension": Id.AC,
        "ascension island": Id.AC,
        "tristan": Id.TA,
        "tristan da cunha": Id.TA,
    }
    catalog.update(manual_aliases)
    return catalog


_CATALOG = _alias_catalog()
_CANDIDATE_NAMES = list(_CATALOG.keys())


@lru_cache(maxsize=1)
def _converter() -> "coco.CountryConverter":
    """Single shared CountryConverter; construction parses its whole table."""
    return coco.CountryConverter()


def _via_coco(s: str):
    converted = _converter().convert(names=[s], to="ISO2", not_found=None)
    a2 = converted[0] if isinstance(converted, list) else converted
    # With not_found=None coco echoes unknown input back unchanged
    if not isinstance(a2, str) or a2 == s or a2 == "not found":
        return None
    country = _lookup_text(a2)
    return _OUTSIDE if country is None else country


def _via_pycountry(s: str):
    try:
        c = pycountry.countries.lookup(s)
    except LookupError:
        return None
    country = _lookup_text(getattr(c, "alpha_2", None))
    return _OUTSIDE if country is None else country


# ---- Main resolution ----
def resolve_country_id(
    name: str,
    *,
    fuzzy: bool = True,
    fuzzy_threshold: int = 85,
) -> Optional[Id]:
    """
    Resolve a country-like string to a territory Id.

    Args:
        name: Any country hint: 'FR', 'USA', 'México', 'England', 'Kosovo'
        fuzzy: use fuzzy fallback on last resort
        fuzzy_threshold: minimum RapidFuzz score to accept a fuzzy match

    Returns:
        Matching Id, or None if not recognized or not in the Id set.
    """
    if not isinstance(name, str) or not name.strip():
        return None

    s = name.strip()

    # 1) Canonical code, no work needed
    exact = _lookup_text(s)
    if exact is not None:
        return exact

    # 2) Alias table
    alias_hit = _CATALOG.get(_norm(s))
    if alias_hit is not None:
        logger.debug(f"Resolved '{s}' -> {alias_hit.value} via alias table")
        return alias_hit

    # 3-4) Library conversions
    for stage, resolver in (("country_converter", _via_coco), ("pycountry", _via_pycountry)):
        hit = resolver(s)
        if hit is _OUTSIDE:
            logger.debug(f"'{s}' is a territory without its own Id ({stage})")
            return None
        if hit is not None:
            logger.debug(f"Resolved '{s}' -> {hit.value} via {stage}")
            return hit

    # 5) Fuzzy fallback over the alias table, scored on the whole string
    query = _norm(s)
    if fuzzy and len(query) >= _MIN_FUZZY_LENGTH:
        match = process.extractOne(query, _CANDIDATE_NAMES, scorer=fuzz.token_sort_ratio)
        if match:
            best_name, score, _ = match
            if score >= fuzzy_threshold:
                country = _CATALOG[best_name]
                logger.debug(f"Resolved '{s}' -> {country.value} via fuzzy match '{best_name}' ({score:.0f})")
                return country

    logger.debug(f"Could not resolve country '{s}'")
    return None


def resolve_country_ids(
    names: Iterable[str],
    *,
    fuzzy: bool = True,
    fuzzy_threshold: int = 85,
) -> List[Optional[Id]]:
    """Vectorized convenience wrapper."""
    return [
        resolve_country_id(n, fuzzy=fuzzy, fuzzy_threshold=fuzzy_threshold)
        for n in names
    ]


__all__ = [
    "resolve_country_id",
    "resolve_country_ids",
]
