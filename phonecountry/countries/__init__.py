"""Territory identifiers and calling codes."""

from phonecountry.countries.countryid import (
    Id,
    ALL_IDS,
    PSEUDO_REGIONS,
    to_text,
    from_text,
)
from phonecountry.countries.callingcode import (
    Code,
    Source,
)
from phonecountry.countries.countryapi import (
    country_id,
    country_identifier,
    country_identifiers,
    calling_code,
    list_countries,
)

__all__ = [
    "Id",
    "ALL_IDS",
    "PSEUDO_REGIONS",
    "to_text",
    "from_text",
    "Code",
    "Source",
    "country_id",
    "country_identifier",
    "country_identifiers",
    "calling_code",
    "list_countries",
]
