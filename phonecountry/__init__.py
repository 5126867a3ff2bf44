"""Phone Country - territory identity for phone number handling

Public API for the country side of phone number parsing: the closed set of
territory identifiers and calling codes tagged with how they were derived.

Usage:
    from phonecountry import Id, Code, Source, country_id

    # Strict parsing of canonical codes
    country = country_id("FR")          # Returns: Id.FR
    country.to_text()                   # Returns: 'FR'
    country_id("fr")                    # Raises: InvalidCountryCode

    # Calling codes carry their derivation source
    code = Code(33, Source.PLUS)
    int(code)                           # Returns: 33
    Code(33).source                     # Returns: Source.DEFAULT

    # Lenient lookup of country names
    country_identifier("Holland")       # Returns: 'NL'
"""

__version__ = "0.0.1"

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    ParseError,            # Base class for parse failures
    InvalidCountryCode,    # Text is not a canonical territory code
)

# ============================================================================
# Territory Identifiers
# ============================================================================

from .countries.countryid import (
    Id,                    # Closed enumeration of territory codes
    ALL_IDS,               # Every Id in declaration order
    PSEUDO_REGIONS,        # Ids not assigned in ISO 3166-1 (AC, TA, XK)
    to_text,               # Id -> canonical code
    from_text,             # Canonical code -> Id (strict)
)

# ============================================================================
# Calling Codes
# ============================================================================

from .countries.callingcode import (
    Code,                  # Calling code value with its source
    Source,                # How a calling code was derived
)

# ============================================================================
# Country API
# ============================================================================

from .countries.countryapi import (
    country_id,            # Strict canonical code -> Id
    country_identifier,    # Lenient country hint -> canonical code
    country_identifiers,   # Batch lenient resolution
    calling_code,          # Build a Code from value and source name
    list_countries,        # DataFrame of every Id with ISO details
)

__all__ = [
    # Version
    "__version__",

    # Errors
    "ParseError",
    "InvalidCountryCode",

    # Territory Identifiers
    "Id",
    "ALL_IDS",
    "PSEUDO_REGIONS",
    "to_text",
    "from_text",

    # Calling Codes
    "Code",
    "Source",

    # Country API
    "country_id",
    "country_identifier",
    "country_identifiers",
    "calling_code",
    "list_countries",
]
