"""Errors raised by phonecountry.

Only text-to-identifier conversion fails. The error is raised to the
immediate caller and carries no payload; keep the rejected text yourself
if you need it.
"""


class ParseError(ValueError):
    """Base class for parse failures."""


class InvalidCountryCode(ParseError):
    """Text is not one of the canonical two-letter territory codes."""

    def __init__(self):
        super().__init__("invalid country code")


__all__ = [
    "ParseError",
    "InvalidCountryCode",
]
