"""Calling codes and where they came from.

A Code is the numeric international dialing prefix found while parsing a
phone number, together with the Source describing how it was found. Two
codes with the same number but different sources are different values,
since formatting may depend on the source.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union


class Source(Enum):
    """How a calling code was derived from the raw input."""

    # Leading "+", e.g. the French number "+33 1 42 68 53 00"
    PLUS = 1

    # Leading IDD, e.g. "011 33 1 42 68 53 00" dialled from the US
    IDD = 2

    # No "+", but the digits start with the code, e.g. "33 1 42 68 53 00"
    # with France supplied as default country
    NUMBER = 3

    # Not taken from the number at all but from the default country the
    # caller supplied, e.g. "01 42 68 53 00" parsed with France as default
    DEFAULT = 4

    @classmethod
    def default(cls) -> "Source":
        """Source used when none is given."""
        return cls.DEFAULT

    def to_name(self) -> str:
        """Interchange name: 'plus', 'idd', 'number' or 'default'."""
        return _SOURCE_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Source":
        """Inverse of :meth:`to_name`. Raises ValueError on unknown names."""
        try:
            return _SOURCE_BY_NAME[name]
        except (KeyError, TypeError):
            raise ValueError(f"Unknown calling code source: {name!r}") from None


# Interchange names are fixed here, independent of member names
_SOURCE_NAMES: Dict[Source, str] = {
    Source.PLUS: "plus",
    Source.IDD: "idd",
    Source.NUMBER: "number",
    Source.DEFAULT: "default",
}
_SOURCE_BY_NAME: Dict[str, Source] = {name: source for source, name in _SOURCE_NAMES.items()}

_MAX_VALUE = 0xFFFF


@dataclass(frozen=True)
class Code:
    """
    Country calling code with its derivation source.

    No check is made that ``value`` is an assigned calling code; that is up
    to the metadata-backed parser. Only the unsigned 16-bit range is enforced.

    Examples:
        >>> code = Code(33, Source.PLUS)
        >>> code.value, code.source
        (33, <Source.PLUS: 1>)
        >>> int(code)
        33
        >>> Code(33).source
        <Source.DEFAULT: 4>
    """

    value: int
    source: Source = Source.DEFAULT

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Calling code value must be int, got {type(self.value).__name__}")
        if not 0 <= self.value <= _MAX_VALUE:
            raise ValueError(f"Calling code value out of range: {self.value}")
        if not isinstance(self.source, Source):
            raise TypeError(f"Calling code source must be Source, got {type(self.source).__name__}")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        """Interchange form, e.g. ``{'value': 33, 'source': 'plus'}``."""
        return {"value": self.value, "source": self.source.to_name()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Code":
        """Build a Code from :meth:`to_dict` output. ``source`` is optional."""
        source = data.get("source")
        if source is None:
            return cls(data["value"])
        return cls(data["value"], Source.from_name(source))


def as_source(source: Union[Source, str]) -> Source:
    """Accept a Source or its interchange name."""
    if isinstance(source, Source):
        return source
    return Source.from_name(source)


__all__ = [
    "Code",
    "Source",
    "as_source",
]
