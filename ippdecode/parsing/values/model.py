"""
Typed values produced by the value decoder.

Integers, booleans, text, octets and timestamps use the builtin Python types
(``int``, ``bool``, ``str``, ``bytes``, ``datetime``). The composite IPP
types get small frozen dataclasses so a decoded tree stays immutable.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ippdecode.parsing.attributes.model import Attribute

DOTS_PER_INCH = 3
DOTS_PER_CM = 4


class OutOfBand(str, Enum):
    """Sentinels for out-of-band value tags."""
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"
    NO_VALUE = "no-value"
    NOT_SETTABLE = "not-settable"
    DELETE_ATTRIBUTE = "delete-attribute"
    ADMIN_DEFINE = "admin-define"


@dataclass(frozen=True)
class Resolution:
    cross_feed: int
    feed: int
    units: int

    @property
    def is_dpi(self) -> bool:
        return self.units == DOTS_PER_INCH


@dataclass(frozen=True)
class IntegerRange:
    lower: int
    upper: int


@dataclass(frozen=True)
class LanguageText:
    language: str
    text: str


@dataclass(frozen=True)
class Collection:
    """One collection value: the member attributes in wire order."""
    attributes: tuple["Attribute", ...] = ()

    def get(self, name: str) -> "Attribute | None":
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None


@dataclass(frozen=True)
class InvalidValue:
    """Placeholder for a fixed-size value whose declared length was too short."""
    kind: str
    length: int

    def __str__(self) -> str:
        return f"(invalid {self.kind} data, length={self.length})"


Value = Union[
    int, bool, str, bytes, datetime, Resolution, IntegerRange, LanguageText,
    Collection, OutOfBand, InvalidValue,
]


def to_jsonable(value: Value) -> Any:
    """Convert a decoded value into JSON-compatible data."""
    if isinstance(value, OutOfBand):
        return value.value
    if isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Resolution):
        return {
            "cross_feed": value.cross_feed,
            "feed": value.feed,
            "units": "dpi" if value.is_dpi else "dpcm",
        }
    if isinstance(value, IntegerRange):
        return {"lower": value.lower, "upper": value.upper}
    if isinstance(value, LanguageText):
        return {"language": value.language, "text": value.text}
    if isinstance(value, Collection):
        return [attribute.as_dict() for attribute in value.attributes]
    return str(value)
