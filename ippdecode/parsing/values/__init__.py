"""
Typed IPP values and the scalar value decoder.
"""
from ippdecode.parsing.values.decode import decode_date_time, decode_integer, decode_scalar_value
from ippdecode.parsing.values.model import (
    Collection,
    IntegerRange,
    InvalidValue,
    LanguageText,
    OutOfBand,
    Resolution,
    Value,
    to_jsonable,
)

__all__ = [
    "Collection",
    "IntegerRange",
    "InvalidValue",
    "LanguageText",
    "OutOfBand",
    "Resolution",
    "Value",
    "decode_date_time",
    "decode_integer",
    "decode_scalar_value",
    "to_jsonable",
]
