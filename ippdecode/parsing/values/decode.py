"""
Scalar value decoding.

Each call consumes exactly the declared value length from the cursor, even
when the value itself only uses part of it. Length anomalies in fixed-size
values are reported as placeholders instead of failing the decode.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from ippdecode.core.binary import ByteCursor
from ippdecode.parsing import tags
from ippdecode.parsing.values.model import (
    IntegerRange,
    InvalidValue,
    LanguageText,
    OutOfBand,
    Resolution,
    Value,
)

logger = logging.getLogger(__name__)

DATE_TIME_LENGTH = 11
RESOLUTION_LENGTH = 9
RANGE_LENGTH = 8

_OUT_OF_BAND: dict[int, OutOfBand] = {
    tags.UNSUPPORTED: OutOfBand.UNSUPPORTED,
    tags.UNKNOWN: OutOfBand.UNKNOWN,
    tags.NO_VALUE: OutOfBand.NO_VALUE,
    tags.NOT_SETTABLE: OutOfBand.NOT_SETTABLE,
    tags.DELETE_ATTRIBUTE: OutOfBand.DELETE_ATTRIBUTE,
    tags.ADMIN_DEFINE: OutOfBand.ADMIN_DEFINE,
}


def decode_integer(raw: bytes) -> int:
    """
    Decode an integer/enum field.

    A well-formed field is 4 bytes of signed big-endian. Shorter fields are
    read as unsigned from the bytes present; longer ones use the first 4.
    """
    used = raw[:4]
    return int.from_bytes(used, "big", signed=len(used) == 4)


def decode_date_time(raw: bytes, offset: int = 0) -> datetime | str:
    """
    Decode an RFC 2579 DateAndTime field (11 bytes).

    Returns a timezone-aware ``datetime``. Fields that do not form a valid
    calendar date fall back to a text rendering of the raw fields.
    """
    year = int.from_bytes(raw[0:2], "big")
    month, day, hour, minute, second, deci = raw[2:8]
    sign, tz_hours, tz_minutes = raw[8:11]
    offset_minutes = tz_hours * 60 + tz_minutes
    if sign == ord("-"):
        offset_minutes = -offset_minutes
    try:
        tz = timezone(timedelta(minutes=offset_minutes))
        micro = deci * 100_000 if deci < 10 else 0
        return datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)
    except ValueError as exc:
        sign_text = chr(sign) if sign in (ord("+"), ord("-")) else str(sign)
        fallback = (
            f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}.{deci}"
            f" TZ={sign_text}{tz_hours:02d}:{tz_minutes:02d}"
        )
        logger.warning("datetime_fallback", extra={"details": {"offset": offset, "error": str(exc)}})
        return fallback


def _decode_language_text(cursor: ByteCursor, length: int) -> LanguageText | str:
    if length < 4:
        cursor.skip(length)
        return ""
    body = cursor.sub_cursor(length)
    language = body.read_lstring()
    text = body.read_lstring()
    return LanguageText(language=language, text=text)


def decode_scalar_value(cursor: ByteCursor, tag: int, length: int) -> Value:
    """
    Decode one non-collection value of ``length`` bytes tagged ``tag``.

    Args:
        cursor: Cursor positioned at the first value byte.
        tag: The value tag declared by the record.
        length: The declared value length.

    Returns:
        The typed value. Unrecognized tags decode as UTF-8 text.
    """
    start = cursor.offset

    if tag in (tags.TEXT_WITH_LANGUAGE, tags.NAME_WITH_LANGUAGE):
        return _decode_language_text(cursor, length)

    raw = cursor.read_bytes(length)

    if tag in (tags.INTEGER, tags.ENUM):
        return decode_integer(raw)

    if tag == tags.BOOLEAN:
        return bool(raw[0]) if raw else False

    if tag == tags.DATE_TIME:
        if length == DATE_TIME_LENGTH:
            return decode_date_time(raw, start)
        return raw

    if tag == tags.RESOLUTION:
        if length < RESOLUTION_LENGTH:
            logger.warning("invalid_resolution_length", extra={"details": {"offset": start, "length": length}})
            return InvalidValue("resolution", length)
        return Resolution(
            cross_feed=int.from_bytes(raw[0:4], "big", signed=True),
            feed=int.from_bytes(raw[4:8], "big", signed=True),
            units=raw[8],
        )

    if tag == tags.RANGE_OF_INTEGER:
        if length < RANGE_LENGTH:
            logger.warning("invalid_range_length", extra={"details": {"offset": start, "length": length}})
            return InvalidValue("rangeOfInteger", length)
        return IntegerRange(
            lower=int.from_bytes(raw[0:4], "big", signed=True),
            upper=int.from_bytes(raw[4:8], "big", signed=True),
        )

    if tag in _OUT_OF_BAND:
        return _OUT_OF_BAND[tag]

    if tag == tags.OCTET_STRING:
        return raw

    return raw.decode("utf-8", errors="replace")
