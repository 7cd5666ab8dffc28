"""
Errors raised while decoding an IPP message.

Every structural failure carries the absolute byte offset at which it was
detected. Value-level anomalies (bad resolution length, impossible dates)
are recovered locally by the value decoder and never surface here.
"""
from __future__ import annotations


class MalformedMessage(ValueError):
    """Base class for all fatal decode failures."""

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(f"{reason} (offset {offset})")
        self.reason = reason
        self.offset = offset


class TruncatedHeader(MalformedMessage):
    pass


class TruncatedField(MalformedMessage):
    pass


class UnexpectedValueTag(MalformedMessage):
    pass


class MissingAttributeName(MalformedMessage):
    pass


class UnexpectedCollectionTag(MalformedMessage):
    pass


__all__ = [
    "MalformedMessage",
    "TruncatedHeader",
    "TruncatedField",
    "UnexpectedValueTag",
    "MissingAttributeName",
    "UnexpectedCollectionTag",
]
