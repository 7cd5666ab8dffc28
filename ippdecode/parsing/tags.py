"""
Tag constants for the IPP wire format.

Delimiter (group) tags occupy 0x00-0x0F; everything else is a value tag.
Value tags are plain integers so vendor and future tags pass through the
decoder unchanged; only the ones with special decoding rules are named.
"""
from __future__ import annotations

from enum import IntEnum


class GroupTag(IntEnum):
    """Delimiter tags that open an attribute group."""
    OPERATION_ATTRIBUTES = 0x01
    JOB_ATTRIBUTES = 0x02
    PRINTER_ATTRIBUTES = 0x04
    UNSUPPORTED_ATTRIBUTES = 0x05
    SUBSCRIPTION_ATTRIBUTES = 0x06
    EVENT_NOTIFICATION_ATTRIBUTES = 0x07
    RESOURCE_ATTRIBUTES = 0x08
    DOCUMENT_ATTRIBUTES = 0x09
    SYSTEM_ATTRIBUTES = 0x0A


KNOWN_GROUP_TAGS: frozenset[int] = frozenset(int(tag) for tag in GroupTag)

END_OF_ATTRIBUTES = 0x03
MAX_DELIMITER_TAG = 0x0F

# Out-of-band
UNSUPPORTED = 0x10
UNKNOWN = 0x12
NO_VALUE = 0x13
NOT_SETTABLE = 0x15
DELETE_ATTRIBUTE = 0x16
ADMIN_DEFINE = 0x17

# Integer class
INTEGER = 0x21
BOOLEAN = 0x22
ENUM = 0x23

# Octet-string class
OCTET_STRING = 0x30
DATE_TIME = 0x31
RESOLUTION = 0x32
RANGE_OF_INTEGER = 0x33
BEG_COLLECTION = 0x34
TEXT_WITH_LANGUAGE = 0x35
NAME_WITH_LANGUAGE = 0x36
END_COLLECTION = 0x37

# Character-string class
TEXT_WITHOUT_LANGUAGE = 0x41
NAME_WITHOUT_LANGUAGE = 0x42
KEYWORD = 0x44
URI = 0x45
URI_SCHEME = 0x46
CHARSET = 0x47
NATURAL_LANGUAGE = 0x48
MIME_MEDIA_TYPE = 0x49
MEMBER_ATTR_NAME = 0x4A

OUT_OF_BAND_TAGS: frozenset[int] = frozenset(
    {UNSUPPORTED, UNKNOWN, NO_VALUE, NOT_SETTABLE, DELETE_ATTRIBUTE, ADMIN_DEFINE}
)

# Type names used when rendering attributes.
VALUE_TAG_NAMES: dict[int, str] = {
    UNSUPPORTED: "unsupported",
    UNKNOWN: "unknown",
    NO_VALUE: "no-value",
    NOT_SETTABLE: "not-settable",
    DELETE_ATTRIBUTE: "delete-attribute",
    ADMIN_DEFINE: "admin-define",
    INTEGER: "integer",
    BOOLEAN: "boolean",
    ENUM: "enum",
    OCTET_STRING: "octetString",
    DATE_TIME: "dateTime",
    RESOLUTION: "resolution",
    RANGE_OF_INTEGER: "rangeOfInteger",
    BEG_COLLECTION: "collection",
    TEXT_WITH_LANGUAGE: "textWithLanguage",
    NAME_WITH_LANGUAGE: "nameWithLanguage",
    END_COLLECTION: "endCollection",
    TEXT_WITHOUT_LANGUAGE: "textWithoutLanguage",
    NAME_WITHOUT_LANGUAGE: "nameWithoutLanguage",
    KEYWORD: "keyword",
    URI: "uri",
    URI_SCHEME: "uriScheme",
    CHARSET: "charset",
    NATURAL_LANGUAGE: "naturalLanguage",
    MIME_MEDIA_TYPE: "mimeMediaType",
    MEMBER_ATTR_NAME: "memberAttrName",
}

GROUP_HEADINGS: dict[int, str] = {
    GroupTag.OPERATION_ATTRIBUTES: "Operation Attributes",
    GroupTag.JOB_ATTRIBUTES: "Job Attributes",
    GroupTag.PRINTER_ATTRIBUTES: "Printer Attributes",
    GroupTag.UNSUPPORTED_ATTRIBUTES: "Unsupported Attributes",
    GroupTag.SUBSCRIPTION_ATTRIBUTES: "Subscription Attributes",
    GroupTag.EVENT_NOTIFICATION_ATTRIBUTES: "Event Notification Attributes",
    GroupTag.RESOURCE_ATTRIBUTES: "Resource Attributes",
    GroupTag.DOCUMENT_ATTRIBUTES: "Document Attributes",
    GroupTag.SYSTEM_ATTRIBUTES: "System Attributes",
}


def is_delimiter(tag: int) -> bool:
    return 0x00 <= tag <= MAX_DELIMITER_TAG


def tag_name(tag: int) -> str:
    """Type name for a value tag; unknown tags render as ``0xNN``."""
    return VALUE_TAG_NAMES.get(tag, f"0x{tag:02X}")


def group_heading(tag: int) -> str:
    return GROUP_HEADINGS.get(tag, f"Unknown Group (0x{tag:02X})")
