"""
Top-level IPP message decoding.

The message is an 8-byte header (version, operation-or-status code,
request id) followed by attribute groups, each opened by a delimiter tag,
and closed by the end-of-attributes tag.
"""
from __future__ import annotations

import logging

from ippdecode.core.binary import ByteCursor
from ippdecode.errors import TruncatedHeader, UnexpectedValueTag
from ippdecode.parsing import tags
from ippdecode.parsing.attributes.decode import decode_attribute
from ippdecode.parsing.attributes.model import Attribute
from ippdecode.parsing.message.model import Group, Message

logger = logging.getLogger(__name__)

HEADER_LENGTH = 8


def _decode_group(cursor: ByteCursor) -> Group:
    start = cursor.offset
    tag = cursor.read_u8()
    if tag not in tags.KNOWN_GROUP_TAGS:
        logger.warning("unrecognized_group_tag", extra={"details": {"tag": tag, "offset": start}})

    attributes: list[Attribute] = []
    while not cursor.at_end and not tags.is_delimiter(cursor.peek_u8()):
        attributes.append(decode_attribute(cursor))

    logger.debug("group_decoded", extra={"details": {"tag": tag, "attributes": len(attributes), "offset": start}})
    return Group(tag=tag, attributes=tuple(attributes))


def decode_message(data: bytes | bytearray | memoryview) -> Message:
    """
    Decode a complete IPP message.

    Args:
        data: The raw message bytes. The returned tree does not reference
            this buffer.

    Returns:
        The decoded ``Message``.

    Raises:
        TruncatedHeader: If fewer than 8 bytes are supplied.
        UnexpectedValueTag: If a value tag appears outside any group.
        MalformedMessage: For any other structural error in the body.
    """
    cursor = ByteCursor(data)
    if cursor.remaining < HEADER_LENGTH:
        raise TruncatedHeader(
            f"message has {cursor.remaining} byte(s), header needs {HEADER_LENGTH}", 0
        )
    version_major = cursor.read_u8()
    version_minor = cursor.read_u8()
    code = cursor.read_u16()
    request_id = cursor.read_i32()

    groups: list[Group] = []
    terminated = False
    while not cursor.at_end:
        tag = cursor.peek_u8()
        if tag == tags.END_OF_ATTRIBUTES:
            cursor.read_u8()
            terminated = True
            break
        if not tags.is_delimiter(tag):
            raise UnexpectedValueTag(
                f"unexpected tag 0x{tag:02X} (expected a group delimiter)", cursor.offset
            )
        groups.append(_decode_group(cursor))

    if not terminated:
        logger.warning("missing_end_of_attributes", extra={"details": {"offset": cursor.offset}})

    return Message(
        version_major=version_major,
        version_minor=version_minor,
        code=code,
        request_id=request_id,
        groups=tuple(groups),
    )
