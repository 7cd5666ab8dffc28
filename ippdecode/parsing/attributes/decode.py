"""
Attribute decoding: names, continuation values and collections.

An attribute record is ``tag(1) name-length(2) name value-length(2) value``.
Further values of the same attribute repeat the record with an empty name.
Collections nest member attributes between begCollection and endCollection
records, each member introduced by a memberAttrName record.
"""
from __future__ import annotations

import logging
from typing import Callable

from ippdecode.core.binary import ByteCursor
from ippdecode.errors import MissingAttributeName, TruncatedField, UnexpectedCollectionTag
from ippdecode.parsing import tags
from ippdecode.parsing.attributes.model import Attribute
from ippdecode.parsing.values.decode import decode_scalar_value
from ippdecode.parsing.values.model import Collection, Value

logger = logging.getLogger(__name__)


def decode_value(cursor: ByteCursor, tag: int, length: int) -> Value:
    if tag == tags.BEG_COLLECTION:
        return decode_collection(cursor, length)
    return decode_scalar_value(cursor, tag, length)


def _at_top_level_boundary(tag: int) -> bool:
    return tags.is_delimiter(tag)


def _at_member_boundary(tag: int) -> bool:
    return tag in (tags.MEMBER_ATTR_NAME, tags.END_COLLECTION)


def _decode_additional_values(
    cursor: ByteCursor,
    values: list[Value],
    value_tags: list[int],
    at_boundary: Callable[[int], bool],
) -> None:
    # Peek tag + name length; only commit when the name is empty.
    while not cursor.at_end:
        next_tag = cursor.peek_u8()
        if at_boundary(next_tag):
            return
        if cursor.peek_u16(ahead=1) != 0:
            return
        cursor.read_u8()
        cursor.read_u16()
        length = cursor.read_u16()
        values.append(decode_value(cursor, next_tag, length))
        value_tags.append(next_tag)


def decode_attribute(cursor: ByteCursor) -> Attribute:
    """
    Decode one attribute and all of its continuation values.

    Args:
        cursor: Cursor positioned at the attribute's value tag.

    Returns:
        The decoded ``Attribute``; the cursor is left at the next
        attribute or delimiter.

    Raises:
        MissingAttributeName: If the record has an empty name.
        TruncatedField: If a record runs past the end of the buffer.
    """
    start = cursor.offset
    tag = cursor.read_u8()
    name = cursor.read_lstring()
    if not name:
        raise MissingAttributeName("attribute name length 0 where a new attribute was expected", start)
    length = cursor.read_u16()

    values = [decode_value(cursor, tag, length)]
    value_tags = [tag]
    _decode_additional_values(cursor, values, value_tags, _at_top_level_boundary)

    logger.debug(
        "attribute_decoded",
        extra={"details": {"name": name, "tag": tag, "count": len(values), "offset": start}},
    )
    return Attribute(name=name, tag=tag, values=tuple(values), value_tags=tuple(value_tags))


def _decode_member(cursor: ByteCursor) -> Attribute:
    cursor.read_u8()
    cursor.skip(cursor.read_u16())
    member_name = cursor.read_lstring()

    record_start = cursor.offset
    tag = cursor.read_u8()
    if cursor.read_u16() != 0:
        raise UnexpectedCollectionTag(f"member '{member_name}' value record has a name", record_start)
    length = cursor.read_u16()

    values = [decode_value(cursor, tag, length)]
    value_tags = [tag]
    _decode_additional_values(cursor, values, value_tags, _at_member_boundary)
    return Attribute(name=member_name, tag=tag, values=tuple(values), value_tags=tuple(value_tags))


def decode_collection(cursor: ByteCursor, length: int) -> Collection:
    """
    Decode the members of a collection value up to its endCollection record.

    Args:
        cursor: Cursor positioned just after the begCollection value length.
        length: The begCollection value length (normally 0), skipped.

    Raises:
        UnexpectedCollectionTag: On a record that is neither a member nor
            the end of the collection.
        TruncatedField: If the buffer ends before endCollection.
    """
    start = cursor.offset
    cursor.skip(length)
    members: list[Attribute] = []
    while True:
        if cursor.at_end:
            raise TruncatedField("collection not terminated by endCollection", start)
        tag = cursor.peek_u8()
        if tag == tags.END_COLLECTION:
            cursor.read_u8()
            cursor.read_u16()
            cursor.read_u16()
            break
        if tag != tags.MEMBER_ATTR_NAME:
            raise UnexpectedCollectionTag(f"unexpected tag 0x{tag:02X} inside collection", cursor.offset)
        members.append(_decode_member(cursor))
    return Collection(attributes=tuple(members))
