from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ippdecode.parsing import tags
from ippdecode.parsing.attributes.model import Attribute
from ippdecode.parsing.tags import GroupTag


@dataclass(frozen=True)
class Group:
    """
    An attribute group opened by a delimiter tag.

    ``tag`` keeps the raw delimiter byte so unrecognized vendor or future
    groups are still reported as such; ``kind`` maps them to the general
    operation-attributes kind.
    """
    tag: int
    attributes: tuple[Attribute, ...] = ()

    @property
    def is_recognized(self) -> bool:
        return self.tag in tags.KNOWN_GROUP_TAGS

    @property
    def kind(self) -> GroupTag:
        return GroupTag(self.tag) if self.is_recognized else GroupTag.OPERATION_ATTRIBUTES

    def get(self, name: str) -> Optional[Attribute]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def as_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "heading": tags.group_heading(self.tag),
            "attributes": [attribute.as_dict() for attribute in self.attributes],
        }


@dataclass(frozen=True)
class Message:
    """
    A decoded IPP request or response.

    Attributes:
        version_major: Protocol major version.
        version_minor: Protocol minor version.
        code: Operation id (requests) or status code (responses).
        request_id: The request identifier.
        groups: Attribute groups in wire order.
    """
    version_major: int
    version_minor: int
    code: int
    request_id: int
    groups: tuple[Group, ...] = field(default_factory=tuple)

    @property
    def version(self) -> str:
        return f"{self.version_major}.{self.version_minor}"

    @property
    def is_response(self) -> bool:
        # Operation ids live in 0x0002-0x00FF; status codes are 0x0000,
        # 0x0001 or carry a class in the high byte.
        return (self.code & 0xFF00) != 0 or self.code < 0x0002

    def groups_of(self, kind: GroupTag) -> list[Group]:
        return [group for group in self.groups if group.kind == kind]

    def get(self, name: str) -> Optional[Attribute]:
        for group in self.groups:
            attribute = group.get(name)
            if attribute is not None:
                return attribute
        return None

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "code": self.code,
            "is_response": self.is_response,
            "request_id": self.request_id,
            "groups": [group.as_dict() for group in self.groups],
        }
