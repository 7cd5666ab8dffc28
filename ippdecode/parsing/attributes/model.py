from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ippdecode.parsing import tags
from ippdecode.parsing.values.model import Collection, Value, to_jsonable


@dataclass(frozen=True)
class Attribute:
    """
    A named attribute with one or more values.

    Attributes:
        name: The attribute (or collection member) name.
        tag: The value tag of the first value record.
        values: The decoded values in wire order.
        value_tags: The tag each value record declared; continuation
            records may differ from ``tag``.
    """
    name: str
    tag: int
    values: tuple[Value, ...]
    value_tags: tuple[int, ...]

    @property
    def value(self) -> Value | None:
        return self.values[0] if self.values else None

    @property
    def is_collection(self) -> bool:
        return self.tag == tags.BEG_COLLECTION

    @property
    def collections(self) -> list[Collection]:
        return [v for v in self.values if isinstance(v, Collection)]

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": tags.tag_name(self.tag),
            "values": [
                {"type": tags.tag_name(tag), "value": to_jsonable(value)}
                for tag, value in zip(self.value_tags, self.values)
            ],
        }
