"""
Name tables used to annotate a rendered message.

The packaged ``names.json`` resource maps operation ids and status codes to
their mnemonics, and a few enum attributes (``printer-state``,
``job-state``) to state labels. A user JSON file with the same shape can
extend or override any of them.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Optional


def _int_keys(mapping: dict | None) -> dict[int, str]:
    return {int(str(key), 0): str(value) for key, value in (mapping or {}).items()}


@dataclass(frozen=True)
class NameTables:
    operations: Dict[int, str] = field(default_factory=dict)
    statuses: Dict[int, str] = field(default_factory=dict)
    enums: Dict[str, Dict[int, str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict | None) -> "NameTables":
        """
        Build tables from JSON-shaped data.

        Keys may be decimal or ``0x``-prefixed hex strings.
        """
        if not data:
            return cls()
        return cls(
            operations=_int_keys(data.get("operations")),
            statuses=_int_keys(data.get("statuses")),
            enums={name: _int_keys(mapping) for name, mapping in (data.get("enums") or {}).items()},
        )

    def merged(self, other: "NameTables") -> "NameTables":
        """Return new tables with ``other``'s entries taking precedence."""
        enums = {name: dict(mapping) for name, mapping in self.enums.items()}
        for name, mapping in other.enums.items():
            enums.setdefault(name, {}).update(mapping)
        return NameTables(
            operations={**self.operations, **other.operations},
            statuses={**self.statuses, **other.statuses},
            enums=enums,
        )

    def operation_name(self, code: int) -> Optional[str]:
        return self.operations.get(code)

    def status_name(self, code: int) -> Optional[str]:
        return self.statuses.get(code)

    def enum_label(self, attribute_name: str, value: int) -> Optional[str]:
        return self.enums.get(attribute_name, {}).get(value)


@lru_cache
def default_name_tables() -> NameTables:
    resource = resources.files("ippdecode.resources").joinpath("names.json")
    with resource.open("r", encoding="utf-8") as f:
        return NameTables.from_dict(json.load(f))


def load_name_tables(path: str | Path | None = None) -> NameTables:
    """
    Load the packaged tables, merged with an optional user JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not a JSON object.
    """
    tables = default_name_tables()
    if path is None:
        return tables
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Name table file '{path}' must contain a JSON object")
    return tables.merged(NameTables.from_dict(data))
