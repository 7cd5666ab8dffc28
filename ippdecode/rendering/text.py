"""
Human-readable text rendering of a decoded message.

The renderer only walks the typed tree; it never touches raw message bytes
and it is total over every value type the decoder can produce.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from ippdecode.config import DecoderSettings
from ippdecode.parsing import tags
from ippdecode.parsing.attributes.model import Attribute
from ippdecode.parsing.message.model import Message
from ippdecode.parsing.values.model import (
    Collection,
    IntegerRange,
    LanguageText,
    OutOfBand,
    Resolution,
    Value,
)
from ippdecode.rendering.names import NameTables, load_name_tables


def format_octets(raw: bytes, preview: int = 16) -> str:
    shown = raw[:preview].hex().upper()
    if len(raw) > preview:
        shown += "..."
    return f"<octetString: 0x{shown} ({len(raw)} bytes)>"


def format_date_time(value: datetime) -> str:
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond // 100_000}"
    offset = value.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


class TextRenderer:
    def __init__(self, names: NameTables | None = None, preview_bytes: int = 16, indent: int = 4) -> None:
        self.names = names if names is not None else NameTables()
        self.preview_bytes = preview_bytes
        self.indent = indent

    @classmethod
    def from_settings(cls, settings: DecoderSettings, names: NameTables | None = None) -> "TextRenderer":
        if names is None:
            names = load_name_tables(settings.names_file)
        return cls(names=names, preview_bytes=settings.octet_preview_bytes, indent=settings.indent_width)

    # --- values ---
    def format_value(self, value: Value, attribute_name: str = "") -> str:
        if isinstance(value, OutOfBand):
            return value.value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            label = self.names.enum_label(attribute_name, value)
            return f"{value} ({label})" if label else str(value)
        if isinstance(value, str):
            return value
        if isinstance(value, bytes):
            return format_octets(value, self.preview_bytes)
        if isinstance(value, datetime):
            return format_date_time(value)
        if isinstance(value, Resolution):
            return f"{value.cross_feed}x{value.feed} {'dpi' if value.is_dpi else 'dpcm'}"
        if isinstance(value, IntegerRange):
            return f"{value.lower} to {value.upper}"
        if isinstance(value, LanguageText):
            return f'"{value.text}" (language: {value.language})'
        if isinstance(value, Collection):
            return f"<collection: {len(value.attributes)} member(s)>"
        return str(value)

    # --- attributes ---
    def _render_collection(self, collection: Collection, level: int, lines: list[str]) -> None:
        brace_pad = " " * (level + self.indent - 2)
        lines.append(f"{brace_pad}{{")
        for member in collection.attributes:
            self._render_attribute(member, level + self.indent, lines)
        lines.append(f"{brace_pad}}},")

    def _labelled(self, attribute: Attribute, value: Value, tag: int) -> str:
        text = self.format_value(value, attribute.name)
        if tag != attribute.tag:
            text += f" ({tags.tag_name(tag)})"
        return text

    def _render_attribute(self, attribute: Attribute, level: int, lines: list[str]) -> None:
        pad = " " * level
        header = f"{pad}{attribute.name} ({tags.tag_name(attribute.tag)}):"

        if not attribute.values:
            lines.append(f"{header} (no value)")
            return

        if len(attribute.values) == 1 and not isinstance(attribute.value, Collection):
            lines.append(f"{header} {self._labelled(attribute, attribute.value, attribute.value_tags[0])}")
            return

        lines.append(header)
        for value, tag in zip(attribute.values, attribute.value_tags):
            if isinstance(value, Collection):
                self._render_collection(value, level, lines)
            else:
                lines.append(f"{pad}  - {self._labelled(attribute, value, tag)}")

    # --- message ---
    def _code_line(self, message: Message) -> str:
        if message.is_response:
            name = self.names.status_name(message.code) or "unknown status"
            return f"Status Code: 0x{message.code:04X} ({name})"
        name = self.names.operation_name(message.code) or "unknown operation"
        return f"Operation: 0x{message.code:04X} ({name})"

    def render(self, message: Message) -> list[str]:
        lines = [
            f"IPP Version: {message.version}",
            self._code_line(message),
            f"Request ID: {message.request_id}",
            "",
        ]
        for group in message.groups:
            lines.append(f"{tags.group_heading(group.tag)}:")
            for attribute in group.attributes:
                self._render_attribute(attribute, self.indent, lines)
            lines.append("")
        return lines


def render_message(
    message: Message,
    names: NameTables | None = None,
    settings: Optional[DecoderSettings] = None,
) -> str:
    """
    Render ``message`` as multi-line text.

    Args:
        message: A decoded message.
        names: Name tables; defaults to the packaged tables (plus the
            settings' ``names_file`` when settings are given).
        settings: Display settings; defaults are used when omitted.
    """
    if settings is not None:
        renderer = TextRenderer.from_settings(settings, names)
    else:
        renderer = TextRenderer(names=names if names is not None else load_name_tables())
    return "\n".join(renderer.render(message))
