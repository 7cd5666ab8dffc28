"""
Text rendering of decoded messages and the name tables it consults.
"""
from ippdecode.rendering.names import NameTables, default_name_tables, load_name_tables
from ippdecode.rendering.text import TextRenderer, format_date_time, format_octets, render_message

__all__ = [
    "NameTables",
    "TextRenderer",
    "default_name_tables",
    "format_date_time",
    "format_octets",
    "load_name_tables",
    "render_message",
]
