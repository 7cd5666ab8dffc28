from ippdecode.config import DecoderSettings, get_settings
from ippdecode.errors import (
    MalformedMessage,
    MissingAttributeName,
    TruncatedField,
    TruncatedHeader,
    UnexpectedCollectionTag,
    UnexpectedValueTag,
)
from ippdecode.parsing.attributes import Attribute
from ippdecode.parsing.message import Group, Message, decode_message
from ippdecode.rendering import NameTables, TextRenderer, load_name_tables, render_message
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Attribute",
    "DecoderSettings",
    "Group",
    "Message",
    "NameTables",
    "TextRenderer",
    "decode_message",
    "get_settings",
    "load_name_tables",
    "render_message",
    "MalformedMessage",
    "MissingAttributeName",
    "TruncatedField",
    "TruncatedHeader",
    "UnexpectedCollectionTag",
    "UnexpectedValueTag",
]

try:
    __version__ = version("ippdecode")
except PackageNotFoundError:
    __version__ = "0.0.0"
