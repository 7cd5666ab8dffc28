"""
Attribute decoding, including multi-valued attributes and collections.
"""
from ippdecode.parsing.attributes.decode import decode_attribute, decode_collection, decode_value
from ippdecode.parsing.attributes.model import Attribute

__all__ = ["Attribute", "decode_attribute", "decode_collection", "decode_value"]
