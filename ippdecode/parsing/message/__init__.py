from ippdecode.parsing.message.decode import decode_message
from ippdecode.parsing.message.model import Group, Message

__all__ = ["Group", "Message", "decode_message"]
