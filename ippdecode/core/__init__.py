from ippdecode.core.binary import ByteCursor

__all__ = ["ByteCursor"]
