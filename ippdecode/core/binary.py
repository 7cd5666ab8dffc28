from __future__ import annotations

from ippdecode.errors import TruncatedField


class ByteCursor:
    """
    Sequential big-endian reader over an immutable byte buffer.

    Offsets reported by the cursor (and by the errors it raises) are
    absolute positions in the original message, including for cursors
    created with ``sub_cursor``.
    """

    def __init__(self, data: bytes | bytearray | memoryview, base: int = 0) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._base = base

    @property
    def offset(self) -> int:
        return self._base + self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def _require(self, count: int, ahead: int = 0) -> None:
        if self._pos + ahead + count > len(self._data):
            raise TruncatedField(
                f"need {count} byte(s) but only {max(self.remaining - ahead, 0)} remain",
                self.offset + ahead,
            )

    def peek_u8(self) -> int:
        self._require(1)
        return self._data[self._pos]

    def peek_u16(self, ahead: int = 0) -> int:
        self._require(2, ahead)
        start = self._pos + ahead
        return int.from_bytes(self._data[start:start + 2], "big")

    def read_u8(self) -> int:
        value = self.peek_u8()
        self._pos += 1
        return value

    def read_u16(self) -> int:
        value = self.peek_u16()
        self._pos += 2
        return value

    def read_i32(self) -> int:
        return int.from_bytes(self.read_bytes(4), "big", signed=True)

    def read_bytes(self, count: int) -> bytes:
        self._require(count)
        chunk = self._data[self._pos:self._pos + count]
        self._pos += count
        return chunk

    def read_string(self, count: int) -> str:
        return self.read_bytes(count).decode("utf-8", errors="replace")

    def read_lstring(self) -> str:
        return self.read_string(self.read_u16())

    def skip(self, count: int) -> None:
        self._require(count)
        self._pos += count

    def sub_cursor(self, count: int) -> "ByteCursor":
        start = self.offset
        return ByteCursor(self.read_bytes(count), base=start)
