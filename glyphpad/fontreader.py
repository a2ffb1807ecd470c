"""Big-endian reader over the bytes of a font file."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class FontReader:
    """Sequential big-endian reads with random access by offset."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FontReader":
        return cls(Path(path).read_bytes())

    @property
    def location(self) -> int:
        """The current read position."""
        return self._pos

    def go_to(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"negative offset {offset}")
        self._pos = offset

    def skip(self, count: int) -> None:
        self.go_to(self._pos + count)

    def _read(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise EOFError("Unexpected end of file")
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def _read_int(self, size: int, signed: bool) -> int:
        return int.from_bytes(self._read(size), "big", signed=signed)

    def read_byte(self) -> int:
        return self._read_int(1, False)

    def read_int16(self) -> int:
        return self._read_int(2, True)

    def read_uint16(self) -> int:
        return self._read_int(2, False)

    def read_int32(self) -> int:
        return self._read_int(4, True)

    def read_uint32(self) -> int:
        return self._read_int(4, False)

    def read_string(self, count: int) -> str:
        return self._read(count).decode("latin-1")