"""Forward-only binary cursor with typed little-endian reads."""

import struct


class BinaryReader:
    """Wraps a bytes buffer with typed reads and a moving cursor.

    slice(size) returns a new BinaryReader bounded to the next `size` bytes
    and advances this one past them, so a record decoder always consumes
    exactly its record width no matter how much of it it looks at.
    """

    __slots__ = ("_data", "_pos", "_end")

    def __init__(self, data: bytes, offset: int = 0, end: int | None = None) -> None:
        self._data = data
        self._pos = offset
        self._end = end if end is not None else len(data)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    @property
    def length(self) -> int:
        """Total length of the underlying region (its end offset)."""
        return self._end

    def _read(self, size: int) -> bytes:
        if self._pos + size > self._end:
            raise ValueError(
                f"Read of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {self._end}"
            )
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def uint8(self) -> int:
        return self._read(1)[0]

    def uint16(self) -> int:
        return struct.unpack_from("<H", self._read(2))[0]

    def int16(self) -> int:
        return struct.unpack_from("<h", self._read(2))[0]

    def uint32(self) -> int:
        return struct.unpack_from("<I", self._read(4))[0]

    def int32(self) -> int:
        return struct.unpack_from("<i", self._read(4))[0]

    def uint64(self) -> int:
        return struct.unpack_from("<Q", self._read(8))[0]

    def int64(self) -> int:
        return struct.unpack_from("<q", self._read(8))[0]

    def signature(self) -> str:
        """Read a 4-byte block tag (e.g. 'menu', 'mgc_', 'end\\0').

        Non-ASCII bytes come back as U+FFFD so a garbage tag compares
        unequal instead of raising a decode error.
        """
        return self._read(4).decode("ascii", errors="replace")

    def bytes(self, size: int) -> bytes:
        return self._read(size)

    def skip(self, size: int) -> None:
        if size < 0 or self._pos + size > self._end:
            raise ValueError(
                f"Skip of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {self._end}"
            )
        self._pos += size

    def slice(self, size: int) -> "BinaryReader":
        """Return a new BinaryReader bounded to the next `size` bytes.

        Advances this reader's cursor past the sliced region.
        """
        if self._pos + size > self._end:
            raise ValueError(
                f"Slice of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {self._end}"
            )
        sub = BinaryReader(self._data, self._pos, self._pos + size)
        self._pos += size
        return sub

