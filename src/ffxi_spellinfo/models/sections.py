"""Framing constants and the 16-byte block header shared by every section."""

from dataclasses import dataclass


PREAMBLE_SIZE = 32
BLOCK_HEADER_SIZE = 16

FILE_MAGIC = "menu"
FILE_VERSION = 0x101
TERMINATOR_TAG = "end\0"

# size_info keeps the block length in its upper bits, shifted left by 3;
# the low 7 bits are not part of the size.
SIZE_INFO_MASK = 0xFFFFFF80
SIZE_INFO_SHIFT = 3


@dataclass(frozen=True, slots=True)
class SectionHeader:
    """Header preceding each section: tag(4) + size_info(4) + reserved(8)."""
    tag: str          # 4-char tag, e.g. "mon_", "levc", "end\0"
    size_info: int    # packed uint32, see block_size
    reserved: int     # uint64, always 0 in valid files

    @property
    def block_size(self) -> int:
        """Total section length in bytes, including this 16-byte header."""
        return (self.size_info & SIZE_INFO_MASK) >> SIZE_INFO_SHIFT

    @property
    def payload_size(self) -> int:
        """Bytes following the header. Negative when block_size < 16."""
        return self.block_size - BLOCK_HEADER_SIZE


def pack_size_info(block_size: int) -> int:
    """Inverse of SectionHeader.block_size for block sizes that are multiples of 16."""
    return (block_size << SIZE_INFO_SHIFT) & SIZE_INFO_MASK
