"""Preamble, section, and terminator readers.

File layout:
  preamble (32 bytes): "menu" + int32 0x101 + 3 x int64 0
  sections: tag(4) + size_info(4) + reserved(8) + payload(block_size - 16)
  terminator: "end\\0" header with block_size == 16 and no payload

Every reader raises StructuralMismatch (or ValueError from BinaryReader on
overrun) and leaves error recovery to the caller.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from ffxi_spellinfo.models.entities import Entity
from ffxi_spellinfo.models.sections import (
    BLOCK_HEADER_SIZE,
    FILE_MAGIC,
    FILE_VERSION,
    PREAMBLE_SIZE,
    TERMINATOR_TAG,
    SectionHeader,
)
from ffxi_spellinfo.parser.binary_reader import BinaryReader
from ffxi_spellinfo.parser.errors import StructuralMismatch


logger = logging.getLogger(__name__)

RecordDecoder = Callable[[BinaryReader], Entity]


@dataclass(frozen=True, slots=True)
class SectionLayout:
    """Expected tag, record width, and how to handle the payload.

    A layout without a decoder is a skip section: its payload is stepped
    over without interpretation, but must still be a whole number of
    record_size-byte records.
    """
    tag: str
    record_size: int
    decoder: RecordDecoder | None = None


def read_preamble(reader: BinaryReader) -> None:
    """Validate the 32-byte file preamble."""
    start = reader.position
    preamble = reader.slice(PREAMBLE_SIZE)
    magic = preamble.signature()
    if magic != FILE_MAGIC:
        raise StructuralMismatch("Bad file magic", offset=start, expected=FILE_MAGIC, actual=magic)

    version = preamble.int32()
    if version != FILE_VERSION:
        raise StructuralMismatch(
            "Bad file version", offset=start + 4, expected=FILE_VERSION, actual=version
        )

    for _ in range(3):
        pad_offset = preamble.position
        if preamble.int64() != 0:
            raise StructuralMismatch("Non-zero preamble padding", offset=pad_offset)


def read_section_header(reader: BinaryReader, expected_tag: str) -> SectionHeader:
    """Read and validate a 16-byte block header against *expected_tag*."""
    start = reader.position
    header = SectionHeader(
        tag=reader.signature(),
        size_info=reader.uint32(),
        reserved=reader.uint64(),
    )
    if header.tag != expected_tag:
        raise StructuralMismatch(
            "Unexpected section tag", offset=start, expected=expected_tag, actual=header.tag
        )
    if header.reserved != 0:
        raise StructuralMismatch(
            f"Non-zero reserved field in {expected_tag!r} header", offset=start + 8
        )
    if header.block_size < BLOCK_HEADER_SIZE:
        raise StructuralMismatch(
            f"Block size of {expected_tag!r} is smaller than its header",
            offset=start + 4,
            expected=f">= {BLOCK_HEADER_SIZE}",
            actual=header.block_size,
        )
    return header


def entry_count(header: SectionHeader, record_size: int) -> int:
    """Number of fixed-width records in a section, or StructuralMismatch."""
    count, leftover = divmod(header.payload_size, record_size)
    if leftover:
        raise StructuralMismatch(
            f"Payload of {header.tag!r} is not a whole number of {record_size}-byte records",
            expected=0,
            actual=leftover,
        )
    return count


def iter_section(reader: BinaryReader, layout: SectionLayout) -> Iterator[Entity]:
    """Read one section and yield its decoded records in file order.

    Skip sections yield nothing. The generator raises at the first record
    that fails, so callers see every record up to that point.
    """
    header = read_section_header(reader, layout.tag)
    count = entry_count(header, layout.record_size)

    if layout.decoder is None:
        logger.debug(
            "Skipping section %r: block size %d", layout.tag, header.block_size
        )
        reader.skip(header.payload_size)
        return

    logger.debug(
        "Section %r: block size %d, %d record(s) of %d bytes",
        layout.tag, header.block_size, count, layout.record_size,
    )
    for _ in range(count):
        yield layout.decoder(reader)


def read_terminator(reader: BinaryReader) -> SectionHeader:
    """Validate the closing "end\\0" block, which must carry no payload."""
    start = reader.position
    header = read_section_header(reader, TERMINATOR_TAG)
    if header.block_size != BLOCK_HEADER_SIZE:
        raise StructuralMismatch(
            "Terminator block carries a payload",
            offset=start + 4,
            expected=BLOCK_HEADER_SIZE,
            actual=header.block_size,
        )
    return header


def read_section(reader: BinaryReader, layout: SectionLayout) -> list[Entity]:
    """Read one section and return all of its decoded records."""
    return list(iter_section(reader, layout))
