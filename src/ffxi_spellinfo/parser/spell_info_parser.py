"""Decode a spell/ability info DAT ("menu" container) into entities.

The walk is a single forward pass with one chance per step:

  INIT -> HEADER_OK -> MON_OK -> LEVC_OK -> MGC_OK -> COMM_OK -> TERMINATOR_OK -> DONE

Any failure moves to FAILED and throws away every entity decoded so far.
Callers of decode() only ever see the full list or an empty one;
decode_detailed() also reports where and why the walk stopped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ffxi_spellinfo.models.entities import Entity
from ffxi_spellinfo.parser.binary_reader import BinaryReader
from ffxi_spellinfo.parser.errors import StructuralMismatch
from ffxi_spellinfo.parser.record_decoders import (
    decode_ability_definition,
    decode_monster_spell_link,
    decode_spell_definition,
)
from ffxi_spellinfo.parser.section_reader import (
    SectionLayout,
    iter_section,
    read_preamble,
    read_terminator,
)


logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str | None, float], None]

LABEL_CHECKING_FILE = "Checking file..."
LABEL_LOADING_DATA = "Loading data..."


class DecodeState(Enum):
    INIT = "init"
    HEADER_OK = "header_ok"
    MON_OK = "mon_ok"
    LEVC_OK = "levc_ok"
    MGC_OK = "mgc_ok"
    COMM_OK = "comm_ok"
    TERMINATOR_OK = "terminator_ok"
    DONE = "done"
    FAILED = "failed"


# Sections in file order, each paired with the state reached once it is read.
SECTION_LAYOUTS: tuple[tuple[SectionLayout, DecodeState], ...] = (
    (SectionLayout("mon_", 0x80, decode_monster_spell_link), DecodeState.MON_OK),
    (SectionLayout("levc", 0x80), DecodeState.LEVC_OK),
    (SectionLayout("mgc_", 0x80, decode_spell_definition), DecodeState.MGC_OK),
    (SectionLayout("comm", 0x30, decode_ability_definition), DecodeState.COMM_OK),
)


@dataclass(slots=True)
class DecodeResult:
    """Outcome of one decode.

    entities is empty unless state is DONE. last_completed is the furthest
    state reached before a failure (DONE on success).
    """
    entities: list[Entity] = field(default_factory=list)
    state: DecodeState = DecodeState.INIT
    last_completed: DecodeState = DecodeState.INIT
    error: StructuralMismatch | None = None

    @property
    def ok(self) -> bool:
        return self.state is DecodeState.DONE


def _no_progress(label: str | None, fraction: float) -> None:
    pass


def _fraction(reader: BinaryReader) -> float:
    if reader.length <= 0:
        return 0.0
    return reader.position / reader.length


def _as_mismatch(exc: ValueError, reader: BinaryReader) -> StructuralMismatch:
    if isinstance(exc, StructuralMismatch):
        if exc.offset is None:
            exc.offset = reader.position
        return exc
    return StructuralMismatch(str(exc), offset=reader.position)


def _walk(
    reader: BinaryReader,
    entities: list[Entity],
    result: DecodeResult,
) -> Iterator[tuple[str | None, float]]:
    """Run every step in order, yielding a progress point after each one.

    Raises ValueError at the first structural problem.
    """
    if reader.position != 0:
        raise StructuralMismatch(
            "Reader is not positioned at the start of the file",
            offset=reader.position,
            expected=0,
            actual=reader.position,
        )

    read_preamble(reader)
    result.last_completed = DecodeState.HEADER_OK
    yield LABEL_LOADING_DATA, _fraction(reader)

    for layout, reached in SECTION_LAYOUTS:
        for entity in iter_section(reader, layout):
            entities.append(entity)
            yield None, _fraction(reader)
        result.last_completed = reached
        yield None, _fraction(reader)

    read_terminator(reader)
    result.last_completed = DecodeState.TERMINATOR_OK
    yield None, _fraction(reader)


def decode_detailed(
    reader: BinaryReader,
    on_progress: ProgressCallback | None = None,
) -> DecodeResult:
    """Walk the container once and return the outcome with failure details.

    on_progress runs outside the failure handling: whatever it raises
    reaches the caller untouched and never counts as a bad file.
    """
    report = on_progress or _no_progress
    result = DecodeResult()
    entities: list[Entity] = []

    report(LABEL_CHECKING_FILE, 0.0)
    steps = _walk(reader, entities, result)
    while True:
        try:
            label, fraction = next(steps)
        except StopIteration:
            break
        except ValueError as exc:
            error = _as_mismatch(exc, reader)
            logger.warning(
                "Decode failed after %s: %s (%d entities discarded)",
                result.last_completed.value, error, len(entities),
            )
            result.state = DecodeState.FAILED
            result.error = error
            return result
        report(label, fraction)

    result.entities = entities
    result.state = DecodeState.DONE
    result.last_completed = DecodeState.DONE
    logger.debug("Decoded %d entities", len(entities))
    return result



def decode(
    reader: BinaryReader,
    on_progress: ProgressCallback | None = None,
) -> list[Entity]:
    """Decode every entity in file order, or return [] on any structural problem."""
    return decode_detailed(reader, on_progress).entities


def decode_bytes(data: bytes, on_progress: ProgressCallback | None = None) -> list[Entity]:
    return decode(BinaryReader(data), on_progress)


def decode_file(path: Path, on_progress: ProgressCallback | None = None) -> DecodeResult:
    """Read *path* fully and decode it. OSError from reading propagates."""
    return decode_detailed(BinaryReader(path.read_bytes()), on_progress)
