"""Fixed-width record decoders for the three decoded sections.

Every decoder slices its full record width off the cursor before looking
at any field, so the cursor always lands on the next record boundary.
Validity is judged by the end-of-record marker in the record's last byte.

Records are read as stored, with no block masking undone first. That has
not been checked against a retail DAT; if retail records turn out to be
masked, the marker check will reject them.
"""

from ffxi_spellinfo.models.constants import JOB_COUNT
from ffxi_spellinfo.models.entities import (
    AbilityDefinition,
    MonsterSpellLink,
    SpellDefinition,
)
from ffxi_spellinfo.parser.binary_reader import BinaryReader
from ffxi_spellinfo.parser.errors import StructuralMismatch


END_OF_RECORD = 0xFF


def _take_record(reader: BinaryReader, size: int, kind: str) -> tuple[BinaryReader, bytes]:
    """Slice one record and check its end marker. Returns (field reader, raw bytes)."""
    start = reader.position
    record = reader.slice(size)
    raw = record.bytes(size)
    if raw[-1] != END_OF_RECORD:
        raise StructuralMismatch(
            f"Bad end-of-record marker in {kind} record",
            offset=start + size - 1,
            expected=END_OF_RECORD,
            actual=raw[-1],
        )
    return BinaryReader(raw), raw


def decode_monster_spell_link(reader: BinaryReader) -> MonsterSpellLink:
    fields, raw = _take_record(reader, MonsterSpellLink.record_size, MonsterSpellLink.kind)
    return MonsterSpellLink(
        index=fields.uint16(),
        monster_family=fields.uint16(),
        spell_id=fields.uint16(),
        level=fields.uint8(),
        flags=fields.uint8(),
        raw=raw,
    )


def decode_spell_definition(reader: BinaryReader) -> SpellDefinition:
    fields, raw = _take_record(reader, SpellDefinition.record_size, SpellDefinition.kind)
    return SpellDefinition(
        index=fields.uint16(),
        magic_type=fields.uint16(),
        element=fields.uint16(),
        valid_targets=fields.uint16(),
        skill=fields.uint16(),
        mp_cost=fields.uint16(),
        cast_time=fields.uint8(),
        recast_time=fields.uint8(),
        job_levels=tuple(fields.bytes(JOB_COUNT)),
        spell_id=fields.uint16(),
        list_icon=fields.uint16(),
        raw=raw,
    )


def decode_ability_definition(reader: BinaryReader) -> AbilityDefinition:
    fields, raw = _take_record(reader, AbilityDefinition.record_size, AbilityDefinition.kind)
    return AbilityDefinition(
        ability_id=fields.uint16(),
        ability_type=fields.uint8(),
        list_icon=fields.uint8(),
        mp_cost=fields.uint16(),
        timer_id=fields.uint16(),
        valid_targets=fields.uint16(),
        tp_cost=fields.int16(),
        raw=raw,
    )
