"""Tests for the fixed-width record decoders."""

import struct

import pytest

from ffxi_spellinfo.models.constants import NOT_LEARNABLE, Job
from ffxi_spellinfo.parser.binary_reader import BinaryReader
from ffxi_spellinfo.parser.errors import StructuralMismatch
from ffxi_spellinfo.parser.record_decoders import (
    decode_ability_definition,
    decode_monster_spell_link,
    decode_spell_definition,
)


def _mon_record(index=1, family=2, spell_id=3, level=4, flags=0, marker=0xFF) -> bytes:
    buf = bytearray(0x80)
    struct.pack_into("<HHHBB", buf, 0, index, family, spell_id, level, flags)
    buf[0x7F] = marker
    return bytes(buf)


def _mgc_record(levels: dict[int, int] | None = None, marker=0xFF) -> bytes:
    buf = bytearray(0x80)
    # index, magic type, element, targets, skill, mp, cast, recast
    struct.pack_into("<HHHHHHBB", buf, 0, 1, 1, 6, 0x1F, 33, 8, 8, 20)
    table = [NOT_LEARNABLE] * 24
    for job, level in (levels or {}).items():
        table[job] = level
    buf[0x0E:0x26] = bytes(table)
    struct.pack_into("<HH", buf, 0x26, 1, 86)
    buf[0x7F] = marker
    return bytes(buf)


def _comm_record(marker=0xFF) -> bytes:
    buf = bytearray(0x30)
    # id, type, icon, mp, timer, targets, tp
    struct.pack_into("<HBBHHHh", buf, 0, 16, 1, 7, 0, 12, 0x20, -1)
    buf[0x2F] = marker
    return bytes(buf)


def test_decode_monster_spell_link_fields():
    raw = _mon_record(index=10, family=258, spell_id=501, level=35, flags=2)
    link = decode_monster_spell_link(BinaryReader(raw))

    assert link.index == 10
    assert link.monster_family == 258
    assert link.spell_id == 501
    assert link.level == 35
    assert link.flags == 2
    assert link.raw == raw


def test_decode_spell_definition_fields():
    raw = _mgc_record(levels={Job.WHM: 1, Job.RDM: 3, Job.SCH: 5})
    spell = decode_spell_definition(BinaryReader(raw))

    assert spell.index == 1
    assert spell.magic_type == 1
    assert spell.element == 6
    assert spell.valid_targets == 0x1F
    assert spell.skill == 33
    assert spell.mp_cost == 8
    assert spell.cast_time == 8
    assert spell.cast_seconds == 2.0
    assert spell.recast_seconds == 5.0
    assert len(spell.job_levels) == 24
    assert spell.spell_id == 1
    assert spell.list_icon == 86
    assert spell.levels_by_job() == {Job.WHM: 1, Job.RDM: 3, Job.SCH: 5}


def test_decode_ability_definition_fields():
    ability = decode_ability_definition(BinaryReader(_comm_record()))

    assert ability.ability_id == 16
    assert ability.ability_type == 1
    assert ability.list_icon == 7
    assert ability.mp_cost == 0
    assert ability.timer_id == 12
    assert ability.valid_targets == 0x20
    assert ability.tp_cost == -1
    assert len(ability.raw) == 0x30


@pytest.mark.parametrize(
    ("decoder", "record", "width"),
    [
        (decode_monster_spell_link, _mon_record(), 0x80),
        (decode_spell_definition, _mgc_record(), 0x80),
        (decode_ability_definition, _comm_record(), 0x30),
    ],
)
def test_decoder_consumes_exactly_one_record(decoder, record, width):
    r = BinaryReader(record + b"\xAA\xBB")
    decoder(r)
    assert r.position == width
    assert r.remaining == 2


@pytest.mark.parametrize(
    ("decoder", "record", "width"),
    [
        (decode_monster_spell_link, _mon_record(marker=0x00), 0x80),
        (decode_spell_definition, _mgc_record(marker=0x7E), 0x80),
        (decode_ability_definition, _comm_record(marker=0x00), 0x30),
    ],
)
def test_bad_marker_rejected_after_consuming_record(decoder, record, width):
    r = BinaryReader(record)
    with pytest.raises(StructuralMismatch, match="end-of-record marker") as info:
        decoder(r)
    assert info.value.offset == width - 1
    assert r.position == width


def test_truncated_record_is_an_overrun():
    r = BinaryReader(_comm_record()[:40])
    with pytest.raises(ValueError, match="exceed boundary"):
        decode_ability_definition(r)
    assert r.position == 0


def test_marker_offset_is_absolute():
    data = _comm_record() + _comm_record(marker=0x01)
    r = BinaryReader(data)
    decode_ability_definition(r)
    with pytest.raises(StructuralMismatch) as info:
        decode_ability_definition(r)
    assert info.value.offset == 0x30 + 0x2F
