"""Decoded entities: monster spell links, spell definitions, ability definitions.

Each entity is decoded from one fixed-width record and keeps that record's
bytes verbatim in `raw`. The three classes form a closed set; `Entity` is
their union and there is no shared base class.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union

from ffxi_spellinfo.models.constants import JOB_COUNT, NOT_LEARNABLE, Job


@dataclass(frozen=True, slots=True)
class MonsterSpellLink:
    """A "mon_" record: which spell a monster family can use, from what level."""
    kind: ClassVar[str] = "monster_spell_link"
    record_size: ClassVar[int] = 0x80

    index: int
    monster_family: int
    spell_id: int
    level: int
    flags: int
    raw: bytes = field(default=b"", repr=False)


@dataclass(frozen=True, slots=True)
class SpellDefinition:
    """A "mgc_" record describing one spell."""
    kind: ClassVar[str] = "spell_definition"
    record_size: ClassVar[int] = 0x80

    index: int
    magic_type: int       # MagicType
    element: int          # Element
    valid_targets: int    # ValidTarget bitmask
    skill: int            # Skill
    mp_cost: int
    cast_time: int        # quarter seconds
    recast_time: int      # quarter seconds
    job_levels: tuple[int, ...]   # JOB_COUNT bytes, NOT_LEARNABLE = 0xFF
    spell_id: int
    list_icon: int
    raw: bytes = field(default=b"", repr=False)

    @property
    def cast_seconds(self) -> float:
        return self.cast_time / 4

    @property
    def recast_seconds(self) -> float:
        return self.recast_time / 4

    def levels_by_job(self) -> dict[Job, int]:
        """Learn level for each job that can learn this spell."""
        out: dict[Job, int] = {}
        for job_index, level in enumerate(self.job_levels[:JOB_COUNT]):
            if level == NOT_LEARNABLE:
                continue
            out[Job(job_index)] = level
        return out


@dataclass(frozen=True, slots=True)
class AbilityDefinition:
    """A "comm" record describing one ability (job ability, weapon skill, ...)."""
    kind: ClassVar[str] = "ability_definition"
    record_size: ClassVar[int] = 0x30

    ability_id: int
    ability_type: int     # AbilityType
    list_icon: int
    mp_cost: int
    timer_id: int         # shared recast timer
    valid_targets: int    # ValidTarget bitmask
    tp_cost: int          # signed; -1 when the ability has no TP cost
    raw: bytes = field(default=b"", repr=False)


Entity = Union[MonsterSpellLink, SpellDefinition, AbilityDefinition]

ENTITY_KINDS: tuple[str, ...] = (
    MonsterSpellLink.kind,
    SpellDefinition.kind,
    AbilityDefinition.kind,
)
