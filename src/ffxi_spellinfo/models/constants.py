"""FFXI jobs, magic types, elements, skills, and target flags.

These are descriptive only. Record decoders store raw integers and never
reject a value because it is missing from one of these tables.
"""

from enum import IntEnum, IntFlag


class Job(IntEnum):
    """Job indices. Also the index into a spell's 24-byte level table."""
    NONE = 0
    WAR = 1
    MNK = 2
    WHM = 3
    BLM = 4
    RDM = 5
    THF = 6
    PLD = 7
    DRK = 8
    BST = 9
    BRD = 10
    RNG = 11
    SAM = 12
    NIN = 13
    DRG = 14
    SMN = 15
    BLU = 16
    COR = 17
    PUP = 18
    DNC = 19
    SCH = 20
    GEO = 21
    RUN = 22
    MON = 23


class MagicType(IntEnum):
    NONE = 0
    WHITE_MAGIC = 1
    BLACK_MAGIC = 2
    SUMMONING = 3
    NINJUTSU = 4
    SONG = 5
    BLUE_MAGIC = 6
    GEOMANCY = 7
    TRUST = 8


class Element(IntEnum):
    FIRE = 0
    ICE = 1
    WIND = 2
    EARTH = 3
    LIGHTNING = 4
    WATER = 5
    LIGHT = 6
    DARK = 7
    SPECIAL = 15
    NONE = 0xFFFF


class Skill(IntEnum):
    """Magic skills (combat skills are never referenced by spell records)."""
    NONE = 0
    DIVINE = 32
    HEALING = 33
    ENHANCING = 34
    ENFEEBLING = 35
    ELEMENTAL = 36
    DARK = 37
    SUMMONING = 38
    NINJUTSU = 39
    SINGING = 40
    STRING = 41
    WIND = 42
    BLUE = 43
    GEOMANCY = 44
    HANDBELL = 45


class ValidTarget(IntFlag):
    NONE = 0
    SELF = 0x01
    PLAYER = 0x02
    PARTY = 0x04
    ALLY = 0x08
    NPC = 0x10
    ENEMY = 0x20
    OBJECT = 0x40
    CORPSE = 0x80


class AbilityType(IntEnum):
    GENERAL = 0
    JOB_ABILITY = 1
    PET_COMMAND = 2
    WEAPON_SKILL = 3
    TRAIT = 4
    BLOOD_PACT_RAGE = 6
    CORSAIR_ROLL = 7
    CORSAIR_SHOT = 8
    BLOOD_PACT_WARD = 10
    SAMBA = 11
    WALTZ = 12
    STEP = 13
    FLOURISH = 14
    STRATAGEM = 15
    JIG = 16


# Level byte meaning "this job cannot learn the spell"
NOT_LEARNABLE = 0xFF

JOB_COUNT = 24


def lookup_name(enum_cls: type[IntEnum], value: int) -> str:
    """Display name for *value*, or a hex placeholder when it is unknown."""
    try:
        return enum_cls(value).name
    except ValueError:
        return f"Unknown({value:#x})"


def target_names(value: int) -> list[str]:
    """Split a valid-target bitmask into flag names, unknown bits as hex."""
    names: list[str] = []
    known = 0
    for flag in ValidTarget:
        if flag and value & flag:
            names.append(flag.name)
            known |= int(flag)
    extra = value & ~known
    if extra:
        names.append(f"{extra:#x}")
    return names
