"""Dump monster spell links, spells, and abilities from a spell info DAT.

Usage:
    python -m scripts.dump_spell_info [--dat PATH] [--kind KIND] [--json] [--raw] [--verbose]
"""

import argparse
import json
import logging
from pathlib import Path

from ffxi_spellinfo.export.json_export import count_by_kind, export_payload
from ffxi_spellinfo.models.constants import (
    AbilityType,
    Element,
    MagicType,
    Skill,
    lookup_name,
    target_names,
)
from ffxi_spellinfo.models.entities import (
    ENTITY_KINDS,
    AbilityDefinition,
    MonsterSpellLink,
    SpellDefinition,
)
from ffxi_spellinfo.parser.dat_paths import resolve_dat_for_cli
from ffxi_spellinfo.parser.spell_info_parser import decode_file


def format_entity(entity) -> str:
    """One-line summary of a decoded entity."""
    if isinstance(entity, MonsterSpellLink):
        return (
            f"[mon ] #{entity.index:<5} family {entity.monster_family:<5} "
            f"spell {entity.spell_id:<5} level {entity.level}"
        )
    if isinstance(entity, SpellDefinition):
        levels = ", ".join(f"{job.name} {lvl}" for job, lvl in entity.levels_by_job().items())
        return (
            f"[mgc ] #{entity.index:<5} id {entity.spell_id:<5} "
            f"{lookup_name(MagicType, entity.magic_type)}/{lookup_name(Skill, entity.skill)} "
            f"{lookup_name(Element, entity.element)} MP {entity.mp_cost} "
            f"cast {entity.cast_seconds:g}s recast {entity.recast_seconds:g}s"
            + (f" | {levels}" if levels else "")
        )
    if isinstance(entity, AbilityDefinition):
        targets = "|".join(target_names(entity.valid_targets)) or "-"
        return (
            f"[comm] id {entity.ability_id:<5} "
            f"{lookup_name(AbilityType, entity.ability_type)} "
            f"MP {entity.mp_cost} TP {entity.tp_cost} timer {entity.timer_id} "
            f"targets {targets}"
        )
    raise TypeError(f"Not a spell info entity: {entity!r}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump FFXI spell/ability info DAT")
    parser.add_argument("--dat", type=Path, default=None,
                        help="Path to the DAT file (default: $FFXI_SPELLINFO_DAT)")
    parser.add_argument("--kind", choices=ENTITY_KINDS, default=None,
                        help="Only show entities of this kind")
    parser.add_argument("--json", action="store_true",
                        help="Emit machine-readable JSON output.")
    parser.add_argument("--raw", action="store_true",
                        help="Include raw record bytes (hex) in JSON output.")
    parser.add_argument("--verbose", action="store_true",
                        help="Log section details while decoding")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        dat_path = resolve_dat_for_cli(args.dat)
    except FileNotFoundError as exc:
        print(f"Error: {exc}")
        return 1

    result = decode_file(dat_path)
    if not result.ok:
        print(f"Error: {dat_path} is not a valid spell info file: {result.error}")
        return 1

    entities = result.entities
    if args.kind:
        entities = [e for e in entities if e.kind == args.kind]

    if args.json:
        print(json.dumps(export_payload(entities, include_raw=args.raw), indent=2))
        return 0

    for entity in entities:
        print(format_entity(entity))
    print()
    counts = count_by_kind(entities)
    print(", ".join(f"{kind}: {n}" for kind, n in counts.items()))
    print(f"Total: {len(entities)} entities")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
