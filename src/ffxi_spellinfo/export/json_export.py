"""Turn decoded entities into JSON-safe payloads."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict
from typing import Any

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
    Entity,
    SpellDefinition,
)


def _json_safe(value: Any) -> Any:
    """Recursively normalize values for JSON serialization."""
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, (bytes, bytearray)):
        return value.hex()
    return value


def entity_payload(entity: Entity, *, include_raw: bool = False) -> dict[str, Any]:
    fields = asdict(entity)
    raw = fields.pop("raw")
    payload: dict[str, Any] = {"kind": entity.kind, **fields}

    if isinstance(entity, SpellDefinition):
        payload["magic_type_name"] = lookup_name(MagicType, entity.magic_type)
        payload["element_name"] = lookup_name(Element, entity.element)
        payload["skill_name"] = lookup_name(Skill, entity.skill)
        payload["targets"] = target_names(entity.valid_targets)
        payload["levels"] = {job.name: level for job, level in entity.levels_by_job().items()}
    elif isinstance(entity, AbilityDefinition):
        payload["ability_type_name"] = lookup_name(AbilityType, entity.ability_type)
        payload["targets"] = target_names(entity.valid_targets)

    if include_raw:
        payload["raw"] = raw
    return _json_safe(payload)


def count_by_kind(entities: list[Entity]) -> dict[str, int]:
    """Entity counts keyed by kind, every kind present even when zero."""
    counts = Counter(e.kind for e in entities)
    return {kind: counts.get(kind, 0) for kind in ENTITY_KINDS}


def export_payload(entities: list[Entity], *, include_raw: bool = False) -> dict[str, Any]:
    return {
        "counts": count_by_kind(entities),
        "entities": [entity_payload(e, include_raw=include_raw) for e in entities],
    }
