# phraipets/models/validation.py
from collections.abc import Mapping
from typing import Any, Optional
import math

from pydantic import BaseModel
import structlog

from phraipets.models.needs import MAX_DECAY_CARRY, PRIMARY_NEEDS, clamp_need, compute_spirit
from phraipets.models.pet import PetState, current_time_ms, date_key, default_pet

log = structlog.get_logger(__name__)

_IDENTITY_FIELDS = ("id", "name", "type", "image")

# Largest integer a MongoDB document can hold
MAX_STORED_INT = 2 ** 63 - 1


def _finite_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # Ints of any size are finite; math.isfinite would overflow converting them
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def validate_pet(candidate: Any, now: int = None) -> PetState:
    """
    Rebuilds a complete, valid PetState from whatever the store handed back.

    Missing or wrong-typed fields fall back to the defaults, needs are clamped,
    and spirit is always recomputed from the four needs whatever the record
    claims. Anything that is not a mapping is treated as an empty record.
    """
    if now is None:
        now = current_time_ms()
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump(by_alias=True)
    if not isinstance(candidate, Mapping):
        candidate = {}

    defaults = default_pet(now)
    repaired = []

    fields = {}
    for field in _IDENTITY_FIELDS:
        value = candidate.get(field)
        if isinstance(value, str) and value:
            fields[field] = value
        else:
            fields[field] = getattr(defaults, field)
            repaired.append(field)

    for need in PRIMARY_NEEDS:
        value = _finite_number(candidate.get(need))
        if value is None:
            fields[need] = getattr(defaults, need)
            repaired.append(need)
        else:
            fields[need] = clamp_need(value)

    fields["spirit"] = compute_spirit(fields["hunger"], fields["happiness"],
                                      fields["cleanliness"], fields["affection"])

    last_update = _finite_number(candidate.get("lastNeedsUpdateTime"))
    if last_update is None or last_update <= 0 or last_update > MAX_STORED_INT:
        fields["last_needs_update_time"] = now
        repaired.append("lastNeedsUpdateTime")
    else:
        fields["last_needs_update_time"] = max(1, int(last_update))

    gained = _finite_number(candidate.get("affectionGainedToday"))
    if gained is None:
        fields["affection_gained_today"] = 0
        repaired.append("affectionGainedToday")
    else:
        fields["affection_gained_today"] = min(MAX_STORED_INT, max(0, int(gained)))

    gain_date = candidate.get("lastAffectionGainDate")
    if isinstance(gain_date, str) and gain_date:
        fields["last_affection_gain_date"] = gain_date
    else:
        fields["last_affection_gain_date"] = date_key(now)
        repaired.append("lastAffectionGainDate")

    stored_carry = candidate.get("needsDecayCarry")
    if not isinstance(stored_carry, Mapping):
        stored_carry = {}
        repaired.append("needsDecayCarry")
    carry = {}
    for need in PRIMARY_NEEDS:
        owed = _finite_number(stored_carry.get(need))
        carry[need] = float(owed) if owed is not None and abs(owed) <= MAX_DECAY_CARRY else 0.0
    fields["decay_carry"] = carry

    if repaired:
        log.debug("pet_record_repaired", pet_id=fields["id"], fields=repaired)
    return PetState(**fields)
