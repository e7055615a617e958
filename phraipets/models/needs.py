# phraipets/models/needs.py
import math

MIN_NEED_VALUE = 0
MAX_NEED_VALUE = 120

PRIMARY_NEEDS = ("hunger", "happiness", "cleanliness", "affection")

MILLISECONDS_IN_HOUR = 60 * 60 * 1000

# Decay owed but not yet rounded into a need value stays within half a point
MAX_DECAY_CARRY = 0.5


def clamp_need(value: float) -> int:
    """
    Rounds a need value to the nearest integer (halves round up) and bounds it
    into [MIN_NEED_VALUE, MAX_NEED_VALUE].

    Every write of a need value goes through here. NaN and -inf land on the
    minimum, +inf on the maximum. Ints are bounded without going through
    float, so arbitrarily large ones are fine.
    """
    if isinstance(value, int):
        return max(MIN_NEED_VALUE, min(MAX_NEED_VALUE, value))
    if math.isnan(value) or value == -math.inf:
        return MIN_NEED_VALUE
    if value == math.inf:
        return MAX_NEED_VALUE
    return max(MIN_NEED_VALUE, min(MAX_NEED_VALUE, math.floor(value + 0.5)))


def compute_spirit(hunger: float, happiness: float, cleanliness: float, affection: float) -> int:
    """Spirit is the clamped mean of the four primary needs, never stored on its own."""
    return clamp_need((hunger + happiness + cleanliness + affection) / 4)
