# phraipets/models/bands.py
import math
from typing import List

from phraipets.models.needs import MAX_NEED_VALUE
from phraipets.models.pet import NeedInfo, PetState

UNKNOWN_LABEL = "Unknown"
UNDEFINED_NEED_LABEL = "Undefined Need Type"
UNDEFINED_STATE_LABEL = "Undefined State"

# (upper bound inclusive, label), ascending. The negative bands sit below the
# clamped range so pre-clamp values still get a label.
NEED_BANDS = {
    "hunger": (
        (-21, "Dying"),
        (-11, "Starving"),
        (-1, "Famished"),
        (14, "Very Hungry"),
        (29, "Hungry"),
        (44, "Not Hungry"),
        (59, "Fine"),
        (74, "Satiated"),
        (89, "Full Up"),
        (104, "Very Full"),
        (119, "Bloated"),
        (120, "Very Bloated"),
    ),
    "happiness": (
        (-21, "Miserable"),
        (-11, "Sad"),
        (-1, "Unhappy"),
        (14, "Dull"),
        (29, "Okay"),
        (44, "Content"),
        (59, "Happy"),
        (74, "Joyful"),
        (89, "Delighted"),
        (104, "Ecstatic"),
        (119, "Overjoyed"),
        (120, "Blissful"),
    ),
    "cleanliness": (
        (-21, "Filthy"),
        (-11, "Very Dirty"),
        (-1, "Dirty"),
        (14, "Slightly Dirty"),
        (29, "Unkempt"),
        (44, "Decent"),
        (59, "Clean"),
        (74, "Very Clean"),
        (89, "Spotless"),
        (104, "Gleaming"),
        (119, "Pristine"),
        (120, "Radiant"),
    ),
    "affection": (
        (-21, "Neglected"),
        (-11, "Wary"),
        (-1, "Distant"),
        (14, "Curious"),
        (29, "Friendly"),
        (44, "Affectionate"),
        (59, "Bonded"),
        (74, "Loyal"),
        (89, "Devoted"),
        (104, "Inseparable"),
        (119, "Loving"),
        (120, "Soulmates"),
    ),
}

# Display order, with the table each row is labelled from. Spirit borrows the
# happiness wording.
_NEED_DISPLAY = (
    ("hunger", "Hunger", "hunger"),
    ("cleanliness", "Cleanliness", "cleanliness"),
    ("happiness", "Happiness", "happiness"),
    ("affection", "Affection", "affection"),
    ("spirit", "Spirit", "happiness"),
)


def describe_need(need: str, value) -> str:
    """
    Returns the label of the first band of `need` whose upper bound is >= value.
    Never raises: unusable values, unknown needs and values past the last band
    each get a fixed fallback label.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return UNKNOWN_LABEL
    if isinstance(value, float) and math.isnan(value):
        return UNKNOWN_LABEL
    needs_bands = NEED_BANDS.get(need) if isinstance(need, str) else None
    if needs_bands is None:
        return UNDEFINED_NEED_LABEL
    for upper_bound, label in needs_bands:
        if value <= upper_bound:
            return label
    return UNDEFINED_STATE_LABEL


def build_need_info(pet: PetState) -> List[NeedInfo]:
    return [
        NeedInfo(
            need=need,
            name=name,
            value=getattr(pet, need),
            max_value=MAX_NEED_VALUE,
            icon_src=f"/assets/icons/needs/{need}.png",
            desc=describe_need(table, getattr(pet, need)),
        )
        for need, name, table in _NEED_DISPLAY
    ]
