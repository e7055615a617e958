# phraipets/models/pet.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Dict
import sys
import time

from phraipets.models.needs import (
    MAX_DECAY_CARRY,
    MAX_NEED_VALUE,
    MILLISECONDS_IN_HOUR,
    MIN_NEED_VALUE,
    PRIMARY_NEEDS,
    clamp_need,
    compute_spirit,
)


def current_time_ms() -> int:
    return int(time.time() * 1000)


def date_key(now: int) -> str:
    """Local calendar date of a millisecond timestamp, e.g. '2024-05-01'."""
    return datetime.fromtimestamp(now / 1000).strftime("%Y-%m-%d")


class PetState(BaseModel):
    # Stored documents and API payloads use the camelCase keys
    model_config = ConfigDict(populate_by_name=True)

    id: str = "default-pet"
    name: str = "Buddy"
    type: str = "default"
    image: str = "/pet/neutral.png"

    hunger: int = Field(default=100, ge=MIN_NEED_VALUE, le=MAX_NEED_VALUE)
    happiness: int = Field(default=100, ge=MIN_NEED_VALUE, le=MAX_NEED_VALUE)
    cleanliness: int = Field(default=100, ge=MIN_NEED_VALUE, le=MAX_NEED_VALUE)
    affection: int = Field(default=50, ge=MIN_NEED_VALUE, le=MAX_NEED_VALUE)
    spirit: int = Field(default=88, ge=MIN_NEED_VALUE, le=MAX_NEED_VALUE)

    last_needs_update_time: int = Field(default_factory=current_time_ms, gt=0, alias="lastNeedsUpdateTime")
    affection_gained_today: int = Field(default=0, ge=0, alias="affectionGainedToday")
    last_affection_gain_date: str = Field(default_factory=lambda: date_key(current_time_ms()),
                                          alias="lastAffectionGainDate")
    # Per need, decay already accrued but not yet rounded into the value
    decay_carry: Dict[str, float] = Field(default_factory=lambda: dict.fromkeys(PRIMARY_NEEDS, 0.0),
                                          alias="needsDecayCarry")


class DecayRates(BaseModel):
    """Need points lost per 24 hours, one rate per primary need."""
    model_config = ConfigDict(populate_by_name=True)

    hunger_per_day: float = Field(default=0, ge=0, allow_inf_nan=False, alias="hungerPerDay")
    happiness_per_day: float = Field(default=0, ge=0, allow_inf_nan=False, alias="happinessPerDay")
    cleanliness_per_day: float = Field(default=0, ge=0, allow_inf_nan=False, alias="cleanlinessPerDay")
    affection_per_day: float = Field(default=0, ge=0, allow_inf_nan=False, alias="affectionPerDay")


class NeedInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    need: str
    name: str
    value: int
    max_value: int = Field(default=MAX_NEED_VALUE, alias="maxValue")
    icon_src: str = Field(alias="iconSrc")
    desc: str


def default_pet(now: int = None) -> PetState:
    """A fresh record with every need at its default and the clock at `now`."""
    if now is None:
        now = current_time_ms()
    pet = PetState(last_needs_update_time=now, last_affection_gain_date=date_key(now))
    return pet.model_copy(update={
        "spirit": compute_spirit(pet.hunger, pet.happiness, pet.cleanliness, pet.affection),
    })


def apply_needs_decay(pet: PetState, now: int, rates: DecayRates) -> PetState:
    """
    Catches the needs up to `now` in a single step.

    Decay is linear in elapsed hours. The part of it that rounding kept out of
    a need value is remembered in `decay_carry` and owed on the next call, so
    `value - carry` drops by exactly the accrued decay every time and one call
    after a long absence lands where many short calls would. Elapsed time is
    floored at zero, and the timestamp never moves backwards.
    """
    elapsed_ms = min(now - pet.last_needs_update_time, sys.float_info.max)
    hours_elapsed = max(0.0, elapsed_ms / MILLISECONDS_IN_HOUR)
    last_update = max(pet.last_needs_update_time, now)

    if hours_elapsed == 0:
        return pet.model_copy(update={
            "spirit": compute_spirit(pet.hunger, pet.happiness, pet.cleanliness, pet.affection),
            "last_needs_update_time": last_update,
        })

    per_day = {
        "hunger": rates.hunger_per_day,
        "happiness": rates.happiness_per_day,
        "cleanliness": rates.cleanliness_per_day,
        "affection": rates.affection_per_day,
    }
    values = {}
    carry = {}
    for need in PRIMARY_NEEDS:
        current = getattr(pet, need)
        owed = pet.decay_carry.get(need, 0.0) + (per_day[need] / 24) * hours_elapsed
        values[need] = clamp_need(current - owed)
        remainder = owed - (current - values[need])
        # Only a need pinned at the floor ends up further off; nothing is owed below zero
        carry[need] = remainder if abs(remainder) <= MAX_DECAY_CARRY else 0.0

    return pet.model_copy(update={
        **values,
        "spirit": compute_spirit(**values),
        "decay_carry": carry,
        "last_needs_update_time": last_update,
    })


class Pet:
    """
    Gameplay logic over a PetState. Every method replaces `self.state` with a
    new record whose needs went through clamp_need and whose spirit is
    recomputed.
    """

    def __init__(self, state: PetState = None):
        self.state = state if state is not None else default_pet()

    def catch_up(self, now: int, rates: DecayRates, min_elapsed_ms: int = 0) -> bool:
        """Applies decay up to `now` unless less than `min_elapsed_ms` has passed."""
        if now - self.state.last_needs_update_time <= min_elapsed_ms:
            return False
        self.state = apply_needs_decay(self.state, now, rates)
        return True

    def roll_affection_day(self, today: str) -> bool:
        """Resets the daily affection counter when the calendar day changed."""
        if self.state.last_affection_gain_date == today:
            return False
        self.state = self.state.model_copy(update={
            "affection_gained_today": 0,
            "last_affection_gain_date": today,
        })
        return True

    def _raise_need(self, need: str, amount: float, now: int, **extra):
        values = {
            "hunger": self.state.hunger,
            "happiness": self.state.happiness,
            "cleanliness": self.state.cleanliness,
            "affection": self.state.affection,
        }
        values[need] = clamp_need(values[need] + amount)
        self.state = self.state.model_copy(update={
            **values,
            **extra,
            "spirit": compute_spirit(**values),
            "last_needs_update_time": max(self.state.last_needs_update_time, now),
        })

    def feed(self, amount: int = 25, now: int = None):
        self._raise_need("hunger", amount, now or current_time_ms())

    def groom(self, amount: int = 40, now: int = None):
        self._raise_need("cleanliness", amount, now or current_time_ms())

    def play(self, amount: int = 20, now: int = None):
        self._raise_need("happiness", amount, now or current_time_ms())

    def show_affection(self, amount: int, daily_cap: int, now: int = None) -> int:
        """
        Raises affection by at most what is left of today's allowance and
        returns the amount actually granted. Once the cap is reached only the
        timestamp moves.
        """
        now = now or current_time_ms()
        self.roll_affection_day(date_key(now))

        gained_today = self.state.affection_gained_today
        gainable = min(amount, daily_cap - gained_today)
        if gainable <= 0:
            self.state = self.state.model_copy(update={
                "last_needs_update_time": max(self.state.last_needs_update_time, now),
            })
            return 0

        self._raise_need("affection", gainable, now, affection_gained_today=gained_today + gainable)
        return gainable
