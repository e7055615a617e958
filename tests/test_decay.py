# tests/test_decay.py
import pytest

from phraipets.models.needs import MAX_NEED_VALUE, MIN_NEED_VALUE
from phraipets.models.pet import DecayRates, PetState, apply_needs_decay

START = 1714564800000
HOUR_MS = 60 * 60 * 1000

FLAT_RATES = DecayRates(hunger_per_day=24, happiness_per_day=24, cleanliness_per_day=24, affection_per_day=24)


def make_pet(**overrides):
    fields = dict(hunger=100, happiness=100, cleanliness=100, affection=100, spirit=100,
                  last_needs_update_time=START, last_affection_gain_date="2024-05-01")
    fields.update(overrides)
    return PetState(**fields)


def test_six_hours_at_24_per_day():
    after_6h = START + 6 * HOUR_MS
    decayed = apply_needs_decay(make_pet(), after_6h, FLAT_RATES)

    assert decayed.hunger == 94  # 6 hours of 24/day => 6
    assert decayed.happiness == 94
    assert decayed.spirit == 94
    assert decayed.last_needs_update_time == after_6h


def test_zero_elapsed_leaves_needs_unchanged():
    pet = make_pet(hunger=37, happiness=88, cleanliness=12, affection=120, spirit=64)
    decayed = apply_needs_decay(pet, START, DecayRates(hunger_per_day=1e9, happiness_per_day=1e9,
                                                        cleanliness_per_day=1e9, affection_per_day=1e9))

    assert (decayed.hunger, decayed.happiness, decayed.cleanliness, decayed.affection) == (37, 88, 12, 120)
    assert decayed.last_needs_update_time == START


def test_rates_are_per_need():
    rates = DecayRates(hunger_per_day=100, happiness_per_day=50, cleanliness_per_day=0, affection_per_day=10)
    decayed = apply_needs_decay(make_pet(), START + 24 * HOUR_MS, rates)

    assert decayed.hunger == 0
    assert decayed.happiness == 50
    assert decayed.cleanliness == 100
    assert decayed.affection == 90
    assert decayed.spirit == 60


def test_clock_going_backwards_does_not_undo_decay():
    pet = make_pet(hunger=40)
    decayed = apply_needs_decay(pet, START - 5 * HOUR_MS, FLAT_RATES)

    assert decayed.hunger == 40
    assert decayed.last_needs_update_time == START


@pytest.mark.parametrize("rate,hours", [(1e12, 1), (240, 24 * 365 * 50), (1e300, 1e6)])
def test_huge_decay_stays_in_range(rate, hours):
    rates = DecayRates(hunger_per_day=rate, happiness_per_day=rate, cleanliness_per_day=rate, affection_per_day=rate)
    decayed = apply_needs_decay(make_pet(), START + int(hours * HOUR_MS), rates)

    for value in (decayed.hunger, decayed.happiness, decayed.cleanliness, decayed.affection, decayed.spirit):
        assert MIN_NEED_VALUE <= value <= MAX_NEED_VALUE
    assert decayed.hunger == 0


def test_one_long_catch_up_matches_hourly_catch_ups():
    one_shot = apply_needs_decay(make_pet(), START + 72 * HOUR_MS, FLAT_RATES)

    stepped = make_pet()
    for hour in range(1, 73):
        stepped = apply_needs_decay(stepped, START + hour * HOUR_MS, FLAT_RATES)

    assert stepped == one_shot
    assert one_shot.hunger == 28


def test_decay_does_not_touch_the_input():
    pet = make_pet()
    apply_needs_decay(pet, START + 10 * HOUR_MS, FLAT_RATES)

    assert pet.hunger == 100
    assert pet.last_needs_update_time == START


def test_stale_spirit_is_replaced():
    pet = make_pet(hunger=20, happiness=20, cleanliness=20, affection=20, spirit=120)
    assert apply_needs_decay(pet, START, FLAT_RATES).spirit == 20


def test_negative_rates_are_rejected():
    with pytest.raises(ValueError):
        DecayRates(hunger_per_day=-1)


def test_minute_by_minute_catch_ups_match_one_late_catch_up():
    rates = DecayRates(hunger_per_day=100, happiness_per_day=50, cleanliness_per_day=100, affection_per_day=10)
    start = make_pet(affection=50)
    one_shot = apply_needs_decay(start, START + 2 * HOUR_MS, rates)

    stepped = start
    for minute in range(1, 121):
        stepped = apply_needs_decay(stepped, START + minute * 60 * 1000, rates)

    needs = lambda pet: (pet.hunger, pet.happiness, pet.cleanliness, pet.affection, pet.spirit)
    assert needs(one_shot) == (92, 96, 92, 49, 82)
    assert needs(stepped) == needs(one_shot)


def test_unrounded_decay_is_carried_to_the_next_call():
    rates = DecayRates(hunger_per_day=24)
    decayed = apply_needs_decay(make_pet(), START + HOUR_MS // 4, rates)

    assert decayed.hunger == 100
    assert decayed.decay_carry["hunger"] == pytest.approx(0.25)

    decayed = apply_needs_decay(decayed, START + HOUR_MS, rates)
    assert decayed.hunger == 99
    assert decayed.decay_carry["hunger"] == pytest.approx(0.0)


def test_nothing_is_owed_once_a_need_bottoms_out():
    decayed = apply_needs_decay(make_pet(hunger=3), START + 24 * HOUR_MS, DecayRates(hunger_per_day=100))

    assert decayed.hunger == 0
    assert decayed.decay_carry["hunger"] == 0.0


def test_absurd_clock_values_do_not_raise():
    decayed = apply_needs_decay(make_pet(), 10 ** 400, FLAT_RATES)

    assert decayed.hunger == 0
    assert decayed.last_needs_update_time == 10 ** 400
