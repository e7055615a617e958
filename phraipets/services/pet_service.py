# phraipets/services/pet_service.py
from typing import Optional, List
from phraipets.models.pet import Pet, PetState, NeedInfo, DecayRates, current_time_ms, date_key, default_pet
from phraipets.models.bands import build_need_info
from phraipets.models.validation import validate_pet
from phraipets.core.database import get_database, PETS_COLLECTION
from phraipets.core.settings import settings
import structlog

log = structlog.get_logger(__name__)


def configured_decay_rates() -> DecayRates:
    return DecayRates(
        hunger_per_day=settings.HUNGER_DECAY_PER_DAY,
        happiness_per_day=settings.HAPPINESS_DECAY_PER_DAY,
        cleanliness_per_day=settings.CLEANLINESS_DECAY_PER_DAY,
        affection_per_day=settings.AFFECTION_DECAY_PER_DAY,
    )


async def _load_pet_document(pet_id: str) -> Optional[dict]:
    db = get_database()
    return await db[PETS_COLLECTION].find_one({"id": pet_id})


async def _save_pet_state_to_db(pet_state: PetState):
    """Writes the whole record; concurrent writers resolve as last-write-wins."""
    db = get_database()
    pet_dict = pet_state.model_dump(by_alias=True)
    await db[PETS_COLLECTION].update_one(
        {"id": pet_state.id},
        {"$set": pet_dict},
        upsert=True  # Create if not exists, update if exists
    )


def _stored_fields(document: dict) -> dict:
    return {key: value for key, value in document.items() if key != "_id"}


async def _load_current_pet(pet_id: str, now: int) -> Pet:
    """
    Reads the record, repairs it, rolls the affection day over and catches
    decay up to `now`. Writes back only when something changed. A missing
    record is created from the defaults.
    """
    document = await _load_pet_document(pet_id)
    if document is None:
        pet = Pet(default_pet(now).model_copy(update={"id": pet_id}))
        await _save_pet_state_to_db(pet.state)
        log.info("pet_created_with_defaults", pet_id=pet_id)
        return pet

    pet = Pet(validate_pet(document, now=now).model_copy(update={"id": pet_id}))
    pet.roll_affection_day(date_key(now))
    pet.catch_up(now, configured_decay_rates(), min_elapsed_ms=settings.DECAY_MIN_ELAPSED_MS)

    if pet.state.model_dump(by_alias=True) != _stored_fields(document):
        await _save_pet_state_to_db(pet.state)
        log.debug("pet_needs_caught_up", pet_id=pet_id, new_state=pet.state.model_dump(exclude={"id"}))
    return pet


async def get_pet_state(pet_id: str) -> PetState:
    pet = await _load_current_pet(pet_id, current_time_ms())
    return pet.state


async def get_need_info(pet_id: str) -> List[NeedInfo]:
    pet_state = await get_pet_state(pet_id)
    return build_need_info(pet_state)


async def _perform_pet_action(pet_id: str, action_func_name: str, **kwargs) -> PetState:
    now = current_time_ms()
    pet_instance = await _load_current_pet(pet_id, now)
    action_method = getattr(pet_instance, action_func_name)
    action_method(now=now, **kwargs)
    await _save_pet_state_to_db(pet_instance.state)
    log.info(f"pet_action_{action_func_name}", pet_id=pet_id, **kwargs,
             new_state=pet_instance.state.model_dump(exclude={'id'}))
    return pet_instance.state


async def feed_pet(pet_id: str, amount: int = 25) -> PetState:
    return await _perform_pet_action(pet_id, "feed", amount=amount)


async def groom_pet(pet_id: str, amount: int = 40) -> PetState:
    return await _perform_pet_action(pet_id, "groom", amount=amount)


async def play_with_pet(pet_id: str, amount: int = 20) -> PetState:
    return await _perform_pet_action(pet_id, "play", amount=amount)


async def show_affection(pet_id: str, amount: int = 5) -> PetState:
    pet_state = await _perform_pet_action(pet_id, "show_affection", amount=amount,
                                          daily_cap=settings.AFFECTION_DAILY_GAIN_CAP)
    if pet_state.affection_gained_today >= settings.AFFECTION_DAILY_GAIN_CAP:
        log.info("affection_daily_cap_reached", pet_id=pet_id)
    return pet_state


async def reset_pet(pet_id: str) -> PetState:
    pet_state = default_pet(current_time_ms()).model_copy(update={"id": pet_id})
    await _save_pet_state_to_db(pet_state)
    log.warning("pet_reset_to_defaults", pet_id=pet_id)
    return pet_state
