# phraipets/api/v1/endpoints/pet_interactions.py
from fastapi import APIRouter, Body
from typing import List
from phraipets.services import pet_service
from phraipets.models.needs import MAX_NEED_VALUE
from phraipets.models.pet import PetState, NeedInfo  # Pydantic models for responses

router = APIRouter()


@router.get("/pets/{pet_id}", response_model=PetState)
async def get_pet_endpoint(pet_id: str):
    """Get the pet with its needs caught up to now. A missing pet is created with defaults."""
    return await pet_service.get_pet_state(pet_id)


@router.get("/pets/{pet_id}/needs", response_model=List[NeedInfo])
async def get_pet_needs_endpoint(pet_id: str):
    """Needs of the pet with their display labels."""
    return await pet_service.get_need_info(pet_id)


@router.post("/pets/{pet_id}/feed", response_model=PetState)
async def feed_pet_endpoint(pet_id: str, amount: int = Body(default=25, embed=True, ge=0, le=MAX_NEED_VALUE)):
    return await pet_service.feed_pet(pet_id, amount)


@router.post("/pets/{pet_id}/groom", response_model=PetState)
async def groom_pet_endpoint(pet_id: str, amount: int = Body(default=40, embed=True, ge=0, le=MAX_NEED_VALUE)):
    return await pet_service.groom_pet(pet_id, amount)


@router.post("/pets/{pet_id}/play", response_model=PetState)
async def play_with_pet_endpoint(pet_id: str, amount: int = Body(default=20, embed=True, ge=0, le=MAX_NEED_VALUE)):
    return await pet_service.play_with_pet(pet_id, amount)


@router.post("/pets/{pet_id}/affection", response_model=PetState)
async def show_affection_endpoint(pet_id: str, amount: int = Body(default=5, embed=True, ge=0, le=MAX_NEED_VALUE)):
    """Pet the pet. Affection gains are capped per calendar day."""
    return await pet_service.show_affection(pet_id, amount)


@router.post("/pets/{pet_id}/reset", response_model=PetState)
async def reset_pet_endpoint(pet_id: str):
    """Replace the pet with a fresh default record."""
    return await pet_service.reset_pet(pet_id)
