# profiles/routes/profile_router.py
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError
from auth.services.auth_service import get_current_user
from core.database import get_db
from profiles.schemas.profile_schemas import (
    EducationCreate, ExperienceCreate, ProfileCreate, ProfileOut)
from profiles.services import profile_service as svc
from user.models.user import User
from validation.validators import (
    validate_education_input, validate_experience_input, validate_profile_input)

profile_router = APIRouter(prefix="/profile", tags=["profile"])

NO_PROFILE = {"noprofile": "There is no profile for this user"}
NO_PROFILES = {"noprofile": "There are no profiles"}


def _not_found(detail: dict = NO_PROFILE) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _checked(validate, model, payload: Dict[str, Any]):
    """Presence check (400) then typed parsing (422)."""
    errors, is_valid = validate(payload)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)
    try:
        return model.model_validate(payload)
    except ValidationError as ex:
        raise HTTPException(
            status_code=422,
            detail=ex.errors(include_url=False, include_context=False))


# ------------------ Public ------------------


@profile_router.get("/all", response_model=List[ProfileOut])
async def list_profiles(db=Depends(get_db)):
    profiles = await svc.get_profiles(db)
    if not profiles:
        raise _not_found(NO_PROFILES)
    return profiles


@profile_router.get("/handle/{handle}", response_model=ProfileOut)
async def get_by_handle(handle: str, db=Depends(get_db)):
    profile = await svc.get_profile_by_handle(db, handle)
    if not profile:
        raise _not_found()
    return profile


@profile_router.get("/user/{user_id}", response_model=ProfileOut)
async def get_by_user(user_id: str, db=Depends(get_db)):
    profile = await svc.get_profile_by_user(db, user_id)
    if not profile:
        raise _not_found()
    return profile


# ------------------ Private ------------------


@profile_router.get("", response_model=ProfileOut)
async def get_own(current_user: User = Depends(get_current_user), db=Depends(get_db)):
    profile = await svc.get_profile_by_user(db, current_user.id)
    if not profile:
        raise _not_found()
    return profile


@profile_router.post("", response_model=ProfileOut)
async def create_or_update(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db=Depends(get_db),
):
    data = _checked(validate_profile_input, ProfileCreate, payload)
    try:
        return await svc.upsert_profile(db, current_user.id, data)
    except ValueError as ex:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail={"handle": str(ex)})


@profile_router.post("/experience", response_model=ProfileOut)
async def add_experience(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db=Depends(get_db),
):
    entry = _checked(validate_experience_input, ExperienceCreate, payload)
    profile = await svc.add_experience(db, current_user.id, entry)
    if not profile:
        raise _not_found()
    return profile


@profile_router.post("/education", response_model=ProfileOut)
async def add_education(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db=Depends(get_db),
):
    entry = _checked(validate_education_input, EducationCreate, payload)
    profile = await svc.add_education(db, current_user.id, entry)
    if not profile:
        raise _not_found()
    return profile


@profile_router.delete("/experience/{exp_id}", response_model=ProfileOut)
async def delete_experience(exp_id: str, current_user: User = Depends(get_current_user), db=Depends(get_db)):
    profile = await svc.delete_experience(db, current_user.id, exp_id)
    if not profile:
        raise _not_found()
    return profile


@profile_router.delete("/education/{edu_id}", response_model=ProfileOut)
async def delete_education(edu_id: str, current_user: User = Depends(get_current_user), db=Depends(get_db)):
    profile = await svc.delete_education(db, current_user.id, edu_id)
    if not profile:
        raise _not_found()
    return profile


@profile_router.delete("")
async def delete_account(current_user: User = Depends(get_current_user), db=Depends(get_db)):
    await svc.delete_account(db, current_user.id)
    return {"success": True}
