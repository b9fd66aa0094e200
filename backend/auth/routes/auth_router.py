# auth/routes/auth_router.py
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel, EmailStr, ValidationError
from core.database import get_db
from core.config import get_settings
from auth.services.auth_service import authenticate_user, create_access_token, get_current_user
from user.models.user import User
from user.schemas.user import UserCreate, UserSchema
from user.services.user_service import create_user, user_to_schema
from validation.validators import validate_login_input, validate_register_input

auth_router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


def _token_response(user: User) -> dict[str, Any]:
    cfg = get_settings()
    return {
        "access_token": create_access_token(user),
        "token_type": "bearer",
        "expires_in": cfg.JWT_ACCESS_EXPIRES_MIN * 60,  # seconds
    }


def _parse(model, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except ValidationError as ex:
        raise HTTPException(
            status_code=422,
            detail=ex.errors(include_url=False, include_context=False))


@auth_router.get("", response_model=UserSchema)
async def current(current_user: User = Depends(get_current_user)):
    return user_to_schema(current_user)


@auth_router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def register(payload: Dict[str, Any] = Body(...), db=Depends(get_db)):
    errors, is_valid = validate_register_input(payload)
    if not is_valid:
        raise HTTPException(status_code=400, detail=errors)
    data = _parse(UserCreate, payload)
    try:
        return await create_user(db, data)
    except ValueError as ex:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail={"email": str(ex)})


@auth_router.post("/login")
async def login(payload: Dict[str, Any] = Body(...), db=Depends(get_db)) -> dict[str, Any]:
    errors, is_valid = validate_login_input(payload)
    if not is_valid:
        raise HTTPException(status_code=400, detail=errors)
    data = _parse(LoginRequest, payload)
    user = await authenticate_user(db, data.email.strip().lower(), data.password)
    if not user:
        # same message for unknown email and bad password
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _token_response(user)


@auth_router.post("/token")
async def login_token(
    form: OAuth2PasswordRequestForm = Depends(),
    db=Depends(get_db),
) -> dict[str, Any]:
    email = form.username.strip().lower()  # username carries the email
    user = await authenticate_user(db, email, form.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _token_response(user)
