# user/routes/user_router.py
from fastapi import APIRouter, Depends
from auth.services.auth_service import get_current_user

from user.schemas.user import UserSchema
from user.models.user import User
from user.services.user_service import user_to_schema

user_router = APIRouter(prefix="/users", tags=["Users"])


@user_router.get("/me", response_model=UserSchema)
async def me(current_user: User = Depends(get_current_user)):
    return user_to_schema(current_user)
