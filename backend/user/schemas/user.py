from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class UserCreate(BaseModel):
    name: str = Field(min_length=2, max_length=30)
    email: EmailStr
    password: str = Field(min_length=6, max_length=30)


class UserSchema(BaseModel):
    id: str
    name: str
    email: EmailStr
    avatar: str = ""
    date: Optional[datetime] = None


class UserRef(BaseModel):
    """Owner data denormalized into profile responses."""

    id: str
    name: str = ""
    avatar: str = ""
