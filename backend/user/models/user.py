from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class User(BaseModel):
    """Internal user model (carries password_hash, never returned by the API)."""

    id: Optional[str] = None
    name: str = Field(min_length=2, max_length=30)
    email: EmailStr
    password_hash: str
    avatar: str = ""
    date: Optional[datetime] = None
