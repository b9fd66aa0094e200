# user/services/user_service.py
import hashlib
import logging
from datetime import datetime, timezone
from user.schemas.user import UserSchema, UserCreate
from user.models.user import User
from passlib.context import CryptContext
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId
from bson.errors import InvalidId
from typing import Optional

logger = logging.getLogger(__name__)

_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return _pwd.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return _pwd.verify(plain, hashed)


def gravatar_url(email: str, size: int = 200) -> str:
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


def to_object_id(value: str) -> Optional[ObjectId]:
    """ObjectId for a path/claim value, or None when it is not a valid id."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None

# ------------------ Mapping helpers ------------------


def _doc_to_user(doc: dict) -> User:
    """Internal User model (with password_hash)."""
    return User(
        id=str(doc.get("_id")),
        name=doc["name"],
        email=doc["email"],
        password_hash=doc["password_hash"],
        avatar=doc.get("avatar", ""),
        date=doc.get("date"),
    )


def _doc_to_userschema(doc: dict) -> UserSchema:
    """Public UserSchema (no password)."""
    return UserSchema(
        id=str(doc.get("_id")),
        name=doc["name"],
        email=doc["email"],
        avatar=doc.get("avatar", ""),
        date=doc.get("date"),
    )


def user_to_schema(user: User) -> UserSchema:
    return UserSchema(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        date=user.date,
    )

# ------------------ Auth queries ------------------


async def get_user_by_email(db: AsyncIOMotorDatabase, email: str) -> Optional[User]:
    doc = await db["users"].find_one({"email": email})
    return _doc_to_user(doc) if doc else None


async def get_user_by_id(db: AsyncIOMotorDatabase, user_id: str) -> Optional[User]:
    _id = to_object_id(user_id)
    if _id is None:
        return None
    doc = await db["users"].find_one({"_id": _id})
    return _doc_to_user(doc) if doc else None

# ------------------ Used by the routers ------------------


async def create_user(db: AsyncIOMotorDatabase, payload: UserCreate) -> UserSchema:
    email = payload.email.strip().lower()
    existing = await db["users"].find_one({"email": email})
    if existing:
        raise ValueError("Email already exists")

    doc = {
        "name": payload.name.strip(),
        "email": email,
        "password_hash": hash_password(payload.password),
        "avatar": gravatar_url(email),
        "date": datetime.now(timezone.utc),
    }
    res = await db["users"].insert_one(doc)
    doc["_id"] = res.inserted_id
    logger.info("Registered user %s", res.inserted_id)
    return _doc_to_userschema(doc)


async def delete_user(db: AsyncIOMotorDatabase, user_id: str) -> bool:
    _id = to_object_id(user_id)
    if _id is None:
        return False
    res = await db["users"].delete_one({"_id": _id})
    return res.deleted_count == 1
