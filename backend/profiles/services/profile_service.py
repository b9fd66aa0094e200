# profiles/services/profile_service.py
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from profiles.schemas.profile_schemas import (
    EducationCreate, ExperienceCreate, ProfileCreate, ProfileOut)
from user.schemas.user import UserRef
from user.services.user_service import delete_user, to_object_id

logger = logging.getLogger(__name__)

Entry = Dict[str, Any]


# ------------------ Embedded lists ------------------


def add_at_head(entries: List[Entry], entry: Entry) -> List[Entry]:
    """New list with ``entry`` at index 0; newest entries come first."""
    return [entry] + list(entries or [])


def remove_by_id(entries: List[Entry], entry_id: str) -> List[Entry]:
    """
    New list without the entry whose ``_id`` matches ``entry_id``.
    Exactly one element is removed; an unknown id leaves the list as is.
    """
    entries = list(entries or [])
    ids = [str(e.get("_id")) for e in entries]
    if entry_id not in ids:
        return entries
    idx = ids.index(entry_id)
    return entries[:idx] + entries[idx + 1:]


# ------------------ Mapping helpers ------------------


def _entry_out(entry: Entry) -> Entry:
    out = {k: v for k, v in entry.items() if k != "_id"}
    out["id"] = str(entry.get("_id"))
    return out


def _doc_to_profile(doc: dict, owner: Optional[dict]) -> ProfileOut:
    user_ref = None
    if owner:
        user_ref = UserRef(id=str(owner["_id"]), name=owner.get(
            "name", ""), avatar=owner.get("avatar", ""))
    elif doc.get("user") is not None:
        user_ref = UserRef(id=str(doc["user"]))
    return ProfileOut(
        id=str(doc["_id"]),
        user=user_ref,
        handle=doc.get("handle"),
        company=doc.get("company"),
        website=doc.get("website"),
        location=doc.get("location"),
        status=doc["status"],
        skills=doc.get("skills", []),
        bio=doc.get("bio"),
        githubusername=doc.get("githubusername"),
        social=doc.get("social") or {},
        experience=[_entry_out(e) for e in doc.get("experience", [])],
        education=[_entry_out(e) for e in doc.get("education", [])],
        date=doc.get("date"),
    )


async def _owners(db: AsyncIOMotorDatabase, user_ids: List[ObjectId]) -> Dict[ObjectId, dict]:
    """Owner name/avatar keyed by user id (the populate step)."""
    if not user_ids:
        return {}
    cursor = db["users"].find(
        {"_id": {"$in": user_ids}}, {"name": 1, "avatar": 1})
    return {doc["_id"]: doc async for doc in cursor}


async def _populate(db: AsyncIOMotorDatabase, doc: dict) -> ProfileOut:
    owners = await _owners(db, [doc["user"]])
    return _doc_to_profile(doc, owners.get(doc["user"]))


# ------------------ Reads ------------------


async def get_profile_by_user(db: AsyncIOMotorDatabase, user_id: str) -> Optional[ProfileOut]:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    doc = await db["profiles"].find_one({"user": oid})
    return await _populate(db, doc) if doc else None


async def get_profile_by_handle(db: AsyncIOMotorDatabase, handle: str) -> Optional[ProfileOut]:
    doc = await db["profiles"].find_one({"handle": handle})
    return await _populate(db, doc) if doc else None


async def get_profiles(db: AsyncIOMotorDatabase) -> List[ProfileOut]:
    docs = [doc async for doc in db["profiles"].find({})]
    owners = await _owners(db, [d["user"] for d in docs])
    return [_doc_to_profile(d, owners.get(d["user"])) for d in docs]


# ------------------ Writes ------------------


async def upsert_profile(db: AsyncIOMotorDatabase, user_id: str, data: ProfileCreate) -> ProfileOut:
    """
    Creates the caller's profile or updates the supplied fields of the
    existing one. Raises ValueError when the handle belongs to someone else.
    """
    oid = to_object_id(user_id)
    if oid is None:
        raise ValueError("Invalid user id")

    fields = data.model_dump(exclude_none=True, exclude={"social"})
    if data.social is not None:
        fields["social"] = data.social.model_dump(exclude_none=True)

    if data.handle:
        taken = await db["profiles"].find_one({"handle": data.handle, "user": {"$ne": oid}})
        if taken:
            raise ValueError("That handle already exists")

    existing = await db["profiles"].find_one({"user": oid})
    if existing:
        await db["profiles"].update_one({"_id": existing["_id"]}, {"$set": fields})
        logger.info("Updated profile for user %s", user_id)
    else:
        doc = {
            "user": oid,
            **fields,
            "experience": [],
            "education": [],
            "date": datetime.now(timezone.utc),
        }
        await db["profiles"].insert_one(doc)
        logger.info("Created profile for user %s", user_id)

    return await get_profile_by_user(db, user_id)


async def _update_list(
    db: AsyncIOMotorDatabase,
    user_id: str,
    field: str,
    change: Callable[[List[Entry]], List[Entry]],
) -> Optional[ProfileOut]:
    # read -> mutate -> save, last write wins
    oid = to_object_id(user_id)
    if oid is None:
        return None
    doc = await db["profiles"].find_one({"user": oid})
    if not doc:
        return None
    entries = change(doc.get(field, []))
    await db["profiles"].update_one({"_id": doc["_id"]}, {"$set": {field: entries}})
    doc[field] = entries
    return await _populate(db, doc)


def _new_entry(entry: ExperienceCreate | EducationCreate) -> Entry:
    return {"_id": ObjectId(), **entry.model_dump(by_alias=True)}


async def add_experience(db: AsyncIOMotorDatabase, user_id: str, entry: ExperienceCreate) -> Optional[ProfileOut]:
    new = _new_entry(entry)
    return await _update_list(db, user_id, "experience", lambda xs: add_at_head(xs, new))


async def add_education(db: AsyncIOMotorDatabase, user_id: str, entry: EducationCreate) -> Optional[ProfileOut]:
    new = _new_entry(entry)
    return await _update_list(db, user_id, "education", lambda xs: add_at_head(xs, new))


async def delete_experience(db: AsyncIOMotorDatabase, user_id: str, exp_id: str) -> Optional[ProfileOut]:
    return await _update_list(db, user_id, "experience", lambda xs: remove_by_id(xs, exp_id))


async def delete_education(db: AsyncIOMotorDatabase, user_id: str, edu_id: str) -> Optional[ProfileOut]:
    return await _update_list(db, user_id, "education", lambda xs: remove_by_id(xs, edu_id))


async def delete_account(db: AsyncIOMotorDatabase, user_id: str) -> bool:
    """Profile first, then the user. Not transactional."""
    oid = to_object_id(user_id)
    if oid is None:
        return False
    await db["profiles"].delete_one({"user": oid})
    deleted = await delete_user(db, user_id)
    logger.info("Deleted account %s (user removed: %s)", user_id, deleted)
    return deleted
