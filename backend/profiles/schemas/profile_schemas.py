# profiles/schemas/profile_schemas.py
from datetime import datetime
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from typing import Annotated, Any, List, Optional
from user.schemas.user import UserRef

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def split_skills(v: Any) -> Any:
    # "js, node" -> ["js", "node"]
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    if isinstance(v, list):
        return [s.strip() for s in v if isinstance(s, str) and s.strip()]
    return v


class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ProfileCreate(BaseModel):
    handle: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str
    skills: Annotated[List[str], BeforeValidator(split_skills)]
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Optional[SocialLinks] = None

    @model_validator(mode="before")
    @classmethod
    def lift_social_links(cls, data: Any) -> Any:
        """Accept platform links at the top level as well as under ``social``."""
        if not isinstance(data, dict):
            return data
        top = {k: data[k] for k in SOCIAL_PLATFORMS if data.get(k)}
        if not top:
            return data
        data = {k: v for k, v in data.items() if k not in SOCIAL_PLATFORMS}
        social = dict(data.get("social") or {})
        social.update(top)
        data["social"] = social
        return data


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    company: str
    location: Optional[str] = None
    from_date: datetime = Field(alias="from")
    to: Optional[datetime] = None
    current: bool = True
    description: Optional[str] = None


class EducationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: str
    degree: str
    fieldofstudy: str
    from_date: datetime = Field(alias="from")
    to: Optional[datetime] = None
    current: bool = True
    description: Optional[str] = None


class ExperienceOut(ExperienceCreate):
    id: str
    from_date: Optional[datetime] = Field(default=None, alias="from")


class EducationOut(EducationCreate):
    id: str
    from_date: Optional[datetime] = Field(default=None, alias="from")


class ProfileOut(BaseModel):
    id: str
    user: Optional[UserRef] = None
    handle: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: List[ExperienceOut] = Field(default_factory=list)
    education: List[EducationOut] = Field(default_factory=list)
    date: Optional[datetime] = None
