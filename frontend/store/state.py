# store/state.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthState(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_authenticated: bool = False
    # claims decoded on the client: display only, never an authorization input
    user: Dict[str, Any] = Field(default_factory=dict)


class ProfileState(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: Optional[Dict[str, Any]] = None
    profiles: List[Dict[str, Any]] = Field(default_factory=list)
    loading: bool = False


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    auth: AuthState = Field(default_factory=AuthState)
    profile: ProfileState = Field(default_factory=ProfileState)
    errors: Dict[str, Any] = Field(default_factory=dict)
