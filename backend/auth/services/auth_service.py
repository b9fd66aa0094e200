# auth/services/auth_service.py
from datetime import datetime, timedelta, timezone
import logging
from typing import Any, Dict
import jwt
from core.config import get_settings
from user.models.user import User
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from core.database import get_db

from user.services.user_service import get_user_by_email, get_user_by_id, verify_password

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


class TokenExpired(Exception):
    pass


class InvalidToken(Exception):
    pass


async def authenticate_user(db, email: str, password: str):
    user = await get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_access_token(user: User) -> str:
    cfg = get_settings()
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=cfg.JWT_ACCESS_EXPIRES_MIN)
    payload = {
        "sub": user.id,
        # display data for the client; the server only trusts "sub"
        "id": user.id,
        "name": user.name,
        "avatar": user.avatar,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, cfg.JWT_SECRET_KEY, algorithm=cfg.JWT_ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """Signature and expiry check. Returns the claims or raises."""
    cfg = get_settings()
    try:
        payload = jwt.decode(token, cfg.JWT_SECRET_KEY,
                             algorithms=[cfg.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as ex:
        raise TokenExpired() from ex
    except jwt.InvalidTokenError as ex:
        raise InvalidToken(str(ex)) from ex
    if not payload.get("sub"):
        raise InvalidToken("missing subject")
    return payload


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db=Depends(get_db),
) -> User:
    """The single guard for every private route."""
    credentials_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = verify_token(token)
    except TokenExpired:
        raise HTTPException(status_code=401, detail="Token expired", headers={
                            "WWW-Authenticate": "Bearer"})
    except InvalidToken as ex:
        logger.debug("Rejected token: %s", ex)
        raise credentials_exc

    user = await get_user_by_id(db, payload["sub"])
    if user is None:
        raise credentials_exc
    return user
