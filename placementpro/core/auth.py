"""
Session tokens.

Login hands out a JWT whose subject is the user id. Every request resolves
that id against the users collection, so the "current user" is always the
stored profile rather than a snapshot taken at login.
"""

from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from placementpro.core.config import get_settings
from placementpro.core.exceptions import AuthenticationError, PermissionDeniedError
from placementpro.db.repository import users_repo
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import AlumniUser, StaffUser, StudentUser

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    store: RecordStore = Depends(get_record_store),
):
    """
    FastAPI dependency - the stored profile of the logged-in user.

    Usage:
        @router.get("/me")
        def me(user = Depends(get_current_user)):
            return user
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise AuthenticationError("Invalid or expired token")

    user = users_repo(store).get(payload["sub"])
    if user is None:
        raise AuthenticationError("Invalid or expired token")
    return user


def get_current_tpo(user=Depends(get_current_user)) -> StaffUser:
    """Dependency - Require placement office staff."""
    if not isinstance(user, StaffUser):
        raise PermissionDeniedError("Placement office only")
    return user


def get_current_student(user=Depends(get_current_user)) -> StudentUser:
    """Dependency - Require student role."""
    if not isinstance(user, StudentUser):
        raise PermissionDeniedError("Students only")
    return user


def get_current_alumni(user=Depends(get_current_user)) -> AlumniUser:
    """Dependency - Require alumni role."""
    if not isinstance(user, AlumniUser):
        raise PermissionDeniedError("Alumni only")
    return user
