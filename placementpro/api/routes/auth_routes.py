"""
Authentication Routes

POST /auth/register - Create account and log in
POST /auth/login - Login and get token
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, Depends

from placementpro.core.auth import create_access_token, get_current_user
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import (
    LoginRequest, RegisterRequest, TokenResponse, UserResponse
)
from placementpro.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _token_for(user) -> TokenResponse:
    token = create_access_token(data={"sub": user.id, "role": user.role})
    return TokenResponse(access_token=token, user_id=user.id, role=user.role)


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(request: RegisterRequest, store: RecordStore = Depends(get_record_store)):
    """Register a new account. The response already carries a session token."""
    user = UserService(store).register(request)
    return _token_for(user)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, store: RecordStore = Depends(get_record_store)):
    """
    Login and receive an access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = UserService(store).authenticate(request.email, request.password)
    return _token_for(user)


@router.get("/me", response_model=UserResponse)
async def get_me(user=Depends(get_current_user)):
    """Get current authenticated user's info."""
    return UserResponse(id=user.id, email=user.email, name=user.name, role=user.role)
