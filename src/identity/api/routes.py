"""FastAPI endpoints for the Identity domain."""

import json

from fastapi import APIRouter, Depends, HTTPException
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from identity.api.schemas import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
)
from identity.user.authentication import INVALID_CREDENTIALS, authenticate, issue_token
from identity.user.profile import UpdateProfile
from identity.user.registration import RegisterUser
from identity.user.user import User
from shared.logging import get_logger
from shared.security import Principal, require_user

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _auth_response(user) -> AuthResponse:
    return AuthResponse(id=str(user.id), name=user.name, email=user.email, role=user.role, token=issue_token(user))


@router.post("/register", status_code=201, response_model=AuthResponse)
async def register_user(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(name=body.name, email=body.email, password=body.password)
    user_id = current_domain.process(command, asynchronous=False)
    logger.info("user_registered", user_id=user_id)

    user = current_domain.repository_for(User).get(user_id)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    try:
        user = authenticate(body.email, body.password)
    except ValidationError:
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS) from None
    return _auth_response(user)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(principal: Principal = Depends(require_user)) -> ProfileResponse:
    user = current_domain.repository_for(User).get(principal.user_id)
    return ProfileResponse.from_user(user)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(body: UpdateProfileRequest, principal: Principal = Depends(require_user)) -> ProfileResponse:
    command = UpdateProfile(
        user_id=principal.user_id,
        name=body.name,
        email=body.email,
        password=body.password,
        phone=body.phone,
        address=json.dumps(body.address.model_dump()) if body.address is not None else None,
    )
    current_domain.process(command, asynchronous=False)

    # Email may have changed, so the caller gets a fresh token
    user = current_domain.repository_for(User).get(principal.user_id)
    return ProfileResponse.from_user(user, token=issue_token(user))
