"""Authentication routes.

Tokens are issued by the external identity provider; these routes only
register the local profile and return it.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status

from devnovate.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from devnovate.domain.service import JWTService
from devnovate.interface.api.auth import extract_token, require_user
from devnovate.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post("/register", response_model=RegisterResponse)
async def register(
    register_use_case: FromDishka[RegisterUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> RegisterResponse:
    """Create the local profile for the token's identity.

    Idempotent: an already registered user gets their existing profile.

    Raises:
        HTTPException: If the token is missing or invalid
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to register",
        )

    try:
        payload = jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    return await register_use_case.execute(
        RegisterRequest(user_id=payload.sub, email=payload.email)
    )


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the current user's profile, including role."""
    return await require_user(get_current_user_use_case, auth_token, authorization)
