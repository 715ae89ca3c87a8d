"""Request authentication helpers for routes.

The identity token is read from the `auth_token` cookie, or from an
`Authorization: Bearer` header for API clients.
"""

from fastapi import HTTPException, status

from devnovate.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from devnovate.domain.error import NotFoundError
from devnovate.domain.service import JWTService
from devnovate.util.jwt import JWTError


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the token from the cookie or the Authorization header."""
    if auth_token:
        return auth_token
    if authorization and authorization.startswith("Bearer "):
        return authorization.removeprefix("Bearer ").strip() or None
    return None


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    authorization: str | None = None,
) -> GetCurrentUserResponse:
    """Resolve the registered caller or fail with 401.

    Raises:
        HTTPException: If the token is missing, invalid, or the user isn't registered
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is not registered",
        )


def optional_user_id(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None = None
) -> str | None:
    """User ID for routes where authentication is optional."""
    return jwt_service.get_user_id_from_token(extract_token(auth_token, authorization))
