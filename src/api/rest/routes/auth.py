"""Authentication routes: login and current-user lookup."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.rest.dependencies import get_user_service
from api.rest.schemas.user import LoginRequest, TokenResponse, UserResponse
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
    responses={
        401: {"description": "Missing or invalid token"},
        404: {"description": "User no longer exists"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_authenticated_user(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user the token belongs to, without the password."""
    record = await service.get_by_id(user.id)
    return UserResponse.model_validate(record)


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        200: {"description": "Credentials accepted; token returned"},
        401: {"description": "Invalid Credentials"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange email and password for an auth token."""
    token = await service.login(email=body.email, password=body.password)
    return TokenResponse(token=token)
