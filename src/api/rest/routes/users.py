"""User registration routes."""

from fastapi import APIRouter, Depends, Request

from api.rest.dependencies import get_user_service
from api.rest.schemas.user import TokenResponse, UserCreate
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "User registered; token returned"},
        400: {"description": "Validation error or email already registered"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Register with name, email and password and receive an auth token."""
    token = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return TokenResponse(token=token)
