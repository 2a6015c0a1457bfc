"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.rest.dependencies import get_profile_service
from api.rest.schemas.common import MessageResponse
from api.rest.schemas.profile import (
    ExperienceCreate,
    ExperienceResponse,
    ProfileResponse,
    ProfileUpsert,
    SocialLinks,
)
from api.rest.schemas.user import UserSummaryResponse
from core.rate_limit import limiter
from domain.entities.profile import Experience, ProfileWithUser
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get my profile",
    responses={404: {"description": "No profile for this user"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the authenticated user's profile with name and avatar."""
    joined = await service.get_for_user(user.id)
    return _build_profile_response(joined)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update my profile",
    responses={400: {"description": "Status and skills are required"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create the authenticated user's profile, or update it if it exists.

    On update only the fields present in the request overwrite stored values.
    """
    joined = await service.upsert(
        user_id=user.id,
        status=body.status,
        skills=body.skills,
        company=body.company,
        website=body.website,
        location=body.location,
        bio=body.bio,
        githubusername=body.githubusername,
        social=body.social_links(),
    )
    return _build_profile_response(joined)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    """Get every profile. Public."""
    profiles = await service.get_all()
    return [_build_profile_response(joined) for joined in profiles]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a profile by user ID",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the profile owned by a user. Public."""
    joined = await service.get_by_user_id(user_id)
    return _build_profile_response(joined)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete my profile and account",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the authenticated user's profile and user record. Posts are kept."""
    await service.delete_account(user.id)
    return MessageResponse(message="User has been deleted")


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add profile experience",
    responses={
        400: {"description": "Title, company and from are required"},
        404: {"description": "No profile for this user"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an experience entry at the top of the authenticated user's history."""
    joined = await service.add_experience(
        user.id,
        Experience(
            title=body.title,
            company=body.company,
            location=body.location,
            from_date=body.from_date,
            to_date=body.to_date,
            current=body.current,
            description=body.description,
        ),
    )
    return _build_profile_response(joined)


def _build_profile_response(joined: ProfileWithUser) -> ProfileResponse:
    profile = joined.profile
    return ProfileResponse(
        id=profile.id,
        user=UserSummaryResponse.model_validate(joined.user),
        status=profile.status,
        skills=profile.skills,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        githubusername=profile.githubusername,
        social=SocialLinks(**profile.social),
        experience=[
            ExperienceResponse(
                id=entry.id,
                title=entry.title,
                company=entry.company,
                location=entry.location,
                from_date=entry.from_date,
                to_date=entry.to_date,
                current=entry.current,
                description=entry.description,
            )
            for entry in profile.experience
        ],
        created_at=profile.created_at,
    )
