"""Artist onboarding router."""

from typing import Any

from fastapi import APIRouter, Body, status

from app.dependencies import ArtistRepo, Onboarding
from app.schemas.artist import Artist
from app.schemas.onboard import FieldErrorsResponse

router = APIRouter()


@router.post(
    "",
    response_model=Artist,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an artist profile",
    responses={
        status.HTTP_409_CONFLICT: {"description": "Another submission is still in progress"},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": FieldErrorsResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "The profile could not be stored"},
    },
)
async def submit_artist(
    onboarding: Onboarding,
    repository: ArtistRepo,
    data: dict[str, Any] = Body(..., description="Onboarding form fields (camelCase)"),
):
    """
    Submit the onboarding form.

    The whole form is validated at once and every invalid field gets its
    own message. Valid submissions are stored as pending artists with
    rating 0 and experience "New".
    """
    return await onboarding.submit(data, repository)
