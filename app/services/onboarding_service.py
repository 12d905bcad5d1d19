"""
Artist onboarding: form validation, record creation and submission.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import ValidationError

from app.config import get_settings
from app.core.exceptions import ConflictException, FormValidationException, ServiceUnavailableException
from app.schemas.artist import Artist
from app.schemas.onboard import ArtistSubmission
from app.services.artist_repository import ArtistRepository
from app.services.storage_service import StorageError

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    submission: Optional[ArtistSubmission] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.submission is not None and not self.errors


def validate_submission(data: Any) -> ValidationResult:
    """
    Validate a whole onboarding form at once.

    Returns the validated submission, or one error message per invalid
    field keyed by its form name (name, bio, category, languages,
    feeRange, location).
    """
    try:
        return ValidationResult(submission=ArtistSubmission.model_validate(data))
    except ValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            loc = error["loc"]
            field_name = _public_name(str(loc[0])) if loc else "__root__"
            # First failing rule wins
            errors.setdefault(field_name, error["msg"])
        return ValidationResult(errors=errors)


def _public_name(name: str) -> str:
    # pydantic reports the attribute name for defaults and snake_case input
    field_info = ArtistSubmission.model_fields.get(name)
    if field_info is None:
        return name
    return field_info.alias or name


def to_artist_record(submission: ArtistSubmission, now: Optional[datetime] = None) -> Artist:
    """Turn a validated submission into a new, pending Artist record."""
    now = now or datetime.now(timezone.utc)
    return Artist(
        id=str(int(now.timestamp() * 1000)),
        name=submission.name,
        bio=submission.bio,
        category=submission.category,
        languages=submission.languages,
        fee_range=submission.fee_range,
        location=submission.location,
        profile_image=submission.profile_image,
        rating=0,
        experience="New",
        availability=True,
        submitted_at=now,
    )


class OnboardingService:
    """Accepts onboarding forms, one submission at a time."""

    def __init__(self, delay: Optional[float] = None):
        self.delay = get_settings().submit_delay_seconds if delay is None else delay
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit(self, data: Any, repository: ArtistRepository) -> Artist:
        """
        Validate and store an onboarding form.

        Raises:
            FormValidationException: if any field is invalid (nothing stored).
            ConflictException: if another submission hasn't settled yet.
            ServiceUnavailableException: if the artist couldn't be stored.
        """
        result = validate_submission(data)
        if not result.is_valid:
            raise FormValidationException(result.errors)

        if self._in_flight:
            raise ConflictException("A submission is already in progress")

        self._in_flight = True
        try:
            # Simulate API call
            await asyncio.sleep(self.delay)

            artist = to_artist_record(result.submission)
            existing_ids = {a.id for a in await repository.load()}
            while artist.id in existing_ids:
                artist = artist.model_copy(update={"id": str(int(artist.id) + 1)})

            await repository.add(artist)
        except StorageError as e:
            logger.error(f"[OnboardingService] Failed to store submission: {e}")
            raise ServiceUnavailableException("Failed to create profile. Please try again.")
        finally:
            self._in_flight = False

        logger.info(f"[OnboardingService] New artist submitted: {artist.id} ({artist.name})")
        return artist


# Singleton instance
onboarding_service = OnboardingService()
