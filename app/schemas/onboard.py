"""Artist onboarding form schemas."""

from typing import Any, Optional

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from app.schemas.artist import FEE_RANGES, CamelModel


def _required_text(value: Any, required: str) -> Any:
    if value is None:
        raise PydanticCustomError("required", required)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise PydanticCustomError("required", required)
    return value


def _required_list(value: Any, message: str) -> Any:
    if value is None:
        raise PydanticCustomError("required", message)
    if isinstance(value, (list, tuple, set)):
        # Drop duplicates, keep selection order. Items may be unhashable
        # until the list[str] check rejects them.
        unique = []
        for item in value:
            if item not in unique:
                unique.append(item)
        value = unique
        if not value:
            raise PydanticCustomError("too_short", message)
    return value


class ArtistSubmission(CamelModel):
    """
    Validated onboarding form fields.

    This is not a stored Artist yet: it has no id, rating or availability.
    See `onboarding_service.to_artist_record` for the mapping.
    """

    model_config = {"validate_default": True}

    name: str = ""
    bio: str = ""
    category: list[str] = []
    languages: list[str] = []
    fee_range: str = ""
    location: str = ""
    profile_image: Optional[str] = None  # URL/reference only, no uploads

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value):
        value = _required_text(value, "Artist name is required")
        if isinstance(value, str):
            if len(value) < 2:
                raise PydanticCustomError("too_short", "Name must be at least 2 characters")
            if len(value) > 50:
                raise PydanticCustomError("too_long", "Name must not exceed 50 characters")
        return value

    @field_validator("bio", mode="before")
    @classmethod
    def _validate_bio(cls, value):
        value = _required_text(value, "Bio is required")
        if isinstance(value, str):
            if len(value) < 20:
                raise PydanticCustomError("too_short", "Bio must be at least 20 characters")
            if len(value) > 500:
                raise PydanticCustomError("too_long", "Bio must not exceed 500 characters")
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _validate_category(cls, value):
        return _required_list(value, "Please select at least one category")

    @field_validator("languages", mode="before")
    @classmethod
    def _validate_languages(cls, value):
        return _required_list(value, "Please select at least one language")

    @field_validator("fee_range", mode="before")
    @classmethod
    def _validate_fee_range(cls, value):
        value = _required_text(value, "Fee range is required")
        if value not in FEE_RANGES:
            raise PydanticCustomError("invalid_choice", "Please select a valid fee range")
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _validate_location(cls, value):
        value = _required_text(value, "Location is required")
        if isinstance(value, str) and len(value) < 3:
            raise PydanticCustomError("too_short", "Location must be at least 3 characters")
        return value

    @field_validator("profile_image", mode="before")
    @classmethod
    def _blank_image_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class FieldErrorsResponse(BaseModel):
    """Body of a 422 response for an invalid onboarding form."""
    detail: str
    errors: dict[str, str]
