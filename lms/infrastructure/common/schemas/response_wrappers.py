"""Common schemas shared by every API module."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base schema for API payloads.

    Serialized with camelCase keys; requests may use camelCase or snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(ApiModel):
    """Generic success response wrapper."""

    success: bool = True
    message: str


class ErrorResponse(ApiModel):
    """Body of every failed request."""

    success: bool = False
    message: str


class MediaAsset(ApiModel):
    """Reference to a stored media file."""

    public_id: str
    url: str
