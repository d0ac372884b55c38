"""Response schema for the image upload endpoint."""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Public URL of the stored image; pass it as imageUrl when creating a meal."""

    image_url: str = Field(
        ...,
        serialization_alias="imageUrl",
        description="Absolute URL the stored image is served from.",
    )
