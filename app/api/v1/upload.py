"""Upload endpoint: accept one meal image (multipart), store it, return its public URL."""

import logging
import time
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from app.core.config import get_settings
from app.core.exceptions import InternalError, InvalidInputError
from app.schemas.upload import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_FIELD_NAME = "mealImage"
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})


def _stored_filename(ext: str) -> str:
    """mealImage-<epoch ms><ext>."""
    return f"{UPLOAD_FIELD_NAME}-{int(time.time() * 1000)}{ext}"


@router.post("", response_model=UploadResponse)
async def upload_image(
    meal_image: Annotated[UploadFile | None, File(alias=UPLOAD_FIELD_NAME)] = None,
) -> UploadResponse:
    """
    Store an image sent as multipart/form-data in the `mealImage` field.

    Returns the URL to pass as imageUrl when creating a meal. The file is served
    back under /uploads.
    """
    settings = get_settings()
    if meal_image is None or not meal_image.filename:
        raise InvalidInputError("No file uploaded.")

    ext = Path(meal_image.filename).suffix.lower()
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise InvalidInputError(
            "Uploaded file must be an image (" + ", ".join(sorted(ALLOWED_IMAGE_EXTENSIONS)) + ")."
        )
    # One byte past the cap is enough to tell an oversized file.
    content = await meal_image.read(settings.UPLOAD_MAX_BYTES + 1)
    if not content:
        raise InvalidInputError("No file uploaded.")
    if len(content) > settings.UPLOAD_MAX_BYTES:
        raise InvalidInputError(
            f"File size must not exceed {settings.UPLOAD_MAX_BYTES // 1024} KB."
        )

    filename = _stored_filename(ext)
    upload_dir = Path(settings.UPLOAD_DIR)
    try:
        upload_dir.mkdir(parents=True, exist_ok=True)
        (upload_dir / filename).write_bytes(content)
    except OSError as e:
        logger.exception("Failed to store upload %s: %s", filename, e)
        raise InternalError("Upload failed.") from e

    logger.info("Stored upload %s (%s bytes)", filename, len(content))
    return UploadResponse(image_url=f"{settings.PUBLIC_BASE_URL}/uploads/{filename}")
