"""
Turns optional multipart image parts into embeddable ImageAssets.
Rejected uploads are not errors: the slot falls back to the placeholder.
"""

import logging
from typing import Optional

from fastapi import UploadFile

from web.config import get_upload_limits
from web.models import CandidateImages, ImageAsset

logger = logging.getLogger(__name__)


def accept_image(
    content: bytes,
    content_type: Optional[str],
    *,
    max_size: int,
    allowed_types: tuple,
) -> Optional[ImageAsset]:
    """Return an ImageAsset, or None if the file is empty, too large or not JPEG/PNG."""
    if not content:
        return None
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime not in allowed_types:
        logger.warning(f"Rejected upload with content type '{content_type}'")
        return None
    if len(content) > max_size:
        logger.warning(f"Rejected upload over the {max_size} byte limit")
        return None
    return ImageAsset(data=content, mime_type=mime)


async def read_image(upload: Optional[UploadFile], limits: Optional[dict] = None) -> ImageAsset:
    """Read one form part; anything unusable becomes the placeholder image."""
    if upload is None or not upload.filename:
        return ImageAsset.placeholder()

    limits = limits or get_upload_limits()
    # One byte past the cap is enough to know the part is oversized.
    try:
        content = await upload.read(limits["max_size"] + 1)
    finally:
        await upload.close()

    asset = accept_image(
        content,
        upload.content_type,
        max_size=limits["max_size"],
        allowed_types=limits["allowed_types"],
    )
    return asset or ImageAsset.placeholder()


async def read_candidate_images(
    profile_photo: Optional[UploadFile],
    full_photo: Optional[UploadFile],
    passport_scan: Optional[UploadFile],
) -> CandidateImages:
    limits = get_upload_limits()
    return CandidateImages(
        profile=await read_image(profile_photo, limits),
        full_photo=await read_image(full_photo, limits),
        passport=await read_image(passport_scan, limits),
    )
