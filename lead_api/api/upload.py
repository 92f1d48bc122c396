"""Video upload endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from lead_api.api.dependencies import get_upload_identity, get_video_storage
from lead_api.errors import ValidationError
from lead_api.schemas.upload import UploadResponse
from lead_api.services.tokens import TokenClaims
from lead_api.services.uploads import VideoStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=UploadResponse)
async def upload_video(
    storage: Annotated[VideoStorage, Depends(get_video_storage)],
    identity: Annotated[TokenClaims | None, Depends(get_upload_identity)],
    video: Annotated[
        UploadFile | None, File(description="Video file (mp4, webm, ogg, mov, avi, mkv)")
    ] = None,
):
    """Store a single video file on local disk and return its metadata.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    if video is None:
        raise ValidationError("No file uploaded")

    stored = await storage.save(video)
    if identity is not None:
        logger.info(f"Upload {stored.filename} by {identity.email}")
    return UploadResponse(file=stored)
