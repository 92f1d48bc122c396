"""Local disk storage for uploaded video files."""

import logging
import secrets
import time
from pathlib import Path

from fastapi import UploadFile

from lead_api.errors import ErrorKind, PayloadTooLargeError, ValidationError
from lead_api.schemas.upload import UploadedFile

logger = logging.getLogger(__name__)

ALLOWED_VIDEO_TYPES = {
    "video/mp4",
    "video/webm",
    "video/ogg",
    "video/quicktime",
    "video/x-msvideo",
    "video/x-matroska",
}

CHUNK_SIZE = 1024 * 1024


class VideoStorage:
    """Validate and persist raw video uploads under ``upload_dir``."""

    def __init__(self, upload_dir: str | Path, max_bytes: int, url_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def make_filename(self, original_name: str | None, field_name: str = "video") -> str:
        """Randomised name that keeps the original extension."""
        suffix = Path(original_name or "").suffix.lower()
        unique = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        return f"{field_name}-{unique}{suffix}"

    async def save(self, file: UploadFile) -> UploadedFile:
        """Copy an upload to disk in chunks, enforcing type and size limits.

        Starlette has already spooled the multipart body by the time this runs,
        so the size limit bounds what is written to ``upload_dir``, not what the
        server receives.
        """
        if file.content_type not in ALLOWED_VIDEO_TYPES:
            raise ValidationError(
                "Invalid file type. Only video files are allowed.",
                kind=ErrorKind.INVALID_FILE_TYPE,
            )

        target = self.ensure_dir() / self.make_filename(file.filename)
        size = 0
        try:
            with open(target, "wb") as out:
                while chunk := await file.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise PayloadTooLargeError(
                            f"File size exceeds the {self.max_bytes // (1024 * 1024)}MB limit"
                        )
                    out.write(chunk)
        except BaseException:
            target.unlink(missing_ok=True)
            raise

        logger.info(f"File uploaded successfully: {target.name} ({size} bytes)")
        return UploadedFile(
            filename=target.name,
            original_name=file.filename or "",
            mime_type=file.content_type,
            size=size,
            path=str(target),
            url=f"{self.url_prefix}/{target.name}",
        )
