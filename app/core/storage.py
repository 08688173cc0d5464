import os
import uuid
import logging
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from .config import Settings

logger = logging.getLogger(__name__)


class InvalidUpload(Exception):
    """Raised when an uploaded file is not an acceptable image"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocalImageStorage:
    """Stores uploaded images in the local upload directory served at /uploads"""

    def __init__(self, settings: Settings):
        self.directory = Path(settings.UPLOAD_DIRECTORY)
        self.url_prefix = settings.UPLOAD_URL_PREFIX.rstrip("/")
        self.max_size = settings.MAX_UPLOAD_SIZE
        self.allowed_extensions = [ext.lower() for ext in settings.ALLOWED_IMAGE_EXTENSIONS]
        self.allowed_types = [content_type.lower() for content_type in settings.ALLOWED_IMAGE_TYPES]

    def _validate_type(self, file: UploadFile) -> str:
        file_extension = os.path.splitext(file.filename)[1].lower()
        content_type = (file.content_type or "").lower()

        if file_extension not in self.allowed_extensions or content_type not in self.allowed_types:
            logger.warning(f"[UPLOAD] Rejected {file.filename} ({content_type or 'no content type'})")
            raise InvalidUpload("Only images are allowed (jpeg, jpg, png, gif)")
        return file_extension

    async def save_image(self, file: Optional[UploadFile]) -> Optional[str]:
        """Validate and store an image, returning its relative URL. No file means no URL."""
        if file is None or not file.filename:
            return None

        file_extension = self._validate_type(file)

        # One byte past the limit is enough to know the file is too large
        content = await file.read(self.max_size + 1)
        if len(content) > self.max_size:
            logger.warning(f"[UPLOAD] Rejected {file.filename}: over {self.max_size} bytes")
            raise InvalidUpload("File upload error: File too large")

        self.directory.mkdir(parents=True, exist_ok=True)
        unique_filename = f"{uuid.uuid4().hex}{file_extension}"
        local_path = self.directory / unique_filename

        # The database row referencing this file is written afterwards;
        # a failure there leaves the file behind.
        with open(local_path, "wb") as out_file:
            out_file.write(content)
        await file.seek(0)

        logger.info(f"[UPLOAD] Saved {file.filename} at {local_path}")
        return f"{self.url_prefix}/{unique_filename}"
