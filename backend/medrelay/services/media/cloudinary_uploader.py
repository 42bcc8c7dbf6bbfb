"""
Uploads report images to Cloudinary to obtain a public HTTPS URL.
"""
import io
import logging
from typing import Optional

import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

from medrelay.utils.exceptions import UploadError

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "notes_images"


class MediaUploader:
    """Cloudinary upload wrapper. Credentials come from `configure_cloudinary`."""

    def __init__(self, folder: str = DEFAULT_FOLDER):
        self.folder = folder

    async def upload(self, buffer: bytes, filename: Optional[str] = None) -> str:
        """
        Upload an in-memory image.

        Args:
            buffer: Raw image bytes
            filename: Original filename, used only for logging

        Returns:
            The secure (HTTPS) URL of the hosted image

        Raises:
            UploadError: If Cloudinary rejects the upload or cannot be reached
        """
        try:
            result = await run_in_threadpool(
                cloudinary.uploader.upload,
                io.BytesIO(buffer),
                folder=self.folder,
            )
        except Exception as e:
            logger.error(f"Cloudinary upload error: {e}", extra={"upload_filename": filename})
            raise UploadError(str(e) or "Image upload failed") from e

        secure_url = (result or {}).get("secure_url")
        if not secure_url:
            logger.error("Cloudinary upload error: response missing secure_url")
            raise UploadError("Image upload did not return a URL")

        logger.info(f"Uploaded {filename or 'image'} to {secure_url}")
        return secure_url
