"""
Controller for medical report image analysis.
"""
import logging
from typing import Union

from starlette.datastructures import UploadFile

from medrelay.services.llm.completion_relay import CompletionRelay
from medrelay.services.media.cloudinary_uploader import MediaUploader
from medrelay.utils.exceptions import InputValidationError

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "No image provided"


class ReportController:
    """Controller for /reports."""

    def __init__(self, uploader: MediaUploader, relay: CompletionRelay):
        self.uploader = uploader
        self.relay = relay

    async def analyze_report(self, image: Union[UploadFile, str, None]) -> str:
        """
        Host the uploaded report image and ask the LLM to analyze it.

        Args:
            image: The `image` form value; only an uploaded file is accepted

        Raises:
            InputValidationError: If no file was uploaded as `image`
            UploadError: If the media host rejects the image
        """
        # FastAPI passes through starlette's UploadFile, not its own subclass
        if not isinstance(image, UploadFile):
            raise InputValidationError(NO_IMAGE_MESSAGE)

        buffer = await image.read()
        logger.info(
            f"Received file: {image.filename} "
            f"({image.content_type}, {len(buffer)} bytes)"
        )

        image_url = await self.uploader.upload(buffer, filename=image.filename)
        return await self.relay.complete_with_image(image_url)
