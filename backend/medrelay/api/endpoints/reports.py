"""
Medical report image analysis endpoint.
"""
from typing import Union

from fastapi import APIRouter, Depends, File, UploadFile, status

from medrelay.api.dependencies.services import get_completion_relay, get_media_uploader
from medrelay.api.models import ErrorResponse, GeneratedTextResponse
from medrelay.controllers.report_controller import ReportController
from medrelay.services.llm.completion_relay import CompletionRelay
from medrelay.services.media.cloudinary_uploader import MediaUploader


def get_report_controller(
    uploader: MediaUploader = Depends(get_media_uploader),
    relay: CompletionRelay = Depends(get_completion_relay),
) -> ReportController:
    """Dependency injection for ReportController."""
    return ReportController(uploader, relay)


router = APIRouter()


@router.post(
    "/reports",
    status_code=status.HTTP_200_OK,
    response_model=GeneratedTextResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No image provided"},
        500: {"model": ErrorResponse, "description": "Upload or LLM failure"},
    },
)
async def analyze_report(
    image: Union[UploadFile, str, None] = File(default=None),
    controller: ReportController = Depends(get_report_controller),
) -> GeneratedTextResponse:
    """
    Analyze an uploaded medical report image.

    Anything other than an uploaded file in `image` counts as no image.
    The image is hosted on Cloudinary first; the LLM reads it from the
    returned URL and answers with a structured summary.
    """
    generated_text = await controller.analyze_report(image)
    return GeneratedTextResponse(generated_text=generated_text)
