"""
Dependency providers for external-service wrappers.

Clients are process-wide and built once from settings; the thin wrappers
around them are created per request.
"""
from fastapi import Depends
from openai import AsyncOpenAI

from medrelay.config.database import SupabaseClient
from medrelay.config.llm import get_openai_client
from medrelay.config.settings import Settings, get_settings
from medrelay.services.llm.completion_relay import CompletionRelay
from medrelay.services.media.cloudinary_uploader import MediaUploader
from medrelay.services.profiles.profile_gateway import ProfileGateway


def get_profile_gateway(client: SupabaseClient) -> ProfileGateway:
    return ProfileGateway(client)


def get_completion_relay(
    client: AsyncOpenAI = Depends(get_openai_client),
    settings: Settings = Depends(get_settings),
) -> CompletionRelay:
    return CompletionRelay(
        client,
        model=settings.openai_model,
        report_max_tokens=settings.report_max_tokens,
        report_temperature=settings.report_temperature,
    )


def get_media_uploader(settings: Settings = Depends(get_settings)) -> MediaUploader:
    return MediaUploader(folder=settings.cloudinary_folder)
