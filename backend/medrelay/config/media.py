"""
Cloudinary SDK configuration.

The cloudinary SDK keeps its credentials in module-level state, so they are
applied exactly once per process.
"""
import logging
from functools import lru_cache

import cloudinary

from medrelay.config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def configure_cloudinary() -> bool:
    """Apply Cloudinary credentials from settings. Returns whether they were complete."""
    settings = get_settings()

    cloudinary.config(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
        secure=True,
    )

    if not settings.cloudinary_configured:
        logger.error(
            "Cloudinary configuration missing! Check CLOUDINARY_CLOUD_NAME, "
            "CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET"
        )
        return False
    return True
