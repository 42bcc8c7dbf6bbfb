"""
Shared fixtures: the FastAPI app with every external client replaced by mocks.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from medrelay.api.dependencies.services import (
    get_completion_relay,
    get_media_uploader,
    get_profile_gateway,
)
from medrelay.services.llm.completion_relay import CompletionRelay
from medrelay.services.media.cloudinary_uploader import MediaUploader
from medrelay.services.profiles.profile_gateway import ProfileGateway

USER_ID = "3f7c2a9e-user"
TOKEN = "valid-token"


def completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def make_supabase(user_id=USER_ID, profile=None, profile_error=None, auth_error=None):
    """MagicMock standing in for a supabase Client."""
    client = MagicMock()

    if auth_error is not None:
        client.auth.get_user.side_effect = auth_error
    else:
        user = SimpleNamespace(id=user_id) if user_id else None
        client.auth.get_user.return_value = SimpleNamespace(user=user)

    execute = (
        client.table.return_value.select.return_value.eq.return_value
        .maybe_single.return_value.execute
    )
    if profile_error is not None:
        execute.side_effect = profile_error
    else:
        execute.return_value = SimpleNamespace(data=profile) if profile is not None else None

    return client


def make_openai(content="Generated reply"):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion(content))
    return client


@pytest.fixture
def supabase_client():
    return make_supabase()


@pytest.fixture
def openai_client():
    return make_openai()


@pytest.fixture
def client(supabase_client, openai_client):
    """TestClient with the external-service wrappers built on mocks."""
    app.dependency_overrides[get_profile_gateway] = lambda: ProfileGateway(supabase_client)
    app.dependency_overrides[get_completion_relay] = lambda: CompletionRelay(openai_client)
    app.dependency_overrides[get_media_uploader] = lambda: MediaUploader(folder="notes_images")
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
