"""
End-to-end tests for POST /ai-analysis with mocked Supabase and OpenAI clients.
"""
from unittest.mock import AsyncMock

import pytest

from conftest import TOKEN, USER_ID, make_supabase
from medrelay.services.prompts import CHAT_SYSTEM_PROMPT

AUTH = {"Authorization": f"Bearer {TOKEN}"}


def payload(**overrides):
    body = {"prompt": "Is it safe to run with a mild fever?", "type": "chat", "userId": USER_ID}
    body.update(overrides)
    return body


def sent_messages(openai_client):
    return openai_client.chat.completions.create.await_args.kwargs["messages"]


def test_success_without_profile(client, openai_client):
    response = client.post("/ai-analysis", json=payload(), headers=AUTH)

    assert response.status_code == 200
    assert response.json() == {"generatedText": "Generated reply"}
    messages = sent_messages(openai_client)
    assert messages[0]["content"] == CHAT_SYSTEM_PROMPT
    assert messages[1]["content"] == "Is it safe to run with a mild fever?"


@pytest.mark.parametrize("supabase_client", [
    make_supabase(profile={"medical_history": "Asthma", "allergies": None, "current_medication": "Albuterol"}),
])
def test_prompt_enriched_with_profile(client, openai_client):
    response = client.post("/ai-analysis", json=payload(), headers=AUTH)

    assert response.status_code == 200
    user_message = sent_messages(openai_client)[1]["content"]
    assert user_message.startswith("Is it safe to run with a mild fever?\n\nPatient Context:")
    assert "- Medical History: Asthma" in user_message
    assert "- Allergies: None" in user_message
    assert "- Current Medication: Albuterol" in user_message


def test_missing_authorization_header(client, openai_client):
    response = client.post("/ai-analysis", json=payload())

    assert response.status_code == 500
    assert response.json() == {"error": "Missing Authorization header"}
    openai_client.chat.completions.create.assert_not_awaited()


@pytest.mark.parametrize("supabase_client", [make_supabase(user_id="another-user")])
def test_identity_mismatch(client, openai_client):
    response = client.post("/ai-analysis", json=payload(), headers=AUTH)

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid or unauthorized user"}
    openai_client.chat.completions.create.assert_not_awaited()


@pytest.mark.parametrize("supabase_client", [make_supabase(auth_error=RuntimeError("bad jwt"))])
def test_rejected_token(client):
    response = client.post("/ai-analysis", json=payload(), headers=AUTH)

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid or unauthorized user"}


@pytest.mark.parametrize("supabase_client", [make_supabase(profile_error=RuntimeError("multiple rows"))])
def test_profile_error_does_not_fail_request(client, openai_client):
    response = client.post("/ai-analysis", json=payload(prompt="  hello  "), headers=AUTH)

    assert response.status_code == 200
    assert sent_messages(openai_client)[1]["content"] == "hello"


def test_empty_llm_output_falls_back(client, openai_client):
    openai_client.chat.completions.create.return_value.choices[0].message.content = None

    response = client.post("/ai-analysis", json=payload(), headers=AUTH)

    assert response.json() == {"generatedText": "No response available."}


def test_llm_error_returns_500_with_message(client, openai_client):
    openai_client.chat.completions.create = AsyncMock(side_effect=RuntimeError("Rate limit reached"))

    response = client.post("/ai-analysis", json=payload(), headers=AUTH)

    assert response.status_code == 500
    assert response.json() == {"error": "Rate limit reached"}


@pytest.mark.parametrize("body", [{}, {"prompt": "hi", "type": "chat"}])
def test_missing_header_is_reported_before_body_checks(client, supabase_client, body):
    response = client.post("/ai-analysis", json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Missing Authorization header"}
    supabase_client.auth.get_user.assert_not_called()


def test_missing_user_id_is_unauthorized(client, openai_client):
    response = client.post("/ai-analysis", json={"prompt": "hi", "type": "chat"}, headers=AUTH)

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid or unauthorized user"}
    openai_client.chat.completions.create.assert_not_awaited()


def test_unparseable_body_returns_500(client):
    response = client.post(
        "/ai-analysis",
        content=b"{not json",
        headers={**AUTH, "Content-Type": "application/json"},
    )

    assert response.status_code == 500
    assert response.json()["error"].startswith("Invalid request")
