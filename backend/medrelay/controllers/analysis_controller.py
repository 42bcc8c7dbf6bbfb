"""
Controller for prompt analysis.

Authenticates the caller, enriches the prompt with their profile and relays
it to the LLM.
"""
import logging
from typing import Optional

from medrelay.api.models.analysis import AnalysisRequest
from medrelay.services.llm.completion_relay import CompletionRelay
from medrelay.services.profiles.profile_gateway import ProfileGateway
from medrelay.services.prompts import compose_prompt

logger = logging.getLogger(__name__)


class AnalysisController:
    """Controller for /ai-analysis."""

    def __init__(self, gateway: ProfileGateway, relay: CompletionRelay):
        self.gateway = gateway
        self.relay = relay

    async def analyze(self, request: AnalysisRequest, authorization: Optional[str]) -> str:
        """
        Generate a reply for an authenticated user's prompt.

        Args:
            request: Prompt, type discriminator and claimed user id
            authorization: Raw Authorization header value

        Returns:
            Generated text

        Raises:
            AuthenticationError: If the token does not belong to request.user_id
        """
        user_id = await self.gateway.authenticate(authorization, request.user_id)
        profile = await self.gateway.fetch_profile(user_id)

        prompt = compose_prompt(request.prompt, profile)
        logger.debug(
            f"Composed prompt for user {user_id} "
            f"(type={request.analysis_type}, context={'yes' if profile else 'no'})"
        )

        return await self.relay.complete_text(prompt, request.analysis_type)
