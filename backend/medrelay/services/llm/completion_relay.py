"""
Single-shot chat completions against OpenAI.

Provider errors are not caught here; they propagate to the error middleware.
"""
from typing import Any, List, Optional

from openai import AsyncOpenAI

from medrelay.services.prompts import (
    CHAT_SYSTEM_PROMPT,
    GENERAL_SYSTEM_PROMPT,
    REPORT_ANALYSIS_PROMPT,
    REPORT_SYSTEM_PROMPT,
)


DEFAULT_MODEL = "gpt-4o-mini"
CHAT_TYPE = "chat"

# Existing clients match on these exact strings.
TEXT_FALLBACK_RESPONSE = "No response available."
REPORT_FALLBACK_RESPONSE = "No response available"


def first_choice_content(response: Any) -> Optional[str]:
    """Return the first choice's message text, or None if there is none."""
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None)


class CompletionRelay:
    """Sends composed prompts or report images to the LLM."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = DEFAULT_MODEL,
        report_max_tokens: int = 300,
        report_temperature: float = 0.5,
    ):
        self.client = client
        self.model = model
        self.report_max_tokens = report_max_tokens
        self.report_temperature = report_temperature

    @staticmethod
    def system_prompt_for(analysis_type: Optional[str]) -> str:
        """Pick the persona: clinical assistant for chat, general guidance otherwise."""
        return CHAT_SYSTEM_PROMPT if analysis_type == CHAT_TYPE else GENERAL_SYSTEM_PROMPT

    async def complete_text(self, prompt: str, analysis_type: Optional[str] = None) -> str:
        """
        Generate a reply to a composed text prompt.

        Args:
            prompt: Composed prompt, possibly including patient context
            analysis_type: Request discriminator selecting the system persona

        Returns:
            The generated text, or TEXT_FALLBACK_RESPONSE if the model returned none
        """
        messages: List[dict] = [
            {"role": "system", "content": self.system_prompt_for(analysis_type)},
            {"role": "user", "content": prompt},
        ]
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
        )
        return first_choice_content(response) or TEXT_FALLBACK_RESPONSE

    async def complete_with_image(self, image_url: str) -> str:
        """
        Generate a structured analysis of a hosted report image.

        Args:
            image_url: Public HTTPS URL of the uploaded image

        Returns:
            The trimmed analysis, or REPORT_FALLBACK_RESPONSE if it is empty
        """
        messages: List[dict] = [
            {"role": "system", "content": REPORT_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": REPORT_ANALYSIS_PROMPT},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            },
        ]
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=self.report_max_tokens,
            temperature=self.report_temperature,
        )
        content = (first_choice_content(response) or "").strip()
        return content or REPORT_FALLBACK_RESPONSE
