"""
Request and response models for the analysis endpoints.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """Payload for prompt analysis.

    - prompt: free-text question from the user
    - type: "chat" selects the clinical-assistant persona; anything else the general one
    - userId: must match the identity behind the bearer token; a missing id never matches
    """
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    analysis_type: Optional[str] = Field(default=None, alias="type")
    user_id: Optional[str] = Field(default=None, alias="userId")


class GeneratedTextResponse(BaseModel):
    """Text produced by the LLM."""
    model_config = ConfigDict(populate_by_name=True)

    generated_text: str = Field(alias="generatedText")
