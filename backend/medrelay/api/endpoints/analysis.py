"""
Prompt analysis endpoint.

Relays an authenticated user's prompt, enriched with their stored medical
profile, to the LLM.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header, status

from medrelay.api.dependencies.services import get_completion_relay, get_profile_gateway
from medrelay.api.models import AnalysisRequest, ErrorResponse, GeneratedTextResponse
from medrelay.controllers.analysis_controller import AnalysisController
from medrelay.services.llm.completion_relay import CompletionRelay
from medrelay.services.profiles.profile_gateway import ProfileGateway

# ============================================================================
# Dependency Injection
# ============================================================================


def get_analysis_controller(
    gateway: ProfileGateway = Depends(get_profile_gateway),
    relay: CompletionRelay = Depends(get_completion_relay),
) -> AnalysisController:
    """Dependency injection for AnalysisController."""
    return AnalysisController(gateway, relay)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/ai-analysis",
    status_code=status.HTTP_200_OK,
    response_model=GeneratedTextResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Authentication or upstream failure"},
    },
)
async def ai_analysis(
    request: AnalysisRequest,
    authorization: Optional[str] = Header(default=None),
    controller: AnalysisController = Depends(get_analysis_controller),
) -> GeneratedTextResponse:
    """
    Generate a medical-guidance reply for the caller's prompt.

    Requires `Authorization: Bearer <token>` whose user matches `userId`.
    Authentication failures are reported as 500 for compatibility with
    existing clients.
    """
    generated_text = await controller.analyze(request, authorization)
    return GeneratedTextResponse(generated_text=generated_text)
