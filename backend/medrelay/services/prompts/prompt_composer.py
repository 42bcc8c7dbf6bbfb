"""
Builds the user message sent to the LLM from a raw prompt and optional profile.
"""
from typing import Optional

from medrelay.api.models.profile import PatientProfile

MISSING_FIELD = "None"


def format_patient_context(profile: PatientProfile) -> str:
    """Render the patient context block. Empty fields render as "None"."""
    return (
        "Patient Context:\n"
        f"- Medical History: {profile.medical_history or MISSING_FIELD}\n"
        f"- Allergies: {profile.allergies or MISSING_FIELD}\n"
        f"- Current Medication: {profile.current_medication or MISSING_FIELD}"
    )


def compose_prompt(prompt: Optional[str], profile: Optional[PatientProfile] = None) -> str:
    """
    Combine the user's prompt with their profile context.

    Args:
        prompt: Raw prompt text from the request; None is treated as empty
        profile: Stored profile, or None when no context is available

    Returns:
        The trimmed prompt, followed by a blank line and the patient context
        block when a profile is given.
    """
    text = (prompt or "").strip()
    if profile is None:
        return text
    if not text:
        return format_patient_context(profile)
    return f"{text}\n\n{format_patient_context(profile)}"
