from .analysis_prompts import (
    CHAT_SYSTEM_PROMPT,
    GENERAL_SYSTEM_PROMPT,
    REPORT_SYSTEM_PROMPT,
    REPORT_ANALYSIS_PROMPT,
)
from .prompt_composer import compose_prompt, format_patient_context

__all__ = [
    "CHAT_SYSTEM_PROMPT",
    "GENERAL_SYSTEM_PROMPT",
    "REPORT_SYSTEM_PROMPT",
    "REPORT_ANALYSIS_PROMPT",
    "compose_prompt",
    "format_patient_context",
]
