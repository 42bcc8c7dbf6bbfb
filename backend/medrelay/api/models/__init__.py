from .analysis import AnalysisRequest, GeneratedTextResponse
from .error import ErrorResponse
from .profile import PatientProfile

__all__ = [
    "ErrorResponse",
    "AnalysisRequest",
    "GeneratedTextResponse",
    "PatientProfile",
]
