from typing import Optional

from pydantic import BaseModel, ConfigDict


class PatientProfile(BaseModel):
    """Medical fields read from the `profiles` table."""
    model_config = ConfigDict(extra="ignore")

    medical_history: Optional[str] = None
    allergies: Optional[str] = None
    current_medication: Optional[str] = None
