from pydantic import BaseModel, ConfigDict
from typing import Any, Literal


class WaitlistSubmission(BaseModel):
    model_config = ConfigDict(extra="ignore")

    project_name: Any = None
    email: Any = None


class SubmissionAccepted(BaseModel):
    success: Literal[True] = True


class SubmissionError(BaseModel):
    error: str
