from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field

from .verdicts import AnalysisResult, GroundingSource

class IdleState(BaseModel):
    status: Literal["idle"] = "idle"

class LoadingState(BaseModel):
    status: Literal["loading"] = "loading"

class SucceededState(BaseModel):
    status: Literal["succeeded"] = "succeeded"
    result: AnalysisResult
    sources: List[GroundingSource] = Field(default_factory=list)

class FailedState(BaseModel):
    status: Literal["failed"] = "failed"
    error: str

# One variant at a time; the `status` tag replaces separate loading/error/result flags.
DetectorState = Annotated[
    Union[IdleState, LoadingState, SucceededState, FailedState],
    Field(discriminator="status"),
]
