from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from config.constants import CONFIDENCE_BOUNDS

class Verdict(str, Enum):
    VERIFIED_TRUE = "VERIFIED_TRUE"
    MISLEADING = "MISLEADING"
    PARTIALLY_TRUE = "PARTIALLY_TRUE"
    POTENTIALLY_FALSE = "POTENTIALLY_FALSE"
    UNVERIFIABLE = "UNVERIFIABLE"

    @property
    def label(self) -> str:
        return VERDICT_LABELS[self]

VERDICT_LABELS = {
    Verdict.VERIFIED_TRUE: "Verified True",
    Verdict.MISLEADING: "Misleading",
    Verdict.PARTIALLY_TRUE: "Partially True",
    Verdict.POTENTIALLY_FALSE: "Potentially False",
    Verdict.UNVERIFIABLE: "Unverifiable",
}

class AnalysisResult(BaseModel):
    """Verdict object the model returns inside its fenced JSON block."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    verdict: Verdict
    confidence_score: StrictInt = Field(
        alias="confidenceScore",
        ge=CONFIDENCE_BOUNDS.MIN_SCORE,
        le=CONFIDENCE_BOUNDS.MAX_SCORE,
    )
    explanation: StrictStr

class WebSource(BaseModel):
    uri: str
    title: str = ""

class GroundingSource(BaseModel):
    """Citation supplied by the search grounding metadata, not by the reply text."""
    web: WebSource

    @property
    def display_title(self) -> str:
        return self.web.title or self.web.uri

class AnalysisResponse(BaseModel):
    """Result pair returned for one analysis. `result` is None on a format violation."""
    result: Optional[AnalysisResult] = None
    sources: List[GroundingSource] = Field(default_factory=list)
