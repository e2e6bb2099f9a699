from typing import List
from pydantic import BaseModel, ConfigDict, Field

class AnalyzeRequest(BaseModel):
    """Request body for /analyze and /detect. Blank text is rejected by the route, not here."""
    text: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "SHOCKING: This one food CURES all diseases!"
            }
        }
    )

class QuizAnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer_index: int = Field(..., alias="answerIndex")

class QuizScoreRequest(BaseModel):
    answers: List[int]
