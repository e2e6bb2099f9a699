from typing import List
from pydantic import BaseModel, ConfigDict, Field

class EducationalTip(BaseModel):
    title: str
    description: str
    icon: str

class PublicQuizQuestion(BaseModel):
    """Quiz question as served to the client, without the answer key."""
    question: str
    options: List[str]

class QuizQuestion(PublicQuizQuestion):
    model_config = ConfigDict(populate_by_name=True)

    correct_answer_index: int = Field(alias="correctAnswerIndex")
    explanation: str

    def to_public(self) -> PublicQuizQuestion:
        return PublicQuizQuestion(question=self.question, options=list(self.options))

class QuizAnswerResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    correct: bool
    correct_answer_index: int = Field(alias="correctAnswerIndex")
    explanation: str

class QuizScore(BaseModel):
    score: int
    total: int
