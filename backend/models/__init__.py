from .verdicts import (
    Verdict,
    VERDICT_LABELS,
    AnalysisResult,
    WebSource,
    GroundingSource,
    AnalysisResponse,
)
from .state import (
    IdleState,
    LoadingState,
    SucceededState,
    FailedState,
    DetectorState,
)
from .education import (
    EducationalTip,
    PublicQuizQuestion,
    QuizQuestion,
    QuizAnswerResult,
    QuizScore,
)
from .requests import (
    AnalyzeRequest,
    QuizAnswerRequest,
    QuizScoreRequest,
)

__all__ = [
    "Verdict",
    "VERDICT_LABELS",
    "AnalysisResult",
    "WebSource",
    "GroundingSource",
    "AnalysisResponse",

    "IdleState",
    "LoadingState",
    "SucceededState",
    "FailedState",
    "DetectorState",

    "EducationalTip",
    "PublicQuizQuestion",
    "QuizQuestion",
    "QuizAnswerResult",
    "QuizScore",

    "AnalyzeRequest",
    "QuizAnswerRequest",
    "QuizScoreRequest",
]
