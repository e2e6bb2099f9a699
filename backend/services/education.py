from typing import List

from exceptions import ValidationException
from models.education import (
    EducationalTip,
    PublicQuizQuestion,
    QuizAnswerResult,
    QuizQuestion,
    QuizScore,
)

EDUCATIONAL_TIPS: List[EducationalTip] = [
    EducationalTip(
        title="Check the Source",
        description="Investigate the site's mission and contact info. Lack of credibility or transparency is a red flag.",
        icon="check-circle",
    ),
    EducationalTip(
        title="Look for Emotional Language",
        description="Misinformation often uses sensational, emotionally charged words to provoke a reaction.",
        icon="exclamation",
    ),
    EducationalTip(
        title="Read Beyond the Headline",
        description="Headlines can be misleading. Read the full article to understand the complete story.",
        icon="eye",
    ),
]

QUIZ_QUESTIONS: List[QuizQuestion] = [
    QuizQuestion(
        question="A headline says 'SHOCKING: This one food CURES all diseases!'. What's a potential red flag?",
        options=[
            "It offers a simple solution to a complex problem.",
            "It's published on a well-known news site.",
            "It includes a doctor's quote.",
        ],
        correct_answer_index=0,
        explanation="Sensational claims and miraculous cures are common misinformation tactics. Real science is nuanced.",
    ),
    QuizQuestion(
        question="You see a post on social media from an account you don't know. What should be your first step before sharing?",
        options=[
            "Share it if it seems believable.",
            "Check the account's profile and previous posts for credibility.",
            "Assume it's true if it has many likes.",
        ],
        correct_answer_index=1,
        explanation="Always vet the source. Anonymous or new accounts with no history are often unreliable.",
    ),
]


def get_tips() -> List[EducationalTip]:
    return list(EDUCATIONAL_TIPS)


def get_quiz() -> List[PublicQuizQuestion]:
    return [q.to_public() for q in QUIZ_QUESTIONS]


def _get_question(question_index: int) -> QuizQuestion:
    if not 0 <= question_index < len(QUIZ_QUESTIONS):
        raise ValidationException(
            "question_index", f"must be between 0 and {len(QUIZ_QUESTIONS) - 1}"
        )
    return QUIZ_QUESTIONS[question_index]


def check_answer(question_index: int, answer_index: int) -> QuizAnswerResult:
    """Grade a single answer and reveal the correct option with its explanation."""
    question = _get_question(question_index)
    if not 0 <= answer_index < len(question.options):
        raise ValidationException(
            "answer_index", f"must be between 0 and {len(question.options) - 1}"
        )

    return QuizAnswerResult(
        correct=answer_index == question.correct_answer_index,
        correct_answer_index=question.correct_answer_index,
        explanation=question.explanation,
    )


def score_quiz(answers: List[int]) -> QuizScore:
    """Score a finished quiz. Expects one answer per question, in question order."""
    if len(answers) != len(QUIZ_QUESTIONS):
        raise ValidationException(
            "answers", f"expected {len(QUIZ_QUESTIONS)} answers, got {len(answers)}"
        )

    score = sum(
        1 for index, answer in enumerate(answers)
        if check_answer(index, answer).correct
    )
    return QuizScore(score=score, total=len(QUIZ_QUESTIONS))
