from .llm import call_gemini
from .analysis import analyze_text, parse_analysis_result, extract_grounding_sources
from .detector import DetectorSession
from .education import get_tips, get_quiz, check_answer, score_quiz

__all__ = [
    "call_gemini",
    "analyze_text",
    "parse_analysis_result",
    "extract_grounding_sources",
    "DetectorSession",
    "get_tips",
    "get_quiz",
    "check_answer",
    "score_quiz",
]
