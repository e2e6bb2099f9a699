from dataclasses import dataclass

@dataclass(frozen=True)
class LLMConfig:
    DEFAULT_MODEL: str = "gemini-2.5-flash"
    REQUEST_TIMEOUT: float = 60.0
    MAX_LOGGED_REPLY_LENGTH: int = 500

@dataclass(frozen=True)
class ConfidenceBounds:
    MIN_SCORE: int = 0
    MAX_SCORE: int = 100

@dataclass(frozen=True)
class UserMessages:
    """Messages shown to the person using the detector."""
    EMPTY_INPUT: str = "Please enter some text to analyze."
    FORMAT_VIOLATION: str = (
        "The AI returned an unexpected response format. Please try rephrasing your text."
    )
    ANALYSIS_FAILED: str = (
        "Failed to get analysis from AI. Please check your API key and network connection."
    )
    UNKNOWN_ERROR: str = "An unknown error occurred."
    MISSING_API_KEY: str = "API_KEY environment variable not set"
    UNSUPPORTED_FILE: str = (
        "Unsupported file type ({filename}). Please upload a plain text file (.txt). "
        "For other documents, please copy and paste the content."
    )
    EMPTY_FILE: str = "File appears to be empty."
    UNREADABLE_FILE: str = "Failed to read the file."

LLM_CONFIG = LLMConfig()
CONFIDENCE_BOUNDS = ConfidenceBounds()
USER_MESSAGES = UserMessages()
