from typing import Optional, Dict, Any

class TruthLensException(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class ConfigurationException(TruthLensException):
    status_code = 503

    def __init__(self, missing: list):
        super().__init__(
            f"Missing required configuration: {', '.join(missing)}",
            {"missing": list(missing)}
        )

class APIException(TruthLensException):
    pass

class LLMException(APIException):
    status_code = 502

    def __init__(self, reason: str, recoverable: bool = True):
        super().__init__(
            f"LLM service error: {reason}",
            {"reason": reason, "recoverable": recoverable}
        )

class AnalysisUnavailableException(APIException):
    """Raised to callers of the analysis service; the backend cause is only logged."""
    status_code = 502

    def __init__(self, message: str):
        super().__init__(message)

class ValidationException(TruthLensException):
    status_code = 422

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class AnalysisInProgressException(TruthLensException):
    status_code = 409

    def __init__(self):
        super().__init__("An analysis is already in progress for this session.")
