from .parsing import extract_fenced_json, truncate

__all__ = [
    "extract_fenced_json",
    "truncate",
]
