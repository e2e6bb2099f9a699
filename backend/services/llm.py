from typing import Dict, Any, List
import httpx

from config import settings, logger
from exceptions import ConfigurationException, LLMException

GOOGLE_SEARCH_TOOL = {"google_search": {}}


async def call_gemini(prompt: str, use_search: bool = True) -> Dict[str, Any]:
    """Send one prompt to Gemini and return the reply text plus grounding chunks.

    The call is awaited in full. Failures are raised once as LLMException;
    nothing is retried here.
    """
    if not settings.GEMINI_API_KEY:
        logger.critical("GEMINI_API_KEY not configured.")
        raise ConfigurationException(["GEMINI_API_KEY"])

    headers = {"Content-Type": "application/json", "x-goog-api-key": settings.GEMINI_API_KEY}
    body: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }
    if use_search:
        body["tools"] = [GOOGLE_SEARCH_TOOL]

    endpoint = settings.GEMINI_ENDPOINT
    try:
        async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT) as client:
            response = await client.post(endpoint, headers=headers, json=body)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Gemini HTTP error %s for URL %s: %s", e.response.status_code, endpoint, e.response.text)
        raise LLMException(f"HTTP {e.response.status_code}", recoverable=True)
    except httpx.RequestError as e:
        logger.error("Gemini request error for URL %s: %s", endpoint, str(e))
        raise LLMException(f"Request failed: {str(e)}", recoverable=True)
    except ValueError as e:
        logger.error("Gemini returned a body that is not JSON: %s", str(e))
        raise LLMException("Malformed response body", recoverable=False)
    except Exception as e:
        logger.exception("Unexpected error calling Gemini API.")
        raise LLMException(f"Unexpected error: {str(e)}", recoverable=False)

    return {
        "raw": data,
        "text": _candidate_text(data),
        "grounding_chunks": _grounding_chunks(data),
    }


def _first_candidate(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        return {}
    candidates = data.get("candidates")
    if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
        return candidates[0]
    return {}


def _candidate_text(data: Any) -> str:
    content = _first_candidate(data).get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""

    texts = []
    for part in parts:
        if not isinstance(part, dict) or part.get("thought"):
            continue
        if text := part.get("text"):
            texts.append(text)
    return "".join(texts)


def _grounding_chunks(data: Any) -> List[Any]:
    metadata = _first_candidate(data).get("groundingMetadata") or {}
    if not isinstance(metadata, dict):
        return []
    chunks = metadata.get("groundingChunks")
    return chunks if isinstance(chunks, list) else []
