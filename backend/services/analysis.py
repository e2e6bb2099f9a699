from typing import Any, List, Optional
from pydantic import ValidationError

from config import logger, LLM_CONFIG, USER_MESSAGES
from exceptions import AnalysisUnavailableException, ConfigurationException, LLMException
from models.verdicts import AnalysisResponse, AnalysisResult, GroundingSource, WebSource
from prompts import build_analysis_prompt
from utils.parsing import extract_fenced_json, truncate
from .llm import call_gemini


def parse_analysis_result(text: Optional[str]) -> Optional[AnalysisResult]:
    """
    Extract the verdict object from the model's reply.
    Args:
        text: Raw reply text, expected to hold a ```json fenced block
    Returns:
        The validated AnalysisResult, or None when the reply has no usable
        block or the block breaks the result schema (unknown verdict,
        confidence outside 0-100, wrong types).
    """
    parsed = extract_fenced_json(text)
    if parsed is None:
        logger.warning(
            "No parsable JSON block in model reply: %s",
            truncate(text, LLM_CONFIG.MAX_LOGGED_REPLY_LENGTH)
        )
        return None

    try:
        return AnalysisResult.model_validate(parsed)
    except ValidationError as e:
        logger.warning(
            "Model reply violated the result schema (%d errors): %s",
            e.error_count(),
            truncate(str(parsed), LLM_CONFIG.MAX_LOGGED_REPLY_LENGTH)
        )
        return None


def extract_grounding_sources(chunks: Any) -> List[GroundingSource]:
    """Turn grounding metadata chunks into sources, keeping backend order."""
    if not isinstance(chunks, list):
        return []

    sources = []
    for chunk in chunks:
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if not isinstance(web, dict) or not web.get("uri"):
            logger.debug("Skipping grounding chunk without a web uri: %s", chunk)
            continue
        sources.append(
            GroundingSource(web=WebSource(uri=str(web["uri"]), title=str(web.get("title") or "")))
        )
    return sources


async def analyze_text(text: str) -> AnalysisResponse:
    """Fact-check one piece of text with a single grounded Gemini call."""
    prompt = build_analysis_prompt(text)

    try:
        res = await call_gemini(prompt)
    except ConfigurationException:
        raise
    except LLMException as e:
        logger.error("Error analyzing text with Gemini: %s", e.message)
        raise AnalysisUnavailableException(USER_MESSAGES.ANALYSIS_FAILED) from e
    except Exception as e:
        logger.exception("Unexpected error analyzing text with Gemini.")
        raise AnalysisUnavailableException(USER_MESSAGES.ANALYSIS_FAILED) from e

    result = parse_analysis_result(res.get("text", ""))
    sources = extract_grounding_sources(res.get("grounding_chunks"))

    if result is not None:
        logger.info(
            "Analysis finished: verdict=%s confidence=%d sources=%d",
            result.verdict.value, result.confidence_score, len(sources)
        )
    return AnalysisResponse(result=result, sources=sources)
