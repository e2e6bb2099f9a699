import asyncio
from typing import Awaitable, Callable, Optional

from config import logger, USER_MESSAGES
from exceptions import (
    AnalysisInProgressException,
    AnalysisUnavailableException,
    ConfigurationException,
)
from models.state import DetectorState, FailedState, IdleState, LoadingState, SucceededState
from models.verdicts import AnalysisResponse
from .analysis import analyze_text

Analyzer = Callable[[str], Awaitable[AnalysisResponse]]


class DetectorSession:
    """Tracks one client's analysis as a single idle/loading/succeeded/failed state."""

    def __init__(self, analyzer: Optional[Analyzer] = None):
        self._analyzer = analyzer or analyze_text
        self._state: DetectorState = IdleState()

    @property
    def state(self) -> DetectorState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, LoadingState)

    async def analyze(self, text: str) -> DetectorState:
        if self.is_loading:
            raise AnalysisInProgressException()

        if not text or not text.strip():
            self._state = FailedState(error=USER_MESSAGES.EMPTY_INPUT)
            return self._state

        self._state = LoadingState()
        try:
            response = await self._analyzer(text)
        except (AnalysisUnavailableException, ConfigurationException) as e:
            self._state = FailedState(error=e.message)
            return self._state
        except asyncio.CancelledError:
            self._state = IdleState()
            raise
        except Exception:
            logger.exception("Unexpected error during detector analysis.")
            self._state = FailedState(error=USER_MESSAGES.UNKNOWN_ERROR)
            return self._state

        if response.result is None:
            self._state = FailedState(error=USER_MESSAGES.FORMAT_VIOLATION)
        else:
            self._state = SucceededState(result=response.result, sources=response.sources)
        return self._state

    def reset(self) -> DetectorState:
        if self.is_loading:
            raise AnalysisInProgressException()
        self._state = IdleState()
        return self._state
