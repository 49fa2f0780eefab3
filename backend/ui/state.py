import asyncio
from enum import Enum
from typing import Dict, FrozenSet, Optional, Protocol

import httpx

from config import logger
from config.constants import UI_CONFIG
from models.analysis import AnalysisResult


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    DISPLAYING = "displaying"
    FAILED = "failed"


ALLOWED_TRANSITIONS: Dict[SubmissionState, FrozenSet[SubmissionState]] = {
    SubmissionState.IDLE: frozenset({SubmissionState.SUBMITTING}),
    SubmissionState.SUBMITTING: frozenset({SubmissionState.DISPLAYING, SubmissionState.FAILED}),
    SubmissionState.DISPLAYING: frozenset({SubmissionState.SUBMITTING}),
    SubmissionState.FAILED: frozenset({SubmissionState.SUBMITTING}),
}


class InvalidTransition(Exception):
    def __init__(self, current: SubmissionState, target: SubmissionState):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move from {current.value} to {target.value}")


class Evaluator(Protocol):
    async def evaluate(self, claim: str) -> AnalysisResult: ...


class ClaimSubmission:
    """Single-flight submit cycle for one page: idle -> submitting -> displaying or failed.

    The current result slot is cleared when a submission starts and only
    filled again once the evaluator answers. A submit while another is in
    flight does nothing.
    """

    def __init__(self, client: Optional[Evaluator] = None, claim: str = ""):
        self.client = client
        self.claim = claim
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self._state = SubmissionState.IDLE

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def can_submit(self) -> bool:
        return self._state is not SubmissionState.SUBMITTING and bool(self.claim.strip())

    def _transition(self, target: SubmissionState) -> None:
        if target not in ALLOWED_TRANSITIONS[self._state]:
            raise InvalidTransition(self._state, target)
        logger.debug("Submission %s -> %s", self._state.value, target.value)
        self._state = target

    async def submit(self, claim: Optional[str] = None) -> bool:
        """Run one evaluation. Returns True when a result is now displayed."""
        if self._state is SubmissionState.SUBMITTING:
            logger.info("Submission already in flight, ignoring submit.")
            return False
        if claim is not None:
            self.claim = claim
        if not self.claim.strip():
            return False

        self._transition(SubmissionState.SUBMITTING)
        self.result = None
        self.error = None

        try:
            result = await self.client.evaluate(self.claim)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers non-JSON bodies and payloads that fail validation.
            logger.error("Claim analysis failed: %s", e)
            self._fail()
            return False
        except Exception:
            logger.exception("Unexpected error during claim analysis.")
            self._fail()
            return False
        except asyncio.CancelledError:
            self._fail()
            raise

        self.result = result
        self._transition(SubmissionState.DISPLAYING)
        return True

    def _fail(self) -> None:
        self.error = UI_CONFIG.FAILURE_MESSAGE
        self._transition(SubmissionState.FAILED)
