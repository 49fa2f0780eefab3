import asyncio
import json
from typing import Any
from pydantic import ValidationError

from config import Settings, logger
from exceptions import (
    MalformedPayloadException,
    SchemaViolationException,
    UpstreamInvalidException,
)
from models.analysis import AnalysisResult
from .llm import call_cerebras, extract_message_content


def _reject_constant(token: str):
    # NaN and Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {token}")


class ClaimEvaluator:
    """Turns one claim into one validated AnalysisResult payload.

    Each call issues exactly one provider request. Nothing is cached or
    retried, so the same claim submitted twice may be scored differently.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def evaluate(self, claim: str) -> Any:
        start_time = asyncio.get_running_loop().time()
        logger.info(f"Evaluating claim '{claim[:50]}'")

        data = await call_cerebras(claim, self.settings)

        content = extract_message_content(data)
        if content is None:
            logger.error("Missing or invalid content in provider response.")
            raise UpstreamInvalidException("first choice has no string content")

        try:
            payload = json.loads(content, parse_constant=_reject_constant)
        except ValueError as e:
            logger.error("JSON parse error: %s", e)
            raise MalformedPayloadException(str(e), content) from e

        if self.settings.STRICT_SCHEMA:
            payload = self._validate(payload)

        duration = round(asyncio.get_running_loop().time() - start_time, 2)
        logger.info(f"Evaluation completed for claim '{claim[:50]}' in {duration} seconds.")
        return payload

    def _validate(self, payload: Any) -> Any:
        try:
            result = AnalysisResult.model_validate(payload)
        except ValidationError as e:
            errors = [
                {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ]
            logger.error("Provider payload failed schema validation: %s", errors)
            raise SchemaViolationException(errors) from e
        return result.to_payload()
