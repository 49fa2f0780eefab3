import httpx

from config import logger
from config.constants import UI_CONFIG
from models.analysis import AnalysisResult


class EvaluatorClient:
    """Talks to the Claim Evaluator over HTTP, exactly like a browser would."""

    def __init__(self, http_client: httpx.AsyncClient, path: str = UI_CONFIG.FACTCHECK_PATH):
        self.http_client = http_client
        self.path = path

    async def evaluate(self, claim: str) -> AnalysisResult:
        response = await self.http_client.post(self.path, json={"prompt": claim})
        if response.is_error:
            logger.warning("Evaluator responded %s: %s", response.status_code, response.text[:200])
        response.raise_for_status()
        return AnalysisResult.model_validate(response.json())
