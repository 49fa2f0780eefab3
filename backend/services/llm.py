from typing import Dict, Any, List, Optional
import httpx

from config.constants import LLM_CONFIG
from config import Settings, logger
from exceptions import ProviderUnavailableException, UpstreamInvalidException
from prompts import SYSTEM_PROMPT


def build_completion_request(claim: str, model: str) -> Dict[str, Any]:
    """Chat completion body for a single claim. The claim is sent verbatim."""
    messages: List[Dict[str, str]] = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": claim},
    ]
    return {
        "messages": messages,
        "model": model,
        "stream": LLM_CONFIG.STREAM,
        "max_completion_tokens": LLM_CONFIG.MAX_COMPLETION_TOKENS,
        "temperature": LLM_CONFIG.TEMPERATURE,
        "top_p": LLM_CONFIG.TOP_P,
        "response_format": {"type": LLM_CONFIG.RESPONSE_FORMAT},
    }


async def call_cerebras(claim: str, settings: Settings) -> Dict[str, Any]:
    if not settings.CEREBRAS_API_KEY:
        logger.critical("CEREBRAS_API_KEY not configured.")
        raise ProviderUnavailableException("API key not configured", recoverable=False)

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.CEREBRAS_API_KEY}",
    }
    body = build_completion_request(claim, settings.CEREBRAS_MODEL)
    try:
        async with httpx.AsyncClient(timeout=LLM_CONFIG.REQUEST_TIMEOUT) as client:
            response = await client.post(settings.CEREBRAS_ENDPOINT, headers=headers, json=body)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Cerebras HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text)
        raise ProviderUnavailableException(f"HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("Cerebras request error for URL %s: %s", settings.CEREBRAS_ENDPOINT, str(e))
        raise ProviderUnavailableException(f"Request failed: {str(e)}") from e
    except ValueError as e:
        logger.error("Cerebras returned a non-JSON body: %s", e)
        raise UpstreamInvalidException("provider body is not JSON") from e

    return data


def extract_message_content(data: Any) -> Optional[str]:
    """Text of the first choice's message, or None if it is absent or not a string."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    choice = choices[0]
    if not isinstance(choice, dict):
        return None
    message = choice.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None
