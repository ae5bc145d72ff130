import logging

import httpx
from pydantic import ValidationError

from echo3ai.core.config import settings
from echo3ai.core.errors import NetworkError
from echo3ai.schemas.gemini import GeminiRequest, GeminiResponse
from echo3ai.services.http import get_client

logger = logging.getLogger(__name__)


async def generate(prompt: str, api_key: str, fallback: str) -> str:
    """Sends a prompt to Gemini and returns the text of the first candidate.

    Args:
        prompt (str): The full prompt text.
        api_key (str): Gemini API key, forwarded as the `key` query parameter.
        fallback (str): Returned when the response carries no text.

    Raises:
        NetworkError: On transport failure, non-success status or an undecodable body.

    Returns:
        str: The generated text, or `fallback`.
    """
    client = get_client()
    payload = GeminiRequest.from_prompt(prompt).model_dump()

    try:
        response = await client.post(settings.gemini_url, params={"key": api_key}, json=payload)
        response.raise_for_status()
        data = GeminiResponse.model_validate(response.json())
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.error(f"Gemini returned HTTP {status}")
        raise NetworkError(f"Generative service returned HTTP {status}", status) from e
    except httpx.RequestError as e:
        logger.error(f"Network error calling Gemini: {e}")
        raise NetworkError(f"Generative service request failed: {e}") from e
    except (ValueError, ValidationError) as e:
        logger.error(f"Failed to decode Gemini response: {e}")
        raise NetworkError(f"Generative service returned an invalid response: {e}") from e

    text = data.first_text()
    if not text:
        logger.warning("Gemini response contained no text, using fallback")
        return fallback

    logger.info(f"Gemini response received: {len(text)} chars")
    return text
