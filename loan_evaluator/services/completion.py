import logging
from typing import Optional

from openai import APIError, AsyncOpenAI

from loan_evaluator.client.openai_client import get_openai_client
from loan_evaluator.config.settings import settings
from loan_evaluator.errors import ResponseFormatError, TransportError
from loan_evaluator.services.prompt import build_completion_payload

logger = logging.getLogger(__name__)

async def _create_completion(client: AsyncOpenAI, prompt: str):
    payload = build_completion_payload(prompt)
    try:
        return await client.chat.completions.create(model=settings.MODEL, **payload)
    except APIError as e:
        logger.error("Completion request failed: %s", e)
        raise TransportError(f"Completion service request failed: {e}") from e

async def request_decision(prompt: str, client: Optional[AsyncOpenAI] = None) -> str:
    """
    Send the prompt to the completion service and return the first choice's text.

    A caller-supplied client is left open; one created here is closed afterwards.
    """
    if client is not None:
        response = await _create_completion(client, prompt)
    else:
        async with get_openai_client() as owned_client:
            response = await _create_completion(owned_client, prompt)

    if not response.choices or response.choices[0].message is None:
        raise ResponseFormatError("Completion reply has no choices")
    content = response.choices[0].message.content
    if content is None:
        raise ResponseFormatError("Completion reply has no message content")
    return content
