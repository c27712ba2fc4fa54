"""Prompt-to-payload adapter for text-model invocation.

Architectural role:
    Canonical text-generation entrypoints used by orchestration. Bridges
    prompt construction (`aibot.prompting`) to transport (`aibot.llm.client`).

Model call flow:
    message -> prompt -> payload -> `client.send_request(...)`.

Determinism:
    Payload construction is deterministic for fixed inputs and configuration.
    Generated output is not, because inference runs remotely.
"""

import logging
import re

from aibot.llm.client import LLMRequestError, send_request
from aibot.llm.provider_config import MODEL_NAME
from aibot.prompting.prompt_builder import build_chat_prompt, build_translation_prompt


logger = logging.getLogger(__name__)

_SURROUNDING_QUOTES = re.compile(r"^[\"']|[\"']$")


def _build_payload(prompt: str, temperature: float) -> dict:
    return {
        "model": MODEL_NAME,
        "messages": [
            {"role": "user", "content": prompt},
        ],
        "temperature": temperature,
        "top_p": 0.9,
    }


def generate_answer(message: str) -> str:
    """Ask the text model to answer one chat message.

    Args:
        message: Raw message text from the channel.

    Returns:
        Generated reply text.

    Failure scenarios:
        `LLMRequestError` from the transport propagates unchanged; the
        orchestration layer owns the fallback.
    """
    return send_request(_build_payload(build_chat_prompt(message), temperature=0.7))


def translate_prompt(arabic_text: str) -> str:
    """Translate an Arabic image description into an English prompt.

    Strips one leading and one trailing quote character plus whitespace from
    the model output. Returns `arabic_text` unchanged when the model call
    fails, so image generation can still proceed.
    """
    try:
        translated = send_request(
            _build_payload(build_translation_prompt(arabic_text), temperature=0.4)
        )
    except LLMRequestError:
        logger.exception("Prompt translation failed; using original text")
        return arabic_text

    translated = _SURROUNDING_QUOTES.sub("", translated).strip()
    logger.info("Translated image prompt: %r -> %r", arabic_text, translated)
    return translated or arabic_text
