"""Gemini transport client for text-generation requests.

Architectural role:
    Executes HTTP requests against the Gemini `generateContent` endpoint and
    extracts the generated text.

Model invocation flow:
    `service.generate_answer` / `service.translate_prompt` ->
    `send_request(payload)` -> Gemini payload remap -> parsed text.

Retry behavior:
    No retry loop. Each call is attempted once with `LLM_TIMEOUT`.

Failure handling model:
    Every failure raises `LLMRequestError` with a sanitized, provider-labeled
    message. Raw response bodies are not included. Callers decide whether to
    fall back.
"""

import requests

from aibot.llm.provider_config import (
    GEMINI_KEY_FILE,
    GEMINI_URL_TEMPLATE,
    LLM_TIMEOUT,
    MODEL_NAME,
    load_key,
)


class LLMRequestError(RuntimeError):
    """Raised when the text model cannot produce a usable answer."""


def _build_sanitized_http_error(err: requests.exceptions.RequestException) -> str:
    """Build provider-labeled HTTP error text without exposing raw internals."""
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)

    if status_code:
        return f"GEMINI HTTP ERROR ({status_code})"
    if isinstance(err, requests.exceptions.Timeout):
        return "GEMINI REQUEST TIMED OUT"
    return "GEMINI HTTP ERROR"


def _to_gemini_payload(payload: dict) -> dict:
    """Remap chat-style `messages` into Gemini `contents`.

    `assistant` becomes `model`; `system` and `user` are both sent as `user`
    turns. Empty messages are dropped. `temperature`, `top_p` and
    `max_tokens` map into `generationConfig`.
    """
    contents = []

    for msg in payload.get("messages", []):
        if not isinstance(msg, dict):
            continue

        role = msg.get("role")
        content = msg.get("content", "")

        if not content:
            continue

        if role == "assistant":
            gemini_role = "model"
        elif role in ["user", "system"]:
            gemini_role = "user"
        else:
            continue

        contents.append({
            "role": gemini_role,
            "parts": [{"text": str(content)}],
        })

    gemini_payload = {
        "contents": contents,
    }

    generation_config = {}
    if "temperature" in payload:
        generation_config["temperature"] = payload["temperature"]
    if "top_p" in payload:
        generation_config["topP"] = payload["top_p"]
    if "max_tokens" in payload:
        generation_config["maxOutputTokens"] = payload["max_tokens"]
    if generation_config:
        gemini_payload["generationConfig"] = generation_config

    return gemini_payload


def send_request(payload: dict) -> str:
    """Send one request to Gemini and return the generated text.

    Args:
        payload: Provider-agnostic payload with `messages` and optional
            sampling parameters. `model` overrides `MODEL_NAME`.

    Returns:
        Text of the first candidate, stripped.

    Raises:
        LLMRequestError: missing key, HTTP/transport failure, timeout,
            malformed response, or empty generated text.
    """
    api_key = load_key(GEMINI_KEY_FILE)
    if not api_key:
        raise LLMRequestError("GEMINI KEY FILE NOT FOUND")

    url = GEMINI_URL_TEMPLATE.format(model=payload.get("model", MODEL_NAME))

    headers = {
        "x-goog-api-key": api_key,
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            url,
            headers=headers,
            json=_to_gemini_payload(payload),
            timeout=LLM_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as err:
        raise LLMRequestError(_build_sanitized_http_error(err)) from err
    except ValueError as err:
        raise LLMRequestError("GEMINI RESPONSE NOT JSON") from err

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as err:
        raise LLMRequestError("GEMINI RESPONSE MALFORMED") from err

    text = str(text or "").strip()
    if not text:
        raise LLMRequestError("GEMINI RESPONSE EMPTY")
    return text
