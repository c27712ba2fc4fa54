"""Stability AI HTTP client.

Processing flow:
    1. Resolve the API key via `aibot.llm.provider_config.load_key`.
    2. Submit the JSON payload to the text-to-image endpoint.
    3. Return the parsed JSON response or raise on non-200 status.

Error handling strategy:
    Missing credentials and HTTP failures raise `ImageGenerationError` for
    upstream handling. Transport exceptions from `requests` propagate.

Security considerations:
    Exceptions include the upstream response body, which Stability uses for
    moderation and validation messages. They are logged, never shown to users.
"""

import requests

from aibot.llm.provider_config import IMAGE_TIMEOUT, STABILITY_KEY_FILE, STABILITY_URL, load_key


class ImageGenerationError(RuntimeError):
    """Raised when the image provider does not return a usable image."""


def send_image_request(payload: dict) -> dict:
    """Send a text-to-image request to Stability AI.

    Args:
        payload: Provider JSON payload (prompts, size, sampler parameters).

    Returns:
        Parsed JSON response from the provider.

    Error handling:
        - Missing/empty API key -> `ImageGenerationError`
        - Non-200 HTTP response -> `ImageGenerationError`
    """
    api_key = load_key(STABILITY_KEY_FILE)
    if not api_key:
        raise ImageGenerationError(f"Image API key missing or empty: {STABILITY_KEY_FILE}")

    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
    }

    response = requests.post(STABILITY_URL, json=payload, headers=headers, timeout=IMAGE_TIMEOUT)

    if response.status_code != 200:
        raise ImageGenerationError(
            f"Image request failed with status {response.status_code}: {response.text}"
        )

    return response.json()
