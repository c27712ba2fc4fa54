"""Provider/runtime configuration for the text and image generation layers.

Architectural role:
    Centralizes model selection, endpoints, timeouts and credential lookup for
    `aibot.llm` and `aibot.image`.

Determinism:
    Values are resolved at import time from the process environment (after
    `.env` is loaded). `load_key` additionally reads key files at call time.

Failure behavior:
    Missing key material is represented as `None`. Transports turn it into
    their own error types; `missing_keys` lets the entrypoint refuse to start.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Text model.
MODEL_NAME = os.getenv("MODEL_NAME", "gemini-2.0-flash")

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)
GEMINI_KEY_FILE = "config/gemini.key"

LLM_TIMEOUT = _env_float("LLM_TIMEOUT", 60.0)


# Image model.
STABILITY_URL = os.getenv(
    "STABILITY_URL",
    "https://api.stability.ai/v1/generation/"
    "stable-diffusion-xl-1024-v1-0/text-to-image",
)
STABILITY_KEY_FILE = "config/stability.key"

IMAGE_TIMEOUT = _env_float("IMAGE_TIMEOUT", 120.0)


REQUIRED_KEY_FILES = (STABILITY_KEY_FILE, GEMINI_KEY_FILE)


def key_env_name(path):
    """Map a key file path to its environment override name.

    `config/gemini.key` -> `GEMINI_API_KEY`.
    """
    return os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from the file stem.
        2. Raw file contents at `path`.

    Returns:
        Key string or `None` when not available (including a `None` path and a
        missing or empty file).
    """
    if not path:
        return None
    env_value = os.getenv(key_env_name(path))
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return f.read().strip() or None


def missing_keys():
    """Return environment names of required keys that cannot be resolved."""
    return [key_env_name(path) for path in REQUIRED_KEY_FILES if not load_key(path)]
