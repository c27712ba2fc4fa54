"""Image service used by `/ai image` command handling.

Role in pipeline:
    - Translates the Arabic description into English via the text model.
    - Appends the style-specific enhancement suffix and a fixed negative prompt.
    - Calls the Stability client and decodes the first Base64 artifact.

Size validation:
    Output size is fixed at 1024x1024; no caller-provided dimensions.

Error handling strategy:
    Provider and decoding failures raise `ImageGenerationError` (or propagate
    `requests` exceptions). Translation failures do not: the untranslated text
    is used instead.

Performance characteristics:
    Blocking HTTP; callers on an event loop run it in a worker thread.
"""

import base64
import binascii
import logging

from aibot.image.client import ImageGenerationError, send_image_request
from aibot.llm.service import translate_prompt


logger = logging.getLogger(__name__)


DEFAULT_STYLE = "digital-art"

# Style id -> display name offered as slash-command choices.
STYLES = {
    "digital-art": "فن رقمي",
    "anime": "أنمي",
    "realistic": "واقعي",
    "painting": "لوحة زيتية",
    "3d": "ثلاثي الأبعاد",
}

STYLE_ENHANCEMENTS = {
    "digital-art": ", digital art style, vibrant colors, detailed, 8k resolution, trending on artstation, professional digital artwork",
    "anime": ", anime style, studio ghibli inspired, detailed character design, vibrant colors, beautiful lighting",
    "realistic": ", photorealistic, highly detailed, professional photography, 8k resolution, natural lighting, sharp focus",
    "painting": ", oil painting, masterpiece, detailed brushstrokes, professional artwork, gallery quality, artistic",
    "3d": ", 3D render, octane render, cinema 4D, highly detailed, professional 3D modeling, realistic textures, volumetric lighting",
}

NEGATIVE_PROMPT = (
    "bad quality, blurry, distorted, deformed, ugly, bad anatomy, poor lighting, "
    "poor composition, low resolution, amateur"
)


def build_payload(english_prompt: str, style: str = DEFAULT_STYLE) -> dict:
    """Build the Stability text-to-image payload.

    Unknown styles use the digital-art enhancement and the photographic preset.
    """
    enhancement = STYLE_ENHANCEMENTS.get(style, STYLE_ENHANCEMENTS[DEFAULT_STYLE])

    return {
        "text_prompts": [
            {"text": english_prompt + enhancement, "weight": 1},
            {"text": NEGATIVE_PROMPT, "weight": -1},
        ],
        "cfg_scale": 8,
        "height": 1024,
        "width": 1024,
        "steps": 50,
        "samples": 1,
        "style_preset": "anime" if style == "anime" else "photographic",
        "sampler": "DDIM",
    }


def decode_artifact(response: dict) -> bytes:
    """Return the first artifact's image bytes from a provider response."""
    artifacts = (response or {}).get("artifacts") or []
    if not artifacts or not artifacts[0].get("base64"):
        raise ImageGenerationError("Image provider returned no image data.")

    try:
        return base64.b64decode(artifacts[0]["base64"], validate=True)
    except (binascii.Error, ValueError) as err:
        raise ImageGenerationError("Image provider returned invalid Base64 data.") from err


def generate_image(prompt: str, style: str = DEFAULT_STYLE) -> bytes:
    """Generate one PNG image for an Arabic (or English) description.

    Args:
        prompt: User description as typed in the slash command.
        style: One of `STYLES`; anything else behaves like `DEFAULT_STYLE`.

    Returns:
        Raw PNG bytes.
    """
    english_prompt = translate_prompt(prompt)
    logger.info("Generating image: style=%s prompt=%r", style, english_prompt)

    response = send_image_request(build_payload(english_prompt, style))
    return decode_artifact(response)
