"""Request orchestration for chat messages and `/ai` sub-commands.

Architectural role:
    Platform-neutral behavior behind the Discord adapter. The adapter passes
    raw text, channel ids and permission flags in; this module returns the text
    (and optional image) to send back.

Message flow:
    1. Ignore bot authors and channels that are not enabled.
    2. Ask the text model (`aibot.llm.service.generate_answer`) in a worker
       thread, bounded by `LLM_TIMEOUT`.
    3. On any failure, timeout or empty answer, answer with the keyword
       fallback responder instead.

Command flow:
    - `setup` / `disable`: administrator only; update the channel registry.
    - `status`: report whether the channel is enabled.
    - `image`: translate + generate in a worker thread, bounded by
      `IMAGE_TIMEOUT`, and return the PNG bytes.

Failure handling:
    Generation errors never escape `generate_reply` or `render_image`; they
    are logged and turned into a fallback reply or an Arabic failure message.
    Storage errors from `setup` / `disable` propagate so the adapter can
    report a command failure.
"""

import asyncio
import logging
from dataclasses import dataclass

from aibot.image.service import DEFAULT_STYLE, generate_image
from aibot.llm.provider_config import IMAGE_TIMEOUT, LLM_TIMEOUT
from aibot.llm.service import generate_answer
from aibot.nlp.fallback import FallbackResponder


logger = logging.getLogger(__name__)

PLATFORM_MESSAGE_LIMIT = 2000


# =========================================================
# USER-FACING MESSAGES
# =========================================================

ADMIN_ONLY = "عذراً، هذا الأمر متاح فقط للمشرفين."
CHANNEL_ALREADY_ENABLED = "هذه القناة مفعلة بالفعل كقناة ذكاء اصطناعي."
CHANNEL_ENABLED = "تم إعداد هذه القناة بنجاح كقناة ذكاء اصطناعي! 🎉"
CHANNEL_NOT_ENABLED = "هذه القناة غير مفعلة كقناة ذكاء اصطناعي."
CHANNEL_DISABLED = "تم تعطيل الذكاء الاصطناعي في هذه القناة."
STATUS_TEMPLATE = "حالة الذكاء الاصطناعي في هذه القناة: {state}"
STATUS_ON = "✅ مفعل"
STATUS_OFF = "❌ معطل"
IMAGE_IN_PROGRESS = "جاري إنشاء الصورة... ⏳\nقد تستغرق العملية بضع ثوانٍ."
IMAGE_DONE_TEMPLATE = "تم إنشاء الصورة! 🎨\nالوصف: {prompt}\nالنمط: {style}"
IMAGE_FAILED = (
    "عذراً، حدث خطأ أثناء إنشاء الصورة. الرجاء المحاولة مرة أخرى.\n"
    "تأكد من أن الوصف مناسب وغير محظور."
)
COMMAND_FAILED = "عذراً، حدث خطأ أثناء تنفيذ الأمر. الرجاء المحاولة مرة أخرى."
MESSAGE_FAILED = "عذراً، حدث خطأ أثناء معالجة رسالتك. حاول مرة أخرى."


@dataclass
class CommandReply:
    """What the adapter should send back for one command."""

    content: str
    image: bytes | None = None
    filename: str | None = None


_DEFAULT_RESPONDER = FallbackResponder()


def clip_for_platform(text: str, limit: int = PLATFORM_MESSAGE_LIMIT) -> str:
    """Trim text to the platform message length limit."""
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


# =========================================================
# MESSAGES
# =========================================================

async def generate_reply(text: str, responder: FallbackResponder | None = None) -> str:
    """Answer a message with the text model, falling back to keyword replies.

    Args:
        text: Raw message text.
        responder: Fallback responder; the shared default is used when omitted.

    Returns:
        Reply text, clipped to the platform limit. Never raises.
    """
    responder = responder or _DEFAULT_RESPONDER

    try:
        answer = await asyncio.wait_for(
            asyncio.to_thread(generate_answer, text),
            timeout=LLM_TIMEOUT,
        )
    except asyncio.TimeoutError:
        logger.warning("Text model timed out after %.0fs; using fallback", LLM_TIMEOUT)
        answer = None
    except Exception:
        logger.exception("Text model failed; using fallback")
        answer = None

    if not answer or not str(answer).strip():
        answer = responder.respond(text)

    return clip_for_platform(str(answer).strip())


async def handle_message(
    text: str,
    channel_id,
    registry,
    *,
    author_is_bot: bool = False,
    responder: FallbackResponder | None = None,
) -> str | None:
    """Return the reply for a channel message, or `None` when the bot stays silent."""
    if author_is_bot:
        return None

    if not registry.is_enabled(channel_id):
        logger.debug("Channel %s not enabled; ignoring message", channel_id)
        return None

    return await generate_reply(text, responder)


# =========================================================
# /ai SUB-COMMANDS
# =========================================================

async def setup_channel(channel_id, is_admin: bool, registry) -> CommandReply:
    """Enable a channel. The config write runs in a worker thread."""
    if not is_admin:
        return CommandReply(ADMIN_ONLY)
    if not await asyncio.to_thread(registry.enable, channel_id):
        return CommandReply(CHANNEL_ALREADY_ENABLED)
    return CommandReply(CHANNEL_ENABLED)


async def disable_channel(channel_id, is_admin: bool, registry) -> CommandReply:
    if not is_admin:
        return CommandReply(ADMIN_ONLY)
    if not await asyncio.to_thread(registry.disable, channel_id):
        return CommandReply(CHANNEL_NOT_ENABLED)
    return CommandReply(CHANNEL_DISABLED)


def channel_status(channel_id, registry) -> CommandReply:
    state = STATUS_ON if registry.is_enabled(channel_id) else STATUS_OFF
    return CommandReply(STATUS_TEMPLATE.format(state=state))


async def render_image(prompt: str, style: str | None = None) -> CommandReply:
    """Generate an image for `/ai image`.

    Returns:
        A reply carrying PNG bytes on success, or the failure text. Never raises.
    """
    style = style or DEFAULT_STYLE
    logger.info("Image requested: style=%s prompt=%r", style, prompt)

    try:
        image = await asyncio.wait_for(
            asyncio.to_thread(generate_image, prompt, style),
            timeout=IMAGE_TIMEOUT,
        )
    except asyncio.TimeoutError:
        logger.warning("Image generation timed out after %.0fs", IMAGE_TIMEOUT)
        return CommandReply(IMAGE_FAILED)
    except Exception:
        logger.exception("Image generation failed")
        return CommandReply(IMAGE_FAILED)

    return CommandReply(
        IMAGE_DONE_TEMPLATE.format(prompt=prompt, style=style),
        image=image,
        filename=f"generated-image-{style}.png",
    )
