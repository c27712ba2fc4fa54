"""Prompt assembly helpers used by `aibot.llm.service`.

This module only builds prompt strings. Model invocation, timeouts and
fallback decisions happen elsewhere.

Design constraints:
    - Deterministic construction for identical inputs.
    - No I/O and no global state mutation.

Prompt safety model:
    User text is interpolated as a quoted raw string. The instructions ask the
    model to stay short and polite; nothing here enforces it.
"""


# =========================================================
# CHAT PROMPT
# =========================================================
# Sent for every message in an enabled channel. Replies are expected in
# classical Arabic, friendly, with emoji, and at most three lines.

CHAT_INSTRUCTIONS = (
    "يجب أن يكون ردك:\n"
    "1. مختصراً ومفيداً\n"
    "2. باللغة العربية الفصحى\n"
    "3. ودوداً ومحترماً\n"
    "4. يتضمن إيموجي مناسبة\n"
    "5. لا يتجاوز 3 أسطر\n\n"
    "إذا كان السؤال عن الألعاب، قدم اقتراحات محددة لأفضل الألعاب في تلك الفئة.\n"
    "إذا كان السؤال عاماً، اطلب توضيحاً أكثر.\n"
)


def build_chat_prompt(message: str) -> str:
    """Build the assistant prompt for one chat message."""
    return (
        f'أنت مساعد ذكي ودود تتحدث العربية. الرسالة: "{message}"\n'
        f"{CHAT_INSTRUCTIONS}"
    )


# =========================================================
# TRANSLATION PROMPT
# =========================================================
# Image descriptions arrive in Arabic; the image model expects English.

TRANSLATION_INSTRUCTIONS = (
    "أنت خبير في ترجمة الأوصاف العربية إلى الإنجليزية لإنشاء الصور.\n"
    "قم بترجمة النص التالي مع:\n"
    "1. الحفاظ على جميع التفاصيل المهمة\n"
    "2. إضافة تفاصيل وصفية إضافية تحسن جودة الصورة\n"
    "3. استخدام مصطلحات فنية مناسبة\n"
    "4. تجنب الترجمة الحرفية واستخدام تعبيرات طبيعية\n\n"
)


def build_translation_prompt(arabic_text: str) -> str:
    return (
        f"{TRANSLATION_INSTRUCTIONS}"
        f'النص العربي: "{arabic_text}"\n\n'
        "قم بإعطاء الترجمة فقط بدون أي نص إضافي."
    )
