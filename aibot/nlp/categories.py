"""Static intent category table for the fallback responder.

Architectural role:
    Declares the closed set of intents (`Intent`) and the ordered category
    records consumed by `aibot.nlp.intent_router` and `aibot.nlp.fallback`.

Ordering guarantee:
    `CATEGORIES` is a tuple. Matching scans it front to back and the first
    category with a pattern hit wins, so declaration order is the priority.

Content:
    Pattern and reply strings are product data. `GENERAL` carries no patterns
    and is only reached as the terminal default.

Failure handling:
    `validate_categories` runs at import time. A malformed table raises
    `InvalidCategory` and prevents the process from starting.
"""

from dataclasses import dataclass
from enum import Enum

from aibot.nlp.normalizer import normalize


class InvalidCategory(ValueError):
    """Raised when a category violates the table invariants."""


class Intent(str, Enum):
    GREETINGS = "greetings"
    HOW_ARE_YOU = "how_are_you"
    THANKS = "thanks"
    HELP = "help"
    QUESTIONS = "questions"
    GENERAL = "general"


@dataclass(frozen=True)
class Category:
    """One intent bucket: trigger patterns plus candidate replies."""

    intent: Intent
    patterns: tuple[str, ...]
    replies: tuple[str, ...]


CATEGORIES: tuple[Category, ...] = (
    Category(
        Intent.GREETINGS,
        patterns=(
            "سلام", "مرحبا", "هاي", "هلا", "صباح", "مساء", "اهلا",
            "السلام", "صباح الخير", "مساء الخير",
        ),
        replies=(
            "وعليكم السلام ورحمة الله وبركاته 😊",
            "أهلاً وسهلاً! كيف حالك؟ 🌟",
            "مرحباً بك! يسعدني التحدث معك 💫",
        ),
    ),
    Category(
        Intent.HOW_ARE_YOU,
        patterns=(
            "كيف حالك", "شلونك", "عامل ايه", "كيفك", "كيف الحال",
            "عامل اية", "شخبارك",
        ),
        replies=(
            "الحمد لله بخير! كيف حالك أنت؟ 😊",
            "بخير والحمد لله! أتمنى أن تكون بخير أيضاً 🌟",
            "ممتاز! يسعدني سؤالك عن حالي 💫",
        ),
    ),
    Category(
        Intent.THANKS,
        patterns=(
            "شكرا", "شكراً", "تسلم", "جزاك", "مشكور", "يعطيك العافية",
            "الله يجزاك",
        ),
        replies=(
            "العفو! سعيد بمساعدتك 😊",
            "لا شكر على واجب! 🌟",
            "أنا هنا لخدمتك دائماً 💫",
        ),
    ),
    Category(
        Intent.HELP,
        patterns=(
            "ساعد", "مساعدة", "احتاج", "ممكن", "اريد", "أريد", "محتاج",
            "تقدر", "تكدر", "بدي",
        ),
        replies=(
            "بالتأكيد! كيف يمكنني مساعدتك؟ 😊",
            "أنا هنا لمساعدتك! ما الذي تحتاجه؟ 🌟",
            "يسعدني مساعدتك! تفضل بطرح سؤالك 💫",
        ),
    ),
    Category(
        Intent.QUESTIONS,
        patterns=(
            "ما هي", "ماهي", "ما هو", "ماهو", "كيف", "متى", "لماذا",
            "ليش", "وين", "اين", "أين", "شلون",
        ),
        replies=(
            "سأحاول مساعدتك في الإجابة على سؤالك. هل يمكنك توضيح المزيد؟ 🤔",
            "أنا هنا للإجابة على أسئلتك. كيف يمكنني مساعدتك بشكل أفضل؟ 💭",
            "سؤال جيد! دعني أساعدك في الحصول على إجابة مفيدة 📚",
        ),
    ),
    Category(
        Intent.GENERAL,
        patterns=(),
        replies=(
            "أفهم ما تقول. هل يمكنني مساعدتك في شيء محدد؟ 🤝",
            "أنا هنا للمساعدة! هل لديك سؤال معين؟ 💡",
            "يمكنني مساعدتك بشكل أفضل إذا كان لديك طلب محدد 🎯",
        ),
    ),
)


def validate_categories(categories) -> None:
    """Check the table invariants once, before any message is handled.

    Raises:
        InvalidCategory: on an empty reply set, a pattern that normalizes to
            the empty string (it would match every input), a duplicated
            intent, or a missing `QUESTIONS` / `GENERAL` category.
    """
    seen = set()
    for category in categories:
        if category.intent in seen:
            raise InvalidCategory(f"Duplicate category: {category.intent.value}")
        seen.add(category.intent)

        if not category.replies:
            raise InvalidCategory(f"Category has no replies: {category.intent.value}")

        for pattern in category.patterns:
            if not normalize(pattern).strip():
                raise InvalidCategory(
                    f"Empty pattern in category: {category.intent.value}"
                )

    for required in (Intent.QUESTIONS, Intent.GENERAL):
        if required not in seen:
            raise InvalidCategory(f"Missing required category: {required.value}")


def get_category(intent: Intent, categories=CATEGORIES) -> Category:
    for category in categories:
        if category.intent == intent:
            return category
    raise InvalidCategory(f"Unknown category: {intent.value}")


validate_categories(CATEGORIES)
