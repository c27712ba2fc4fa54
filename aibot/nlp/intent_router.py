"""Intent router producing `RoutingDecision` for the fallback responder.

Intent classification logic:
- Normalizes the input once and scans categories in declaration order. The
  first category with a pattern contained in the normalized text wins.
- When no pattern matches, checks whether the text opens with an
  interrogative lead word (question heuristic).
- Otherwise routes to the general category.

Matching model:
- Substring containment after `aibot.nlp.normalizer.normalize`, applied to both
  the text and each pattern. No tokenization and no exact-equality matching.

Determinism:
- Fully deterministic for identical input and category table.

Failure handling:
- Empty or non-Arabic input is valid and simply falls through to the default.
"""

import re

from aibot.core.routing_types import MatchOutcome, RoutingDecision
from aibot.nlp.categories import CATEGORIES, Intent
from aibot.nlp.normalizer import normalize


# =========================================================
# QUESTION HEURISTIC
# =========================================================

QUESTION_LEAD_WORDS = ("ما", "ماذا", "كيف", "متى", "اين", "أين", "لماذا")

QUESTION_PATTERN = re.compile(
    r"^(?:" + "|".join(QUESTION_LEAD_WORDS) + r")\s",
    re.IGNORECASE,
)


def looks_like_question(raw_text: str) -> bool:
    """Return whether the text opens with an interrogative lead word.

    The lead word must be followed by whitespace, so `ماذا تفعل` is a question
    while `مادة` is not.
    """
    if not raw_text:
        return False
    return QUESTION_PATTERN.match(raw_text.strip()) is not None


# =========================================================
# PATTERN MATCHING
# =========================================================

def match_pattern(raw_text: str, categories=CATEGORIES) -> tuple[Intent, str] | None:
    """Find the first category pattern contained in the normalized text.

    Returns:
        `(intent, pattern)` for the first hit in category then pattern order,
        or `None` when nothing matches.
    """
    text = normalize((raw_text or "").strip())

    for category in categories:
        for pattern in category.patterns:
            if normalize(pattern) in text:
                return category.intent, pattern

    return None


def match_category(raw_text: str, categories=CATEGORIES) -> Intent | None:
    hit = match_pattern(raw_text, categories)
    return hit[0] if hit else None


# =========================================================
# THREE-TIER DECISION
# =========================================================

def decide(raw_text: str, categories=CATEGORIES) -> RoutingDecision:
    """Classify a message into the category its fallback reply comes from.

    Priority order:
    1. Category pattern match.
    2. Question heuristic -> `Intent.QUESTIONS`.
    3. Default -> `Intent.GENERAL`.
    """
    hit = match_pattern(raw_text, categories)
    if hit:
        intent, pattern = hit
        return RoutingDecision(intent, MatchOutcome.PATTERN_MATCHED, pattern)

    if looks_like_question(raw_text):
        return RoutingDecision(Intent.QUESTIONS, MatchOutcome.QUESTION_DETECTED)

    return RoutingDecision(Intent.GENERAL, MatchOutcome.DEFAULTED)
