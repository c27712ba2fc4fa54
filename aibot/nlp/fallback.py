"""Keyword-based fallback responder.

Role in pipeline:
    Invoked by `aibot.core.engine` when the primary text model fails, times out
    or returns nothing. Classifies the message with
    `aibot.nlp.intent_router.decide` and draws one canned reply from the chosen
    category.

Randomness:
    The random source is injected (`random.Random`-compatible, only
    `randrange` is used). A seeded source makes replies reproducible.

Concurrency:
    The category table is immutable and no I/O happens here, so one responder
    can serve any number of concurrent message tasks.

Failure handling:
    `respond` never raises on text input. `select_reply` raises
    `InvalidCategory` for an empty reply set, which the import-time table
    validation already rules out for `CATEGORIES`.
"""

import logging
import random

from aibot.nlp.categories import CATEGORIES, InvalidCategory, get_category
from aibot.nlp.intent_router import decide


logger = logging.getLogger(__name__)


def select_reply(category, rng) -> str:
    """Return one reply drawn uniformly from `category.replies`."""
    if not category.replies:
        raise InvalidCategory(f"Category has no replies: {category.intent.value}")
    return category.replies[rng.randrange(len(category.replies))]


class FallbackResponder:
    """Three-tier responder: pattern match, question heuristic, general."""

    def __init__(self, categories=CATEGORIES, rng=None):
        self.categories = categories
        self.rng = rng if rng is not None else random.Random()

    def respond(self, raw_text: str) -> str:
        decision = decide(raw_text or "", self.categories)
        logger.debug(
            "Fallback decision: intent=%s outcome=%s pattern=%r",
            decision.intent.value,
            decision.outcome.value,
            decision.pattern,
        )
        category = get_category(decision.intent, self.categories)
        return select_reply(category, self.rng)


_DEFAULT_RESPONDER = FallbackResponder()


def respond(raw_text: str, rng=None) -> str:
    """Answer `raw_text` from the built-in category table.

    Args:
        raw_text: Message text exactly as received.
        rng: Optional random source; the shared default responder is used
            when omitted.
    """
    if rng is None:
        return _DEFAULT_RESPONDER.respond(raw_text)
    return FallbackResponder(rng=rng).respond(raw_text)
