"""Fallback decision data contracts.

Architectural role:
    Defines the record returned by `aibot.nlp.intent_router.decide` and
    consumed by `aibot.nlp.fallback.FallbackResponder` when picking the
    category a reply is drawn from.

Control-flow interaction:
    Exactly one outcome is reported per call, in fixed priority order:
    pattern match, then question heuristic, then the general default.

Determinism:
    Purely structural. Determinism depends on the router that fills it.
"""

from dataclasses import dataclass
from enum import Enum

from aibot.nlp.categories import Intent


class MatchOutcome(str, Enum):
    PATTERN_MATCHED = "pattern_matched"
    QUESTION_DETECTED = "question_detected"
    DEFAULTED = "defaulted"


@dataclass(frozen=True)
class RoutingDecision:
    """Result of classifying one message for the fallback responder.

    Attributes:
        intent: Category the reply must be drawn from.
        outcome: Which tier of the fallback produced `intent`.
        pattern: Pattern that matched, only set for `PATTERN_MATCHED`.
    """

    intent: Intent
    outcome: MatchOutcome
    pattern: str | None = None
