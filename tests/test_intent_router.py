# FILE: tests/test_intent_router.py
"""Tests for category matching, the question heuristic and the fallback decision."""

import pytest

from aibot.core.routing_types import MatchOutcome
from aibot.nlp.categories import (
    CATEGORIES,
    Category,
    Intent,
    InvalidCategory,
    get_category,
    validate_categories,
)
from aibot.nlp.intent_router import decide, looks_like_question, match_category, match_pattern


class TestMatchCategory:
    def test_greeting(self):
        assert match_category("السلام عليكم") == Intent.GREETINGS

    def test_greeting_in_variant_spelling(self):
        """`أهلا` matches the `اهلا` pattern after alef folding."""
        assert match_category("أهلا يا صديقي") == Intent.GREETINGS

    def test_how_are_you(self):
        assert match_category("شلونك اليوم") == Intent.HOW_ARE_YOU

    def test_thanks(self):
        assert match_category("مشكور على المساعده") == Intent.THANKS

    def test_help_with_ta_marbuta_variant(self):
        assert match_category("ابغى مساعده") == Intent.HELP

    def test_substring_not_token(self):
        """Patterns match inside longer words."""
        assert match_category("والسلامة") == Intent.GREETINGS

    def test_first_category_wins(self):
        """`كيف حالك` also contains the question pattern `كيف`; greetings come first."""
        assert match_category("مرحبا كيف حالك") == Intent.GREETINGS
        assert match_category("كيف حالك") == Intent.HOW_ARE_YOU

    def test_no_match(self):
        assert match_category("xyz123") is None

    def test_empty(self):
        assert match_category("") is None

    def test_match_pattern_reports_pattern(self):
        assert match_pattern("صباح الخير") == (Intent.GREETINGS, "صباح")

    def test_general_never_matches(self):
        general_only = (get_category(Intent.GENERAL),)
        assert match_category("anything at all", general_only) is None


class TestLooksLikeQuestion:
    @pytest.mark.parametrize("text", ["ما الفرق بينهما", "ماذا تفعل", "متى نبدأ", "أين الملف", "لماذا هذا", "  كيف نبدأ"])
    def test_lead_words(self, text):
        assert looks_like_question(text)

    @pytest.mark.parametrize("text", ["مادة جديدة", "ما", "hello what", "", "البرنامج ما يعمل"])
    def test_not_questions(self, text):
        assert not looks_like_question(text)


class TestDecide:
    def test_pattern_tier(self):
        decision = decide("السلام عليكم")
        assert decision.intent == Intent.GREETINGS
        assert decision.outcome == MatchOutcome.PATTERN_MATCHED
        assert decision.pattern == "سلام"

    def test_question_tier(self):
        """`ما ` is a lead word but not a category pattern on its own."""
        decision = decide("ما الفرق بين القطط والكلاب")
        assert decision.intent == Intent.QUESTIONS
        assert decision.outcome == MatchOutcome.QUESTION_DETECTED
        assert decision.pattern is None

    def test_question_pattern_beats_heuristic(self):
        decision = decide("ليش البرنامج بطيء")
        assert decision.intent == Intent.QUESTIONS
        assert decision.outcome == MatchOutcome.PATTERN_MATCHED

    def test_default_tier(self):
        decision = decide("xyz123")
        assert decision.intent == Intent.GENERAL
        assert decision.outcome == MatchOutcome.DEFAULTED


class TestValidateCategories:
    def test_builtin_table_is_valid(self):
        validate_categories(CATEGORIES)

    def test_order_is_declaration_order(self):
        assert [c.intent for c in CATEGORIES] == list(Intent)

    def test_every_category_has_replies(self):
        assert all(len(c.replies) == 3 for c in CATEGORIES)

    def test_empty_replies_rejected(self):
        bad = (Category(Intent.HELP, ("x",), ()),) + CATEGORIES[-2:]
        with pytest.raises(InvalidCategory):
            validate_categories(bad)

    def test_duplicate_intent_rejected(self):
        with pytest.raises(InvalidCategory):
            validate_categories(CATEGORIES + CATEGORIES[:1])

    def test_empty_pattern_rejected(self):
        bad = (Category(Intent.GREETINGS, ("",), ("hi",)),) + CATEGORIES[-2:]
        with pytest.raises(InvalidCategory):
            validate_categories(bad)

    def test_missing_general_rejected(self):
        with pytest.raises(InvalidCategory):
            validate_categories(CATEGORIES[:-1])

    def test_unknown_category_lookup(self):
        with pytest.raises(InvalidCategory):
            get_category(Intent.GENERAL, CATEGORIES[:1])

    def test_unknown_category_message_uses_value(self):
        with pytest.raises(InvalidCategory, match="Unknown category: general$") as excinfo:
            get_category(Intent.GENERAL, CATEGORIES[:1])
        assert "Intent." not in str(excinfo.value)
