"""Tests for keyword sentiment inference."""

import pytest

from voltstream.feedback.sentiment import infer_sentiment, is_auto, resolve_sentiment


class TestInferSentiment:
    """Tests for infer_sentiment()."""

    @pytest.mark.parametrize(
        "text",
        [
            "The app crashed twice today",
            "Got an ERROR on login",
            "Found a bug in checkout",
            "Terrible experience",
            "This is unacceptable",
        ],
    )
    def test_negative_triggers(self, text):
        assert infer_sentiment(text) == "Negative"

    @pytest.mark.parametrize("text", ["I love the new design", "Great update", "Excellent support"])
    def test_positive_triggers(self, text):
        assert infer_sentiment(text) == "Positive"

    def test_neutral_default(self):
        assert infer_sentiment("Where can I change my email address?") == "Neutral"

    def test_empty_text_is_neutral(self):
        assert infer_sentiment("") == "Neutral"

    def test_negative_takes_precedence(self):
        assert infer_sentiment("I love it, but there is a bug") == "Negative"


class TestResolveSentiment:
    """Tests for resolve_sentiment() and the auto sentinel."""

    def test_supplied_value_used_unchanged(self):
        assert resolve_sentiment("there is a bug", "Positive") == "Positive"

    @pytest.mark.parametrize("supplied", [None, "", "auto", "AUTO", " Auto "])
    def test_auto_infers(self, supplied):
        assert resolve_sentiment("great app", supplied) == "Positive"

    def test_is_auto(self):
        assert is_auto(None)
        assert is_auto("AUTO")
        assert not is_auto("Neutral")
