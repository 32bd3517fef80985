"""
Tests for text normalization and tokenization.
"""

import re

from matcher.text import normalize, tokenize

TOKEN_PATTERN = re.compile(r"^[a-z0-9]+$")


class TestNormalize:
    """Test normalization used as the signal haystack."""

    def test_lowercases_and_strips_punctuation(self):
        assert normalize("Hello, World!  ML/AI") == "hello world ml ai"

    def test_collapses_whitespace(self):
        assert normalize("  data\t\tanalysis \n here ") == "data analysis here"

    def test_underscores_become_spaces(self):
        assert normalize("full_stack") == "full stack"

    def test_blank_input(self):
        assert normalize("") == ""
        assert normalize("   \n\t") == ""
        assert normalize(None) == ""

    def test_non_ascii_removed(self):
        assert normalize("Café résumé") == "caf r sum"


class TestTokenize:
    """Test tokenization used for TF-IDF."""

    STOPWORDS = frozenset(["the", "for", "we", "need", "project"])

    def test_filters_stopwords_and_short_tokens(self):
        tokens = tokenize(
            "We need a Machine-Learning model for the project",
            self.STOPWORDS,
        )
        assert tokens == ["machine", "learning", "model"]

    def test_keeps_repeats_in_order(self):
        assert tokenize("api api backend api") == ["api", "api", "backend", "api"]

    def test_min_length_one_keeps_single_chars(self):
        assert tokenize("a b cd", min_length=1) == ["a", "b", "cd"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize(None) == []

    def test_tokens_are_lowercase_alphanumeric(self):
        samples = [
            "Build an MVP (iOS + Android) in 3 months!!",
            "C++/C# & Node.js; $5,000 budget",
            "über-fast ETL · données",
            "x y z 1 2 3",
        ]
        for text in samples:
            for token in tokenize(text, self.STOPWORDS):
                assert TOKEN_PATTERN.match(token)
                assert len(token) >= 2
                assert token not in self.STOPWORDS

    def test_default_stopwords_removed(self, config):
        stopwords = frozenset(config.tokenizer.stopwords)
        tokens = tokenize(
            "The project requirements are needed for success with our team",
            stopwords,
        )
        assert tokens == ["team"]

    def test_deterministic(self):
        text = "Dashboards, dashboards and more dashboards"
        assert tokenize(text) == tokenize(text)
