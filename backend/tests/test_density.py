"""Tests for the keyword density analyzer."""

import unicodedata
from collections import Counter

import pytest

from seo_auditor.modules.density import (
    STOP_WORDS,
    TOP_K,
    analyze_density,
    count_ngrams,
    rank_phrases,
    tokenize,
)


def _as_tuples(metrics):
    return [(m.phrase, m.count) for m in metrics]


class TestTokenize:
    """Normalization of raw page text into tokens."""

    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Hello, World! Hello?") == ["hello", "world", "hello"]

    def test_collapses_whitespace(self):
        assert tokenize("  alpha \n\n beta\t\tgamma  ") == ["alpha", "beta", "gamma"]

    def test_drops_single_character_tokens(self):
        assert tokenize("x y z dog 7") == ["dog"]

    def test_apostrophes_join_words(self):
        assert tokenize("Don't stop") == ["dont", "stop"]

    def test_unicode_letters_are_word_characters(self):
        """Accented letters survive; symbols and emoji are stripped."""
        assert tokenize("Café déjà vu — naïve 😀 café") == ["café", "déjà", "vu", "naïve", "café"]

    def test_combining_marks_stay_inside_words(self):
        """Devanagari vowel signs and viramas are part of the word."""
        assert tokenize("हिन्दी हिन्दी") == ["हिन्दी", "हिन्दी"]

    def test_decomposed_latin_is_not_split(self):
        word = unicodedata.normalize("NFD", "café")
        assert tokenize(f"{word} 😀 {word}") == [word, word]

    def test_digits_and_underscores_are_kept(self):
        assert tokenize("2024 snake_case") == ["2024", "snake_case"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "!!! ??? ...", "😀 😀"])
    def test_no_tokens(self, text):
        assert tokenize(text) == []


class TestCountNgrams:
    """Sliding window counting."""

    def test_unigrams_skip_stop_words(self):
        counts = count_ngrams(tokenize("the cat sat on the mat"), 1)
        assert counts == {"cat": 1, "sat": 1, "mat": 1}

    def test_bigrams_keep_stop_words(self):
        counts = count_ngrams(tokenize("the cat sat on the mat"), 2)
        assert list(counts) == ["the cat", "cat sat", "sat on", "on the", "the mat"]

    def test_keys_in_first_seen_order(self):
        counts = count_ngrams(["beta", "alpha", "beta", "gamma"], 1)
        assert list(counts) == ["beta", "alpha", "gamma"]

    def test_returns_a_counter(self):
        counts = count_ngrams(["beta", "alpha", "beta"], 1)
        assert isinstance(counts, Counter)
        assert counts["beta"] == 2
        assert counts["missing"] == 0

    def test_fewer_tokens_than_window(self):
        assert count_ngrams(["solo"], 2) == {}
        assert count_ngrams([], 3) == {}

    def test_window_sums_match_token_count(self):
        tokens = tokenize(
            "The quick brown fox jumps over the lazy dog. The dog sleeps, and the fox runs "
            "into the forest because it is late."
        )
        total = len(tokens)
        for n in (2, 3):
            assert sum(count_ngrams(tokens, n).values()) == max(0, total - n + 1)

        stop_hits = sum(1 for t in tokens if t in STOP_WORDS)
        assert sum(count_ngrams(tokens, 1).values()) + stop_hits == total


class TestRankPhrases:

    def test_sorted_descending_with_stable_ties(self):
        ranked = rank_phrases({"b": 1, "a": 2, "c": 1, "d": 2}, total_tokens=6, n=1)
        assert [m.phrase for m in ranked] == ["a", "d", "b", "c"]

    def test_density_uses_window_count(self):
        ranked = rank_phrases({"red shoes": 2}, total_tokens=5, n=2)
        assert ranked[0].density == pytest.approx(50.0)

    def test_non_positive_denominator_gives_zero_density(self):
        ranked = rank_phrases({"a b": 1}, total_tokens=1, n=2)
        assert ranked[0].density == 0.0

    def test_truncates_to_top_k(self):
        counts = {f"term{i:02d}": 1 for i in range(30)}
        assert len(rank_phrases(counts, total_tokens=30, n=1)) == TOP_K
        assert len(rank_phrases(counts, total_tokens=30, n=1, top_k=5)) == 5


class TestAnalyzeDensity:
    """End to end behaviour of analyze_density."""

    def test_stop_words_excluded_from_single_words_only(self):
        report = analyze_density("the cat sat on the mat")

        assert _as_tuples(report.single) == [("cat", 1), ("sat", 1), ("mat", 1)]
        assert ("the cat", 1) in _as_tuples(report.two_word)
        assert ("on the mat", 1) in _as_tuples(report.three_word)

    def test_repeated_word(self):
        report = analyze_density("cat cat cat")

        assert [m.model_dump() for m in report.single] == [
            {"phrase": "cat", "count": 3, "density": 100.0}
        ]
        assert _as_tuples(report.two_word) == [("cat cat", 2)]
        assert report.two_word[0].density == pytest.approx(100.0)
        assert _as_tuples(report.three_word) == [("cat cat cat", 1)]

    @pytest.mark.parametrize("text", ["", "   \n\t  "])
    def test_empty_input(self, text):
        report = analyze_density(text)
        assert report.single == []
        assert report.two_word == []
        assert report.three_word == []

    def test_single_token_input(self):
        report = analyze_density("Hello!")
        assert _as_tuples(report.single) == [("hello", 1)]
        assert report.two_word == []
        assert report.three_word == []

    def test_unigram_density_uses_unfiltered_token_count(self):
        """Stop words still count in the denominator, so 'cat' is 50% of 'the cat'."""
        report = analyze_density("the cat")
        assert report.single[0].phrase == "cat"
        assert report.single[0].density == pytest.approx(50.0)

    def test_truncation_keeps_highest_counts(self):
        words = [f"term{i:02d}" for i in range(20)]
        report = analyze_density(" ".join(["alpha"] * 3 + words))

        assert len(report.single) == 15
        assert report.single[0].phrase == "alpha"
        assert report.single[0].count == 3
        assert [m.phrase for m in report.single[1:]] == words[:14]

        assert len(report.two_word) == 15
        assert report.two_word[0].phrase == "alpha alpha"
        assert report.two_word[0].count == 2
        counts = [m.count for m in report.two_word]
        assert counts == sorted(counts, reverse=True)

    def test_idempotent(self):
        text = "Trail running shoes need grip. Trail running shoes need cushioning."
        assert analyze_density(text) == analyze_density(text)

    def test_serializes_with_camel_case_keys(self):
        data = analyze_density("red shoes red shoes").model_dump(by_alias=True)
        assert set(data) == {"single", "twoWord", "threeWord"}
        assert data["twoWord"][0] == {"phrase": "red shoes", "count": 2, "density": pytest.approx(200 / 3)}
