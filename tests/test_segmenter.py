"""Unit tests for line segmentation and short-word merging.

WHY: Segmentation decides what appears on screen and how the pause
context finds the current word. Cascading merges or lost tokens would
make the stream skip or garble text.

HOW: Tests cover delimiter handling, empty lines, the single-pass merge
rule, token indexes for merged units, and token spans.
"""

from speedread.core.segmenter import (
    Unit,
    join_short_words,
    segment,
    segment_indexed,
    token_spans,
    tokenize,
)


class TestTokenize:
    def test_splits_on_whitespace(self):
        assert tokenize("The quick brown fox.") == ["The", "quick", "brown", "fox."]

    def test_splits_on_hyphen_runs(self):
        assert tokenize("well-known -- fact") == ["well", "known", "fact"]

    def test_mixed_runs_and_tabs(self):
        assert tokenize("  a -\t- b\n") == ["a", "b"]

    def test_empty_and_blank_lines(self):
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize("---") == []

    def test_spans(self):
        assert token_spans("ab  cd-e") == [(0, 2), (4, 6), (7, 8)]


class TestJoinShortWords:
    def test_merges_short_pairs_once(self):
        assert join_short_words(["to", "be", "or", "not", "to", "be"]) == [
            "to be", "or not", "to be",
        ]

    def test_no_cascading(self):
        assert join_short_words(["a", "b", "c"]) == ["a b", "c"]

    def test_long_word_breaks_pairs(self):
        assert join_short_words(["to", "be", "a", "hero"]) == ["to be", "a", "hero"]

    def test_three_letters_are_short(self):
        assert join_short_words(["the", "cat"]) == ["the cat"]

    def test_four_letters_are_not_short(self):
        assert join_short_words(["the", "fish"]) == ["the", "fish"]

    def test_empty(self):
        assert join_short_words([]) == []


class TestSegment:
    def test_merge_disabled(self):
        assert segment("to be or not", multiword=False) == ["to", "be", "or", "not"]

    def test_merge_enabled(self):
        assert segment("to be a hero", multiword=True) == ["to be", "a", "hero"]

    def test_indexed_counts_pre_merge_tokens(self):
        assert segment_indexed("so it was written", multiword=True) == [
            Unit("so it", 0, 2),
            Unit("was", 2),
            Unit("written", 3),
        ]

    def test_indexed_without_merge(self):
        units = segment_indexed("one-two three")
        assert [(u.word, u.token_index, u.token_count) for u in units] == [
            ("one", 0, 1), ("two", 1, 1), ("three", 2, 1),
        ]
