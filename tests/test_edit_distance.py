"""
Tests for the Levenshtein edit distance primitive.
"""
import pytest

from research_memory.resolution import edit_distance


class TestEditDistance:
    """Tests for edit_distance."""

    @pytest.mark.parametrize("text", ["", "a", "Deep Learning", "ünïcödé"])
    def test_identity(self, text):
        """Test that a string is at distance 0 from itself."""
        assert edit_distance(text, text) == 0

    @pytest.mark.parametrize("a,b", [
        ("kitten", "sitting"),
        ("", "abc"),
        ("deep leaning", "deep learning"),
        ("ai", "aimlnlp"),
    ])
    def test_symmetry(self, a, b):
        """Test that argument order does not matter."""
        assert edit_distance(a, b) == edit_distance(b, a)

    def test_single_edits(self):
        """Test that one insertion, deletion or substitution costs 1."""
        assert edit_distance("paper", "papers") == 1
        assert edit_distance("papers", "paper") == 1
        assert edit_distance("paper", "caper") == 1

    def test_known_distances(self):
        """Test textbook values."""
        assert edit_distance("kitten", "sitting") == 3
        assert edit_distance("", "abc") == 3
        assert edit_distance("ai", "aimlnlp") == 5

    def test_no_case_folding(self):
        """Test that case differences count as substitutions."""
        assert edit_distance("A", "a") == 1
        assert edit_distance("Deep Learning".lower(), "DEEP LEARNING".lower()) == 0

    def test_triangle_inequality(self):
        """Test d(a, c) <= d(a, b) + d(b, c) on sample triples."""
        triples = [
            ("graph", "grape", "grapes"),
            ("neural", "natural", "nature"),
            ("", "ab", "abc"),
        ]
        for a, b, c in triples:
            assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)

    def test_score_cutoff_caps_result(self):
        """Test that distances above the cutoff are reported as cutoff + 1."""
        assert edit_distance("abcdefgh", "", score_cutoff=3) == 4
        assert edit_distance("abc", "abd", score_cutoff=3) == 1
