"""Reference correctness tests comparing hotfuzz against RapidFuzz and jellyfish.

These tests verify that the edit distances produce the same results as
well-known reference implementations.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, given, settings

import hotfuzz as hf

try:
    from rapidfuzz import distance as rf_distance

    HAS_RAPIDFUZZ = True
except ImportError:
    HAS_RAPIDFUZZ = False

try:
    import jellyfish

    HAS_JELLYFISH = True
except ImportError:
    HAS_JELLYFISH = False


# Strategy for ASCII strings (avoiding unicode edge cases in reference comparison)
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=50
)

# Small alphabet makes transpositions and repeats likely
small_alphabet = st.text(alphabet="abc", min_size=0, max_size=12)

TEST_PAIRS = [
    ("kitten", "sitting"),
    ("hello", "hallo"),
    ("world", "word"),
    ("", "test"),
    ("test", ""),
    ("", ""),
    ("same", "same"),
    ("abcdef", "azced"),
    ("Saturday", "Sunday"),
    ("intention", "execution"),
    ("this is a test", "this is a tset"),
    ("ca", "abc"),
]

EQUAL_LENGTH_PAIRS = [
    ("1011101", "1001001"),
    ("karolin", "kathrin"),
    ("hello", "hallo"),
    ("same", "same"),
]


@pytest.mark.skipif(not HAS_RAPIDFUZZ, reason="rapidfuzz not installed")
class TestRapidFuzzReference:
    """Verify distances match RapidFuzz exactly."""

    @pytest.mark.parametrize("s1,s2", TEST_PAIRS)
    def test_levenshtein(self, s1, s2):
        assert hf.levenshtein(s1, s2) == rf_distance.Levenshtein.distance(s1, s2)

    @pytest.mark.parametrize("s1,s2", TEST_PAIRS)
    def test_osa(self, s1, s2):
        assert hf.optimal_string_alignment(s1, s2) == rf_distance.OSA.distance(s1, s2)

    @pytest.mark.parametrize("s1,s2", EQUAL_LENGTH_PAIRS)
    def test_hamming(self, s1, s2):
        assert hf.hamming(s1, s2) == rf_distance.Hamming.distance(s1, s2)

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_levenshtein_matches_rapidfuzz(self, a: str, b: str):
        expected = rf_distance.Levenshtein.distance(a, b)
        actual = hf.levenshtein(a, b)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"

    @given(small_alphabet, small_alphabet)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_osa_matches_rapidfuzz(self, a: str, b: str):
        expected = rf_distance.OSA.distance(a, b)
        actual = hf.optimal_string_alignment(a, b)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"


@pytest.mark.skipif(not HAS_JELLYFISH, reason="jellyfish not installed")
class TestJellyfishReference:
    """Verify distances match jellyfish."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_levenshtein_matches_jellyfish(self, a: str, b: str):
        expected = jellyfish.levenshtein_distance(a, b)
        actual = hf.levenshtein(a, b)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"

    @pytest.mark.parametrize("s1,s2", EQUAL_LENGTH_PAIRS)
    def test_hamming(self, s1, s2):
        assert hf.hamming(s1, s2) == jellyfish.hamming_distance(s1, s2)

    def test_osa_differs_from_unrestricted_damerau(self):
        # jellyfish implements unrestricted Damerau-Levenshtein
        assert jellyfish.damerau_levenshtein_distance("ca", "abc") == 2
        assert hf.optimal_string_alignment("ca", "abc") == 3

    def test_transposition_classic_examples(self):
        assert hf.optimal_string_alignment("ab", "ba") == 1
        assert jellyfish.damerau_levenshtein_distance("ab", "ba") == 1
        assert hf.levenshtein("ab", "ba") == 2
