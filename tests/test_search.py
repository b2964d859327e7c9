"""Tests for the search engine: Bitap, token, sliding, partial and CJK search.

This module tests the explicit search methods, the fail-soft behavior of
search and smart_search, and the way smart_search picks a method.
"""

import pytest

import hotfuzz as hf
from hotfuzz import SearchMethod
from hotfuzz.search import measure_token_distance


class TestBitap:
    """Tests for the bit-parallel automaton."""

    def test_exact_match(self):
        result = hf.search("laso", "lazolaso", SearchMethod.BITAP)
        assert result.start == 4
        assert result.end == 8
        assert result.metric == 0
        assert result.ratio == 100.0

    def test_one_substitution(self):
        result = hf.search("spank", "bitbit spunky", SearchMethod.BITAP)
        assert result.start == 7
        assert result.metric == 1
        assert result.matched == "spunk"

    def test_accented_typo(self):
        result = hf.search("bolígrafo", "boligrafo rojo", SearchMethod.BITAP)
        assert result.start == 0
        assert result.metric == 1

    def test_raw_automaton(self):
        assert hf.bitap("laso", "lazolaso") == (4, 0)

    def test_text_shorter_than_pattern(self):
        assert hf.bitap("abcdef", "ab") == (-1, 6)
        assert hf.bitap_search("abcdef", "ab").is_no_result

    def test_default_method_is_bitap(self):
        assert hf.search("laso", "lazolaso").distance_function == "bitap"


class TestPatternLimit:
    """Patterns longer than 31 characters do not fit the machine word."""

    def test_max_length_pattern_is_accepted(self):
        pattern = "a" * hf.BITAP_MAX_PATTERN_LENGTH
        assert len(hf.PatternMask(pattern)) == 31
        assert hf.bitap_search(pattern, "b" + pattern).metric == 0

    def test_pattern_mask_raises(self):
        with pytest.raises(hf.PatternTooLongError, match="31"):
            hf.PatternMask("a" * 32)

    def test_direct_call_raises(self):
        with pytest.raises(hf.PatternTooLongError):
            hf.bitap_search("a" * 32, "a" * 40)

    def test_pattern_too_long_is_validation_error(self):
        with pytest.raises(hf.ValidationError):
            hf.bitap("a" * 32, "a" * 40)

    def test_search_degrades_to_no_result(self):
        result = hf.search("a" * 32, "a" * 40, SearchMethod.BITAP)
        assert result.is_no_result

    def test_pattern_mask_lookup(self):
        masks = hf.PatternMask("aba")
        # bits 0 and 2 cleared for "a", bit 1 for "b"
        assert masks["a"] & 0b111 == 0b010
        assert masks["b"] & 0b111 == 0b101
        assert masks["z"] & 0b111 == 0b111


class TestTokenSearch:
    """Tests for Levenshtein-based token search."""

    def test_span_covers_matched_tokens(self):
        result = hf.search(
            "update windos", "open the window update settings", SearchMethod.TOKEN_SEARCH
        )
        assert result.metric == 1
        assert (result.start, result.end) == (9, 22)
        assert result.matched == "window update"
        assert result.ratio == pytest.approx(96.15, abs=0.01)

    def test_exact_tokens(self):
        result = hf.token_search("better battery", "activate better battery mode please")
        assert result.metric == 0
        assert result.ratio == 100.0
        assert result.matched == "better battery"

    def test_span_is_case_insensitive(self):
        result = hf.token_search("battery", "Open BATTERY settings")
        assert (result.start, result.end) == (5, 12)
        assert result.matched == "BATTERY"

    def test_repeated_token_widens_span(self):
        result = hf.token_search("clock", "clock alarm clock")
        assert (result.start, result.end) == (0, 17)

    def test_span_when_lowercasing_changes_length(self):
        # "İ".lower() is two code points
        target = "İİİİ x"
        result = hf.token_search("x", target)
        assert (result.start, result.end) == (5, 6)
        assert result.end <= len(target)
        assert result.matched == "x"

    def test_whole_tokens_only(self):
        result = hf.token_search("cat", "concat cat")
        assert (result.start, result.end) == (7, 10)

    def test_source_larger_than_target(self):
        assert hf.token_search("alarm and clock", "alarm clock").is_no_result

    def test_greedy_pairs(self):
        pairs = measure_token_distance(
            ["a", "b"], ["b", "a"], hf.levenshtein
        )
        assert pairs == [hf.TokenPair("a", "a", 0), hf.TokenPair("b", "b", 0)]

    def test_each_token_used_once(self):
        pairs = measure_token_distance(
            ["test", "tent"], ["test"], hf.levenshtein
        )
        assert pairs == [hf.TokenPair("test", "test", 0)]


class TestSlidingSearch:
    """Tests for token search with the partial alignment distance."""

    def test_sliding_search(self):
        result = hf.search(
            "windos update", "open the window update settings", SearchMethod.SLIDING_SEARCH
        )
        assert result.metric == 1
        assert (result.start, result.end) == (9, 22)

    def test_token_fits_inside_another(self):
        result = hf.sliding_token_search("flower", "come see my sunflower")
        assert result.metric == 0
        assert result.ratio == 100.0
        assert result.matched == "sunflower"


class TestPartialSearch:
    def test_partial_search(self):
        result = hf.search("test", "the test", SearchMethod.PARTIAL_SEARCH)
        assert (result.start, result.end, result.metric) == (4, 8, 0)

    def test_long_pattern(self):
        pattern = "x" * 35
        result = hf.partial_search(pattern, "yyyyy" + pattern)
        assert result.start == 5
        assert result.metric == 0


class TestCJKSearch:
    """Search over decomposed CJK blocks, reported in original character indices."""

    @pytest.mark.parametrize(
        "source,target,start,end",
        [
            ("投影模式", "打开投影模式设置", 2, 6),
            ("电池", "所剩电池时间", 2, 4),
            ("波束成形", "将麦克风波束成形设置为仅我的声音", 4, 8),
        ],
    )
    def test_han(self, source, target, start, end):
        result = hf.search(source, target, SearchMethod.PARTIAL_CJK_SEARCH)
        assert (result.start, result.end) == (start, end)
        assert result.metric == 0

    def test_han_typo(self):
        result = hf.smart_search("电亁", "所剩电池时间")
        assert result.start == 2
        assert result.metric == 1

    def test_hangul_offsets_are_rescaled(self):
        result = hf.cjk_search("설정", "블루투스 설정 열기")
        assert (result.start, result.end) == (5, 7)
        assert result.matched == "설정"

    def test_kana_padding(self):
        # バ decomposes into two units, so every block is padded to width 2
        result = hf.cjk_search("設定", "バッテリー設定")
        assert (result.start, result.end) == (5, 7)

    def test_original_strings_are_kept(self):
        result = hf.cjk_search("설정", "블루투스 설정 열기")
        assert result.source == "설정"
        assert result.target == "블루투스 설정 열기"

    def test_custom_decomposer(self):
        class Doubler:
            def decompose(self, text):
                return "".join(c * 2 for c in text)

            def decompose_to_blocks(self, text):
                return [c * 2 for c in text]

        result = hf.cjk_search("电池", "所剩电池时间", decomposer=Doubler())
        assert (result.start, result.end) == (2, 4)


class TestSearchFailSoft:
    """search never raises."""

    @pytest.mark.parametrize("method", list(SearchMethod))
    def test_empty_input(self, method):
        assert hf.search("", "abc", method).is_no_result
        assert hf.search("abc", "", method).is_no_result

    def test_none_input(self):
        assert hf.search(None, "abc").is_no_result

    def test_unknown_method_falls_back_to_bitap(self, caplog):
        with caplog.at_level("WARNING", logger="hotfuzz"):
            result = hf.search("laso", "lazolaso", "no_such_search")
        assert result.distance_function == "bitap"
        assert result.start == 4
        assert "no_such_search" in caplog.text

    def test_string_method_names(self):
        result = hf.search("update windos", "open the window update settings", "token-search")
        assert result.metric == 1


class TestSmartSearch:
    """Tests for method selection in smart_search."""

    def test_single_short_token_uses_bitap(self):
        result = hf.smart_search("laso", "lazolaso")
        assert result.distance_function == "bitap"
        assert (result.start, result.end, result.metric) == (4, 8, 0)

    def test_multiple_tokens_use_token_search(self):
        result = hf.smart_search("best performance", "power mode better performance")
        assert result.distance_function == "levenshtein"
        assert result.metric == 3
        assert (result.start, result.end) == (11, 29)

    def test_long_single_token_uses_partial_search(self):
        pattern = "x" * 35
        result = hf.smart_search(pattern, "yyyyy" + pattern)
        assert result.distance_function == "hamming"
        assert result.start == 5

    def test_cjk_uses_cjk_search(self):
        result = hf.smart_search("投影模式", "打开投影模式设置")
        assert result.start == 2

    def test_korean(self):
        result = hf.smart_search("설정", "블루투스 설정 열기")
        assert result.start == 5

    def test_source_larger_than_target(self):
        result = hf.smart_search("alarm and clock", "alarm  clock")
        assert result.is_no_result
        assert result.distance_function == hf.SOURCE_LARGER_THAN_TARGET

    def test_preprocess_cleans_punctuation(self):
        result = hf.smart_search("better, battery!", "activate better battery mode please")
        assert result.matched == "better battery"

    @pytest.mark.parametrize("source,target", [("", "abc"), ("abc", ""), (None, "abc")])
    def test_degenerate_input(self, source, target):
        assert hf.smart_search(source, target).is_no_result
