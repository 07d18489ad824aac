"""Unit tests for the digit alphabet model.

WHY: Every conversion trusts the alphabet's invariants: equal-width,
unique digits and a dense index. A malformed alphabet that slipped
through construction would silently produce wrong numbers.

HOW: Tests cover class combination order and size, every validation
failure, two-way lookup, the prefix mutator and its clone, and prefix
autodetection including the ambiguity rules.

RULES:
- Construction failures must raise BadAlphabet, never a bare exception
- Lookup failures must raise EntryMismatch
"""

import pytest

from bibicode.core.alphabet import DigitAlphabet, autodetect
from bibicode.core.errors import BadAlphabet, EntryMismatch
from bibicode.core.registry import from_tag

from tests.conftest import BIBI_DIGITS, BUDU_DASH_CONSONANTS, BUDU_DASH_VOWELS


class TestConstruction:
    """Digit classes combine by Cartesian product, first class most significant."""

    def test_single_class(self):
        alphabet = DigitAlphabet("", [["0", "1", "2"]])
        assert alphabet.radix == 3
        assert alphabet.digit_width == 1
        assert alphabet.digits == ("0", "1", "2")

    def test_string_class_is_split_into_characters(self):
        alphabet = DigitAlphabet("0o", ["01234567"])
        assert alphabet.radix == 8
        assert alphabet.digits[7] == "7"

    def test_multi_character_digits(self, bibi):
        assert bibi.radix == 16
        assert bibi.digit_width == 2

    def test_combined_size_is_product(self):
        alphabet = DigitAlphabet("", [BUDU_DASH_CONSONANTS, BUDU_DASH_VOWELS])
        assert alphabet.radix == len(BUDU_DASH_CONSONANTS) * len(BUDU_DASH_VOWELS)

    def test_combined_width_is_sum(self, budu_dash):
        assert budu_dash.digit_width == 3

    def test_later_classes_vary_fastest(self):
        """Four consonants x four vowels reproduce the Bibi-binary order."""
        alphabet = DigitAlphabet("", [["H", "B", "K", "D"], ["O", "A", "E", "I"]])
        assert list(alphabet.digits) == BIBI_DIGITS

    def test_three_classes(self):
        alphabet = DigitAlphabet("", [["a", "b"], ["0", "1"], ["x", "y"]])
        assert alphabet.digits == ("a0x", "a0y", "a1x", "a1y", "b0x", "b0y", "b1x", "b1y")

    def test_from_digits(self):
        alphabet = DigitAlphabet.from_digits("0b", ["0", "1"])
        assert alphabet == from_tag("bin")


class TestValidation:
    """Malformed alphabets are rejected with BadAlphabet."""

    def test_duplicate_digit_in_class(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["0", "1", "2", "2"]])

    def test_unequal_lengths_in_class(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["0", "1", "2", "22"]])

    def test_unequal_lengths_in_second_class(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["0", "1", "2"], ["0", "1", "2", "22"]])

    def test_duplicate_after_combination(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["0", "1", "2"], ["0", "1", "2", "2"]])

    def test_duplicate_in_later_class(self):
        with pytest.raises(BadAlphabet, match="more than once"):
            DigitAlphabet("", [["a", "b"], ["x", "x"]])

    def test_empty_class(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["0", "1"], []])

    def test_no_classes(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [])

    def test_empty_digit(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["", ""]])

    def test_non_string_digit(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [[0, 1]])

    def test_radix_one_rejected(self):
        with pytest.raises(BadAlphabet, match="at least 2"):
            DigitAlphabet("", [["0"]])

    def test_radix_one_from_combination_rejected(self):
        with pytest.raises(BadAlphabet):
            DigitAlphabet("", [["a"], ["b"]])

    def test_bad_alphabet_is_value_error(self):
        with pytest.raises(ValueError):
            DigitAlphabet("", [["0", "0"]])


class TestLookup:
    """Two-way lookup between digit strings and indices."""

    def test_index_of(self, bibi):
        assert bibi.index_of("HO") == 0
        assert bibi.index_of("DI") == 15

    def test_digit_at(self, bibi):
        assert bibi.digit_at(7) == "BI"

    def test_lookup_both_ways(self, hex_):
        assert hex_.lookup("c") == 12
        assert hex_.lookup(12) == "c"

    def test_unknown_digit(self, hex_):
        with pytest.raises(EntryMismatch):
            hex_.index_of("g")

    def test_uppercase_is_not_a_hex_digit(self, hex_):
        with pytest.raises(EntryMismatch):
            hex_.lookup("F")

    def test_index_out_of_range(self, dec):
        with pytest.raises(EntryMismatch):
            dec.digit_at(10)
        with pytest.raises(EntryMismatch):
            dec.digit_at(-1)

    def test_non_integer_index(self, dec):
        with pytest.raises(EntryMismatch):
            dec.digit_at(1.5)
        with pytest.raises(EntryMismatch):
            dec.lookup(1.5)

    def test_contains(self, bibi):
        assert "KA" in bibi
        assert "KU" not in bibi


class TestPrefix:
    """The prefix is the only mutable attribute."""

    def test_setter(self, hex_):
        hex_.prefix = ""
        assert hex_.prefix == ""

    def test_with_prefix_returns_independent_copy(self, hex_):
        bare = hex_.with_prefix("")
        assert bare.prefix == ""
        assert hex_.prefix == "0x"
        assert bare.digits == hex_.digits
        assert bare is not hex_

    def test_mutating_copy_leaves_original(self, hex_):
        copy = hex_.with_prefix("0x")
        copy.prefix = "#"
        assert hex_.prefix == "0x"


class TestDunders:

    def test_len_is_radix(self, dec):
        assert len(dec) == 10

    def test_str_lists_digits(self):
        assert str(DigitAlphabet("", [["a", "b", "c"]])) == "a, b, c"

    def test_equality_includes_prefix(self, hex_):
        assert hex_ == from_tag("hex")
        assert hex_ != hex_.with_prefix("")

    def test_hash_survives_prefix_change(self, hex_):
        alphabets = {hex_}
        hex_.prefix = "#"
        assert hex_ in alphabets
        assert hash(hex_) == hash(from_tag("hex"))

    def test_repr(self, hex_):
        assert "radix=16" in repr(hex_)


class TestAutodetect:
    """autodetect() returns the unique alphabet whose prefix starts the number."""

    def test_unique_prefix_match(self, hex_, dec):
        assert autodetect("0x4324ae34", [hex_, dec]) is hex_

    def test_no_match(self, hex_, dec):
        assert autodetect("0b0101101", [hex_, dec]) is None

    def test_no_match_with_extra_empty_prefix(self, hex_, dec):
        assert autodetect("0b0101101", [hex_, dec, from_tag("dec")]) is None

    def test_empty_prefix_never_ambiguous(self, hex_, dec, bibi):
        assert autodetect("0x4324ae34", [dec, hex_, bibi]) is hex_

    def test_binary_detected(self, hex_, bin_):
        assert autodetect("0b0101101", [hex_, bin_]) is bin_

    def test_ambiguous_prefixes(self, hex_):
        other = DigitAlphabet("0", [["0", "1"]])
        assert autodetect("0x1f", [hex_, other]) is None

    def test_candidate_shorter_than_prefix(self, hex_):
        assert autodetect("0", [hex_]) is None

    def test_empty_candidates(self):
        assert autodetect("0x10", []) is None
