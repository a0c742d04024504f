"""Tests for locale-aware number validation patterns."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localeparser import DigitSpecError, build_number_pattern
from localeparser.numerals import DigitTable, SignSeparatorSet
from localeparser.parsing import DigitSpec, NumberPattern, number_pattern_source
from tests.helpers.formatters import ARABIC_INDIC_DIGITS
from tests.strategies import digit_specs, spec_conforming_texts

ARABIC = SignSeparatorSet(DigitTable("ar", tuple(ARABIC_INDIC_DIGITS)), "-", "٫")
HANIDEC = SignSeparatorSet(DigitTable("zh", tuple("〇一二三四五六七八九")), "-", ".")


class TestMandatoryFraction:
    """min fraction > 0: separator and fraction required."""

    @pytest.mark.parametrize("text", ["-12.34", "12.34", "0.00", "123456.78"])
    def test_accepts(self, text: str) -> None:
        assert build_number_pattern("en_US", "1.2-2").matches(text)

    @pytest.mark.parametrize("text", ["12.3", "12.345", "12", "12.", ".34", "--1.23", "1,234.56"])
    def test_rejects(self, text: str) -> None:
        assert not build_number_pattern("en_US", "1.2-2").matches(text)

    def test_fraction_range(self) -> None:
        pattern = build_number_pattern("en_US", "1.1-3")
        assert pattern.matches("1.2")
        assert pattern.matches("1.234")
        assert not pattern.matches("1.2345")


class TestOptionalFraction:
    """min fraction == 0: separator and fraction optional."""

    @pytest.mark.parametrize("text", ["12", "12.345", "-12.3", "12."])
    def test_accepts(self, text: str) -> None:
        assert build_number_pattern("en_US", "1.0-3").matches(text)

    @pytest.mark.parametrize("text", ["12.3456", ".5", "-", "", "1.2.3"])
    def test_rejects(self, text: str) -> None:
        assert not build_number_pattern("en_US", "1.0-3").matches(text)

    def test_default_spec(self) -> None:
        pattern = build_number_pattern("en_US")
        assert pattern.digit_spec == DigitSpec(1, 0, 3)
        assert pattern.matches("1.234")


class TestIntegerOnly:
    """max fraction == 0: integers only."""

    @pytest.mark.parametrize("text", ["12", "-12", "0"])
    def test_accepts(self, text: str) -> None:
        assert build_number_pattern("en_US", "1.0-0").matches(text)

    @pytest.mark.parametrize("text", ["12.3", "12.", "1e5", "+12"])
    def test_rejects(self, text: str) -> None:
        assert not build_number_pattern("en_US", "1.0-0").matches(text)

    def test_min_integer_digits(self) -> None:
        pattern = build_number_pattern("en_US", "3.0-0")
        assert pattern.matches("007")
        assert pattern.matches("-1234")
        assert not pattern.matches("12")


class TestLocaleGlyphs:
    """Patterns are written in the locale's own glyphs."""

    def test_german_separator(self) -> None:
        pattern = build_number_pattern("de_DE", "1.2-2")
        assert pattern.matches("12,34")
        assert not pattern.matches("12.34")

    def test_bcp47_code(self) -> None:
        assert build_number_pattern("de-DE", "1.2-2").matches("-0,50")

    def test_unknown_locale_uses_ascii(self) -> None:
        assert build_number_pattern("xx_YY", "1.2-2").matches("12.34")

    def test_arabic_indic_digits(self) -> None:
        pattern = build_number_pattern("ar", "1.2-2", symbols=ARABIC)
        assert pattern.matches("-١٢٫٣٤")
        assert not pattern.matches("12.34")
        assert not pattern.matches("١٢٫٣")

    def test_non_consecutive_digits_enumerated(self) -> None:
        pattern = build_number_pattern("zh", "1.0-0", symbols=HANIDEC)
        assert pattern.matches("一〇二")
        assert not pattern.matches("一丁二")

    def test_trailing_newline_rejected(self) -> None:
        assert not build_number_pattern("en_US", "1.0-0").matches("12\n")

    def test_compiled_regex_rejects_trailing_newline(self) -> None:
        for spec in ("1.2-2", "1.0-3", "1.0-0"):
            regex = build_number_pattern("en_US", spec).regex
            assert regex.match("12.00\n") is None
            assert regex.search("12\n") is None

    def test_swedish_minus_sign(self) -> None:
        pattern = build_number_pattern("sv_SE", "1.2-2")
        assert pattern.matches("−12,50")
        assert not pattern.matches("-12,50")

    def test_native_digits_from_cldr(self) -> None:
        assert build_number_pattern("mr", "1.1-1").matches("-१२.५")


class TestPatternSource:
    """Test the assembled expression text."""

    def test_ascii_mandatory_fraction(self) -> None:
        source = number_pattern_source(DigitSpec(1, 2, 2), SignSeparatorSet(DigitTable("en")))
        assert source == r"^\-?[0-9]{1,}\.[0-9]{2,2}\Z"

    def test_ascii_integer(self) -> None:
        source = number_pattern_source(DigitSpec(2, 0, 0), SignSeparatorSet(DigitTable("en")))
        assert source == r"^\-?[0-9]{2,}\Z"

    def test_arabic_range(self) -> None:
        source = number_pattern_source(DigitSpec(1, 0, 0), ARABIC)
        assert "[٠-٩]" in source

    def test_pattern_property(self) -> None:
        pattern = build_number_pattern("en_US", "1.0-0")
        assert pattern.pattern == pattern.regex.pattern


class TestBuildNumberPattern:
    """Test build_number_pattern() inputs and errors."""

    def test_accepts_digit_spec_object(self) -> None:
        pattern = build_number_pattern("en_US", DigitSpec(1, 2, 2))
        assert isinstance(pattern, NumberPattern)
        assert pattern.matches("1.00")

    def test_malformed_spec_raises(self) -> None:
        with pytest.raises(DigitSpecError):
            build_number_pattern("en_US", "abc")

    def test_reusable(self) -> None:
        pattern = build_number_pattern("en_US", "1.2-2")
        results = [pattern.matches(text) for text in ("1.00", "x", "1.00")]
        assert results == [True, False, True]


class TestPatternProperties:
    """Property tests over generated digit specs."""

    @given(data=st.data(), spec=digit_specs())
    def test_conforming_text_accepted(self, data: st.DataObject, spec: DigitSpec) -> None:
        """PROPERTY: Text built to satisfy a spec matches its pattern."""
        text = data.draw(spec_conforming_texts(spec))
        assert build_number_pattern("en_US", spec).matches(text)

    @given(spec=digit_specs())
    def test_too_many_fraction_digits_rejected(self, spec: DigitSpec) -> None:
        """PROPERTY: Exceeding max fraction digits never matches."""
        text = "1" * spec.min_integer_digits + "." + "5" * (spec.max_fraction_digits + 1)
        assert not build_number_pattern("en_US", spec).matches(text)

    @given(data=st.data(), spec=digit_specs())
    def test_arabic_mirrors_ascii(self, data: st.DataObject, spec: DigitSpec) -> None:
        """PROPERTY: Transliterated text matches the locale pattern exactly when ASCII does."""
        text = data.draw(spec_conforming_texts(spec))
        native = text.translate(str.maketrans("0123456789.", ARABIC_INDIC_DIGITS + "٫"))
        assert build_number_pattern("ar", spec, symbols=ARABIC).matches(native)
