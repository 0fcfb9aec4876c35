"""Tests for modules.minerals.elements."""

import pytest

from modules.minerals.elements import (
    major_elements_to_text,
    parse_decimal,
    parse_major_elements,
)
from modules.minerals.errors import ValidationError


class TestParseMajorElements:
    def test_equals_separator(self):
        assert parse_major_elements("Si=46.70\nO=53.30") == {"Si": 46.7, "O": 53.3}

    def test_colon_separator(self):
        assert parse_major_elements("Si: 46.7\nO :53.3") == {"Si": 46.7, "O": 53.3}

    def test_mixed_separators_and_blank_lines(self):
        text = "\n  Fe=69.94 \n\nO:30.06\n\n"
        assert parse_major_elements(text) == {"Fe": 69.94, "O": 30.06}

    def test_equals_wins_when_both_present(self):
        assert parse_major_elements("Ti:x=1.5") == {"Ti:x": 1.5}

    def test_empty_input(self):
        assert parse_major_elements("") == {}

    def test_missing_separator_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_major_elements("Si 46.7")
        assert exc_info.value.field == "major_elements_pct_text"

    def test_missing_value_rejected(self):
        with pytest.raises(ValidationError):
            parse_major_elements("Si=")

    def test_bad_number_names_the_key(self):
        with pytest.raises(ValidationError, match="'Fe'"):
            parse_major_elements("Si=46.7\nFe=lots")

    @pytest.mark.parametrize("value", ["nan", "inf", "1e3", "--1"])
    def test_non_decimal_values_rejected(self, value):
        with pytest.raises(ValidationError):
            parse_major_elements(f"Si={value}")


class TestMajorElementsToText:
    def test_sorted_two_decimals(self):
        assert major_elements_to_text({"Si": 46.7, "O": 53.3}) == "O=53.30\nSi=46.70"

    def test_output_parses_back_to_same_mapping(self):
        original = parse_major_elements("Si:46.70\nO:53.30")
        assert parse_major_elements(major_elements_to_text(original)) == {
            "Si": 46.7,
            "O": 53.3,
        }

    def test_empty_mapping(self):
        assert major_elements_to_text({}) == ""


class TestParseDecimal:
    @pytest.mark.parametrize(
        "raw,expected", [("7", 7.0), (" 2.65 ", 2.65), (".5", 0.5), ("-1.25", -1.25)]
    )
    def test_valid(self, raw, expected):
        assert parse_decimal(raw, "hardness_mohs") == expected

    @pytest.mark.parametrize("raw", ["", "abc", "NaN", "1,5"])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError, match="'hardness_mohs' must be a number"):
            parse_decimal(raw, "hardness_mohs")
