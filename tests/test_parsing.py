"""Tests for quantity parsing and amount formatting."""

import pytest

from services.parsing import parse_quantity, format_amount


@pytest.mark.parametrize('text', ['', '   ', 'abc', 'cups', None, '/2', 'inf', 'nan'])
def test_unparseable_reads_as_zero(text):
    assert parse_quantity(text) == 0


def test_simple_fraction():
    assert parse_quantity('1/2') == 0.5
    assert parse_quantity('3/2') == 1.5


def test_mixed_number():
    assert parse_quantity('1 1/2') == 1.5
    assert parse_quantity('2   3/4') == 2.75
    # Improper fraction part is allowed
    assert parse_quantity('1 3/2') == 2.5


def test_plain_numbers():
    assert parse_quantity('2') == 2
    assert parse_quantity('0.5') == 0.5
    assert parse_quantity('.5') == 0.5
    assert parse_quantity('1e2') == 100
    assert parse_quantity('-2') == -2


def test_whitespace_is_trimmed():
    assert parse_quantity('  3/4  ') == 0.75
    assert parse_quantity('\t1 1/2\n') == 1.5


def test_trailing_text_after_number_is_ignored():
    assert parse_quantity('2 cups') == 2
    assert parse_quantity('1.5.3') == 1.5
    # Spaces around the slash are not a fraction
    assert parse_quantity('1 / 2') == 1


def test_zero_denominator_reads_as_zero():
    assert parse_quantity('1/0') == 0
    assert parse_quantity('2 1/0') == 0


def test_overflow_reads_as_zero():
    assert parse_quantity('1e999') == 0


def test_non_string_input():
    assert parse_quantity(2) == 2
    assert parse_quantity(0.25) == 0.25


def test_unicode_fraction_glyphs_not_supported():
    assert parse_quantity('½') == 0
    assert parse_quantity('1½') == 1


def test_format_zero():
    assert format_amount(0) == '0'
    assert format_amount(0.0) == '0'


def test_format_fractions():
    assert format_amount(0.5) == '1/2'
    assert format_amount(0.125) == '1/8'
    assert format_amount(1.5) == '1 1/2'
    assert format_amount(2.333) == '2 1/3'
    assert format_amount(3.75) == '3 3/4'


def test_format_uses_first_match_not_nearest():
    # 0.3 is closer to 1/3, but 1/4 comes first and is within tolerance
    assert format_amount(0.3) == '1/4'
    # 0.36 is closer to 3/8, but 1/3 comes first
    assert format_amount(0.36) == '1/3'
    # 0.1 is within tolerance of 1/8
    assert format_amount(1.1) == '1 1/8'
    # 2/3 lands within tolerance of 5/8 before the 2/3 entry is reached
    assert format_amount(2 / 3) == '5/8'
    assert format_amount(0.666) == '5/8'


def test_format_falls_back_to_decimal():
    assert format_amount(1.05) == '1.05'
    assert format_amount(0.02) == '0.02'


def test_format_whole_numbers_have_no_decimal_point():
    assert format_amount(2) == '2'
    assert format_amount(12.0) == '12'
    # Rounds up into the next whole number
    assert format_amount(2.999) == '3'


def test_format_tiny_value_rounds_to_zero():
    assert format_amount(0.001) == '0'


@pytest.mark.parametrize('text', ['1/8', '1/3', '2/3', '1 1/2', '3', '0.7', '2.25', '1.05'])
def test_formatted_value_stays_close_to_parsed(text):
    value = parse_quantity(text)
    assert abs(parse_quantity(format_amount(value)) - value) <= 0.05 + 0.005


@pytest.mark.parametrize('text', [
    '1' + '0' * 400 + '/1',
    '1' + '0' * 400 + ' 1/2',
    '1' + '0' * 400 + '/' + '1' + '0' * 400,
    '9' * 5000,
    '9' * 5000 + '/2',
])
def test_huge_digit_runs_read_as_zero(text):
    assert parse_quantity(text) == 0


def test_huge_denominator_reads_as_zero_fraction():
    assert parse_quantity('1/' + '1' + '0' * 400) == 0


def test_largest_finite_decimal_is_kept():
    assert parse_quantity('1e307') == 1e307


def test_format_large_values_does_not_overflow():
    assert format_amount(2e307) == str(int(2e307))
    assert format_amount(1.7e308) == str(int(1.7e308))
