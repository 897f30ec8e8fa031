import pytest

from tinylibc.convert import atof, atoi, ftoa, itoa


@pytest.mark.parametrize("n", [0, 7, 10, 123, -1, -123, 9876543210, -(2**62)])
def test_itoa_matches_decimal_text(n):
    assert itoa(n) == str(n)


@pytest.mark.parametrize("n", [0, 5, -5, 42, -4096, 2**40])
def test_atoi_round_trips_itoa(n):
    assert atoi(itoa(n)) == n


def test_itoa_truncates_float():
    assert itoa(3.9) == itoa(3)
    assert itoa(-3.9) == itoa(-3)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+7") == 7


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


@pytest.mark.parametrize("text", ["1.5", "1.25", "3.0", "0.1", "10.125"])
def test_ftoa_of_exact_values_prints_their_digits(text):
    assert ftoa(float(text)) == text


@pytest.mark.parametrize("x", [1.5, 2.25, 10.125, 7.0, 0.5])
def test_atof_round_trips_ftoa(x):
    assert atof(ftoa(x)) == x


def test_ftoa_negative_fraction_keeps_its_sign():
    assert ftoa(-1.5) == "-1.-5"


def test_atof_parses_signed_number():
    assert atof("  -3.25xyz") == -3.25
    assert atof("+8") == 8.0


def test_atof_only_skips_spaces_and_tabs():
    assert atof("\n1") == 0.0
    assert atof("\t 2.5") == 2.5


def test_atof_counts_digits_after_every_dot():
    assert atof("1.2.3") == pytest.approx(1.23)


def test_atof_without_digits_is_zero():
    assert atof("abc") == 0.0