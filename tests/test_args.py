import pytest

from diningphilo.args import (
    MAX_PHILOSOPHERS,
    ArgumentError,
    Settings,
    check_input,
    parse_number,
    parse_settings,
)


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_check_input_wrong_count(args):
    with pytest.raises(ArgumentError) as info:
        check_input(args)
    assert info.value.message == "Wrong args count"
    assert info.value.to_stdout is False


@pytest.mark.parametrize("bad", ["-5", "1a", "+3", "4.5"])
def test_check_input_invalid_characters(bad):
    with pytest.raises(ArgumentError) as info:
        check_input(["5", bad, "200", "200"])
    assert info.value.message == "Bad args: Invalid input"
    assert info.value.to_stdout is True


def test_check_input_accepts_digits_and_spaces():
    assert check_input(["5", " 800", "200 ", "200", "7"]) is None


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("   7", 7), ("12 3", 12), ("", 0), ("2147483647", 2147483647)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_overflow_gives_minus_one():
    assert parse_number("2147483648") == -1
    assert parse_number("99999999999999") == -1


def test_parse_settings_without_meals():
    settings = parse_settings(["5", "800", "200", "100"])
    assert settings == Settings(5, 800, 200, 100, None)


def test_parse_settings_with_meals():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.meals_required == 7
    assert settings.philosophers == 4


def test_parse_settings_overflowing_meals_means_unlimited():
    settings = parse_settings(["4", "410", "200", "200", "99999999999"])
    assert settings.meals_required is None


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "0", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "0"],
        [str(MAX_PHILOSOPHERS), "800", "200", "200"],
        ["5", "99999999999", "200", "200"],
    ],
)
def test_parse_settings_rejects_bad_numbers(args):
    with pytest.raises(ArgumentError) as info:
        parse_settings(args)
    assert info.value.message == "incorrect number"


def test_parse_settings_accepts_largest_table():
    settings = parse_settings([str(MAX_PHILOSOPHERS - 1), "800", "200", "200"])
    assert settings.philosophers == MAX_PHILOSOPHERS - 1


def test_parse_settings_checks_input_first():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["5", "x", "200", "200"])
    assert info.value.message == "Bad args: Invalid input"