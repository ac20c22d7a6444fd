import pytest

from philosim.settings import (
    MAX_PHILOSOPHERS,
    MAX_THINK_TIME,
    ArgumentCountError,
    InvalidArgumentError,
    NothingToDo,
    PhilosopherRangeError,
    Settings,
    SettingsError,
    parse_number,
    parse_settings,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+42", 42),
        ("-42", -42),
        ("0", 0),
        ("-0", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("007", 7),
    ],
)
def test_parse_number_accepts_valid(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "+", "-", "abc", "12a", " 12", "12 ", "--1", "+-1", "1.5",
     "2147483648", "-2147483649", "99999999999", "\u0663"],
)
def test_parse_number_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_parse_settings_four_args():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)
    assert settings.meals is None


def test_parse_settings_with_meals():
    settings = parse_settings(["5", "800", "200", "200", "7"])
    assert settings.meals == 7
    assert settings.philosophers == 5


def test_think_time_is_leftover():
    settings = parse_settings(["4", "410", "200", "200"])
    assert settings.time_to_think == 10


def test_think_time_clamped_to_zero():
    settings = parse_settings(["4", "310", "200", "200"])
    assert settings.time_to_think == 0


def test_think_time_clamped_to_maximum():
    settings = parse_settings(["4", "10000", "200", "200"])
    assert settings.time_to_think == MAX_THINK_TIME


@pytest.mark.parametrize("argv", [[], ["1"], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(argv):
    with pytest.raises(ArgumentCountError) as info:
        parse_settings(argv)
    assert str(info.value) == "Too much/little args"


@pytest.mark.parametrize("count", ["0", "-1", "201", "x", ""])
def test_philosopher_range(count):
    with pytest.raises(PhilosopherRangeError) as info:
        parse_settings([count, "800", "200", "200"])
    assert str(info.value) == "0 < philo_nbr <= 200"


def test_max_philosophers_accepted():
    settings = parse_settings([str(MAX_PHILOSOPHERS), "800", "200", "200"])
    assert settings.philosophers == MAX_PHILOSOPHERS


@pytest.mark.parametrize(
    "argv",
    [
        ["5", "0", "200", "200"],
        ["5", "800", "-200", "200"],
        ["5", "800", "200", "abc"],
        ["5", "800", "200", "200", "-3"],
        ["5", "800", "200", "200", "many"],
    ],
)
def test_invalid_arguments(argv):
    with pytest.raises(InvalidArgumentError) as info:
        parse_settings(argv)
    assert str(info.value) == "some args are negative or invalid"


def test_zero_meals_means_nothing_to_do():
    with pytest.raises(NothingToDo):
        parse_settings(["5", "800", "200", "200", "0"])


def test_zero_meals_checked_before_range():
    with pytest.raises(NothingToDo):
        parse_settings(["999", "-1", "200", "200", "0"])


def test_range_checked_before_durations():
    with pytest.raises(PhilosopherRangeError):
        parse_settings(["0", "-1", "-1", "-1"])


@pytest.mark.parametrize(
    "argv, error",
    [
        (["1"], ArgumentCountError),
        (["0", "800", "200", "200"], PhilosopherRangeError),
        (["5", "0", "200", "200"], InvalidArgumentError),
        (["5", "800", "200", "200", "0"], NothingToDo),
    ],
)
def test_errors_share_base(argv, error):
    with pytest.raises(SettingsError) as info:
        parse_settings(argv)
    assert type(info.value) is error