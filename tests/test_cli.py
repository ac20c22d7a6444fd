import pytest

from philosim.cli import main


def test_wrong_argument_count(capsys):
    assert main(["1", "2"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "ERR : Too much/little args\n"
    assert captured.out == ""


def test_too_many_arguments(capsys):
    assert main(["1", "2", "3", "4", "5", "6"]) == 1
    assert capsys.readouterr().err == "ERR : Too much/little args\n"


@pytest.mark.parametrize("count", ["0", "201", "abc"])
def test_philosopher_range(capsys, count):
    assert main([count, "800", "200", "200"]) == 1
    assert capsys.readouterr().err == "ERR : 0 < philo_nbr <= 200\n"


@pytest.mark.parametrize(
    "args",
    [
        ["5", "-1", "200", "200"],
        ["5", "800", "0", "200"],
        ["5", "800", "200", "x"],
        ["5", "800", "200", "200", "-3"],
    ],
)
def test_invalid_arguments(capsys, args):
    assert main(args) == 1
    assert capsys.readouterr().err == "ERR : some args are negative or invalid\n"


def test_zero_meals_exits_quietly(capsys):
    assert main(["5", "800", "200", "200", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_lone_philosopher_run(capsys):
    assert main(["1", "800", "200", "200"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "0 1 is sleeping"
    assert lines[-1].endswith(" 1 died")
    assert sum(line.endswith("died") for line in lines) == 1