import io
import re

from dining.cli import main, run
from dining.simulation import DIED, Settings

_LINE = re.compile(r"^\d+ \d+ \S")


def test_main_too_few_arguments(capsys):
    assert main([]) == 1
    assert "Invalid number of arguments." in capsys.readouterr().err


def test_main_non_numeric_argument(capsys):
    assert main(["2", "abc", "1", "1"]) == 1
    assert "Arguments must be numeric." in capsys.readouterr().err


def test_main_negative_argument(capsys):
    assert main(["2", "-5", "1", "1"]) == 1
    assert "Arguments must be positive numbers." in capsys.readouterr().err


def test_main_zero_argument(capsys):
    assert main(["4", "0", "1", "1"]) == 2
    assert "must be higher than 0" in capsys.readouterr().err


def test_main_zero_meals(capsys):
    assert main(["4", "100", "1", "1", "0"]) == 2
    assert capsys.readouterr().out == ""


def test_main_single_philosopher(capsys):
    assert main(["1", "800", "200", "200"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[1].endswith(" 1 died")


def test_run_until_everyone_ate():
    out = io.StringIO()
    simulation = run(Settings(2, 2000, 100, 100, must_eat=1), out)
    assert simulation.all_ate
    assert not simulation.died
    assert all(p.eaten_times >= 1 for p in simulation.philosophers)
    lines = out.getvalue().splitlines()
    assert lines and all(_LINE.match(line) for line in lines)
    assert not any(line.endswith(DIED) for line in lines)


def test_run_ends_with_one_death():
    out = io.StringIO()
    simulation = run(Settings(2, 60, 200, 100), out)
    assert simulation.died
    lines = out.getvalue().splitlines()
    assert sum(line.endswith(DIED) for line in lines) == 1
    assert all(_LINE.match(line) for line in lines)


def test_run_timestamps_never_decrease():
    out = io.StringIO()
    run(Settings(3, 80, 200, 50), out)
    stamps = [int(line.split(" ")[0]) for line in out.getvalue().splitlines()]
    assert stamps == sorted(stamps)