import io

import pytest

from drillbook.arith import format_clock, lead_times
from drillbook.cli import main
from drillbook.grids import count_components
from drillbook.text import build_palindrome, rot13


def run(monkeypatch, capsys, argv, data):
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_rot13_matches_library(monkeypatch, capsys):
    line = "Baekjoon Online Judge 123!"
    status, out, _ = run(monkeypatch, capsys, ["rot13"], line + "\nignored\n")
    assert status == 0
    assert out == rot13(line) + "\n"


def test_rot13_round_trip(monkeypatch, capsys):
    line = "One is 1, Two is 2"
    _, first, _ = run(monkeypatch, capsys, ["rot13"], line + "\n")
    _, second, _ = run(monkeypatch, capsys, ["rot13"], first)
    assert second.rstrip("\n") == line


def test_rot13_keeps_spaces(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, ["rot13"], "  a  \n")
    assert out.rstrip("\n").startswith("  ")
    assert out.rstrip("\n").endswith("  ")


def test_components_matches_library(monkeypatch, capsys):
    grid = [[1, 0, 1], [1, 0, 0], [0, 1, 1]]
    data = "3 3\n" + "\n".join(" ".join(map(str, row)) for row in grid) + "\n"
    status, out, _ = run(monkeypatch, capsys, ["components"], data)
    assert status == 0
    assert int(out) == count_components(grid)


def test_components_empty_field(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, ["components"], "2 2\n0 0\n0 0\n")
    assert out == "0\n"


def test_components_short_input_fails(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, ["components"], "2 2\n1 0\n")
    assert status == 1
    assert out == ""
    assert "error" in err


def test_components_non_numeric_cell_fails(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["components"], "1 2\n1 x\n")
    assert status == 1
    assert "grid cell" in err


def test_lead_matches_library(monkeypatch, capsys):
    goals = [(1, "20:00"), (2, "45:30")]
    data = "2\n" + "\n".join(f"{team} {clock}" for team, clock in goals) + "\n"
    status, out, _ = run(monkeypatch, capsys, ["lead"], data)
    first, second = lead_times(goals)
    assert status == 0
    assert out == f"{format_clock(first)}\n{format_clock(second)}\n"


def test_lead_without_goals(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, ["lead"], "0\n")
    assert out == "00:00\n00:00\n"


def test_lead_bad_clock_fails(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["lead"], "1\n1 2000\n")
    assert status == 1
    assert "clock" in err


def test_palindrome_matches_library(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["palindrome"], "AABBCCD\n")
    result = out.rstrip("\n")
    assert status == 0
    assert result == build_palindrome("AABBCCD")
    assert result == result[::-1]
    assert sorted(result) == sorted("AABBCCD")


def test_palindrome_impossible(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["palindrome"], "ABC\n")
    assert status == 0
    assert out == "I'm Sorry Hansoo\n"


def test_palindrome_missing_name_fails(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["palindrome"], "")
    assert status == 1
    assert "name" in err


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2