"""Command-line front end that reads puzzle input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from drillbook.arith import format_clock, lead_times
from drillbook.grids import count_components
from drillbook.text import NoPalindromeError, build_palindrome, rot13


def _tokens(data: str, count: int, what: str) -> list[str]:
    tokens = data.split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} tokens of {what}, got {len(tokens)}")
    return tokens


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {token!r}") from None


def _run_rot13(data: str) -> str:
    lines = data.splitlines()
    return rot13(lines[0] if lines else "")


def _run_components(data: str) -> str:
    head = _tokens(data, 2, "grid size")
    rows = _int(head[0], "row count")
    cols = _int(head[1], "column count")
    if rows <= 0 or cols <= 0:
        raise ValueError("grid size must be positive")
    tokens = _tokens(data, 2 + rows * cols, "grid")[2:2 + rows * cols]
    cells = [_int(token, "grid cell") for token in tokens]
    grid = [cells[r * cols:(r + 1) * cols] for r in range(rows)]
    return str(count_components(grid))


def _run_lead(data: str) -> str:
    head = _tokens(data, 1, "goal count")
    count = _int(head[0], "goal count")
    if count < 0:
        raise ValueError("goal count must not be negative")
    tokens = _tokens(data, 1 + 2 * count, "goals")[1:1 + 2 * count]
    goals = [
        (_int(team, "team"), clock)
        for team, clock in zip(tokens[0::2], tokens[1::2])
    ]
    first, second = lead_times(goals)
    return f"{format_clock(first)}\n{format_clock(second)}"


def _run_palindrome(data: str) -> str:
    name = _tokens(data, 1, "name")[0]
    try:
        return build_palindrome(name)
    except NoPalindromeError as exc:
        return str(exc)


_COMMANDS: dict[str, tuple[Callable[[str], str], str]] = {
    "rot13": (_run_rot13, "apply ROT13 to the first line of input"),
    "components": (_run_components, "count connected regions of 1s in an N M grid"),
    "lead": (_run_lead, "report how long each team led from a list of goals"),
    "palindrome": (_run_palindrome, "rearrange a name into its smallest palindrome"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillbook",
        description="Solve a puzzle whose input is read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one puzzle command; return the process exit status."""
    args = _parser().parse_args(argv)
    run, _ = _COMMANDS[args.command]
    try:
        result = run(sys.stdin.read())
    except ValueError as exc:
        print(f"drillbook: error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())