"""
Input Parsing - Reads boss stats from puzzle input text.

Expected input is exactly two lines:
    Hit Points: 51
    Damage: 9

A trailing newline is allowed. Anything else is an error; values are
never defaulted.
"""

from __future__ import annotations

from .engine_core.state import Boss

HIT_POINTS_PREFIX = "Hit Points: "
DAMAGE_PREFIX = "Damage: "


class InputParseError(Exception):
    """Raised when the boss description cannot be parsed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid boss input: {'; '.join(errors)}")


def parse_boss(text: str) -> Boss:
    """
    Parse boss stats from input text.

    Collects every problem found before raising InputParseError.
    """
    errors: list[str] = []
    lines = text.splitlines()

    hit_points = _parse_field(lines, 0, HIT_POINTS_PREFIX, errors)
    damage = _parse_field(lines, 1, DAMAGE_PREFIX, errors)

    if len(lines) > 2:
        errors.append(f"Unexpected extra input on line 3: {lines[2]!r}")

    if errors:
        raise InputParseError(errors)
    return Boss(hit_points=hit_points, damage=damage)


def _parse_field(lines: list[str], index: int, prefix: str, errors: list[str]) -> int | None:
    """Parse 'prefix<integer>' from lines[index], recording any error."""
    label = prefix.rstrip(": ")
    if index >= len(lines):
        errors.append(f"Missing '{label}' line")
        return None

    line = lines[index]
    if not line.startswith(prefix):
        errors.append(f"Line {index + 1} should start with {prefix!r}, got {line!r}")
        return None

    raw = line[len(prefix):].strip()
    if not (raw.isascii() and raw.isdigit()):
        errors.append(f"{label} must be a non-negative integer, got {raw!r}")
        return None
    return int(raw)
