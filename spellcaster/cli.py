"""
Spellcaster CLI - Command-line interface for the combat optimizer.

Usage:
    spellcaster solve <input_file> [--hard] [--trace]     Find the minimum mana to win
    spellcaster simulate <input_file> <spell>...          Replay a fixed spell sequence

Input files hold the boss stats ("Hit Points: N" / "Damage: N");
use "-" to read from stdin.

Exit status: 0 on an answer (including "unwinnable"), 1 on bad input,
2 when the search budget runs out.
"""

import argparse
import logging
import sys
from typing import get_args

from .config import LogLevel, get_settings
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_BUDGET_EXHAUSTED = 2


def main(argv=None):
    """Main CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Spellcaster - minimum-mana combat optimizer",
        prog="spellcaster",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=get_args(LogLevel),
        default=settings.log_level,
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Find the minimum mana needed to win")
    solve_parser.add_argument("input_file", help="Path to boss input file, or - for stdin")
    _add_player_arguments(solve_parser, settings)
    solve_parser.add_argument(
        "--max-expansions",
        type=int,
        default=settings.max_expansions,
        help="Stop after expanding this many states",
    )
    solve_parser.add_argument("--trace", action="store_true", help="Print the winning rounds")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Replay a spell sequence")
    simulate_parser.add_argument("input_file", help="Path to boss input file, or - for stdin")
    simulate_parser.add_argument("spells", nargs="+", help="Spells in casting order")
    _add_player_arguments(simulate_parser, settings)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "simulate":
        return cmd_simulate(args)
    else:
        parser.print_help()
        return EXIT_INPUT_ERROR


def _add_player_arguments(parser, settings):
    parser.add_argument("--hard", action="store_true", help="Lose 1 hp at the start of every round")
    parser.add_argument("--player-hp", type=int, default=settings.player_hp, help="Starting hit points")
    parser.add_argument("--player-mana", type=int, default=settings.player_mana, help="Starting mana")


def _read_boss(input_file):
    """Read and parse boss stats, or return None after reporting the error."""
    from .parsing import InputParseError, parse_boss

    try:
        if input_file == "-":
            text = sys.stdin.read()
        else:
            with open(input_file, "r", encoding="utf-8") as f:
                text = f.read()
    except FileNotFoundError:
        print(f"Error: File not found: {input_file}")
        return None
    except UnicodeDecodeError:
        print(f"Error: {input_file} is not UTF-8 text")
        return None
    except OSError as e:
        print(f"Error: Cannot read {input_file}: {e.strerror or e}")
        return None

    try:
        return parse_boss(text)
    except InputParseError as e:
        logger.warning("Rejected input %s: %s", input_file, e)
        print("Error: invalid boss input")
        for error in e.errors:
            print(f"  - {error}")
        return None


def cmd_solve(args):
    """Find the minimum mana needed to win."""
    from .engine_core import CombatState, SearchEngine, SearchOutcome, format_trace

    boss = _read_boss(args.input_file)
    if boss is None:
        return EXIT_INPUT_ERROR

    try:
        initial = CombatState.initial(
            boss,
            player_hp=args.player_hp,
            player_mana=args.player_mana,
            hard_mode=args.hard,
        )
        engine = SearchEngine(max_expansions=args.max_expansions)
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_INPUT_ERROR

    result = engine.search(initial)

    if result.outcome == SearchOutcome.BUDGET_EXHAUSTED:
        print(f"No solution found within {args.max_expansions} expansions")
        return EXIT_BUDGET_EXHAUSTED

    if result.outcome == SearchOutcome.UNWINNABLE:
        print("No winning sequence exists")
        return EXIT_OK

    print(result.min_mana)
    if args.trace:
        print(format_trace(result.history), end="")
    return EXIT_OK


def cmd_simulate(args):
    """Replay a fixed spell sequence and print every round."""
    from .engine_core import CombatState, Spell, format_trace, replay
    from .engine_core.search import HistoryEntry

    boss = _read_boss(args.input_file)
    if boss is None:
        return EXIT_INPUT_ERROR

    try:
        spells = [Spell.from_name(name) for name in args.spells]
        initial = CombatState.initial(
            boss,
            player_hp=args.player_hp,
            player_mana=args.player_mana,
            hard_mode=args.hard,
        )
        transitions = replay(initial, spells)
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_INPUT_ERROR

    entries = [HistoryEntry(spell=None, state=initial), *transitions]
    print(format_trace(entries), end="")
    print(f"Outcome: {entries[-1].state.outcome.value}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
