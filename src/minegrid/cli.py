#!/usr/bin/env python3
"""
minegrid - command line entry point.

Usage:
    minegrid new [--preset NAME] [--row R --col C] [--seed N] [--json]
    minegrid reveal FILE --row R --col C
    minegrid play [--preset NAME] [--seed N]
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import GridConfig, PRESETS, get_preset
from .errors import GridError
from .grid import Grid
from .placement import SafeZone
from .service import reveal, start_game
from .session import GameSession


logger = logging.getLogger(__name__)

PLAY_HELP = (
    "Commands: r ROW COL (reveal/chord), f ROW COL (flag), "
    "c ROW COL (chord), n (new game), q (quit)"
)


def _resolve_config(args: argparse.Namespace) -> GridConfig:
    """Start from the preset and apply any explicit overrides."""
    preset = get_preset(args.preset)
    return GridConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
        safe_zone=SafeZone(args.safe_zone),
    )


def _render_with_header(grid: Grid, show_mines: bool = False) -> str:
    """Render the grid with column and row indices."""
    header = "    " + " ".join(str(col % 10) for col in range(grid.cols))
    body = grid.render(show_mines=show_mines).split("\n")
    lines = [header]
    for row, line in enumerate(body):
        lines.append(f"{row:>3} {line}")
    return "\n".join(lines)


def new_game(args: argparse.Namespace) -> None:
    """Start a game from a first click and print the result."""
    config = _resolve_config(args)
    row = args.row if args.row is not None else config.rows // 2
    col = args.col if args.col is not None else config.cols // 2
    rng = random.Random(args.seed)

    grid = start_game(
        config.rows, config.cols, config.num_mines, row, col,
        rng=rng, safe_zone=config.safe_zone,
    )

    if args.json:
        print(grid.to_json())
        return
    print(
        f"Board: {config.rows}x{config.cols} with {config.num_mines} mines, "
        f"first click ({row}, {col})\n"
    )
    print(_render_with_header(grid))


def reveal_snapshot(args: argparse.Namespace) -> None:
    """Reveal a cell on a JSON snapshot and print the new snapshot."""
    if args.file == "-":
        text = sys.stdin.read()
    else:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    grid = reveal(Grid.from_json(text), args.row, args.col)
    print(grid.to_json())


def play(args: argparse.Namespace) -> None:
    """Interactive terminal game."""
    session = GameSession(_resolve_config(args), rng=random.Random(args.seed))
    print(PLAY_HELP)

    while True:
        print()
        print(
            f"Flags left: {session.flags_remaining} | "
            f"Time: {session.format_elapsed()} | "
            f"State: {session.game_state.name}"
        )
        print(_render_with_header(session.grid, show_mines=session.is_lost))
        if session.is_won:
            print("\n*** WIN! ***")
        elif session.is_lost:
            print("\n*** LOST (hit mine) ***")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break
        if not line:
            continue
        command, *rest = line.split()

        if command == "q":
            break
        if command == "n":
            session.reset()
            continue
        if command not in ("r", "f", "c") or len(rest) != 2:
            print(PLAY_HELP)
            continue

        try:
            row, col = int(rest[0]), int(rest[1])
            if command == "r":
                changed = session.press(row, col)
            elif command == "f":
                changed = session.flag(row, col)
            else:
                changed = session.chord(row, col)
        except ValueError as exc:
            # GridError is a ValueError, as is int() on bad input
            print(f"Invalid move: {exc}")
            continue
        if not changed:
            print("Nothing to do there.")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="minegrid - Minesweeper grid engine"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_grid_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--preset", choices=sorted(PRESETS), default="beginner",
            help="Difficulty preset",
        )
        sub.add_argument("--rows", type=int, default=None, help="Override rows")
        sub.add_argument("--cols", type=int, default=None, help="Override columns")
        sub.add_argument("--mines", type=int, default=None, help="Override mines")
        sub.add_argument(
            "--safe-zone",
            choices=[zone.value for zone in SafeZone],
            default=SafeZone.NEIGHBORHOOD.value,
            help="Cells kept mine-free around the first click",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    # New game command
    new_parser = subparsers.add_parser("new", help="Start a game")
    add_grid_options(new_parser)
    new_parser.add_argument("--row", type=int, default=None, help="First click row")
    new_parser.add_argument("--col", type=int, default=None, help="First click column")
    new_parser.add_argument(
        "--json", action="store_true", help="Print the grid as JSON"
    )

    # Reveal command
    reveal_parser = subparsers.add_parser(
        "reveal", help="Reveal a cell on a JSON grid snapshot"
    )
    reveal_parser.add_argument("file", help="Snapshot file, or - for stdin")
    reveal_parser.add_argument("--row", type=int, required=True)
    reveal_parser.add_argument("--col", type=int, required=True)

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_grid_options(play_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - [%(name)s] - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "new":
            new_game(args)
        elif args.command == "reveal":
            reveal_snapshot(args)
        elif args.command == "play":
            play(args)
        else:
            parser.print_help()
    except (GridError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
