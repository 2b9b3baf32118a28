"""CLI entrypoint for the peg solitaire board generator."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import replace
from pathlib import Path

from pegs.core.constants import BOARD_TYPES, BoardType
from pegs.core.exceptions import PegsError, SolverTimeoutError
from pegs.core.models import DEFAULT_PARAMS, PRESETS, GameParams, find_preset, preset_name
from pegs.engine.board_store import build_document, save_document
from pegs.engine.game import GameState
from pegs.engine.generator import BoardGenerator, GeneratorConfig
from pegs.engine.layouts import build_fixed_layout
from pegs.engine.solver import solve_board
from pegs.utils.logger import configure_logging
from pegs.utils.pretty import pretty_print_grid, print_board_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate guaranteed-solvable Peg Solitaire boards",
    )
    parser.add_argument(
        "--params",
        type=str,
        help="Encoded parameters such as 7x7cross, 9x9random or 6 (square)",
    )
    parser.add_argument(
        "--preset",
        type=str,
        choices=[preset_name(p) for p in PRESETS],
        help="Use one of the built-in presets",
    )
    parser.add_argument("--width", type=int, help="Board width in cells")
    parser.add_argument("--height", type=int, help="Board height in cells")
    parser.add_argument(
        "--type",
        type=str,
        choices=[info.key for info in BOARD_TYPES],
        help="Board type",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--moves",
        nargs="+",
        metavar="MOVE",
        help="Forward moves to play on the new board (format: sx,sy-tx,ty)",
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Solve the board with CP-SAT (fixed layouts are only solved on request)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=20.0,
        help="Solver time limit in seconds",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Trace every candidate-index change and move selection during generation",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_params(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GameParams:
    if args.preset and args.params:
        parser.error("--preset cannot be combined with --params")
    params = DEFAULT_PARAMS
    if args.preset:
        found = find_preset(args.preset)
        if found is None:
            parser.error(f"unknown preset: {args.preset}")
        params = found
    elif args.params:
        try:
            params = params.decode(args.params)
        except PegsError as exc:
            parser.error(str(exc))
    if args.width is not None:
        params = replace(params, width=args.width)
    if args.height is not None:
        params = replace(params, height=args.height)
    if args.type:
        params = replace(params, board_type=next(
            info.identifier for info in BOARD_TYPES if info.key == args.type
        ))
    return params


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level, diagnostics=args.diagnostics)

    params = resolve_params(parser, args)
    try:
        params.validate()
    except PegsError as exc:
        parser.error(str(exc))

    seed = args.seed if args.seed is not None else random.randrange(2**31)

    attempts = None
    solution = None
    if params.board_type == BoardType.RANDOM:
        result = BoardGenerator(GeneratorConfig.from_params(params, seed=seed)).generate()
        print_board_stats(result)
        description = result.description()
        attempts = result.attempts
        solution = result.solution()
    else:
        grid = build_fixed_layout(params.board_type, params.width, params.height)
        pretty_print_grid(grid, label=preset_name(params))
        description = grid.to_description()

    print(f"\nParams: {params.encode()}  Seed: {seed}")
    print(f"Description: {description}")

    state = GameState.from_description(params, description)
    target = None if params.board_type == BoardType.RANDOM else state.grid.center
    try:
        if args.moves:
            for text in args.moves:
                state = state.execute(text)
            print()
            print(state.text_format(), end="")
            print(f"Pegs left: {state.peg_count}{' (solved)' if state.is_solved else ''}")
            # The recorded generation solution no longer applies.
            solution = None
        if args.solve:
            solution = solve_board(state, timeout=args.timeout, target=target)
            if solution is None and target is not None:
                print(f"No solution leaves the last peg on {target[0]},{target[1]}")
            elif solution is None:
                print("No solution exists for this position")
    except SolverTimeoutError as exc:
        print(f"Solver gave up: {exc}")
    except PegsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if solution is not None:
        print(f"Solution ({len(solution)} moves): {' '.join(move.encode() for move in solution)}")
    elif not args.solve:
        print("Solution not computed (pass --solve to run the CP-SAT solver)")

    if args.output:
        doc = build_document(
            params,
            description,
            seed=seed,
            attempts=attempts,
            solution=solution,
        )
        save_document(doc, args.output)


if __name__ == "__main__":
    main()
