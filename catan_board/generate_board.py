#!/usr/bin/env python3
"""
Generate a board from the command line and print it as JSON.
Exits non-zero if no layout satisfying the rules is found.
"""

import argparse
import sys

import common.log
import common.settings
from catan_board.app.generator import layout, service
from catan_board.app.models.board import (
    ClumpingMode,
    GenerationExhausted,
    RuleConfig,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the board generator CLI."""
    parser = argparse.ArgumentParser(
        description='Generate a randomised Catan board and print it as JSON'
    )
    parser.add_argument(
        '--allow-high-adjacency',
        action='store_true',
        help='Allow 6 and 8 tokens to touch',
    )
    parser.add_argument(
        '--allow-extreme-adjacency',
        action='store_true',
        help='Allow 2 and 12 tokens to touch',
    )
    parser.add_argument(
        '--no-clump',
        action='store_true',
        help='Keep same-terrain cells apart',
    )
    parser.add_argument(
        '--clumping-mode',
        type=ClumpingMode,
        choices=list(ClumpingMode),
        default=ClumpingMode.ADJACENT,
        help='How --no-clump judges same-terrain neighbours',
    )
    parser.add_argument(
        '--fixed-ports',
        action='store_true',
        help='Use the beginner port arrangement instead of shuffling ports',
    )
    parser.add_argument(
        '--max-attempts',
        type=int,
        default=common.settings.BOARD_MAX_ATTEMPTS,
        help='Candidates to try before giving up',
    )
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main function to generate and print a board."""
    args = build_parser().parse_args(argv)
    common.log.configure_logging()

    rules = RuleConfig(
        prevent_high_adjacency=not args.allow_high_adjacency,
        prevent_extreme_adjacency=not args.allow_extreme_adjacency,
        prevent_clumping=args.no_clump,
        clumping_mode=args.clumping_mode,
        fixed_ports=args.fixed_ports,
    )
    try:
        result = service.build_board(rules, args.max_attempts, seed=args.seed)
    except layout.InvalidConfiguration as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 2

    if isinstance(result, GenerationExhausted):
        print(
            f'Error: {result.message} ({result.attempts} attempts)', file=sys.stderr
        )
        return 1

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
