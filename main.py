import argparse
import sys

from hill_climbing import run_hill_climbing
from plot import plot_heuristic_curve
from utility import check_board_size, render_board


def board_size(value):
    """argparse type for N: a positive integer."""
    try:
        return check_board_size(int(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def positive_int(value):
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser():
    parser = argparse.ArgumentParser(description="N-Queens by hill climbing")
    parser.add_argument("N", type=board_size, help="Board size (positive integer)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument("--max-rounds", type=positive_int, default=None,
                        help="Stop after this many rounds (default: search until solved)")
    parser.add_argument("--board", action="store_true", help="Also print the board diagram")
    parser.add_argument("--plot", action="store_true", help="Plot the conflict curve")
    parser.add_argument("--verbose", action="store_true", help="Print progress every few rounds")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    result = run_hill_climbing(
        args.N,
        seed=args.seed,
        max_rounds=args.max_rounds,
        verbose=args.verbose,
    )

    print(result.final_state)
    print(result.final_state.heuristic())
    if args.board:
        print(render_board(result.final_state.board))

    if args.plot:
        plot_heuristic_curve(result)

    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
