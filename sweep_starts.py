"""Run the Warnsdorff/backtracking search from every start square for a range of board sizes."""

import argparse
import logging
import time

import numpy as np

from knight_tour import BUDGET_EXCEEDED, find_tour, validate_tour


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sweep knight's tour searches over board sizes and start squares",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--min-size", type=int, default=5, help="Smallest board size")
    parser.add_argument("--max-size", type=int, default=8, help="Largest board size")
    parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Abandon a single search after this many recursive steps",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every search")
    return parser.parse_args()


def sweep(board_size: int, max_steps=None) -> dict:
    """Search from every square of one board size and collect counts."""
    found = not_found = abandoned = 0
    steps = []
    for r in range(board_size):
        for c in range(board_size):
            result = find_tour(board_size, (r, c), max_steps=max_steps)
            steps.append(result.steps)
            if result.found:
                if not validate_tour(result.tour, board_size):
                    raise RuntimeError(f"Invalid tour returned from {(r, c)}")
                found += 1
            elif result.status == BUDGET_EXCEEDED:
                abandoned += 1
            else:
                not_found += 1
    return {
        "found": found,
        "not_found": not_found,
        "budget_exceeded": abandoned,
        "steps": steps,
    }


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    for N in range(args.min_size, args.max_size + 1):
        print(f"\n{'=' * 50}")
        print(f"Sweeping {N}x{N} board  ({N * N} start squares)")
        print(f"{'=' * 50}")

        t0 = time.time()
        stats = sweep(N, max_steps=args.max_steps)
        elapsed = time.time() - t0

        steps = np.array(stats["steps"])
        print(
            f"  Done in {elapsed:.2f}s  |  found {stats['found']}/{N * N}  |  "
            f"not found {stats['not_found']}  |  abandoned {stats['budget_exceeded']}"
        )
        print(
            f"  Steps per search: mean={steps.mean():.1f}  "
            f"max={steps.max()}  (minimum possible {N * N})"
        )

    print("\n\nSweep complete!")


if __name__ == "__main__":
    main()
