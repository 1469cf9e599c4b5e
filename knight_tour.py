"""
This python file is used for core Knight's Tour algorithms. Includes the
board state, knight move generation, Warnsdorff-ordered backtracking search
and tour validation / matrix utilities.
####################################################################
## Personal Project - Srinivas Sridharan
####################################################################

Author: Srinivas Sridharan
Copyright: 2026
Project: knight_tour

License: Personal Project
Version: 0.1.0
Maintainer: Srinivas Sridharan

Status: Development

Other dependencies:
    numpy
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import numpy as np


logger = logging.getLogger(__name__)

Square = tuple[int, int]

# All eight L-shaped knight moves (row_delta, col_delta).
# Their order is the tie-break between equally constrained candidates.
KNIGHT_MOVES: tuple[Square, ...] = (
    (2, 1), (1, 2), (-1, 2), (-2, 1),
    (-2, -1), (-1, -2), (1, -2), (2, -1),
)

DEFAULT_START: Square = (0, 0)

FOUND = "found"
NOT_FOUND = "not_found"
BUDGET_EXCEEDED = "budget_exceeded"

_RECURSION_HEADROOM = 200


# ---------------------------------------------------------------------------
# 0. Errors
# ---------------------------------------------------------------------------

class InvalidBoardSize(ValueError):
    """Board dimension is not a positive integer."""


class InvalidStartSquare(ValueError):
    """Start square lies outside the board."""


class SearchBudgetExceeded(Exception):
    """Raised inside the search to abandon it once the step budget is spent."""


# ---------------------------------------------------------------------------
# 1. Board state
# ---------------------------------------------------------------------------

def _check_board_size(board_size) -> int:
    if isinstance(board_size, bool) or not isinstance(board_size, (int, np.integer)):
        raise InvalidBoardSize(f"Board size must be an integer, got {board_size!r}")
    if board_size < 1:
        raise InvalidBoardSize(f"Board size must be positive, got {board_size}")
    return int(board_size)


class KnightBoard:
    """Visited bitmap of an N×N board.

    Exactly the squares on the current partial path are marked; the search
    pairs every ``mark`` with one ``unmark`` when it backtracks.
    """

    def __init__(self, board_size: int):
        self.size = _check_board_size(board_size)
        self.visited = np.zeros((self.size, self.size), dtype=bool)

    def in_bounds(self, square: Square) -> bool:
        row, col = square
        return 0 <= row < self.size and 0 <= col < self.size

    def is_valid(self, square: Square) -> bool:
        """True if *square* is on the board and not yet visited."""
        return self.in_bounds(square) and not self.visited[square]

    def mark(self, square: Square) -> None:
        self.visited[square] = True

    def unmark(self, square: Square) -> None:
        self.visited[square] = False

    def visited_count(self) -> int:
        return int(self.visited.sum())

    @property
    def n_squares(self) -> int:
        return self.size * self.size


# ---------------------------------------------------------------------------
# 2. Move model
# ---------------------------------------------------------------------------

def onward_moves(square: Square, board: KnightBoard) -> list[Square]:
    """Squares one knight move from *square* that are still free on *board*."""
    row, col = square
    moves = []
    for dr, dc in KNIGHT_MOVES:
        target = (row + dr, col + dc)
        if board.is_valid(target):
            moves.append(target)
    return moves


def degree(square: Square, board: KnightBoard) -> int:
    """Warnsdorff score: number of onward moves from *square*."""
    return len(onward_moves(square, board))


def ordered_candidates(square: Square, board: KnightBoard) -> list[tuple[Square, int]]:
    """Return ``(candidate, degree)`` pairs sorted by ascending degree.

    Degrees are measured against the board as it is now, so *square* must
    already be marked.  ``sorted`` is stable, so ties keep ``KNIGHT_MOVES``
    order.
    """
    candidates = [(nxt, degree(nxt, board)) for nxt in onward_moves(square, board)]
    return sorted(candidates, key=lambda c: c[1])


# ---------------------------------------------------------------------------
# 3. Warnsdorff search with backtracking
# ---------------------------------------------------------------------------

class _StepCounter:
    """Counts ``solve`` activations against an optional budget."""

    def __init__(self, max_steps: Optional[int] = None):
        self.max_steps = max_steps
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchBudgetExceeded(f"step budget of {self.max_steps} exhausted")


def solve(
    current: Square,
    move_count: int,
    board: KnightBoard,
    path: list[Square],
    counter: Optional[_StepCounter] = None,
) -> bool:
    """Extend *path* from *current* into a full tour.

    ``move_count`` is the 0-based index of *current* in the tour.  On
    success *path* holds the complete tour; on failure *board* and *path* are
    left exactly as they were before the call.
    """
    if counter is not None:
        counter.tick()

    board.mark(current)
    path.append(current)

    if move_count == board.n_squares - 1:
        return True

    for nxt, _ in ordered_candidates(current, board):
        if solve(nxt, move_count + 1, board, path, counter):
            return True

    logger.debug("Backtracking from %s at move %d", current, move_count)
    board.unmark(current)
    path.pop()
    return False


@contextmanager
def _recursion_limit(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit to fit *depth* frames."""
    previous = sys.getrecursionlimit()
    needed = depth + _RECURSION_HEADROOM
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


@dataclass(frozen=True)
class TourResult:
    """Outcome of one ``find_tour`` attempt."""

    status: str
    board_size: int
    start: Square
    tour: tuple[Square, ...] = ()
    steps: int = 0

    @property
    def found(self) -> bool:
        return self.status == FOUND

    @property
    def message(self) -> str:
        n = self.board_size * self.board_size
        if self.status == FOUND:
            kind = "Closed tour" if is_closed_tour(self.tour) else "Open tour"
            return f"Knight's Tour found ({kind}).\nVisited all {n} squares."
        if self.status == BUDGET_EXCEEDED:
            return (
                f"Search abandoned after {self.steps} steps "
                "without completing a tour."
            )
        row, col = self.start
        # On odd-sized boards, minority-colour squares can't have a tour
        if self.board_size % 2 == 1 and (row + col) % 2 == 1:
            return (
                "No valid Knight's Tour exists from this starting position.\n"
                f"On a {self.board_size}×{self.board_size} board the path needs more "
                "minority-colour squares than exist (parity constraint)."
            )
        return "No knight's tour found."


def find_tour(
    board_size: int,
    start: Square = DEFAULT_START,
    max_steps: Optional[int] = None,
) -> TourResult:
    """Find an open knight's tour on a board_size × board_size board.

    Parameters
    ----------
    board_size : int
        Board dimension (e.g. 8 for 8×8).  Must be >= 1.
    start : tuple[int, int]
        0-based ``(row, col)`` of the starting square.
    max_steps : int, optional
        Abandon the search after this many recursive steps.

    Returns
    -------
    TourResult
        ``status`` is ``"found"`` (with the tour), ``"not_found"`` or
        ``"budget_exceeded"``.

    Raises
    ------
    InvalidBoardSize, InvalidStartSquare
        Before any search state is created.
    ValueError
        If *max_steps* is given but not positive.
    """
    board_size = _check_board_size(board_size)
    start = (int(start[0]), int(start[1]))
    if not (0 <= start[0] < board_size and 0 <= start[1] < board_size):
        raise InvalidStartSquare(
            f"Start square {start} is outside a {board_size}×{board_size} board"
        )
    if max_steps is not None and (isinstance(max_steps, bool) or max_steps < 1):
        raise ValueError(f"max_steps must be a positive integer, got {max_steps!r}")

    board = KnightBoard(board_size)
    path: list[Square] = []
    counter = _StepCounter(max_steps)

    try:
        with _recursion_limit(board.n_squares):
            success = solve(start, 0, board, path, counter)
    except SearchBudgetExceeded:
        logger.warning(
            "Search on %dx%d from %s exceeded budget of %d steps",
            board_size, board_size, start, max_steps,
        )
        return TourResult(BUDGET_EXCEEDED, board_size, start, steps=counter.steps)

    if not success:
        logger.info(
            "No tour on %dx%d from %s (%d steps)",
            board_size, board_size, start, counter.steps,
        )
        return TourResult(NOT_FOUND, board_size, start, steps=counter.steps)

    logger.info(
        "Tour on %dx%d from %s found in %d steps",
        board_size, board_size, start, counter.steps,
    )
    return TourResult(FOUND, board_size, start, tuple(path), counter.steps)


# ---------------------------------------------------------------------------
# 4. Validation helpers
# ---------------------------------------------------------------------------

def is_knight_move(a: Square, b: Square) -> bool:
    dr, dc = abs(a[0] - b[0]), abs(a[1] - b[1])
    return (dr == 1 and dc == 2) or (dr == 2 and dc == 1)


def is_closed_tour(tour: Sequence[Square]) -> bool:
    """Check whether the last square can reach the first via a knight move."""
    if len(tour) < 2:
        return False
    return is_knight_move(tour[-1], tour[0])


def validate_tour(tour: Sequence[Square], board_size: int) -> bool:
    """Return True if *tour* visits every square once via knight moves."""
    n = board_size * board_size
    if len(tour) != n:
        return False
    squares = {tuple(sq) for sq in tour}
    if len(squares) != n:
        return False
    if any(not (0 <= r < board_size and 0 <= c < board_size) for r, c in squares):
        return False
    return all(is_knight_move(tour[k], tour[k + 1]) for k in range(n - 1))


# ---------------------------------------------------------------------------
# 5. Knight Tour Matrix
# ---------------------------------------------------------------------------

ROW_LETTERS = "ABCDEFGHIJKLMNOPQRST"


def tour_to_matrix(tour: Sequence[Square], board_size: int) -> np.ndarray:
    """Convert a tour to an NxN matrix where ``mat[r][c]`` is the visit
    order (1-based)."""
    mat = np.zeros((board_size, board_size), dtype=int)
    for idx, (r, c) in enumerate(tour):
        mat[r, c] = idx + 1
    return mat


def format_matrix(mat: np.ndarray) -> str:
    board_size = mat.shape[0]
    lines = []
    header = "    " + "  ".join(f"{i+1:>3}" for i in range(board_size))
    lines.append(header)
    lines.append("    " + "-----" * board_size)
    for r in range(board_size):
        label = ROW_LETTERS[r] if r < len(ROW_LETTERS) else str(r + 1)
        vals = "  ".join(f"{mat[r, c]:>3}" for c in range(board_size))
        lines.append(f" {label:>2}| {vals}")
    return "\n".join(lines)
