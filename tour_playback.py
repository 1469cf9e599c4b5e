"""
This python file is used for step-by-step playback of a computed Knight's
Tour. Provides a read-only cursor over the tour and chessboard frame
rendering with matplotlib.
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
    matplotlib, knight_tour
"""

from __future__ import annotations

from typing import Iterator, Sequence

import matplotlib.patches as patches
from matplotlib.figure import Figure

from knight_tour import ROW_LETTERS, Square, is_closed_tour


# ---------------------------------------------------------------------------
# 1. Playback cursor
# ---------------------------------------------------------------------------

class TourPlayback:
    """Walks through a finished tour one square at a time.

    ``current_step`` counts revealed squares: 0 shows only the knight on the
    start square, ``len(tour)`` shows the whole tour.
    """

    def __init__(self, tour: Sequence[Square], board_size: int):
        if not tour:
            raise ValueError("Cannot play back an empty tour")
        self.tour = tuple(tour)
        self.board_size = board_size
        self.current_step = 0
        self._index = {sq: i for i, sq in enumerate(self.tour)}

    def __len__(self) -> int:
        return len(self.tour)

    @property
    def finished(self) -> bool:
        return self.current_step >= len(self.tour)

    @property
    def knight_position(self) -> Square:
        if self.current_step == 0:
            return self.tour[0]
        return self.tour[self.current_step - 1]

    def advance(self) -> bool:
        """Reveal the next square.  Returns False once nothing is left."""
        if self.finished:
            return False
        self.current_step += 1
        return True

    def seek(self, step: int) -> int:
        self.current_step = max(0, min(int(step), len(self.tour)))
        return self.current_step

    def reset(self) -> None:
        self.current_step = 0

    def visit_index(self, square: Square) -> int:
        """0-based position of *square* in the tour, -1 if absent."""
        return self._index.get(tuple(square), -1)

    def is_revealed(self, square: Square) -> bool:
        idx = self.visit_index(square)
        return 0 <= idx < self.current_step

    def frames(self) -> Iterator[int]:
        """Yield step numbers from the current position to the end."""
        while self.advance():
            yield self.current_step


# ---------------------------------------------------------------------------
# 2. Chessboard visualisation
# ---------------------------------------------------------------------------
# Frames are bare Figure objects; nothing here registers figures with pyplot.

_LIGHT = "#F0D9B5"
_DARK = "#B58863"
_START = "#7FC97F"
_VISITED = "#5CB85C"
_END = "#FF4500"
_KNIGHT = "♞"


def _new_board_axes(board_size: int, title: str) -> tuple[Figure, object]:
    fig = Figure(figsize=(6, 6))
    ax = fig.subplots()
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlim(0, board_size)
    ax.set_ylim(board_size, 0)
    ax.set_aspect("equal")

    for r in range(board_size):
        for c in range(board_size):
            shade = _LIGHT if (r + c) % 2 == 0 else _DARK
            ax.add_patch(patches.Rectangle((c, r), 1, 1, facecolor=shade, edgecolor="none"))

    centres = [i + 0.5 for i in range(board_size)]
    size = max(6, 14 - board_size // 3)
    ax.set_xticks(centres, [str(i + 1) for i in range(board_size)], fontsize=size)
    ax.set_yticks(centres, [ROW_LETTERS[i] if i < len(ROW_LETTERS) else str(i + 1)
                            for i in range(board_size)], fontsize=size)
    ax.tick_params(length=0)
    return fig, ax


def _outline(ax, square: Square, colour: str) -> None:
    r, c = square
    ax.add_patch(patches.Rectangle((c, r), 1, 1, facecolor="none", edgecolor=colour, linewidth=3))


def _place_knight(ax, square: Square, board_size: int) -> None:
    r, c = square
    ax.text(c + 0.5, r + 0.5, _KNIGHT, ha="center", va="center",
            fontsize=max(10, 32 - board_size), color="#222")


def generate_chessboard_image(
    tour: Sequence[Square],
    board_size: int,
    show_animation_frame: int | None = None,
) -> Figure:
    """Board after the first *show_animation_frame* squares of *tour* are
    revealed; the whole tour when it is None."""
    playback = TourPlayback(tour, board_size)
    playback.seek(len(tour) if show_animation_frame is None else show_animation_frame)
    shown = playback.current_step

    fig, ax = _new_board_axes(
        board_size, f"Knight's Tour  {board_size}×{board_size}  (step {shown}/{len(tour)})"
    )
    knight = playback.knight_position
    label_size = max(5, 16 - board_size // 2)
    for idx, (r, c) in enumerate(playback.tour[:shown]):
        ax.add_patch(patches.Rectangle((c, r), 1, 1, facecolor=_VISITED, edgecolor="none"))
        if (r, c) != knight:
            ax.text(c + 0.5, r + 0.5, str(idx), ha="center", va="center",
                    fontsize=label_size, fontweight="bold", color="white")

    _outline(ax, playback.tour[0], _START)
    if playback.finished and shown > 1:
        _outline(ax, playback.tour[-1], _END)
        if is_closed_tour(playback.tour):
            (r1, c1), (r2, c2) = playback.tour[-1], playback.tour[0]
            ax.annotate(
                "", xy=(c2 + 0.5, r2 + 0.5), xytext=(c1 + 0.5, r1 + 0.5),
                arrowprops=dict(arrowstyle="->", color="blue", lw=2.5, linestyle="dashed"),
            )
    _place_knight(ax, knight, board_size)

    fig.tight_layout()
    return fig


def generate_empty_board(
    board_size: int,
    knight_row: int | None = None,
    knight_col: int | None = None,
) -> Figure:
    """Empty board, with the knight drawn on (knight_row, knight_col) when
    that square is on the board.  Coordinates are 0-based."""
    fig, ax = _new_board_axes(board_size, f"Chessboard  {board_size}×{board_size}")
    if knight_row is not None and knight_col is not None:
        square = (knight_row, knight_col)
        if 0 <= knight_row < board_size and 0 <= knight_col < board_size:
            _outline(ax, square, _START)
            _place_knight(ax, square, board_size)
    fig.tight_layout()
    return fig
