"""
This python file is used for Gradio web application for the Knight's Tour
solver. Provides an interactive GUI to select board size and starting square,
animate the tour square by square, and view the visit-order matrix.
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
    gradio, knight_tour, tour_playback
"""

from __future__ import annotations

import logging
import time

import gradio as gr

from knight_tour import ROW_LETTERS, find_tour, format_matrix, tour_to_matrix
from tour_playback import TourPlayback, generate_chessboard_image, generate_empty_board


MIN_BOARD_SIZE = 5
MAX_BOARD_SIZE = 20
DEFAULT_BOARD_SIZE = 8
STEP_DELAY_SECONDS = 0.4

logger = logging.getLogger(__name__)

# ── Shared state ──────────────────────────────────────────────────────────
_last_tour: tuple = ()   # (tour, board_size) of the last tour found


# ── Helpers ───────────────────────────────────────────────────────────────

def _row_choices(board_size: int) -> list[str]:
    return [ROW_LETTERS[i] for i in range(board_size)]


def _col_choices(board_size: int) -> list[str]:
    return [str(i + 1) for i in range(board_size)]


def _clamp_size(board_size) -> int:
    return max(MIN_BOARD_SIZE, min(MAX_BOARD_SIZE, int(board_size or DEFAULT_BOARD_SIZE)))


def _parse_start(row_letter: str, col_str: str) -> tuple[int, int] | None:
    if not row_letter or not col_str:
        return None
    return ROW_LETTERS.index(row_letter), int(col_str) - 1


# ── Callbacks ─────────────────────────────────────────────────────────────

def on_board_size_change(board_size: int):
    """Update row/column dropdowns and render empty board when board size changes."""
    board_size = _clamp_size(board_size)
    rows = _row_choices(board_size)
    cols = _col_choices(board_size)
    fig = generate_empty_board(board_size, knight_row=0, knight_col=0)
    return (
        gr.update(choices=rows, value=rows[0]),
        gr.update(choices=cols, value=cols[0]),
        fig,
    )


def on_position_change(board_size: int, row_letter: str, col_str: str):
    """Re-render the board with the knight at the selected position."""
    board_size = _clamp_size(board_size)
    start = _parse_start(row_letter, col_str)
    if start is None:
        return generate_empty_board(board_size)
    return generate_empty_board(board_size, knight_row=start[0], knight_col=start[1])


def start_tour(board_size: int, row_letter: str, col_str: str):
    """Search for a tour, then animate it one square per tick."""
    global _last_tour

    board_size = _clamp_size(board_size)
    try:
        start = _parse_start(row_letter, col_str)
        if start is None:
            raise ValueError("Choose a starting row and column.")
        result = find_tour(board_size, start)
    except ValueError as exc:
        logger.warning("Rejected tour request: %s", exc)
        yield (
            generate_empty_board(board_size),
            str(exc),
            "",
            gr.update(visible=False),
        )
        return

    if not result.found:
        _last_tour = ()
        gr.Warning(result.message)
        yield (
            generate_empty_board(board_size, knight_row=start[0], knight_col=start[1]),
            result.message,
            "",
            gr.update(maximum=1, value=1, visible=False),
        )
        return

    _last_tour = (result.tour, board_size)
    # The animation owns this cursor; the slider renders from _last_tour.
    playback = TourPlayback(result.tour, board_size)
    matrix_text = format_matrix(tour_to_matrix(result.tour, board_size))

    yield (
        generate_chessboard_image(result.tour, board_size, show_animation_frame=0),
        "Playing tour…",
        matrix_text,
        gr.update(minimum=0, maximum=len(playback), value=0, visible=True),
    )
    for step in playback.frames():
        time.sleep(STEP_DELAY_SECONDS)
        yield (
            generate_chessboard_image(result.tour, board_size, show_animation_frame=step),
            "Playing tour…" if not playback.finished else result.message,
            matrix_text,
            gr.update(value=step),
        )


def on_slider_change(step: int):
    """Re-render board at a particular animation step."""
    if not _last_tour:
        return None
    tour, board_size = _last_tour
    return generate_chessboard_image(tour, board_size, show_animation_frame=int(step))


# ── Gradio UI ─────────────────────────────────────────────────────────────

def build_app() -> gr.Blocks:
    with gr.Blocks(
        title="Knight's Tour Visualizer",
    ) as app:
        gr.Markdown(
            "# ♞ Knight's Tour Visualizer\n"
            "Find an open Knight's Tour with Warnsdorff's rule and backtracking,  \n"
            "then watch the knight cover the board.  Choose a board size and click **Start Tour**."
        )

        with gr.Row():
            # ── Left column: controls ──
            with gr.Column(scale=1):
                board_size = gr.Number(
                    value=DEFAULT_BOARD_SIZE, precision=0,
                    minimum=MIN_BOARD_SIZE, maximum=MAX_BOARD_SIZE,
                    label=f"Board Size ({MIN_BOARD_SIZE}–{MAX_BOARD_SIZE})",
                )
                row_dd = gr.Dropdown(
                    choices=_row_choices(DEFAULT_BOARD_SIZE), value="A",
                    label="Starting Row",
                )
                col_dd = gr.Dropdown(
                    choices=_col_choices(DEFAULT_BOARD_SIZE), value="1",
                    label="Starting Column",
                )
                start_btn = gr.Button("Start Tour", variant="primary", size="lg")

                status_box = gr.Textbox(label="Result", lines=3, interactive=False)

                step_slider = gr.Slider(
                    minimum=0, maximum=DEFAULT_BOARD_SIZE ** 2, step=1, value=0,
                    label="Animation Step (drag to step through)",
                    visible=False,
                )

            # ── Right column: board visualisation ──
            with gr.Column(scale=2):
                board_plot = gr.Plot(
                    label="Chessboard",
                    value=generate_empty_board(DEFAULT_BOARD_SIZE, knight_row=0, knight_col=0),
                )

        # ── Tour matrix ──
        with gr.Accordion("Knight Tour Matrix", open=False):
            matrix_box = gr.Code(label="Visit-Order Matrix", language=None, lines=12)

        # ── Wiring ──
        board_size.change(
            on_board_size_change,
            inputs=[board_size],
            outputs=[row_dd, col_dd, board_plot],
        )

        row_dd.change(
            on_position_change,
            inputs=[board_size, row_dd, col_dd],
            outputs=[board_plot],
        )

        col_dd.change(
            on_position_change,
            inputs=[board_size, row_dd, col_dd],
            outputs=[board_plot],
        )

        start_btn.click(
            start_tour,
            inputs=[board_size, row_dd, col_dd],
            outputs=[board_plot, status_box, matrix_box, step_slider],
        )

        step_slider.release(
            on_slider_change,
            inputs=[step_slider],
            outputs=[board_plot],
        )

    return app


# ── Main ──────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = build_app()
    app.launch(theme=gr.themes.Soft())
