import pytest

import knight_tour as kt


@pytest.fixture
def board8():
    """Fresh 8x8 board with nothing visited."""
    return kt.KnightBoard(8)


@pytest.fixture
def tour5():
    """A complete 5x5 tour from the corner."""
    result = kt.find_tour(5, (0, 0))
    assert result.found
    return result.tour


@pytest.fixture
def candidate_trace(monkeypatch):
    """Record every candidate list the search orders, with the board state it saw."""
    calls = []
    original = kt.ordered_candidates

    def recording(square, board):
        ordered = original(square, board)
        calls.append((square, bool(board.visited[square]), board.visited.copy(), ordered))
        return ordered

    monkeypatch.setattr(kt, "ordered_candidates", recording)
    return calls
