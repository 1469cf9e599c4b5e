import sys

import numpy as np
import pytest

import knight_tour as kt


class TestFindTour:
    @pytest.mark.parametrize("size", [5, 6, 8])
    def test_corner_tour_is_valid(self, size):
        result = kt.find_tour(size, (0, 0))
        assert result.found
        assert result.status == kt.FOUND
        assert len(result.tour) == size * size
        assert result.tour[0] == (0, 0)
        assert kt.validate_tour(result.tour, size)

    def test_eight_covers_whole_board(self):
        result = kt.find_tour(8)
        assert set(result.tour) == {(r, c) for r in range(8) for c in range(8)}
        assert kt.tour_to_matrix(result.tour, 8).min() == 1

    def test_single_square(self):
        result = kt.find_tour(1, (0, 0))
        assert result.found
        assert result.tour == ((0, 0),)
        assert result.steps == 1

    def test_non_corner_start(self):
        result = kt.find_tour(6, (2, 3))
        assert result.found
        assert result.tour[0] == (2, 3)
        assert kt.validate_tour(result.tour, 6)

    @pytest.mark.parametrize("size", [2, 3, 4])
    def test_unsolvable_boards_report_not_found(self, size):
        result = kt.find_tour(size, (0, 0))
        assert not result.found
        assert result.status == kt.NOT_FOUND
        assert result.tour == ()
        assert result.steps >= 1

    def test_two_by_two_fails_on_first_step(self):
        assert kt.find_tour(2).steps == 1

    def test_deterministic(self):
        first = kt.find_tour(8, (0, 0))
        second = kt.find_tour(8, (0, 0))
        assert first.tour == second.tour
        assert first.steps == second.steps

    @pytest.mark.parametrize("size", [0, -1, 1.5])
    def test_invalid_size_raises(self, size):
        with pytest.raises(kt.InvalidBoardSize):
            kt.find_tour(size)

    @pytest.mark.parametrize("start", [(5, 0), (0, 5), (-1, 2)])
    def test_invalid_start_raises(self, start):
        with pytest.raises(kt.InvalidStartSquare):
            kt.find_tour(5, start)

    def test_accepts_numpy_size(self):
        assert kt.find_tour(np.int64(5)).found

    def test_recursion_limit_restored(self):
        before = sys.getrecursionlimit()
        kt.find_tour(8)
        assert sys.getrecursionlimit() == before


class TestStepBudget:
    def test_budget_exhaustion_is_distinct_outcome(self):
        result = kt.find_tour(8, (0, 0), max_steps=10)
        assert not result.found
        assert result.status == kt.BUDGET_EXCEEDED
        assert result.tour == ()
        assert "abandoned" in result.message

    def test_generous_budget_still_finds_tour(self):
        unlimited = kt.find_tour(5, (0, 0))
        budgeted = kt.find_tour(5, (0, 0), max_steps=unlimited.steps)
        assert budgeted.found
        assert budgeted.tour == unlimited.tour

    def test_budget_one_short_is_abandoned(self):
        unlimited = kt.find_tour(5, (0, 0))
        result = kt.find_tour(5, (0, 0), max_steps=unlimited.steps - 1)
        assert result.status == kt.BUDGET_EXCEEDED

    def test_budget_not_hit_on_failing_board(self):
        assert kt.find_tour(3, max_steps=10_000).status == kt.NOT_FOUND


class TestSolveRestoration:
    @pytest.mark.parametrize("size", [2, 3, 4])
    def test_failed_search_unwinds_everything(self, size):
        board = kt.KnightBoard(size)
        path = []
        assert not kt.solve((0, 0), 0, board, path)
        assert board.visited_count() == 0
        assert path == []

    def test_dead_end_restores_prior_state(self):
        board = kt.KnightBoard(5)
        board.mark((2, 1))
        board.mark((1, 2))
        before = board.visited.copy()
        path = [(2, 1), (1, 2)]

        assert not kt.solve((0, 0), 2, board, path)
        assert np.array_equal(board.visited, before)
        assert path == [(2, 1), (1, 2)]

    def test_success_keeps_path_marked(self):
        board = kt.KnightBoard(5)
        path = []
        assert kt.solve((0, 0), 0, board, path)
        assert board.visited.all()
        assert len(path) == 25

    def test_visited_matches_path_on_success(self):
        board = kt.KnightBoard(6)
        path = []
        kt.solve((0, 0), 0, board, path)
        assert {(int(r), int(c)) for r, c in zip(*np.nonzero(board.visited))} == set(path)

    def test_terminal_square_needs_no_onward_move(self):
        board = kt.KnightBoard(1)
        path = []
        assert kt.solve((0, 0), 0, board, path)
        assert path == [(0, 0)]


class TestHeuristicOrder:
    def test_candidates_non_decreasing_during_search(self, candidate_trace):
        result = kt.find_tour(6, (0, 0))
        assert result.found
        assert candidate_trace
        for square, marked, visited, ordered in candidate_trace:
            assert marked
            degrees = [d for _, d in ordered]
            assert degrees == sorted(degrees)

    def test_degrees_measured_after_marking_current(self, candidate_trace):
        kt.find_tour(5, (0, 0))
        for square, _, visited, ordered in candidate_trace:
            board = kt.KnightBoard(5)
            board.visited = visited
            for candidate, score in ordered:
                assert score == kt.degree(candidate, board)

    def test_first_move_follows_warnsdorff(self):
        tour = kt.find_tour(8, (0, 0)).tour
        # Both first candidates score 5, so the tie goes to (2, 1)
        assert tour[1] == (2, 1)


class TestTourResultMessage:
    def test_found_message(self, tour5):
        result = kt.TourResult(kt.FOUND, 5, (0, 0), tour5, 25)
        assert "Visited all 25 squares" in result.message

    def test_parity_message_on_odd_board(self):
        result = kt.TourResult(kt.NOT_FOUND, 5, (0, 1))
        assert "parity" in result.message

    def test_plain_not_found_message(self):
        result = kt.find_tour(4)
        assert result.message == "No knight's tour found."


class TestBudgetArgument:
    @pytest.mark.parametrize("max_steps", [0, -5, False])
    def test_non_positive_budget_rejected(self, max_steps):
        with pytest.raises(ValueError):
            kt.find_tour(5, (0, 0), max_steps=max_steps)

    def test_budget_of_one_is_accepted(self):
        assert kt.find_tour(1, max_steps=1).found
