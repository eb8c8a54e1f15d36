"""
Tests for the board: cell placement, key encoding and win/draw evaluation.
"""

import pytest

from nrow.config import COMPUTER, EMPTY, HUMAN, TABLE_SIZE
from nrow.core.board import Board
from nrow.memo.errors import DuplicateKeyError
from nrow.types import NOT_FOUND, Score


def board_from_rows(rows: list[str], length_to_win: int = 3) -> Board:
    board = Board(len(rows), length_to_win)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch != EMPTY:
                board.place(r, c, ch)
    return board


class TestConstruction:
    def test_starts_empty(self):
        board = Board(4, 3)
        assert all(board.is_empty(r, c) for r in range(4) for c in range(4))

    @pytest.mark.parametrize("size,win,levels", [(0, 3, 1), (3, 0, 1), (3, 3, -1)])
    def test_rejects_bad_parameters(self, size, win, levels):
        with pytest.raises(ValueError):
            Board(size, win, levels)

    def test_copy_is_independent(self):
        board = Board(3, 3)
        board.place(1, 1, HUMAN)
        clone = board.copy()
        clone.place(0, 0, COMPUTER)
        assert board.is_empty(0, 0)
        assert clone.encode() != board.encode()
        assert clone.max_levels == board.max_levels


class TestEncoding:
    def test_empty_board_key(self):
        assert Board(3, 3).encode() == " " * 9

    def test_row_major_order(self):
        board = Board(3, 3)
        board.place(0, 1, HUMAN)
        board.place(2, 0, COMPUTER)
        assert board.encode() == " X    O  "

    def test_key_length_is_size_squared(self):
        assert len(Board(5, 4).encode()) == 25

    def test_same_cells_different_move_order(self):
        a = Board(3, 3)
        a.place(0, 0, HUMAN)
        a.place(1, 1, COMPUTER)
        a.place(2, 2, HUMAN)

        b = Board(3, 3)
        b.place(2, 2, HUMAN)
        b.place(0, 0, HUMAN)
        b.place(1, 1, COMPUTER)

        assert a.encode() == b.encode()

    def test_encode_does_not_mutate(self):
        board = board_from_rows(["X O", " X ", "  O"])
        assert board.encode() == board.encode()
        assert board.encode() == "X O X   O"


class TestWins:
    def test_top_row(self):
        board = board_from_rows(["XXX", "OO ", "   "])
        assert board.has_win(HUMAN)
        assert not board.has_win(COMPUTER)
        assert board.evaluate() == Score.HUMAN_WINS

    def test_column(self):
        board = board_from_rows([" O ", " O ", "XOX"])
        assert board.has_win(COMPUTER)
        assert board.evaluate() == Score.COMPUTER_WINS

    def test_main_diagonal(self):
        board = board_from_rows(["X O", " XO", "  X"])
        assert board.has_win(HUMAN)

    def test_anti_diagonal(self):
        board = board_from_rows(["X O", " O ", "OXX"])
        assert board.has_win(COMPUTER)

    def test_short_diagonal_on_larger_board(self):
        board = board_from_rows([
            "    ",
            "X   ",
            " X  ",
            "  X ",
        ])
        assert board.has_win(HUMAN)

    def test_short_anti_diagonal_on_larger_board(self):
        board = board_from_rows([
            "   O",
            "  O ",
            " O  ",
            "    ",
        ])
        assert board.has_win(COMPUTER)

    def test_run_must_be_consecutive(self):
        board = board_from_rows([
            "XXOX",
            "    ",
            "    ",
            "    ",
        ])
        assert not board.has_win(HUMAN)

    def test_run_longer_than_required(self):
        board = board_from_rows(["XXXX", "    ", "    ", "    "])
        assert board.has_win(HUMAN)

    def test_length_longer_than_board_never_wins(self):
        board = board_from_rows(["XXX", "XXX", "XXX"], length_to_win=4)
        assert not board.has_win(HUMAN)
        assert board.is_full()
        assert board.is_draw()
        assert board.evaluate() == Score.DRAW

    def test_computer_checked_first(self):
        board = board_from_rows(["XXX", "OOO", "   "])
        assert board.evaluate() == Score.COMPUTER_WINS


class TestDrawAndOngoing:
    def test_full_board_without_runs_is_draw(self):
        board = board_from_rows(["XOX", "XOO", "OXX"])
        assert board.is_full()
        assert not board.has_win(HUMAN)
        assert not board.has_win(COMPUTER)
        assert board.is_draw()
        assert board.evaluate() == Score.DRAW

    def test_full_board_with_win_is_not_draw(self):
        board = board_from_rows(["XXX", "OOX", "XOO"])
        assert board.is_full()
        assert not board.is_draw()
        assert board.evaluate() == Score.HUMAN_WINS

    def test_empty_board_is_undecided(self):
        board = Board(3, 3)
        assert not board.is_full()
        assert not board.is_draw()
        assert board.evaluate() == Score.UNDECIDED

    def test_score_codes(self):
        assert [int(s) for s in (Score.HUMAN_WINS, Score.UNDECIDED, Score.DRAW, Score.COMPUTER_WINS)] == [0, 1, 2, 3]


class TestTableHelpers:
    def test_create_dictionary(self):
        table = Board(3, 3).create_dictionary()
        assert table.capacity == TABLE_SIZE
        assert table.num_records() == 0

    def test_add_then_repeat(self):
        board = Board(3, 3)
        table = board.create_dictionary()
        board.place(1, 1, HUMAN)

        assert board.repeated_configuration(table) == NOT_FOUND
        board.add_configuration(table, Score.UNDECIDED)
        assert board.repeated_configuration(table) == Score.UNDECIDED

    def test_add_same_configuration_twice(self):
        board = Board(3, 3)
        table = board.create_dictionary()
        board.add_configuration(table, Score.UNDECIDED)
        with pytest.raises(DuplicateKeyError):
            board.add_configuration(table, Score.DRAW)
        assert board.repeated_configuration(table) == Score.UNDECIDED


def test_render():
    board = board_from_rows(["X  ", " O ", "   "])
    assert board.render() == "X| | \n-+-+-\n |O| \n-+-+-\n | | "
