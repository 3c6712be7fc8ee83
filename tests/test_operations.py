from xtetris.components import N_COLS, N_ROWS, Board, make_blocks
from xtetris.operations import (
    PENALTY_CELL,
    apply_penalty,
    blocks_exhausted,
    clear_lines,
    drop,
    fits,
    insert_block,
    insert_block_multi,
    insert_block_score,
    place_at,
    remove_row,
)


def _line():
    return make_blocks(1)[0]


def _vertical_line_at_col0():
    line = _line()
    line.rotate(1)
    line.pos_x = -3
    return line


def test_fits_on_empty_board():
    board = Board()
    line = _line()
    assert fits(board, line, N_ROWS + 2)
    assert not fits(board, line, N_ROWS + 3)


def test_drop_line_lands_on_floor():
    board = Board()
    assert drop(board, _line(), 0) is False
    assert board.grid[N_ROWS - 1][:4] == [1, 1, 1, 1]
    assert all(v == 0 for v in board.grid[N_ROWS - 1][4:])
    assert all(v == 0 for row in board.grid[: N_ROWS - 1] for v in row)


def test_blocks_stack():
    board = Board()
    drop(board, _line(), 0)
    drop(board, _line(), 0)
    assert board.grid[N_ROWS - 2][:4] == [1, 1, 1, 1]
    assert board.grid[N_ROWS - 1][:4] == [1, 1, 1, 1]


def test_place_at_overflow():
    board = Board()
    assert place_at(board, _line(), 0) is True


def test_overflow_when_column_full():
    board = Board()
    for row in board.grid[:N_ROWS]:
        row[0] = 3
    snapshot = board.copy()
    assert insert_block_score(snapshot, _line()) == -1
    assert insert_block(board, _line()) is True


def test_remove_row_shifts_down():
    board = Board()
    board.grid[4] = [2] * N_COLS
    board.grid[5] = [3] * N_COLS
    board.grid[0] = [7] * N_COLS
    remove_row(board, 5)
    assert board.grid[5] == [2] * N_COLS
    assert board.grid[1] == [7] * N_COLS
    assert board.grid[0] == [0] * N_COLS
    assert len(board.grid) == N_ROWS + 3


def test_clear_lines_nothing_to_clear():
    board = Board()
    assert clear_lines(board) == 0
    assert board.score == 0


def test_single_line_clear():
    board = Board()
    board.grid[N_ROWS - 1] = [0, 0, 0, 0] + [5] * (N_COLS - 4)
    assert insert_block(board, _line()) is False
    assert board.score == 1
    assert all(v == 0 for row in board.grid[:N_ROWS] for v in row)


def test_clear_lines_points_table():
    for rows, points in [(1, 1), (2, 3), (3, 6), (4, 12)]:
        board = Board()
        for r in range(N_ROWS - rows, N_ROWS):
            board.grid[r] = [4] * N_COLS
        assert clear_lines(board) == points
        assert board.score == points


def test_penalty_three_rows():
    board = Board()
    board.grid[N_ROWS - 1][0] = 2
    apply_penalty(board, 6)
    assert board.grid[N_ROWS - 1][0] == 0
    assert board.grid[N_ROWS - 1][1:] == [PENALTY_CELL] * (N_COLS - 1)
    assert board.grid[N_ROWS - 3] == [PENALTY_CELL] * N_COLS
    assert board.grid[N_ROWS - 4] == [0] * N_COLS


def test_penalty_ignored_for_small_scores():
    board = Board()
    before = board.copy()
    apply_penalty(board, 3)
    apply_penalty(board, 1)
    assert board == before


def test_multi_tetris_penalises_opponent():
    board = Board()
    opponent = Board()
    for r in range(N_ROWS - 4, N_ROWS):
        board.grid[r] = [0] + [6] * (N_COLS - 1)
    assert insert_block_multi(board, opponent, _vertical_line_at_col0()) is False
    assert board.score == 12
    assert all(v == 0 for row in board.grid[:N_ROWS] for v in row)
    for r in range(N_ROWS - 4, N_ROWS):
        assert opponent.grid[r] == [PENALTY_CELL] * N_COLS
    assert opponent.grid[N_ROWS - 5] == [0] * N_COLS


def test_insert_block_score_returns_points():
    board = Board()
    for r in range(N_ROWS - 3, N_ROWS):
        board.grid[r] = [0] + [6] * (N_COLS - 1)
    assert insert_block_score(board, _vertical_line_at_col0()) == 6


def test_blocks_exhausted():
    assert blocks_exhausted(make_blocks(0)) is True
    blocks = make_blocks(0)
    blocks[6].count = 1
    assert blocks_exhausted(blocks) is False