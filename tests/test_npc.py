import pytest

from xtetris.components import N_COLS, N_ROWS, Board, make_blocks
from xtetris.npc import (
    PlacementError,
    check_block_index,
    check_rotation,
    choose_block,
    is_top_play,
    placement_column,
    score_play,
)


def _only(index, count=1):
    blocks = make_blocks(0)
    blocks[index].count = count
    return blocks


def _board_with_gap(gap):
    board = Board()
    board.grid[N_ROWS - 1] = [0 if c in gap else 1 for c in range(N_COLS)]
    return board


def _leftmost(block):
    return min(j for row in block.shape for j, v in enumerate(row) if v)


@pytest.mark.parametrize("rot,index", [(0, 0), (1, 0), (0, 1), (3, 2), (3, 3), (1, 4), (1, 5), (3, 6)])
def test_check_rotation_accepts(rot, index):
    assert check_rotation(rot, index) == rot


@pytest.mark.parametrize("rot,index", [(2, 0), (1, 1), (4, 2), (2, 4), (2, 5), (4, 6)])
def test_check_rotation_rejects(rot, index):
    with pytest.raises(PlacementError) as info:
        check_rotation(rot, index)
    assert info.value.reason == PlacementError.INVALID


def test_check_block_index_valid():
    assert check_block_index(make_blocks(2), 5) == 5


@pytest.mark.parametrize("index", [-1, 7])
def test_check_block_index_out_of_range(index):
    with pytest.raises(PlacementError) as info:
        check_block_index(make_blocks(2), index)
    assert info.value.reason == PlacementError.INVALID


def test_check_block_index_exhausted():
    blocks = make_blocks(2)
    blocks[3].count = 0
    with pytest.raises(PlacementError) as info:
        check_block_index(blocks, 3)
    assert info.value.reason == PlacementError.EXHAUSTED


def test_placement_column_line_limits():
    line = make_blocks(1)[0]
    assert placement_column(line, 6) == 6
    with pytest.raises(PlacementError) as info:
        placement_column(line, 7)
    assert info.value.reason == PlacementError.OVERHANGS_RIGHT
    with pytest.raises(PlacementError) as info:
        placement_column(line, -1)
    assert info.value.reason == PlacementError.OVERHANGS_LEFT


@pytest.mark.parametrize("index,rot", [(0, 1), (2, 1), (3, 3), (4, 1), (6, 1)])
def test_placement_column_aligns_leftmost_cell(index, rot):
    block = make_blocks(1)[index]
    block.rotate(rot)
    column = placement_column(block, 4)
    assert column + _leftmost(block) == 4


def test_is_top_play():
    blocks = make_blocks(1)
    assert is_top_play(12, blocks)
    assert not is_top_play(6, blocks)
    blocks[0].count = 0
    assert is_top_play(6, blocks)
    assert not is_top_play(3, blocks)
    blocks[1].count = 0
    assert is_top_play(3, blocks)
    assert not is_top_play(1, blocks)
    blocks[2].count = 0
    assert is_top_play(1, blocks)
    assert not is_top_play(0, blocks)


def test_score_play_depth_zero():
    assert score_play(make_blocks(1), Board(), 0) == 0


def test_score_play_no_blocks_left():
    assert score_play(make_blocks(0), Board(), 2) == 0


def test_score_play_counts_line_clear_and_keeps_board():
    board = _board_with_gap({0, 1, 2, 3})
    before = [row[:] for row in board.grid]
    assert score_play(_only(0), board, 1) == 1
    assert board.grid == before


def test_choose_block_takes_top_play():
    board = _board_with_gap({6, 7, 8, 9})
    before = [row[:] for row in board.grid]
    assert choose_block(_only(0), board) == (0, 0, 6)
    assert board.grid == before


def test_choose_block_first_candidate_when_nothing_scores():
    assert choose_block(_only(1), Board()) == (1, 0, 0)


def test_choose_block_with_no_blocks():
    assert choose_block(make_blocks(0), Board()) == (0, 0, 0)