"""Computer opponent: searches the placements of every tetromino for the best score."""

from __future__ import annotations

from collections.abc import Sequence

from .components import N_BLOCKS, N_COLS, SHAPE_SIZE, Block, Board
from .operations import insert_block_score

# Rotations each tetromino accepts, indexed by block number.
_MAX_ROTATION = (1, 0, 3, 3, 1, 1, 3)


class PlacementError(ValueError):
    """Raised when a block, rotation or column cannot be used."""

    INVALID = "invalid"
    EXHAUSTED = "exhausted"
    OVERHANGS_RIGHT = "overhangs_right"
    OVERHANGS_LEFT = "overhangs_left"

    def __init__(self, reason: str, message: str = "") -> None:
        super().__init__(message or reason)
        self.reason = reason


def placement_column(block: Block, pos: int) -> int:
    """Map the column chosen for the block's leftmost cell to the column of its 4x4 grid."""
    filled = [
        j for j in range(SHAPE_SIZE) if any(row[j] != 0 for row in block.shape)
    ]
    if pos < 0:
        raise PlacementError(PlacementError.OVERHANGS_LEFT, f"column {pos} is off the left edge")
    if pos >= N_COLS - len(filled) + 1:
        raise PlacementError(PlacementError.OVERHANGS_RIGHT, f"column {pos} is off the right edge")
    return pos - filled[0]


def check_block_index(blocks: Sequence[Block], index: int) -> int:
    """Return ``index`` if it names a block with pieces left."""
    if not 0 <= index < N_BLOCKS:
        raise PlacementError(PlacementError.INVALID, f"no block number {index}")
    if blocks[index].count <= 0:
        raise PlacementError(PlacementError.EXHAUSTED, f"block {index} has no pieces left")
    return index


def check_rotation(rot: int, index: int) -> int:
    """Return ``rot`` if block ``index`` has a distinct shape in that rotation."""
    if 0 <= index < N_BLOCKS and rot <= _MAX_ROTATION[index]:
        return rot
    raise PlacementError(PlacementError.INVALID, f"rotation {rot} not used by block {index}")


def score_play(
    blocks: Sequence[Block],
    board: Board,
    depth: int,
    pos: int = 0,
    rot: int = 0,
    index: int = 0,
) -> int:
    """Sum the points of every placement from (index, rot, pos) onwards, ``depth`` moves deep.

    The board passed in is left untouched.
    """
    if depth <= 0:
        return 0
    total = 0
    while True:
        try:
            check_block_index(blocks, index)
        except PlacementError as err:
            if err.reason == PlacementError.EXHAUSTED:
                index += 1
                continue
            return total + score_play(blocks, board, depth - 1)
        try:
            check_rotation(rot, index)
        except PlacementError:
            index, rot, pos = index + 1, 0, 0
            continue
        block = blocks[index]
        block.rotate(rot)
        try:
            column = placement_column(block, pos)
        except PlacementError as err:
            if err.reason == PlacementError.OVERHANGS_RIGHT:
                rot, pos = rot + 1, 0
            else:
                pos += 1
            continue
        block.pos_x = column
        placed = board.copy()
        total += insert_block_score(placed, block)
        total += score_play(blocks, placed, depth - 1)
        pos += 1


def is_top_play(score: int, blocks: Sequence[Block]) -> bool:
    """Return whether ``score`` is the best reachable given how many block kinds are used up."""
    if score == 12:
        return True
    exhausted = sum(1 for b in blocks[:N_BLOCKS] if b.count == 0)
    return (
        (exhausted > 0 and score == 6)
        or (exhausted > 1 and score == 3)
        or (exhausted > 2 and score == 1)
    )


def choose_block(blocks: Sequence[Block], board: Board) -> tuple[int, int, int]:
    """Pick the block, rotation and grid column that score best; return (index, rot, column)."""
    best = (0, 0, 0)
    best_score = -1
    for index in range(N_BLOCKS):
        try:
            check_block_index(blocks, index)
        except PlacementError:
            continue
        for rot in range(4):
            try:
                check_rotation(rot, index)
            except PlacementError:
                continue
            for pos in range(N_COLS):
                block = blocks[index]
                block.rotate(rot)
                try:
                    column = placement_column(block, pos)
                except PlacementError:
                    continue
                trial = board.copy()
                block.pos_x = column
                score = max(insert_block_score(trial, block), 0)
                if is_top_play(score, blocks):
                    return index, rot, column
                ahead = score_play(blocks, trial, 2)
                if ahead > 0:
                    score += ahead
                if score > best_score:
                    best_score = score
                    best = (index, rot, column)
    return best