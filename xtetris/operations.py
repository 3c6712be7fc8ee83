"""Dropping tetrominoes, clearing lines and scoring."""

from __future__ import annotations

from collections.abc import Iterable

from .components import N_COLS, N_ROWS, SHAPE_SIZE, Block, Board

LOSS_MESSAGE = "Sei uscito dal campo di gioco, hai PERSO!\n\n"
EXHAUSTED_MESSAGE = "Hai finito i Blocchi!\n\n"
PENALTY_CELL = 8

_POINTS = {1: 1, 2: 3, 3: 6, 4: 12}
_PENALTY_ROWS = {6: 3, 12: 4}


def _cells(block: Block, level: int):
    """Yield (shape row, shape col, board row, board col), bottom shape row first."""
    for i in reversed(range(SHAPE_SIZE)):
        for j in range(SHAPE_SIZE):
            yield i, j, level - (SHAPE_SIZE - 1 - i), block.pos_x + j


def fits(board: Board, block: Block, level: int) -> bool:
    """Return whether the block, with its bottom row at ``level``, overlaps nothing."""
    for i, j, r, c in _cells(block, level):
        if 0 <= r < len(board.grid) and 0 <= c < N_COLS:
            if board.grid[r][c] != 0 and block.shape[i][j] != 0:
                return False
    return True


def drop(board: Board, block: Block, level: int) -> bool:
    """Let the block fall from ``level`` and fix it in place; return whether it overflowed."""
    while fits(board, block, level):
        level += 1
    return place_at(board, block, level - 1)


def place_at(board: Board, block: Block, level: int) -> bool:
    """Write the block into the board at ``level``; return whether it sticks out of the top."""
    for i, j, r, c in _cells(block, level):
        if r >= 0 and 0 <= c < N_COLS:
            if level - i % 3 >= 0 and board.grid[r][c] == 0:
                board.grid[r][c] = block.shape[i][j]
        elif r < 0 and block.shape[i][j] != 0:
            return True
    return False


def remove_row(board: Board, row: int) -> None:
    """Delete ``row``, shifting the rows above it down and emptying the top row."""
    del board.grid[row]
    board.grid.insert(0, [0] * N_COLS)


def clear_lines(board: Board) -> int:
    """Remove full rows, add the points to the board's score and return them."""
    cleared = 0
    for row in range(N_ROWS):
        if all(board.grid[row]):
            cleared += 1
            remove_row(board, row)
    points = _POINTS.get(cleared)
    if points is None:
        return cleared
    board.score += points
    return points


def apply_penalty(board: Board, points: int) -> None:
    """Invert the opponent's bottom rows after a triple (3 rows) or a tetris (4 rows)."""
    rows = _PENALTY_ROWS.get(points)
    if rows is None:
        return
    for row in board.grid[N_ROWS - rows:N_ROWS]:
        row[:] = [0 if v != 0 else PENALTY_CELL for v in row]


def blocks_exhausted(blocks: Iterable[Block]) -> bool:
    """Return whether no pieces of any kind are left."""
    return all(b.count == 0 for b in blocks)


def insert_block(board: Board, block: Block) -> bool:
    """Drop a block in single-player mode; return whether the player lost."""
    lost = drop(board, block, 0)
    clear_lines(board)
    return lost


def insert_block_multi(board: Board, opponent: Board, block: Block) -> bool:
    """Drop a block and penalise the opponent; return whether the player lost."""
    lost = drop(board, block, 0)
    apply_penalty(opponent, clear_lines(board))
    return lost


def insert_block_score(board: Board, block: Block) -> int:
    """Drop a block and return the points earned, or -1 if it overflowed."""
    if drop(board, block, 0):
        return -1
    return clear_lines(board)