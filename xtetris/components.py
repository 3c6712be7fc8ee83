"""Tetromino and playfield data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

N_BLOCKS = 7
N_ROWS = 15
N_COLS = 10
FLOOR_ROWS = 3
SHAPE_SIZE = 4

# Seven tetromino shapes on a 4x4 grid; the cell value is the piece colour.
_SHAPES: tuple[tuple[tuple[int, ...], ...], ...] = (
    ((1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # line
    ((2, 2, 0, 0), (2, 2, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # square
    ((3, 0, 0, 0), (3, 3, 3, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # left L
    ((0, 0, 4, 0), (4, 4, 4, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # right L
    ((0, 5, 5, 0), (5, 5, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # left S
    ((6, 6, 0, 0), (0, 6, 6, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # right S
    ((0, 7, 0, 0), (7, 7, 7, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # T
)


@dataclass
class Block:
    """A tetromino: its 4x4 shape, current rotation, column and remaining count."""

    shape: list[list[int]]
    rotation: int = 0
    pos_x: int = 0
    count: int = 0

    def rotate(self, rot: int) -> None:
        """Turn the block clockwise until its rotation equals ``rot`` (0-3)."""
        turns = (4 - (self.rotation - rot)) % 4
        for _ in range(turns):
            self.shape = [list(row) for row in zip(*self.shape[::-1])]
        self.rotation = (self.rotation + turns) % 4

    def copy(self) -> Block:
        """Return an independent copy of the block."""
        return Block([row[:] for row in self.shape], self.rotation, self.pos_x, self.count)


def _empty_grid() -> list[list[int]]:
    grid = [[0] * N_COLS for _ in range(N_ROWS)]
    grid.extend([1] * N_COLS for _ in range(FLOOR_ROWS))
    return grid


@dataclass
class Board:
    """A playfield: visible rows plus a solid hidden floor, and the score."""

    grid: list[list[int]] = field(default_factory=_empty_grid)
    score: int = 0

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        return Board([row[:] for row in self.grid], self.score)


def make_blocks(count: int) -> list[Block]:
    """Create the seven tetrominoes, each with ``count`` pieces available."""
    return [Block([list(row) for row in shape], count=count) for shape in _SHAPES]