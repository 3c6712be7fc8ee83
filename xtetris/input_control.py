"""Asking the player for a block, a rotation and a column."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .components import Block
from .npc import PlacementError, check_block_index, placement_column

Ask = Callable[[str], str]
Write = Callable[[str], object]

_ROTATIONS = {0: 0, 90: 1, 180: 2, 270: 3}


def _streams(ask: Ask | None, write: Write | None) -> tuple[Ask, Write]:
    return ask or input, write or sys.stdout.write


def _read_int(ask: Ask, prompt: str) -> int | None:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


def ask_rotation(ask: Ask | None = None, write: Write | None = None) -> int:
    """Ask for a rotation in degrees until a valid one is given; return it as 0-3."""
    ask, write = _streams(ask, write)
    while True:
        degrees = _read_int(ask, "Inserire la rotazione del blocco --> ")
        if degrees in _ROTATIONS:
            return _ROTATIONS[degrees]
        write("La rotazione selezionata non esiste! (0, 90, 180, 270)\n")


def ask_position(block: Block, ask: Ask | None = None, write: Write | None = None) -> int:
    """Ask for the column of the block's leftmost cell; return the column of its grid."""
    ask, write = _streams(ask, write)
    while True:
        pos = _read_int(ask, "Inserire la posizione in cui posizionare il blocco --> ")
        if pos is not None:
            try:
                return placement_column(block, pos)
            except PlacementError:
                pass
        write("La posizionata non è valida!\n")


def ask_block(blocks: Sequence[Block], ask: Ask | None = None, write: Write | None = None) -> int:
    """Ask for a block number until one with pieces left is given."""
    ask, write = _streams(ask, write)
    while True:
        index = _read_int(ask, "Inserire il blocco desiderato --> ")
        if index is not None:
            try:
                return check_block_index(blocks, index)
            except PlacementError:
                pass
        write("Il blocco selezionato non esiste!\n")


def ask_move(
    blocks: Sequence[Block], ask: Ask | None = None, write: Write | None = None
) -> tuple[int, int, int]:
    """Ask for a whole move; the chosen block is left turned. Return (index, rot, column)."""
    ask, write = _streams(ask, write)
    index = ask_block(blocks, ask, write)
    rot = ask_rotation(ask, write)
    blocks[index].rotate(rot)
    column = ask_position(blocks[index], ask, write)
    return index, rot, column