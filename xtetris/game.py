"""Game modes and the interactive menu loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .components import Block, Board, make_blocks
from .input_control import ask_move
from .npc import choose_block
from .operations import (
    EXHAUSTED_MESSAGE,
    LOSS_MESSAGE,
    blocks_exhausted,
    insert_block,
    insert_block_multi,
)
from .render import (
    clear_screen,
    end_of_game,
    menu,
    render_board,
    render_boards,
    render_final_score,
    render_inventory,
    render_loss,
)

Ask = Callable[[str], str]
Write = Callable[[str], object]

SINGLE_PIECES = 20
VERSUS_PIECES = 40


def _streams(ask: Ask | None, write: Write | None) -> tuple[Ask, Write]:
    return ask or input, write or sys.stdout.write


def _take(blocks: list[Block], index: int, rot: int, column: int) -> Block:
    block = blocks[index]
    block.pos_x = column
    block.rotate(rot)
    block.count -= 1
    return block


def _exhausted(blocks: list[Block], write: Write) -> bool:
    if blocks_exhausted(blocks):
        write(EXHAUSTED_MESSAGE)
        return True
    return False


def single_player(ask: Ask | None = None, write: Write | None = None) -> Board:
    """Play alone until the board overflows or the pieces run out; return the board."""
    ask, write = _streams(ask, write)
    board = Board()
    blocks = make_blocks(SINGLE_PIECES)
    while True:
        write(render_inventory(blocks))
        write(render_board(board))
        block = _take(blocks, *ask_move(blocks, ask, write))
        lost = insert_block(board, block)
        if lost:
            write(LOSS_MESSAGE)
        if _exhausted(blocks, write) or lost:
            return board


def _versus(ask: Ask, write: Write, cpu: bool) -> tuple[Board, Board]:
    boards = (Board(), Board())
    blocks = make_blocks(VERSUS_PIECES)
    turn = 0
    while True:
        write(render_inventory(blocks))
        write(f"P{turn + 1}\n")
        write(render_boards(*boards))
        if turn == 1 and cpu:
            move = choose_block(blocks, boards[1])
        else:
            move = ask_move(blocks, ask, write)
        block = _take(blocks, *move)
        lost = insert_block_multi(boards[turn], boards[1 - turn], block)
        write(render_loss(lost, turn == 0, turn == 1))
        finished = _exhausted(blocks, write)
        turn = 1 - turn
        if lost or finished:
            break
    if finished:
        write(render_final_score(boards[0].score, boards[1].score))
    return boards


def multi_player(ask: Ask | None = None, write: Write | None = None) -> tuple[Board, Board]:
    """Two players take turns on separate boards; return both boards."""
    ask, write = _streams(ask, write)
    return _versus(ask, write, cpu=False)


def player_cpu(ask: Ask | None = None, write: Write | None = None) -> tuple[Board, Board]:
    """A player against the computer, which plays the second board; return both boards."""
    ask, write = _streams(ask, write)
    return _versus(ask, write, cpu=True)


def main(argv: list[str] | None = None) -> int:
    """Run the menu loop until the player quits."""
    parser = argparse.ArgumentParser(prog="xtetris", description="Terminal Tetris for one or two players.")
    parser.parse_args(argv)
    ask: Ask = input
    write: Write = sys.stdout.write
    modes = {1: single_player, 2: multi_player, 3: player_cpu}
    try:
        while True:
            choice = menu(ask, write)
            if choice == 9:
                return 0
            modes[choice](ask, write)
            choice = end_of_game(ask, write)
            clear_screen(write)
            if choice != 0:
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())