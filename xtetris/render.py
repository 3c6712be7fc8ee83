"""Drawing boards and menus as coloured terminal text."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .components import N_COLS, N_ROWS, Block, Board

Ask = Callable[[str], str]
Write = Callable[[str], object]

RED = "\033[0;31m"
GRN = "\033[0;32m"
YEL = "\033[0;33m"
BLU = "\033[0;34m"
MAG = "\033[0;35m"
CYN = "\033[0;36m"
WHT = "\033[0;37m"
GRY = "\033[0;90m"

SCREEN_WIDTH = 240
CLEAR_LINES = 1000

_COLOURS = {1: RED, 2: GRN, 3: YEL, 4: BLU, 5: MAG, 6: CYN, 7: WHT, 8: GRY}

_INVENTORY = (
    "BLOCCO 0\t\tRIMANENTI:{count}\nROT: 0/180 \t\tROT: 90/270 \n"
    + RED
    + "####\t\t\t#\n\t\t\t#\n\t\t\t#\n\t\t\t#\n\n"
    + WHT,
    "BLOCCO 1\t\tRIMANENTI:{count}\nROT: 0/90/180/270\n" + GRN + "##\n##\n\n" + WHT,
    "BLOCCO 2\t\tRIMANENTI:{count}\nROT: 0 \t\tROT: 90 \tROT: 180 \tROT:270\n"
    + YEL
    + "#\t\t##\t\t###\t\t #\n###\t\t#\t\t  #\t\t #\n\t\t#\t\t\t\t##\n\n"
    + WHT,
    "BLOCCO 3\t\tRIMANENTI:{count}\nROT: 0 \t\tROT: 90 \tROT: 180 \tROT:270\n"
    + BLU
    + "  #\t\t#\t\t###\t\t##\n###\t\t#\t\t#\t\t #\n\t\t##\t\t\t\t #\n\n"
    + WHT,
    "BLOCCO 4\t\tRIMANENTI:{count}\nROT: 0/180 \t\tROT: 90/270\n"
    + MAG
    + " ##\t\t\t#\n##\t\t\t##\n\t\t\t #\n\n"
    + WHT,
    "BLOCCO 5\t\tRIMANENTI:{count}\nROT: 0/180 \t\tROT: 90/270\n"
    + CYN
    + "##\t\t\t #\n ##\t\t\t##\n\t\t\t#\n\n"
    + WHT,
    "BLOCCO 6\t\tRIMANENTI:{count}\nROT: 0 \t\tROT: 90 \tROT: 180 \tROT:270\n"
    + WHT
    + " #\t\t#\t\t###\t\t #\n###\t\t##\t\t #\t\t##\n\t\t#\t\t\t\t #\n\n"
    + WHT,
)

_GAP = "\t" * 9


def _streams(ask: Ask | None, write: Write | None) -> tuple[Ask, Write]:
    return ask or input, write or sys.stdout.write


def _read_int(ask: Ask, prompt: str) -> int | None:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


def render_cell(value: int) -> str:
    """Return one board cell: a coloured '#' for a piece, a space when empty."""
    colour = _COLOURS.get(value)
    if colour is None:
        return " "
    return colour + "#" + WHT


def render_inventory(blocks: Sequence[Block]) -> str:
    """Describe every tetromino that still has pieces left, with its rotations."""
    return "".join(
        template.format(count=block.count)
        for template, block in zip(_INVENTORY, blocks)
        if block.count > 0
    )


def _header() -> str:
    return "".join(f"|{j}" for j in range(N_COLS)) + "|"


def _row(board: Board, i: int) -> str:
    return "".join("|" + render_cell(v) for v in board.grid[i]) + "|"


def render_board(board: Board) -> str:
    """Draw a single playfield with its score and column numbers."""
    lines = [f"Score : {board.score}", _header()]
    lines.extend(_row(board, i) for i in range(N_ROWS))
    return "\n".join(lines) + "\n"


def render_boards(board1: Board, board2: Board) -> str:
    """Draw two playfields side by side."""
    lines = [
        "Player 1" + _GAP + "Player 2",
        f"Punti P1: {board1.score}" + _GAP + f"Punti P2: {board2.score}",
        _header() + _GAP + _header(),
    ]
    lines.extend(_row(board1, i) + _GAP + _row(board2, i) for i in range(N_ROWS))
    return "\n".join(lines) + "\n"


def render_final_score(p1: int, p2: int) -> str:
    """Report both scores and who won."""
    text = f"Score Player 1 -> {p1}\t\t\t Score Player 2 -> {p2}\n"
    if p1 > p2:
        return text + "\n\nComplimenti Player 1, hai VINTO!\n\n"
    if p2 > p1:
        return text + "\n\nComplimenti Player 2, hai VINTO!\n\n"
    return text + "\n\nPlayer 1 e Player 2, avete PAREGGIATO!\n\n"


def render_loss(lost: bool, p1: bool, p2: bool) -> str:
    """Announce the winner when the flagged player has overflowed the board."""
    text = ""
    if lost and p1:
        text += "\n\nPlayer 1 sei uscito dal campo di gioco. Complimenti Player 2, hai VINTO!\n\n"
    if lost and p2:
        text += "\n\nPlayer 2 sei uscito dal campo di gioco. Complimenti Player 1, hai VINTO!\n\n"
    return text


def centered(text: str, width: int = SCREEN_WIDTH) -> str:
    """Pad ``text`` on the left so that it sits in the middle of ``width`` columns."""
    total = int((width - len(text)) / 2) + len(text)
    return text.rjust(total)


def menu(ask: Ask | None = None, write: Write | None = None) -> int:
    """Show the main menu and return the chosen option (1, 2, 3 or 9)."""
    ask, write = _streams(ask, write)
    write(centered("X-TETRIS") + "\n")
    write("\n\n\n")
    for option in ("1) Single Player", "2) Multiplayer Player", "3) Player vs CPU"):
        write(centered(option) + "\n")
    write("\n")
    write(centered("9) Esci") + "\n")
    while True:
        choice = _read_int(ask, "Inserire il numero corrispondente all'opzione desisderata --> ")
        if choice in (1, 2, 3, 9):
            return choice


def end_of_game(ask: Ask | None = None, write: Write | None = None) -> int:
    """Ask whether to go back to the menu (0) or quit (9)."""
    ask, _ = _streams(ask, write)
    while True:
        choice = _read_int(ask, "\n\nPer tornare al menù premere 0, per uscire premere 9 --> ")
        if choice in (0, 9):
            return choice


def clear_screen(write: Write | None = None) -> None:
    """Push the previous output off the screen."""
    _, write = _streams(None, write)
    write("\n" * CLEAR_LINES)