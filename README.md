# xtetris

A turn-based Tetris for the terminal. You do not steer a falling piece. On each
turn you pick one of seven tetrominoes, a rotation and a column. The piece then
drops straight down and lands on the stack. Full rows are cleared and scored.

## Installing

```
pip install .
```

## Playing

```
xtetris
```

The menu offers three modes:

1. **Single Player**: one board with 15 rows and 10 columns, and 20 pieces of
   each shape.
2. **Multiplayer**: two boards and 40 pieces of each shape from a shared
   supply. The players take turns.
3. **Player vs CPU**: the same as Multiplayer, but the computer plays the second
   board. It tries every piece, rotation and column, and looks two moves ahead.

Enter `9` at the menu to quit. After a game, enter `0` to go back to the menu or
`9` to quit.

On each turn you are asked for:

- the piece number, from `0` to `6` (line, square, left L, right L, left S,
  right S, T). A piece with none left is refused;
- the rotation: `0`, `90`, `180` or `270`;
- the column where the piece's leftmost cell should land. A column that would
  push the piece off the right edge is refused.

If an answer is not valid, the question is asked again.

## Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 1      |
| 2                    | 3      |
| 3                    | 6      |
| 4                    | 12     |

In the two-board modes, clearing three rows at once flips the bottom three rows
of the opponent's board. Filled cells become empty and empty cells become grey
garbage. Clearing four rows flips the bottom four. A player loses when a piece
sticks out of the top of the board. When every piece has been used, the game
ends. In the two-board modes the higher score then wins.

## Using it as a library

The game logic works without the terminal:

```python
from xtetris.components import Board, make_blocks
from xtetris.npc import choose_block
from xtetris.operations import insert_block_score

board = Board()
blocks = make_blocks(20)
index, rotation, column = choose_block(blocks, board)

block = blocks[index]
block.rotate(rotation)
block.pos_x = column
points = insert_block_score(board, block)  # -1 if the piece overflowed
```

- `xtetris.components`: `Block`, `Board` and `make_blocks`.
- `xtetris.operations`: dropping pieces (`insert_block`, `insert_block_multi`,
  `insert_block_score`), line clearing (`clear_lines`) and penalties
  (`apply_penalty`).
- `xtetris.npc`: the computer player (`choose_block`) and the move checks that
  raise `PlacementError`.
- `xtetris.render`: text for boards, the piece list, results and the menus.

The play loops in `xtetris.game` (`single_player`, `multi_player`, `player_cpu`)
and the prompts in `xtetris.input_control` and `xtetris.render` take `ask` and
`write` callables. They default to `input` and `sys.stdout.write`, so you can
script or test a game without a real terminal.