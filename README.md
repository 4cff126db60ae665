# caro

Caro is a terminal board game: two sides take turns placing X (mark 1) and
O (mark 2) on a square board, and the first to get enough marks in a row —
horizontally, vertically or diagonally — wins.

## Running

```
pip install .
caro
caro --resources path/to/layouts
caro --about-url https://example.com/caro
```

Options:

- `--resources DIR` — the directory holding the layout files and the save
  slots (default: the current directory).
- `--about-url URL` — the page the first item of the about screen opens in
  a web browser. Without it, that item does nothing.

The terminal is drawn with ANSI escape sequences. `caro` exits with status
0 when the main menu's Exit item is chosen, and 1 if input ends or the game
is interrupted.

## Layout files

Every screen is built from plain-text files in the resources directory:

- A page is described by files such as `Menu_None.txt` (the static part)
  and `Menu_Has.txt` (the selectable items). Each lists component files,
  one per line, relative to its own directory.
- A component file starts with three integers — a colour attribute, then
  the x and y of its top-left corner — followed by the non-empty lines of
  its text.
- The board uses `BoardSize_<size>.txt` (anchor x and y) and the shapes in
  `MarkSlot.txt`, `MarkX.txt` and `MarkO.txt`.

Missing files are not an error: they give empty components and a board
anchored at the origin.

## Game modes

- **2 Players** — two people share the keyboard.
- **Easy Bot** — the second side marks a random empty cell.
- **Hard Bot** — the second side searches the whole game tree with minimax
  and alpha–beta pruning, so it answers quickly only on small boards.

## Controls

| Action          | Player 1 (X) | Player 2 (O) |
|-----------------|--------------|--------------|
| Move cursor     | W A S D      | Arrow keys   |
| Place a mark    | E            | Enter        |
| Save the game   | Tab          | Tab          |
| Leave the round | Esc          | Esc          |

In menus, move with W/S or the up/down arrows and confirm with E or Enter.
After each round a confirmation page asks whether to play again.

## Settings

The settings page chooses the board size (3, 5 or 7) and how many marks in
a row are needed to win (3, 5 or 7, never more than the board size). A fresh
game uses a 3×3 board with three in a row. Settings last while the program
runs; they are not stored.

## Saving and loading

A running game can be saved to one of four slots in the resources
directory. Each slot is stored as `Save_<n>.txt` (mode, whose turn it is,
board size, marks needed to win, then the board rows) together with a short
description in `Save_Show_<n>.txt`. The load page shows the description of
every used slot, greys out empty ones, and resumes the chosen game.

## Using the pieces

The game logic works without a terminal:

```python
from caro.board import Board
from caro.geometry import PairIndex
from caro.load import parse_save
from caro.players import HardBot
from caro.save import format_save

board = Board(3, 3)
for col in range(3):
    board.place_at(1, PairIndex(0, col))
assert board.winner == 1 and board.is_end_game()

board.retrieve(PairIndex(0, 2))          # undo; the winner is cleared
text = format_save(0, 1, board.time_to_win, board.marks)
assert parse_save(text).marks == board.marks

score, move = HardBot(2, board).alpha_beta(2, 0, -10, 10)
```

- `caro.board.Board` keeps the marks, the cursor and the winner
  (`place`, `place_at`, `retrieve`, `available_slots`, `is_full`,
  `is_end_game`).
- `caro.players` holds `RealPlayer`, `EasyBot` and `HardBot`; `get_move`
  returns a `MoveResult` (`MOVED`, `EXIT` or `SAVE`).
- `caro.save` (`format_save`, `format_description`, `write_save`) and
  `caro.load` (`parse_save`, `read_save`, `SavedGame`) handle the save
  format.
- `caro.screen.Screen` draws to any text stream, and `caro.settings.GameSettings`
  holds the size and line-length choices.

## What it does not do

The package ships no layout files. Started without them, every screen is
empty and only the keyboard still works, so a playable game needs a
resources directory prepared as described above. There is no network play
and no way to change the key bindings.