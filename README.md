# termarcade

A small space shooter for the terminal, together with a handful of
curses games and toys: Conway's Life, magic squares, N-queens, the
towers of Hanoi, a sliding-tile puzzle, a typing tutor, stacked
windows, a choice menu, a movable box and a text pager.

Everything runs in a plain terminal through the standard `curses`
module, so a POSIX system is needed. There are no third-party
dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The shooter

```
termarcade
```

The play field is a window half as wide as the terminal. Your ship
starts at column 20, row 20 and drifts from side to side; two enemy
ships patrol higher up. Ships turn round at the edges of the field,
and a ship that touches another object turns it round. Bullets fly
straight up and vanish when they leave the field.

| Key         | Action                      |
|-------------|-----------------------------|
| Left arrow  | steer left                  |
| Right arrow | steer right                 |
| Space       | fire a bullet upwards       |
| `q`         | quit                        |

### What the shooter does not do

There is no score, no lives and no game over: bullets do not destroy
ships, enemies do not fire back, and the game runs until you press
`q`. `termarcade.game.draw_title` draws a line-art title, but the
game does not show it on its own.

## The other programs

| Command                         | What it does                                                          |
|---------------------------------|-----------------------------------------------------------------------|
| `termarcade-life`               | Life on a wrap-around board; a step every 0.3 s or on a key, F1 exits |
| `termarcade-magic N`            | draws the magic square of odd order `N` in a grid                     |
| `termarcade-queens N`           | shows every `N`-queens solution, one per key, then prints the total   |
| `termarcade-hanoi [DISCS]`      | animates the solution, asking for the disc count if not given         |
| `termarcade-shuffle N`          | an `N`×`N` sliding-tile puzzle played with the arrow keys; F1 exits   |
| `termarcade-typing`             | a typing tutor with mistake count, time taken and words a minute      |
| `termarcade-panels [MODE]`      | three overlapping windows; MODE is `simple`, `browse`, `hide` or `resize` (default) |
| `termarcade-menu [MODE]`        | a five-entry menu; MODE is `keys` (default) or `mouse`                |
| `termarcade-boxes [MODE]`       | a box moved with the arrow keys; MODE is `custom` (default) or `window`; F1 exits |
| `termarcade-pager FILE`         | pages through a text file, showing `/* ... */` comments in bold       |

Panel keys: in `browse` and `resize` mode Tab raises the next window;
in `hide` mode `a`, `b` and `c` hide or show the three windows; in
`resize` mode `m` starts a move, `r` starts a resize, the arrow keys
adjust and Enter applies the change. F1 exits every mode except
`simple`, which closes on any key.

The magic square only exists for odd orders; an even `N` is refused
with a message. The sliding puzzle starts with the blank in the
top-left corner and the other tiles shuffled, and is won when they
read 1, 2, 3, … row by row with the blank last.

## Using the pieces from Python

The game logic is kept apart from the drawing code, so it can be used
without a terminal:

```python
from termarcade.magic import magic_square
from termarcade.queens import solutions
from termarcade.hanoi import Pegs, solve_moves
from termarcade.life import Life, seed_inverted_u
from termarcade.typing import make_test_string, count_mistakes, typing_stats

square = magic_square(3)
first = next(solutions(8))

pegs = Pegs(3)
for src, dst in solve_moves(3, 0, 1, 2):
    pegs.move(src, dst)
print(pegs.rows())

life = Life(80, 24)
seed_inverted_u(life)
life.step()
print(life.live_cells())

print(typing_stats(60, count_mistakes("abc", "abd")).message)
```

The shooter's world is an `ObjectList` of `GameObject`s
(`termarcade.objects`), each of an `ObjectType` drawn with a `Sprite`
(`termarcade.graphics`). `termarcade.game.new_world(width, height)`
builds the starting field, `handle_key` applies a key press to it and
`ObjectList.update_positions` advances it by one step.

Other pieces: `termarcade.shuffle.Puzzle` and `Direction`,
`termarcade.panels.PanelDeck`, `Frame` and `initial_frames`,
`termarcade.menu.ChoiceMenu`, `termarcade.boxes.Box`,
`termarcade.pager.segments`, and `termarcade.board.grid_cells`,
`draw_grid` and `center_x`.