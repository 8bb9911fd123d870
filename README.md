# sprintrun

A small side-scrolling runner game built on pygame. A sprite character walks
left and right and jumps. It falls more slowly while the jump key is held, and
it earns a point for every frame in which it steps to the right. The character's
score, lives and level are drawn in the top left corner of the window. The
current score is written to a file on every frame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

The game needs these assets in one directory:

- `map.png`: the background, drawn at (0, -510)
- `image/sprite0.png` … `image/sprite16.png`: the character frames
- `GenBasB.ttf`: the font for the status text, at size 30

Start the game with:

```
sprintrun
```

The window is 640×480. The command accepts these options:

- `--assets DIR`: the directory that holds the assets. The default is the current directory.
- `--score-file PATH`: the file the score is written to on every frame. The default is `Score.txt`. The file holds the score with a space on each side, followed by a newline and a space.

### Controls

| Key          | Action                                              |
|--------------|-----------------------------------------------------|
| Right arrow  | walk right while x < 400, one point per frame       |
| Left arrow   | walk left while x > 50 (takes precedence over Right) |
| Up arrow     | jump when on the ground; held in the air, slows the fall |
| Z            | held in the air, slows the fall                     |
| J            | alternative animation (frames 11–14)                |
| W            | selects pose frame 17                               |
| A            | reset acceleration to zero                          |
| F            | sets the character's `special` flag                 |
| Escape       | quit (closing the window also quits)                |

The default sprite set has only frames 0–16. While W is the active pose, the
character's sprite is therefore not drawn, although its status text still is.

## Using the pieces

`sprintrun.character` holds the game logic, and it needs no display:

```python
from sprintrun.character import Character

hero = Character()
hero.jump(6)
hero.update(jump_held=True)
print(hero.status_lines())
# [('SCORE:0', (5, 5)), ('VIE:3', (5, 25)), ('LEVEL:1', (5, 50))]
```

- `Character` is a dataclass. It holds the position, the velocity, the `state`
  (`State.GROUND` or `State.AIR`), the requested `movement` (`Movement.NONE`,
  `LEFT` or `RIGHT`), the animation `direction` and `frame`, and the score,
  lives and level.
- `jump(impulse)` starts a jump.
- `move(dt)` moves the character horizontally for `dt` milliseconds and returns
  the step length.
- `animate()` advances the sprite frame for the current direction.
- `update(jump_held)` applies gravity, lands the character at y = 380 and
  refreshes `position`.
- `status_lines()` returns the texts drawn in the corner and their positions.
- `Character.second_player()` creates a character that uses 20 sprites instead
  of 17.

`sprintrun.game` handles input for each frame:

- `apply_input(character, pressed, impulse)` takes a set of key names:
  `"right"`, `"left"`, `"up"`, `"j"`, `"w"`, `"a"`, `"f"` and `"z"`.
- `step(character, pressed, dt, impulse)` runs input, animation, movement and
  physics for one frame, and returns the step length.
- `main(argv)` runs the window loop.

`sprintrun.render` holds the drawing helpers:

- `draw_character`, `draw_hud`, `draw_string` and `draw_image`
- `sprite_paths` and `load_sprites`
- `save_score(score, path)`

## What it does not do

The game has a single player, with no enemies, obstacles or collisions. Lives
and level never change during play. The `f` key sets a flag that nothing else
uses.

`draw_hud` draws a life icon, a star counter and an optional score line. The
game loop does not call it, so it never appears on screen. `Character.second_player`
exists, but the game offers no two-player mode.