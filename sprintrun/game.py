"""Main game loop: keyboard handling and per-frame character updates."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

from sprintrun.character import Character, Movement, State

JUMP_IMPULSE = 6
SCREEN_SIZE = (640, 480)
BACKGROUND_POSITION = (0, -510)
FONT_FILE = "GenBasB.ttf"
FONT_SIZE = 30

MOVEMENT_KEYS = frozenset({"right", "left", "j", "up", "w"})
JUMP_HOLD_KEYS = frozenset({"up", "z"})


def apply_input(
    character: Character, pressed: Iterable[str], impulse: float = JUMP_IMPULSE
) -> None:
    """Update the character's intent from the names of the keys held down.

    Key names are ``right``, ``left``, ``up``, ``j``, ``w``, ``a``, ``f``
    and ``z``; later bindings take precedence over earlier ones.
    """
    keys = frozenset(pressed)

    if not keys & MOVEMENT_KEYS:
        character.direction = -1
        character.movement = Movement.NONE
    if "right" in keys:
        character.movement = Movement.RIGHT
        character.direction = 0
    if "j" in keys:
        character.direction = 2
    if "w" in keys:
        character.direction = 4
    if "a" in keys:
        character.acceleration = 0.0
    if "f" in keys:
        character.special = 1
    if "left" in keys:
        character.movement = Movement.LEFT
        character.direction = 1
    if "up" in keys and character.state is State.GROUND:
        character.jump(impulse)
        character.direction = 3


def step(
    character: Character,
    pressed: Iterable[str],
    dt: float,
    impulse: float = JUMP_IMPULSE,
) -> float:
    """Run one frame of input, animation, movement and physics.

    Returns the horizontal step length computed for the frame.
    """
    keys = frozenset(pressed)
    apply_input(character, keys, impulse)
    character.animate()
    distance = character.move(dt)
    character.update(jump_held=bool(keys & JUMP_HOLD_KEYS))
    return distance


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sprintrun", description="Side-scrolling runner.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding map.png, the font and the image/ sprites",
    )
    parser.add_argument(
        "--score-file", default="Score.txt", help="file the current score is written to"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    import pygame

    from sprintrun.render import draw_character, load_sprites, save_score

    args = _parse_args(argv)
    root = Path(args.assets)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE, pygame.DOUBLEBUF)
        background = pygame.image.load(str(root / "map.png"))
        font = pygame.font.Font(str(root / FONT_FILE), FONT_SIZE)
        character = Character()
        sprites = load_sprites(root / "image", character.sprite_count)

        bindings = {
            "right": pygame.K_RIGHT,
            "left": pygame.K_LEFT,
            "up": pygame.K_UP,
            "j": pygame.K_j,
            "w": pygame.K_w,
            "a": pygame.K_a,
            "f": pygame.K_f,
            "z": pygame.K_z,
        }

        dt = 1
        running = True
        while running:
            start = pygame.time.get_ticks()
            screen.blit(background, BACKGROUND_POSITION)
            draw_character(character, screen, sprites, font)
            save_score(character.score, args.score_file)
            pygame.display.flip()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            state = pygame.key.get_pressed()
            pressed = {name for name, key in bindings.items() if state[key]}
            step(character, pressed, dt)

            dt = pygame.time.get_ticks() - start
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())