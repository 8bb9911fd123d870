"""Drawing of the character, its status texts and the HUD, plus score saving."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from sprintrun.character import Character

STATUS_COLOR = (50, 0, 150)
TEXT_COLOR = (0, 0, 0)

LIFE_ICON_POSITION = (480, 410)
LIFE_TEXT_POSITION = (560, 420)
STAR_ICON_POSITION = (60, 60)
STAR_TEXT_POSITION = (100, 57)
SCORE_TEXT_POSITION = (300, 70)


def sprite_paths(directory: str | os.PathLike = "image", count: int = 17) -> list[Path]:
    """Return the paths of the numbered sprite images in ``directory``."""
    base = Path(directory)
    return [base / f"sprite{i}.png" for i in range(count)]


def load_sprites(directory: str | os.PathLike = "image", count: int = 17) -> list[pygame.Surface]:
    """Load the numbered sprite images from ``directory``."""
    return [pygame.image.load(str(path)) for path in sprite_paths(directory, count)]


def draw_image(image: pygame.Surface, screen: pygame.Surface, x: int, y: int) -> pygame.Rect:
    """Blit the whole image onto the screen with its top-left corner at (x, y)."""
    return screen.blit(image, (x, y))


def draw_string(text: str, screen: pygame.Surface, x: int, y: int, font) -> pygame.Rect | None:
    """Render ``text`` in black and blit it at (x, y); report and skip on failure."""
    try:
        surface = font.render(text, True, TEXT_COLOR)
    except pygame.error as exc:
        print(f"Couldn't create String {text}: {exc}")
        return None
    return screen.blit(surface, (x, y))


def draw_character(
    character: Character,
    screen: pygame.Surface,
    sprites: list[pygame.Surface],
    font,
) -> None:
    """Draw the character's current sprite and its score, lives and level."""
    if 0 <= character.frame < len(sprites):
        screen.blit(sprites[character.frame], character.position)
    for text, position in character.status_lines():
        screen.blit(font.render(text, True, STATUS_COLOR), position)


def draw_hud(
    character: Character,
    screen: pygame.Surface,
    font,
    life_icon: pygame.Surface,
    star_icon: pygame.Surface,
    show_score: bool = False,
) -> None:
    """Draw the life and star counters, and the score when ``show_score`` is set."""
    draw_image(life_icon, screen, *LIFE_ICON_POSITION)
    draw_string(str(character.hud_lives), screen, *LIFE_TEXT_POSITION, font)

    draw_image(star_icon, screen, *STAR_ICON_POSITION)
    draw_string(str(character.stars), screen, *STAR_TEXT_POSITION, font)

    if show_score:
        draw_string(f"Score: {character.score}", screen, *SCORE_TEXT_POSITION, font)


def save_score(score: int, path: str | os.PathLike = "Score.txt") -> None:
    """Overwrite the score file with the given score."""
    Path(path).write_text(f" {score} \n ")