"""Player character state: movement, jumping, gravity and sprite animation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GROUND_LEVEL = 380
RIGHT_LIMIT = 400
LEFT_LIMIT = 50

GRAVITY = 0.5
HELD_JUMP_FACTOR = 3.0

STATUS_POSITIONS = ((5, 5), (5, 25), (5, 50))


class State(IntEnum):
    """Whether the character stands on the ground or is in the air."""

    GROUND = 0
    AIR = 1


class Movement(IntEnum):
    """Horizontal movement requested for the character."""

    NONE = -1
    LEFT = 0
    RIGHT = 1


@dataclass
class Character:
    """A playable character.

    ``direction`` selects the animation: -1 idle, 0 running right,
    1 running left, 2 attacking, 3 jumping, 4 the pose bound to W.
    """

    x: float = 50.0
    y: float = 350.0
    vx: float = 0.0
    vy: float = 0.0
    dx: float = 0.0
    speed: float = 0.5
    acceleration: float = 0.0
    state: State = State.GROUND
    movement: Movement = Movement.NONE
    direction: int = -1
    frame: int = 1
    special: int = 0
    score: int = 0
    lives: int = 3
    level: int = 1
    hud_lives: int = 3
    stars: int = 0
    sprite_count: int = 17
    position: tuple[int, int] = (0, 0)

    @classmethod
    def second_player(cls) -> "Character":
        """Create the second player, which uses the full set of 20 sprites."""
        return cls(sprite_count=20)

    def jump(self, impulse: float) -> None:
        """Start a jump with the given upward impulse."""
        self.vy = -impulse
        self.state = State.AIR

    def move(self, dt: float) -> float:
        """Move horizontally for ``dt`` milliseconds and return the step length."""
        self.dx = 0.5 * self.acceleration * dt * dt + self.speed * dt
        if self.movement is Movement.RIGHT and self.x < RIGHT_LIMIT:
            self.x += self.dx
            self.score += 1
        elif self.movement is Movement.LEFT and self.x > LEFT_LIMIT:
            self.x -= self.dx
        return self.dx

    def animate(self) -> int:
        """Advance to the next sprite frame for the current direction."""
        frame = self.frame
        if self.direction == 0:
            frame = 1 if frame >= 5 else frame + 1
        elif self.direction == 1:
            frame = 6 if frame == 10 or frame < 6 or frame > 11 else frame + 1
        elif self.direction == 2:
            frame = 11 if frame == 13 or frame < 11 or frame > 14 else frame + 1
        elif self.direction == 3:
            frame = 16
        elif self.direction == 4:
            frame = 17
        else:
            frame = 14 if frame == 15 or frame < 14 or frame > 16 else frame + 1
        self.frame = frame
        return frame

    def update(self, jump_held: bool) -> None:
        """Apply gravity, land on the ground and refresh the drawing position."""
        gravity = GRAVITY
        if self.state is State.AIR and jump_held:
            gravity /= HELD_JUMP_FACTOR
        self.vy += gravity

        if self.y > GROUND_LEVEL:
            self.y = GROUND_LEVEL
            if self.vy > 0:
                self.vy = 0.0
            self.state = State.GROUND

        self.x += self.vx
        self.y += self.vy
        self.position = (int(self.x), int(self.y))

    def status_lines(self) -> list[tuple[str, tuple[int, int]]]:
        """Return the score, lives and level texts with their screen positions."""
        texts = (f"SCORE:{self.score}", f"VIE:{self.lives}", f"LEVEL:{self.level}")
        return list(zip(texts, STATUS_POSITIONS))