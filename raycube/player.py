"""Player state, keyboard-driven movement and frame timing."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field

MOVE_SPEED = 5.0
ROTATION_SPEED = 3.0


@dataclass
class Vector:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vector) -> Vector:
        """Return the sum of this vector and ``other``."""
        return Vector(self.x + other.x, self.y + other.y)

    def scale(self, factor: float) -> Vector:
        """Return this vector multiplied by ``factor``."""
        return Vector(self.x * factor, self.y * factor)


@dataclass
class Keys:
    """Which movement and rotation keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False


@dataclass
class Player:
    """Position and viewing angle of the player, with its speeds per second."""

    position: Vector = field(default_factory=Vector)
    angle: float = 0.0
    direction: Vector = field(default_factory=lambda: Vector(1.0, 0.0))
    move_speed: float = MOVE_SPEED
    rotation_speed: float = ROTATION_SPEED
    last_time: int = 0

    def rotate(self, keys: Keys, rotation_speed: float) -> None:
        """Turn by ``rotation_speed`` radians for each arrow key held."""
        if keys.left:
            self.angle -= rotation_speed
        if keys.right:
            self.angle += rotation_speed

    def move(self, keys: Keys, move_speed: float) -> None:
        """Walk and strafe by ``move_speed`` along the viewing direction."""
        self.direction = Vector(math.cos(self.angle), math.sin(self.angle))
        forward = self.direction.scale(move_speed)
        if keys.w:
            self.position = self.position.add(forward)
        if keys.s:
            self.position = self.position.add(forward.scale(-1.0))
        if keys.d:
            self.position = self.position.add(
                Vector(-self.direction.y, self.direction.x).scale(move_speed)
            )
        if keys.a:
            self.position = self.position.add(
                Vector(self.direction.y, -self.direction.x).scale(move_speed)
            )

    def update(self, keys: Keys, now_ms: int) -> None:
        """Advance the player to time ``now_ms``; the first call only starts the clock."""
        if self.last_time == 0:
            self.last_time = now_ms
            return
        delta = (now_ms - self.last_time) / 1000.0
        self.last_time = now_ms
        self.rotate(keys, self.rotation_speed * delta)
        self.move(keys, self.move_speed * delta)


@dataclass
class FpsCounter:
    """Counts frames and reports the count once at least a second has passed."""

    frame_count: int = 0
    current_time: int = 0
    last_sec_time: int = 0

    def tick(self, now_ms: int) -> int | None:
        """Record one frame; return the frames counted when a second is complete."""
        self.frame_count += 1
        if self.current_time == 0:
            self.current_time = now_ms
            self.last_sec_time = now_ms
        else:
            self.current_time = now_ms
        if self.current_time - self.last_sec_time >= 1000:
            fps = self.frame_count
            self.frame_count = 0
            self.last_sec_time = self.current_time
            return fps
        return None


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000