"""Orbiting camera driven by mouse and keyboard, and a frame-rate counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from halfmesh.geometry import Point3D, Vector3D

WHEEL_STEP = 0.02
ARROW_STEP = 0.01
TURN_ANGLE = 0.01
FPS_INTERVAL_MS = 200


class ArrowKey(Enum):
    """Arrow keys that move or turn the camera."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Camera:
    """A perspective camera looking along ``forward`` from ``eye``."""

    width: int = 600
    height: int = 400
    eye: Point3D = field(default_factory=lambda: Point3D(0.0, 0.0, 2.0))
    up: Vector3D = field(default_factory=lambda: Vector3D(0.0, 1.0, 0.0))
    forward: Vector3D = field(default_factory=lambda: Vector3D(0.0, 0.0, -1.0))
    fovy: float = 45.0
    z_near: float = 0.1
    z_far: float = 6000.0
    button_pressed: bool = False
    mouse: tuple[int, int] = (0, 0)

    @property
    def aspect(self) -> float:
        """Width divided by height of the viewport."""
        return self.width / self.height

    @property
    def target(self) -> Point3D:
        """The point one unit ahead of the eye."""
        return self.eye + self.forward

    def reshape(self, width: int, height: int) -> None:
        """Record a new viewport size."""
        self.width = width
        self.height = height

    def press(self, x: int, y: int, pressed: bool) -> None:
        """Record a mouse button change at window position ``x``, ``y``."""
        self.button_pressed = pressed
        self.mouse = (x, self.height - y)

    def drag(self, x: int, y: int, shift: bool = False) -> bool:
        """Orbit around the origin following a mouse drag; return whether it moved."""
        y = self.height - y
        dx = x - self.mouse[0]
        dy = y - self.mouse[1]
        self.mouse = (x, y)

        if shift or (dx == 0 and dy == 0) or not self.button_pressed:
            return False

        vx = dx / self.width
        vy = dy / self.height
        theta = 4.0 * (abs(vx) + abs(vy))

        right = self.forward.cross(self.up)
        right.normalize()
        direction = -right * vx + -self.up * vy
        axis = direction.cross(self.forward)
        axis.normalize()

        self.forward.rotate(axis, theta)
        self.up.rotate(axis, theta)
        self.eye.rotate(axis, theta)
        self.up.normalize()
        self.forward.normalize()
        return True

    def wheel(self, direction: int) -> None:
        """Move towards the view for a positive direction, away otherwise."""
        step = self.forward * WHEEL_STEP
        self.eye += step if direction > 0 else -step

    def arrow_key(self, key: ArrowKey) -> None:
        """Move forward or back, or turn left or right about ``up``."""
        if key is ArrowKey.UP:
            self.eye += self.forward * ARROW_STEP
        elif key is ArrowKey.DOWN:
            self.eye += -self.forward * ARROW_STEP
        elif key in (ArrowKey.LEFT, ArrowKey.RIGHT):
            angle = TURN_ANGLE if key is ArrowKey.LEFT else -TURN_ANGLE
            self.up.normalize()
            self.forward.rotate(self.up, angle)
            self.forward.normalize()


@dataclass
class FpsCounter:
    """Frames per second, refreshed at most every 200 milliseconds."""

    frame: int = 0
    timebase: int = 0
    fps: float = 0.0

    def tick(self, time_ms: int) -> float:
        """Count one frame at ``time_ms`` and return the current rate."""
        self.frame += 1
        elapsed = time_ms - self.timebase
        if elapsed > FPS_INTERVAL_MS:
            self.fps = self.frame * 1000.0 / elapsed
            self.timebase = time_ms
            self.frame = 0
        return self.fps