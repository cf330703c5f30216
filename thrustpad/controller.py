"""Position and simple vertical physics of a single on-screen object."""

from __future__ import annotations

from thrustpad.signals import Signal

FRAME_INTERVAL_MS = 16


class Controller:
    """Tracks an object's x/y position with sideways steps, thrust and gravity."""

    SCREEN_WIDTH = 1315
    SCREEN_HEIGHT = 685
    OBJECT_SIZE = 50

    X_SPEED = 10.0
    MAX_THRUST = -15.0
    GRAVITY = 0.5

    def __init__(self) -> None:
        self.x_changed = Signal()
        self.y_changed = Signal()

        self.min_x = 0.0
        self.max_x = float(self.SCREEN_WIDTH)
        self.bottom_y = float(self.SCREEN_HEIGHT - self.OBJECT_SIZE)

        self._x = float(self.SCREEN_WIDTH // 2 - self.OBJECT_SIZE)
        self._y = self.bottom_y
        self.y_speed = 0.0

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        if self._x != value:
            self._x = value
            self.x_changed.emit()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        if self._y != value:
            self._y = value
            self.y_changed.emit()

    def move_left(self) -> None:
        """Step left by the horizontal speed, stopping at the left edge."""
        self.x = self._x - self.X_SPEED
        if self._x < self.min_x:
            self.x = self.min_x

    def move_right(self) -> None:
        """Step right by the horizontal speed, stopping at the right edge."""
        self.x = self._x + self.X_SPEED
        if self._x > self.max_x:
            self.x = self.max_x

    def apply_thrust(self) -> None:
        """Give an instant upward speed, unless the object is already high enough."""
        self.y_speed = self.MAX_THRUST
        if self._y < self.bottom_y / 1.5:
            self.y_speed = 0.0

    def update_state(self) -> None:
        """Advance one frame: move by the vertical speed, apply gravity, keep above ground."""
        self._y += self.y_speed
        self.y_speed += self.GRAVITY
        if self._y > self.bottom_y:
            self._y = self.bottom_y
        self.y_changed.emit()

    def run(self, frames: int) -> None:
        """Advance the given number of frames."""
        if frames < 0:
            raise ValueError("frames must not be negative")
        for _ in range(frames):
            self.update_state()