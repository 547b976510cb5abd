"""A 2D camera and conversion of the cursor position into world space."""

from __future__ import annotations

from dataclasses import dataclass

_NO_WINDOW_POSITION = "Cannot find window position of cursor!"
_NO_WORLD_POSITION = "Cannot find world position of cursor!"


class CursorError(LookupError):
    """The cursor has no usable position."""


@dataclass
class Camera2D:
    """An orthographic camera centred on ``position``; world y points up."""

    viewport_size: tuple[float, float]
    position: tuple[float, float] = (0.0, 0.0)
    scale: float = 1.0

    def _check_viewport(self) -> tuple[float, float]:
        width, height = self.viewport_size
        if width <= 0 or height <= 0 or self.scale <= 0:
            raise ValueError("camera viewport has no area")
        return width, height

    def viewport_to_world(self, viewport_position: tuple[float, float]) -> tuple[float, float]:
        """Map a window position (origin top-left, y down) to world space."""
        width, height = self._check_viewport()
        vx, vy = viewport_position
        cx, cy = self.position
        return cx + (vx - width / 2) * self.scale, cy - (vy - height / 2) * self.scale

    def world_to_viewport(self, world_position: tuple[float, float]) -> tuple[float, float]:
        """Map a world position back to window coordinates."""
        width, height = self._check_viewport()
        wx, wy = world_position
        cx, cy = self.position
        return (wx - cx) / self.scale + width / 2, (cy - wy) / self.scale + height / 2


def cursor_world_position(
    camera: Camera2D, cursor: tuple[float, float] | None
) -> tuple[float, float]:
    """World position of the cursor; raises CursorError if it is outside the window."""
    if cursor is None:
        raise CursorError(_NO_WINDOW_POSITION)
    width, height = camera.viewport_size
    x, y = cursor
    if not (0 <= x <= width and 0 <= y <= height):
        raise CursorError(_NO_WINDOW_POSITION)
    try:
        return camera.viewport_to_world(cursor)
    except ValueError as exc:
        raise CursorError(_NO_WORLD_POSITION) from exc