"""A clipping viewport rectangle in screen space."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Viewport:
    """An axis-aligned screen rectangle, reset at the start of each frame."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    visible: bool = False
    clipping: bool = False

    def on_new_frame(self) -> None:
        """Reset every field to its default."""
        self.pos_x = self.pos_y = self.width = self.height = 0.0
        self.visible = False
        self.clipping = False

    def set_viewport(self, x: float, y: float, width: float, height: float) -> None:
        """Set the rectangle; negative values are clamped to zero."""
        self.pos_x = max(x, 0.0)
        self.pos_y = max(y, 0.0)
        self.width = max(width, 0.0)
        self.height = max(height, 0.0)

    def show_viewport(self, show: bool) -> None:
        """Choose whether the rectangle's outline is drawn."""
        self.visible = show

    def min_x(self) -> float:
        return self.pos_x

    def max_x(self) -> float:
        return self.pos_x + self.width

    def min_y(self) -> float:
        return self.pos_y

    def max_y(self) -> float:
        return self.pos_y + self.height

    def screen_rect(self) -> tuple[float, float, float, float] | None:
        """The outline to draw as (left, top, right, bottom), or None if hidden."""
        if not self.visible:
            return None
        return (self.min_x(), self.min_y(), self.max_x(), self.max_y())