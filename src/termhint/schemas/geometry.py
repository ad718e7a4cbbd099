"""
Rectangle geometry shared by targets, hints and tooltips.
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Rect(BaseModel):
    """
    Screen rectangle in terminal cells.

    Containment is half-open: the left and top edges are inside, the right
    and bottom edges (x + width, y + height) are outside.
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(default=0, ge=0, description="Left column")
    y: int = Field(default=0, ge=0, description="Top row")
    width: int = Field(default=0, ge=0, description="Width in cells")
    height: int = Field(default=0, ge=0, description="Height in cells")

    @classmethod
    def of(cls, x: int, y: int, width: int, height: int) -> "Rect":
        """Positional shorthand for Rect(x=..., y=..., width=..., height=...)."""
        return cls(x=x, y=y, width=width, height=height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains_point(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def intersects(self, other: "Rect") -> bool:
        """True when the two rectangles share at least one cell."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def distance_to(self, x: int, y: int) -> float:
        """
        Euclidean distance from a point to the nearest cell of this rectangle.

        Zero when the point is inside. A zero-size rectangle behaves like the
        point (x, y) it is anchored at.
        """
        if self.contains_point(x, y):
            return 0.0
        far_x = max(self.x, self.right - 1)
        far_y = max(self.y, self.bottom - 1)
        dx = max(self.x - x, 0, x - far_x)
        dy = max(self.y - y, 0, y - far_y)
        return math.hypot(dx, dy)
