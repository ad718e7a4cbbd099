"""
Tooltip content and placement models.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .geometry import Rect


class Side(str, Enum):
    """Side of the target a tooltip is placed on."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def opposite(self) -> "Side":
        return _OPPOSITE[self]

    @property
    def arrow(self) -> "ArrowDirection":
        """Arrow pointing from a tooltip on this side back to the target."""
        return _ARROW[self]


class ArrowDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_OPPOSITE = {
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
}

_ARROW = {
    Side.RIGHT: ArrowDirection.LEFT,
    Side.LEFT: ArrowDirection.RIGHT,
    Side.BOTTOM: ArrowDirection.UP,
    Side.TOP: ArrowDirection.DOWN,
}

_GLYPHS = {
    ArrowDirection.LEFT: "◂",
    ArrowDirection.RIGHT: "▸",
    ArrowDirection.UP: "▴",
    ArrowDirection.DOWN: "▾",
}


class PositionResult(BaseModel):
    """
    Where to draw a tooltip and which way its arrow points.
    """

    rect: Rect = Field(description="Outer tooltip rectangle including border/padding")
    side: Side = Field(description="Side of the target the tooltip ended up on")
    arrow_direction: ArrowDirection = Field(
        description="Direction from the tooltip back toward the target"
    )
    was_flipped: bool = Field(
        default=False, description="True when the preferred side did not fit"
    )


class TooltipStyle(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class TooltipContent(BaseModel):
    """
    Text shown in a tooltip. Body may span several lines.
    """

    body: str = Field(description="Main text, newline separated")
    title: Optional[str] = Field(default=None, description="Optional heading line")
    style: TooltipStyle = Field(default=TooltipStyle.INFO)

    def body_lines(self) -> List[str]:
        return self.body.splitlines()

    def line_count(self) -> int:
        title_lines = 1 if self.title is not None else 0
        return title_lines + max(len(self.body_lines()), 1)

    def max_line_width(self) -> int:
        """Widest line in characters, title included."""
        title_width = len(self.title) if self.title is not None else 0
        body_width = max((len(line) for line in self.body_lines()), default=0)
        return max(title_width, body_width)
