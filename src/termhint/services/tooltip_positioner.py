"""
Smart tooltip positioning with edge detection.

A positioner works within one placement family chosen at construction:
horizontal (Right/Left) or vertical (Bottom/Top). It tries the preferred
side first and flips to the opposite side when the preferred rectangle would
leave the screen along the family axis. On the other axis the tooltip is
centered on the target. The final rectangle is clamped into the screen and
is never empty.
"""

import logging
from typing import Tuple

from ..config.overlay_config import TooltipConfig
from ..schemas.geometry import Rect
from ..schemas.tooltip import PositionResult, Side

logger = logging.getLogger(__name__)


class TooltipPositioner:
    """
    Computes where a tooltip goes relative to its target.

    Family selection:
    - prefer_right=True: horizontal, Right first
    - prefer_right=False, prefer_bottom=True: vertical, Bottom first
    - both False: horizontal, Left first
    """

    def __init__(
        self,
        offset_x: int = 1,
        offset_y: int = 0,
        padding: int = 1,
        show_border: bool = True,
        prefer_right: bool = True,
        prefer_bottom: bool = True,
    ):
        if padding < 0:
            raise ValueError(f"padding must be >= 0, got {padding}")
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.padding = padding
        self.show_border = show_border
        self.prefer_right = prefer_right
        self.prefer_bottom = prefer_bottom

    @classmethod
    def from_config(cls, config: TooltipConfig) -> "TooltipPositioner":
        return cls(
            offset_x=config.offset_x,
            offset_y=config.offset_y,
            padding=config.padding,
            show_border=config.show_border,
            prefer_right=config.prefer_right,
            prefer_bottom=config.prefer_bottom,
        )

    @property
    def preferred_side(self) -> Side:
        if self.prefer_right:
            return Side.RIGHT
        if self.prefer_bottom:
            return Side.BOTTOM
        return Side.LEFT

    def outer_size(self, content_width: int, content_height: int) -> Tuple[int, int]:
        """Tooltip size including padding and border, at least 1x1."""
        chrome = 2 * self.padding + (2 if self.show_border else 0)
        return (
            max(content_width + chrome, 1),
            max(content_height + chrome, 1),
        )

    def calculate(
        self,
        target_rect: Rect,
        content_width: int,
        content_height: int,
        screen_rect: Rect,
    ) -> PositionResult:
        """
        Place a tooltip next to a target.

        Args:
            target_rect: The rectangle of the target element
            content_width: Width of the tooltip content (excluding border/padding)
            content_height: Height of the tooltip content (excluding border/padding)
            screen_rect: The available screen area

        Returns:
            PositionResult with the clamped rectangle, side used and arrow.
        """
        width, height = self.outer_size(max(content_width, 0), max(content_height, 0))

        side = self.preferred_side
        x, y = self._origin(side, target_rect, width, height)
        was_flipped = False
        if not self._fits(side, x, y, width, height, screen_rect):
            side = side.opposite
            x, y = self._origin(side, target_rect, width, height)
            was_flipped = True
            logger.debug(
                "Tooltip for target at (%d, %d) flipped to %s",
                target_rect.x,
                target_rect.y,
                side.value,
            )

        return PositionResult(
            rect=self._clamp(x, y, width, height, screen_rect),
            side=side,
            arrow_direction=side.arrow,
            was_flipped=was_flipped,
        )

    def _origin(self, side: Side, target: Rect, width: int, height: int) -> Tuple[int, int]:
        center_x, center_y = target.center
        if side == Side.RIGHT:
            return (target.right + self.offset_x, center_y - height // 2)
        if side == Side.LEFT:
            return (target.x - self.offset_x - width, center_y - height // 2)
        if side == Side.BOTTOM:
            return (center_x - width // 2, target.bottom + self.offset_y)
        return (center_x - width // 2, target.y - self.offset_y - height)

    @staticmethod
    def _fits(side: Side, x: int, y: int, width: int, height: int, screen: Rect) -> bool:
        if side in (Side.LEFT, Side.RIGHT):
            return screen.x <= x and x + width <= screen.right
        return screen.y <= y and y + height <= screen.bottom

    @staticmethod
    def _clamp(x: int, y: int, width: int, height: int, screen: Rect) -> Rect:
        width = max(min(width, screen.width), 1)
        height = max(min(height, screen.height), 1)
        x = min(max(x, screen.x), max(screen.right - width, screen.x))
        y = min(max(y, screen.y), max(screen.bottom - height, screen.y))
        return Rect(x=x, y=y, width=width, height=height)
