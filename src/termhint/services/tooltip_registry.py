"""
Tooltip content store keyed by target id.

Content outlives frames: it may be registered before the matching target
exists and survives OverlayContext.begin_frame().
"""

from typing import Dict, List, Optional

from ..schemas.geometry import Rect
from ..schemas.tooltip import PositionResult, TooltipContent
from .target_registry import TargetRegistry
from .tooltip_positioner import TooltipPositioner


class TooltipRegistry:
    """Maps target ids to tooltip content."""

    def __init__(self):
        self._tooltips: Dict[int, TooltipContent] = {}

    def register(self, target_id: int, content: TooltipContent) -> None:
        """Register content for a target, replacing any existing content."""
        self._tooltips[target_id] = content

    def get(self, target_id: int) -> Optional[TooltipContent]:
        return self._tooltips.get(target_id)

    def remove(self, target_id: int) -> bool:
        return self._tooltips.pop(target_id, None) is not None

    def contains(self, target_id: int) -> bool:
        return target_id in self._tooltips

    def clear(self) -> None:
        self._tooltips.clear()

    def __len__(self) -> int:
        return len(self._tooltips)

    def is_empty(self) -> bool:
        return not self._tooltips

    def target_ids(self) -> List[int]:
        return list(self._tooltips)


def place_tooltip(
    positioner: TooltipPositioner,
    tooltips: TooltipRegistry,
    targets: TargetRegistry,
    target_id: int,
    screen_rect: Rect,
) -> Optional[PositionResult]:
    """
    Position the tooltip registered for a target in the current frame.

    Returns:
        None when the target is not on screen this frame or has no tooltip.
    """
    target = targets.by_id(target_id)
    content = tooltips.get(target_id)
    if target is None or content is None:
        return None
    return positioner.calculate(
        target.rect,
        content.max_line_width(),
        content.line_count(),
        screen_rect,
    )
