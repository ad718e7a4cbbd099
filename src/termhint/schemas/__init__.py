"""
Pydantic schemas for overlay data: geometry, targets, hints, matches, tooltips.
"""

from .geometry import Rect
from .target import Target, TargetAction, TargetPriority, TargetState
from .hint import Hint
from .match import Match
from .tooltip import (
    ArrowDirection,
    PositionResult,
    Side,
    TooltipContent,
    TooltipStyle,
)

__all__ = [
    "Rect",
    "Target",
    "TargetAction",
    "TargetPriority",
    "TargetState",
    "Hint",
    "Match",
    "ArrowDirection",
    "PositionResult",
    "Side",
    "TooltipContent",
    "TooltipStyle",
]
