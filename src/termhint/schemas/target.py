"""
Navigation target models.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .geometry import Rect


class TargetPriority(str, Enum):
    """Importance of a target; more important targets receive shorter hints."""

    CRITICAL = "critical"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Numeric rank, higher is more important."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    TargetPriority.CRITICAL: 3,
    TargetPriority.HIGH: 2,
    TargetPriority.NORMAL: 1,
    TargetPriority.LOW: 0,
}


class TargetAction(str, Enum):
    """What activating a target does. Navigate/Custom payloads go in metadata."""

    ACTIVATE = "activate"
    SELECT = "select"
    TOGGLE = "toggle"
    EDIT = "edit"
    SCROLL = "scroll"
    NAVIGATE = "navigate"
    CUSTOM = "custom"


class TargetState(str, Enum):
    """Visual/interaction state of a target."""

    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"
    SELECTED = "selected"
    DISABLED = "disabled"


class Target(BaseModel):
    """
    A navigable region discovered while drawing a frame.
    """

    id: int = Field(ge=0, description="Caller-assigned id, unique per registry")
    rect: Rect = Field(description="Screen area covered by the target")
    label: Optional[str] = Field(default=None, description="Human-readable label")
    priority: TargetPriority = Field(default=TargetPriority.NORMAL)
    group: Optional[str] = Field(
        default=None, description="Logical group such as 'tabs' or 'buttons'"
    )
    action: TargetAction = Field(default=TargetAction.ACTIVATE)
    state: TargetState = Field(default=TargetState.NORMAL)
    metadata: Dict[str, str] = Field(
        default_factory=dict, description="Free-form string attributes"
    )

    def contains_point(self, x: int, y: int) -> bool:
        return self.rect.contains_point(x, y)

    def overlaps_rect(self, rect: Rect) -> bool:
        return self.rect.intersects(rect)

    @property
    def area(self) -> int:
        return self.rect.area

    @property
    def center(self):
        return self.rect.center
