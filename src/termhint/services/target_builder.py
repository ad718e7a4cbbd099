"""
Convenience factory for common widget targets with sequential ids.
"""

from typing import Optional

from ..schemas.geometry import Rect
from ..schemas.target import Target, TargetAction, TargetPriority


class TargetBuilder:
    """
    Creates targets for common widget kinds, handing out ids in sequence.

    A host usually creates one builder per frame so ids restart predictably.
    """

    def __init__(self, start_id: int = 1):
        if start_id < 0:
            raise ValueError(f"start_id must be >= 0, got {start_id}")
        self._next_id = start_id

    def next_id(self) -> int:
        target_id = self._next_id
        self._next_id += 1
        return target_id

    def button(self, rect: Rect, label: str) -> Target:
        return Target(
            id=self.next_id(),
            rect=rect,
            label=label,
            action=TargetAction.ACTIVATE,
            priority=TargetPriority.HIGH,
        )

    def list_item(self, rect: Rect, label: str) -> Target:
        return Target(
            id=self.next_id(),
            rect=rect,
            label=label,
            action=TargetAction.SELECT,
            priority=TargetPriority.NORMAL,
        )

    def tab(self, rect: Rect, label: str) -> Target:
        return Target(
            id=self.next_id(),
            rect=rect,
            label=label,
            action=TargetAction.ACTIVATE,
            priority=TargetPriority.HIGH,
            group="tabs",
        )

    def tree_node(self, rect: Rect, label: str, expanded: bool) -> Target:
        return Target(
            id=self.next_id(),
            rect=rect,
            label=label,
            action=TargetAction.TOGGLE,
            priority=TargetPriority.NORMAL,
            metadata={"expanded": "true" if expanded else "false"},
        )

    def link(self, rect: Rect, label: str, href: str) -> Target:
        return Target(
            id=self.next_id(),
            rect=rect,
            label=label,
            action=TargetAction.NAVIGATE,
            priority=TargetPriority.NORMAL,
            metadata={"href": href},
        )

    def custom(
        self,
        rect: Rect,
        label: str,
        action: TargetAction,
        priority: TargetPriority,
        command: Optional[str] = None,
    ) -> Target:
        metadata = {"command": command} if command is not None else {}
        return Target(
            id=self.next_id(),
            rect=rect,
            label=label,
            action=action,
            priority=priority,
            metadata=metadata,
        )
