"""
Frame-scoped registry of navigable on-screen targets.

The host registers targets while drawing a frame and clears them at the next
frame boundary. The registry never ages entries out on its own.

Ordering rules:
- Iteration follows registration order. Re-registering an id replaces the
  target in place, keeping its original slot.
- sorted_by_area() returns the largest targets first.
- nearest_to() resolves equidistant targets in favour of the one registered
  first.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..schemas.geometry import Rect
from ..schemas.target import (
    Target,
    TargetAction,
    TargetPriority,
    TargetState,
)

logger = logging.getLogger(__name__)


class TargetRegistry:
    """
    Stores targets by id and answers spatial and attribute queries.

    Every query is total: unknown ids and empty registries yield None or an
    empty list.
    """

    def __init__(self):
        self._targets: Dict[int, Target] = {}

    def register(self, target: Target) -> None:
        """Insert a target, replacing any target with the same id."""
        if target.id in self._targets:
            logger.debug("Replacing target %d", target.id)
        self._targets[target.id] = target

    def remove(self, target_id: int) -> bool:
        """Remove a target. Returns True if it existed."""
        return self._targets.pop(target_id, None) is not None

    def clear(self) -> None:
        self._targets.clear()

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(list(self._targets.values()))

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._targets

    def len(self) -> int:
        return len(self._targets)

    def is_empty(self) -> bool:
        return not self._targets

    def all(self) -> List[Target]:
        return list(self._targets.values())

    def by_id(self, target_id: int) -> Optional[Target]:
        return self._targets.get(target_id)

    def at_point(self, x: int, y: int) -> List[Target]:
        """Targets whose rectangle contains the point (half-open edges)."""
        return [t for t in self._targets.values() if t.rect.contains_point(x, y)]

    def in_area(self, area: Rect) -> List[Target]:
        """Targets sharing at least one cell with the given rectangle."""
        return [t for t in self._targets.values() if t.rect.intersects(area)]

    def nearest_to(self, x: int, y: int) -> Optional[Target]:
        """
        Target closest to a point, measured to the nearest cell of its rectangle.

        Returns:
            The closest target, the earliest registered on ties, or None when
            the registry is empty.
        """
        best: Optional[Target] = None
        best_distance = 0.0
        for target in self._targets.values():
            distance = target.rect.distance_to(x, y)
            if best is None or distance < best_distance:
                best = target
                best_distance = distance
        return best

    def by_group(self, group: str) -> List[Target]:
        return [t for t in self._targets.values() if t.group == group]

    def by_priority(self, priority: TargetPriority) -> List[Target]:
        return [t for t in self._targets.values() if t.priority == priority]

    def by_state(self, state: TargetState) -> List[Target]:
        return [t for t in self._targets.values() if t.state == state]

    def by_action(self, action: TargetAction) -> List[Target]:
        return [t for t in self._targets.values() if t.action == action]

    def sorted_by_priority(self) -> List[Target]:
        """Critical first, then High, Normal, Low; registration order within a rank."""
        return sorted(self._targets.values(), key=lambda t: -t.priority.rank)

    def sorted_by_area(self) -> List[Target]:
        """Largest area first; registration order among equal areas."""
        return sorted(self._targets.values(), key=lambda t: -t.rect.area)
