"""
Hint mode session tying the target registry to the hint engine.
"""

import logging
from typing import Dict, List, Optional

from ..config.overlay_config import NavConfig
from ..schemas.hint import Hint
from ..schemas.target import Target, TargetState
from .hints import HintGenerator, HintMatcher, display_order
from .target_registry import TargetRegistry

logger = logging.getLogger(__name__)


class NavigationMode:
    """
    One hint-mode interaction: activate, type, resolve or cancel.

    Targets are snapshotted at activation so a resolved hint maps back to the
    target that was on screen when the hints were drawn.
    """

    def __init__(self, config: Optional[NavConfig] = None):
        self.config = config or NavConfig()
        self._generator = HintGenerator(self.config.hint_charset)
        self._matcher = HintMatcher()
        self._targets: Dict[int, Target] = {}
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def matcher(self) -> HintMatcher:
        return self._matcher

    def eligible_targets(self, registry: TargetRegistry) -> List[Target]:
        """Targets that should get a hint, in hint order."""
        candidates = [
            t
            for t in registry
            if t.rect.area >= self.config.min_target_area
            and t.state != TargetState.DISABLED
        ]
        return display_order(candidates)

    def activate(self, registry: TargetRegistry) -> List[Hint]:
        """
        Enter hint mode for the targets currently registered.

        Returns:
            The hints to draw. Empty when nothing is eligible, in which case
            the mode stays inactive.
        """
        ordered = self.eligible_targets(registry)
        hints = self._generator.generate(ordered, self.config.max_hints)
        self._targets = {t.id: t for t in ordered}
        self._matcher.set_hints(hints)
        self._active = bool(hints)
        logger.debug("Hint mode %s with %d hints", "active" if self._active else "idle", len(hints))
        return hints

    def handle_char(self, char: str) -> Optional[Target]:
        """
        Feed one typed character.

        Returns:
            The selected target when the input completes a hint; hint mode
            ends at that point.
        """
        if not self._active:
            return None
        target_id = self._matcher.push_char(char)
        if target_id is None:
            return None
        target = self._targets.get(target_id)
        self.cancel()
        return target

    def backspace(self) -> None:
        if self._active:
            self._matcher.pop_char()

    def cancel(self) -> None:
        """Leave hint mode and drop all hints."""
        self._matcher.clear()
        self._targets = {}
        self._active = False
