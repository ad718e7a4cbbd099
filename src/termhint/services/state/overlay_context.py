"""
Per-host overlay state with an explicit frame boundary.

Targets are frame-scoped and cleared by begin_frame(). Tooltip content,
commands, the command palette and its history persist across frames.
"""

import logging
from typing import List, Optional

from ...config.overlay_config import OverlayConfig
from ...schemas.geometry import Rect
from ...schemas.tooltip import PositionResult
from ..command_registry import CommandRegistry, CommandResult
from ..fuzzy_matcher import FuzzyMatcher
from ..navigation import NavigationMode
from ..target_registry import TargetRegistry
from ..tooltip_positioner import TooltipPositioner
from ..tooltip_registry import TooltipRegistry, place_tooltip
from .omnibar_state import OmnibarState

logger = logging.getLogger(__name__)


class OverlayContext:
    """
    Everything the overlay keeps between keystrokes.

    Not thread-safe. Hosts sharing a context across threads must lock it
    themselves.
    """

    def __init__(self, config: Optional[OverlayConfig] = None):
        self.config = config or OverlayConfig()
        self.matcher = FuzzyMatcher.from_config(self.config.fuzzy)
        self.targets = TargetRegistry()
        self.tooltips = TooltipRegistry()
        self.commands = CommandRegistry(self.matcher)
        self.navigation = NavigationMode(self.config.nav)
        self.positioner = TooltipPositioner.from_config(self.config.tooltip)
        self.omnibar = OmnibarState(self.config.max_history)
        self.frame_count = 0

    @property
    def history(self) -> List[str]:
        return self.omnibar.history

    def begin_frame(self) -> None:
        """Start a new frame: drop this frame's targets, keep everything else."""
        self.targets.clear()
        self.frame_count += 1

    def record_command(self, text: str) -> None:
        """Append to history, skipping blanks and consecutive duplicates."""
        self.omnibar.record(text)

    def clear_history(self) -> None:
        self.omnibar.clear_history()

    def run_command(self, text: str) -> CommandResult:
        """Record palette input in history and execute it."""
        self.record_command(text)
        return self.commands.execute(text.strip(), self)

    def submit_omnibar(self) -> Optional[CommandResult]:
        """
        Submit the palette buffer and execute it.

        Returns:
            None when the buffer is blank, otherwise the command result.
        """
        command = self.omnibar.submit()
        if command is None:
            return None
        return self.commands.execute(command, self)

    def tooltip_position(self, target_id: int, screen_rect: Rect) -> Optional[PositionResult]:
        return place_tooltip(
            self.positioner, self.tooltips, self.targets, target_id, screen_rect
        )
