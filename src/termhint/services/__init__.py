"""
Services module - the overlay algorithms and the registries around them.

Submodules:
- fuzzy_matcher: fuzzy scoring and ranking
- target_registry / target_builder: on-screen targets and spatial queries
- hints / navigation: hint generation, keystroke matching, hint mode
- tooltip_positioner / tooltip_registry: tooltip placement and content
- command_registry: command palette
- state: per-host overlay context, frame boundary and command palette input
"""

from .command_registry import Command, CommandRegistry, CommandResult, CommandSuggestion
from .fuzzy_matcher import FuzzyMatcher
from .hints import HintGenerator, HintMatcher, display_order, generate_hints
from .navigation import NavigationMode
from .target_builder import TargetBuilder
from .target_registry import TargetRegistry
from .tooltip_positioner import TooltipPositioner
from .tooltip_registry import TooltipRegistry, place_tooltip
from .state import OmnibarMode, OmnibarState, OverlayContext

__all__ = [
    "Command",
    "CommandRegistry",
    "CommandResult",
    "CommandSuggestion",
    "FuzzyMatcher",
    "HintGenerator",
    "HintMatcher",
    "display_order",
    "generate_hints",
    "NavigationMode",
    "TargetBuilder",
    "TargetRegistry",
    "TooltipPositioner",
    "TooltipRegistry",
    "place_tooltip",
    "OmnibarMode",
    "OmnibarState",
    "OverlayContext",
]
