"""
termhint - keyboard navigation overlays for terminal UIs.

Fuzzy command search, a spatial registry of on-screen targets, Vimium-style
hint labels and tooltip placement. Pure in-memory algorithms; the host owns
rendering and input.
"""

from .schemas import (
    ArrowDirection,
    Hint,
    Match,
    PositionResult,
    Rect,
    Side,
    Target,
    TargetAction,
    TargetPriority,
    TargetState,
    TooltipContent,
    TooltipStyle,
)
from .services import (
    Command,
    CommandRegistry,
    FuzzyMatcher,
    HintGenerator,
    HintMatcher,
    NavigationMode,
    OmnibarState,
    OverlayContext,
    TargetBuilder,
    TargetRegistry,
    TooltipPositioner,
    TooltipRegistry,
    generate_hints,
)

__version__ = "0.1.0"

__all__ = [
    "ArrowDirection",
    "Hint",
    "Match",
    "PositionResult",
    "Rect",
    "Side",
    "Target",
    "TargetAction",
    "TargetPriority",
    "TargetState",
    "TooltipContent",
    "TooltipStyle",
    "Command",
    "CommandRegistry",
    "FuzzyMatcher",
    "HintGenerator",
    "HintMatcher",
    "NavigationMode",
    "OmnibarState",
    "OverlayContext",
    "TargetBuilder",
    "TargetRegistry",
    "TooltipPositioner",
    "TooltipRegistry",
    "generate_hints",
]
