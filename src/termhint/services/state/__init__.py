"""
Overlay state shared across frames.
"""

from .omnibar_state import OmnibarMode, OmnibarState
from .overlay_context import OverlayContext

__all__ = ["OmnibarMode", "OmnibarState", "OverlayContext"]
