"""
Tunable parameters for the overlay algorithms.

Defaults live in the dataclasses below. Hosts can override them in code or
through TERMHINT_* environment variables (a local .env file is honoured).
Invalid values fail at construction, never while handling keystrokes.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


@dataclass
class FuzzyConfig:
    """Scoring weights for the fuzzy matcher."""

    base_score: float = 5.0
    """Score for every matched query character"""

    consecutive_bonus: float = 15.0
    """Bonus for a character continuing a run of adjacent matches"""

    word_boundary_bonus: float = 10.0
    """Bonus for a match right after a non-alphanumeric separator"""

    first_char_bonus: float = 15.0
    """Bonus when the match starts at the first character of the text"""

    case_sensitive: bool = False


@dataclass
class NavConfig:
    """Hint mode settings."""

    hint_key: str = "f"
    """Key that activates hint mode"""

    hint_charset: str = "asdfghjkl"
    """Hint alphabet, most convenient keys first"""

    max_hints: int = 0
    """Maximum number of hints to generate, 0 for unlimited"""

    min_target_area: int = 1
    """Targets smaller than this many cells get no hint"""

    def __post_init__(self) -> None:
        validate_charset(self.hint_charset)
        if len(self.hint_key) != 1:
            raise ValueError(f"hint_key must be a single character, got {self.hint_key!r}")
        if self.max_hints < 0:
            raise ValueError(f"max_hints must be >= 0, got {self.max_hints}")
        if self.min_target_area < 0:
            raise ValueError(f"min_target_area must be >= 0, got {self.min_target_area}")


@dataclass
class TooltipConfig:
    """Tooltip placement settings."""

    offset_x: int = 1
    offset_y: int = 0
    padding: int = 1
    show_border: bool = True
    prefer_right: bool = True
    prefer_bottom: bool = True

    def __post_init__(self) -> None:
        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")


@dataclass
class OverlayConfig:
    """Aggregate configuration handed to an OverlayContext."""

    fuzzy: FuzzyConfig = field(default_factory=FuzzyConfig)
    nav: NavConfig = field(default_factory=NavConfig)
    tooltip: TooltipConfig = field(default_factory=TooltipConfig)

    max_history: int = 100
    """Command history entries kept across frames"""

    def __post_init__(self) -> None:
        if self.max_history <= 0:
            raise ValueError(f"max_history must be > 0, got {self.max_history}")


def validate_charset(charset: str) -> str:
    """
    Check a hint alphabet: non-empty and free of repeated characters.

    Returns:
        The charset unchanged, so it can be used inline.
    """
    if not charset:
        raise ValueError("Hint charset cannot be empty")
    seen = set()
    for char in charset:
        if char in seen:
            raise ValueError(f"Hint charset contains duplicate character {char!r}")
        seen.add(char)
    return charset


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_config_from_env() -> OverlayConfig:
    """
    Build an OverlayConfig from environment variables.

    Environment Variables:
    - TERMHINT_HINT_KEY / TERMHINT_HINT_CHARSET / TERMHINT_MAX_HINTS /
      TERMHINT_MIN_TARGET_AREA: hint mode
    - TERMHINT_FUZZY_CASE_SENSITIVE / TERMHINT_FUZZY_CONSECUTIVE_BONUS /
      TERMHINT_FUZZY_WORD_BOUNDARY_BONUS / TERMHINT_FUZZY_FIRST_CHAR_BONUS:
      fuzzy scoring
    - TERMHINT_TOOLTIP_OFFSET_X / TERMHINT_TOOLTIP_OFFSET_Y /
      TERMHINT_TOOLTIP_PADDING / TERMHINT_TOOLTIP_BORDER /
      TERMHINT_TOOLTIP_PREFER_RIGHT / TERMHINT_TOOLTIP_PREFER_BOTTOM: tooltips
    - TERMHINT_MAX_HISTORY: command history size
    """
    load_dotenv()

    fuzzy_defaults = FuzzyConfig()
    nav_defaults = NavConfig()
    tooltip_defaults = TooltipConfig()

    fuzzy = FuzzyConfig(
        base_score=fuzzy_defaults.base_score,
        consecutive_bonus=_env_float(
            "TERMHINT_FUZZY_CONSECUTIVE_BONUS", fuzzy_defaults.consecutive_bonus
        ),
        word_boundary_bonus=_env_float(
            "TERMHINT_FUZZY_WORD_BOUNDARY_BONUS", fuzzy_defaults.word_boundary_bonus
        ),
        first_char_bonus=_env_float(
            "TERMHINT_FUZZY_FIRST_CHAR_BONUS", fuzzy_defaults.first_char_bonus
        ),
        case_sensitive=_env_bool(
            "TERMHINT_FUZZY_CASE_SENSITIVE", fuzzy_defaults.case_sensitive
        ),
    )
    nav = NavConfig(
        hint_key=os.getenv("TERMHINT_HINT_KEY", nav_defaults.hint_key),
        hint_charset=os.getenv("TERMHINT_HINT_CHARSET", nav_defaults.hint_charset),
        max_hints=_env_int("TERMHINT_MAX_HINTS", nav_defaults.max_hints),
        min_target_area=_env_int(
            "TERMHINT_MIN_TARGET_AREA", nav_defaults.min_target_area
        ),
    )
    tooltip = TooltipConfig(
        offset_x=_env_int("TERMHINT_TOOLTIP_OFFSET_X", tooltip_defaults.offset_x),
        offset_y=_env_int("TERMHINT_TOOLTIP_OFFSET_Y", tooltip_defaults.offset_y),
        padding=_env_int("TERMHINT_TOOLTIP_PADDING", tooltip_defaults.padding),
        show_border=_env_bool("TERMHINT_TOOLTIP_BORDER", tooltip_defaults.show_border),
        prefer_right=_env_bool(
            "TERMHINT_TOOLTIP_PREFER_RIGHT", tooltip_defaults.prefer_right
        ),
        prefer_bottom=_env_bool(
            "TERMHINT_TOOLTIP_PREFER_BOTTOM", tooltip_defaults.prefer_bottom
        ),
    )
    return OverlayConfig(
        fuzzy=fuzzy,
        nav=nav,
        tooltip=tooltip,
        max_history=_env_int("TERMHINT_MAX_HISTORY", 100),
    )


_default_config: Optional[OverlayConfig] = None


def get_overlay_config() -> OverlayConfig:
    """
    Get the process-wide default configuration, loading it on first use.
    """
    global _default_config
    if _default_config is None:
        _default_config = load_config_from_env()
    return _default_config


def reset_overlay_config() -> None:
    """Forget the cached default so the next call re-reads the environment."""
    global _default_config
    _default_config = None
