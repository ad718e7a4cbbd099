"""
Tests for configuration defaults, validation and environment overrides.
"""

import logging

import pytest

from termhint.config import (
    NavConfig,
    OverlayConfig,
    TooltipConfig,
    get_overlay_config,
    load_config_from_env,
)
from termhint.utils.logging import setup_logging, silence_logs


class TestValidation:
    def test_defaults(self):
        config = OverlayConfig()
        assert config.nav.hint_charset == "asdfghjkl"
        assert config.nav.hint_key == "f"
        assert config.nav.max_hints == 0
        assert config.fuzzy.case_sensitive is False
        assert config.tooltip.show_border is True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"hint_charset": ""},
            {"hint_charset": "aab"},
            {"hint_key": ""},
            {"max_hints": -1},
            {"min_target_area": -5},
        ],
    )
    def test_invalid_nav_config(self, kwargs):
        with pytest.raises(ValueError):
            NavConfig(**kwargs)

    def test_invalid_tooltip_padding(self):
        with pytest.raises(ValueError):
            TooltipConfig(padding=-1)

    def test_invalid_history(self):
        with pytest.raises(ValueError):
            OverlayConfig(max_history=0)


class TestEnvironment:
    def test_defaults_without_env(self, clean_env):
        config = load_config_from_env()
        assert config == OverlayConfig()

    def test_overrides(self, clean_env):
        clean_env.setenv("TERMHINT_HINT_CHARSET", "jk")
        clean_env.setenv("TERMHINT_MAX_HINTS", "12")
        clean_env.setenv("TERMHINT_FUZZY_CASE_SENSITIVE", "true")
        clean_env.setenv("TERMHINT_TOOLTIP_PREFER_RIGHT", "no")
        clean_env.setenv("TERMHINT_MAX_HISTORY", "5")
        config = load_config_from_env()
        assert config.nav.hint_charset == "jk"
        assert config.nav.max_hints == 12
        assert config.fuzzy.case_sensitive is True
        assert config.tooltip.prefer_right is False
        assert config.max_history == 5

    def test_bad_values_fail_fast(self, clean_env):
        clean_env.setenv("TERMHINT_MAX_HINTS", "many")
        with pytest.raises(ValueError):
            load_config_from_env()

    def test_boolean_spellings(self, clean_env):
        clean_env.setenv("TERMHINT_TOOLTIP_BORDER", "Off")
        clean_env.setenv("TERMHINT_TOOLTIP_PREFER_BOTTOM", " 0 ")
        config = load_config_from_env()
        assert config.tooltip.show_border is False
        assert config.tooltip.prefer_bottom is False

    def test_unrecognised_boolean_fails_fast(self, clean_env):
        clean_env.setenv("TERMHINT_TOOLTIP_BORDER", "maybe")
        with pytest.raises(ValueError, match="TERMHINT_TOOLTIP_BORDER"):
            load_config_from_env()

    def test_empty_charset_from_env_fails(self, clean_env):
        clean_env.setenv("TERMHINT_HINT_CHARSET", "")
        with pytest.raises(ValueError):
            load_config_from_env()

    def test_default_config_is_cached(self, clean_env):
        assert get_overlay_config() is get_overlay_config()


class TestLogging:
    def test_setup_logging_levels(self, package_logger):
        setup_logging(verbose=True)
        assert package_logger.level == logging.DEBUG
        setup_logging(verbose=False)
        assert package_logger.level == logging.WARNING

    def test_silence_logs(self, package_logger):
        silence_logs()
        assert package_logger.level == logging.CRITICAL
        assert not package_logger.propagate

    def test_logger_state_does_not_leak_between_tests(self):
        # Runs after the tests above; their changes must have been undone.
        logger = logging.getLogger("termhint")
        assert logger.propagate
        assert logger.level == logging.NOTSET
        assert logger.handlers == []
