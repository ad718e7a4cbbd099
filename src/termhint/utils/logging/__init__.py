"""
Logging utilities.
"""

from .logging_config import setup_logging, silence_logs

__all__ = ["setup_logging", "silence_logs"]
