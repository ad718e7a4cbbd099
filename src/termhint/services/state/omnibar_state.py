"""
Command palette input state: edit buffer, cursor and command history.

The cursor is a character offset into the buffer, so it always sits on a
character boundary regardless of how the text encodes.
"""

import logging
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class OmnibarMode(str, Enum):
    """Whether the palette is open."""

    INACTIVE = "inactive"
    INPUT = "input"


class OmnibarState:
    """
    Line editor behind the command palette.

    History is kept oldest first and survives activation, deactivation and
    frame boundaries. While browsing history the in-progress input is parked
    and comes back when navigating past the newest entry.
    """

    def __init__(self, max_history: int = 100):
        if max_history <= 0:
            raise ValueError(f"max_history must be > 0, got {max_history}")
        self.max_history = max_history
        self._mode = OmnibarMode.INACTIVE
        self._buffer = ""
        self._cursor = 0
        self._history: List[str] = []
        self._history_index: Optional[int] = None
        self._temp_buffer: Optional[str] = None

    @property
    def mode(self) -> OmnibarMode:
        return self._mode

    @property
    def is_active(self) -> bool:
        return self._mode != OmnibarMode.INACTIVE

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def activate(self) -> None:
        self._mode = OmnibarMode.INPUT
        self._reset_input()

    def deactivate(self) -> None:
        self._mode = OmnibarMode.INACTIVE
        self._reset_input()

    def insert_char(self, char: str) -> None:
        """Insert text at the cursor and move the cursor past it."""
        self._stop_browsing()
        self._buffer = self._buffer[: self._cursor] + char + self._buffer[self._cursor :]
        self._cursor += len(char)

    def delete_char(self) -> None:
        """Delete the character before the cursor (backspace)."""
        if self._cursor == 0:
            return
        self._stop_browsing()
        self._buffer = self._buffer[: self._cursor - 1] + self._buffer[self._cursor :]
        self._cursor -= 1

    def move_cursor_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_cursor_right(self) -> None:
        if self._cursor < len(self._buffer):
            self._cursor += 1

    def move_cursor_home(self) -> None:
        self._cursor = 0

    def move_cursor_end(self) -> None:
        self._cursor = len(self._buffer)

    def record(self, text: str) -> Optional[str]:
        """
        Append a command to history.

        Blank input and a repeat of the newest entry are skipped. The oldest
        entries are dropped beyond max_history.

        Returns:
            The stripped command, or None for blank input.
        """
        text = text.strip()
        if not text:
            return None
        if not self._history or self._history[-1] != text:
            self._history.append(text)
            overflow = len(self._history) - self.max_history
            if overflow > 0:
                del self._history[:overflow]
        return text

    def submit(self) -> Optional[str]:
        """
        Finish input: record the buffer in history and close the palette.

        Returns:
            The submitted command, or None when the buffer is blank. A blank
            submit leaves the palette open.
        """
        command = self.record(self._buffer)
        if command is None:
            return None
        logger.debug("Submitted command %r", command)
        self.deactivate()
        return command

    def history_prev(self) -> None:
        """Load the next older history entry into the buffer."""
        if not self._history:
            return
        if self._history_index is None:
            self._temp_buffer = self._buffer
            self._history_index = 0
        elif self._history_index < len(self._history) - 1:
            self._history_index += 1
        self._load_entry()

    def history_next(self) -> None:
        """Load the next newer entry, or restore the parked input after the newest."""
        if self._history_index is None:
            return
        if self._history_index == 0:
            self._buffer = self._temp_buffer or ""
            self._cursor = len(self._buffer)
            self._stop_browsing()
            return
        self._history_index -= 1
        self._load_entry()

    def clear_history(self) -> None:
        self._history.clear()
        self._stop_browsing()

    def _load_entry(self) -> None:
        self._buffer = self._history[-1 - self._history_index]
        self._cursor = len(self._buffer)

    def _stop_browsing(self) -> None:
        self._history_index = None
        self._temp_buffer = None

    def _reset_input(self) -> None:
        self._buffer = ""
        self._cursor = 0
        self._stop_browsing()
