"""
Vimium-style hint generation and keystroke matching.

HintGenerator turns an ordered list of targets into short codes drawn from a
hint alphabet. The first targets get one-character codes in alphabet order;
once the alphabet is used up, targets get two-character codes enumerated
alphabet-major (for "ab": a, b, aa, ab, ba, bb), then three characters.

Codes are unique but not prefix-free: with more targets than alphabet
characters both "a" and "aa" exist. HintMatcher completes on exact equality,
so typing "a" resolves the one-character hint first.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ..config.overlay_config import validate_charset
from ..schemas.hint import Hint
from ..schemas.target import Target

logger = logging.getLogger(__name__)


def display_order(targets: Iterable[Target]) -> List[Target]:
    """
    Order targets the way hints should be handed out.

    Highest priority first, then top-to-bottom, then left-to-right. Stable
    for targets sharing all three keys.
    """
    return sorted(
        targets,
        key=lambda t: (-t.priority.rank, t.rect.y, t.rect.x),
    )


class HintGenerator:
    """
    Assigns hint codes to targets in the order given.

    Raises:
        ValueError: if the charset is empty or repeats a character.
    """

    def __init__(self, charset: str):
        self._charset = validate_charset(charset)
        self._chars = list(charset)

    @property
    def charset(self) -> str:
        return self._charset

    def generate(self, targets: Sequence[Target], max_hints: int = 0) -> List[Hint]:
        """
        Generate one hint per target without re-sorting them.

        Args:
            targets: Targets in display order (see display_order)
            max_hints: Stop after this many hints; 0 means no limit

        Returns:
            Hints paired with targets in input order.
        """
        if max_hints < 0:
            raise ValueError(f"max_hints must be >= 0, got {max_hints}")
        count = len(targets) if max_hints == 0 else min(len(targets), max_hints)
        hints = [
            Hint(text=self.hint_text(index), target_id=targets[index].id)
            for index in range(count)
        ]
        logger.debug(
            "Generated %d hints for %d targets with charset %r",
            len(hints),
            len(targets),
            self._charset,
        )
        return hints

    def hint_text(self, index: int) -> str:
        """
        Code for the index-th target: bijective base-k numbering over the
        charset, so index 0..k-1 are single characters, the next k*k are
        pairs, and so on.
        """
        base = len(self._chars)
        digits = []
        n = index
        while True:
            digits.append(self._chars[n % base])
            n //= base
            if n == 0:
                break
            n -= 1
        return "".join(reversed(digits))


def generate_hints(
    targets: Sequence[Target], alphabet: str, max_hints: int = 0
) -> List[Hint]:
    """Shorthand for HintGenerator(alphabet).generate(targets, max_hints)."""
    return HintGenerator(alphabet).generate(targets, max_hints)


class HintMatcher:
    """
    Tracks typed input against the active hint set.
    """

    def __init__(self):
        self._input = ""
        self._hints: List[Hint] = []
        self._by_text: Dict[str, Hint] = {}
        self._by_target: Dict[int, Hint] = {}

    def set_hints(self, hints: Iterable[Hint]) -> None:
        """Replace the active hints and reset the typed input."""
        self._hints = list(hints)
        self._by_text = {hint.text: hint for hint in self._hints}
        self._by_target = {hint.target_id: hint for hint in self._hints}
        self._input = ""
        self._update_matches()

    @property
    def hints(self) -> List[Hint]:
        return list(self._hints)

    def input(self) -> str:
        return self._input

    def clear(self) -> None:
        self._hints = []
        self._by_text = {}
        self._by_target = {}
        self._input = ""

    def push_char(self, char: str) -> Optional[int]:
        """
        Append a typed character.

        Returns:
            The target id whose hint text equals the input exactly, else None.
        """
        self._input += char
        self._update_matches()
        hint = self._by_text.get(self._input)
        return hint.target_id if hint is not None else None

    def pop_char(self) -> None:
        """Remove the last typed character, if any."""
        if self._input:
            self._input = self._input[:-1]
            self._update_matches()

    def _update_matches(self) -> None:
        for hint in self._hints:
            hint.update_match(self._input)

    def matching_hints(self) -> List[Hint]:
        """Hints whose text starts with the current input."""
        return [hint for hint in self._hints if hint.matches_input(self._input)]

    def non_matching_hints(self) -> List[Hint]:
        """Hints ruled out by the current input (drawn dimmed)."""
        return [hint for hint in self._hints if not hint.matches_input(self._input)]

    def hint_for_target(self, target_id: int) -> Optional[Hint]:
        return self._by_target.get(target_id)
