"""
Fuzzy matching for command palette and target search.

Score-based subsequence matching in the style of fzf/skim: every query
character must appear in the text in order. Matches earn a base score per
character plus bonuses for starting at the first character, for continuing a
run of adjacent matches and for landing right after a word separator. Scores
are normalized to 0-100 so they are comparable across query lengths.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..config.overlay_config import FuzzyConfig
from ..schemas.match import Match

logger = logging.getLogger(__name__)


def _fold_case(text: str) -> str:
    """
    Lowercase text without changing its length.

    Characters whose lowercase form expands (e.g. 'İ') are kept as-is so
    character offsets into the folded string stay valid for the original.
    Non-ASCII text is folded per character to avoid context rules such as
    Greek final sigma, which would fold the same character differently
    depending on what follows it.
    """
    if text.isascii():
        return text.lower()
    return "".join(
        low if len(low) == 1 else char
        for char, low in ((char, char.lower()) for char in text)
    )


class FuzzyMatcher:
    """
    Scores queries against candidate strings.

    Setters return the matcher itself so configuration can be chained:

        matcher = FuzzyMatcher().with_case_sensitive(True).with_first_char_bonus(20)
    """

    def __init__(
        self,
        consecutive_bonus: float = 15.0,
        word_boundary_bonus: float = 10.0,
        first_char_bonus: float = 15.0,
        case_sensitive: bool = False,
        base_score: float = 5.0,
    ):
        self.consecutive_bonus = consecutive_bonus
        self.word_boundary_bonus = word_boundary_bonus
        self.first_char_bonus = first_char_bonus
        self.case_sensitive = case_sensitive
        self.base_score = base_score

    @classmethod
    def from_config(cls, config: FuzzyConfig) -> "FuzzyMatcher":
        return cls(
            consecutive_bonus=config.consecutive_bonus,
            word_boundary_bonus=config.word_boundary_bonus,
            first_char_bonus=config.first_char_bonus,
            case_sensitive=config.case_sensitive,
            base_score=config.base_score,
        )

    def with_case_sensitive(self, case_sensitive: bool) -> "FuzzyMatcher":
        self.case_sensitive = case_sensitive
        return self

    def with_consecutive_bonus(self, bonus: float) -> "FuzzyMatcher":
        self.consecutive_bonus = bonus
        return self

    def with_word_boundary_bonus(self, bonus: float) -> "FuzzyMatcher":
        self.word_boundary_bonus = bonus
        return self

    def with_first_char_bonus(self, bonus: float) -> "FuzzyMatcher":
        self.first_char_bonus = bonus
        return self

    def score(self, query: str, text: str) -> Optional[Tuple[float, List[int]]]:
        """
        Score a query against text.

        Args:
            query: The search query
            text: The text to match against

        Returns:
            (score, positions) when every query character occurs in text in
            order, where positions are character offsets into text. None when
            the query does not match.
        """
        if not query:
            return (0.0, [])
        if not text or len(query) > len(text):
            return None

        if self.case_sensitive:
            needle, haystack = query, text
        else:
            needle, haystack = _fold_case(query), _fold_case(text)

        positions = []
        cursor = 0
        find = haystack.find
        for char in needle:
            found = find(char, cursor)
            if found < 0:
                return None
            positions.append(found)
            cursor = found + 1

        return (self._calculate_score(positions, text), positions)

    def _calculate_score(self, positions: List[int], text: str) -> float:
        count = len(positions)
        raw = count * self.base_score
        if positions[0] == 0:
            raw += self.first_char_bonus

        previous = -2
        for pos in positions:
            if pos == previous + 1:
                raw += self.consecutive_bonus
            if pos > 0 and not text[pos - 1].isalnum():
                raw += self.word_boundary_bonus
            previous = pos

        ceiling = (
            count * self.base_score
            + max(self.first_char_bonus, 0.0)
            + (count - 1) * max(self.consecutive_bonus, 0.0)
            + count * max(self.word_boundary_bonus, 0.0)
        )
        if ceiling <= 0:
            return 0.0
        return min(max(raw * 100.0 / ceiling, 0.0), 100.0)

    def find_matches(self, query: str, candidates: Sequence[str]) -> List[Match]:
        """
        Find and rank all matching candidates.

        Returns:
            Matches sorted by score, highest first. Equal scores keep the
            candidates' original order. An empty query returns every
            candidate with score 0.0.
        """
        matches = []
        for index, text in enumerate(candidates):
            result = self.score(query, text)
            if result is None:
                continue
            score, positions = result
            matches.append(
                Match(index=index, score=score, positions=positions, text=text)
            )

        matches.sort(key=lambda match: -match.score)
        logger.debug(
            "Fuzzy query %r matched %d of %d candidates",
            query,
            len(matches),
            len(candidates),
        )
        return matches
