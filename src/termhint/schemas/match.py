"""
Fuzzy match result model.
"""

from typing import List

from pydantic import BaseModel, Field

from ..utils.text import OffsetMap


class Match(BaseModel):
    """
    A ranked fuzzy match of a query against one candidate.
    """

    index: int = Field(description="Position of the candidate in the input list")
    score: float = Field(ge=0.0, le=100.0, description="Match quality, 0-100")
    positions: List[int] = Field(
        default_factory=list,
        description="Character offsets in text, one per query character",
    )
    text: str = Field(description="The matched candidate")

    def byte_positions(self, encoding: str = "utf-8") -> List[int]:
        """Byte offsets of the matched characters in the encoded text."""
        offsets = OffsetMap(self.text, encoding)
        return [offsets.char_to_byte(pos) for pos in self.positions]
