"""
Hint label assigned to a target during hint mode.
"""

from pydantic import BaseModel, Field


class Hint(BaseModel):
    """
    A short type-ahead code bound to one target.

    matched_chars counts the leading characters of text already confirmed by
    the typed input.
    """

    text: str = Field(description="Hint code drawn from the hint alphabet")
    target_id: int = Field(description="Id of the target this hint selects")
    matched_chars: int = Field(default=0, ge=0)

    def is_complete(self) -> bool:
        return self.matched_chars == len(self.text)

    def matches_input(self, typed: str) -> bool:
        return self.text.startswith(typed)

    def matched(self) -> str:
        return self.text[: self.matched_chars]

    def unmatched(self) -> str:
        return self.text[self.matched_chars :]

    def update_match(self, typed: str) -> None:
        count = 0
        for typed_char, hint_char in zip(typed, self.text):
            if typed_char != hint_char:
                break
            count += 1
        self.matched_chars = count
