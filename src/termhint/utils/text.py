"""
Character/byte offset bookkeeping for highlighting matched text.

Fuzzy matching works on character offsets. Renderers that slice encoded
buffers need byte offsets instead, so OffsetMap keeps both views of a string.
"""

from bisect import bisect_right
from typing import List

# Tried in order. surrogateescape yields the original byte of an undecodable
# filename (os.fsdecode); the others keep any remaining str countable.
_ENCODE_ERRORS = ("surrogateescape", "surrogatepass", "replace")


def encoded_length(char: str, encoding: str = "utf-8") -> int:
    """Number of bytes char occupies when encoded. Never raises on str input."""
    for errors in _ENCODE_ERRORS:
        try:
            return len(char.encode(encoding, errors))
        except UnicodeEncodeError:
            continue
    return 1


class OffsetMap:
    """
    Bidirectional map between character offsets and byte offsets.

    Offsets equal to the string length map to the encoded length, so
    half-open highlight ranges can be converted end to end.
    """

    def __init__(self, text: str, encoding: str = "utf-8"):
        self.text = text
        self.encoding = encoding
        starts: List[int] = []
        cursor = 0
        for char in text:
            starts.append(cursor)
            cursor += encoded_length(char, encoding)
        starts.append(cursor)
        self._byte_starts = starts

    @property
    def byte_length(self) -> int:
        return self._byte_starts[-1]

    def char_to_byte(self, char_offset: int) -> int:
        """Byte offset where the character at char_offset starts (clamped)."""
        char_offset = min(max(char_offset, 0), len(self._byte_starts) - 1)
        return self._byte_starts[char_offset]

    def byte_to_char(self, byte_offset: int) -> int:
        """Character containing byte_offset; offsets past the end map to len(text)."""
        if byte_offset <= 0:
            return 0
        if byte_offset >= self.byte_length:
            return len(self.text)
        return bisect_right(self._byte_starts, byte_offset) - 1

    def char_span_to_bytes(self, start: int, end: int) -> tuple:
        return (self.char_to_byte(start), self.char_to_byte(end))
