"""Basic value types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SearchType(Enum):
    """How a search string is compared with a candidate name."""

    EXACT_MATCH = auto()
    STARTS_WITH = auto()


@dataclass(frozen=True)
class ByteRange:
    """A half-open range ``[start, end)`` of UTF-8 byte offsets."""

    start: int
    end: int

    def shift(self, offset: int) -> ByteRange:
        """Return the range moved by ``offset`` bytes."""
        return ByteRange(self.start + offset, self.end + offset)

    def to_slice(self) -> slice:
        """Return the range as a ``slice`` object."""
        return slice(self.start, self.end)