"""Half-open character range into a document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextRange:
    """A half-open ``[start, end)`` range of character offsets."""

    start: int
    end: int

    def contains(self, offset: int) -> bool:
        """Return True if offset lies in the range, both ends inclusive."""
        return self.start <= offset <= self.end

    def within(self, start: int, end: int) -> bool:
        """Return True if this range lies fully inside ``[start, end]``."""
        return self.start >= start and self.end <= end

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}
