"""Character cursor over a text with suppressed contexts and ranges."""

from typing import List, Optional, Sequence, Tuple

class SourceCode:
    """
    Cursor over a string, implementing the Cursor protocol.

    Tracks two independent kinds of suppression: pointwise contexts that the
    pipeline opens and closes while walking (bracketed asides), and index
    ranges known up front (code spans, fenced blocks).
    """

    def __init__(self, text: str, suppressed_ranges: Sequence[Tuple[int, int]] = ()):
        """
        Initialize a cursor at the start of the text.

        Args:
            text: Source text to walk
            suppressed_ranges: Half-open (start, end) index ranges where no boundary may fire
        """
        self.text = text
        self.index = 0
        self._contexts: List[str] = []
        self._ranges: List[Tuple[int, int]] = []
        for start, end in suppressed_ranges:
            self.add_suppressed_range(start, end)

    @property
    def has_end(self) -> bool:
        """True once every character has been consumed."""
        return self.index >= len(self.text)

    def read(self, offset: int = 0) -> Optional[str]:
        """Look at character at current position + offset without consuming"""
        pos = self.index + offset
        return self.text[pos] if 0 <= pos < len(self.text) else None

    def advance(self) -> None:
        """Move forward one character. Does nothing at the end of the text."""
        if self.index < len(self.text):
            self.index += 1

    def slice(self, start: int, end: Optional[int] = None) -> str:
        return self.text[start:end]

    # Contexts

    def enter_context(self, name: str) -> None:
        self._contexts.append(name)

    def leave_context(self, name: str) -> None:
        """
        Close the innermost context.

        Raises:
            ValueError: If the innermost open context is not `name`
        """
        if not self._contexts or self._contexts[-1] != name:
            raise ValueError(f"Cannot leave context {name!r}: current context is {self.current_context!r}")
        self._contexts.pop()

    @property
    def current_context(self) -> Optional[str]:
        return self._contexts[-1] if self._contexts else None

    def is_suppressed(self) -> bool:
        return bool(self._contexts)

    # Ranges

    def add_suppressed_range(self, start: int, end: int) -> None:
        """
        Register a half-open [start, end) range where boundaries never fire.

        Raises:
            ValueError: If start is negative or greater than end
        """
        if start < 0 or start > end:
            raise ValueError(f"Invalid suppressed range: ({start}, {end})")
        self._ranges.append((start, end))

    def is_in_suppressed_range(self) -> bool:
        return any(start <= self.index < end for start, end in self._ranges)
