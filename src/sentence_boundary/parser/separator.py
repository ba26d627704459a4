"""Separator rule: decides whether terminal punctuation ends a sentence."""

from typing import Optional, Sequence, Tuple
from ..core.abc import Cursor, Logger, Meter
from ..core.chars import (
    AMBIGUOUS_SEPARATORS,
    CLOSING_QUOTES,
    DEFAULT_SEPARATORS,
    MAX_SEEK_ITERATIONS,
    PERIOD,
    WHITESPACE,
)
from ..core.util import describe_char

class SeparatorRule:
    """
    Boundary rule over an externally owned cursor.

    Line feeds and full-width marks always end a sentence. Period, question
    mark and exclamation mark look ahead: they end a sentence before the end
    of the text or before whitespace, and pull a directly following closing
    quote into the sentence when the quote itself is followed by whitespace
    or the end of the text. A period directly followed by anything else
    (`3.14`, `e.g.x`) is never a boundary.
    """

    def __init__(self, separator_characters: Optional[Sequence[str]] = None, *,
                 max_iterations: int = MAX_SEEK_ITERATIONS,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize the rule.

        Args:
            separator_characters: Characters that may end a sentence. Replaces the
                default set entirely; an empty sequence turns the rule into a no-op.
            max_iterations: Cap on consecutive boundary steps in one seek
            logger: Optional structured logger
            meter: Optional metrics collector

        Raises:
            ValueError: If max_iterations is less than 1
        """
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
        if separator_characters is None:
            separator_characters = DEFAULT_SEPARATORS
        self.separator_characters: Tuple[str, ...] = tuple(separator_characters)
        # Closing quotes only ever join a sentence through the lookahead
        self._separators = frozenset(
            c for c in self.separator_characters if c not in CLOSING_QUOTES
        )
        self.max_iterations = max_iterations
        self.log = logger
        self.meter = meter

    def measure(self, cursor: Cursor) -> int:
        """
        Width of the boundary at the cursor position, without moving the cursor.

        Args:
            cursor: Cursor positioned on the candidate character

        Returns:
            int: 0 when there is no boundary, 1 for the separator alone,
                2 when a closing quote belongs to the sentence as well
        """
        if cursor.is_suppressed() or cursor.is_in_suppressed_range():
            return 0

        current = cursor.read()
        if current is None or current not in self._separators:
            return 0
        if current not in AMBIGUOUS_SEPARATORS:
            return 1

        next_char = cursor.read(1)
        if next_char is None:
            return 1
        if next_char in CLOSING_QUOTES:
            # `Stop." And` ends here, `Stop."And` does not
            after = cursor.read(2)
            if after is None or after in WHITESPACE:
                return 2
            return 0
        if next_char in WHITESPACE:
            return 1
        if current == PERIOD:
            return 0
        return 1

    def test(self, cursor: Cursor) -> bool:
        """True when the cursor sits on a sentence boundary. Never moves the cursor."""
        return self.measure(cursor) > 0

    def advance_past_boundary(self, cursor: Cursor) -> int:
        """
        Consume the separator run at the cursor, with any closing quote that belongs to it.

        Safe to call unconditionally: returns 0 without moving when there is no
        boundary. Stops after `max_iterations` steps; reaching the cap is reported
        to the logger and meter and never raises.

        Args:
            cursor: Cursor positioned on the candidate character

        Returns:
            int: Number of characters consumed
        """
        consumed = 0
        for _ in range(self.max_iterations):
            width = self.measure(cursor)
            if not width:
                return consumed
            for _ in range(width):
                cursor.advance()
            consumed += width

        if self.test(cursor):
            if self.meter:
                self.meter.inc("sentence_boundary.seek_limit_reached")
            if self.log:
                self.log.warn("separator_seek_limit_reached",
                              max_iterations=self.max_iterations,
                              consumed=consumed,
                              char=describe_char(cursor.read()))
        return consumed
