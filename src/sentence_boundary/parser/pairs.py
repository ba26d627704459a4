"""Bracket pair tracking that marks suppressed contexts on the cursor."""

from typing import Dict, Optional, Sequence, Tuple
from ..core.chars import DEFAULT_PAIRS
from ..source.source_code import SourceCode

class PairTracker:
    """
    Opens a context on the cursor at each opening bracket and closes it at the
    matching closing bracket, so punctuation inside an aside never splits.

    Open pairs live on the cursor as contexts named by their opener, so one
    tracker can serve any number of cursors. Nesting is supported. A closer
    that does not match the innermost open pair is ignored; an opener that is
    never closed suppresses the rest of the text.
    """

    def __init__(self, pairs: Optional[Sequence[Tuple[str, str]]] = None):
        if pairs is None:
            pairs = DEFAULT_PAIRS
        self.pairs: Tuple[Tuple[str, str], ...] = tuple((o, c) for o, c in pairs)
        self._closers: Dict[str, str] = {o: c for o, c in self.pairs}

    def track(self, source: SourceCode) -> None:
        """Update the cursor's contexts for the character at its current position."""
        char = source.read()
        if char is None:
            return
        opener = source.current_context
        if opener in self._closers and char == self._closers[opener]:
            source.leave_context(opener)
            return
        if char in self._closers:
            source.enter_context(char)
