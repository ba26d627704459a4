"""Data types and result structures for sentence splitting."""

from dataclasses import dataclass, asdict
from typing import Dict, Any

@dataclass(frozen=True)
class Sentence:
    """One sentence found in the source text."""
    text: str           # Source text of the sentence, separator and closing quote included
    start: int          # Index of the first character in the source text
    end: int            # Index one past the last character
    
    @property
    def length(self) -> int:
        """Number of source characters covered by this sentence."""
        return self.end - self.start
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
