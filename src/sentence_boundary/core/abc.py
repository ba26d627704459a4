"""Protocol interfaces for dependency injection from the host pipeline."""

from typing import Protocol, List, Optional, Any
from .types import Sentence

class Cursor(Protocol):
    """Character cursor driven by the pipeline. The separator rule only reads from it and advances it."""
    
    def read(self, offset: int = 0) -> Optional[str]:
        """
        Look at a character relative to the current position without moving.
        
        Args:
            offset: 0 for the current character, positive values look ahead
            
        Returns:
            Optional[str]: The character, or None past the end of the stream
        """
        ...
        
    def advance(self) -> None:
        """Move the position forward by exactly one character."""
        ...
        
    def is_suppressed(self) -> bool:
        """True while the current position lies inside a suppressed context (e.g. a bracketed aside)."""
        ...
        
    def is_in_suppressed_range(self) -> bool:
        """True while the current position lies inside a longer suppressed range (e.g. a fenced block)."""
        ...

class Segmenter(Protocol):
    """Sentence segmenter. SentenceSegmenter is the deterministic implementation."""
    
    def split(self, text: str) -> List[Sentence]:
        """
        Split text into sentences with their source spans.
        
        Args:
            text: Input text to split
            
        Returns:
            List[Sentence]: Sentences in source order
        """
        ...
    
    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences.
        
        Args:
            text: Input text to segment
            
        Returns:
            List[str]: List of text segments
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""
    
    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...
        
    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...
        
    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""
    
    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...
        
    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
