"""Pydantic schemas for YAML splitter configuration."""

from pydantic import BaseModel, Field
from typing import List
from ..core.chars import CLOSING_QUOTES, DEFAULT_PAIRS, DEFAULT_SEPARATORS, MAX_SEEK_ITERATIONS

class SeparatorCfg(BaseModel):
    """Separator rule configuration."""
    characters: List[str] = Field(default_factory=lambda: list(DEFAULT_SEPARATORS),
                                  description="Characters that may end a sentence (replaces the defaults)")
    max_iterations: int = Field(default=MAX_SEEK_ITERATIONS, ge=1,
                                description="Cap on consecutive boundary steps in one seek")
    
    class Config:
        extra = "forbid"

class SegmenterCfg(BaseModel):
    """Sentence segmenter output configuration."""
    min_length: int = Field(default=1, ge=0,
                            description="Minimum length of a segment returned by segment()")
    
    class Config:
        extra = "forbid"

class SplitterConfig(BaseModel):
    """Complete configuration for the sentence splitter."""
    version: int = Field(default=1, description="Config schema version")
    separators: SeparatorCfg = Field(default_factory=SeparatorCfg)
    pairs: List[List[str]] = Field(default_factory=lambda: [list(p) for p in DEFAULT_PAIRS],
                                   description="Bracket pairs whose contents never split")
    segmenter: SegmenterCfg = Field(default_factory=SegmenterCfg)
    
    class Config:
        extra = "forbid"  # Strict validation
        
    def validate_characters(self) -> List[str]:
        """Validate separator and pair characters and return any issues."""
        issues = []
        
        # An empty separator list is allowed: the rule simply never fires
        bad = [c for c in self.separators.characters if len(c) != 1]
        if bad:
            issues.append(f"Separators must be single characters: {bad}")
            
        quotes = [c for c in self.separators.characters if c in CLOSING_QUOTES]
        if quotes:
            issues.append(f"Closing quotes cannot be separators: {quotes}")
            
        for pair in self.pairs:
            if len(pair) != 2 or any(len(c) != 1 for c in pair):
                issues.append(f"Pair must be two single characters: {pair}")
            elif pair[0] == pair[1]:
                issues.append(f"Pair opener and closer must differ: {pair}")
                
        return issues
