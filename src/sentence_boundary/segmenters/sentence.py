"""Deterministic sentence segmenter built on the separator rule."""

from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING
from ..core.abc import Logger, Meter
from ..core.chars import MAX_SEEK_ITERATIONS
from ..core.types import Sentence
from ..parser.pairs import PairTracker
from ..parser.separator import SeparatorRule
from ..source.source_code import SourceCode

if TYPE_CHECKING:
    from ..config.schema import SplitterConfig

class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.
    Walks the text with a SourceCode cursor, marks bracket asides as
    suppressed and asks the separator rule for boundaries at each position.
    """

    def __init__(self, min_length: int = 1, *,
                 rule: Optional[SeparatorRule] = None,
                 pairs: Optional[PairTracker] = None,
                 separator_characters: Optional[Sequence[str]] = None,
                 max_iterations: int = MAX_SEEK_ITERATIONS,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            min_length: Minimum character length for a segment returned by segment()
            rule: Separator rule to use (built from separator_characters if omitted)
            pairs: Bracket pair tracker (default pairs if omitted)
            separator_characters: Separator set for the default rule
            max_iterations: Seek cap for the default rule
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.min_length = min_length
        self.rule = rule or SeparatorRule(separator_characters,
                                          max_iterations=max_iterations,
                                          logger=logger, meter=meter)
        self.pairs = pairs or PairTracker()
        self.log = logger
        self.meter = meter

    @classmethod
    def from_config(cls, config: "SplitterConfig", logger: Optional[Logger] = None,
                    meter: Optional[Meter] = None) -> "SentenceSegmenter":
        """Build a segmenter from a validated SplitterConfig."""
        return cls(
            min_length=config.segmenter.min_length,
            pairs=PairTracker([tuple(p) for p in config.pairs]),
            separator_characters=config.separators.characters,
            max_iterations=config.separators.max_iterations,
            logger=logger,
            meter=meter,
        )

    def split(self, text: str, suppressed_ranges: Sequence[Tuple[int, int]] = ()) -> List[Sentence]:
        """
        Split text into sentences with their source spans.

        Args:
            text: Input text to split
            suppressed_ranges: Half-open (start, end) ranges where no sentence may end

        Returns:
            List[Sentence]: Sentences in source order, leading whitespace excluded
        """
        if not text.strip():
            return []

        source = SourceCode(text, suppressed_ranges)
        sentences: List[Sentence] = []
        start = 0

        while not source.has_end:
            self.pairs.track(source)
            if self.rule.test(source):
                if not self.rule.advance_past_boundary(source):
                    # An injected rule that claims a boundary but consumes nothing
                    source.advance()
                self._close(sentences, text, start, source.index)
                start = source.index
            else:
                source.advance()
        self._close(sentences, text, start, len(text))

        if self.meter:
            self.meter.inc("sentence_boundary.sentences", len(sentences))
            self.meter.observe("sentence_boundary.text_length", len(text))
        if self.log:
            self.log.info("sentence_split",
                          sentences=len(sentences),
                          text_length=len(text))
        return sentences

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences using deterministic rules.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of sentence segments
        """
        result = []
        for sentence in self.split(text):
            cleaned = self.clean(sentence)
            if cleaned is not None:
                result.append(cleaned)

        return result

    def clean(self, sentence: Sentence) -> Optional[str]:
        """Stripped sentence text, or None when it is blank or shorter than min_length."""
        stripped = sentence.text.strip()
        if stripped and len(stripped) >= self.min_length:
            return stripped
        return None

    @staticmethod
    def _close(sentences: List[Sentence], text: str, start: int, end: int) -> None:
        while start < end and text[start].isspace():
            start += 1
        if start < end:
            sentences.append(Sentence(text=text[start:end], start=start, end=end))
