"""Character classes and defaults shared by the separator rule and the pipeline."""

from typing import Tuple

PERIOD = "."

# Default separator characters, in order
DEFAULT_SEPARATORS: Tuple[str, ...] = (
    ".",       # period
    "．",  # full-width period
    "。",  # ideographic full stop
    "?",       # question mark
    "!",       # exclamation mark
    "？",  # full-width question mark
    "！",  # full-width exclamation mark
    "\n",
)

# Separators that need lookahead before they count as a boundary
AMBIGUOUS_SEPARATORS = frozenset({".", "?", "!"})

WHITESPACE = frozenset({" ", "\t", "\r", "\n"})

CLOSING_QUOTES = frozenset({'"', "'", "”", "’"})

# Bracket pairs whose contents never contain a sentence boundary
DEFAULT_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("(", ")"),
    ("（", "）"),
    ("「", "」"),
    ("『", "』"),
    ("[", "]"),
    ("【", "】"),
)

# Hard cap on consecutive boundary steps in one seek
MAX_SEEK_ITERATIONS = 1000
