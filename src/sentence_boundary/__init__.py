"""
sentence-boundary - Deterministic sentence-boundary detection over a character cursor.

The separator rule decides whether terminal punctuation really ends a sentence
using finite lookahead only. Cursors, loggers and meters are injected by the
host pipeline.
"""

__version__ = "0.1.0"
