"""Test configuration and fixtures."""

import pytest
from collections import Counter
from pathlib import Path
import tempfile

from sentence_boundary.config.loader import load_config_from_string
from sentence_boundary.parser.separator import SeparatorRule
from sentence_boundary.source.source_code import SourceCode


@pytest.fixture
def rule():
    """Provide a separator rule with the default separator set."""
    return SeparatorRule()


@pytest.fixture
def cursor_at():
    """Provide a factory for cursors positioned at a given index."""
    def _make(text, index=0, suppressed_ranges=()):
        source = SourceCode(text, suppressed_ranges)
        source.index = index
        return source
    return _make


@pytest.fixture
def sample_config_yaml():
    """Provide a sample splitter config YAML for testing."""
    return """
version: 1
separators:
  characters: [".", "?", "!", "\\n"]
  max_iterations: 50
pairs:
  - ["(", ")"]
  - ["[", "]"]
segmenter:
  min_length: 2
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures counters and observations."""
    
    def __init__(self):
        self.counters = Counter()
        self.observations = {}
    
    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] += amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations[name] = value


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures counters."""
    return SimpleTestMeter()
