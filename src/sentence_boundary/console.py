"""Console implementations of the Logger and Meter protocols."""

import sys
from collections import Counter
from typing import TextIO, Optional


class ConsoleLogger:
    """Simple console logger writing `LEVEL: msg key=value` lines."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stderr
    
    def _emit(self, level: str, msg: str, kv: dict):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)
    
    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)
        
    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)
        
    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)


class CounterMeter:
    """In-memory meter keeping counter totals and the last observed values."""
    
    def __init__(self):
        self.counters: Counter = Counter()
        self.observations: dict = {}
    
    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        self.counters[name] += amount
    
    def observe(self, name: str, value: float, **tags: str) -> None:
        self.observations[name] = value
