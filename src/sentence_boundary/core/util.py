"""Small utility functions."""

import json
import unicodedata
from typing import Any, Optional

def describe_char(char: Optional[str]) -> str:
    """Readable name of a character for log output."""
    if char is None:
        return "<end>"
    name = unicodedata.name(char, None)
    if name is None:
        return f"U+{ord(char):04X}"
    return f"{name} (U+{ord(char):04X})"

def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling dataclasses and tuples."""
    def serialize_item(item):
        if hasattr(item, 'to_dict'):
            return serialize_item(item.to_dict())
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item
    
    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"
