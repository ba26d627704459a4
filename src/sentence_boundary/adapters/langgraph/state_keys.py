"""Default state key names for LangGraph integration."""

# Standard state keys used by sentence-boundary nodes
INPUT_TEXT = "input_text"
SENTENCES = "sentences"
