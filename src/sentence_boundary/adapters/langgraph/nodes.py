"""LangGraph node factories for sentence splitting."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from .state_keys import INPUT_TEXT, SENTENCES

def make_sentence_split_node(segmenter: Segmenter,
                             text_key: str = INPUT_TEXT,
                             output_key: str = SENTENCES):
    """
    Create a LangGraph node that splits a state text into sentences.
    
    Args:
        segmenter: Segmenter whose split() yields Sentence spans
        text_key: State key containing the text to split
        output_key: State key receiving the sentence list
        
    Returns:
        RunnableLambda: Node that adds `{text, start, end}` sentence dicts to state
    """
    def _split_text(state):
        text = state.get(text_key, "")
        sentences = segmenter.split(text)
        return {output_key: [s.to_dict() for s in sentences]}
    
    return RunnableLambda(_split_text)
