"""Splits text into sentences on terminal punctuation."""
import re


# A run of non-terminal characters closed by terminal punctuation and an
# optional quote, or the unterminated remainder at the end of the input.
_SENTENCE = re.compile(r'[^.!?]+[.!?]+["\']?|[^.!?]+\Z')
_MIN_SENTENCE_CHARS = 4


def tokenize(text: str) -> list[str]:
    """Split text into trimmed sentences, dropping fragments of 3 chars or fewer.

    This is a punctuation heuristic, not a linguistic sentence splitter.
    """
    sentences = (match.group().strip() for match in _SENTENCE.finditer(text))
    return [s for s in sentences if len(s) >= _MIN_SENTENCE_CHARS]


def count_words(text: str) -> int:
    return len(text.split())
