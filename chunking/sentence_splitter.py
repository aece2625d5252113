"""
Sentence Splitter for the Chunking Pipeline

Punctuation-based sentence detection used when a single page is too large
to become one chunk.

Design:
- A sentence is a maximal run of non-terminator characters followed by one
  or more terminators from {. ! ?}. "Wait?!" is one sentence.
- Whatever is left once all sentences are removed (typically a trailing
  fragment without punctuation) becomes one final sentence.
- No abbreviation handling, no external dependencies.

Usage:
    from chunking.sentence_splitter import split_sentences

    sentences = split_sentences("First one. Second one! Tail")
    # ["First one.", "Second one!", "Tail"]
"""

import re

_SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences at terminating punctuation.

    Args:
        text: Input text to split into sentences.

    Returns:
        List of sentence strings in their original order, each stripped of
        surrounding whitespace. Empty/whitespace input returns an empty list.
    """
    if not text or not text.strip():
        return []

    sentences = [m.group().strip() for m in _SENTENCE_PATTERN.finditer(text)]

    leftover = _SENTENCE_PATTERN.sub("", text).strip()
    if leftover:
        sentences.append(leftover)

    return sentences
