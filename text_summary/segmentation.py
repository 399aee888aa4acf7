"""
Unicode text segmentation (UAX #29).

Sentence boundaries and word segments come from `uniseg`. Segments with no
letter or digit (blank lines, stray punctuation) are not sentences or words.
Sentence spans are character offsets into the Python `str`.
"""
from __future__ import annotations
from typing import Iterator, List, Tuple

from uniseg.sentencebreak import sentence_boundaries
from uniseg.wordbreak import words


def has_alnum(segment: str) -> bool:
    return any(ch.isalnum() for ch in segment)


def split_sentences(text: str) -> List[Tuple[int, int]]:
    """Split `text` into ``(start, end)`` sentence spans.

    Each span keeps its trailing spaces and paragraph separator. Segments
    without a letter or digit are skipped, so the spans need not cover the
    whole text.
    """
    if not text:
        return []
    bounds = list(sentence_boundaries(text))
    return [
        (start, end)
        for start, end in zip(bounds, bounds[1:])
        if has_alnum(text[start:end])
    ]


def iter_words(text: str) -> Iterator[str]:
    """Yield the word segments of `text` that contain a letter or digit."""
    for segment in words(text):
        if has_alnum(segment):
            yield segment
