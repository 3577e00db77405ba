"""Grapheme cluster scanner.

Walks text one user-perceived character at a time, reporting for each
cluster its offsets and whether a sentence boundary or a line-break
opportunity follows it.
"""

from dataclasses import dataclass
from typing import Iterator

import grapheme
from uniseg.linebreak import line_break_boundaries
from uniseg.sentencebreak import sentence_boundaries


@dataclass(frozen=True)
class Cluster:
    start: int
    end: int
    sentence_end: bool = False
    can_break: bool = False


def grapheme_length(text: str) -> int:
    """Number of grapheme clusters in text."""
    return grapheme.length(text)


def _advance(boundaries: Iterator[int], current: int, offset: int) -> int:
    """Move a boundary iterator to the first boundary >= offset."""
    while current < offset:
        current = next(boundaries, -1)
        if current == -1:
            break
    return current


def scan(text: str) -> Iterator[Cluster]:
    """Yield the grapheme clusters of text in order.

    Offsets are str indices. Boundary facts are looked up at each
    cluster's end offset, so a boundary falling inside a cluster is
    never reported.
    """
    if not text:
        return

    sentences = iter(sentence_boundaries(text))
    breaks = iter(line_break_boundaries(text))
    next_sentence = 0
    next_break = 0

    offset = 0
    for cluster in grapheme.graphemes(text):
        end = offset + len(cluster)
        if next_sentence != -1:
            next_sentence = _advance(sentences, next_sentence, end)
        if next_break != -1:
            next_break = _advance(breaks, next_break, end)
        yield Cluster(
            start=offset,
            end=end,
            sentence_end=next_sentence == end,
            can_break=next_break == end,
        )
        offset = end
