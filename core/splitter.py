"""Thread splitter for cross-platform posting.

Splits text into thread parts that fit a platform's grapheme limit,
preferring sentence boundaries, then line-break opportunities, and
keeping links whole whenever the budget allows it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from core.graphemes import Cluster, grapheme_length, scan
from core.links import DEFAULT_DETECTOR, Span, SpanDetector

logger = logging.getLogger(__name__)

DEFAULT_END_MARKER = "..."

# Fraction of the budget after which boundaries are recorded as cut points.
SENTENCE_WINDOW = 0.90
LINE_BREAK_WINDOW = 0.95


class InvalidLimit(ValueError):
    """The end marker does not leave room for any content."""

    def __init__(self, limit: int, end_marker: str):
        super().__init__("end marker does not fit within the configured length limit")
        self.limit = limit
        self.end_marker = end_marker


@dataclass(frozen=True)
class PlatformConfig:
    name: str
    char_limit: int
    end_marker: str = DEFAULT_END_MARKER


BLUESKY = PlatformConfig("Bluesky", 300)
MASTODON = PlatformConfig("Mastodon", 500)


@dataclass(frozen=True)
class Candidate:
    """A cut offset and the number of clusters before it in the part."""

    offset: int
    count: int


def _rebase(candidate: Optional[Candidate], cut: Candidate) -> Optional[Candidate]:
    """Re-express a link entry point relative to a new cut."""
    if candidate is None:
        return None
    if candidate.offset < cut.offset:
        # The link started in an earlier part; it can no longer be backed up to.
        return Candidate(cut.offset, 0)
    return Candidate(candidate.offset, candidate.count - cut.count)


class _SpanCursor:
    """Finds the protected span holding each cluster, walking forward only."""

    def __init__(self, spans: list[Span]):
        self.spans = sorted(spans)
        self.index = 0

    def containing(self, cluster: Cluster) -> Optional[int]:
        while self.index < len(self.spans) and self.spans[self.index][1] <= cluster.start:
            self.index += 1
        if self.index == len(self.spans):
            return None
        start, end = self.spans[self.index]
        if start <= cluster.start and cluster.end <= end:
            return self.index
        return None

    def end_of(self, index: int) -> int:
        return self.spans[index][1]


def effective_limit(limit: int, end_marker: str) -> int:
    """Clusters left for content once the end marker is reserved."""
    return limit - grapheme_length(end_marker)


def split(
    text: str,
    limit: int,
    end_marker: str = DEFAULT_END_MARKER,
    detector: Optional[SpanDetector] = None,
) -> list[str]:
    """Split text into thread parts.

    Args:
        text: The full post text.
        limit: Grapheme limit of a single post, end marker included.
        end_marker: Suffix appended to every part but the last.
        detector: Link finder; spans it reports are never used as
            preferred cut points.

    Returns:
        Ordered parts whose bodies, with markers removed, concatenate back
        to text. Empty text yields an empty list.

    Raises:
        InvalidLimit: If the end marker alone fills the limit.
    """
    budget = effective_limit(limit, end_marker)
    if budget <= 0:
        raise InvalidLimit(limit, end_marker)

    detector = detector or DEFAULT_DETECTOR
    links = _SpanCursor(detector.find_spans(text))

    parts = []
    count = 0
    last_cut = 0
    sentence: Optional[Candidate] = None
    line_break: Optional[Candidate] = None
    # Where the link holding the current cluster begins, keyed by span index.
    link_index: Optional[int] = None
    link_entry: Optional[Candidate] = None

    for cluster in scan(text):
        count += 1
        protected = links.containing(cluster)

        if protected is None:
            link_index, link_entry = None, None
        elif protected != link_index:
            link_index, link_entry = protected, Candidate(cluster.start, count - 1)

        if count == budget and cluster.end < len(text):
            if sentence is not None:
                cut, kind = sentence, "sentence"
            elif line_break is not None:
                cut, kind = line_break, "line break"
            elif (
                protected is not None
                and cluster.end < links.end_of(protected)
                and link_entry.count > 0
            ):
                cut, kind = link_entry, "before link"
            else:
                cut, kind = Candidate(cluster.end, count), "hard"

            logger.debug("cutting thread part at %d (%s)", cut.offset, kind)
            parts.append(text[last_cut:cut.offset] + end_marker)
            last_cut = cut.offset
            count -= cut.count
            sentence, line_break = None, None
            link_entry = _rebase(link_entry, cut)

        if protected is not None:
            continue

        fill = count / budget
        if fill >= SENTENCE_WINDOW and cluster.sentence_end:
            sentence = Candidate(cluster.end, count)
        if fill >= LINE_BREAK_WINDOW and cluster.can_break:
            line_break = Candidate(cluster.end, count)

    if count > 0:
        parts.append(text[last_cut:])

    return parts


def split_for_platform(text: str, config: PlatformConfig) -> list[str]:
    """Split text into thread parts for a given platform."""
    return split(text, config.char_limit, config.end_marker)
