"""Relaxed link detection.

Finds substrings that look like URLs, with or without a scheme, so the
splitter can keep them out of its preferred cut points.
"""

import re
from typing import Optional, Protocol

Span = tuple[int, int]

# Generic TLDs accepted for bare domains; any two-letter ccTLD is accepted too.
GENERIC_TLDS = (
    "academy", "agency", "app", "art", "biz", "blog", "cafe", "cloud", "club",
    "codes", "com", "community", "dev", "edu", "email", "gov", "guru", "info",
    "int", "io", "land", "link", "live", "mil", "name", "net", "network",
    "news", "online", "org", "page", "photo", "pro", "run", "science", "shop",
    "site", "social", "space", "store", "systems", "tech", "tools", "town",
    "website", "wiki", "world", "xyz", "zone",
)

_LABEL = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
_SCHEME = r"[a-z][a-z0-9+.-]*://"
_IPV4 = r"(?:\d{1,3}\.){3}\d{1,3}"
_PORT = r"(?::\d{1,5})?"
_PATH = r"""(?:[/?#](?:[^\s<>"]*[^\s<>".,;:!?'()\[\]{}])?)?"""


def _build_pattern(tlds) -> re.Pattern:
    tld = "|".join(sorted(tlds, key=len, reverse=True))
    host = rf"(?:{_LABEL}\.)+(?:{tld}|[a-z]{{2}})(?![a-z0-9-])"
    return re.compile(
        rf"(?<![\w@./-])(?:{_SCHEME}(?:{host}|{_IPV4}|localhost)|{host}){_PORT}{_PATH}",
        flags=re.IGNORECASE,
    )


class SpanDetector(Protocol):
    def find_spans(self, text: str) -> list[Span]: ...


class LinkDetector:
    """Stateless URL finder; safe to share between threads."""

    def __init__(self, tlds: Optional[tuple[str, ...]] = None):
        self.pattern = _build_pattern(tlds or GENERIC_TLDS)

    def find_spans(self, text: str) -> list[Span]:
        """Return (start, end) offsets of every link in text, in order."""
        if not text:
            return []
        return [match.span() for match in self.pattern.finditer(text)]

    def find_links(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self.find_spans(text)]


DEFAULT_DETECTOR = LinkDetector()
