"""Thread planning: wrap split parts as posts and chain their publication."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.splitter import PlatformConfig, split_for_platform


@dataclass(frozen=True)
class ThreadPost:
    text: str
    language: str = "en"


# send(post, root, parent) publishes one post and returns its reference.
SendFn = Callable[[ThreadPost, Optional[Any], Optional[Any]], Any]


class ThreadPublishError(RuntimeError):
    """A post in the thread could not be sent."""

    def __init__(self, index: int, total: int, sent: list):
        super().__init__(f"error sending post {index + 1} of a thread of length {total}")
        self.index = index
        self.total = total
        self.sent = sent


def build_thread(text: str, config: PlatformConfig, language: str = "en") -> list[ThreadPost]:
    """Split text for a platform and tag every part with a language."""
    return [ThreadPost(part, language) for part in split_for_platform(text, config)]


def publish_thread(posts: list[ThreadPost], send: SendFn) -> list:
    """Send posts in order, each replying to the previous one.

    The first post is sent with no root and no parent. Every later post
    gets the first post's reference as root and the previous post's
    reference as parent.

    Returns:
        The references returned by send, in thread order.
    """
    refs = []
    for i, post in enumerate(posts):
        root = refs[0] if refs else None
        parent = refs[-1] if refs else None
        try:
            refs.append(send(post, root, parent))
        except Exception as e:
            raise ThreadPublishError(i, len(posts), list(refs)) from e
    return refs
