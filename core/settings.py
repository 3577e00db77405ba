"""Environment-driven settings for thread splitting and the preview server."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from core.splitter import BLUESKY, DEFAULT_END_MARKER, MASTODON, PlatformConfig


@dataclass
class Settings:
    platforms: dict[str, PlatformConfig] = field(default_factory=dict)
    language: str = "en"
    host: str = "localhost"
    port: int = 5001
    log_level: str = "INFO"


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment (os.environ by default).

    Call load_dotenv() first to pick up a .env file.
    """
    if environ is None:
        environ = os.environ

    # An empty marker is allowed; only an unset variable falls back to the default.
    end_marker = environ.get("THREAD_END_MARKER", DEFAULT_END_MARKER)
    platforms = {
        "bluesky": PlatformConfig(
            BLUESKY.name,
            _positive_int(environ, "BLUESKY_CHAR_LIMIT", BLUESKY.char_limit),
            end_marker,
        ),
        "mastodon": PlatformConfig(
            MASTODON.name,
            _positive_int(environ, "MASTODON_CHAR_LIMIT", MASTODON.char_limit),
            end_marker,
        ),
    }

    return Settings(
        platforms=platforms,
        language=environ.get("DEFAULT_LANGUAGE", "").strip() or "en",
        host=environ.get("PREVIEW_HOST", "").strip() or "localhost",
        port=_positive_int(environ, "PREVIEW_PORT", 5001),
        log_level=(environ.get("LOG_LEVEL", "").strip() or "INFO").upper(),
    )
