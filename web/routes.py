"""Route handlers for the thread preview server."""

import logging

from flask import Blueprint, current_app, jsonify, request

from core.graphemes import grapheme_length
from core.splitter import InvalidLimit, PlatformConfig, effective_limit
from core.thread_plan import build_thread

logger = logging.getLogger(__name__)

bp = Blueprint("main", __name__)


def _settings():
    return current_app.config["THREAD_SETTINGS"]


def _parse_limit(value) -> int:
    if isinstance(value, bool):
        raise ValueError("limit must be a positive integer")
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValueError("limit must be a positive integer") from None
    if limit <= 0:
        raise ValueError("limit must be a positive integer")
    return limit


@bp.route("/api/platforms")
def platforms():
    """List configured platforms with their limits."""
    return jsonify({
        key: {
            "name": config.name,
            "limit": config.char_limit,
            "endMarker": config.end_marker,
        }
        for key, config in _settings().platforms.items()
    })


def _parse_preview_request(data):
    """Validate a preview body; returns (text, platform keys or None, marker or None)."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")

    text = data.get("text")
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise ValueError("text must be a string")

    keys = data.get("platforms")
    if keys is not None and (
        not isinstance(keys, list) or not all(isinstance(key, str) for key in keys)
    ):
        raise ValueError("platforms must be a list of platform names")

    marker = data.get("endMarker")
    if marker is not None and not isinstance(marker, str):
        raise ValueError("endMarker must be a string")

    return text, keys, marker


@bp.route("/api/preview", methods=["POST"])
def preview():
    """Return thread split preview for all requested platforms."""
    data = request.get_json(silent=True)
    try:
        text, keys, marker_override = _parse_preview_request(data)
        limit = data.get("limit") if data else None
        limit_override = _parse_limit(limit) if limit is not None else None
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    settings = _settings()
    configured = settings.platforms

    result = {}
    for key in keys or list(configured):
        config = configured.get(key)
        if not config:
            continue

        config = PlatformConfig(
            config.name,
            limit_override or config.char_limit,
            config.end_marker if marker_override is None else marker_override,
        )

        try:
            posts = build_thread(text, config, settings.language)
        except InvalidLimit as e:
            logger.info("preview rejected for %s: %s", key, e)
            return jsonify({"error": str(e), "platform": key}), 400

        result[key] = {
            "parts": [post.text for post in posts],
            "posts": [{"text": post.text, "language": post.language} for post in posts],
            "count": grapheme_length(text),
            "limit": config.char_limit,
            "effectiveLimit": effective_limit(config.char_limit, config.end_marker),
            "endMarker": config.end_marker,
        }

    return jsonify(result)
