"""Thumbnail and timestamp helpers shared by the fetch strategies."""

from __future__ import annotations

from datetime import datetime, timezone

THUMBNAIL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"


def thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_TEMPLATE.format(video_id=video_id)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def from_unix(value) -> datetime:
    """Convert unix seconds to an aware datetime, or now when unusable."""
    if isinstance(value, bool):
        return utc_now()
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return utc_now()


def parse_timestamp(raw: str | None) -> datetime:
    """Parse an ISO 8601 timestamp as found in feeds, or now when unusable."""
    text = (raw or "").strip()
    if not text:
        return utc_now()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return utc_now()
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
