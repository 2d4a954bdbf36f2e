"""Channel, endpoint and fallback settings for the fetcher."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from .models import VideoSummary

DEFAULT_CHANNEL_URL = "https://www.youtube.com/@PontusHultgren"

# Public Invidious instances, tried in this order.
DEFAULT_MIRRORS: tuple[str, ...] = (
    "https://vid.puffyan.us",
    "https://invidious.nerdvpn.de",
    "https://yt.artemislena.eu",
    "https://invidious.privacyredirect.com",
)

DEFAULT_FEED_CHANNEL_IDS: tuple[str, ...] = (
    "UCqhUaRrJLuuXJGMVj6jKSqQ",
    "UCi8e0iOVk1fEOogdfu4YgfA",
)


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


DEFAULT_FALLBACK_VIDEOS: tuple[VideoSummary, ...] = (
    VideoSummary("1mV8PpLc2Mo", "Sea of Stars | Battle Theme [Orchestral]", _date(2024, 5, 17)),
    VideoSummary("IfZfXbzJvJ8", "Sea of Stars | Encounter Elite [Orchestral]", _date(2024, 6, 1)),
    VideoSummary("2cqPki0q7Hc", "Final Fantasy VII - Those Who Fight - Orchestral", _date(2024, 1, 1)),
    VideoSummary("NyncAG8flno", "Final Fantasy V - Clash on the Big Bridge - Orchestral", _date(2023, 1, 1)),
    VideoSummary("WdFym7z9ukI", "Final Fantasy X | Enemy Attack [Orchestral]", _date(2023, 6, 1)),
)

DEFAULT_FEED_USER_AGENT = "Mozilla/5.0 (compatible; vidfeed/0.1)"


@dataclass(frozen=True)
class FetcherConfig:
    channel_url: str = DEFAULT_CHANNEL_URL
    mirrors: tuple[str, ...] = DEFAULT_MIRRORS
    feed_channel_ids: tuple[str, ...] = DEFAULT_FEED_CHANNEL_IDS
    fallback_videos: tuple[VideoSummary, ...] = field(default=DEFAULT_FALLBACK_VIDEOS)
    resolve_timeout: float = 5.0
    listing_timeout: float = 10.0
    feed_timeout: float = 10.0
    feed_user_agent: str = DEFAULT_FEED_USER_AGENT

    def replace(self, **changes) -> "FetcherConfig":
        """Return a copy with the given fields swapped out."""
        for key in ("mirrors", "feed_channel_ids", "fallback_videos"):
            if key in changes:
                changes[key] = tuple(changes[key])
        return replace(self, **changes)


DEFAULT_CONFIG = FetcherConfig()
