"""Core utilities for vidfeed."""

from .config import DEFAULT_CONFIG, FetcherConfig
from .errors import SourceUnavailableError
from .extractors import fetch_from_feed, fetch_from_mirror, parse_feed, resolve_channel_id
from .fetcher import (
    SOURCE_FALLBACK,
    SOURCE_FEED,
    SOURCE_MIRROR,
    SOURCE_NONE,
    FetchResults,
    VideoFetcher,
    get_latest_videos,
)
from .helpers import thumbnail_url
from .models import VideoSummary

__all__ = [
    "DEFAULT_CONFIG",
    "FetcherConfig",
    "SourceUnavailableError",
    "fetch_from_feed",
    "fetch_from_mirror",
    "parse_feed",
    "resolve_channel_id",
    "thumbnail_url",
    "SOURCE_FALLBACK",
    "SOURCE_FEED",
    "SOURCE_MIRROR",
    "SOURCE_NONE",
    "FetchResults",
    "VideoFetcher",
    "VideoSummary",
    "get_latest_videos",
]
