"""Ordered fallback across mirrors, the channel feed and the static list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import requests

from .config import DEFAULT_CONFIG, FetcherConfig
from .extractors import fetch_from_feed, fetch_from_mirror
from .models import VideoSummary

LogFn = Callable[[str], None]

SOURCE_MIRROR = "mirror"
SOURCE_FEED = "feed"
SOURCE_FALLBACK = "fallback"
SOURCE_NONE = "none"


@dataclass
class FetchResults:
    """Videos plus where they came from; ``source`` is ``"none"`` when nothing was requested."""

    videos: list[VideoSummary]
    source: str
    origin: str | None = None
    errors: list[Exception] = field(default_factory=list)


class VideoFetcher:
    def __init__(
        self,
        *,
        config: FetcherConfig | None = None,
        session: requests.Session | None = None,
        log: LogFn | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.session = session or requests.Session()
        self.log = log or (lambda _msg: None)

    def get_latest_videos(self, count: int = 6) -> list[VideoSummary]:
        return self.fetch(count).videos

    def fetch(self, count: int = 6) -> FetchResults:
        if count <= 0:
            return FetchResults(videos=[], source=SOURCE_NONE)

        errors: list[Exception] = []

        for mirror in self.config.mirrors:
            try:
                videos = fetch_from_mirror(
                    self.session,
                    mirror,
                    self.config.channel_url,
                    count,
                    resolve_timeout=self.config.resolve_timeout,
                    listing_timeout=self.config.listing_timeout,
                    log=self.log,
                )
            except Exception as exc:
                errors.append(exc)
                self.log(f"[Mirror] {mirror} failed, trying next… ({exc})")
                continue
            if videos:
                self.log(f"Successfully fetched {len(videos)} videos from {mirror}")
                return FetchResults(videos=videos[:count], source=SOURCE_MIRROR, origin=mirror, errors=errors)
            self.log(f"[Mirror] {mirror} returned no videos.")

        for channel_id in self.config.feed_channel_ids:
            try:
                videos = fetch_from_feed(
                    self.session,
                    channel_id,
                    count,
                    timeout=self.config.feed_timeout,
                    user_agent=self.config.feed_user_agent,
                    log=self.log,
                )
            except Exception as exc:
                errors.append(exc)
                self.log(f"[Feed] {channel_id} failed ({exc})")
                continue
            if videos:
                self.log(f"Successfully fetched {len(videos)} videos from the channel feed")
                return FetchResults(videos=videos[:count], source=SOURCE_FEED, origin=channel_id, errors=errors)

        self.log("[Fallback] All sources failed, using static list.")
        return FetchResults(
            videos=list(self.config.fallback_videos[:count]),
            source=SOURCE_FALLBACK,
            errors=errors,
        )

    def close(self) -> None:
        self.session.close()


def get_latest_videos(count: int = 6, *, log: LogFn | None = None) -> list[VideoSummary]:
    """Fetch the newest videos of the default channel with a throwaway fetcher."""
    fetcher = VideoFetcher(log=log)
    try:
        return fetcher.get_latest_videos(count)
    finally:
        fetcher.close()
