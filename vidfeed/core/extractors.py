"""Network extractors for the mirror API and the channel feed."""

from __future__ import annotations

from typing import Callable
import urllib.parse
import xml.etree.ElementTree as ET

import requests

from .errors import SourceUnavailableError
from .helpers import from_unix, parse_timestamp
from .models import VideoSummary

LogFn = Callable[[str], None]

FEED_URL = "https://www.youtube.com/feeds/videos.xml?channel_id={channel_id}"

FEED_NS = {
    "atom": "http://www.w3.org/2005/Atom",
    "yt": "http://www.youtube.com/xml/schemas/2015",
}

JSON_HEADERS = {"Accept": "application/json"}


def resolve_channel_id(
    session: requests.Session,
    mirror: str,
    channel_url: str,
    timeout: float = 5.0,
) -> str:
    """Ask a mirror for the channel id behind a handle URL."""
    resolve_url = f"{mirror.rstrip('/')}/api/v1/resolveurl?url={urllib.parse.quote(channel_url, safe='')}"
    response = session.get(resolve_url, headers=JSON_HEADERS, timeout=timeout)
    if not response.ok:
        raise SourceUnavailableError(f"Failed to resolve handle (HTTP {response.status_code})", source=mirror)
    data = response.json()
    channel_id = data.get("ucid") if isinstance(data, dict) else None
    if not channel_id:
        raise SourceUnavailableError("No channel ID found", source=mirror)
    return str(channel_id)


def fetch_from_mirror(
    session: requests.Session,
    mirror: str,
    channel_url: str,
    count: int,
    *,
    resolve_timeout: float = 5.0,
    listing_timeout: float = 10.0,
    log: LogFn | None = None,
) -> list[VideoSummary]:
    """Resolve the channel on one mirror and list its newest videos."""
    logger = log or (lambda _msg: None)
    channel_id = resolve_channel_id(session, mirror, channel_url, timeout=resolve_timeout)
    logger(f"[Mirror] {mirror} resolved channel to {channel_id}")

    videos_url = f"{mirror.rstrip('/')}/api/v1/channels/{urllib.parse.quote(channel_id)}/videos?sort_by=newest"
    response = session.get(videos_url, headers=JSON_HEADERS, timeout=listing_timeout)
    if not response.ok:
        raise SourceUnavailableError(f"Failed to fetch videos (HTTP {response.status_code})", source=mirror)

    data = response.json()
    listing = data.get("videos") if isinstance(data, dict) else None

    videos: list[VideoSummary] = []
    for item in listing or []:
        if len(videos) >= count:
            break
        if not isinstance(item, dict) or not item.get("videoId"):
            continue
        video_id = str(item["videoId"])
        videos.append(
            VideoSummary(
                video_id=video_id,
                title=str(item.get("title") or ""),
                published=from_unix(item.get("published")),
            )
        )
    return videos


def parse_feed(xml_text: str | bytes, count: int | None = None) -> list[VideoSummary]:
    """Parse an Atom channel feed, dropping entries without an id or title.

    Raises ``xml.etree.ElementTree.ParseError`` on malformed documents.
    """
    root = ET.fromstring(xml_text)
    videos: list[VideoSummary] = []
    for entry in root.findall("atom:entry", FEED_NS):
        if count is not None and len(videos) >= count:
            break
        video_id = (entry.findtext("yt:videoId", default="", namespaces=FEED_NS) or "").strip()
        title = entry.findtext("atom:title", default="", namespaces=FEED_NS) or ""
        if not video_id or not title.strip():
            continue
        published = entry.findtext("atom:published", default=None, namespaces=FEED_NS)
        videos.append(
            VideoSummary(
                video_id=video_id,
                title=title.strip(),
                published=parse_timestamp(published),
            )
        )
    return videos


def fetch_from_feed(
    session: requests.Session,
    channel_id: str,
    count: int,
    *,
    timeout: float = 10.0,
    user_agent: str | None = None,
    log: LogFn | None = None,
) -> list[VideoSummary]:
    """Fetch the Atom feed for one channel id and parse its entries."""
    logger = log or (lambda _msg: None)
    feed_url = FEED_URL.format(channel_id=urllib.parse.quote(channel_id))
    headers = {"User-Agent": user_agent} if user_agent else {}
    response = session.get(feed_url, headers=headers, timeout=timeout)
    if not response.ok:
        raise SourceUnavailableError(f"Feed request failed (HTTP {response.status_code})", source=channel_id)

    text = response.text
    if "<entry" not in text:
        raise SourceUnavailableError("Feed has no entries", source=channel_id)

    try:
        videos = parse_feed(text, count)
    except ET.ParseError as exc:
        raise SourceUnavailableError(f"Malformed feed: {exc}", source=channel_id, original=exc) from exc
    logger(f"[Feed] {channel_id}: parsed {len(videos)} entries")
    return videos
