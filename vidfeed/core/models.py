"""Video records returned by the fetcher."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .helpers import thumbnail_url


@dataclass(frozen=True)
class VideoSummary:
    video_id: str
    title: str
    published: datetime

    @property
    def thumbnail_url(self) -> str:
        return thumbnail_url(self.video_id)

    def as_dict(self) -> dict[str, str]:
        return {
            "id": self.video_id,
            "title": self.title,
            "published": self.published.isoformat(),
            "thumbnail": self.thumbnail_url,
        }
