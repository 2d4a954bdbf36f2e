from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, text: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Routes GET calls by URL prefix; unknown URLs time out."""

    def __init__(self, routes: dict | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: list[tuple[str, dict, float]] = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, dict(headers or {}), timeout))
        for prefix, handler in self.routes.items():
            if url.startswith(prefix):
                if isinstance(handler, Exception):
                    raise handler
                return handler
        raise requests.Timeout(f"timed out: {url}")

    def close(self) -> None:
        self.closed = True

    def urls(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_session():
    return FakeSession()


def feed_xml(*entries: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" '
        'xmlns="http://www.w3.org/2005/Atom">\n'
        "<title>Channel</title>\n" + "\n".join(entries) + "\n</feed>"
    )


def feed_entry(video_id: str | None, title: str | None, published: str | None = "2024-05-17T10:00:00+00:00") -> str:
    parts = ["<entry>"]
    if video_id is not None:
        parts.append(f"<yt:videoId>{video_id}</yt:videoId>")
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if published is not None:
        parts.append(f"<published>{published}</published>")
    parts.append("</entry>")
    return "".join(parts)
