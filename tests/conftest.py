from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from har_timings.models import HarEntry


def entry_payload(
    *,
    timings: dict[str, float] | None = None,
    status: int = 200,
    method: str = "GET",
    url: str = "https://example.com/",
    time: float | None = None,
    response: dict[str, Any] | None = None,
    request: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Raw HAR entry dictionary with sensible defaults."""
    timings = timings if timings is not None else {"wait": 50.0, "receive": 50.0}
    if time is None:
        time = sum(value for value in timings.values() if value > 0)
    return {
        "startedDateTime": "2024-01-01T00:00:00.000Z",
        "time": time,
        "request": {
            "method": method,
            "url": url,
            "httpVersion": "HTTP/1.1",
            "headers": [],
            "headersSize": 300,
            "bodySize": 0,
            **(request or {}),
        },
        "response": {
            "status": status,
            "statusText": "OK",
            "httpVersion": "HTTP/1.1",
            "headers": [],
            "content": {"size": 1500, "mimeType": "text/html"},
            "headersSize": 200,
            "bodySize": 1500,
            **(response or {}),
        },
        "cache": {},
        "timings": timings,
    }


@pytest.fixture
def make_entry() -> Callable[..., HarEntry]:
    def _make(**kwargs: Any) -> HarEntry:
        return HarEntry.model_validate(entry_payload(**kwargs))

    return _make


@pytest.fixture
def write_har(tmp_path: Path) -> Callable[..., Path]:
    def _write(entries: list[dict[str, Any]], name: str = "capture.har") -> Path:
        target = tmp_path / name
        target.write_text(
            json.dumps({"log": {"version": "1.2", "entries": entries}}), encoding="utf-8"
        )
        return target

    return _write
