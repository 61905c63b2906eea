from __future__ import annotations

from pathlib import Path

import pytest

from har_timings.models import HarLoadError, HarResponse, load_har
from tests.conftest import entry_payload


def test_load_har(write_har) -> None:
    path = write_har([entry_payload(), entry_payload(status=404)])

    har = load_har(path)

    assert [e.response.status for e in har.log.entries] == [200, 404]
    entry = har.log.entries[0]
    assert entry.request.headers_size == 300
    assert entry.response.content is not None
    assert entry.response.content.size == 1500
    assert entry.timings.blocked == -1.0
    assert entry.timings.wait == 50.0


def test_missing_optional_fields_use_har_defaults(write_har) -> None:
    payload = {
        "time": 5,
        "request": {"method": "GET", "url": "https://example.com/"},
        "response": {"status": 200},
        "timings": {"wait": 4, "receive": 1},
    }

    entry = load_har(write_har([payload])).log.entries[0]

    assert entry.request.body_size == -1
    assert entry.response.headers == []
    assert entry.response.content is None
    assert entry.timings.send == -1.0


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.har"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(HarLoadError, match="invalid JSON") as exc_info:
        load_har(path)

    assert exc_info.value.path == path


def test_missing_timings_block(write_har) -> None:
    payload = entry_payload()
    del payload["timings"]

    with pytest.raises(HarLoadError, match="not a valid HAR document"):
        load_har(write_har([payload]))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(HarLoadError, match="cannot read file"):
        load_har(tmp_path / "absent.har")


def test_response_header_lookup_is_case_insensitive() -> None:
    response = HarResponse.model_validate(
        {"status": 200, "headers": [{"name": "content-ENCODING", "value": "br"}]}
    )

    assert response.header("Content-Encoding") == "br"
    assert response.header("Server") is None


def test_fractional_sizes_load(write_har) -> None:
    payload = entry_payload(
        request={"bodySize": 12.0},
        response={"content": {"size": 2048.5, "compression": 1024.25}, "bodySize": 1024.25},
    )

    entry = load_har(write_har([payload])).log.entries[0]

    assert entry.request.body_size == 12.0
    assert entry.response.content is not None
    assert entry.response.content.compression == 1024.25
