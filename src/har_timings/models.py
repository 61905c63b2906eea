"""HAR models (HTTP Archive 1.2 subset) and loader."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class HarLoadError(Exception):
    """Raised when a HAR file cannot be read or does not match the HAR shape."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


# =============================================================================
# HAR Models
# =============================================================================


class HarHeader(BaseModel):
    """HTTP header name-value pair."""

    name: str
    value: str


class HarRequest(BaseModel):
    """HTTP request."""

    method: str
    url: str
    headers: list[HarHeader] = Field(default_factory=list)
    headers_size: float = Field(-1, alias="headersSize")
    body_size: float = Field(-1, alias="bodySize")


class HarContent(BaseModel):
    """Response body details."""

    size: float = 0
    compression: float | None = None
    mime_type: str | None = Field(None, alias="mimeType")


class HarResponse(BaseModel):
    """HTTP response."""

    status: int
    status_text: str = Field("", alias="statusText")
    headers: list[HarHeader] = Field(default_factory=list)
    content: HarContent | None = None
    headers_size: float = Field(-1, alias="headersSize")
    body_size: float = Field(-1, alias="bodySize")

    def header(self, name: str) -> str | None:
        """Return the first header value matching ``name`` case-insensitively."""
        lowered = name.lower()
        for header in self.headers:
            if header.name.lower() == lowered:
                return header.value
        return None


class HarTimings(BaseModel):
    """Request/response timings (all in milliseconds, -1 when not measured)."""

    blocked: float | None = -1.0
    dns: float | None = -1.0
    connect: float | None = -1.0
    ssl: float | None = -1.0
    send: float | None = -1.0
    wait: float
    receive: float


class HarEntry(BaseModel):
    """Single HTTP transaction."""

    time: float
    request: HarRequest
    response: HarResponse
    timings: HarTimings


class HarLog(BaseModel):
    """HAR log container."""

    entries: list[HarEntry]


class Har(BaseModel):
    """Root HAR object."""

    log: HarLog


# =============================================================================
# Loader
# =============================================================================


def load_har(path: Path) -> Har:
    """Read and validate a HAR file."""
    logger.info(f"Parsing HAR file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            raw_data = json.load(f)
    except OSError as exc:
        raise HarLoadError(path, f"cannot read file ({exc.strerror or exc})") from exc
    except json.JSONDecodeError as exc:
        raise HarLoadError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    try:
        har = Har.model_validate(raw_data)
    except ValidationError as exc:
        raise HarLoadError(
            path, f"not a valid HAR document ({exc.error_count()} validation errors)"
        ) from exc

    logger.info(f"Parsed {len(har.log.entries)} entries")
    return har
