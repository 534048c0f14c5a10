"""Configuration helpers for the Contabo client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_SERVER = "https://api.contabo.com/"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "cluster-api-provider-contabo"


@dataclass(slots=True)
class ClientConfig:
    server: str = DEFAULT_SERVER
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.server = normalize_server(self.server)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        server = _trim_or_default(os.getenv("CONTABO_API_BASE"), DEFAULT_SERVER)
        timeout_ms = _parse_positive_int(os.getenv("CONTABO_TIMEOUT_MS"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        headers: dict[str, str] = {}
        token = _trim_or_none(os.getenv("CONTABO_ACCESS_TOKEN"))
        if token:
            headers["Authorization"] = f"Bearer {token}"

        return cls(server=server, timeout_seconds=timeout_seconds, headers=headers)

    @classmethod
    def from_file(cls, path: str | Path) -> "ClientConfig":
        payload = load_config_file(path)

        server = _trim_or_default(payload.get("server"), DEFAULT_SERVER)
        timeout_ms = _parse_positive_int(payload.get("timeoutMs"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        headers: dict[str, str] = {}
        raw_headers = payload.get("headers")
        if isinstance(raw_headers, dict):
            for key, value in raw_headers.items():
                if isinstance(key, str) and isinstance(value, str) and key.strip() and value.strip():
                    headers[key] = value

        token = _trim_or_none(payload.get("accessToken"))
        if token:
            headers["Authorization"] = f"Bearer {token}"

        return cls(server=server, timeout_seconds=timeout_seconds, headers=headers)


def normalize_server(server: str) -> str:
    """Return ``server`` with exactly one trailing slash."""
    return server.rstrip("/") + "/"


def load_config_file(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}

    if not isinstance(parsed, dict):
        return {}
    return parsed


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _trim_or_default(value: Any, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    trimmed = value.strip()
    return trimmed if trimmed else fallback


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
