from __future__ import annotations

import json
from pathlib import Path

import pytest

from contabo_client.config import DEFAULT_SERVER, DEFAULT_TIMEOUT_SECONDS, ClientConfig, normalize_server


@pytest.mark.parametrize(
    ("server", "expected"),
    [
        ("https://api.contabo.com", "https://api.contabo.com/"),
        ("https://api.contabo.com/", "https://api.contabo.com/"),
        ("https://proxy.example.test/contabo//", "https://proxy.example.test/contabo/"),
    ],
)
def test_normalize_server_is_idempotent(server: str, expected: str) -> None:
    assert normalize_server(server) == expected
    assert normalize_server(normalize_server(server)) == expected


def test_defaults() -> None:
    cfg = ClientConfig()

    assert cfg.server == DEFAULT_SERVER == "https://api.contabo.com/"
    assert cfg.timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 30.0
    assert cfg.headers == {}


def test_from_env_reads_contabo_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTABO_API_BASE", "https://proxy.example.test/contabo")
    monkeypatch.setenv("CONTABO_TIMEOUT_MS", "45000")
    monkeypatch.setenv("CONTABO_ACCESS_TOKEN", " abc ")

    cfg = ClientConfig.from_env()

    assert cfg.server == "https://proxy.example.test/contabo/"
    assert cfg.timeout_seconds == 45.0
    assert cfg.headers["Authorization"] == "Bearer abc"


def test_from_env_ignores_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTABO_API_BASE", "   ")
    monkeypatch.setenv("CONTABO_TIMEOUT_MS", "-5")
    monkeypatch.delenv("CONTABO_ACCESS_TOKEN", raising=False)

    cfg = ClientConfig.from_env()

    assert cfg.server == DEFAULT_SERVER
    assert cfg.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert cfg.headers == {}


def test_from_file_loads_json_shape(tmp_path: Path) -> None:
    config_path = tmp_path / "contabo.json"
    config_path.write_text(
        json.dumps(
            {
                "server": "https://api.contabo.com",
                "timeoutMs": 10000,
                "headers": {"x-test": "ok", "x-blank": " ", "x-number": 1},
                "accessToken": "token",
            }
        ),
        encoding="utf-8",
    )

    cfg = ClientConfig.from_file(config_path)

    assert cfg.server == "https://api.contabo.com/"
    assert cfg.timeout_seconds == 10.0
    assert cfg.headers == {"x-test": "ok", "Authorization": "Bearer token"}


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_from_file_falls_back_to_defaults(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "contabo.json"
    config_path.write_text(content, encoding="utf-8")

    cfg = ClientConfig.from_file(config_path)

    assert cfg.server == DEFAULT_SERVER
    assert cfg.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert cfg.headers == {}


def test_from_file_missing_path_uses_defaults(tmp_path: Path) -> None:
    cfg = ClientConfig.from_file(tmp_path / "absent.json")

    assert cfg.server == DEFAULT_SERVER
