from __future__ import annotations

from pathlib import Path

import pytest

from settings.config import ConfigError, load_config


def _write_config(root: Path, toml_content: str) -> None:
    (root / "docsnap.toml").write_text(toml_content, encoding="utf-8")


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.screen_width == 72
    assert config.snapshot == "snapshots/clojuredocs-snapshot-latest.json"
    assert config.remote.base_url == "http://api.clojuredocs.org"


def test_empty_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_config(tmp_path).screen_width == 72


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_remote_key_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[remote]
base_url = "http://localhost:8080"
bogus = 1
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_positive_screen_width_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "screen_width = 0")

    with pytest.raises(ConfigError, match="screen_width"):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "screen_width = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
snapshot = "data/snap.json"
screen_width = 100

[remote]
base_url = "http://localhost:8080"
timeout_s = 5
max_retries = 0
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.screen_width == 100
    assert config.snapshot_path(tmp_path) == (tmp_path / "data" / "snap.json").resolve()
    assert config.remote.base_url == "http://localhost:8080"
    assert config.remote.timeout_s == 5
    assert config.remote.max_retries == 0
