from __future__ import annotations

import os
from pathlib import Path

import pytest

from nmlgraph.config import (
    ALBUM_KEY_VAR,
    COLLECTION_PATH_VAR,
    CollectionConfig,
    ConfigurationError,
    MissingConfigurationError,
    get_collection_config,
    optional_env_var,
    parse_album_key_mode,
    require_env_var,
    require_env_vars,
)
from nmlgraph.domain.model import AlbumKeyMode


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_B", raising=False)
    monkeypatch.delenv("MISSING_A", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_optional_env_var_strips_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMP_VAR", "  123 ")

    assert os.getenv("TEMP_VAR") == "  123 "
    assert optional_env_var("TEMP_VAR") == "123"


def test_collection_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(COLLECTION_PATH_VAR, raising=False)
    monkeypatch.delenv(ALBUM_KEY_VAR, raising=False)

    config = get_collection_config()

    assert config == CollectionConfig()
    assert config.path == Path("collection.nml")
    assert config.album_key_mode is AlbumKeyMode.TITLE


def test_collection_config_reads_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(COLLECTION_PATH_VAR, str(tmp_path / "library.nml"))
    monkeypatch.setenv(ALBUM_KEY_VAR, " Artist-Title ")

    config = get_collection_config()

    assert config.path == tmp_path / "library.nml"
    assert config.album_key_mode is AlbumKeyMode.ARTIST_TITLE


def test_collection_config_rejects_unknown_album_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ALBUM_KEY_VAR, "by-genre")

    with pytest.raises(ConfigurationError, match="by-genre"):
        get_collection_config()


def test_parse_album_key_mode_accepts_values() -> None:
    assert parse_album_key_mode("title") is AlbumKeyMode.TITLE
    assert parse_album_key_mode("artist-title") is AlbumKeyMode.ARTIST_TITLE


def test_resolve_path_expands_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    config = CollectionConfig(path=Path("~/collection.nml"))

    assert config.resolve_path() == (tmp_path / "collection.nml").resolve()
