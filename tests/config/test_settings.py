"""Tests for HomestaffSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from homestaff.config.settings import HomestaffSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "HOMESTAFF_CONFIG",
        "HOMESTAFF_AUTH__HASH_ITERATIONS",
        "HOMESTAFF_PLUGINS__ENABLED",
        "HOMESTAFF_SERVER__PORT",
    ):
        monkeypatch.delenv(var, raising=False)


class TestHomestaffSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = HomestaffSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.store.seed_demo_data is True
        assert settings.server.transport == "stdio"
        assert settings.server.port == 8000
        assert settings.plugins.enabled is True
        assert settings.plugins.max_retries == 3

    def test_frozen(self, tmp_path: Path) -> None:
        settings = HomestaffSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "homestaff.toml").write_text(
            '[server]\ntransport = "sse"\nport = 9100\n[store]\nseed_demo_data = false\n'
        )
        settings = HomestaffSettings.from_cli(start_dir=tmp_path)
        assert settings.server.transport == "sse"
        assert settings.server.port == 9100
        assert settings.server.host == "127.0.0.1"
        assert settings.store.seed_demo_data is False
        assert settings.config_path == tmp_path / "homestaff.toml"

    def test_found_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "homestaff.toml").write_text("[plugins]\nenabled = false\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = HomestaffSettings.from_cli(start_dir=child)
        assert settings.plugins.enabled is False

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "homestaff.toml").write_text("")
        settings = HomestaffSettings.from_cli(start_dir=tmp_path)
        assert settings.auth.session_token_bytes == 32

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "house.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[auth]\nhash_iterations = 5000\n")
        settings = HomestaffSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.auth.hash_iterations == 5000
        assert settings.config_path == custom

    def test_missing_explicit_path_means_no_file(self, tmp_path: Path) -> None:
        (tmp_path / "homestaff.toml").write_text("[server]\nport = 1\n")
        settings = HomestaffSettings.from_cli(
            config_path=str(tmp_path / "nope.toml"), start_dir=tmp_path
        )
        assert settings.config_path is None
        assert settings.server.port == 8000

    def test_invalid_toml_is_a_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "homestaff.toml").write_text("[server\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            HomestaffSettings.from_cli(start_dir=tmp_path)

    def test_invalid_value_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "homestaff.toml").write_text('[server]\ntransport = "carrier-pigeon"\n')
        with pytest.raises(Exception):
            HomestaffSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "homestaff.toml").write_text("[server]\nport = 9100\n")
        monkeypatch.setenv("HOMESTAFF_SERVER__PORT", "9200")
        settings = HomestaffSettings.from_cli(start_dir=tmp_path)
        assert settings.server.port == 9200

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = HomestaffSettings.from_cli(
            start_dir=tmp_path, json_output=True, quiet=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True
