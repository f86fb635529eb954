"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from homestaff.config.models import AuthConfig, PluginsConfig, ServerConfig, StoreConfig


class TestSectionModels:
    def test_defaults(self) -> None:
        assert StoreConfig().seed_demo_data is True
        assert AuthConfig().hash_iterations >= 1
        assert ServerConfig().host == "127.0.0.1"
        assert PluginsConfig().enabled is True

    def test_sections_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig().port = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("model", "field"),
        [
            (AuthConfig, {"hash_iterations": 0}),
            (AuthConfig, {"session_token_bytes": 8}),
            (PluginsConfig, {"max_retries": 0}),
            (ServerConfig, {"transport": "telnet"}),
        ],
    )
    def test_bounds(self, model: type, field: dict) -> None:
        with pytest.raises(ValidationError):
            model(**field)

    def test_sparse_validation(self) -> None:
        cfg = ServerConfig.model_validate({"port": 9000})
        assert cfg.port == 9000
        assert cfg.transport == "stdio"
