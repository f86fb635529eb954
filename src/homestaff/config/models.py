"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, homestaff.toml only contains
overrides. An empty file (or none at all) gives a seeded demo household.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from homestaff.domain.credentials import DEFAULT_ITERATIONS
from homestaff.infrastructure.sessions import DEFAULT_TOKEN_BYTES


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    seed_demo_data: bool = True


class AuthConfig(BaseModel):
    """[auth] section."""

    model_config = {"frozen": True}

    hash_iterations: int = Field(default=DEFAULT_ITERATIONS, ge=1)
    session_token_bytes: int = Field(default=DEFAULT_TOKEN_BYTES, ge=16)


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    max_retries: int = Field(default=3, ge=1)
