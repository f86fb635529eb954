"""Shared pytest fixtures and test helpers for homestaff tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from homestaff.config.models import AuthConfig, PluginsConfig, StoreConfig
from homestaff.config.settings import HomestaffSettings
from homestaff.infrastructure.store import EntityStore
from homestaff.infrastructure.workspace import Workspace
from homestaff.services.auth import AuthService

FAST_ITERATIONS = 1_000

FIXED_NOW = datetime(2026, 3, 2, 9, 0, tzinfo=UTC)


class FakeClock:
    """Deterministic clock for stores; advance it to order events."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> HomestaffSettings:
    """Seeded, plugin-free settings with cheap password hashing.

    Runs from an empty temp directory so no stray homestaff.toml is picked up.
    """
    monkeypatch.delenv("HOMESTAFF_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return HomestaffSettings.from_cli(
        start_dir=tmp_path,
        auth=AuthConfig(hash_iterations=FAST_ITERATIONS),
        plugins=PluginsConfig(enabled=False),
    )


@pytest.fixture
def store(clock: FakeClock) -> Iterator[EntityStore]:
    """Empty store on a fresh in-memory database."""
    s = EntityStore(clock=clock)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def workspace(settings: HomestaffSettings, clock: FakeClock) -> Iterator[Workspace]:
    """Workspace holding the demo household (owner, maid1, maid2; password 1234)."""
    ws = Workspace(settings, store=EntityStore(clock=clock))
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def empty_workspace(settings: HomestaffSettings, clock: FakeClock) -> Iterator[Workspace]:
    """Workspace with no users, tasks, or notifications."""
    unseeded = settings.model_copy(update={"store": StoreConfig(seed_demo_data=False)})
    ws = Workspace(unseeded, store=EntityStore(clock=clock))
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def fast_cli_hashing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Make CLI-built workspaces hash cheaply and ignore any real config."""
    monkeypatch.delenv("HOMESTAFF_CONFIG", raising=False)
    monkeypatch.setenv("HOMESTAFF_AUTH__HASH_ITERATIONS", str(FAST_ITERATIONS))
    monkeypatch.setenv("HOMESTAFF_PLUGINS__ENABLED", "false")
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------


def login(workspace: Workspace, username: str, role: str | None = None) -> str:
    """Log a seeded user in with the demo password and return the session token."""
    if role is None:
        role = "owner" if username == "owner" else "maid"
    result = AuthService(workspace).login(username, "1234", role)
    assert result.ok, result.error
    return str(result.data["session_token"])


@pytest.fixture
def session_for(workspace: Workspace) -> Callable[..., str]:
    """``session_for("maid1")`` -> token for the seeded maid1."""
    return lambda username, role=None: login(workspace, username, role)


@pytest.fixture
def owner_token(workspace: Workspace) -> str:
    return login(workspace, "owner")


@pytest.fixture
def maid1_token(workspace: Workspace) -> str:
    return login(workspace, "maid1")


@pytest.fixture
def maid2_token(workspace: Workspace) -> str:
    return login(workspace, "maid2")
