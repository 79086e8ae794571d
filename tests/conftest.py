"""
Shared fixtures for the termfolio tests.
"""

import asyncio

import pytest

from termfolio.commands import CommandContext, command_registry
from termfolio.commands.loader import load_builtin_commands
from termfolio.config import Config
from termfolio.config.config import ADMIN_PASSWORD_ENV
from termfolio.core import PrivilegeMode
from termfolio.store import InMemoryContentStore

SECRET = "letmein"


@pytest.fixture(scope="session", autouse=True)
def builtin_commands():
    """Register every builtin verb on the global registry once."""
    load_builtin_commands()
    return command_registry


@pytest.fixture(autouse=True)
def no_password_env(monkeypatch):
    """Keep a developer's environment from overriding the test secret."""
    monkeypatch.delenv(ADMIN_PASSWORD_ENV, raising=False)


@pytest.fixture
def config():
    return Config(admin_password=SECRET)


@pytest.fixture
def store():
    """Seeded in-memory store accepting SECRET."""
    return InMemoryContentStore(admin_password=SECRET, seed=True)


@pytest.fixture
def empty_store():
    return InMemoryContentStore(admin_password=SECRET)


@pytest.fixture
def guest_ctx(store, config):
    return CommandContext(privilege=PrivilegeMode.GUEST, store=store, config=config)


@pytest.fixture
def admin_ctx(store, config):
    return CommandContext(privilege=PrivilegeMode.ADMIN, store=store, config=config)


@pytest.fixture
def run_command():
    """Dispatch one command line through the global registry."""
    def _run(ctx, line):
        return asyncio.run(command_registry.dispatch(line, ctx))
    return _run
