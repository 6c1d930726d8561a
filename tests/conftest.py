# topmark:header:start
#
#   project      : ChatMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ChatMark test suite.

This file provides typed wrappers around pytest decorators, the engine
fixtures shared by most tests, and the logging setup for test runs.

Notes:
    Tests build engines with `ChatEngine.with_defaults()` unless they exercise
    configuration, in which case they go through `MutableConfig` and
    `ChatEngine.from_config(...)` like the CLI does.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from chatmark.config import logging
from chatmark.engine import ChatEngine, EngineSettings
from chatmark.recipient import Recipient

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_chatmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ChatMark's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    CHATMARK_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv("CHATMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failing tests show every text stage.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def engine() -> ChatEngine:
    """A fresh engine with every built-in format, placeholder and channel."""
    return ChatEngine.with_defaults()


@fixture()
def legacy_engine() -> ChatEngine:
    """A fresh engine for a server without RGB support (1.12)."""
    return ChatEngine.with_defaults(EngineSettings(server_version=12))


@fixture()
def steve() -> Recipient:
    """A recipient with a display name, a world and coordinates."""
    return Recipient(
        "Steve",
        display_name="&6Steve the Bold",
        uuid="069a79f4-44e9-4726-a5be-fca90e38aaf5",
        world="world_nether",
        game_mode="SURVIVAL",
        x=12.3456,
        y=64.0,
        z=-7.891,
    )
