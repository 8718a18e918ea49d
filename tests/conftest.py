from __future__ import annotations

import os
import socket
from typing import Any

import pytest

# Keep a developer's local settings from leaking into unit tests.
os.environ.setdefault("APP_ENV", "test")


class NetworkBlockedError(RuntimeError):
    pass


def _blocked(*_args: Any, **_kwargs: Any) -> Any:
    raise NetworkBlockedError(
        "Network access is disabled during tests. Set ALLOW_NETWORK=1 to call a real model."
    )


@pytest.fixture(autouse=True)
def _disable_network(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent accidental calls to a real model provider in unit tests."""

    if os.getenv("ALLOW_NETWORK") == "1":
        return

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket, "getaddrinfo", _blocked)
