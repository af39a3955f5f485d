"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Any

import pytest

from magicfile import api
from magicfile.core.characterizer import Characterizer
from magicfile.core.gateway import ClassificationGateway

CHECKME_TEXT = (
    "This file is used to check that magicfile characterizes\n"
    "plain seven bit text the way libmagic does.\n"
)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests that do not need libmagic")
    config.addinivalue_line("markers", "integration: tests that call the real libmagic")


class FakeEngine:
    """
    In-process stand-in for libmagic.

    Records every call and the highest number of calls that were running at
    the same time, so tests can verify the gateway never overlaps them.
    """

    def __init__(self, delay: float = 0.0, failures: dict[str, BaseException] | None = None):
        self.delay = delay
        self.failures = failures or {}
        self.calls: list[tuple[str, Any]] = []
        self.active = 0
        self.max_active = 0
        self._guard = threading.Lock()

    def _run(self, operation: str, argument: Any, result: str) -> str:
        with self._guard:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            self.calls.append((operation, argument))
        try:
            if self.delay:
                time.sleep(self.delay)
            if operation in self.failures:
                raise self.failures[operation]
            return result
        finally:
            with self._guard:
                self.active -= 1

    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]

    def text_from_path(self, path: str) -> str:
        return self._run("text_from_path", path, f"ASCII text ({Path(path).name})")

    def mime_from_path(self, path: str) -> str:
        return self._run("mime_from_path", path, "text/plain")

    def encoding_from_path(self, path: str) -> str:
        return self._run("encoding_from_path", path, "us-ascii")

    def text_from_buffer(self, data: bytes) -> str:
        return self._run("text_from_buffer", data, f"ASCII text ({len(data)} bytes)")

    def mime_from_buffer(self, data: bytes) -> str:
        return self._run("mime_from_buffer", data, "text/plain")

    def encoding_from_buffer(self, data: bytes) -> str:
        return self._run("encoding_from_buffer", data, "us-ascii")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("magicfile")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def checkme_path(tmp_path: Path) -> Path:
    """Return a plain ASCII text file."""
    path = tmp_path / "checkme.txt"
    path.write_text(CHECKME_TEXT, encoding="ascii")
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to bundled sample fixtures."""
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def make_engine():
    return FakeEngine


@pytest.fixture
def gateway(fake_engine: FakeEngine) -> ClassificationGateway:
    return ClassificationGateway(fake_engine)


@pytest.fixture
def characterizer(gateway: ClassificationGateway) -> Characterizer:
    return Characterizer(gateway)


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch, characterizer: Characterizer) -> Characterizer:
    """Route the module-level API through the fake engine."""
    monkeypatch.setattr(api, "_default_characterizer", characterizer)
    return characterizer


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the default configuration path at an empty temp location."""
    config_path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("MAGICFILE_CONFIG", str(config_path))
    return config_path
