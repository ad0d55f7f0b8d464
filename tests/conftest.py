"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from popup.l2_use_cases.ports.window_host import HostSession

# --- Protocol-conforming Fakes ---


class FakeConfigFileLoader:
    """Fake ConfigFileLoader returning canned raw trees keyed by path."""

    def __init__(self, documents: dict[str, dict] | None = None) -> None:
        self._documents = dict(documents or {})
        self.load_calls: list[str] = []

    def load_raw(self, config_path: str) -> dict:
        self.load_calls.append(config_path)
        return self._documents[config_path]


class FakeWindowHost:
    """Fake WindowHost that records what the core asked of it."""

    def __init__(self, exit_code: int = 0) -> None:
        self._exit_code = exit_code
        self.sessions: list[HostSession] = []
        self.described: list[dict] = []
        self.exit_calls: list[int] = []
        self.resize_calls: list[tuple[float, float]] = []

    def run(self, session: HostSession) -> int:
        self.sessions.append(session)
        self.described.append(session.describe_config())
        return self._exit_code

    def exit_with_code(self, code: int) -> None:
        self.exit_calls.append(code)

    def resize_window_to_content(self, width: float, height: float) -> None:
        self.resize_calls.append((width, height))


# --- Standard Fixtures ---


@pytest.fixture
def fake_host() -> FakeWindowHost:
    return FakeWindowHost()


@pytest.fixture
def custom_config_yaml(tmp_path: Path) -> Path:
    content = """\
custom:
  url: "https://example.com"
  title: "Hi"
  window:
    width: 400
    resizable: true
"""
    p = tmp_path / 'custom.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def notification_config_yaml(tmp_path: Path) -> Path:
    content = """\
notification:
  title: "Update"
  description: "Now"
  icon: "https://example.com/icon.png"
  button_primary_text: "Install"
  button_primary_webhook:
    url: "https://hooks.example.com/install"
    payload: '{"action": "install"}'
  button_secondary_text: "Later"
  window:
    width: 1200
    closable: true
"""
    p = tmp_path / 'notification.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def detach_file_handlers():
    """Remove file handlers that setup_logging attached to the 'popup' logger during a test."""
    yield
    root = logging.getLogger('popup')
    for handler in [h for h in root.handlers if isinstance(h, logging.FileHandler)]:
        root.removeHandler(handler)
        handler.close()
