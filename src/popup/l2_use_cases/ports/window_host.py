"""Port: native window host and the session interface it is handed."""

from __future__ import annotations

from typing import Protocol

from popup.l1_entities.config import Config


class HostSession(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Queries and commands the window host may issue while the popup is open."""

    def get_config(self) -> Config:
        """Return the resolved config, or raise NoConfigLoadedError."""
        ...

    def describe_config(self) -> dict:
        """Return the resolved config as a JSON-ready dict."""
        ...

    def exit_with_code(self, code: int) -> None: ...

    def resize_window_to_content(self, width: float, height: float) -> None: ...


class WindowHost(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Creates the popup window from a resolved config. Holds no decision logic."""

    def run(self, session: HostSession) -> int:
        """Open the window, serve *session* until it closes, and return the exit code."""
        ...

    def exit_with_code(self, code: int) -> None:
        """Close the window and end the host's event loop with *code*."""
        ...

    def resize_window_to_content(self, width: float, height: float) -> None:
        """Resize the open window to the rendered content size."""
        ...
