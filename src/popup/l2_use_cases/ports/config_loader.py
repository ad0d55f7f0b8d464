"""Port: configuration file loader."""

from __future__ import annotations

from typing import Protocol


class ConfigFileLoader(Protocol):
    """Abstract configuration file loader."""

    def load_raw(self, config_path: str) -> dict:
        """Read and parse a config document into an untyped tree (no semantic checks)."""
        ...
