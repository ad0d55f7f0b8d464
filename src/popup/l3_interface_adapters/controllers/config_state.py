"""Write-once, lock-guarded holder for the resolved Config."""

from __future__ import annotations

import threading

from popup.l1_entities.config import Config
from popup.l1_entities.errors import ConfigAlreadyLoadedError, NoConfigLoadedError


class ConfigCell:
    """Single-assignment cell: set once after resolution, read from any thread afterwards."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._config: Config | None = None

    def set(self, config: Config) -> None:
        with self._lock:
            if self._config is not None:
                raise ConfigAlreadyLoadedError('Config has already been loaded for this process')
            self._config = config

    def get(self) -> Config:
        with self._lock:
            if self._config is None:
                raise NoConfigLoadedError()
            return self._config

    @property
    def is_set(self) -> bool:
        with self._lock:
            return self._config is not None
