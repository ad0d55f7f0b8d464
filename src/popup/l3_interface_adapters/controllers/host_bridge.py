"""HostBridge — the query and command surface a window host uses while the popup is open."""

from __future__ import annotations

import logging
import math

from popup.l1_entities.config import Config
from popup.l2_use_cases.ports.window_host import WindowHost
from popup.l3_interface_adapters.controllers.config_state import ConfigCell

log = logging.getLogger('popup.host')


class HostBridge:
    """Stores the resolved Config once, then hands the window host a read-only session.

    The bridge performs no window decisions; it only checks the numeric
    parameters of host commands before forwarding them.
    """

    def __init__(self, host: WindowHost, state: ConfigCell | None = None) -> None:
        self._host = host
        self._state = state or ConfigCell()

    def start(self, config: Config) -> int:
        """Publish *config* and run the host until it exits. Returns the host's exit code."""
        self._state.set(config)
        log.info('Starting window host with %s content', config.content.type)
        code = self._host.run(self)
        log.info('Window host exited with code %d', code)
        return code

    def get_config(self) -> Config:
        return self._state.get()

    def describe_config(self) -> dict:
        return self._state.get().model_dump(mode='json')

    def exit_with_code(self, code: int) -> None:
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f'exit code must be an int, got {type(code).__name__}')
        log.debug('exit_with_code(%d)', code)
        self._host.exit_with_code(code)

    def resize_window_to_content(self, width: float, height: float) -> None:
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value) or value <= 0:
                raise ValueError(f'{name} must be a finite positive number, got {value!r}')
        log.debug('resize_window_to_content(%s, %s)', width, height)
        self._host.resize_window_to_content(float(width), float(height))
