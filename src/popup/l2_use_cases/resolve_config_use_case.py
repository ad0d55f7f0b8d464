"""Use case: resolve defaults, an optional YAML file and CLI input into one validated Config."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from popup.l1_entities.config import Config
from popup.l1_entities.content import CustomContent, NotificationContent
from popup.l1_entities.window import default_window
from popup.l2_use_cases.notification_template import enforce_template
from popup.l2_use_cases.ports.config_loader import ConfigFileLoader
from popup.l2_use_cases.schema_mapper import map_raw_config
from popup.l2_use_cases.validate_config import validate_config
from popup.l2_use_cases.window_overrides import WindowOverrides, merge_window

log = logging.getLogger('popup.resolver')


@dataclass(frozen=True)
class ResolveRequest:
    """What the CLI asked for: a config file or CLI-built content, plus window overrides."""

    config_path: str | None = None
    content: CustomContent | NotificationContent | None = None
    overrides: WindowOverrides = field(default_factory=WindowOverrides)

    def __post_init__(self) -> None:
        if (self.config_path is None) == (self.content is None):
            raise ValueError('ResolveRequest needs exactly one of config_path or content')


class ResolveConfigUseCase:
    """Sequences loading, mapping, merging, template enforcement and validation."""

    def __init__(self, loader: ConfigFileLoader) -> None:
        self._loader = loader

    def execute(self, request: ResolveRequest) -> Config:
        """Return the finalized Config. Any error propagates unchanged; nothing partial is returned."""
        if request.config_path is not None:
            log.info('Loading config from %s', request.config_path)
            base = map_raw_config(self._loader.load_raw(request.config_path))
        else:
            log.info('No config file provided, using CLI flags')
            base = Config(content=request.content, window=default_window())

        if isinstance(base.content, NotificationContent):
            if request.overrides.present():
                log.info('Ignoring window overrides: notification popups use a fixed window template')
            merged = base
        else:
            merged = base.model_copy(update={'window': merge_window(base.window, request.overrides)})
        config = validate_config(enforce_template(merged))
        log.debug('Resolved config: %s', config.model_dump())
        return config
