"""Gateway: YAML configuration loader — implements ConfigFileLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from popup.l1_entities.errors import ConfigIoError, ConfigParseError

log = logging.getLogger('popup.config')


def expand_config_path(config_path: str) -> Path:
    """`~/` → home directory, relative → current working directory, absolute → unchanged."""
    if config_path.startswith('~/'):
        return Path.home() / config_path[2:]
    path = Path(config_path)
    if not path.is_absolute():
        return Path.cwd() / path
    return path


class YamlConfigLoader:
    """Reads a YAML config file into a raw dict. No semantic validation."""

    def load_raw(self, config_path: str) -> dict:
        path = expand_config_path(config_path)
        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIoError(f"Failed to read config file '{path}': {e}") from e
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(f'Failed to parse YAML config: {e}') from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigParseError(f'Failed to parse YAML config: expected a mapping, got {type(data).__name__}')
        log.debug('Read %d top-level keys from %s', len(data), path)
        return data
