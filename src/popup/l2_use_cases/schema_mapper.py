"""Use case: map a raw YAML tree onto the Config model.

The document is keyed by subcommand name and must hold exactly one of::

    notification:
      title: ...
      description: ...
      icon: ...                      # optional
      button_primary_text: ...       # optional
      button_primary_webhook: {url: ..., payload: ...}
      button_secondary_text: ...
      button_secondary_webhook: {url: ..., payload: ...}

    custom:
      url: https://...
      title: ...                     # optional, used as window title
      window: {width: 400, ...}      # optional subset of WindowConfig
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from popup.l1_entities.config import Config
from popup.l1_entities.content import ButtonRole, WebhookConfig
from popup.l1_entities.errors import InvalidFieldError, MissingSectionError
from popup.l1_entities.window import default_window
from popup.l2_use_cases.content_builder import (
    build_custom_content,
    build_notification_content,
    build_webhook,
)
from popup.l2_use_cases.notification_template import NOTIFICATION_WINDOW
from popup.l2_use_cases.window_overrides import WindowOverrides, merge_window

log = logging.getLogger('popup.config')

SECTIONS = ('notification', 'custom')


def map_raw_config(raw: Mapping) -> Config:
    """Choose the single content section in *raw* and build a Config from it."""
    present = [name for name in SECTIONS if name in raw]
    if not present:
        msg = "Config file must contain either 'notification' or 'custom' section"
        if 'content' in raw:
            msg += " (the older 'content'/'window' layout is no longer supported)"
        raise MissingSectionError(msg)
    if len(present) > 1:
        raise MissingSectionError(
            "Config file must contain only one of 'notification' or 'custom' sections, found both"
        )
    unknown = sorted(str(k) for k in raw if k not in SECTIONS)
    if unknown:
        log.warning('Ignoring unknown top-level config keys: %s', ', '.join(unknown))

    name = present[0]
    section = _section(raw[name], name)
    if name == 'notification':
        return _map_notification(section)
    return _map_custom(section)


def _map_notification(section: Mapping) -> Config:
    if 'window' in section:
        log.info('Ignoring window block in notification section: notification popups use a fixed template')
    content = build_notification_content(
        _text(section, 'title', 'notification'),
        _text(section, 'description', 'notification'),
        icon=_text(section, 'icon', 'notification'),
        button_primary_text=_text(section, 'button_primary_text', 'notification'),
        button_primary_webhook=_webhook(section, ButtonRole.PRIMARY),
        button_secondary_text=_text(section, 'button_secondary_text', 'notification'),
        button_secondary_webhook=_webhook(section, ButtonRole.SECONDARY),
    )
    return Config(content=content, window=NOTIFICATION_WINDOW)


def _map_custom(section: Mapping) -> Config:
    content = build_custom_content(_text(section, 'url', 'custom'), _text(section, 'title', 'custom'))
    window_block = section.get('window')
    if window_block is None:
        return Config(content=content, window=default_window())
    overrides = WindowOverrides.from_mapping(_section(window_block, 'custom.window'), prefix='custom.window')
    return Config(content=content, window=merge_window(default_window(), overrides))


def _webhook(section: Mapping, role: ButtonRole) -> WebhookConfig | None:
    key = f'button_{role.value}_webhook'
    block = section.get(key)
    if block is None:
        return None
    block = _section(block, f'notification.{key}')
    return build_webhook(
        role,
        _text(block, 'url', f'notification.{key}'),
        _text(block, 'payload', f'notification.{key}'),
    )


def _section(value: object, name: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise InvalidFieldError(name, f'expected a mapping, got {type(value).__name__}')
    return value


def _text(section: Mapping, key: str, prefix: str) -> str | None:
    value = section.get(key)
    if value is None or isinstance(value, str):
        return value
    raise InvalidFieldError(f'{prefix}.{key}', f'expected a string, got {type(value).__name__}')
