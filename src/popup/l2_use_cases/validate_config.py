"""Use case: final validation pass over a merged Config."""

from __future__ import annotations

import logging
from typing import assert_never

from popup.l1_entities.config import Config
from popup.l1_entities.content import ButtonRole, CustomContent, NotificationContent, has_allowed_scheme
from popup.l1_entities.errors import IncompleteWebhookError, InvalidUrlSchemeError
from popup.l1_entities.window import TitleBarStyle, WindowConfig
from popup.l2_use_cases.window_overrides import DIMENSION_FIELDS, check_dimension

log = logging.getLogger('popup.config')


def normalize_title_bar_style(value: str) -> str:
    """Return a recognized title bar style token; unknown values fall back to overlay.

    Tokens are case-sensitive: ``Visible`` is unknown.
    """
    token = value.strip()
    if token in {style.value for style in TitleBarStyle}:
        return token
    log.warning('Unknown title bar style: %s, using overlay', value)
    return TitleBarStyle.OVERLAY.value


def validate_window(window: WindowConfig) -> WindowConfig:
    for field in DIMENSION_FIELDS:
        check_dimension(field, getattr(window, field))
    style = normalize_title_bar_style(window.title_bar_style)
    if style != window.title_bar_style:
        return window.model_copy(update={'title_bar_style': style})
    return window


def validate_content(content: CustomContent | NotificationContent) -> None:
    if isinstance(content, CustomContent):
        if not has_allowed_scheme(content.url):
            raise InvalidUrlSchemeError(content.url)
    elif isinstance(content, NotificationContent):
        for role in ButtonRole:
            webhook = content.button_webhook(role)
            if webhook is None:
                continue
            if not webhook.url:
                raise IncompleteWebhookError(role.value, 'url')
            if not webhook.payload:
                raise IncompleteWebhookError(role.value, 'payload')
    else:
        assert_never(content)


def validate_config(config: Config) -> Config:
    """Check dimensions, title bar style, URL scheme and webhooks. Fails on the first problem.

    Title bar style is the only value corrected instead of rejected.
    """
    window = validate_window(config.window)
    validate_content(config.content)
    if window is config.window:
        return config
    return config.model_copy(update={'window': window})
