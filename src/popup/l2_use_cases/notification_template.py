"""Use case: lock notification popups to their fixed window template."""

from __future__ import annotations

import logging
from typing import assert_never

from popup.l1_entities.config import Config
from popup.l1_entities.content import CustomContent, NotificationContent
from popup.l1_entities.window import TitleBarStyle, WindowConfig

log = logging.getLogger('popup.config')

NOTIFICATION_WINDOW = WindowConfig(
    width=500.0,
    height=300.0,
    resizable=False,
    always_on_top=True,
    skip_taskbar=True,
    focus=True,
    visible_on_all_workspaces=True,
    closable=False,
    minimizable=False,
    hidden_title=True,
    title_bar_style=TitleBarStyle.OVERLAY.value,
)


def enforce_template(config: Config) -> Config:
    """Replace the window of a notification config with NOTIFICATION_WINDOW.

    Runs after every override layer has been merged, so the template always
    wins. Custom content is returned unchanged.
    """
    content = config.content
    if isinstance(content, CustomContent):
        return config
    if isinstance(content, NotificationContent):
        if config.window != NOTIFICATION_WINDOW:
            log.info('Notification popup: window settings replaced by the notification template')
        return config.model_copy(update={'window': NOTIFICATION_WINDOW})
    assert_never(content)
