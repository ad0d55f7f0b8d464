"""Build Content variants from loose field values (CLI flags or YAML sections)."""

from __future__ import annotations

from popup.l1_entities.content import ButtonRole, CustomContent, NotificationContent, WebhookConfig
from popup.l1_entities.errors import IncompleteWebhookError, MissingFieldError


def build_webhook(role: ButtonRole, url: str | None, payload: str | None) -> WebhookConfig | None:
    """Pair a webhook url with its payload. Neither → None; only one → IncompleteWebhookError."""
    if url is None and payload is None:
        return None
    if payload is None:
        raise IncompleteWebhookError(role.value, 'payload')
    if url is None:
        raise IncompleteWebhookError(role.value, 'url')
    return WebhookConfig(url=url, payload=payload)


def build_custom_content(url: str | None, title: str | None = None, *, section: str = 'custom') -> CustomContent:
    if url is None:
        raise MissingFieldError(f'{section}.url')
    return CustomContent(url=url, window_title=title)


def build_notification_content(
    title: str | None,
    description: str | None,
    *,
    icon: str | None = None,
    button_primary_text: str | None = None,
    button_primary_webhook: WebhookConfig | None = None,
    button_secondary_text: str | None = None,
    button_secondary_webhook: WebhookConfig | None = None,
    section: str = 'notification',
) -> NotificationContent:
    if title is None:
        raise MissingFieldError(f'{section}.title')
    if description is None:
        raise MissingFieldError(f'{section}.description')
    return NotificationContent(
        title=title,
        description=description,
        icon=icon,
        button_primary_text=button_primary_text,
        button_primary_webhook=button_primary_webhook,
        button_secondary_text=button_secondary_text,
        button_secondary_webhook=button_secondary_webhook,
    )
