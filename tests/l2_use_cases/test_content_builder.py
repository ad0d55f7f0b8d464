"""Tests for content builders shared by the CLI and the schema mapper."""

from __future__ import annotations

import pytest

from popup.l1_entities.content import ButtonRole, WebhookConfig
from popup.l1_entities.errors import IncompleteWebhookError, MissingFieldError
from popup.l2_use_cases.content_builder import (
    build_custom_content,
    build_notification_content,
    build_webhook,
)


class TestBuildWebhook:
    def test_neither_returns_none(self):
        assert build_webhook(ButtonRole.PRIMARY, None, None) is None

    def test_both_returns_webhook(self):
        hook = build_webhook(ButtonRole.PRIMARY, 'https://h', '{"a": 1}')
        assert hook == WebhookConfig(url='https://h', payload='{"a": 1}')

    def test_url_without_payload_raises(self):
        with pytest.raises(IncompleteWebhookError) as exc:
            build_webhook(ButtonRole.SECONDARY, 'https://h', None)
        assert exc.value.button == 'secondary'
        assert exc.value.missing == 'payload'

    def test_payload_without_url_raises(self):
        with pytest.raises(IncompleteWebhookError) as exc:
            build_webhook(ButtonRole.PRIMARY, None, '{}')
        assert exc.value.button == 'primary'
        assert exc.value.missing == 'url'


class TestBuildContent:
    def test_custom_requires_url(self):
        with pytest.raises(MissingFieldError) as exc:
            build_custom_content(None, 'title')
        assert exc.value.field == 'custom.url'

    def test_custom_title_becomes_window_title(self):
        assert build_custom_content('https://x', 'Hi').window_title == 'Hi'

    def test_notification_requires_title(self):
        with pytest.raises(MissingFieldError) as exc:
            build_notification_content(None, 'd')
        assert exc.value.field == 'notification.title'

    def test_notification_requires_description(self):
        with pytest.raises(MissingFieldError) as exc:
            build_notification_content('t', None)
        assert exc.value.field == 'notification.description'

    def test_notification_optional_fields(self):
        n = build_notification_content('t', 'd', icon='i.png', button_primary_text='Go')
        assert n.icon == 'i.png'
        assert n.button_primary_text == 'Go'
        assert n.button_secondary_webhook is None
