"""Tests for mapping raw YAML trees onto the Config model."""

from __future__ import annotations

import logging

import pytest

from popup.l1_entities.content import CustomContent, NotificationContent, WebhookConfig
from popup.l1_entities.errors import (
    IncompleteWebhookError,
    InvalidFieldError,
    MissingFieldError,
    MissingSectionError,
)
from popup.l1_entities.window import default_window
from popup.l2_use_cases.notification_template import NOTIFICATION_WINDOW
from popup.l2_use_cases.schema_mapper import map_raw_config


class TestSectionSelection:
    def test_empty_document_raises(self):
        with pytest.raises(MissingSectionError, match="either 'notification' or 'custom'"):
            map_raw_config({})

    def test_both_sections_raise(self):
        raw = {
            'notification': {'title': 't', 'description': 'd'},
            'custom': {'url': 'https://x'},
        }
        with pytest.raises(MissingSectionError, match='found both'):
            map_raw_config(raw)

    def test_legacy_content_layout_hint(self):
        raw = {'content': {'type': 'webview', 'url': 'https://x'}, 'window': {'width': 10}}
        with pytest.raises(MissingSectionError, match='no longer supported'):
            map_raw_config(raw)

    def test_unknown_top_level_keys_warned(self, caplog):
        with caplog.at_level(logging.WARNING, logger='popup.config'):
            cfg = map_raw_config({'custom': {'url': 'https://x'}, 'extra': 1})
        assert isinstance(cfg.content, CustomContent)
        assert 'extra' in caplog.text

    def test_section_must_be_mapping(self):
        with pytest.raises(InvalidFieldError) as exc:
            map_raw_config({'custom': None})
        assert exc.value.field == 'custom'


class TestCustomSection:
    def test_no_window_block_uses_defaults(self):
        cfg = map_raw_config({'custom': {'url': 'https://example.com', 'title': 'Hi'}})
        assert cfg.content == CustomContent(url='https://example.com', window_title='Hi')
        assert cfg.window == default_window()

    def test_window_block_merged_over_defaults(self):
        cfg = map_raw_config({'custom': {'url': 'https://x', 'window': {'width': 400, 'resizable': True}}})
        assert cfg.window.width == 400
        assert cfg.window.resizable is True
        assert cfg.window.height == 600
        assert cfg.window.always_on_top is True

    def test_missing_url_raises(self):
        with pytest.raises(MissingFieldError) as exc:
            map_raw_config({'custom': {'title': 'Hi'}})
        assert exc.value.field == 'custom.url'

    def test_non_string_url_raises(self):
        with pytest.raises(InvalidFieldError) as exc:
            map_raw_config({'custom': {'url': 42}})
        assert exc.value.field == 'custom.url'

    def test_unknown_window_key_raises(self):
        with pytest.raises(InvalidFieldError) as exc:
            map_raw_config({'custom': {'url': 'https://x', 'window': {'depth': 3}}})
        assert exc.value.field == 'custom.window.depth'

    @pytest.mark.parametrize('field', ['width', 'height'])
    def test_boolean_dimension_raises(self, field):
        with pytest.raises(InvalidFieldError) as exc:
            map_raw_config({'custom': {'url': 'https://x', 'window': {field: True}}})
        assert exc.value.field == f'custom.window.{field}'

    def test_window_block_must_be_mapping(self):
        with pytest.raises(InvalidFieldError):
            map_raw_config({'custom': {'url': 'https://x', 'window': [1, 2]}})


class TestNotificationSection:
    def test_full_section(self):
        raw = {
            'notification': {
                'title': 'Update',
                'description': 'Now',
                'icon': 'icon.png',
                'button_primary_text': 'Install',
                'button_primary_webhook': {'url': 'https://h/1', 'payload': '{"a": 1}'},
                'button_secondary_text': 'Later',
                'button_secondary_webhook': {'url': 'https://h/2', 'payload': '{}'},
            }
        }
        cfg = map_raw_config(raw)
        assert isinstance(cfg.content, NotificationContent)
        assert cfg.content.icon == 'icon.png'
        assert cfg.content.button_primary_webhook == WebhookConfig(url='https://h/1', payload='{"a": 1}')
        assert cfg.content.button_secondary_webhook == WebhookConfig(url='https://h/2', payload='{}')

    def test_window_block_discarded(self):
        raw = {'notification': {'title': 't', 'description': 'd', 'window': {'width': 1200}}}
        assert map_raw_config(raw).window == NOTIFICATION_WINDOW

    def test_missing_title_raises(self):
        with pytest.raises(MissingFieldError) as exc:
            map_raw_config({'notification': {'description': 'd'}})
        assert exc.value.field == 'notification.title'

    def test_missing_description_raises(self):
        with pytest.raises(MissingFieldError) as exc:
            map_raw_config({'notification': {'title': 't'}})
        assert exc.value.field == 'notification.description'

    def test_webhook_without_payload_raises(self):
        raw = {'notification': {'title': 't', 'description': 'd', 'button_primary_webhook': {'url': 'https://h'}}}
        with pytest.raises(IncompleteWebhookError) as exc:
            map_raw_config(raw)
        assert exc.value.button == 'primary'

    def test_webhook_without_url_raises(self):
        raw = {'notification': {'title': 't', 'description': 'd', 'button_secondary_webhook': {'payload': '{}'}}}
        with pytest.raises(IncompleteWebhookError) as exc:
            map_raw_config(raw)
        assert exc.value.button == 'secondary'

    def test_webhook_must_be_mapping(self):
        raw = {'notification': {'title': 't', 'description': 'd', 'button_primary_webhook': 'https://h'}}
        with pytest.raises(InvalidFieldError) as exc:
            map_raw_config(raw)
        assert exc.value.field == 'notification.button_primary_webhook'
