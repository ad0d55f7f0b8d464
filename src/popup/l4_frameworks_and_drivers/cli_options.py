"""Reusable click option groups shared by the subcommands and the legacy root command."""

from __future__ import annotations

from collections.abc import Callable

import click

from popup.l1_entities.content import ButtonRole, NotificationContent
from popup.l1_entities.window import TitleBarStyle
from popup.l2_use_cases.content_builder import build_notification_content, build_webhook
from popup.l2_use_cases.window_overrides import WindowOverrides

_WINDOW_OPTIONS = [
    click.option('--width', type=float, default=None, help='Window width in pixels.'),
    click.option('--height', type=float, default=None, help='Window height in pixels.'),
    click.option('--resizable', type=click.BOOL, default=None, help='Controls whether the window can be resized.'),
    click.option('--always-on-top', type=click.BOOL, default=None, help='Keep window always on top of other windows.'),
    click.option('--skip-taskbar', type=click.BOOL, default=None, help='Hide from taskbar/dock.'),
    click.option('--focus', type=click.BOOL, default=None, help='Automatically focus window when opened.'),
    click.option(
        '--visible-on-all-workspaces',
        type=click.BOOL,
        default=None,
        help='Show on all virtual desktops (macOS only).',
    ),
    click.option('--closable', type=click.BOOL, default=None, help='Controls whether window shows the close button.'),
    click.option(
        '--minimizable',
        type=click.BOOL,
        default=None,
        help='Controls whether window shows the minimize button.',
    ),
    click.option('--hidden-title', type=click.BOOL, default=None, help='Hide the window title text.'),
    click.option(
        '--title-bar-style',
        default=None,
        metavar='STYLE',
        help=f'Title bar style: {", ".join(s.value for s in TitleBarStyle)}. Unknown values fall back to overlay.',
    ),
    click.option('--hide-title-bar', type=click.BOOL, default=None, help='Hide the title bar entirely.'),
    click.option('--visible', type=click.BOOL, default=None, help='Show the window when created.'),
    click.option('--transparent', type=click.BOOL, default=None, help='Make the window background transparent.'),
]

_BUTTON_OPTIONS = [
    click.option('--icon', default=None, help='Icon URL or file path.'),
    click.option('--button-primary-text', default=None, help='Primary button text (default: "Ok").'),
    click.option('--button-primary-webhook-url', default=None, help='Primary button webhook URL.'),
    click.option('--button-primary-webhook-payload', default=None, help='Primary button webhook payload (JSON string).'),
    click.option('--button-secondary-text', default=None, help='Secondary button text (default: "Cancel").'),
    click.option('--button-secondary-webhook-url', default=None, help='Secondary button webhook URL.'),
    click.option(
        '--button-secondary-webhook-payload',
        default=None,
        help='Secondary button webhook payload (JSON string).',
    ),
]

WINDOW_PARAMS = tuple(WindowOverrides.model_fields)
BUTTON_PARAMS = (
    'icon',
    'button_primary_text',
    'button_primary_webhook_url',
    'button_primary_webhook_payload',
    'button_secondary_text',
    'button_secondary_webhook_url',
    'button_secondary_webhook_payload',
)


def _apply(options: list[Callable]) -> Callable:
    def decorator(func: Callable) -> Callable:
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


window_options = _apply(_WINDOW_OPTIONS)
button_options = _apply(_BUTTON_OPTIONS)


def pop_window_overrides(params: dict) -> WindowOverrides:
    """Remove the window flags from *params* and bundle them as overrides."""
    return WindowOverrides(**{name: params.pop(name) for name in WINDOW_PARAMS})


def pop_notification_content(title: str | None, description: str | None, params: dict) -> NotificationContent:
    """Remove the button flags from *params* and build notification content."""
    buttons = {name: params.pop(name) for name in BUTTON_PARAMS}
    return build_notification_content(
        title,
        description,
        icon=buttons['icon'],
        button_primary_text=buttons['button_primary_text'],
        button_primary_webhook=build_webhook(
            ButtonRole.PRIMARY,
            buttons['button_primary_webhook_url'],
            buttons['button_primary_webhook_payload'],
        ),
        button_secondary_text=buttons['button_secondary_text'],
        button_secondary_webhook=build_webhook(
            ButtonRole.SECONDARY,
            buttons['button_secondary_webhook_url'],
            buttons['button_secondary_webhook_payload'],
        ),
    )
