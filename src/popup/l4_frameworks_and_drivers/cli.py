"""CLI entry point for popup."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import NoReturn

import click

from popup import __version__
from popup.l1_entities.errors import PopupError, UnknownContentTypeError
from popup.l2_use_cases.content_builder import build_custom_content
from popup.l2_use_cases.resolve_config_use_case import ResolveRequest
from popup.l3_interface_adapters.gateways import paths
from popup.l4_frameworks_and_drivers.cli_options import (
    button_options,
    pop_notification_content,
    pop_window_overrides,
    window_options,
)
from popup.l4_frameworks_and_drivers.container import DependencyContainer
from popup.l4_frameworks_and_drivers.logging_setup import setup_logging

log = logging.getLogger('popup.cli')

LEGACY_TYPES = ('webview', 'custom', 'notification')

CONTENT_TYPES_HELP = """\
Available content types:

  custom        Load external webpage or local HTML file ('webview' in legacy mode)
                Example: popup custom --url https://example.com

  notification  Display a notification dialog with buttons
                Example: popup notification --title 'Update' --description 'Please update'

Window settings can be customized via a YAML file (popup file --path config.yaml) or CLI flags.
Run 'popup --help' for all available options."""

USAGE_EXAMPLES = """\
Error: Must provide a subcommand, --config, --type, or --webview
Examples:
  popup file --path example-config.yaml
  popup notification --title 'Update!' --description 'Please update'
  popup custom --url https://example.com
  popup --type webview --url https://example.com  (legacy)"""


def _container(ctx: click.Context) -> DependencyContainer:
    """Wrap whatever the caller passed as ``obj`` (nothing, a window host, or a container)."""
    root = ctx.find_root()
    if not isinstance(root.obj, DependencyContainer):
        root.obj = DependencyContainer(host=root.obj)
    return root.obj


def _fail(message: str) -> NoReturn:
    click.echo(f'Error: {message}', err=True)
    sys.exit(1)


def _run(ctx: click.Context, build_request: Callable[[], ResolveRequest]) -> None:
    """Bind, resolve and hand the Config to the window host (or print it as JSON)."""
    container = _container(ctx)
    try:
        config = container.resolver.execute(build_request())
    except PopupError as e:
        log.debug('Resolution failed: %s', e)
        _fail(str(e))

    if container.bridge is None:
        click.echo(config.model_dump_json(indent=2))
        return
    sys.exit(container.bridge.start(config))


@click.group(invoke_without_command=True)
@click.option(
    '--config',
    'config_path',
    default=None,
    help='Legacy: path to the YAML config file (same schema as "popup file").',
)
@click.option(
    '--type',
    'content_type',
    default=None,
    help='Legacy: content type (webview, custom or notification).',
)
@click.option('--url', default=None, help='Legacy: URL to load for webview type.')
@click.option('--title', default=None, help='Legacy: notification title or webview window title.')
@click.option('--description', default=None, help='Legacy: description (for notification type).')
@click.option('--webview', default=None, help='DEPRECATED: use --type webview --url instead.')
@button_options
@window_options
@click.option('--templates', is_flag=True, help='List available content types and exit.')
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, content_type, url, title, description, webview, templates, debug, **params):
    """popup -- show a notification or web page in a borderless popup window."""
    setup_logging(paths.LOG_DIR if debug else None)

    if ctx.invoked_subcommand is not None:
        legacy = [config_path, content_type, url, title, description, webview, *params.values()]
        if templates or any(value is not None for value in legacy):
            raise click.UsageError('Legacy flags cannot be combined with a subcommand')
        return

    if templates:
        click.echo(CONTENT_TYPES_HELP)
        return

    if config_path is None and content_type is None and webview is None:
        click.echo(USAGE_EXAMPLES, err=True)
        sys.exit(1)

    if webview is not None:
        log.warning('--webview is deprecated; use --type webview --url instead')

    def build() -> ResolveRequest:
        overrides = pop_window_overrides(params)
        if config_path is not None:
            if content_type is not None:
                log.warning('Ignoring --type %s: content comes from --config', content_type)
            return ResolveRequest(config_path=config_path, overrides=overrides)
        if content_type is not None and content_type not in LEGACY_TYPES:
            raise UnknownContentTypeError(content_type)
        if (content_type or 'webview') == 'notification':
            content = pop_notification_content(title, description, params)
        else:
            content = build_custom_content(url or webview, title)
        return ResolveRequest(content=content, overrides=overrides)

    _run(ctx, build)


@cli.command()
@click.option('--title', default=None, help='Notification title (required).')
@click.option('--description', default=None, help='Notification description (required).')
@button_options
@window_options
@click.pass_context
def notification(ctx, title, description, **params):
    """Display a notification dialog with buttons. Window settings are fixed for notifications."""

    def build() -> ResolveRequest:
        overrides = pop_window_overrides(params)
        return ResolveRequest(content=pop_notification_content(title, description, params), overrides=overrides)

    _run(ctx, build)


@cli.command()
@click.option('--url', default=None, help='URL to load: http://, https:// or file:// (required).')
@click.option('--title', default=None, help='Window title.')
@window_options
@click.pass_context
def custom(ctx, url, title, **params):
    """Load an external webpage or local HTML file."""

    def build() -> ResolveRequest:
        return ResolveRequest(content=build_custom_content(url, title), overrides=pop_window_overrides(params))

    _run(ctx, build)


@cli.command(name='file')
@click.option('--path', 'config_path', required=True, help='Path to the YAML config file.')
@window_options
@click.pass_context
def file_command(ctx, config_path, **params):
    """Load the popup definition from a YAML file."""

    def build() -> ResolveRequest:
        return ResolveRequest(config_path=config_path, overrides=pop_window_overrides(params))

    _run(ctx, build)
