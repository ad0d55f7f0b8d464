"""Shared path constants."""

from __future__ import annotations

from platformdirs import user_log_path

LOG_DIR = user_log_path('popup')
DEBUG_LOG_NAME = 'popup_debug.log'
