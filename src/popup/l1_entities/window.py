"""Window Pydantic models — geometry and behavior of the popup window."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class TitleBarStyle(str, enum.Enum):
    OVERLAY = 'overlay'
    TRANSPARENT = 'transparent'
    VISIBLE = 'visible'


class WindowConfig(BaseModel):
    """Fully-populated window settings. Field defaults are the built-in baseline."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    width: float = 800.0
    height: float = 600.0
    resizable: bool = False
    always_on_top: bool = True
    skip_taskbar: bool = True
    focus: bool = True
    visible_on_all_workspaces: bool = True
    closable: bool = False
    minimizable: bool = False
    hidden_title: bool = True
    title_bar_style: str = TitleBarStyle.OVERLAY.value  # normalized during validation
    hide_title_bar: bool = False
    visible: bool = True
    transparent: bool = False


WINDOW_FIELDS: tuple[str, ...] = tuple(WindowConfig.model_fields)


def default_window() -> WindowConfig:
    return WindowConfig()
