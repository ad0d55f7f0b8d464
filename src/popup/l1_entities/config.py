"""Configuration aggregate — one content variant plus a fully-populated window."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from popup.l1_entities.content import Content
from popup.l1_entities.window import WindowConfig


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: Content
    window: WindowConfig
