"""Content Pydantic models — what the popup shows, as a closed tagged union."""

from __future__ import annotations

import enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

ALLOWED_URL_SCHEMES: tuple[str, ...] = ('http://', 'https://', 'file://')

DEFAULT_WINDOW_TITLE = 'Popup'


class ButtonRole(enum.Enum):
    """Notification buttons and the exit code the host reports when each is pressed."""

    PRIMARY = 'primary'
    SECONDARY = 'secondary'

    @property
    def exit_code(self) -> int:
        return 0 if self is ButtonRole.PRIMARY else 2

    @property
    def default_label(self) -> str:
        return 'Ok' if self is ButtonRole.PRIMARY else 'Cancel'


class WebhookConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    payload: str  # opaque, usually a JSON document


class CustomContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal['custom'] = 'custom'
    url: str
    window_title: str | None = None

    @property
    def display_title(self) -> str:
        return self.window_title or DEFAULT_WINDOW_TITLE


class NotificationContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal['notification'] = 'notification'
    title: str
    description: str
    icon: str | None = None
    button_primary_text: str | None = None
    button_primary_webhook: WebhookConfig | None = None
    button_secondary_text: str | None = None
    button_secondary_webhook: WebhookConfig | None = None

    def button_label(self, role: ButtonRole) -> str:
        text = self.button_primary_text if role is ButtonRole.PRIMARY else self.button_secondary_text
        return text or role.default_label

    def button_webhook(self, role: ButtonRole) -> WebhookConfig | None:
        return self.button_primary_webhook if role is ButtonRole.PRIMARY else self.button_secondary_webhook


Content = Annotated[CustomContent | NotificationContent, Field(discriminator='type')]


def has_allowed_scheme(url: str) -> bool:
    return url.startswith(ALLOWED_URL_SCHEMES)
