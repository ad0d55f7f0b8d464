"""Domain error types."""

from __future__ import annotations


class PopupError(Exception):
    """Base class for every error reported to the user with exit status 1."""


class ConfigIoError(PopupError):
    """Raised when a config file cannot be read."""


class ConfigParseError(PopupError):
    """Raised when a config file is not valid YAML or not a mapping."""


class ConfigError(PopupError):
    """Raised when configuration values are missing, inconsistent or invalid."""


class MissingSectionError(ConfigError):
    """Raised when a config document has neither or both content sections."""


class MissingFieldError(ConfigError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field '{field}'")


class IncompleteWebhookError(ConfigError):
    """Raised when only one of a button's webhook url/payload is given."""

    def __init__(self, button: str, missing: str) -> None:
        self.button = button
        self.missing = missing
        super().__init__(f'Incomplete webhook for {button} button: {missing} is required when the other is provided')


class InvalidUrlSchemeError(ConfigError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            f"Invalid URL '{url}': must start with http://, https://, or file:// "
            '(e.g. https://example.com, http://localhost:8080, file:///path/to/page.html)'
        )


class InvalidDimensionError(ConfigError):
    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: must be a finite positive number")


class UnknownContentTypeError(ConfigError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown type '{value}'. Must be 'webview', 'custom' or 'notification'")


class InvalidFieldError(ConfigError):
    """Raised when a config value has the wrong type or an unknown key is present."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class NoConfigLoadedError(PopupError):
    def __init__(self) -> None:
        super().__init__('No config loaded')


class ConfigAlreadyLoadedError(PopupError):
    """Raised on a second write to the process-wide config cell."""
