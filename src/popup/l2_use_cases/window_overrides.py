"""Use case: layer optional window overrides on top of a base WindowConfig."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, StrictFloat, ValidationError

from popup.l1_entities.errors import InvalidDimensionError, InvalidFieldError
from popup.l1_entities.window import WindowConfig

log = logging.getLogger('popup.config')

DIMENSION_FIELDS = ('width', 'height')


class WindowOverrides(BaseModel):
    """One optional value per WindowConfig field. None means "inherit the current layer"."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    width: StrictFloat | None = None
    height: StrictFloat | None = None
    resizable: bool | None = None
    always_on_top: bool | None = None
    skip_taskbar: bool | None = None
    focus: bool | None = None
    visible_on_all_workspaces: bool | None = None
    closable: bool | None = None
    minimizable: bool | None = None
    hidden_title: bool | None = None
    title_bar_style: str | None = None
    hide_title_bar: bool | None = None
    visible: bool | None = None
    transparent: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping, *, prefix: str = 'window') -> WindowOverrides:
        """Validate an untyped window block (e.g. from YAML) into overrides."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            err = e.errors()[0]
            loc = '.'.join(str(part) for part in err['loc'])
            raise InvalidFieldError(f'{prefix}.{loc}' if loc else prefix, err['msg']) from e

    def present(self) -> dict[str, object]:
        """Return only the fields that were supplied."""
        return self.model_dump(exclude_none=True)


def check_dimension(field: str, value: float) -> None:
    if isinstance(value, bool) or not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError(field, value)


def merge_window(base: WindowConfig, overrides: WindowOverrides) -> WindowConfig:
    """Each field takes the override if present, else the base value. Single pass."""
    updates = overrides.present()
    for field in DIMENSION_FIELDS:
        if field in updates:
            check_dimension(field, updates[field])
    if updates:
        log.debug('Window overrides applied: %s', updates)
    return base.model_copy(update=updates)
