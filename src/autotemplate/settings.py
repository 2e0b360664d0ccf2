"""Template application settings.

TemplateSettings is an immutable value object passed explicitly to the
template applier and the variable substitution. Hosts that persist settings
overlay their stored mapping onto the defaults with from_mapping().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_LOCALE

__all__ = ["TemplateSettings"]

logger = logging.getLogger(__name__)

# Accepted value types per field; anything else keeps the default.
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "template_path": (str,),
    "enabled": (bool,),
    "template_folder": (str, type(None)),
    "locale_code": (str,),
}


@dataclass(frozen=True, slots=True)
class TemplateSettings:
    """Configuration for applying a template to new notes.

    Attributes:
        template_path: Vault-relative path of the selected template ("" = none)
        enabled: Whether new notes receive the template at all
        template_folder: Vault-relative folder listing the selectable templates
        locale_code: Locale for localized date tokens (`a`, `dd`, `曜`)
    """

    template_path: str = ""
    enabled: bool = True
    template_folder: str | None = None
    locale_code: str = DEFAULT_LOCALE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> TemplateSettings:
        """Overlay a mapping onto the default settings.

        Keys that are not settings fields are ignored, and so are values of
        the wrong type (e.g. a null locale); those fields keep their default.

        Example:
            >>> TemplateSettings.from_mapping({"template_path": "Templates/Daily.md"})
            TemplateSettings(template_path='Templates/Daily.md', enabled=True, template_folder=None, locale_code='ja_JP')
        """
        if not data:
            return cls()
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            logger.debug("Ignoring unknown settings keys: %s", ", ".join(unknown))
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                continue
            if not isinstance(value, _FIELD_TYPES[key]):
                logger.debug(
                    "Ignoring setting %s=%r: expected %s",
                    key,
                    value,
                    " or ".join(t.__name__ for t in _FIELD_TYPES[key]),
                )
                continue
            values[key] = value
        return cls(**values)

    def replace(self, **changes: Any) -> TemplateSettings:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
