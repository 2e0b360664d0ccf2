"""Enumerations for autotemplate type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ApplyStatus(StrEnum):
    """Outcome of applying a template to a note.

    StrEnum provides automatic string conversion: str(ApplyStatus.APPLIED) == "applied"
    """

    APPLIED = "applied"
    """Template content was written to the note."""

    DISABLED = "disabled"
    """Template application is switched off in the settings."""

    NO_TEMPLATE = "no_template"
    """No template is selected."""

    TEMPLATE_UNAVAILABLE = "template_unavailable"
    """Selected template is missing, not a file, or unreadable."""

    NOT_EMPTY = "not_empty"
    """Note already has content and application was not forced."""

    FAILED = "failed"
    """Reading or writing the note failed."""

    @property
    def is_applied(self) -> bool:
        """Check if the template was written."""
        return self is ApplyStatus.APPLIED


__all__ = ["ApplyStatus"]
