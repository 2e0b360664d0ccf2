"""Exception hierarchy for autotemplate.

The date formatter and placeholder substitutor never raise for string input;
these exceptions belong to the vault layer and the locale lookup.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "AutoTemplateError",
    "TemplateNotFoundError",
    "VaultError",
    "VaultPathError",
]


class AutoTemplateError(Exception):
    """Base exception for all autotemplate errors."""


class VaultError(AutoTemplateError):
    """Vault read, write or listing failed.

    Attributes:
        path: Vault-relative path the operation was addressed to
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize VaultError.

        Args:
            message: Human-readable error message
            path: Vault-relative path involved in the failure (optional)
        """
        super().__init__(message)
        self.path = path


class VaultPathError(VaultError, ValueError):
    """Path is absolute, contains traversal segments, or escapes the vault root."""


class TemplateNotFoundError(VaultError):
    """Requested file or folder does not exist in the vault."""
