"""Host collaborator protocols.

The host application owns the note storage and the user-facing notices.
autotemplate talks to it only through these structural types.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias

__all__ = ["Notifier", "Vault"]

Notifier: TypeAlias = Callable[[str], None]


class Vault(Protocol):
    """Protocol for the host's note storage.

    Paths are vault-relative, POSIX-style ("Templates/Daily.md").
    This is a Protocol (structural typing) rather than ABC so hosts can
    adapt their own storage objects without inheriting from it.

    Implementations raise VaultError subclasses for failures they can
    classify; the template applier treats any OSError the same way.
    """

    def read(self, path: str) -> str:
        """Return the text of the file at path."""
        ...

    def write(self, path: str, content: str) -> None:
        """Replace the text of the file at path."""
        ...

    def is_file(self, path: str) -> bool:
        """Return True if path names an existing file."""
        ...

    def is_folder(self, path: str) -> bool:
        """Return True if path names an existing folder."""
        ...

    def list_files(self, folder: str) -> list[str]:
        """Return paths of the files directly inside folder."""
        ...
