"""Directory-backed Vault implementation.

Security:
    Every vault-relative path is validated before touching the disk.
    Absolute paths and ".." segments are rejected, and the resolved path
    must stay inside the vault root (symlinks included).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from autotemplate.errors import TemplateNotFoundError, VaultError, VaultPathError

__all__ = ["FileSystemVault"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileSystemVault:
    """Vault over a directory on disk.

    Example:
        >>> vault = FileSystemVault("notes")
        >>> vault.write("Inbox/idea.md", "# Idea")
        >>> vault.read("Inbox/idea.md")
        '# Idea'

    Attributes:
        root: Vault root directory
    """

    root: str | Path
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.root).resolve())

    @staticmethod
    def _validate_path(path: str) -> None:
        """Reject absolute paths and traversal segments.

        Raises:
            VaultPathError: If path is unsafe
        """
        if not path:
            msg = "Vault path cannot be empty"
            raise VaultPathError(msg, path)
        if path.startswith(("/", "\\")) or Path(path).is_absolute():
            msg = f"Absolute paths not allowed in vault: '{path}'"
            raise VaultPathError(msg, path)
        if ".." in PurePosixPath(path.replace("\\", "/")).parts:
            msg = f"Path traversal sequences not allowed in vault: '{path}'"
            raise VaultPathError(msg, path)

    def _resolve(self, path: str) -> Path:
        self._validate_path(path)
        full_path = (self._resolved_root / path).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: '{path}' escapes the vault root"
            raise VaultPathError(msg, path) from None
        return full_path

    def _relative(self, full_path: Path) -> str:
        return full_path.relative_to(self._resolved_root).as_posix()

    def read(self, path: str) -> str:
        """Read a UTF-8 note.

        Raises:
            VaultPathError: If path is unsafe
            TemplateNotFoundError: If the file does not exist
            VaultError: If the file cannot be read
        """
        full_path = self._resolve(path)
        try:
            return full_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            msg = f"File not found in vault: '{path}'"
            raise TemplateNotFoundError(msg, path) from None
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read '{path}': {e}"
            raise VaultError(msg, path) from e

    def write(self, path: str, content: str) -> None:
        """Write a UTF-8 note, creating parent folders as needed.

        Raises:
            VaultPathError: If path is unsafe
            VaultError: If the file cannot be written
        """
        full_path = self._resolve(path)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(content, encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write '{path}': {e}"
            raise VaultError(msg, path) from e
        logger.debug("Wrote %d characters to %s", len(content), path)

    def is_file(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def is_folder(self, path: str) -> bool:
        return self._resolve(path).is_dir()

    def list_files(self, folder: str) -> list[str]:
        """List files directly inside a folder, sorted by path.

        Raises:
            TemplateNotFoundError: If folder does not exist
        """
        full_path = self._resolve(folder)
        if not full_path.is_dir():
            msg = f"Folder not found in vault: '{folder}'"
            raise TemplateNotFoundError(msg, folder)
        return sorted(self._relative(child) for child in full_path.iterdir() if child.is_file())
