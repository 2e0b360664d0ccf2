"""Apply the selected template to newly created notes.

TemplateApplier is the glue between the host's file-creation event and the
variable substitution: it reads the selected template, expands its
variables, and writes the result into the new note when that note is empty.

Failures never propagate to the host event loop. They are logged and
reported to the user through the notifier, and surface as ApplyStatus.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import PurePosixPath

from .constants import (
    NOTICE_APPLIED,
    NOTICE_APPLY_FAILED,
    NOTICE_NO_TEMPLATE,
    NOTICE_READ_FAILED,
    TEMPLATE_EXTENSION,
)
from .enums import ApplyStatus
from .errors import VaultError
from .formatting import process_template_variables
from .settings import TemplateSettings
from .vault import Notifier, Vault

__all__ = ["TemplateApplier", "is_template_candidate"]

logger = logging.getLogger(__name__)


def is_template_candidate(path: str) -> bool:
    """Return True if path names a Markdown note."""
    return PurePosixPath(path).suffix == f".{TEMPLATE_EXTENSION}"


def _log_notice(message: str) -> None:
    logger.info("Notice: %s", message)


class TemplateApplier:
    """Applies a template's expanded content to new notes.

    Args:
        vault: Host note storage
        settings: Template selection and locale
        notifier: Receives user-facing notices (default: logged at INFO)

    Example:
        >>> vault = FileSystemVault("notes")
        >>> settings = TemplateSettings(template_path="Templates/Daily.md")
        >>> applier = TemplateApplier(vault, settings)
        >>> applier.on_file_created("Inbox/2024-03-15.md")
        <ApplyStatus.APPLIED: 'applied'>
    """

    __slots__ = ("_notifier", "_vault", "settings")

    def __init__(
        self,
        vault: Vault,
        settings: TemplateSettings | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._vault = vault
        self.settings = settings if settings is not None else TemplateSettings()
        self._notifier: Notifier = notifier if notifier is not None else _log_notice

    def on_file_created(self, path: str) -> ApplyStatus | None:
        """Handle a file-creation event; non-Markdown files are ignored.

        Returns:
            Outcome of the application, or None if the file was ignored
        """
        if not is_template_candidate(path):
            logger.debug("Ignoring created file %s (not .%s)", path, TEMPLATE_EXTENSION)
            return None
        return self.apply_template_to_new_file(path)

    def apply_template_to_new_file(
        self,
        path: str,
        *,
        force: bool = False,
        now: datetime | None = None,
    ) -> ApplyStatus:
        """Write the expanded template into a note.

        Args:
            path: Vault-relative path of the note
            force: Apply even when the note already has content
            now: Reference time for date variables (default: datetime.now())

        Returns:
            ApplyStatus describing what happened
        """
        if not self.settings.enabled:
            return ApplyStatus.DISABLED

        if not self.settings.template_path:
            self._notifier(NOTICE_NO_TEMPLATE)
            return ApplyStatus.NO_TEMPLATE

        try:
            template_content = self.get_template_contents(self.settings.template_path)
            if not template_content:
                return ApplyStatus.TEMPLATE_UNAVAILABLE

            processed_content = process_template_variables(template_content, now, self.settings)

            file_content = self._vault.read(path)
            if file_content.strip() and not force:
                logger.debug("Note %s is not empty; template not applied", path)
                return ApplyStatus.NOT_EMPTY

            self._vault.write(path, processed_content)
        except (VaultError, OSError) as e:
            logger.error("Error applying template to %s: %s", path, e)
            self._notifier(NOTICE_APPLY_FAILED)
            return ApplyStatus.FAILED

        logger.info("Applied template %s to %s", self.settings.template_path, path)
        self._notifier(NOTICE_APPLIED)
        return ApplyStatus.APPLIED

    def get_template_contents(self, template_path: str) -> str | None:
        """Read a template file.

        Returns:
            Template text, or None if the path is not a file or cannot be read
        """
        try:
            if not self._vault.is_file(template_path):
                logger.warning("Template %s is not a file", template_path)
                return None
            return self._vault.read(template_path)
        except (VaultError, OSError) as e:
            logger.error("Error reading template %s: %s", template_path, e)
            self._notifier(NOTICE_READ_FAILED)
            return None

    def get_template_files(self) -> list[str]:
        """List the Markdown templates directly inside the template folder."""
        folder = self.settings.template_folder
        if not folder:
            return []
        try:
            if not self._vault.is_folder(folder):
                return []
            files = self._vault.list_files(folder)
        except (VaultError, OSError) as e:
            logger.error("Error listing template folder %s: %s", folder, e)
            return []
        return sorted(path for path in files if is_template_candidate(path))
