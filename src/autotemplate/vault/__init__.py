"""Note storage collaborators.

Exports:
    Vault: Protocol for the host's note storage
    Notifier: Callable type for user-facing notices
    FileSystemVault: Directory-backed Vault with path-traversal checks

Python 3.13+.
"""

from .filesystem import FileSystemVault
from .protocol import Notifier, Vault

__all__ = ["FileSystemVault", "Notifier", "Vault"]
