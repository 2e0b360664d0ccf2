"""autotemplate - Apply templates with date variables to newly created notes.

When the host application creates a Markdown note, the selected template is
read, its `{{date:<format>}}` placeholders are expanded against the creation
time, and the result is written into the (still empty) note.

Public API:
    format_date - Format a datetime against a token pattern ("YYYY-MM-DD")
    substitute_dates - Expand {{date:<format>}} placeholders in text
    process_template_variables - Expand every template variable kind
    DateTokenFormatter - Reusable formatter bound to a locale's labels
    TemplateSubstitutor - Reusable placeholder substitutor
    TemplateSettings - Immutable configuration value object
    TemplateApplier - Applies the selected template on note creation
    FileSystemVault - Directory-backed note storage
    ApplyStatus - Outcome of a template application

Exceptions:
    AutoTemplateError - Base exception class
    VaultError - Note storage failures
    VaultPathError - Unsafe vault path
    TemplateNotFoundError - Missing file or folder

Submodules:
    autotemplate.formatting - Token table, labels, formatter, substitutor
    autotemplate.vault - Vault protocol and filesystem implementation
    autotemplate.tools - Console tools (rule concatenation, version bump)
"""

from .applier import TemplateApplier
from .enums import ApplyStatus
from .errors import AutoTemplateError, TemplateNotFoundError, VaultError, VaultPathError
from .formatting import (
    DateTokenFormatter,
    TemplateSubstitutor,
    format_date,
    process_template_variables,
    substitute_dates,
)
from .settings import TemplateSettings
from .vault import FileSystemVault

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("autotemplate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ApplyStatus",
    "AutoTemplateError",
    "DateTokenFormatter",
    "FileSystemVault",
    "TemplateApplier",
    "TemplateNotFoundError",
    "TemplateSettings",
    "TemplateSubstitutor",
    "VaultError",
    "VaultPathError",
    "__version__",
    "format_date",
    "process_template_variables",
    "substitute_dates",
]
