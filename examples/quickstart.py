"""Quickstart example for autotemplate.

Demonstrates date token formatting, placeholder substitution, and applying
a template to a freshly created note in a throwaway vault.
"""

import logging
import tempfile
from datetime import datetime
from pathlib import Path

from autotemplate import (
    FileSystemVault,
    TemplateApplier,
    TemplateSettings,
    format_date,
    substitute_dates,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

now = datetime(2024, 3, 15, 14, 30)

# Example 1: Token formatting
print("=" * 50)
print("Example 1: Token Formatting")
print("=" * 50)

print(format_date(now, "YYYY-MM-DD HH:mm"))
# Output: 2024-03-15 14:30
print(format_date(now, "年月日 曜 a h時"))
# Output: 2024年3月15日 金曜日 午後 2時
print(format_date(now, "ddd, hh:mm A", "en_US"))
# Output: Fri, 02:30 PM

# Example 2: Placeholder substitution
print("\n" + "=" * 50)
print("Example 2: Placeholder Substitution")
print("=" * 50)

print(substitute_dates("# {{date:YYYY-MM-DD}} ({{date:dddd}})", now))
# Output: # 2024-03-15 (Friday)

# Example 3: Applying a template to a new note
print("\n" + "=" * 50)
print("Example 3: Template Application")
print("=" * 50)

with tempfile.TemporaryDirectory() as root:
    vault = FileSystemVault(root)
    vault.write("Templates/Daily.md", "# {{date:年月日}}\n\n## Notes\n")
    Path(root, "Inbox").mkdir()
    Path(root, "Inbox", "today.md").touch()

    settings = TemplateSettings(template_path="Templates/Daily.md", template_folder="Templates")
    applier = TemplateApplier(vault, settings, notifier=print)

    print(applier.get_template_files())
    # Output: ['Templates/Daily.md']
    status = applier.apply_template_to_new_file("Inbox/today.md", now=now)
    print(status, repr(vault.read("Inbox/today.md")))
    # Output: applied '# 2024年3月15日\n\n## Notes\n'
