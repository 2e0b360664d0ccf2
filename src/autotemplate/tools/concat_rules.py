"""Concatenate prompt rule files into a single rules file.

Reads every `*.md` file in the rules directory whose name does not start
with "_", in file-name order, joins their contents with a blank line, and
writes the result to the output file.

Usage:
    autotemplate-concat-rules
    autotemplate-concat-rules --rules-dir .cline/rules --output .clinerules

Exit Codes:
    0   Output written
    1   Rules directory or output file could not be accessed

Python 3.13+.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

__all__ = ["collect_rule_files", "concat_rules", "main"]

RULE_SUFFIX = ".md"
EXCLUDED_PREFIX = "_"
SEPARATOR = "\n\n"


def collect_rule_files(rules_dir: Path) -> list[Path]:
    """Return the rule files to concatenate, sorted by file name.

    Raises:
        OSError: If rules_dir cannot be listed
    """
    return sorted(
        (
            entry
            for entry in rules_dir.iterdir()
            if entry.is_file()
            and entry.name.endswith(RULE_SUFFIX)
            and not entry.name.startswith(EXCLUDED_PREFIX)
        ),
        key=lambda entry: entry.name,
    )


def concat_rules(rules_dir: Path, output_file: Path) -> int:
    """Write the joined rule contents to output_file.

    Returns:
        Number of rule files concatenated

    Raises:
        OSError: If a rule file cannot be read or the output cannot be written
    """
    files = collect_rule_files(rules_dir)
    contents = [path.read_text(encoding="utf-8") for path in files]
    output_file.write_text(SEPARATOR.join(contents), encoding="utf-8")
    return len(files)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Concatenate prompt rule files into a single rules file.",
    )
    parser.add_argument(
        "--rules-dir",
        type=Path,
        default=Path(".cline") / "rules",
        help="Directory holding the *.md rule files (default: .cline/rules)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(".clinerules"),
        help="File to write (default: .clinerules)",
    )
    args = parser.parse_args(argv)

    try:
        count = concat_rules(args.rules_dir, args.output)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Generated {args.output} from {count} prompt files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
