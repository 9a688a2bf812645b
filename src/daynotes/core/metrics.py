"""Text metrics over daily note content."""

import re

# Unchecked checklist item: "- [ ]" or "* [ ]"
OPEN_TASK_PATTERN = re.compile(r"[-*] \[ \]")


def word_count(text: str | None) -> int:
    """Count whitespace-delimited tokens in text."""
    if not text:
        return 0
    return len(text.split())


def open_task_count(text: str | None) -> int:
    """
    Count unchecked checklist markers in text.

    Every occurrence counts, so a line holding two markers counts twice.
    """
    if not text:
        return 0
    return len(OPEN_TASK_PATTERN.findall(text))
