"""YAML frontmatter parsing for vault notes."""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
TAG_KEYS = ("tags", "tag")
_TAG_SPLIT = re.compile(r"[,\s]+")


@dataclass
class NoteFrontmatter:
    """Parsed frontmatter from a vault note."""

    tags: list[str] | None = None
    extra: dict[str, Any] = field(default_factory=dict)


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """
    Split note content into its raw YAML header and body.

    Returns:
        (header, body) - header is None when the note has no frontmatter
    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None, content

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    # Unterminated header is treated as plain body
    return None, content


def parse_frontmatter_tags(frontmatter: dict[str, Any]) -> list[str] | None:
    """
    Read tags from a frontmatter mapping, normalized with a "#" prefix.

    Accepts a list or a comma/space separated string under "tags" or "tag".

    Returns:
        Tags in declared order, or None if no tag field is present
    """
    for key in TAG_KEYS:
        if key not in frontmatter:
            continue
        raw = frontmatter[key]
        if raw is None:
            return None
        if isinstance(raw, str):
            values = [v for v in _TAG_SPLIT.split(raw) if v]
        elif isinstance(raw, list):
            values = [str(v) for v in raw if v is not None]
        else:
            values = [str(raw)]
        return [v if v.startswith("#") else f"#{v}" for v in values]
    return None


def parse_frontmatter(content: str) -> tuple[NoteFrontmatter | None, str]:
    """
    Parse YAML frontmatter from note content.

    Malformed YAML is logged and treated as no frontmatter.

    Args:
        content: Full note content including frontmatter

    Returns:
        (frontmatter, body) - Frontmatter object and remaining body text
    """
    header, body = split_frontmatter(content)
    if header is None:
        return None, body

    try:
        raw = yaml.safe_load(header)
    except yaml.YAMLError as e:
        logger.warning(f"Invalid frontmatter YAML: {e}")
        return None, body

    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning(f"Frontmatter must be a mapping, got {type(raw).__name__}")
        return None, body

    extra = {k: v for k, v in raw.items() if k not in TAG_KEYS}
    return NoteFrontmatter(tags=parse_frontmatter_tags(raw), extra=extra), body
