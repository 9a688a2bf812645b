"""Tag extraction for daily notes."""

from collections.abc import Sequence

from daynotes.core.types import Document, DocumentRepository

TAG_MARKER = "#"


def strip_tag_marker(tag: str) -> str:
    """Drop a single leading tag marker, if present."""
    if tag.startswith(TAG_MARKER):
        return tag[len(TAG_MARKER) :]
    return tag


def extract_tags(
    document: Document | None, repository: DocumentRepository
) -> list[str]:
    """
    Get the header tags of a document.

    Args:
        document: Resolved daily note, or None when no note exists
        repository: Repository that knows how to read the note's header

    Returns:
        Tags in declared order with the leading marker stripped.
        Empty when there is no document, no header, or no tag field.
    """
    if document is None:
        return []

    tags: Sequence[str] | None = repository.get_header_tags(document)
    if not tags:
        return []
    return [strip_tag_marker(tag) for tag in tags]
