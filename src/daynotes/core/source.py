"""Daily note calendar source: per-day annotations backed by daily notes."""

import logging
from datetime import date, datetime

from daynotes.core.cache import DayMetadataCache
from daynotes.core.dots import build_dots
from daynotes.core.metrics import open_task_count, word_count
from daynotes.core.tags import extract_tags
from daynotes.core.types import (
    ActiveDocumentSignal,
    CalendarSettings,
    DayMetadata,
    Document,
    DocumentRepository,
)

logger = logging.getLogger(__name__)

HAS_NOTE_CLASS = "has-note"
ACTIVE_CLASS = "active"


def calendar_day(target_date: date) -> date:
    """Reduce a date or datetime to its calendar day."""
    if isinstance(target_date, datetime):
        return target_date.date()
    return target_date


def date_key(target_date: date) -> str:
    """
    Canonical cache key for a calendar day.

    Time of day is discarded, so any two values on the same day share a key.
    """
    return f"day-{calendar_day(target_date).isoformat()}"


class ActiveDocument:
    """Holder for the document currently focused in the UI."""

    def __init__(self, document: Document | None = None):
        self._document = document

    def get(self) -> Document | None:
        return self._document

    def set(self, document: Document | None) -> None:
        self._document = document

    def __repr__(self) -> str:
        return f"ActiveDocument({self._document!r})"


class DailyNoteSource:
    """Annotates calendar days from their daily notes.

    Each day's record is computed once and cached for the life of the
    source. Later edits to a note are not picked up unless the caller
    invalidates that day explicitly.

    Example:
        source = DailyNoteSource(settings, repository, ActiveDocument())
        metadata = await source.get_metadata(date(2024, 1, 28))
    """

    def __init__(
        self,
        settings: CalendarSettings,
        repository: DocumentRepository,
        active_document: ActiveDocumentSignal,
        cache: DayMetadataCache | None = None,
    ):
        """
        Initialize the source.

        Args:
            settings: Dot scaling configuration, fixed for this source
            repository: Daily note lookup and content access
            active_document: Signal yielding the focused document
            cache: Optional cache, a fresh one is created otherwise
        """
        self.settings = settings
        self.repository = repository
        self.active_document = active_document
        self.cache = cache if cache is not None else DayMetadataCache()

    def is_active(self, document: Document | None) -> bool:
        """Check whether document is the focused one (handle equality)."""
        if document is None:
            return False
        current = self.active_document.get()
        return current is not None and current == document

    def get_classes(self, document: Document | None) -> list[str]:
        classes = []
        if document is not None:
            classes.append(HAS_NOTE_CLASS)
        if self.is_active(document):
            classes.append(ACTIVE_CLASS)
        return classes

    async def build_metadata(self, document: Document | None) -> DayMetadata:
        """
        Compute the record for a resolved document.

        Content is read and every dot counted before the record is built.
        Read errors propagate unchanged.
        """
        if document is None:
            return DayMetadata()

        content = await self.repository.read_content(document)
        dots = build_dots(
            word_count(content),
            self.settings.words_per_dot,
            open_task_count(content),
        )
        return DayMetadata(
            classes=tuple(self.get_classes(document)),
            data_attributes=tuple(extract_tags(document, self.repository)),
            dots=tuple(dots),
        )

    async def get_metadata(self, target_date: date) -> DayMetadata:
        """
        Get the annotation record for a calendar day.

        Args:
            target_date: Day to annotate

        Returns:
            Cached or freshly computed DayMetadata

        Raises:
            OSError: If the note exists but its content cannot be read.
                Nothing is cached for the day in that case.
        """
        day = calendar_day(target_date)
        key = date_key(day)

        async def compute() -> DayMetadata:
            document = self.repository.resolve_document_for_date(day)
            logger.debug(f"Resolved {key} to {document!r}")
            return await self.build_metadata(document)

        return await self.cache.get(key, compute)

    def invalidate(self, target_date: date) -> bool:
        """Forget the cached record for one day."""
        return self.cache.invalidate(date_key(target_date))

    def reset(self) -> None:
        """Forget every cached record."""
        self.cache.clear()
