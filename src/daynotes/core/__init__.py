"""daynotes core library - the day annotation engine."""

from typing import TYPE_CHECKING

from daynotes.core.cache import DayMetadataCache
from daynotes.core.dots import build_dots
from daynotes.core.metrics import open_task_count, word_count
from daynotes.core.source import ActiveDocument, DailyNoteSource, date_key
from daynotes.core.tags import extract_tags
from daynotes.core.types import (
    ActiveDocumentSignal,
    CalendarSettings,
    CalendarSource,
    DayMetadata,
    DocumentRepository,
    Dot,
)

if TYPE_CHECKING:
    from daynotes.core.factory import build_daily_note_source

__all__ = [
    # Engine
    "ActiveDocument",
    "DailyNoteSource",
    "DayMetadataCache",
    "build_daily_note_source",
    "date_key",
    # Pure helpers
    "build_dots",
    "extract_tags",
    "open_task_count",
    "word_count",
    # Types
    "ActiveDocumentSignal",
    "CalendarSettings",
    "CalendarSource",
    "DayMetadata",
    "DocumentRepository",
    "Dot",
]


def __getattr__(name: str):
    if name == "build_daily_note_source":
        from daynotes.core.factory import build_daily_note_source

        return build_daily_note_source
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
