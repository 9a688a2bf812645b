"""Shared types and data structures for daynotes."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any, Protocol, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

Document: TypeAlias = Any
"""Opaque handle to a daily note, owned by the document repository."""

DEFAULT_DOT_COLOR = "default"


class Dot(BaseModel):
    """One marker under a calendar day.

    Filled dots show how much was written, hollow dots show open tasks.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: str = DEFAULT_DOT_COLOR
    is_filled: bool


class DayMetadata(BaseModel):
    """Everything the calendar needs to render one day cell."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    classes: tuple[str, ...] = ()
    data_attributes: tuple[str, ...] = ()
    dots: tuple[Dot, ...] = ()

    @field_validator("classes")
    @classmethod
    def _unique_classes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError(f"Duplicate classes: {value}")
        return value

    @property
    def filled_dots(self) -> tuple[Dot, ...]:
        return tuple(dot for dot in self.dots if dot.is_filled)

    @property
    def hollow_dots(self) -> tuple[Dot, ...]:
        return tuple(dot for dot in self.dots if not dot.is_filled)


class CalendarSettings(BaseModel):
    """Read-only configuration consumed by the annotation engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    words_per_dot: float = Field(default=250)


class DocumentRepository(Protocol):
    """Lookup and content access for daily notes."""

    def resolve_document_for_date(self, target_date: date) -> Document | None:
        pass

    async def read_content(self, document: Document) -> str:
        pass

    def get_header_tags(self, document: Document) -> Sequence[str] | None:
        pass


class ActiveDocumentSignal(Protocol):
    """Externally updated reference to the currently focused document."""

    def get(self) -> Document | None:
        pass


class CalendarSource(Protocol):
    """A provider of per-day calendar annotations."""

    async def get_metadata(self, target_date: date) -> DayMetadata:
        pass
