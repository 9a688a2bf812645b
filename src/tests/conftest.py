"""Shared test fixtures and configuration."""

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from daynotes.core.source import ActiveDocument
from daynotes.core.types import CalendarSettings


class InMemoryRepository:
    """Document repository backed by dicts, counting content reads."""

    def __init__(self):
        self.notes: dict[date, str] = {}
        self.contents: dict[str, str] = {}
        self.tags: dict[str, list[str] | None] = {}
        self.read_errors: dict[str, Exception] = {}
        self.read_count = 0
        self.read_delay = 0.0

    def add(
        self,
        note_date: date,
        content: str = "",
        tags: list[str] | None = None,
    ) -> str:
        handle = f"daily/{note_date.isoformat()}.md"
        self.notes[note_date] = handle
        self.contents[handle] = content
        self.tags[handle] = tags
        return handle

    def resolve_document_for_date(self, target_date: date) -> str | None:
        return self.notes.get(target_date)

    async def read_content(self, document: str) -> str:
        self.read_count += 1
        if self.read_delay:
            await asyncio.sleep(self.read_delay)
        if document in self.read_errors:
            raise self.read_errors[document]
        return self.contents[document]

    def get_header_tags(self, document: str) -> list[str] | None:
        return self.tags.get(document)


@pytest.fixture
def repository():
    """Empty in-memory document repository."""
    return InMemoryRepository()


@pytest.fixture
def active_document():
    """Active document signal with nothing focused."""
    return ActiveDocument()


@pytest.fixture
def settings():
    """Settings with 50 words per dot."""
    return CalendarSettings(words_per_dot=50)


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    """Set up mock environment variables."""
    env_vars = {
        "DAYNOTES_VAULT_DIR": str(tmp_path / "vault"),
        "DAYNOTES_WORDS_PER_DOT": "100",
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def vault_dir(tmp_path):
    """Vault with a few daily notes and one non-daily note."""
    root = tmp_path / "vault"
    daily = root / "daily"
    daily.mkdir(parents=True)

    (daily / "2024-01-28.md").write_text(
        "---\ntags: [\"#work\", personal]\n---\n"
        + " ".join(["word"] * 100)
        + "\n- [ ] buy milk\n- [x] done\n",
        encoding="utf-8",
    )
    (daily / "2024-01-29.md").write_text("", encoding="utf-8")
    (daily / "ideas.md").write_text("not a daily note", encoding="utf-8")
    return root
