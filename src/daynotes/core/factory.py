"""Factory for building a DailyNoteSource with all dependencies wired."""

from pathlib import Path

from daynotes.core.config import DAILY_FOLDER, DAILY_FORMAT, load_settings
from daynotes.core.source import ActiveDocument, DailyNoteSource
from daynotes.core.types import ActiveDocumentSignal, CalendarSettings
from daynotes.vault.daily import VaultDocumentRepository
from daynotes.vault.layout import get_vault_root


def build_daily_note_source(
    vault_dir: Path | str | None = None,
    settings: CalendarSettings | None = None,
    active_document: ActiveDocumentSignal | None = None,
    folder: str | None = None,
    date_format: str | None = None,
) -> DailyNoteSource:
    """
    Build a DailyNoteSource over a Markdown vault.

    Args:
        vault_dir: Vault root (defaults to config)
        settings: Dot scaling settings (defaults to environment)
        active_document: Focused-document signal (defaults to an empty holder)
        folder: Daily notes folder (defaults to config)
        date_format: Daily note filename format (defaults to config)

    Returns:
        Fully configured DailyNoteSource
    """
    repository = VaultDocumentRepository(
        vault_dir if vault_dir else get_vault_root(),
        folder=folder or DAILY_FOLDER,
        date_format=date_format or DAILY_FORMAT,
    )
    return DailyNoteSource(
        settings=settings if settings is not None else load_settings(),
        repository=repository,
        active_document=(
            active_document if active_document is not None else ActiveDocument()
        ),
    )
