"""Daily notes stored as Markdown files in a vault."""

import asyncio
import logging
from datetime import date
from pathlib import Path

from daynotes.core.config import DAILY_FOLDER, DAILY_FORMAT
from daynotes.core.source import date_key
from daynotes.vault.frontmatter import NoteFrontmatter, parse_frontmatter
from daynotes.vault.layout import get_daily_path, list_notes, parse_daily_date

logger = logging.getLogger(__name__)


class VaultError(Exception):
    """Raised when the vault location is invalid."""

    pass


class VaultDocumentRepository:
    """Resolves, reads and inspects daily notes in a vault folder.

    Documents are note paths. Known notes are indexed by date key on first
    use, matching a startup snapshot of the vault; call refresh() to rescan.

    Example:
        repo = VaultDocumentRepository("~/vault")
        note = repo.resolve_document_for_date(date(2024, 1, 28))
        content = await repo.read_content(note)
    """

    def __init__(
        self,
        path: Path | str,
        folder: str = DAILY_FOLDER,
        date_format: str = DAILY_FORMAT,
    ):
        """Initialize repository with vault root directory path.

        Args:
            path: Path to vault root directory
            folder: Daily notes folder relative to vault root
            date_format: strftime format of daily note filenames

        Raises:
            VaultError: If path exists but is not a directory.
        """
        self.root = Path(path).expanduser().resolve()
        if self.root.exists() and not self.root.is_dir():
            raise VaultError(f"Vault root is not a directory: {self.root}")
        self.folder = folder
        self.date_format = date_format
        self._index: dict[str, Path] | None = None
        self._headers: dict[Path, NoteFrontmatter | None] = {}

    @property
    def daily_dir(self) -> Path:
        return get_daily_path(self.root, folder=self.folder)

    def get_all_daily_notes(self) -> dict[str, Path]:
        """
        Index every daily note in the daily folder by date key.

        Files whose names do not match the date format are skipped.
        """
        if self._index is not None:
            return self._index

        index: dict[str, Path] = {}
        for note in list_notes(self.daily_dir):
            note_date = parse_daily_date(note, self.date_format)
            if note_date is None:
                logger.debug(f"Skipping non-daily note {note}")
                continue
            index[date_key(note_date)] = note

        logger.info(f"Indexed {len(index)} daily notes in {self.daily_dir}")
        self._index = index
        return self._index

    def refresh(self) -> dict[str, Path]:
        """Force a rescan of the daily folder."""
        self._index = None
        return self.get_all_daily_notes()

    def resolve_document_for_date(self, target_date: date) -> Path | None:
        return self.get_all_daily_notes().get(date_key(target_date))

    async def read_content(self, document: Path) -> str:
        """
        Read note content off the event loop. OSError propagates.

        The frontmatter of the content read is kept for get_header_tags.
        """
        content = await asyncio.to_thread(document.read_text, encoding="utf-8")
        self._headers[document], _ = parse_frontmatter(content)
        return content

    def get_header_tags(self, document: Path) -> list[str] | None:
        """
        Tags declared in the note's frontmatter, "#"-prefixed.

        Taken from the last read_content of the note; no file I/O. None if
        the note has not been read or has no frontmatter.
        """
        frontmatter = self._headers.get(document)
        if frontmatter is None:
            return None
        return frontmatter.tags

    def __repr__(self) -> str:
        return f"VaultDocumentRepository({self.root})"
