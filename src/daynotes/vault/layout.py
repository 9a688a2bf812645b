"""Vault layout and path helpers for daily notes."""

from datetime import date, datetime
from pathlib import Path

from daynotes.core.config import DAILY_FOLDER, DAILY_FORMAT, VAULT_DIR


def get_vault_root() -> Path:
    """
    Get the configured vault root directory.

    Returns:
        Path to vault root
    """
    return VAULT_DIR


def get_daily_path(
    vault_root: Path,
    target_date: date | None = None,
    folder: str = DAILY_FOLDER,
    date_format: str = DAILY_FORMAT,
) -> Path:
    """
    Get the daily notes folder path, optionally for a specific date.

    Args:
        vault_root: Vault root directory
        target_date: Optional date for daily note path
        folder: Daily notes folder relative to vault root
        date_format: strftime format of daily note filenames

    Returns:
        Path to daily folder or specific daily note
    """
    daily_dir = vault_root / folder
    if target_date is None:
        return daily_dir
    # Format: daily/2024-01-28.md
    return daily_dir / f"{target_date.strftime(date_format)}.md"


def parse_daily_date(path: Path, date_format: str = DAILY_FORMAT) -> date | None:
    """
    Recover the date a daily note filename encodes.

    Args:
        path: Note path
        date_format: strftime format of daily note filenames

    Returns:
        Date for the note, or None if the filename does not match the format
    """
    try:
        return datetime.strptime(path.stem, date_format).date()
    except ValueError:
        return None


def list_notes(folder_path: Path) -> list[Path]:
    """
    List all markdown notes under a folder.

    Args:
        folder_path: Absolute folder path

    Returns:
        Sorted list of note paths
    """
    if not folder_path.exists():
        return []
    return sorted(folder_path.glob("**/*.md"))
