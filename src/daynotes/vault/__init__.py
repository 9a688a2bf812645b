"""Vault-backed daily note repository (Markdown + YAML frontmatter)."""

from daynotes.vault.daily import VaultDocumentRepository, VaultError
from daynotes.vault.frontmatter import NoteFrontmatter, parse_frontmatter
from daynotes.vault.layout import get_daily_path, get_vault_root

__all__ = [
    "NoteFrontmatter",
    "VaultDocumentRepository",
    "VaultError",
    "get_daily_path",
    "get_vault_root",
    "parse_frontmatter",
]
