"""
Manifest Provider

Owns the catalog text that enumerates every documentation entry. The catalog
is read once at startup and returned verbatim afterwards.
"""

import re
from pathlib import Path
from typing import Iterable, List

from ds_mcp.docs.store import DocumentStore


class CatalogError(Exception):
    """Base class for fatal catalog problems detected at startup."""


class CatalogNotFoundError(CatalogError):
    """The catalog file is missing or unreadable."""
    
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Catalog not available at {path}: {reason}")


class CatalogValidationError(CatalogError):
    """Catalog lists ids that have no backing document."""
    
    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            f"{len(missing)} catalog id(s) have no documentation: {', '.join(missing)}"
        )


# Separator rows look like |---|:---:|---|
_SEPARATOR_ROW = re.compile(r"^\|?\s*:?-{3,}:?\s*(\|\s*:?-{3,}:?\s*)*\|?\s*$")
_HEADER_CELLS = {"id", "ids", "name", "identifier"}


def parse_catalog_ids(text: str) -> List[str]:
    """
    Extract entry ids from the catalog's markdown table(s).
    
    The id is the first cell of each data row, with surrounding backticks
    removed. Header rows, separator rows and non-table lines are skipped.
    Order of first appearance is preserved; duplicates are dropped.
    """
    ids: List[str] = []
    seen = set()
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped.startswith("|") or _SEPARATOR_ROW.match(stripped):
            continue
        cells = [cell.strip() for cell in stripped.strip("|").split("|")]
        if not cells or not cells[0]:
            continue
        entry_id = cells[0].strip("`").strip()
        if not entry_id or entry_id.lower() in _HEADER_CELLS:
            continue
        if entry_id not in seen:
            seen.add(entry_id)
            ids.append(entry_id)
    return ids


def find_missing_documents(ids: Iterable[str], store: DocumentStore) -> List[str]:
    """Ids with no document in the store."""
    return [entry_id for entry_id in ids if not store.exists(entry_id)]


class ManifestProvider:
    """Holds the immutable catalog text for the process lifetime."""
    
    def __init__(self, text: str, source: Path | None = None):
        self._text = text
        self.source = source
    
    @classmethod
    def load(cls, path: Path) -> "ManifestProvider":
        """Read the catalog file. Raises CatalogNotFoundError if it can't be read."""
        path = Path(path)
        if not path.is_file():
            raise CatalogNotFoundError(path, "file does not exist")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogNotFoundError(path, str(e)) from e
        return cls(text, source=path)
    
    def list_all(self) -> str:
        """Return the catalog text, unmodified."""
        return self._text
    
    def entry_ids(self) -> List[str]:
        return parse_catalog_ids(self._text)
    
    def validate(self, store: DocumentStore) -> None:
        """Raise CatalogValidationError if any listed id has no document."""
        missing = find_missing_documents(self.entry_ids(), store)
        if missing:
            raise CatalogValidationError(missing)
