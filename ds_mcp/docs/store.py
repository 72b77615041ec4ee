"""
Document Store

Storage for documentation entries. One markdown file per entry id under a
fixed root: `<root>/<id>.md`.

The contract is two-step on purpose: callers check `exists()` before
`read()`, so "no such entry" and "entry could not be read" stay separate
outcomes.
"""

import errno
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional


DOCUMENT_SUFFIX = ".md"

_UNNAMEABLE = {errno.ENAMETOOLONG, errno.EINVAL}


class DocumentStore(ABC):
    """Read-only lookup of documentation text by entry id."""
    
    @abstractmethod
    def exists(self, entry_id: str) -> bool:
        """Whether a document is stored for this id."""
        pass
    
    @abstractmethod
    def read(self, entry_id: str) -> str:
        """Return the document text. Raises OSError on read failure."""
        pass


class FileDocumentStore(DocumentStore):
    """Documents stored as files on disk."""
    
    def __init__(self, root: Path, suffix: str = DOCUMENT_SUFFIX):
        self.root = Path(root)
        self.suffix = suffix
    
    def path_for(self, entry_id: str) -> Optional[Path]:
        """
        Map an id to its file path.
        
        Returns None when the id would resolve outside the root
        (e.g. "../secrets"), so such ids behave as unknown entries.
        """
        root = self.root.resolve()
        try:
            candidate = (root / f"{entry_id}{self.suffix}").resolve()
        except (ValueError, OSError):
            # embedded NUL bytes, symlink loops
            return None
        if root not in candidate.parents:
            return None
        return candidate
    
    def exists(self, entry_id: str) -> bool:
        path = self.path_for(entry_id)
        if path is None:
            return False
        try:
            return path.is_file()
        except OSError as e:
            # ids the filesystem can't name are unknown ids, not read faults
            if e.errno in _UNNAMEABLE:
                return False
            raise
    
    def read(self, entry_id: str) -> str:
        path = self.path_for(entry_id)
        if path is None:
            raise FileNotFoundError(f"No document for id '{entry_id}'")
        return path.read_text(encoding="utf-8")


class CachingDocumentStore(DocumentStore):
    """
    Memoizes successful reads of a wrapped store.
    
    The corpus is static for the process lifetime, so cached text never goes
    stale. Failed reads are not cached.
    """
    
    def __init__(self, store: DocumentStore):
        self.store = store
        self.cache: Dict[str, str] = {}
    
    def exists(self, entry_id: str) -> bool:
        return entry_id in self.cache or self.store.exists(entry_id)
    
    def read(self, entry_id: str) -> str:
        cached = self.cache.get(entry_id)
        if cached is not None:
            return cached
        text = self.store.read(entry_id)
        self.cache[entry_id] = text
        return text
    
    def clear(self) -> None:
        self.cache.clear()
