"""
Docs Module
Catalog and per-entry documentation storage.
"""

from .store import DocumentStore, FileDocumentStore, CachingDocumentStore
from .manifest import (
    ManifestProvider,
    CatalogError,
    CatalogNotFoundError,
    CatalogValidationError,
    parse_catalog_ids,
    find_missing_documents,
)

__all__ = [
    "DocumentStore",
    "FileDocumentStore",
    "CachingDocumentStore",
    "ManifestProvider",
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogValidationError",
    "parse_catalog_ids",
    "find_missing_documents",
]
