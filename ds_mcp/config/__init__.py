"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, get_default_docs_root, DEFAULT_MANIFEST_NAME

__all__ = [
    "ConfigManager",
    "Config",
    "get_default_docs_root",
    "DEFAULT_MANIFEST_NAME",
]
