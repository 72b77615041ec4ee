"""
Settings
Configuration management for the ds-mcp server.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_MANIFEST_NAME = "component-manifest.md"

_TRUTHY = {"1", "true", "yes", "on"}


def get_default_docs_root() -> Path:
    """Documentation bundled with the package."""
    return Path(__file__).resolve().parent.parent / "llm_docs"


def get_docs_root() -> Path:
    """
    Get the documentation root directory.
    
    Priority:
    1. DS_MCP_DOCS_ROOT env var (explicit override, ~ expanded)
    2. Bundled llm_docs/ directory
    """
    env_root = os.getenv("DS_MCP_DOCS_ROOT")
    if env_root:
        return Path(os.path.expanduser(env_root))
    return get_default_docs_root()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    docs_root: Path = field(default_factory=get_default_docs_root)
    manifest_name: str = DEFAULT_MANIFEST_NAME
    validate_on_startup: bool = False
    cache_documents: bool = False
    
    @property
    def manifest_path(self) -> Path:
        return self.docs_root / self.manifest_name
    
    @property
    def is_production(self) -> bool:
        return self.environment == "production"
    
    @property
    def is_development(self) -> bool:
        return self.environment == "development"


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    def load(self, **overrides) -> Config:
        """Load configuration from environment.
        
        Keyword overrides (e.g. from CLI flags) win over the environment;
        None values are ignored.
        """
        env = os.getenv("ENVIRONMENT", "development")
        config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            http_host=os.getenv("MCP_HOST", "0.0.0.0"),
            http_port=int(os.getenv("MCP_PORT", "8000")),
            docs_root=get_docs_root(),
            manifest_name=os.getenv("DS_MCP_MANIFEST", DEFAULT_MANIFEST_NAME),
            validate_on_startup=_env_flag("DS_MCP_VALIDATE_ON_STARTUP"),
            cache_documents=_env_flag("DS_MCP_CACHE_DOCUMENTS"),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        self._config = config
        return config
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            return self.load()
        return self._config
