"""
Shared pytest fixtures for ds-mcp tests

Provides a throwaway documentation corpus, config pointing at it, and the
standard logger/context mocks used by the tool tests.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


MANIFEST = """\
# Test manifest

| id | description |
|---|---|
| `button` | Renders an interactive button with variants and sizes |
| `use-toggle` | Boolean state hook |
"""

DOCUMENTS = {
    "button": "# Button\n\nRenders an interactive button.\n",
    "use-toggle": "# useToggle\n\nBoolean state hook.\n",
}


def write_corpus(root: Path, manifest: str = MANIFEST, documents: dict | None = None) -> Path:
    """Write a manifest and one markdown file per document into root."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "component-manifest.md").write_text(manifest, encoding="utf-8")
    for entry_id, text in (DOCUMENTS if documents is None else documents).items():
        (root / f"{entry_id}.md").write_text(text, encoding="utf-8")
    return root


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def docs_root(tmp_path):
    """Documentation root with a manifest listing button and use-toggle."""
    return write_corpus(tmp_path / "llm-docs")


@pytest.fixture
def config(docs_root):
    """Config pointing at the temporary corpus."""
    from ds_mcp.config.settings import Config
    
    return Config(
        environment="test",
        log_level="ERROR",
        docs_root=docs_root,
    )


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from ds_mcp.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def mock_context():
    """
    Standard mock ToolContext for all tests.
    """
    from ds_mcp.mcp_types.tools import ToolContext
    
    return ToolContext(
        requestId='test_req_123',
        timestamp=1234567890.0,
        toolName=None
    )


@pytest.fixture
def server(config, logger):
    """Fully wired server over the temporary corpus."""
    from ds_mcp.server import DesignSystemMCPServer
    return DesignSystemMCPServer(config, logger=logger)
