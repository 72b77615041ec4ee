"""Tests for ListAllTool."""

import pytest
from ds_mcp.docs import ManifestProvider
from ds_mcp.mcp_types import ToolInput, ToolCategory
from ds_mcp.tools.list_all import ListAllTool


@pytest.fixture
def manifest(docs_root):
    return ManifestProvider.load(docs_root / "component-manifest.md")


@pytest.mark.asyncio
class TestListAllTool:
    """Test ListAllTool."""
    
    async def test_returns_catalog_verbatim(self, logger, mock_context, manifest, docs_root):
        tool = ListAllTool(logger, manifest)
        
        result = await tool.execute(ToolInput(), mock_context)
        
        assert result.success
        assert len(result.result.content) == 1
        assert result.result.content[0].type == "text"
        assert result.result.content[0].text == (docs_root / "component-manifest.md").read_text()
        assert not result.result.isError
    
    async def test_repeated_calls_identical(self, logger, mock_context, manifest):
        tool = ListAllTool(logger, manifest)
        
        first = await tool.execute(ToolInput(), mock_context)
        second = await tool.execute(ToolInput(), mock_context)
        
        assert first.result.content[0].text == second.result.content[0].text
    
    async def test_json_like_catalog_not_rewritten(self, logger, mock_context):
        """Text that merely looks like JSON must still be passed through untouched."""
        tool = ListAllTool(logger, ManifestProvider("[not json] | button |  \n"))
        
        result = await tool.execute(ToolInput(), mock_context)
        
        assert result.result.content[0].text == "[not json] | button |  \n"


class TestListAllToolDefinition:
    """Test tool name, description and schema."""
    
    def test_name_and_schema(self, logger, manifest):
        tool = ListAllTool(logger, manifest)
        
        assert tool.name == "list_all"
        assert tool.inputSchema == {"type": "object", "properties": {}}
        assert tool.metadata.category == ToolCategory.DISCOVERY
    
    def test_description_points_to_get_documentation(self, logger, manifest):
        tool = ListAllTool(logger, manifest)
        
        assert "ALWAYS use this tool" in tool.description
        assert "get_documentation" in tool.description
