"""Tests for ToolRegistry."""

import pytest
from unittest.mock import AsyncMock

from ds_mcp.docs import FileDocumentStore, ManifestProvider
from ds_mcp.mcp_types import MCPErrorCode, ToolHandlerResult
from ds_mcp.tools import GetDocumentationTool, ListAllTool, ToolRegistry


@pytest.fixture
def registry(logger, docs_root):
    registry = ToolRegistry(logger)
    registry.register(ListAllTool(logger, ManifestProvider.load(docs_root / "component-manifest.md")))
    registry.register(GetDocumentationTool(logger, FileDocumentStore(docs_root)))
    return registry


class TestRegistration:
    """Test registering and looking up tools."""
    
    def test_register(self, registry):
        assert registry.hasTool("list_all")
        assert registry.hasTool("get_documentation")
        assert [t.name for t in registry.listTools()] == ["list_all", "get_documentation"]
        assert registry.getHandler("list_all") is not None
    
    def test_duplicate_registration_rejected(self, registry, logger, docs_root):
        with pytest.raises(ValueError, match="already registered"):
            registry.register(GetDocumentationTool(logger, FileDocumentStore(docs_root)))
    
    def test_register_handler_for_unknown_tool(self, registry):
        with pytest.raises(ValueError, match="not found"):
            registry.registerHandler("search", AsyncMock())
    
    def test_tool_schemas(self, registry):
        schemas = {tool.name: tool for tool in registry.getToolSchemas()}
        
        assert set(schemas) == {"list_all", "get_documentation"}
        assert schemas["get_documentation"].inputSchema["required"] == ["id"]
        assert schemas["list_all"].annotations.readOnlyHint is True


@pytest.mark.asyncio
class TestExecute:
    """Test executing tools through the registry."""
    
    async def test_execute_success(self, registry, mock_context):
        result = await registry.execute("get_documentation", {"id": "button"}, mock_context)
        
        assert result.success
        assert result.execution.status == "completed"
        assert result.execution.duration is not None
        assert result.result.content[0].text.startswith("# Button")
    
    async def test_execute_failure_result(self, registry, mock_context):
        result = await registry.execute("get_documentation", {"id": "nope"}, mock_context)
        
        assert not result.success
        assert result.execution.status == "failed"
        assert result.error.code == MCPErrorCode.RESOURCE_NOT_FOUND
        assert "nope" in result.result.content[0].text
    
    async def test_unknown_tool_raises(self, registry, mock_context):
        with pytest.raises(ValueError, match="not found"):
            await registry.execute("search", {}, mock_context)
    
    async def test_handler_exception_captured(self, registry, mock_context):
        registry.registerHandler("list_all", AsyncMock(side_effect=RuntimeError("boom")))
        
        result = await registry.execute("list_all", {}, mock_context)
        
        assert not result.success
        assert result.result is None
        assert result.error.code == MCPErrorCode.INTERNAL_ERROR
        assert result.error.message == "boom"
    
    async def test_metrics_recorded(self, registry, mock_context):
        await registry.execute("get_documentation", {"id": "button"}, mock_context)
        await registry.execute("get_documentation", {"id": "missing"}, mock_context)
        await registry.execute("list_all", {}, mock_context)
        
        metrics = registry.getMetrics("get_documentation")
        assert metrics.totalExecutions == 2
        assert metrics.successfulExecutions == 1
        assert metrics.failedExecutions == 1
        assert metrics.lastExecutionTime is not None
        
        assert set(registry.getAllMetrics()) == {"get_documentation", "list_all"}
    
    async def test_metrics_for_unused_tool(self, registry):
        metrics = registry.getMetrics("list_all")
        assert metrics.totalExecutions == 0
    
    async def test_execution_ids_unique(self, registry, mock_context):
        first = await registry.execute("list_all", {}, mock_context)
        second = await registry.execute("list_all", {}, mock_context)
        assert first.execution.id != second.execution.id
    
    async def test_custom_handler(self, registry, mock_context):
        handler = AsyncMock(return_value=ToolHandlerResult(success=True))
        registry.registerHandler("list_all", handler)
        
        await registry.execute("list_all", {}, mock_context)
        
        handler.assert_awaited_once_with({}, mock_context)
