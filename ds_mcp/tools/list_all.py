"""
List All Tool

Returns the catalog of components, React hooks and utility functions.
"""

from typing import Any

from ds_mcp.docs import ManifestProvider
from ds_mcp.mcp_types import (
    ToolCategory,
    ToolContext,
    ToolHandlerResult,
    ToolInput,
)
from ds_mcp.tools.base import BaseTool
from ds_mcp.utils import Logger


LIST_TOOL_NAME = "list_all"
GET_DOCS_TOOL_NAME = "get_documentation"


class ListAllTool(BaseTool):
    """Return the catalog text verbatim."""
    
    def __init__(self, logger: Logger, manifest: ManifestProvider):
        super().__init__(logger, {'category': ToolCategory.DISCOVERY})
        self.manifest = manifest
    
    @property
    def name(self) -> str:
        return LIST_TOOL_NAME
    
    @property
    def description(self) -> str:
        return f"""List all components, React hooks and utility functions from the Reshaped design system.
ALWAYS use this tool when building complex UI, as you should prefer to compose components from the package together instead of hardcoding them.
This tool returns descriptions and ids of each component, React hook and utility function.
Use the ids to call the {GET_DOCS_TOOL_NAME} tool for one or more components that you might need to use for your UI component building task."""
    
    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {}
        }
    
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute list_all."""
        result = ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(self.manifest.list_all())
        )
        self.logExecution(context, True)
        return result
