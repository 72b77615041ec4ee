"""
Tool Registry
Manages tool registration, discovery, and execution.
"""

from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from itertools import count

from ds_mcp.mcp_types import (
    ToolHandler, ToolContext, ToolError,
    ToolExecution, ToolExecutionResult, MCPErrorCode,
    ToolMetrics, ToolMonitoring
)
from mcp.types import Tool as MCPTool, ToolAnnotations
from ds_mcp.tools.base import BaseTool


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MapToolMonitoring(ToolMonitoring):
    """In-memory per-tool execution metrics."""
    
    def __init__(self):
        self.metrics: Dict[str, ToolMetrics] = {}
    
    def recordExecution(self, execution: ToolExecution) -> None:
        existing = self.metrics.get(execution.toolName) or ToolMetrics(toolName=execution.toolName)
        
        existing.totalExecutions += 1
        existing.lastExecutionTime = execution.startTime
        
        if execution.status == 'completed':
            existing.successfulExecutions += 1
        else:
            existing.failedExecutions += 1
        
        if execution.duration is not None:
            total_time = existing.averageExecutionTime * (existing.totalExecutions - 1) + execution.duration
            existing.averageExecutionTime = total_time / existing.totalExecutions
        
        self.metrics[execution.toolName] = existing
    
    def getMetrics(self, toolName: str) -> ToolMetrics:
        return self.metrics.get(toolName) or ToolMetrics(toolName=toolName)
    
    def getAllMetrics(self) -> Dict[str, ToolMetrics]:
        return dict(self.metrics)


class ToolRegistry:
    """Tool Registry Implementation."""
    
    def __init__(self, logger, monitoring: Optional[ToolMonitoring] = None):
        self.logger = logger
        self.tools: Dict[str, BaseTool] = {}
        self.handlers: Dict[str, ToolHandler] = {}
        self.monitoring = monitoring or MapToolMonitoring()
        self._execution_ids = count(1)
    
    def register(self, tool: BaseTool) -> None:
        """Register a tool and bind its execute method as the handler."""
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")
        
        self.tools[tool.name] = tool
        self.handlers[tool.name] = tool.execute
        self.logger.info(f"Tool registered: {tool.name}")
    
    def registerHandler(self, toolName: str, handler: ToolHandler) -> None:
        """Replace the handler of a registered tool."""
        if toolName not in self.tools:
            raise ValueError(f"Tool {toolName} not found in registry")
        
        self.handlers[toolName] = handler
        self.logger.debug(f"Tool handler registered: {toolName}")
    
    def get(self, toolName: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self.tools.get(toolName)
    
    def getHandler(self, toolName: str) -> Optional[ToolHandler]:
        """Get a tool handler by name."""
        return self.handlers.get(toolName)
    
    def listTools(self) -> List[BaseTool]:
        """List all registered tools."""
        return list(self.tools.values())
    
    def hasTool(self, toolName: str) -> bool:
        """Check if a tool is registered."""
        return toolName in self.tools
    
    async def execute(self, toolName: str, input: Dict[str, Any], context: ToolContext) -> ToolExecutionResult:
        """Execute a tool with input and context.
        
        Raises ValueError for unknown tools. Handler exceptions are captured
        into a failed ToolExecutionResult.
        """
        tool = self.get(toolName)
        if not tool:
            raise ValueError(f"Tool {toolName} not found")
        
        handler = self.getHandler(toolName)
        if not handler:
            raise ValueError(f"Handler for tool {toolName} not found")
        
        started = _now()
        execution = ToolExecution(
            id=self._generateExecutionId(),
            toolName=toolName,
            input=input,
            context=context,
            startTime=started.isoformat(),
            status='running'
        )
        
        try:
            result = await handler(input, context)
        except Exception as error:
            self.logger.error(f"Tool {toolName} raised: {error}")
            execution.status = 'failed'
            execution.error = ToolError(
                code=MCPErrorCode.INTERNAL_ERROR,
                message=str(error)
            )
            self._finish(execution, started)
            return ToolExecutionResult(
                execution=execution,
                success=False,
                error=execution.error
            )
        
        execution.status = 'completed' if result.success else 'failed'
        execution.result = result.result
        execution.error = result.error
        self._finish(execution, started)
        
        return ToolExecutionResult(
            execution=execution,
            success=result.success,
            result=result.result,
            error=result.error
        )
    
    def getToolSchemas(self) -> List[MCPTool]:
        """Get tool schemas for MCP protocol - returns proper MCP Tool objects."""
        return [
            MCPTool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema,
                annotations=ToolAnnotations(readOnlyHint=tool.metadata.readOnly),
            )
            for tool in self.listTools()
        ]
    
    def getMetrics(self, toolName: str) -> ToolMetrics:
        """Get metrics for a tool."""
        return self.monitoring.getMetrics(toolName)
    
    def getAllMetrics(self) -> Dict[str, ToolMetrics]:
        """Get all metrics."""
        return self.monitoring.getAllMetrics()
    
    def _finish(self, execution: ToolExecution, started: datetime) -> None:
        ended = _now()
        execution.endTime = ended.isoformat()
        execution.duration = int((ended - started).total_seconds() * 1000)
        self.monitoring.recordExecution(execution)
    
    def _generateExecutionId(self) -> str:
        """Generate unique execution ID."""
        return f"exec_{int(_now().timestamp() * 1000)}_{next(self._execution_ids)}"
