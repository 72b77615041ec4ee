"""
Tool-related types
Types shared by the tool layer - follows MCP specification.
"""

from typing import Dict, Any, List, Optional, Callable, Awaitable
from dataclasses import dataclass, field
from enum import Enum


class ToolCategory(Enum):
    """Tool categories for organization."""
    DISCOVERY = "discovery"         # Catalog listing
    DOCUMENTATION = "documentation" # Single entry lookup


class MCPErrorCode(Enum):
    """MCP Error codes - follows MCP specification."""
    INVALID_PARAMS = "INVALID_PARAMS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class TextContent:
    """Text content for tool results - follows MCP specification."""
    type: str
    text: str


class ToolInput(dict):
    """Tool input data - a dict with attribute access for convenience."""
    
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        for key, value in kwargs.items():
            setattr(self, key, value)


@dataclass
class ToolContext:
    """Tool execution context."""
    requestId: str
    timestamp: float
    toolName: Optional[str] = None


@dataclass
class ToolResult:
    """Tool execution result - follows MCP specification."""
    content: List[TextContent]
    isError: bool = False


@dataclass
class ToolError:
    """Tool error information."""
    code: MCPErrorCode
    message: str
    details: Optional[str] = None


@dataclass
class ToolHandlerResult:
    """Tool handler result."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolMetadata:
    """Tool metadata."""
    category: ToolCategory
    version: str
    readOnly: bool = True


@dataclass
class ToolValidationError:
    """Tool validation error."""
    field: str
    message: str
    code: str


@dataclass
class ToolValidationResult:
    """Tool validation result."""
    valid: bool
    errors: List[ToolValidationError] = field(default_factory=list)


@dataclass
class ToolExecution:
    """Tool execution record."""
    id: str
    toolName: str
    input: Dict[str, Any]
    context: ToolContext
    startTime: str
    status: str
    endTime: Optional[str] = None
    duration: Optional[int] = None
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolExecutionResult:
    """Tool execution result."""
    execution: ToolExecution
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolMetrics:
    """Tool execution metrics."""
    toolName: str
    totalExecutions: int = 0
    successfulExecutions: int = 0
    failedExecutions: int = 0
    averageExecutionTime: float = 0
    lastExecutionTime: Optional[str] = None


class ToolMonitoring:
    """Tool monitoring interface."""
    
    def recordExecution(self, execution: ToolExecution) -> None:
        raise NotImplementedError
    
    def getMetrics(self, toolName: str) -> ToolMetrics:
        raise NotImplementedError
    
    def getAllMetrics(self) -> Dict[str, ToolMetrics]:
        raise NotImplementedError


# Type alias for tool handlers
ToolHandler = Callable[[Dict[str, Any], ToolContext], Awaitable[ToolHandlerResult]]
