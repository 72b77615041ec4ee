"""
Base Tool Classes
Abstract base class for tool implementations.
"""

import json
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from ds_mcp.mcp_types import (
    ToolInput, ToolResult, ToolError, ToolContext,
    ToolHandlerResult, ToolValidationResult, ToolValidationError,
    MCPErrorCode, TextContent, ToolCategory, ToolMetadata
)
from ds_mcp import __version__


_JSON_TYPES = {
    'string': str,
    'number': (int, float),
    'boolean': bool,
    'object': dict,
    'array': list,
}


class BaseTool(ABC):
    """Abstract base class for all tool implementations."""
    
    def __init__(self, logger, metadata: Optional[Dict[str, Any]] = None):
        self.logger = logger
        
        default_metadata = {
            'category': ToolCategory.DOCUMENTATION,
            'version': __version__,
            'readOnly': True,
        }
        if metadata:
            default_metadata.update(metadata)
        
        self.metadata = ToolMetadata(**default_metadata)
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""
        pass
    
    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        pass
    
    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""
        pass
    
    @abstractmethod
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute the tool with input and context."""
        pass
    
    def validateInput(self, input: Dict[str, Any]) -> ToolValidationResult:
        """Validate tool input against schema.
        
        Required string fields must also be non-empty.
        """
        errors = []
        properties = self.inputSchema.get('properties', {})
        
        for field in self.inputSchema.get('required', []):
            value = input.get(field)
            if value is None:
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Required field '{field}' is missing",
                    code="MISSING_REQUIRED_FIELD"
                ))
            elif properties.get(field, {}).get('type') == 'string' and value == "":
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Required field '{field}' must not be empty",
                    code="EMPTY_REQUIRED_FIELD"
                ))
        
        for field, value in input.items():
            if field not in properties or value is None:
                continue
            expected_type = properties[field].get('type')
            python_type = _JSON_TYPES.get(expected_type)
            if python_type is None:
                continue
            # bool is an int subclass; don't let True pass as a number
            if expected_type == 'number' and isinstance(value, bool):
                valid = False
            else:
                valid = isinstance(value, python_type)
            if not valid:
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Field '{field}' must be a {expected_type}",
                    code="INVALID_TYPE"
                ))
        
        return ToolValidationResult(valid=len(errors) == 0, errors=errors)
    
    def createSuccessResult(self, data: Any) -> ToolResult:
        """Create a successful tool result - follows MCP specification.
        
        Strings are passed through verbatim; anything else is JSON encoded.
        """
        if isinstance(data, str):
            text = data
        else:
            try:
                text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
            except (TypeError, ValueError) as e:
                self.logger.warning(f"Failed to serialize tool result: {e}")
                text = json.dumps({"error": "Failed to serialize result"}, indent=2)
        
        return ToolResult(
            content=[TextContent(type="text", text=text)],
            isError=False
        )
    
    def createErrorResult(self, error_or_code, message: str | None = None) -> ToolResult:
        """Create an error tool result - follows MCP specification.
        
        Can be called as:
            createErrorResult(ToolError(...))
            createErrorResult(code, message)
        """
        if isinstance(error_or_code, ToolError):
            error_message = error_or_code.message
        else:
            error_message = message or str(error_or_code)
        
        return ToolResult(
            content=[TextContent(type="text", text=error_message)],
            isError=True
        )
    
    def failure(self, code: MCPErrorCode, message: str, details: str | None = None) -> ToolHandlerResult:
        """Build a failed handler result whose error text is returned to the caller."""
        error = ToolError(code=code, message=message, details=details)
        return ToolHandlerResult(
            success=False,
            error=error,
            result=self.createErrorResult(error)
        )
    
    def invalidInput(self, validation: ToolValidationResult) -> ToolHandlerResult:
        messages = "; ".join(e.message for e in validation.errors)
        return self.failure(MCPErrorCode.INVALID_PARAMS, f"Invalid input: {messages}")
    
    def logExecution(self, context: ToolContext, success: bool):
        """Log tool execution."""
        self.logger.debug(f"Tool executed: {self.name}", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId
        })
