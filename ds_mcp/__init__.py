"""
ds-mcp
MCP server exposing the Reshaped design system documentation to LLM agents.
"""

__version__ = "0.0.1"
__package_name__ = "ds-mcp"
