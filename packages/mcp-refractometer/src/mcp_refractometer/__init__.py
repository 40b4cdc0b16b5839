"""mcp-refractometer: MCP tools for refractometer alcohol correction."""

__version__ = "0.1.0"
