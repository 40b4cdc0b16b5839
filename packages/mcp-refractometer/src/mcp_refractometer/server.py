"""
FastMCP server definition for refractometer corrections.
"""

from fastmcp import FastMCP

from mcp_refractometer.tools import register_tools

# Create the MCP server
mcp = FastMCP(
    "mcp-refractometer",
    instructions=(
        "Refractometer alcohol correction: corrected final gravity, "
        "ABV, attenuation and calories"
    ),
)

# Register all tools
register_tools(mcp)
