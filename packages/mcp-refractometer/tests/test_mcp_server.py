"""
Tests for the refractometer MCP server definition.
"""

import asyncio

from mcp_refractometer.server import mcp


def test_server_name():
    assert mcp.name == "mcp-refractometer"


def test_tools_registered():
    tools = asyncio.run(mcp.get_tools())
    assert {"correct_reading", "convert_gravity_reading", "gravity_ranges"} <= set(tools)
