"""
MCP server entry point for refractometer corrections.

Run with: python -m mcp_refractometer
"""

# Suppress Pydantic deprecation warnings BEFORE any imports
import warnings
warnings.filterwarnings("ignore", category=DeprecationWarning)

import sys
import traceback

try:
    print("[REFRACTOMETER] Importing server module...", file=sys.stderr, flush=True)
    from mcp_refractometer.server import mcp

    if __name__ == "__main__":
        print("[REFRACTOMETER] Starting MCP server...", file=sys.stderr, flush=True)
        # Let FastMCP auto-detect transport
        mcp.run(show_banner=False)
        print("[REFRACTOMETER] Server exited normally", file=sys.stderr, flush=True)
except Exception as e:
    print(f"Fatal error starting refractometer MCP: {e}", file=sys.stderr)
    traceback.print_exc(file=sys.stderr)
    sys.exit(1)
