#!/usr/bin/env python3
"""
QuantaRoute Geocoder Server - Entry Point

Serves the QuantaRoute operations as MCP tools (stdio for Claude Desktop,
HTTP for API access) or as the REST surface under /api.
"""

import logging
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .constants import EnvVar

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

# Import mcp instance and all registered tools from async server
from .async_server import gateway, mcp  # noqa: F401, E402
from .rest import create_app  # noqa: E402


def main() -> None:
    """Main entry point for the server."""
    import argparse

    parser = argparse.ArgumentParser(description="QuantaRoute Geocoder Server")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http", "rest"],
        default=None,
        help="Transport mode (stdio for Claude Desktop, http for MCP over HTTP, rest for /api)",
    )
    parser.add_argument(
        "--host", default="localhost", help="Host for HTTP modes (default: localhost)"
    )
    parser.add_argument(
        "--port", type=int, default=8010, help="Port for HTTP modes (default: 8010)"
    )

    args = parser.parse_args()

    if args.mode == "stdio":
        print("QuantaRoute Geocoder MCP Server starting in STDIO mode", file=sys.stderr)
        mcp.run(stdio=True)
    elif args.mode == "http":
        print(
            f"QuantaRoute Geocoder MCP Server starting in HTTP mode on {args.host}:{args.port}",
            file=sys.stderr,
        )
        mcp.run(host=args.host, port=args.port, stdio=False)
    elif args.mode == "rest":
        print(
            f"QuantaRoute Geocoder REST API starting on {args.host}:{args.port}",
            file=sys.stderr,
        )
        # The gateway was built from the environment when async_server was
        # imported, before argument parsing; REST shares it with the MCP tools.
        uvicorn.run(create_app(gateway), host=args.host, port=args.port)
    else:
        if os.environ.get(EnvVar.MCP_STDIO) or (not sys.stdin.isatty()):
            print(
                "QuantaRoute Geocoder MCP Server starting in STDIO mode (auto-detected)",
                file=sys.stderr,
            )
            mcp.run(stdio=True)
        else:
            print(
                f"QuantaRoute Geocoder MCP Server starting in HTTP mode on {args.host}:{args.port}",
                file=sys.stderr,
            )
            mcp.run(host=args.host, port=args.port, stdio=False)


if __name__ == "__main__":
    main()
