"""
Lightweight MCP tool runner for quantaroute-geocoder.

Runs tools directly without MCP transport; useful for testing and demos.
Set QUANTAROUTE_API_KEY before running.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

from quantaroute_geocoder.config import GatewaySettings
from quantaroute_geocoder.core.gateway import Gateway
from quantaroute_geocoder.tools.digipin import register_digipin_tools
from quantaroute_geocoder.tools.dispatcher import ToolCallError, ToolDispatcher
from quantaroute_geocoder.tools.location import register_location_tools
from quantaroute_geocoder.tools.service import register_service_tools


class _MiniMCP:
    """Minimal MCP-like interface for capturing tool registrations."""

    def __init__(self):
        self._tools: dict[str, Any] = {}

    def add_tool(self, tool_handler) -> None:
        self._tools[tool_handler.name] = tool_handler

    def get_tool(self, name: str):
        return self._tools[name]


class ToolRunner:
    """Run QuantaRoute MCP tools directly without transport."""

    def __init__(self):
        self._mcp = _MiniMCP()
        self.gateway = Gateway(GatewaySettings.from_env())
        self.dispatcher = ToolDispatcher(self.gateway)
        register_digipin_tools(self._mcp, self.dispatcher)
        register_location_tools(self._mcp, self.dispatcher)
        register_service_tools(self._mcp, self.dispatcher)

    @property
    def tool_names(self) -> list[str]:
        return list(self._mcp._tools.keys())

    async def run(self, tool_name: str, **kwargs) -> Any:
        """Run a tool and return parsed JSON result."""
        tool = self._mcp.get_tool(tool_name)
        result = await tool.execute(kwargs)
        return json.loads(result.text)

    async def close(self) -> None:
        await self.gateway.close()


async def main() -> None:
    runner = ToolRunner()
    print(f"Available tools: {', '.join(runner.tool_names)}")
    try:
        print(json.dumps(await runner.run("get_health"), indent=2))
        result = await runner.run("geocode", address="Connaught Place, New Delhi")
        print(json.dumps(result, indent=2))
        print(json.dumps(await runner.run("autocomplete", query="Conn", limit=3), indent=2))
    except ToolCallError as e:
        print(f"Error {e.code}: {e.message}")
    finally:
        await runner.close()


if __name__ == "__main__":
    asyncio.run(main())
