"""Call the poke-team FastMCP server over HTTP from the command line.

Usage:
    python scripts/mcp_client.py --list
    python scripts/mcp_client.py analyze_team pokemon=charizard,blastoise,venusaur
    python scripts/mcp_client.py recommend_team pokemon='["garchomp", 242]' max_recommendations=3
    python scripts/mcp_client.py calculate_type_matchup attacker_type=ice defender_type=dragon

Values are decoded as JSON when possible; for the list-valued ``pokemon`` and
``types`` parameters a comma-separated string is also accepted.
"""
from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any

from fastmcp import Client

LIST_PARAMS = {"pokemon", "types"}


def _parse_param(arg: str) -> tuple[str, Any]:
    if "=" not in arg:
        raise argparse.ArgumentTypeError("Parameters must be in key=value format")
    key, raw = arg.split("=", 1)
    try:
        value: Any = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    if key in LIST_PARAMS and isinstance(value, str):
        value = [item.strip() for item in value.split(",") if item.strip()]
    return key, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Invoke poke-team MCP tools")
    parser.add_argument(
        "--url",
        default="http://localhost:3333/mcp",
        help="MCP endpoint exposed by the FastMCP server",
    )
    parser.add_argument("--list", action="store_true", help="List the available tools")
    parser.add_argument("tool", nargs="?", default="type_profile", help="Tool name to invoke")
    parser.add_argument(
        "params",
        nargs="*",
        type=_parse_param,
        help="Tool parameters as key=value",
    )
    return parser


async def _main_async() -> None:
    args = _build_parser().parse_args()

    async with Client(args.url) as client:
        await client.ping()
        if args.list:
            for tool in await client.list_tools():
                print(f"- {tool.name}: {tool.description or ''}")
            return

        result = await client.call_tool(args.tool, dict(args.params))
        payload = getattr(result, "data", None)
        if payload is None:
            content = getattr(result, "content", result)
            payload = [getattr(block, "text", str(block)) for block in content]
        print(json.dumps(payload, indent=2, default=str))


def main() -> None:
    asyncio.run(_main_async())


if __name__ == "__main__":
    main()
