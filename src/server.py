"""MCP server for shortcut lookup."""
import json
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from src.config import get_config
from src.formatter import no_results_message, results_to_json
from src.search import SearchEngine, ShortcutSearchEngine
from src.shortcuts_reader import Shortcut, read_shortcuts


# Global state
_shortcuts_cache: Optional[Tuple[Shortcut, ...]] = None
_search_engine: Optional[SearchEngine] = None


def _log(message: str) -> None:
    if get_config().debug:
        print(f"[ShortcutsServer] {message}", file=sys.stderr)


def get_search_engine() -> SearchEngine:
    global _search_engine

    if _search_engine is None:
        _search_engine = ShortcutSearchEngine(stop_words=get_config().matcher.stop_words, log=_log)

    return _search_engine


def load_shortcuts(shortcuts_path: Optional[Path] = None) -> Tuple[Shortcut, ...]:
    """Load shortcuts, using cache if available.

    Args:
        shortcuts_path: Optional path to a dataset file, defaults to the configured one

    Returns:
        Ordered tuple of shortcuts (empty if the dataset could not be read)
    """
    global _shortcuts_cache

    if _shortcuts_cache is None:
        if shortcuts_path is None:
            shortcuts_path = get_config().dataset_path
        try:
            _shortcuts_cache = read_shortcuts(shortcuts_path)
        except FileNotFoundError as e:
            print(f"Warning: Could not find shortcuts file: {e}", file=sys.stderr)
            _shortcuts_cache = ()
        except OSError as e:
            print(f"Error reading shortcuts: {e}", file=sys.stderr)
            _shortcuts_cache = ()
        except ValueError as e:
            print(f"Error loading shortcuts: {e}", file=sys.stderr)
            _shortcuts_cache = ()

    return _shortcuts_cache


def reset_cache() -> None:
    """Forget the loaded dataset so the next call reads it again."""
    global _shortcuts_cache, _search_engine
    _shortcuts_cache = None
    _search_engine = None


async def lookup_shortcuts_tool(query: str, limit: Optional[int] = None) -> list[TextContent]:
    """Tool handler for lookup_shortcuts.

    Args:
        query: Search query string
        limit: Maximum number of results

    Returns:
        List of TextContent with the ranked shortcuts as JSON
    """
    shortcuts = load_shortcuts()

    if not shortcuts:
        return [TextContent(
            type="text",
            text="No shortcuts available. Please check the shortcuts dataset."
        )]

    if limit is None:
        limit = get_config().result_limit
    elif not isinstance(limit, int) or limit < 1:
        return [TextContent(
            type="text",
            text="Error: 'limit' must be a positive integer"
        )]
    results = get_search_engine().search(query, shortcuts, limit=limit)

    if results is None:
        return [TextContent(type="text", text=no_results_message(query))]

    return [TextContent(type="text", text=results_to_json(results))]


async def list_programs_tool() -> list[TextContent]:
    """Tool handler for list_programs: distinct program names in dataset order."""
    programs = list(dict.fromkeys(s.program for s in load_shortcuts()))
    return [TextContent(type="text", text=json.dumps(programs))]


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured Server instance
    """
    server = Server("shortcuts-lookup-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name="lookup_shortcuts",
                description=(
                    "Find editor and terminal multiplexer shortcuts. The query can be words from the "
                    "command (optionally starting with a program name such as 'vim'), an exact key "
                    "sequence, or an acronym: program initial followed by command word initials."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Free-text query, shortcut, or acronym"
                        },
                        "limit": {
                            "type": "integer",
                            "minimum": 1,
                            "description": "Maximum number of results"
                        }
                    },
                    "required": ["query"]
                }
            ),
            Tool(
                name="list_programs",
                description="List the programs that have shortcuts in the dataset.",
                inputSchema={"type": "object", "properties": {}}
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls."""
        arguments = arguments or {}
        if name == "lookup_shortcuts":
            query = arguments.get("query", "")
            if not query:
                return [TextContent(
                    type="text",
                    text="Error: 'query' parameter is required"
                )]
            return await lookup_shortcuts_tool(query, arguments.get("limit"))
        elif name == "list_programs":
            return await list_programs_tool()
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main():
    """Main entry point for the MCP server."""
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)
