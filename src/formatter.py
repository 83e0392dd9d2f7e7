"""Rendering of search results for the terminal and for MCP clients."""
import json
from dataclasses import asdict
from typing import List, Optional, Sequence

from src.shortcuts_reader import Shortcut


def surround(prefix: str, text: str, suffix: str) -> str:
    """Wrap text in prefix and suffix, or return "" if there is no text."""
    if not text:
        return text
    return prefix + text + suffix


def format_shortcut(shortcut: Shortcut) -> str:
    """Format one shortcut as a single output line.

    Example: ``vim: delete word - dw (delete inside word: diw)``
    """
    return (
        f"{shortcut.program}: {shortcut.command} - {shortcut.shortcut} "
        f"{surround('(', shortcut.description, ')')}"
    )


def no_results_message(query: str) -> str:
    return f'no results for "{query}"'


def format_results(query: str, results: Optional[Sequence[Shortcut]]) -> List[str]:
    """Format ranked results as output lines.

    Args:
        query: The query the results were produced for
        results: Ranked shortcuts, or None when nothing matched

    Returns:
        One line per shortcut, or the single no-results line
    """
    if results is None:
        return [no_results_message(query)]
    return [format_shortcut(s) for s in results]


def results_to_json(results: Sequence[Shortcut]) -> str:
    """Serialize ranked results as a JSON list of objects."""
    return json.dumps([asdict(s) for s in results], indent=2, ensure_ascii=False)
