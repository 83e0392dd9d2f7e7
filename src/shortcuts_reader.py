"""Shortcuts dataset reader module."""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class Shortcut:
    """One cheat-sheet entry."""
    program: str
    command: str
    shortcut: str
    description: str = ""


def get_default_shortcuts_path() -> Path:
    """Get the path to the bundled shortcuts dataset.

    Returns:
        Path to the shortcuts.json file shipped with the package
    """
    return Path(__file__).parent / "data" / "shortcuts.json"


def load_shortcuts_file(shortcuts_path: Optional[Path] = None) -> List[Dict[str, Any]]:
    """Load the raw entries of a shortcuts JSON file.

    Args:
        shortcuts_path: Optional path to a dataset file. If None, uses the bundled dataset.

    Returns:
        List of raw entry dictionaries, in file order

    Raises:
        FileNotFoundError: If the dataset file doesn't exist
        json.JSONDecodeError: If the dataset file is malformed
        ValueError: If the document has no "shortcuts" list
    """
    if shortcuts_path is None:
        shortcuts_path = get_default_shortcuts_path()

    if not shortcuts_path.exists():
        raise FileNotFoundError(f"Shortcuts file not found at {shortcuts_path}")

    with open(shortcuts_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    entries = data.get("shortcuts") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"No 'shortcuts' list in {shortcuts_path}")

    return entries


def parse_shortcut(entry: Dict[str, Any]) -> Shortcut:
    """Build a Shortcut from one raw dataset entry.

    Args:
        entry: Dictionary with 'program', 'command', 'shortcut' and optional
            'description' (or 'desc') keys

    Returns:
        The parsed Shortcut

    Raises:
        ValueError: If the entry is not an object, or 'program' or 'command' is missing or empty
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Shortcut entry is not an object: {entry!r}")

    program = entry.get("program") or ""
    command = entry.get("command") or ""
    if not program:
        raise ValueError(f"Shortcut entry has no program: {entry!r}")
    if not command:
        raise ValueError(f"Shortcut entry has no command: {entry!r}")

    description = entry.get("description", entry.get("desc", "")) or ""

    return Shortcut(
        program=str(program),
        command=str(command),
        shortcut=str(entry.get("shortcut") or ""),
        description=str(description),
    )


def read_shortcuts(shortcuts_path: Optional[Path] = None) -> Tuple[Shortcut, ...]:
    """Read the full shortcuts dataset.

    Args:
        shortcuts_path: Optional path to a dataset file. If None, uses the bundled dataset.

    Returns:
        Immutable, ordered sequence of shortcuts. File order is the ranking tie-break order.

    Raises:
        FileNotFoundError: If the dataset file doesn't exist
        json.JSONDecodeError: If the dataset file is malformed
        ValueError: If an entry is missing a program or command
    """
    entries = load_shortcuts_file(shortcuts_path)
    return tuple(parse_shortcut(entry) for entry in entries)
