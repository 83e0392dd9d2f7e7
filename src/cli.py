"""Command-line entry point: look up a shortcut by free-text query."""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from src.config import get_config
from src.formatter import format_results, results_to_json
from src.search import ShortcutSearchEngine
from src.shortcuts_reader import read_shortcuts


def build_query(words: Sequence[str]) -> str:
    """Join command-line words into a single space-separated query."""
    return " ".join(words)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="h",
        description="Find editor and terminal shortcuts. Use -- before queries that start with a dash.",
    )
    parser.add_argument("query", nargs="*", help="words, a shortcut, or an acronym like 'vdw'")
    parser.add_argument("--data", type=Path, default=None, help="alternate shortcuts JSON file")
    parser.add_argument("--limit", type=_positive_int, default=None, help="show at most N results")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument("--debug", action="store_true", help="trace matching on stderr (same as H_DEBUG=true)")
    return parser


def _printable(text: str) -> str:
    # Undecodable argv bytes are shown as U+FFFD instead of failing to print
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def main(argv: Optional[List[str]] = None) -> int:
    """Run a lookup and print the ranked shortcuts.

    Returns:
        0 if anything matched, 1 for no results, 2 if the configuration or
        dataset could not be loaded
    """
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ValueError as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        return 2

    debug = args.debug or config.debug

    def logf(message: str) -> None:
        if debug:
            print(f"[h] {_printable(message)}", file=sys.stderr)

    dataset_path = args.data if args.data is not None else config.dataset_path
    try:
        shortcuts = read_shortcuts(dataset_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error reading shortcuts: {e}", file=sys.stderr)
        return 2
    except (json.JSONDecodeError, ValueError) as e:
        print(f"Error loading shortcuts: {e}", file=sys.stderr)
        return 2
    logf(f"loaded {len(shortcuts)} shortcuts")

    query = build_query(args.query)
    engine = ShortcutSearchEngine(stop_words=config.matcher.stop_words, log=logf)
    limit = args.limit if args.limit is not None else config.result_limit
    results = engine.search(query, shortcuts, limit=limit)

    if args.json and results is not None:
        print(results_to_json(results))
    else:
        for line in format_results(query, results):
            print(_printable(line))

    return 0 if results is not None else 1


if __name__ == "__main__":
    sys.exit(main())
