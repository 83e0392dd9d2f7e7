"""Search engine module for shortcuts."""
import re
from typing import Callable, FrozenSet, List, NamedTuple, Optional, Protocol, Sequence

from src.config import DEFAULT_STOP_WORDS
from src.shortcuts_reader import Shortcut


LogFunc = Callable[[str], None]


class ScoredShortcut(NamedTuple):
    """A shortcut's position in the dataset and its total score."""
    index: int
    score: int


class SearchEngine(Protocol):
    """Protocol for search engines to allow extensibility."""

    def search(
        self, query: str, shortcuts: Sequence[Shortcut], limit: Optional[int] = None
    ) -> Optional[List[Shortcut]]:
        """Search shortcuts based on query.

        Args:
            query: Search query string
            shortcuts: Ordered dataset to search
            limit: Maximum number of results to return, None for all

        Returns:
            Matching shortcuts sorted by relevance, or None when nothing matched
        """
        ...


def normalise_words(text: str, stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS) -> List[str]:
    """Lower-case text and split it on spaces, dropping stop words.

    Args:
        text: Text to tokenize
        stop_words: Words to leave out

    Returns:
        List of lowercase words
    """
    # Empty pieces from repeated spaces are dropped too, or "" would match every command word
    return [w for w in text.lower().split(" ") if w and w not in stop_words]


def shortcut_matcher(query: str, shortcuts: Sequence[Shortcut]) -> List[int]:
    """Score 1 for every shortcut whose key sequence is exactly the query."""
    return [1 if s.shortcut == query else 0 for s in shortcuts]


def word_matcher(
    query: str, shortcuts: Sequence[Shortcut], stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS
) -> List[int]:
    """Score shortcuts by query words found inside their command words.

    Each (query word, command word) pair where the command word contains
    the query word adds one. If the first query word names a program in
    the dataset, only that program's shortcuts are scored.

    Args:
        query: Search query string
        shortcuts: Ordered dataset to score
        stop_words: Words ignored in both query and commands

    Returns:
        One score per shortcut, in dataset order
    """
    scores = [0] * len(shortcuts)
    if not query:
        return scores

    query_words = normalise_words(query, stop_words)
    if not query_words:
        return scores

    program_names = {s.program.lower() for s in shortcuts}
    filter_by_program = query_words[0] in program_names

    for i, s in enumerate(shortcuts):
        if filter_by_program and s.program.lower() != query_words[0]:
            continue
        command_words = normalise_words(s.command, stop_words)
        for qw in query_words:
            for cw in command_words:
                if qw in cw:
                    scores[i] += 1
    return scores


# Surrogates that surrogateescape can't turn back into a byte, e.g. from a JSON "\ud800"
_STRAY_SURROGATES = re.compile("[\ud800-\udc7f\udd00-\udfff]")


def _utf8(text: str) -> bytes:
    # Undecodable argv bytes come back as the original bytes.
    return _STRAY_SURROGATES.sub("\ufffd", text).encode("utf-8", "surrogateescape")


def initial_matcher(query: str, shortcuts: Sequence[Shortcut]) -> List[int]:
    """Score shortcuts by treating the query as an acronym.

    The first character has to match the first letter of the program;
    every following character scores one if it is the first letter of
    the command word at the same position. Lengths and positions are
    counted in UTF-8 bytes.

    Args:
        query: Search query string
        shortcuts: Ordered dataset to score

    Returns:
        One score per shortcut, in dataset order
    """
    scores = [0] * len(shortcuts)
    if not query:
        return scores

    encoded = _utf8(query)
    tail = []
    offset = 0
    for char in encoded[1:].decode("utf-8", "surrogateescape"):
        tail.append((offset, char))
        offset += len(char.encode("utf-8", "surrogateescape"))

    for i, s in enumerate(shortcuts):
        # If the program doesn't match.
        if encoded[:1] != _utf8(s.program)[:1]:
            continue
        # If there are more characters in the initials than words in the command.
        command_words = s.command.split(" ")
        if len(command_words) < len(encoded) - 1:
            continue
        for j, char in tail:
            word = _utf8(command_words[j])
            if word and ord(char) == word[0]:
                scores[i] += 1
    return scores


def combine_scores(*score_lists: Sequence[int]) -> List[int]:
    """Sum per-shortcut scores from several matchers."""
    return [sum(scores) for scores in zip(*score_lists)]


def rank(
    query: str,
    shortcuts: Sequence[Shortcut],
    stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS,
    log: Optional[LogFunc] = None,
) -> List[ScoredShortcut]:
    """Score every shortcut with all matchers and rank the hits.

    Args:
        query: Search query string
        shortcuts: Ordered dataset to rank
        stop_words: Words ignored by the word matcher
        log: Optional callable receiving progress messages

    Returns:
        Shortcuts with a positive total score, highest first. Equal scores
        keep dataset order.
    """
    def trace(message: str) -> None:
        if log is not None:
            log(message)

    trace(f"query: {query}")
    initial_scores = initial_matcher(query, shortcuts)
    trace("completed initial matcher")
    word_scores = word_matcher(query, shortcuts, stop_words)
    trace("completed word matcher")
    shortcut_scores = shortcut_matcher(query, shortcuts)
    trace("completed shortcut matcher")

    totals = combine_scores(initial_scores, word_scores, shortcut_scores)
    hits = [ScoredShortcut(index=i, score=score) for i, score in enumerate(totals) if score > 0]

    # sorted() is stable, so ties stay in dataset order
    ranked = sorted(hits, key=lambda hit: hit.score, reverse=True)
    trace(f"sorted {len(ranked)} results")
    return ranked


class ShortcutSearchEngine:
    """Ranks shortcuts with the initial, word and shortcut matchers."""

    def __init__(self, stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS, log: Optional[LogFunc] = None):
        self.stop_words = stop_words
        self.log = log

    def search(
        self, query: str, shortcuts: Sequence[Shortcut], limit: Optional[int] = None
    ) -> Optional[List[Shortcut]]:
        """Search shortcuts using all three matchers.

        Args:
            query: Search query string
            shortcuts: Ordered dataset to search
            limit: Maximum number of results to return, None for all

        Returns:
            Matching shortcuts, highest score first, or None when no
            shortcut scored above zero

        Raises:
            ValueError: If limit is below 1
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        ranked = rank(query, shortcuts, self.stop_words, self.log)
        if not ranked:
            return None

        results = [shortcuts[hit.index] for hit in ranked]
        if limit is not None:
            results = results[:limit]
        return results
