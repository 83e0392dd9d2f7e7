"""Configuration for the shortcuts lookup tool."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional


DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset({"the", "and", "of"})


def _parse_stop_words(value: Optional[str]) -> FrozenSet[str]:
    if value is None:
        return DEFAULT_STOP_WORDS
    return frozenset(w.strip().lower() for w in value.split(",") if w.strip())


@dataclass(frozen=True)
class MatcherConfig:
    """Configuration for the matchers."""
    # Words dropped by the tokenizer
    stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS

    @classmethod
    def from_env(cls) -> "MatcherConfig":
        """Create config from environment variables."""
        return cls(
            stop_words=_parse_stop_words(os.environ.get("H_STOP_WORDS")),
        )


@dataclass
class Config:
    """Main configuration for the shortcuts lookup tool."""
    matcher: MatcherConfig = field(default_factory=MatcherConfig.from_env)
    dataset_path: Optional[Path] = None  # None = bundled dataset
    debug: bool = False
    result_limit: Optional[int] = None  # None = unlimited

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        dataset_str = os.environ.get("H_DATASET")
        dataset_path = Path(dataset_str) if dataset_str else None

        limit_str = os.environ.get("H_LIMIT")
        result_limit = int(limit_str) if limit_str else None
        if result_limit is not None and result_limit < 1:
            raise ValueError(f"H_LIMIT must be at least 1, got {limit_str}")

        return cls(
            matcher=MatcherConfig.from_env(),
            dataset_path=dataset_path,
            debug=os.environ.get("H_DEBUG") == "true",
            result_limit=result_limit,
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance.

    Returns:
        Config loaded from environment
    """
    global _config

    if _config is None:
        _config = Config.from_env()

    return _config
