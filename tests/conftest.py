"""Shared fixtures for tests."""
import json
import pytest

import src.config
import src.server
from src.shortcuts_reader import Shortcut


SAMPLE_SHORTCUTS = {
    "version": 1,
    "shortcuts": [
        {
            "program": "vim",
            "command": "delete word",
            "shortcut": "dw",
            "description": "delete inside word: diw"
        },
        {
            "program": "vim",
            "command": "change word",
            "shortcut": "cw"
        },
        {
            "program": "vim",
            "command": "next tab",
            "shortcut": "gt",
            "description": "previous tab: gT"
        },
        {
            "program": "tmux",
            "command": "new window",
            "shortcut": "ctrl-b c"
        },
        {
            "program": "tmux",
            "command": "next window",
            "shortcut": "ctrl-b n"
        }
    ]
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from H_* variables and cached global state."""
    for name in ("H_DEBUG", "H_DATASET", "H_LIMIT", "H_STOP_WORDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(src.config, "_config", None)
    src.server.reset_cache()
    yield
    src.server.reset_cache()


@pytest.fixture
def sample_shortcuts_path(tmp_path):
    """Create a temporary shortcuts file with sample data."""
    shortcuts_file = tmp_path / "shortcuts.json"
    shortcuts_file.write_text(json.dumps(SAMPLE_SHORTCUTS, indent=2))
    return shortcuts_file


@pytest.fixture
def sample_shortcuts():
    """Return sample shortcuts as a tuple (as read_shortcuts returns)."""
    return (
        Shortcut(program="vim", command="delete word", shortcut="dw", description="delete inside word: diw"),
        Shortcut(program="vim", command="change word", shortcut="cw"),
        Shortcut(program="vim", command="next tab", shortcut="gt", description="previous tab: gT"),
        Shortcut(program="tmux", command="new window", shortcut="ctrl-b c"),
        Shortcut(program="tmux", command="next window", shortcut="ctrl-b n"),
    )


@pytest.fixture
def delete_word():
    """The single-record dataset used by the lookup scenarios."""
    return (Shortcut(program="vim", command="delete word", shortcut="dw"),)
