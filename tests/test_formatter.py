"""Tests for formatter module."""
import json

from src.formatter import format_results, format_shortcut, no_results_message, results_to_json, surround
from src.shortcuts_reader import Shortcut


def test_surround():
    assert surround("(", "text", ")") == "(text)"
    assert surround("(", "", ")") == ""


def test_format_with_description():
    s = Shortcut(program="vim", command="next tab", shortcut="gt", description="previous tab: gT")
    assert format_shortcut(s) == "vim: next tab - gt (previous tab: gT)"


def test_format_without_description():
    s = Shortcut(program="tmux", command="detach", shortcut="ctrl-b d")
    assert format_shortcut(s) == "tmux: detach - ctrl-b d "


def test_no_results():
    assert format_results("xyz", None) == ['no results for "xyz"']
    assert no_results_message("") == 'no results for ""'


def test_format_results(sample_shortcuts):
    lines = format_results("word", sample_shortcuts[:2])
    assert lines == [
        "vim: delete word - dw (delete inside word: diw)",
        "vim: change word - cw ",
    ]


def test_results_to_json(sample_shortcuts):
    data = json.loads(results_to_json(sample_shortcuts[:1]))
    assert data == [{
        "program": "vim",
        "command": "delete word",
        "shortcut": "dw",
        "description": "delete inside word: diw",
    }]
