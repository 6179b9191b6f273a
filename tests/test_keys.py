import logging

import pytest

from mathbuddy import keys
from mathbuddy.state import INITIAL


@pytest.mark.parametrize("key,operator", [
    ("+", "+"),
    ("-", "-"),
    ("−", "-"),
    ("*", "×"),
    ("×", "×"),
    ("/", "÷"),
    ("÷", "÷"),
])
def test_operator_keys(key, operator):
    s = keys.replay(["6", key])
    assert s.pending_operator == operator
    assert s.pending_value == 6


@pytest.mark.parametrize("key", ["Enter", "Return", "="])
def test_equals_keys(key):
    assert keys.replay(["9", "/", "3", key]).display == "3"


def test_escape_clears():
    assert keys.replay(["9", "+", "3", "Escape"]) == INITIAL


def test_backspace_deletes():
    assert keys.replay(["4", "2", "Backspace"]).display == "4"


def test_unknown_key_is_ignored(caplog):
    s = keys.replay(["4"])
    with caplog.at_level(logging.DEBUG, logger="mathbuddy.keys"):
        assert keys.press(s, "a") is s
        assert keys.press(s, "F5") is s
        assert keys.press(s, "") is s
    assert "Ignoring unbound key 'a'" in caplog.text


@pytest.mark.parametrize("key,bound", [
    ("0", True),
    ("9", True),
    (".", True),
    ("/", True),
    ("Escape", True),
    ("Backspace", True),
    ("a", False),
    ("12", False),
    ("", False),
    ("%", False),
])
def test_is_bound(key, bound):
    assert keys.is_bound(key) is bound


def test_replay_continues_from_given_state():
    start = keys.replay(["1", "2", "+"])
    assert keys.replay(["3", "="], start).display == "15"
