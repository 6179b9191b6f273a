"""
Key vocabulary shared by the button grid and the keyboard.

Names are plain strings ("7", "+", "Enter", "Backspace", ...) so the mapping
works without any GUI toolkit; the Qt window translates its key events into
these names before calling press().
"""

import logging
from typing import Iterable, Optional

from . import state as st
from .state import CalculatorState

logger = logging.getLogger(__name__)

_OPERATOR_KEYS = {
    "+": "+",
    "-": "-",
    "−": "-",
    "*": "×",
    "×": "×",
    "/": "÷",
    "÷": "÷",
}

_ACTION_KEYS = {
    ".": st.decimal_point,
    "=": st.equals,
    "Enter": st.equals,
    "Return": st.equals,
    "Escape": st.clear,
    "Backspace": st.delete,
}


def is_bound(key: str) -> bool:
    return (len(key) == 1 and key in st.DIGITS) or key in _OPERATOR_KEYS or key in _ACTION_KEYS


def press(state: CalculatorState, key: str) -> CalculatorState:
    """Apply the transition bound to key; unknown keys leave state as it is."""
    if len(key) == 1 and key in st.DIGITS:
        return st.digit(state, key)
    if key in _OPERATOR_KEYS:
        return st.press_operator(state, _OPERATOR_KEYS[key])
    action = _ACTION_KEYS.get(key)
    if action is None:
        logger.debug("Ignoring unbound key %r", key)
        return state
    return action(state)


def replay(keys: Iterable[str], state: Optional[CalculatorState] = None) -> CalculatorState:
    """Press every key in order, starting from state (or a fresh calculator)."""
    current = st.INITIAL if state is None else state
    for key in keys:
        current = press(current, key)
    return current
