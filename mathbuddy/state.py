"""
state.py
Calculator state machine for Math Buddy.

The whole calculator is four fields and six transitions. Every transition is
a pure function: it takes a CalculatorState and returns a new one, the old
value is never touched. Arithmetic is a strict left-to-right fold, there is
no operator precedence.
"""

import operator
from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable, Optional, Tuple

DIGITS = "0123456789"
OPERATORS = ("+", "-", "×", "÷")


class InputError(ValueError):
    pass


# ----------------------------
# Arithmetic
# ----------------------------
def _divide(a: float, b: float) -> float:
    # division by zero shows 0, never an error or inf
    return a / b if b != 0 else 0


_APPLY = {
    "+": operator.add,
    "-": operator.sub,
    "×": operator.mul,
    "÷": _divide,
}


def apply_operation(a: float, b: float, op: str) -> float:
    """Apply one of the four binary operators to a and b."""
    try:
        return _APPLY[op](a, b)
    except KeyError:
        raise InputError(f"Unknown operator {op!r}") from None


def fold(first: float, pairs: Iterable[Tuple[str, float]]) -> float:
    """
    Evaluate (operator, operand) pairs from left to right.

    Reference evaluation for a whole key sequence at once; the transitions
    themselves only call apply_operation, one step per key.
    fold(5, [("+", 3), ("×", 2)]) == 16, the same as pressing 5 + 3 × 2 =.
    """
    return reduce(lambda acc, pair: apply_operation(acc, pair[1], pair[0]), pairs, first)


# ----------------------------
# Display text
# ----------------------------
def parse_operand(text: str) -> float:
    return float(text)


def format_number(value: float) -> str:
    """
    Render a result for the display.

    Integral values print without a fractional part (8, not 8.0) up to 1e21,
    everything else uses the shortest repr that round-trips.
    """
    if value == value and abs(value) < 1e21 and value == int(value):
        return str(int(value))
    return repr(float(value))


# ----------------------------
# State
# ----------------------------
@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    pending_value: Optional[float] = None
    pending_operator: Optional[str] = None
    awaiting_operand: bool = False

    @property
    def phase(self) -> str:
        return "pending_operand" if self.awaiting_operand else "entry"

    @property
    def pending_line(self) -> str:
        """Secondary display line, e.g. '12 +' while an operator is pending."""
        if not self.pending_operator:
            return ""
        value = "" if self.pending_value is None else format_number(self.pending_value)
        return f"{value} {self.pending_operator}".strip()


INITIAL = CalculatorState()


def digit(state: CalculatorState, d: str) -> CalculatorState:
    if len(d) != 1 or d not in DIGITS:
        raise InputError(f"Not a digit: {d!r}")
    if state.awaiting_operand:
        return replace(state, display=d, awaiting_operand=False)
    display = d if state.display == "0" else state.display + d
    return replace(state, display=display)


def decimal_point(state: CalculatorState) -> CalculatorState:
    if state.awaiting_operand:
        return replace(state, display="0.", awaiting_operand=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def press_operator(state: CalculatorState, op: str) -> CalculatorState:
    if op not in OPERATORS:
        raise InputError(f"Unknown operator {op!r}")
    operand = parse_operand(state.display)
    display = state.display
    pending_value = state.pending_value

    if pending_value is None:
        pending_value = operand
    elif state.pending_operator:
        result = apply_operation(pending_value, operand, state.pending_operator)
        display = format_number(result)
        pending_value = result

    return CalculatorState(display=display, pending_value=pending_value,
                           pending_operator=op, awaiting_operand=True)


def equals(state: CalculatorState) -> CalculatorState:
    if state.pending_value is None or not state.pending_operator:
        return state
    result = apply_operation(state.pending_value, parse_operand(state.display), state.pending_operator)
    return CalculatorState(display=format_number(result), awaiting_operand=True)


def clear(state: CalculatorState) -> CalculatorState:
    return INITIAL


def delete(state: CalculatorState) -> CalculatorState:
    if state.awaiting_operand:
        return state
    display = state.display[:-1] if len(state.display) > 1 else "0"
    return replace(state, display=display)
