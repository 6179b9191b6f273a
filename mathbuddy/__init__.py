"""Math Buddy: a small four-function desktop calculator."""

from .state import (
    INITIAL,
    CalculatorState,
    InputError,
    apply_operation,
    clear,
    decimal_point,
    delete,
    digit,
    equals,
    fold,
    format_number,
    press_operator,
)
from .keys import press, replay

__version__ = "0.1.0"
