"""Binary arithmetic and number/text conversion for the calculator display."""
from collections.abc import Callable as ABCCallable
import math
import operator
import re
from typing import Callable, Dict, Optional

from pocket_calculator.common.tokens import InputToken


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


def divide(a: float, b: float) -> float:
    """
    Divide with IEEE-754 semantics instead of raising on a zero divisor.

    :param float a: Dividend
    :param float b: Divisor

    :return: ``a / b``; ``±inf`` when ``b`` is zero, ``nan`` for ``0 / 0``
    :rtype: float
    """
    try:
        return operator.truediv(a, b)
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        # The sign of zero participates, so 1 / -0.0 is -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


# Mapping of operator tokens to their function
OPERATIONS: Dict[InputToken, OperatorFn] = {
    InputToken.ADD: operator.add,
    InputToken.SUBTRACT: operator.sub,
    InputToken.MULTIPLY: operator.mul,
    InputToken.DIVIDE: divide,
}

# Literals the display can hold: what the keypad builds plus rendered results
_NUMBER_RE = re.compile(
    r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)$",
    re.IGNORECASE,
)


def apply(op: InputToken, a: float, b: float) -> float:
    """
    Evaluate a binary operator on two operands.

    :param InputToken op: One of the four binary operator tokens
    :param float a: Left operand
    :param float b: Right operand

    :return: Result of the operation
    :rtype: float
    :raises ValueError: If ``op`` is not a binary operator
    """
    try:
        fn: OperatorFn = OPERATIONS[op]
    except KeyError:
        raise ValueError(f"Not a binary operator: {op!r}") from None
    return fn(a, b)


def parse_number(text: str) -> Optional[float]:
    """
    Parse display text into a number.

    :param str text: Display content

    :return: Parsed value, or None when the text is not a number
    :rtype: Optional[float]
    """
    # float() alone would also accept underscores and surrounding whitespace
    if not _NUMBER_RE.match(text):
        return None
    return float(text)


def format_number(value: float) -> str:
    """
    Render a number the way the display shows it.

    Whole values keep a trailing ``.0`` (``3.0``); non-finite values render as
    ``inf``, ``-inf`` and ``nan``.

    :param float value: Number to render

    :return: Textual form
    :rtype: str
    """
    return repr(float(value))
