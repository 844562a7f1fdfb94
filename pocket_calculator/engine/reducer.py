"""Pure state machine of the calculator: one key press in, next state out."""
from typing import Callable, Optional

from pocket_calculator.common.models import CalculatorState
from pocket_calculator.common.operations import apply, format_number, parse_number
from pocket_calculator.common.tokens import InputToken


INITIAL_STATE = CalculatorState()

PHASE_FIRST_OPERAND = "first_operand"
PHASE_SECOND_OPERAND = "second_operand"


def phase(state: CalculatorState) -> str:
    """Return which operand the keypad is currently building."""
    return PHASE_SECOND_OPERAND if state.entering_second_operand else PHASE_FIRST_OPERAND


def _press_digit(state: CalculatorState, token: InputToken) -> CalculatorState:
    display = state.display + token.title
    # An unparsable display (e.g. "inf5") clears the operand being typed
    value: Optional[float] = parse_number(display)
    if state.entering_second_operand:
        return state.model_copy(update={"display": display, "second_operand": value})
    return state.model_copy(update={"display": display, "first_operand": value})


def _press_decimal(state: CalculatorState) -> CalculatorState:
    if "." in state.display:
        return state
    return state.model_copy(update={"display": state.display + InputToken.DECIMAL.title})


def _press_operator(state: CalculatorState, token: InputToken) -> CalculatorState:
    return state.model_copy(update={"display": "", "pending_operator": token})


def _press_equals(state: CalculatorState) -> CalculatorState:
    if state.first_operand is None or state.second_operand is None or state.pending_operator is None:
        return state
    result = apply(state.pending_operator, state.first_operand, state.second_operand)
    return CalculatorState(display=format_number(result), first_operand=result)


def _rewrite_display(state: CalculatorState, transform: Callable[[float], float]) -> CalculatorState:
    value = parse_number(state.display)
    if value is None:
        return state
    return state.model_copy(update={"display": format_number(transform(value))})


def reduce(state: CalculatorState, token: InputToken) -> CalculatorState:
    """
    Compute the state that follows a key press.

    Malformed sequences (a second decimal point, equals without an operator,
    sign flip on an empty display...) return ``state`` unchanged.

    :param CalculatorState state: Current state
    :param InputToken token: Key that was pressed

    :return: Next state
    :rtype: CalculatorState
    """
    if token.is_digit:
        return _press_digit(state, token)
    if token is InputToken.DECIMAL:
        return _press_decimal(state)
    if token.is_operator:
        return _press_operator(state, token)
    if token is InputToken.EQUALS:
        return _press_equals(state)
    if token is InputToken.CLEAR:
        return INITIAL_STATE
    if token is InputToken.SIGN_FLIP:
        return _rewrite_display(state, lambda value: value * -1)
    if token is InputToken.PERCENT:
        return _rewrite_display(state, lambda value: value / 100)
    raise ValueError(f"Unhandled calculator key: {token!r}")
