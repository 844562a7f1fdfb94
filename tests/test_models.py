"""Test class CalculatorState."""
from pydantic import ValidationError
import pytest

from pocket_calculator.common.models import CalculatorState
from pocket_calculator.common.tokens import InputToken


def test_default_state_is_empty() -> None:
    """A new state has an empty display and nothing pending."""
    state = CalculatorState()
    assert state.display == ""
    assert state.first_operand is None
    assert state.second_operand is None
    assert state.pending_operator is None
    assert not state.entering_second_operand


def test_pending_operator_from_title() -> None:
    """The pending operator can be given by its title."""
    state = CalculatorState(pending_operator="+")
    assert state.pending_operator is InputToken.ADD
    assert state.entering_second_operand


@pytest.mark.parametrize("token", [InputToken.EQUALS, InputToken.SEVEN, InputToken.PERCENT])
def test_pending_operator_must_be_binary(token) -> None:
    """Only binary operators may be pending."""
    with pytest.raises(ValidationError):
        CalculatorState(pending_operator=token)


def test_state_is_frozen() -> None:
    """States cannot be mutated in place."""
    state = CalculatorState(display="1")
    with pytest.raises(ValidationError):
        state.display = "2"


def test_states_compare_by_value() -> None:
    """Two states holding the same values are equal."""
    assert CalculatorState(display="1", first_operand=1.0) == CalculatorState(display="1", first_operand=1.0)
