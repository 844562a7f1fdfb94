"""Test class CalculatorEngine."""
import logging

import pytest

from pocket_calculator.common.logger import logger
from pocket_calculator.common.models import CalculatorState
from pocket_calculator.common.tokens import InputToken
from pocket_calculator.engine.engine import CalculatorEngine
from pocket_calculator.engine.reducer import INITIAL_STATE


@pytest.fixture
def engine() -> CalculatorEngine:
    """Create an engine in its initial state."""
    return CalculatorEngine()


def press_all(engine: CalculatorEngine, keys: str) -> str:
    for title in keys.split():
        engine.press(title)
    return engine.display


def test_engine_starts_empty(engine: CalculatorEngine) -> None:
    """A new engine shows an empty display."""
    assert engine.display == ""
    assert engine.state == INITIAL_STATE


def test_handle_input_returns_none(engine: CalculatorEngine) -> None:
    """handle_input mutates the engine and returns nothing."""
    assert engine.handle_input(InputToken.ONE) is None
    assert engine.display == "1"


@pytest.mark.parametrize("keys,expected", [
    ("1 + 2 =", "3.0"),
    ("5 - 5 =", "0.0"),
    ("9 ÷ 0 =", "inf"),
    ("4 %", "0.04"),
    ("7 +/-", "-7.0"),
    ("3 + 4 = AC", ""),
])
def test_press_scenarios(engine: CalculatorEngine, keys, expected) -> None:
    """Pressing titles drives the engine to the expected display."""
    assert press_all(engine, keys) == expected


def test_press_unknown_title(engine: CalculatorEngine) -> None:
    """press rejects titles that are not calculator keys."""
    with pytest.raises(ValueError):
        engine.press("sin")
    assert engine.display == ""


def test_replay(engine: CalculatorEngine) -> None:
    """replay handles every token and returns the final display."""
    tokens = [InputToken.TWO, InputToken.MULTIPLY, InputToken.THREE, InputToken.EQUALS]
    assert engine.replay(tokens) == "6.0"
    assert engine.state.first_operand == 6.0


def test_reset(engine: CalculatorEngine) -> None:
    """reset returns to the initial state from any state."""
    press_all(engine, "8 x 2")
    engine.reset()
    assert engine.state == INITIAL_STATE


def test_equals_without_operator_keeps_state(engine: CalculatorEngine) -> None:
    """Equals with nothing pending leaves the state untouched."""
    press_all(engine, "4 2")
    before = engine.state
    engine.handle_input(InputToken.EQUALS)
    assert engine.state == before


def test_initial_state_can_be_injected() -> None:
    """An engine can resume from a given state."""
    engine = CalculatorEngine(initial_state=CalculatorState(display="3", first_operand=3.0))
    assert press_all(engine, "+ 1 =") == "4.0"


def test_engines_are_independent() -> None:
    """Each engine owns its own state."""
    first, second = CalculatorEngine(), CalculatorEngine()
    first.press("1")
    assert second.display == ""


def test_non_finite_result_is_logged(engine: CalculatorEngine) -> None:
    """A division by zero is reported as a warning, not raised."""
    records = []
    handler = logging.Handler()
    handler.emit = records.append
    level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        press_all(engine, "9 ÷ 0 =")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(level)
    assert engine.display == "inf"
    assert any(record.levelno == logging.WARNING for record in records)
