"""Stateful calculator engine driven by keypad events."""
import math
from typing import Iterable

from pydantic import BaseModel, Field, PrivateAttr

from pocket_calculator.common.logger import logger
from pocket_calculator.common.models import CalculatorState
from pocket_calculator.common.tokens import InputToken
from pocket_calculator.engine.reducer import INITIAL_STATE, phase, reduce


class CalculatorEngine(BaseModel):
    """
    Owner of the calculator state.

    The presentation layer forwards each button press to ``handle_input`` and
    reads ``display`` back to render it.

    Lifecycle:
        - Created once with an empty state
        - Moves to a new state on every key press
        - Never raises for any sequence of tokens
    """

    initial_state: CalculatorState = Field(
        default=INITIAL_STATE, description="State the engine starts from"
    )

    _state: CalculatorState = PrivateAttr()

    def model_post_init(self, __context) -> None:
        self._state = self.initial_state

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    def handle_input(self, token: InputToken) -> None:
        """
        Apply a single key press to the current state.

        :param InputToken token: Key that was pressed

        :return: None
        """
        previous: CalculatorState = self._state
        self._state = reduce(previous, token)

        if self._state is previous:
            logger.debug(f"🔘 Ignored {token.title!r} in phase {phase(previous)} (display={previous.display!r})")
            return

        logger.debug(f"🔘 {token.title!r}: {previous.display!r} -> {self._state.display!r}")
        if token is InputToken.EQUALS and self._state.first_operand is not None:
            if not math.isfinite(self._state.first_operand):
                logger.warning(
                    f"🧮⚠️ Non-finite result {self._state.display!r} from "
                    f"{previous.first_operand} {previous.pending_operator.title} {previous.second_operand}"
                )

    def press(self, title: str) -> None:
        """
        Handle a key press given by its button title.

        :param str title: Button title such as ``"7"`` or ``"+/-"``

        :return: None
        :raises ValueError: If the title does not name a calculator key
        """
        self.handle_input(InputToken.from_title(title))

    def replay(self, tokens: Iterable[InputToken]) -> str:
        """
        Handle a sequence of key presses and return the resulting display.

        :param Iterable[InputToken] tokens: Keys in the order they are pressed

        :return: Display after the last key
        :rtype: str
        """
        for token in tokens:
            self.handle_input(token)
        return self.display

    def reset(self) -> None:
        """Return to the empty state, as the AC key does."""
        self.handle_input(InputToken.CLEAR)
