"""Keypad layout and the controller binding button presses to the engine."""
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pocket_calculator.common.logger import logger
from pocket_calculator.common.tokens import ButtonStyle, InputToken
from pocket_calculator.engine.engine import CalculatorEngine


T = InputToken

# Button grid, top to bottom; the zero button is twice as wide
KEYPAD_ROWS: List[List[InputToken]] = [
    [T.CLEAR, T.SIGN_FLIP, T.PERCENT, T.DIVIDE],
    [T.SEVEN, T.EIGHT, T.NINE, T.MULTIPLY],
    [T.FOUR, T.FIVE, T.SIX, T.SUBTRACT],
    [T.ONE, T.TWO, T.THREE, T.ADD],
    [T.ZERO, T.DECIMAL, T.EQUALS],
]
KEYPAD_COLUMNS = 4

# Background colors per button category
STYLE_COLORS = {
    ButtonStyle.DIGIT: "#505050",
    ButtonStyle.FUNCTION: "#a5a5a5",
    ButtonStyle.OPERATOR: "#ff9f0a",
}


class KeypadButton(BaseModel):
    """Position and appearance of one keypad button."""

    model_config = ConfigDict(frozen=True)

    token: InputToken
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0, lt=KEYPAD_COLUMNS)
    column_span: int = Field(default=1, ge=1, le=KEYPAD_COLUMNS)

    @property
    def title(self) -> str:
        return self.token.title

    @property
    def style(self) -> ButtonStyle:
        return self.token.style

    @property
    def color(self) -> str:
        return STYLE_COLORS[self.style]


def build_layout() -> List[KeypadButton]:
    """
    Place every button of ``KEYPAD_ROWS`` on the grid.

    :return: Buttons in row-major order
    :rtype: List[KeypadButton]
    """
    buttons: List[KeypadButton] = []
    for row, tokens in enumerate(KEYPAD_ROWS):
        column = 0
        for token in tokens:
            span = 2 if token is InputToken.ZERO else 1
            buttons.append(KeypadButton(token=token, row=row, column=column, column_span=span))
            column += span
    return buttons


class KeypadController:
    """
    Forward keypad presses into a CalculatorEngine and re-render the display.

    :param CalculatorEngine engine: Engine receiving the presses
    :param render: Called with the new display text after every press
    """

    def __init__(
        self,
        engine: Optional[CalculatorEngine] = None,
        render: Optional[Callable[[str], None]] = None,
    ):
        self.engine = engine if engine is not None else CalculatorEngine()
        self.render = render

    @property
    def display(self) -> str:
        return self.engine.display

    def press(self, token: InputToken) -> str:
        """Handle a button press and return the display to show."""
        self.engine.handle_input(token)
        if self.render is not None:
            self.render(self.engine.display)
        return self.engine.display

    def press_title(self, title: str) -> Optional[str]:
        """
        Handle a typed character or label; unknown keys are ignored.

        :param str title: Key label or keyboard character

        :return: New display, or None when the key is not a calculator key
        :rtype: Optional[str]
        """
        try:
            token = InputToken.from_title(title)
        except ValueError:
            logger.debug(f"⌨️ Ignored key {title!r}")
            return None
        return self.press(token)
