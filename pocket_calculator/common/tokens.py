"""Input tokens produced by the keypad and their button metadata."""
from enum import Enum
from typing import Dict, FrozenSet


class ButtonStyle(str, Enum):
    """Visual category of a keypad button."""

    DIGIT = "digit"
    FUNCTION = "function"
    OPERATOR = "operator"


class InputToken(str, Enum):
    """
    Closed set of inputs the calculator understands.

    The value of each member is the title printed on its button.
    """

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DECIMAL = "."
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "÷"
    EQUALS = "="
    CLEAR = "AC"
    SIGN_FLIP = "+/-"
    PERCENT = "%"

    @property
    def title(self) -> str:
        return self.value

    @property
    def is_digit(self) -> bool:
        return self in DIGITS

    @property
    def is_operator(self) -> bool:
        return self in OPERATORS

    @property
    def style(self) -> ButtonStyle:
        if self.is_digit or self is InputToken.DECIMAL:
            return ButtonStyle.DIGIT
        if self in (InputToken.CLEAR, InputToken.SIGN_FLIP, InputToken.PERCENT):
            return ButtonStyle.FUNCTION
        return ButtonStyle.OPERATOR

    @classmethod
    def from_title(cls, title: str) -> "InputToken":
        """
        Parse a button title (or a common alias of it) into a token.

        :param str title: Button title such as ``"7"``, ``"÷"`` or ``"AC"``

        :return: Matching token
        :rtype: InputToken
        :raises ValueError: If the title is not recognized
        """
        key = title.strip()
        if key.lower() in TITLE_ALIASES:
            return TITLE_ALIASES[key.lower()]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown calculator key: {title!r}") from None


DIGITS: FrozenSet[InputToken] = frozenset(
    InputToken(str(digit)) for digit in range(10)
)

OPERATORS: FrozenSet[InputToken] = frozenset(
    {InputToken.ADD, InputToken.SUBTRACT, InputToken.MULTIPLY, InputToken.DIVIDE}
)

# Keyboard and unicode spellings accepted alongside the button titles
TITLE_ALIASES: Dict[str, InputToken] = {
    "*": InputToken.MULTIPLY,
    "×": InputToken.MULTIPLY,
    "/": InputToken.DIVIDE,
    "ac": InputToken.CLEAR,
    "c": InputToken.CLEAR,
    "±": InputToken.SIGN_FLIP,
    "x": InputToken.MULTIPLY,
}
