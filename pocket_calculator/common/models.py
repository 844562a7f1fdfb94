"""Pydantic model of the calculator state."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pocket_calculator.common.tokens import InputToken


class CalculatorState(BaseModel):
    """
    Complete state of the calculator between two key presses.

    Instances are immutable: every key press produces a new state.
    """

    model_config = ConfigDict(frozen=True)

    display: str = Field(default="", description="Text currently shown, also the operand being typed")
    first_operand: Optional[float] = Field(default=None, description="Left operand or last result")
    second_operand: Optional[float] = Field(default=None, description="Right operand while an operator is pending")
    pending_operator: Optional[InputToken] = Field(default=None, description="Operator awaiting equals")

    @field_validator("pending_operator")
    def pending_operator_must_be_binary(cls, v: Optional[InputToken]) -> Optional[InputToken]:
        """Ensure only a binary operator can be pending."""
        if v is not None and not v.is_operator:
            raise ValueError(f"Pending operator must be a binary operator, got {v.title!r}")
        return v

    @property
    def entering_second_operand(self) -> bool:
        return self.pending_operator is not None
