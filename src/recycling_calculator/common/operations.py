"""Operation dispatch table and the pydantic model for operation requests."""
from collections.abc import Callable as ABCCallable
from enum import Enum
import math
import operator
from typing import Callable, List

from pydantic import BaseModel, Field


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


class Operation(str, Enum):
    """Recognized operation names."""

    ADD = "add"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


def divide(a: float, b: float) -> float:
    """
    Divide two floats following IEEE-754 instead of raising on a zero divisor.

    - ``x / 0`` gives an infinity signed by both operands (``-0.0`` counts as negative)
    - ``0 / 0`` and ``nan / 0`` give ``nan``

    :param float a: Dividend
    :param float b: Divisor

    :return: Quotient
    :rtype: float
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


# Mapping of operation names to element-wise functions
OPERATIONS: dict[str, OperatorFn] = {
    Operation.ADD.value: operator.add,
    Operation.MINUS.value: operator.sub,
    Operation.MULTIPLY.value: operator.mul,
    Operation.DIVIDE.value: divide,
}


class OperationRequest(BaseModel):
    """Represents a single element-wise operation request, as read from one input line."""

    x: List[float] = Field(..., min_length=1, description="Left operand values")
    y: List[float] = Field(..., min_length=1, description="Right operand values")
    type: List[str] = Field(default_factory=lambda: [Operation.ADD.value], description="Operation token")
