"""Dispatch a named arithmetic operation element-wise across two numeric sequences."""
from collections.abc import Iterable, Sequence
import math
import numbers
from typing import Any, List, Tuple, Union
import warnings

from pydantic import BaseModel, ConfigDict, Field

from recycling_calculator.common.exceptions import (
    BroadcastMismatchError,
    BroadcastMismatchWarning,
    EmptySequenceError,
    InvalidArityError,
    InvalidOperandError,
    UnknownOperationError,
)
from recycling_calculator.common.logger import logger
from recycling_calculator.common.operations import OPERATIONS, OperatorFn


Token = Union[str, Sequence[str]]

MISMATCH_MESSAGE: str = "longer object length is not a multiple of shorter object length"


def recycle(values: Sequence[float], length: int) -> List[float]:
    """
    Repeat values cyclically until they fill the requested length.

    :param Sequence[float] values: Non-empty source values
    :param int length: Target length

    :return: Values indexed modulo their own length
    :rtype: List[float]
    """
    return [values[i % len(values)] for i in range(length)]


class Calculator(BaseModel):
    """
    Element-wise calculator dispatching on an operation-name token.

    Evaluation order:
        1. Check the token holds exactly one element (InvalidArityError)
        2. Look the name up in the dispatch table (UnknownOperationError)
        3. Check both operands are non-empty sequences of real numbers
        4. Recycle the shorter operand to the longer one's length
        5. Apply the operation pairwise

    Lengths that are not multiples of each other emit a BroadcastMismatchWarning,
    or raise BroadcastMismatchError when strict_recycling is set.
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    strict_recycling: bool = Field(default=False, description="Raise instead of warning on uneven recycling")

    @staticmethod
    def resolve_operation(type: Any) -> OperatorFn:
        """
        Validate an operation token and return the matching function.

        :param type: Bare string or container of strings

        :return: Binary operator function
        :rtype: OperatorFn
        :raises InvalidArityError: If the token does not hold exactly one element
        :raises UnknownOperationError: If the name is not recognized
        """
        # A bare string or scalar counts as a single element
        if isinstance(type, str) or not isinstance(type, Iterable):
            tokens = [type]
        else:
            tokens = list(type)

        if len(tokens) != 1:
            raise InvalidArityError(f"Operation token must have exactly one element, got {len(tokens)}: {tokens!r}")

        name = tokens[0]
        if not isinstance(name, str) or name not in OPERATIONS:
            raise UnknownOperationError(
                f"Unknown operation {name!r}, expected one of: {', '.join(OPERATIONS)}"
            )
        return OPERATIONS[name]

    @staticmethod
    def coerce_operand(values: Any, name: str) -> Tuple[float, ...]:
        """
        Turn an operand into an immutable tuple of floats.

        A bare real number counts as a one-element sequence.

        :param values: Real number or iterable of real numbers
        :param str name: Operand name used in error messages

        :return: Operand values as floats
        :rtype: Tuple[float, ...]
        :raises InvalidOperandError: If a value is not a real number
        :raises EmptySequenceError: If the operand holds no values
        """
        if isinstance(values, numbers.Real) and not isinstance(values, bool):
            values = (values,)
        elif isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise InvalidOperandError(f"Operand {name} must be a sequence of numbers, got {type(values).__name__}")

        coerced: List[float] = []
        for value in values:
            # bool is an int subclass, but not a number here
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidOperandError(
                    f"Operand {name} holds a non-numeric value {value!r} ({type(value).__name__})"
                )
            try:
                coerced.append(float(value))
            except OverflowError:
                # Integers beyond float range saturate to a signed infinity
                coerced.append(math.inf if value > 0 else -math.inf)

        if not coerced:
            raise EmptySequenceError(f"Operand {name} must hold at least one value")
        return tuple(coerced)

    def broadcast(self, x: Sequence[float], y: Sequence[float]) -> Tuple[List[float], List[float]]:
        """
        Recycle both operands to the longer operand's length.

        :param Sequence[float] x: Left operand
        :param Sequence[float] y: Right operand

        :return: Pair of equal-length lists
        :rtype: Tuple[List[float], List[float]]
        :raises BroadcastMismatchError: On uneven lengths with strict_recycling
        """
        length = max(len(x), len(y))

        if length % min(len(x), len(y)) != 0:
            if self.strict_recycling:
                raise BroadcastMismatchError(f"{MISMATCH_MESSAGE} ({len(x)} and {len(y)})")
            logger.warning(f"⚠️ Recycling operands of lengths {len(x)} and {len(y)}: {MISMATCH_MESSAGE}")
            warnings.warn(MISMATCH_MESSAGE, BroadcastMismatchWarning, stacklevel=3)

        return recycle(x, length), recycle(y, length)

    def evaluate(self, x: Any, y: Any, type: Token = "add") -> List[float]:
        """
        Apply the named operation element-wise to x and y.

        :param x: Left operand (number or sequence of numbers)
        :param y: Right operand (number or sequence of numbers)
        :param type: Operation token, one of "add", "minus", "multiply", "divide"

        :return: Element-wise results, as long as the longer operand
        :rtype: List[float]
        """
        # Token errors come first, before operands are even looked at
        fn: OperatorFn = self.resolve_operation(type)

        left = self.coerce_operand(x, "x")
        right = self.coerce_operand(y, "y")
        left_values, right_values = self.broadcast(left, right)

        logger.debug(f"🧮 Applying {fn.__name__} over {len(left_values)} elements")
        return [fn(a, b) for a, b in zip(left_values, right_values)]


_default_calculator = Calculator()


def evaluate(x: Any, y: Any, type: Token = "add") -> List[float]:
    """Evaluate with the default (permissive recycling) calculator. See Calculator.evaluate."""
    return _default_calculator.evaluate(x, y, type)
