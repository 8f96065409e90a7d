"""Errors and warnings raised while dispatching element-wise operations."""


class CalculatorError(Exception):
    """Base class for every error raised by the calculator."""


class InvalidArityError(CalculatorError, ValueError):
    """The operation token does not hold exactly one element."""


class UnknownOperationError(CalculatorError, ValueError):
    """The operation token is not one of the recognized operation names."""


class InvalidOperandError(CalculatorError, TypeError):
    """An operand holds something other than real numbers."""


class EmptySequenceError(CalculatorError, ValueError):
    """An operand holds no values."""


class BroadcastMismatchError(CalculatorError, ValueError):
    """Operand lengths are not multiples of each other (strict recycling only)."""


class BroadcastMismatchWarning(UserWarning):
    """Operand lengths are not multiples of each other; the shorter one was still recycled."""
