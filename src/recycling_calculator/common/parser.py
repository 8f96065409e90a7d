"""Parse request lines into operation requests."""
from typing import List

from recycling_calculator.common.operations import Operation, OperationRequest


# Separator between the x, y and type fields of a request line
FIELD_SEPARATOR: str = "|"


class RequestParser:
    """
    Parse request lines of the form ``x-values | y-values [| type]``.

    Examples:
        - ``1 2 3 4 | 10 | add``
        - ``2 5 | 3 6 | divide``
        - ``2 | 3`` (type defaults to add)

    The type field is kept as a list of tokens, so ``1 | 2 | add minus`` parses
    and only fails once evaluated.
    """

    @staticmethod
    def tokenize(field: str) -> List[str]:
        """
        Split a field into whitespace-separated tokens.

        :param str field: One field of a request line

        :return: List of tokens
        :rtype: List[str]
        """
        return field.split()

    @staticmethod
    def _parse_numbers(field: str, name: str, line: str) -> List[float]:
        """
        Convert a field of space-separated numbers to floats.

        :param str field: Raw field text
        :param str name: Operand name used in error messages
        :param str line: Whole request line used in error messages

        :return: Parsed values
        :rtype: List[float]
        :raises ValueError: If the field is empty or holds a non-numeric token
        """
        tokens = RequestParser.tokenize(field)
        if not tokens:
            raise ValueError(f"Missing values for operand {name}: {line}")

        try:
            return [float(token) for token in tokens]
        except ValueError:
            raise ValueError(f"Operand {name} must only hold numbers: {line}") from None

    @staticmethod
    def parse(line: str) -> OperationRequest:
        """
        Parse one request line.

        :param str line: Request line

        :return: Parsed request
        :rtype: OperationRequest
        :raises ValueError: If the line is malformed
        """
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) not in (2, 3):
            raise ValueError(f"Expected 'x | y [| type]', got {len(fields)} field(s): {line}")

        x = RequestParser._parse_numbers(fields[0], "x", line)
        y = RequestParser._parse_numbers(fields[1], "y", line)

        # Omitted type falls back to add, like a default argument value
        tokens = RequestParser.tokenize(fields[2]) if len(fields) == 3 else [Operation.ADD.value]

        return OperationRequest(x=x, y=y, type=tokens)
