"""Evaluate a batch of request lines and write one result line per request."""
from pathlib import Path
from typing import Any, Dict, List, TextIO
import warnings

from pydantic import BaseModel, ConfigDict, Field

from recycling_calculator.calculator.evaluator import Calculator
from recycling_calculator.common.exceptions import BroadcastMismatchWarning, CalculatorError
from recycling_calculator.common.logger import logger
from recycling_calculator.common.parser import RequestParser


def format_values(values: List[float]) -> str:
    """Format results to 7 significant digits, space-separated."""
    return " ".join(f"{value:.7g}" for value in values)


class BatchRunner(BaseModel):
    """
    Sequential runner evaluating request lines from an input text.

    Features:
        - Skips blank lines, numbering requests from 1.
        - A failing request is reported in the output and does not stop the batch.
        - Writes each result line to disk as soon as it is computed.
    """

    model_config = ConfigDict(frozen=True)

    output_file: Path = Field(..., description="Path to write computation results")
    strict_recycling: bool = Field(default=False, description="Raise instead of warning on uneven recycling")

    @staticmethod
    def _split_lines(content: str) -> List[str]:
        """
        Return the non-empty, stripped lines of the input.

        :param str content: Raw input text

        :return: List of request lines
        :rtype: List[str]
        """
        return [line.strip() for line in content.splitlines() if line.strip()]

    def _evaluate_line(self, calculator: Calculator, expression: str, line_number: int) -> Dict[str, Any]:
        """
        Evaluate one request line and build its payload.

        :param Calculator calculator: Calculator to evaluate with
        :param str expression: Request line
        :param int line_number: Request number in the input

        :return: Payload holding either "result" or "error", and any "warning"
        :rtype: Dict[str, Any]
        """
        logger.info(f"🏁 Evaluating line {line_number}: {expression}")
        payload: Dict[str, Any] = {"line": line_number, "expression": expression}

        try:
            request = RequestParser.parse(expression)
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", BroadcastMismatchWarning)
                values = calculator.evaluate(request.x, request.y, request.type)

            payload["result"] = values
            mismatches = [w for w in caught if issubclass(w.category, BroadcastMismatchWarning)]
            if mismatches:
                payload["warning"] = str(mismatches[0].message)
            logger.info(f"✅ Line {line_number} finished: {format_values(values)}")

        except (CalculatorError, ValueError) as exc:
            logger.error(f"❌ Line {line_number} failed: {exc}\nCould not evaluate: {expression!r}")
            payload["error"] = str(exc)

        return payload

    @staticmethod
    def _write_payload(payload: Dict[str, Any], f_out: TextIO) -> None:
        """
        Write a payload as a result line and flush it.

        :param dict payload: Payload built by _evaluate_line
        :param TextIO f_out: Open file handle for writing results
        """
        if "result" in payload:
            line = f"{payload['expression']} = {format_values(payload['result'])}"
            if "warning" in payload:
                line += f" (warning: {payload['warning']})"
        else:
            line = f"{payload['expression']} -> ERROR: {payload['error']}"
        f_out.write(f"{line}\n")
        f_out.flush()

    def run(self, content: str) -> List[Dict[str, Any]]:
        """
        Evaluate every request line in content and write results to output_file.

        :param str content: Input text with one request per line

        :return: Payloads in input order
        :rtype: List[Dict[str, Any]]
        """
        calculator = Calculator(strict_recycling=self.strict_recycling)
        lines: List[str] = self._split_lines(content)
        payloads: List[Dict[str, Any]] = []

        logger.info(f"🗂️ Evaluating {len(lines)} request(s) into {self.output_file}")
        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expression in enumerate(lines, start=1):
                payload = self._evaluate_line(calculator, expression, line_number)
                self._write_payload(payload, f_out)
                payloads.append(payload)

        failed = sum(1 for payload in payloads if "error" in payload)
        logger.info(f"📝 Results written to {self.output_file} ({failed} failed)")
        return payloads
