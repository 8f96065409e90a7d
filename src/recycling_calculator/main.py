"""
Command line entrypoint.

This script:
- Reads request lines from a text file or an archive
- Evaluates each request element-wise
- Writes the results next to the input file
"""

import argparse
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, FilePath, ValidationError

from recycling_calculator.batch.reader import read_operations
from recycling_calculator.batch.runner import BatchRunner
from recycling_calculator.common.logger import set_level


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the file containing request lines.
    strict : bool
        Treat uneven recycling as an error.
    log_level : LogLevel
        Logger verbosity.
    """

    file_path: FilePath
    strict: bool = False
    log_level: LogLevel = "INFO"


def parse_args(argv: list[str] | None = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Element-wise arithmetic over recycled numeric sequences"
    )

    parser.add_argument(
        "file_path",
        help="Path to the file containing request lines ('x | y [| type]')",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail requests whose operand lengths are not multiples of each other",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, strict=args.strict, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/requests.7z
    output: resources/requests_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: list[str] | None = None) -> None:
    """
    Main function executed from the command line.
    """
    cli_args = parse_args(argv)
    set_level(cli_args.log_level)

    input_path: Path = Path(cli_args.file_path)
    runner = BatchRunner(output_file=build_output_path(input_path), strict_recycling=cli_args.strict)
    runner.run(read_operations(input_path))


if __name__ == "__main__":
    main()
