"""
Command-line entrypoint.

Without arguments this opens the calculator window. With ``--keys`` or
``--file`` it replays button titles headlessly and prints the display:

    pocket-calculator --keys "1 + 2 ="
    pocket-calculator --file sequences.txt
"""

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, FilePath, ValidationError, model_validator

from pocket_calculator.common.logger import logger, set_level
from pocket_calculator.common.tokens import InputToken
from pocket_calculator.config import AppConfig, LogLevel, load_config
from pocket_calculator.engine.engine import CalculatorEngine


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    keys : Optional[str]
        Whitespace separated button titles to replay.
    file_path : Optional[FilePath]
        File holding one key sequence per line.
    log_level : Optional[LogLevel]
        Overrides the configured log level.
    """

    keys: Optional[str] = None
    file_path: Optional[FilePath] = None
    log_level: Optional[LogLevel] = None

    @model_validator(mode="after")
    def keys_and_file_are_exclusive(self) -> "CliArgs":
        """Ensure at most one replay source is given."""
        if self.keys is not None and self.file_path is not None:
            raise ValueError("--keys and --file cannot be combined")
        return self


def parse_keys(sequence: str) -> List[InputToken]:
    """
    Split a key sequence into tokens.

    :param str sequence: Whitespace separated titles, e.g. ``"1 2 + 3 ="``

    :return: Tokens in press order
    :rtype: List[InputToken]
    :raises ValueError: If a title is not a calculator key
    """
    return [InputToken.from_title(title) for title in sequence.split()]


def replay_sequence(sequence: str) -> str:
    """
    Replay a key sequence on a fresh engine.

    :param str sequence: Whitespace separated titles

    :return: Display after the last key
    :rtype: str
    """
    return CalculatorEngine().replay(parse_keys(sequence))


def replay_file(path: Path) -> List[str]:
    """
    Replay every non-empty line of a file, each from a fresh engine.

    :param Path path: File with one key sequence per line

    :return: Lines formatted as ``<sequence> => <display>``
    :rtype: List[str]
    """
    results: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        sequence = line.strip()
        if not sequence:
            continue
        results.append(f"{sequence} => {replay_sequence(sequence)}")
    return results


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Pocket calculator")
    parser.add_argument("--keys", help='Button titles to replay, e.g. "1 + 2 ="')
    parser.add_argument("--file", dest="file_path", help="File with one key sequence per line")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            keys=args.keys,
            file_path=args.file_path,
            log_level=args.log_level.upper() if args.log_level else None,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Replay keys when asked to, otherwise start the desktop calculator.
    """
    cli_args = parse_args(argv)
    config: AppConfig = load_config()
    set_level(cli_args.log_level or config.log_level)

    try:
        if cli_args.keys is not None:
            print(replay_sequence(cli_args.keys))
            return
        if cli_args.file_path is not None:
            for line in replay_file(cli_args.file_path):
                print(line)
            return
    except ValueError as exc:
        logger.error(f"⌨️❌ {exc}")
        raise SystemExit(2) from exc

    # tkinter is only needed for the window
    from pocket_calculator.ui.app import run

    logger.info("🧮 Starting calculator window")
    run(config)


if __name__ == "__main__":
    main()
