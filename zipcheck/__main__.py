"""
Copyright 2025 DNAi inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from __future__ import annotations

"""
Command-line interface for ZIPCHECK (``zipcheck``).

Checks the first local file header of one file and exits with the numeric
code of the outcome, so ``0`` is the only success signal:

    python -m zipcheck archive.zip
    zipcheck -v upload.bin

Output is a processing notice, the compression method label (when the
header got that far), then the result message followed by its code.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from . import __version__
from .constants import MSG_FILE_OPEN
from .debug import describe_header, dump_header_bytes
from .errors import ZipOpenError
from .outcome import Outcome, ValidationOutcome
from .structures import compression_method_name
from .validator import open_source, validate, validate_file


def _print_error(message: str, exit_code: int = 1) -> NoReturn:
    """Print an error message to stderr and exit with the given code.

    Args:
        message: Error message to display.
        exit_code: Exit code to use.
    """
    sys.stderr.write(f"zipcheck: {message}\n")
    sys.exit(exit_code)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with ``ARGUMENTS_INVALID`` on bad usage."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        _print_error(message, exit_code=Outcome.ARGUMENTS_INVALID)


def _build_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = _ArgumentParser(
        prog="zipcheck",
        description="ZIPCHECK - check the first local file header of a ZIP archive.",
    )
    parser.add_argument("zip_file_path", type=Path, help="Path to the file to check")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each validation step to stderr and dump the decoded header.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _validate_verbose(path: Path) -> ValidationOutcome:
    """Validate 'path' and print the decoded header and its bytes."""
    try:
        source = open_source(path)
    except ZipOpenError as e:
        return ValidationOutcome(e.outcome, MSG_FILE_OPEN)

    with source:
        result = validate(source)
        if result.header is not None:
            print("local file header:")
            print(describe_header(result.header))
        try:
            print(dump_header_bytes(source))
        except OSError as e:
            sys.stderr.write(f"zipcheck: cannot dump header bytes: {e}\n")
    return result


def _cmd_check(path: Path, verbose: bool = False) -> int:
    """Check one file and print its outcome.

    Returns:
        The numeric outcome code.
    """
    print(f"processing {path}")

    result = _validate_verbose(path) if verbose else validate_file(path)

    if result.compression_method is not None:
        print(compression_method_name(result.compression_method))

    print(result)
    return result.code


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the ZIPCHECK CLI.

    This function is invoked when running:

        python -m zipcheck <zip_file_path>

    or, via the console script:

        zipcheck <zip_file_path>
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        exit_code = _cmd_check(args.zip_file_path, verbose=args.verbose)
    except KeyboardInterrupt:
        _print_error("Interrupted by user", exit_code=130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
