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

"""
Local file header validator.

This module decides whether the first local file header of a byte source
is structurally valid. Checks run in a fixed order and the first failure
ends the validation:

1. magic number pre-check on the first four bytes
2. rewind and decode the eleven fixed header fields
3. header signature check
4. bounds check of the filename, extra field and payload that follow

Example:
    result = validate_file("archive.zip")
    if not result.ok:
        print(result.outcome.name, result.message)
"""

import logging
import os
from typing import BinaryIO, Optional

from .constants import (
    LOCAL_FILE_HEADER,
    LOCAL_FILE_HEADER_MAGIC,
    MSG_FILE_OPEN,
    MSG_MAGIC_NUMBER,
    MSG_OK,
    MSG_READ_FAIL,
)
from .errors import (
    HeaderFieldReadError,
    ZipCheckError,
    ZipFormatError,
    ZipOpenError,
    ZipReadError,
)
from .outcome import Outcome, ValidationOutcome
from .structures import LocalFileHeader, parse_local_file_header
from .utils import read_exact, rewind, skip_forward

logger = logging.getLogger(__name__)


def check_magic_number(f: BinaryIO) -> None:
    """Reject sources that do not start with ``PK\\x03\\x04``.

    Raises:
        ZipReadError: If fewer than four bytes are available.
        ZipFormatError: If the bytes differ from the magic number.
    """
    try:
        magic = read_exact(f, len(LOCAL_FILE_HEADER_MAGIC))
    except ZipReadError as e:
        logger.debug("Magic number read failed: %s", e.message)
        raise ZipReadError(MSG_READ_FAIL, got=e.got) from e
    if magic != LOCAL_FILE_HEADER_MAGIC:
        logger.debug("Magic number mismatch: %s", magic.hex())
        raise ZipFormatError(MSG_MAGIC_NUMBER, Outcome.MAGIC_NUMBER_MISMATCH)


def check_signature(header: LocalFileHeader) -> None:
    """Verify the decoded header signature.

    The magic number pre-check covers the same bytes; this check holds on
    its own for callers that decode a header without the pre-check.
    """
    if not header.has_valid_signature:
        logger.debug(
            "Invalid local file header signature: 0x%08X, expected 0x%08X",
            header.signature,
            LOCAL_FILE_HEADER,
        )
        raise ZipFormatError(
            Outcome.HEADER_SIGNATURE_MISMATCH.label, Outcome.HEADER_SIGNATURE_MISMATCH
        )


def check_trailer_bounds(f: BinaryIO, header: LocalFileHeader) -> int:
    """Skip over the filename, extra field and payload.

    Returns:
        The position just past the entry's payload.

    Raises:
        ZipSeekError: If the source holds fewer bytes than the header declares.
    """
    return skip_forward(f, header.trailer_length)


def validate(source: BinaryIO) -> ValidationOutcome:
    """Validate the first local file header of a byte source.

    Args:
        source: Binary file-like object positioned at offset 0. It must
            support ``read``, ``seek`` and ``tell``.

    Returns:
        ValidationOutcome naming the first failed check, or ``Outcome.OK``.
    """
    header: Optional[LocalFileHeader] = None
    try:
        check_magic_number(source)
        rewind(source)
        header = parse_local_file_header(source)
        logger.debug("Decoded local file header: %s", header)
        check_signature(header)
        end = check_trailer_bounds(source, header)
        logger.debug("Entry data ends at offset %d", end)
    except HeaderFieldReadError as e:
        logger.info("Header check failed: %s (%s)", e.outcome.name, e.field.name)
        return ValidationOutcome(
            e.outcome,
            e.message,
            compression_method=e.decoded.get("compression_method"),
        )
    except ZipCheckError as e:
        logger.info("Header check failed: %s", e.outcome.name)
        return ValidationOutcome(
            e.outcome,
            e.message,
            header=header,
            compression_method=header.compression_method if header else None,
        )

    return ValidationOutcome(
        Outcome.OK, MSG_OK, header=header, compression_method=header.compression_method
    )


def open_source(path: str | os.PathLike) -> BinaryIO:
    """Open a path as a binary byte source.

    Raises:
        ZipOpenError: If the path cannot be opened for reading.
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise ZipOpenError(f"{MSG_FILE_OPEN}: {e}") from e


def validate_file(path: str | os.PathLike) -> ValidationOutcome:
    """Validate the first local file header of the file at 'path'.

    The file is closed on every exit path.

    Returns:
        ValidationOutcome; ``Outcome.FILE_OPEN_ERROR`` if the file cannot be opened.
    """
    logger.debug("Validating %s", path)
    try:
        source = open_source(path)
    except ZipOpenError as e:
        logger.info("Header check failed: %s (%s)", e.outcome.name, e.message)
        return ValidationOutcome(e.outcome, MSG_FILE_OPEN)

    with source:
        return validate(source)
