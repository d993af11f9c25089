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
Byte source helpers for the header checker.

This module provides the exact-length reads and bounded forward seeks the
validator performs on its byte source, plus DOS date/time decoding for the
informational header fields. A byte source is any binary file-like object
with ``read``, ``seek`` and ``tell``.
"""

import io
from datetime import datetime
from typing import BinaryIO, Optional

from .errors import ZipReadError, ZipSeekError


def read_exact(f: BinaryIO, size: int) -> bytes:
    """Read exactly 'size' bytes from the source, raising ZipReadError on short read.

    Args:
        f: Binary file-like object to read from.
        size: Number of bytes to read.

    Returns:
        Exactly 'size' bytes of data.

    Raises:
        ZipReadError: If fewer than 'size' bytes could be read or the read failed.
    """
    try:
        data = f.read(size)
    except OSError as e:
        raise ZipReadError(f"Read failed: {e}") from e
    if data is None or len(data) != size:
        got = 0 if data is None else len(data)
        raise ZipReadError(
            f"Unexpected end of file: expected {size} bytes, got {got}", got=got
        )
    return data


def remaining_bytes(f: BinaryIO) -> int:
    """Return how many bytes lie between the current position and the end.

    The read position is left where it was.
    """
    pos = f.tell()
    end = f.seek(0, io.SEEK_END)
    f.seek(pos, io.SEEK_SET)
    return max(0, end - pos)


def skip_forward(f: BinaryIO, size: int) -> int:
    """Advance the read position by 'size' bytes.

    Plain file objects happily seek past the end of the data, so the bound
    is checked against the remaining length first.

    Args:
        f: Binary file-like object to seek in.
        size: Number of bytes to skip (non-negative).

    Returns:
        The new absolute position.

    Raises:
        ZipSeekError: If fewer than 'size' bytes remain or the seek failed.
    """
    try:
        remaining = remaining_bytes(f)
        if size > remaining:
            raise ZipSeekError()
        return f.seek(size, io.SEEK_CUR)
    except OSError as e:
        raise ZipSeekError() from e


def rewind(f: BinaryIO) -> None:
    """Reposition the source at offset 0."""
    try:
        f.seek(0, io.SEEK_SET)
    except OSError as e:
        raise ZipSeekError() from e


def dos_datetime_to_timestamp(dos_date: int, dos_time: int) -> Optional[datetime]:
    """Convert DOS date and time to Python datetime.

    DOS date format (16 bits):
        Bits 0-4: Day (1-31)
        Bits 5-8: Month (1-12)
        Bits 9-15: Year - 1980 (0-127, so 1980-2107)

    DOS time format (16 bits):
        Bits 0-4: Second / 2 (0-29, so 0-58 seconds in 2-second increments)
        Bits 5-10: Minute (0-59)
        Bits 11-15: Hour (0-23)

    Args:
        dos_date: DOS date value (16-bit unsigned integer).
        dos_time: DOS time value (16-bit unsigned integer).

    Returns:
        datetime object, or None when the fields do not form a valid date.
        The checker treats these fields as informational, so an invalid
        date is never an error.
    """
    day = dos_date & 0x1F
    month = (dos_date >> 5) & 0x0F
    year = ((dos_date >> 9) & 0x7F) + 1980

    second = (dos_time & 0x1F) * 2
    minute = (dos_time >> 5) & 0x3F
    hour = (dos_time >> 11) & 0x1F

    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None
