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
Local file header structure and parsing.

This module describes the fixed 30-byte portion of a ZIP local file header
as a table of fields, and decodes it one field at a time so that a
truncated header is reported against the exact field where the data ran out.
"""

import logging
import struct
from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, Optional

from .constants import LOCAL_FILE_HEADER, METHOD_TO_NAME, MSG_READ_FAIL, UNKNOWN_METHOD
from .errors import HeaderFieldReadError, ZipReadError
from .outcome import Outcome
from .utils import dos_datetime_to_timestamp, read_exact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderField:
    """One fixed-width, little-endian field of the local file header."""

    name: str
    fmt: str
    outcome: Outcome

    @property
    def size(self) -> int:
        return struct.calcsize(self.fmt)


# Fields in on-disk order.
HEADER_FIELDS = (
    HeaderField("signature", "<I", Outcome.HEADER_SIGNATURE_READ_ERROR),
    HeaderField("version_needed", "<H", Outcome.VERSION_NEEDED_READ_ERROR),
    HeaderField("flags", "<H", Outcome.FLAGS_READ_ERROR),
    HeaderField("compression_method", "<H", Outcome.COMPRESSION_METHOD_READ_ERROR),
    HeaderField("last_mod_time", "<H", Outcome.LAST_MOD_TIME_READ_ERROR),
    HeaderField("last_mod_date", "<H", Outcome.LAST_MOD_DATE_READ_ERROR),
    HeaderField("crc32", "<I", Outcome.CRC32_READ_ERROR),
    HeaderField("compressed_size", "<I", Outcome.COMPRESSED_SIZE_READ_ERROR),
    HeaderField("uncompressed_size", "<I", Outcome.UNCOMPRESSED_SIZE_READ_ERROR),
    HeaderField("file_name_length", "<H", Outcome.FILE_NAME_LENGTH_READ_ERROR),
    HeaderField("extra_field_length", "<H", Outcome.EXTRA_FIELD_LENGTH_READ_ERROR),
)


def compression_method_name(method: int) -> str:
    """Return the human-readable label for a compression method code."""
    return METHOD_TO_NAME.get(method, UNKNOWN_METHOD)


@dataclass
class LocalFileHeader:
    """Local file header structure (fixed part only).

    This header appears before each file's compressed data in the ZIP
    archive. The filename, extra field and payload that follow it are
    accounted for by length, never read.
    """

    signature: int
    version_needed: int
    flags: int
    compression_method: int
    last_mod_time: int
    last_mod_date: int
    crc32: int
    compressed_size: int
    uncompressed_size: int
    file_name_length: int
    extra_field_length: int

    @property
    def has_valid_signature(self) -> bool:
        return self.signature == LOCAL_FILE_HEADER

    @property
    def compression_method_name(self) -> str:
        return compression_method_name(self.compression_method)

    @property
    def trailer_length(self) -> int:
        """Bytes occupied by the filename, extra field and payload."""
        return self.file_name_length + self.extra_field_length + self.compressed_size

    @property
    def date_time(self) -> Optional[datetime]:
        """Get modification date/time as datetime object."""
        return dos_datetime_to_timestamp(self.last_mod_date, self.last_mod_time)


def read_header_field(f: BinaryIO, field: HeaderField, decoded: dict[str, int]) -> int:
    """Read one header field, raising the field's own error on a short read.

    An I/O error from the source is not a truncation and stays a ZipReadError.
    """
    try:
        data = read_exact(f, field.size)
    except ZipReadError as e:
        if isinstance(e.__cause__, OSError):
            raise ZipReadError(MSG_READ_FAIL) from e
        logger.debug("Header truncated at %s (%d of %d bytes)", field.name, e.got, field.size)
        raise HeaderFieldReadError(field, got=e.got, decoded=dict(decoded)) from e
    return struct.unpack(field.fmt, data)[0]


def parse_local_file_header(f: BinaryIO) -> LocalFileHeader:
    """Parse the fixed part of a local file header from the current position.

    The signature is decoded like every other field and is not checked
    here; deciding what a bad signature means is left to the caller.

    Args:
        f: Binary file-like object positioned at the start of a local file header.

    Returns:
        LocalFileHeader object.

    Raises:
        HeaderFieldReadError: If the source ends inside one of the fields.
    """
    decoded: dict[str, int] = {}
    for field in HEADER_FIELDS:
        decoded[field.name] = read_header_field(f, field, decoded)
        if field.name == "compression_method":
            logger.debug(
                "Compression method %d (%s)",
                decoded[field.name],
                compression_method_name(decoded[field.name]),
            )
    return LocalFileHeader(**decoded)
