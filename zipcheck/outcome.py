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
Validation outcomes.

Every check the validator performs ends in exactly one ``Outcome``. The
numeric values are the process exit codes of the CLI and must stay stable
for scripts that branch on them.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .structures import LocalFileHeader


class Outcome(IntEnum):
    """Named result of a header check, valued by its exit code."""

    OK = 0
    ARGUMENTS_INVALID = 1
    FILE_OPEN_ERROR = 2
    MAGIC_NUMBER_MISMATCH = 3
    HEADER_SIGNATURE_MISMATCH = 4
    HEADER_READ_ERROR = 5  # umbrella code, never produced
    HEADER_SIGNATURE_READ_ERROR = 6
    VERSION_NEEDED_READ_ERROR = 7
    FLAGS_READ_ERROR = 8
    COMPRESSION_METHOD_READ_ERROR = 9
    LAST_MOD_TIME_READ_ERROR = 10
    LAST_MOD_DATE_READ_ERROR = 11
    CRC32_READ_ERROR = 12
    COMPRESSED_SIZE_READ_ERROR = 13
    UNCOMPRESSED_SIZE_READ_ERROR = 14
    FILE_NAME_LENGTH_READ_ERROR = 15
    EXTRA_FIELD_LENGTH_READ_ERROR = 16
    READ_FAILURE = 17

    @property
    def label(self) -> str:
        """Diagnostic label, e.g. ``ERR_HEADER_CRC32_READ``."""
        return _LABELS[self]


_LABELS = {
    Outcome.OK: "OK",
    Outcome.ARGUMENTS_INVALID: "ERR_ARGUMENTS",
    Outcome.FILE_OPEN_ERROR: "ERR_FILE_OPEN",
    Outcome.MAGIC_NUMBER_MISMATCH: "ERR_MAGIC_NUMBER",
    Outcome.HEADER_SIGNATURE_MISMATCH: "ERR_HEADER_SIGNATURE",
    Outcome.HEADER_READ_ERROR: "ERR_HEADER_READ",
    Outcome.HEADER_SIGNATURE_READ_ERROR: "ERR_HEADER_SIGNATURE_READ",
    Outcome.VERSION_NEEDED_READ_ERROR: "ERR_HEADER_VERSION_NEEDED_READ",
    Outcome.FLAGS_READ_ERROR: "ERR_HEADER_FLAGS_READ",
    Outcome.COMPRESSION_METHOD_READ_ERROR: "ERR_HEADER_COMPRESSION_METHOD_READ",
    Outcome.LAST_MOD_TIME_READ_ERROR: "ERR_HEADER_LAST_MOD_TIME_READ",
    Outcome.LAST_MOD_DATE_READ_ERROR: "ERR_HEADER_MOD_DATE_READ",
    Outcome.CRC32_READ_ERROR: "ERR_HEADER_CRC32_READ",
    Outcome.COMPRESSED_SIZE_READ_ERROR: "ERR_HEADER_COMPRESSED_SIZE_READ",
    Outcome.UNCOMPRESSED_SIZE_READ_ERROR: "ERR_HEADER_UNCOMPRESSED_SIZE_READ",
    Outcome.FILE_NAME_LENGTH_READ_ERROR: "ERR_HEADER_FILENAME_LENGTH_READ",
    Outcome.EXTRA_FIELD_LENGTH_READ_ERROR: "ERR_HEADER_EXTRA_FIELD_LENGTH_READ",
    Outcome.READ_FAILURE: "ERR_READ_FAIL",
}


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one byte source.

    Pairs an ``Outcome`` with a human-readable message. ``header`` holds the
    decoded local file header when all eleven fields were read, and
    ``compression_method`` the raw method code once that field was read.
    """

    outcome: Outcome
    message: str
    header: Optional["LocalFileHeader"] = None
    compression_method: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def code(self) -> int:
        return int(self.outcome)

    def __str__(self) -> str:
        return f"{self.message} {self.code}"
