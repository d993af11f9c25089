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
Custom exception classes for the header checker.

The validator raises these internally and converts them into a
``ValidationOutcome`` at its boundary. Each exception knows which
``Outcome`` it stands for, so the conversion is a single ``except`` clause.
"""

from typing import TYPE_CHECKING, Optional

from .constants import MSG_READ_FAIL, MSG_SEEK_FAIL
from .outcome import Outcome

if TYPE_CHECKING:
    from .structures import HeaderField


class ZipCheckError(Exception):
    """Base exception class for all header check errors."""

    outcome = Outcome.HEADER_READ_ERROR

    def __init__(self, message: str, outcome: Optional[Outcome] = None):
        super().__init__(message)
        self.message = message
        if outcome is not None:
            self.outcome = outcome


class ZipOpenError(ZipCheckError):
    """Raised when the byte source cannot be opened at all."""

    outcome = Outcome.FILE_OPEN_ERROR


class ZipReadError(ZipCheckError):
    """Raised when the source yields fewer bytes than requested.

    This exception is raised when:
    - The magic number pre-check cannot read four bytes
    - The underlying source fails with an I/O error
    """

    outcome = Outcome.READ_FAILURE

    def __init__(self, message: str = MSG_READ_FAIL, outcome: Optional[Outcome] = None, got: int = 0):
        super().__init__(message, outcome)
        self.got = got


class ZipSeekError(ZipReadError):
    """Raised when a forward seek would move past the end of the data."""

    def __init__(self, message: str = MSG_SEEK_FAIL, outcome: Optional[Outcome] = None):
        super().__init__(message, outcome)


class ZipFormatError(ZipCheckError):
    """Raised when bytes are present but break the ZIP structure.

    This exception is raised when:
    - The leading magic number is not ``PK\\x03\\x04``
    - The decoded header signature is not ``0x04034B50``
    """


class HeaderFieldReadError(ZipCheckError):
    """Raised when a fixed header field is truncated.

    Carries the ``HeaderField`` whose read came up short, so callers learn
    exactly how far decoding progressed.
    """

    def __init__(self, field: "HeaderField", got: int = 0, decoded: Optional[dict[str, int]] = None):
        super().__init__(field.outcome.label, field.outcome)
        self.field = field
        self.got = got
        self.decoded = decoded or {}
