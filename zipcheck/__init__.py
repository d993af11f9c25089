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
ZIPCHECK - structural check of a ZIP archive's first local file header.

This library decides whether a file starts with a well-formed PKWare ZIP
local file header and names the exact check that failed when it does not,
using only Python standard library modules.
"""

from .crc import build_table, checksum, get_table
from .outcome import Outcome, ValidationOutcome
from .structures import LocalFileHeader, compression_method_name
from .validator import validate, validate_file

__all__ = [
    "LocalFileHeader",
    "Outcome",
    "ValidationOutcome",
    "build_table",
    "checksum",
    "compression_method_name",
    "get_table",
    "validate",
    "validate_file",
]

__version__ = "0.1.0"
