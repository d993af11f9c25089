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
Debugging utilities for the header checker.

This module renders a decoded local file header and its raw bytes for the
CLI's verbose mode.
"""

import io
from typing import BinaryIO, Optional

from .constants import LOCAL_FILE_HEADER_SIZE
from .structures import HEADER_FIELDS, LocalFileHeader


def hex_dump(data: bytes, offset: int = 0, length: Optional[int] = None) -> str:
    """Create a hex dump of binary data.

    Args:
        data: Binary data to dump.
        offset: Starting offset for display.
        length: Maximum length to dump (None for all).

    Returns:
        Formatted hex dump string.
    """
    if length is not None:
        data = data[:length]

    lines = []
    for i in range(0, len(data), 16):
        chunk = data[i : i + 16]
        hex_part = " ".join(f"{b:02X}" for b in chunk)
        ascii_part = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        lines.append(f"{offset + i:08X}  {hex_part:<48}  {ascii_part}")

    return "\n".join(lines)


def describe_header(header: LocalFileHeader) -> str:
    """Describe a decoded local file header, one field per line."""
    output = []
    field_offset = 0
    for field in HEADER_FIELDS:
        value = getattr(header, field.name)
        width = field.size * 2
        output.append(f"  +{field_offset:02d} {field.name:<20} 0x{value:0{width}X} ({value})")
        field_offset += field.size

    output.append(f"  compression: {header.compression_method_name}")
    date_time = header.date_time
    output.append(f"  modified: {date_time.isoformat() if date_time else 'invalid DOS date/time'}")
    output.append(f"  entry data: {header.trailer_length} bytes follow the header")
    return "\n".join(output)


def dump_header_bytes(f: BinaryIO) -> str:
    """Hex dump the fixed header bytes of a source, restoring its position."""
    pos = f.tell()
    try:
        f.seek(0, io.SEEK_SET)
        data = f.read(LOCAL_FILE_HEADER_SIZE)
    finally:
        f.seek(pos, io.SEEK_SET)
    return hex_dump(data)
