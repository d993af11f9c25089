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
CRC-32 engine.

Table-driven CRC-32 as used by PKZIP (reflected polynomial 0xEDB88320).
The lookup table is built once per process on first use and shared
read-only afterwards.
"""

from functools import lru_cache
from typing import Optional, Sequence

from .constants import CRC32_INITIAL, CRC32_MASK, CRC32_POLYNOMIAL


def build_table(polynomial: int = CRC32_POLYNOMIAL) -> tuple[int, ...]:
    """Build the 256-entry CRC-32 lookup table.

    Args:
        polynomial: Reflected generator polynomial.

    Returns:
        Tuple of 256 unsigned 32-bit values.
    """
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ polynomial
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


@lru_cache(maxsize=None)
def get_table() -> tuple[int, ...]:
    """Return the shared CRC-32 table, building it on the first call."""
    return build_table()


def checksum(data: bytes, table: Optional[Sequence[int]] = None, value: int = 0) -> int:
    """Calculate the CRC-32 checksum of data.

    Args:
        data: Bytes to checksum.
        table: Lookup table; the shared table when omitted.
        value: Checksum of the preceding data, to continue a running
            checksum over a stream read in chunks.

    Returns:
        CRC-32 value as unsigned 32-bit integer.
    """
    if table is None:
        table = get_table()
    crc = value ^ CRC32_INITIAL
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return ~crc & CRC32_MASK
