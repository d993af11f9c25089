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
ZIP format constants used by the header checker.

This module defines the local file header signature, the fixed header size,
the CRC-32 polynomial and the table of compression method labels.
"""

# Local file header signature, "PK\x03\x04" read little-endian
LOCAL_FILE_HEADER = 0x04034B50

# The same four bytes as they appear on disk. Self-extracting archives
# carry a stub before them and are rejected.
LOCAL_FILE_HEADER_MAGIC = b"PK\x03\x04"

# Local file header size (fixed part)
LOCAL_FILE_HEADER_SIZE = 30

# CRC-32 (reflected form of 0x04C11DB7)
CRC32_POLYNOMIAL = 0xEDB88320
CRC32_INITIAL = 0xFFFFFFFF
CRC32_MASK = 0xFFFFFFFF

# Compression methods
COMP_STORED = 0  # No compression
COMP_DEFLATE = 8  # Deflate compression
COMP_BZIP2 = 12  # BZIP2 compression
COMP_LZMA = 14  # LZMA compression

UNKNOWN_METHOD = "unknown"

# Compression method labels (APPNOTE section 4.4.5)
METHOD_TO_NAME = {
    COMP_STORED: "no compression",
    1: "shrunk",
    2: "reduced with compression factor 1",
    3: "reduced with compression factor 2",
    4: "reduced with compression factor 3",
    5: "reduced with compression factor 4",
    6: "imploded",
    7: "reserved",
    COMP_DEFLATE: "deflated",
    9: "enhanced deflated",
    10: "PKWare DCL imploded",
    11: "reserved",
    COMP_BZIP2: "compressed using BZIP2",
    13: "reserved",
    COMP_LZMA: "LZMA",
    15: "reserved",
    16: "reserved",
    17: "reserved",
    18: "compressed using IBM TERSE",
    19: "IBM LZ77 z",
    98: "PPMd version I, Rev 1",
}

# Fixed result messages
MSG_OK = "the file is a valid ZIP file"
MSG_FILE_OPEN = "could not open file"
MSG_READ_FAIL = "failed to read from file"
MSG_SEEK_FAIL = "failed to seek in file"
MSG_MAGIC_NUMBER = "incorrect magic number"
