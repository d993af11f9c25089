import struct

import pytest

HEADER_FORMAT = "<IHHHHHIIIHH"


def build_header(
    signature=0x04034B50,
    version_needed=0,
    flags=0,
    compression_method=0,
    last_mod_time=0,
    last_mod_date=0,
    crc32=0,
    compressed_size=0,
    uncompressed_size=0,
    file_name_length=0,
    extra_field_length=0,
):
    return struct.pack(
        HEADER_FORMAT,
        signature,
        version_needed,
        flags,
        compression_method,
        last_mod_time,
        last_mod_date,
        crc32,
        compressed_size,
        uncompressed_size,
        file_name_length,
        extra_field_length,
    )


@pytest.fixture
def header_bytes():
    return build_header


@pytest.fixture
def minimal_header():
    return build_header()


@pytest.fixture
def zip_file(tmp_path):
    def _write(data, name="archive.zip"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
