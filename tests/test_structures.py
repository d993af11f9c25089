import io
from datetime import datetime

import pytest

from zipcheck.errors import HeaderFieldReadError, ZipReadError
from zipcheck.outcome import Outcome
from zipcheck.structures import (
    HEADER_FIELDS,
    LocalFileHeader,
    compression_method_name,
    parse_local_file_header,
)


def test_header_fields_cover_fixed_header():
    assert len(HEADER_FIELDS) == 11
    assert sum(field.size for field in HEADER_FIELDS) == 30
    assert len({field.outcome for field in HEADER_FIELDS}) == 11


def test_parse_local_file_header(header_bytes):
    data = header_bytes(
        version_needed=20,
        flags=0x0800,
        compression_method=8,
        last_mod_time=0x5000,
        last_mod_date=0x58B1,
        crc32=0xCBF43926,
        compressed_size=11,
        uncompressed_size=9,
        file_name_length=5,
        extra_field_length=4,
    )
    f = io.BytesIO(data + b"trailing")
    header = parse_local_file_header(f)

    assert header == LocalFileHeader(
        signature=0x04034B50,
        version_needed=20,
        flags=0x0800,
        compression_method=8,
        last_mod_time=0x5000,
        last_mod_date=0x58B1,
        crc32=0xCBF43926,
        compressed_size=11,
        uncompressed_size=9,
        file_name_length=5,
        extra_field_length=4,
    )
    assert f.tell() == 30
    assert header.trailer_length == 20
    assert header.compression_method_name == "deflated"
    assert header.has_valid_signature


def test_parse_does_not_check_signature(header_bytes):
    header = parse_local_file_header(io.BytesIO(header_bytes(signature=0x02014B50)))
    assert header.signature == 0x02014B50
    assert not header.has_valid_signature


def test_parse_truncated_signature():
    with pytest.raises(HeaderFieldReadError) as excinfo:
        parse_local_file_header(io.BytesIO(b"PK"))
    assert excinfo.value.outcome is Outcome.HEADER_SIGNATURE_READ_ERROR
    assert excinfo.value.field.name == "signature"
    assert excinfo.value.got == 2
    assert excinfo.value.decoded == {}


def test_parse_truncated_reports_decoded_fields(header_bytes):
    data = header_bytes(compression_method=14)[:13]
    with pytest.raises(HeaderFieldReadError) as excinfo:
        parse_local_file_header(io.BytesIO(data))
    assert excinfo.value.outcome is Outcome.LAST_MOD_DATE_READ_ERROR
    assert excinfo.value.message == "ERR_HEADER_MOD_DATE_READ"
    assert excinfo.value.got == 1
    assert excinfo.value.decoded["compression_method"] == 14
    assert "last_mod_date" not in excinfo.value.decoded


def test_trailer_length_does_not_overflow(header_bytes):
    header = parse_local_file_header(
        io.BytesIO(
            header_bytes(
                compressed_size=0xFFFFFFFF,
                file_name_length=0xFFFF,
                extra_field_length=0xFFFF,
            )
        )
    )
    assert header.trailer_length == 0xFFFFFFFF + 2 * 0xFFFF


@pytest.mark.parametrize(
    "method,name",
    [
        (0, "no compression"),
        (1, "shrunk"),
        (8, "deflated"),
        (9, "enhanced deflated"),
        (12, "compressed using BZIP2"),
        (14, "LZMA"),
        (16, "reserved"),
        (98, "PPMd version I, Rev 1"),
        (20, "unknown"),
        (99, "unknown"),
        (0xFFFF, "unknown"),
    ],
)
def test_compression_method_name(method, name):
    assert compression_method_name(method) == name


def test_date_time(header_bytes):
    dos_date = ((2024 - 1980) << 9) | (5 << 5) | 17
    dos_time = (10 << 11) | (30 << 5) | 10
    header = parse_local_file_header(
        io.BytesIO(header_bytes(last_mod_date=dos_date, last_mod_time=dos_time))
    )
    assert header.date_time == datetime(2024, 5, 17, 10, 30, 20)


def test_date_time_invalid(minimal_header):
    header = parse_local_file_header(io.BytesIO(minimal_header))
    assert header.date_time is None


class BrokenSource(io.BytesIO):
    def read(self, size=-1):
        raise OSError("device not ready")


def test_parse_io_error_is_not_truncation():
    with pytest.raises(ZipReadError) as excinfo:
        parse_local_file_header(BrokenSource(b"PK\x03\x04"))
    assert not isinstance(excinfo.value, HeaderFieldReadError)
    assert excinfo.value.outcome is Outcome.READ_FAILURE
