import io

from zipcheck.debug import describe_header, dump_header_bytes, hex_dump
from zipcheck.structures import parse_local_file_header


def test_hex_dump():
    dump = hex_dump(b"PK\x03\x04" + b"A" * 14, offset=16)
    lines = dump.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("00000010  50 4B 03 04 41")
    assert lines[0].endswith("PK..AAAAAAAAAAAA")
    assert lines[1].startswith("00000020  41 41")


def test_describe_header(header_bytes):
    header = parse_local_file_header(
        io.BytesIO(header_bytes(compression_method=12, compressed_size=7))
    )
    text = describe_header(header)
    assert "+00 signature            0x04034B50" in text
    assert "+08 compression_method   0x000C (12)" in text
    assert "compression: compressed using BZIP2" in text
    assert "modified: invalid DOS date/time" in text
    assert "entry data: 7 bytes follow the header" in text


def test_dump_header_bytes_restores_position(minimal_header):
    f = io.BytesIO(minimal_header + b"tail")
    f.seek(32)
    dump = dump_header_bytes(f)
    assert f.tell() == 32
    assert len(dump.splitlines()) == 2
    assert "tail" not in dump
