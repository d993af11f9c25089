import io

import pytest

from zipcheck import __main__ as cli
from zipcheck import validator
from zipcheck.__main__ import main


def run_cli(args):
    with pytest.raises(SystemExit) as excinfo:
        main(args)
    return excinfo.value.code


def test_missing_argument(capsys):
    assert run_cli([]) == 1
    captured = capsys.readouterr()
    assert "usage: zipcheck" in captured.err
    assert captured.out == ""


def test_valid_file(capsys, zip_file, minimal_header):
    path = zip_file(minimal_header)
    assert run_cli([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"processing {path}",
        "no compression",
        "the file is a valid ZIP file 0",
    ]


def test_deflated_label(capsys, zip_file, header_bytes):
    path = zip_file(header_bytes(compression_method=8))
    assert run_cli([str(path)]) == 0
    assert "deflated" in capsys.readouterr().out.splitlines()


def test_magic_number_mismatch(capsys, zip_file):
    path = zip_file(b"%PDF-1.7\n" + b"\x00" * 40, name="doc.pdf")
    assert run_cli([str(path)]) == 3
    out = capsys.readouterr().out.splitlines()
    assert out == [f"processing {path}", "incorrect magic number 3"]


def test_truncated_field(capsys, zip_file, header_bytes):
    path = zip_file(header_bytes(compression_method=99)[:16])
    assert run_cli([str(path)]) == 12
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["unknown", "ERR_HEADER_CRC32_READ 12"]


def test_missing_file(capsys, tmp_path):
    assert run_cli([str(tmp_path / "nope.zip")]) == 2
    assert "could not open file 2" in capsys.readouterr().out


def test_seek_failure(capsys, zip_file, header_bytes):
    path = zip_file(header_bytes(file_name_length=5) + b"abc")
    assert run_cli([str(path)]) == 17
    assert capsys.readouterr().out.splitlines()[-1] == "failed to seek in file 17"


def test_verbose(capsys, zip_file, header_bytes):
    path = zip_file(header_bytes(compression_method=8, file_name_length=1) + b"a")
    assert run_cli(["-v", str(path)]) == 0
    out = capsys.readouterr().out
    assert "local file header:" in out
    assert "compression_method" in out
    assert "00000000  50 4B 03 04" in out
    assert out.rstrip().endswith("the file is a valid ZIP file 0")


def test_verbose_missing_file(capsys, tmp_path):
    assert run_cli(["--verbose", str(tmp_path / "nope.zip")]) == 2
    assert "could not open file 2" in capsys.readouterr().out


class PipeSource(io.BytesIO):
    def seekable(self):
        return False

    def seek(self, *args):
        raise io.UnsupportedOperation("seek")

    def tell(self):
        raise io.UnsupportedOperation("tell")


@pytest.mark.parametrize("args", [["-v"], []])
def test_non_seekable_source(capsys, monkeypatch, minimal_header, args):
    monkeypatch.setattr(cli, "open_source", lambda path: PipeSource(minimal_header))
    monkeypatch.setattr(validator, "open_source", lambda path: PipeSource(minimal_header))
    assert run_cli(args + ["/dev/stdin"]) == 17
    captured = capsys.readouterr()
    assert captured.out.splitlines()[-1] == "failed to seek in file 17"
