"""Unit tests for document and export file I/O."""

import base64

import pytest

from rishah.core.errors import FileReadError, FileWriteError, InvalidPayloadError
from rishah.core.files import (
    decode_base64,
    read_text_file,
    write_base64_file,
    write_text_file,
)


def test_text_write_then_read(tmp_path):
    path = tmp_path / "drawing.tldr"
    content = '{"records": [], "name": "café"}\n'

    write_text_file(path, content)

    assert read_text_file(path) == content
    assert path.read_bytes() == content.encode("utf-8")


def test_read_missing_file_names_path(tmp_path):
    missing = tmp_path / "missing.tldr"

    with pytest.raises(FileReadError) as exc_info:
        read_text_file(missing)

    assert exc_info.value.path == str(missing)


def test_write_into_missing_directory_fails(tmp_path):
    target = tmp_path / "no-such-dir" / "drawing.tldr"

    with pytest.raises(FileWriteError) as exc_info:
        write_text_file(target, "{}")

    assert exc_info.value.path == str(target)


def test_base64_write_round_trip(tmp_path):
    data = bytes(range(256)) * 4
    target = tmp_path / "export.png"

    written = write_base64_file(target, base64.b64encode(data).decode("ascii"))

    assert written == len(data)
    assert target.read_bytes() == data


def test_malformed_base64_writes_nothing(tmp_path):
    target = tmp_path / "export.png"

    with pytest.raises(InvalidPayloadError):
        write_base64_file(target, "not*valid*base64!")

    assert not target.exists()


def test_malformed_base64_keeps_existing_file(tmp_path):
    target = tmp_path / "export.png"
    target.write_bytes(b"previous")

    with pytest.raises(InvalidPayloadError):
        write_base64_file(target, "abc")

    assert target.read_bytes() == b"previous"


def test_decode_base64_accepts_empty_payload():
    assert decode_base64("") == b""


def test_unencodable_text_is_rejected_without_touching_file(tmp_path):
    target = tmp_path / "drawing.tldr"
    target.write_bytes(b"ORIGINAL")

    with pytest.raises(InvalidPayloadError):
        write_text_file(target, "new \ud800 content")

    assert target.read_bytes() == b"ORIGINAL"
