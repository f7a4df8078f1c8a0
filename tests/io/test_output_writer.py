"""Tests for writing rendered documents."""

import errno
import os
import stat
import tempfile
from unittest.mock import patch

import pytest

from dirtree.exceptions import OutputWriteError
from dirtree.io.output_writer import write_output


def test_write_output(tmp_path):
    target = tmp_path / "tree.txt"
    written = write_output(target, "project/\n└── a.txt")
    assert written == target.resolve()
    assert target.read_text(encoding="utf-8") == "project/\n└── a.txt"


def test_relative_path_resolved_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    written = write_output("out.md", "x")
    assert written == (tmp_path / "out.md").resolve()
    assert written.is_absolute()


def test_overwrites_existing_file(tmp_path):
    target = tmp_path / "tree.txt"
    target.write_text("old content that is longer")
    write_output(target, "new")
    assert target.read_text() == "new"


def test_newlines_not_translated(tmp_path):
    target = tmp_path / "tree.txt"
    write_output(target, "a\nb")
    assert target.read_bytes() == b"a\nb"


def test_missing_parent_directory(tmp_path):
    target = tmp_path / "missing" / "tree.txt"
    with pytest.raises(OutputWriteError, match="Failed to write output file") as exc_info:
        write_output(target, "x")
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert not target.exists()


def test_target_is_directory(tmp_path):
    with pytest.raises(OutputWriteError):
        write_output(tmp_path, "x")


def _failing_temporary_file(real_factory):
    """Wrap NamedTemporaryFile so the document write fails after a partial chunk."""

    def factory(*args, **kwargs):
        f = real_factory(*args, **kwargs)

        def write(data):
            f.file.write(data[:5])
            raise OSError(errno.EFBIG, "File too large")

        f.write = write
        return f

    return factory


def test_failed_write_keeps_previous_file(tmp_path):
    target = tmp_path / "tree.txt"
    target.write_text("previous tree")

    factory = _failing_temporary_file(tempfile.NamedTemporaryFile)
    with patch("dirtree.io.output_writer.tempfile.NamedTemporaryFile", side_effect=factory):
        with pytest.raises(OutputWriteError, match="File too large"):
            write_output(target, "project/\n└── " + "x" * 1000)

    assert target.read_text() == "previous tree"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tree.txt"]


def test_failed_write_creates_no_file(tmp_path):
    target = tmp_path / "tree.txt"
    factory = _failing_temporary_file(tempfile.NamedTemporaryFile)
    with patch("dirtree.io.output_writer.tempfile.NamedTemporaryFile", side_effect=factory):
        with pytest.raises(OutputWriteError):
            write_output(target, "project/")

    assert list(tmp_path.iterdir()) == []


def test_failed_rename_keeps_previous_file(tmp_path):
    target = tmp_path / "tree.txt"
    target.write_text("previous tree")

    with patch("dirtree.io.output_writer.os.replace", side_effect=PermissionError(errno.EACCES, "denied")):
        with pytest.raises(OutputWriteError):
            write_output(target, "new tree")

    assert target.read_text() == "previous tree"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tree.txt"]


def test_keeps_permissions_of_replaced_file(tmp_path):
    target = tmp_path / "tree.txt"
    target.write_text("old")
    os.chmod(target, 0o640)
    write_output(target, "new")
    assert stat.S_IMODE(target.stat().st_mode) == 0o640


def test_new_file_is_not_private(tmp_path):
    written = write_output(tmp_path / "tree.txt", "x")
    # Readable by the owner's group and others unless the umask says otherwise
    assert stat.S_IMODE(written.stat().st_mode) == 0o666 & ~_umask()


def _umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask
