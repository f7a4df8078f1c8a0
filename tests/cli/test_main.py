"""Unit tests for the CLI main module."""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirtree.cli.main import format_counts, main

_real_scandir = os.scandir


def _deny_c(path):
    if Path(path).name == "c":
        raise PermissionError(errno.EACCES, "Permission denied", str(path))
    return _real_scandir(path)


def test_format_counts():
    assert format_counts({"directories": 1, "files": 0}) == "Directories: 1\nFiles: 0"


def test_text_to_stdout(sample_tree, capsys):
    main([str(sample_tree)])
    captured = capsys.readouterr()
    assert captured.out == "project/\n├── a/\n├── c/\n│   └── z.txt\n└── b.txt\n"
    assert captured.err == ""


def test_current_directory_by_default(sample_tree, capsys, monkeypatch):
    monkeypatch.chdir(sample_tree)
    main([])
    assert capsys.readouterr().out.startswith("project/\n")


def test_default_excludes_and_extra_patterns(project_tree, capsys):
    main([str(project_tree), "-i", "public"])
    out = capsys.readouterr().out
    assert "node_modules" not in out
    assert "public" not in out
    assert "src/" in out


def test_no_default_excludes(project_tree, capsys):
    main([str(project_tree), "-n", "-d", "0"])
    out = capsys.readouterr().out
    assert "├── node_modules/" in out
    assert "├── .git/" in out


def test_glob_mode(project_tree, capsys):
    main([str(project_tree), "-g", "-i", "*.woff2"])
    out = capsys.readouterr().out
    assert "public/" in out
    assert "font.woff2" not in out


def test_mermaid_output_file(sample_tree, tmp_path, capsys):
    main([str(sample_tree), "-f", "mermaid", "-o", str(tmp_path / "diagram.txt")])
    written = tmp_path / "diagram.md"
    assert written.read_text(encoding="utf-8").startswith("```mermaid\nflowchart TD\n")
    assert not (tmp_path / "diagram.txt").exists()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Output saved to {written.resolve()}" in captured.err


def test_json_to_stdout(sample_tree, capsys):
    main([str(sample_tree), "-f", "json"])
    assert '"name": "project"' in capsys.readouterr().out


def test_summary_stderr(sample_tree, capsys):
    main([str(sample_tree), "-s", "stderr"])
    captured = capsys.readouterr()
    assert "Directories" not in captured.out
    assert captured.err == "Directories: 2\nFiles: 2\n"


def test_summary_stdout(sample_tree, capsys):
    main([str(sample_tree), "-s", "stdout"])
    assert capsys.readouterr().out.endswith("└── b.txt\n\nDirectories: 2\nFiles: 2\n")


def test_summary_file(sample_tree, tmp_path):
    output = tmp_path / "tree.txt"
    main([str(sample_tree), "-s", "file", "-o", str(output)])
    assert output.read_text(encoding="utf-8").endswith("\n\nDirectories: 2\nFiles: 2\n")


def test_summary_file_without_output(sample_tree, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(sample_tree), "-s", "file"])
    assert exc_info.value.code == 1
    assert "requires -o/--output" in capsys.readouterr().err


def test_missing_directory(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing")])
    assert exc_info.value.code == 1
    assert "Error: Root path does not exist" in capsys.readouterr().err


def test_permission_denied_exit_code(sample_tree, tmp_path, capsys):
    output = tmp_path / "tree.txt"
    with patch("dirtree.file_system_tree.tree_walker.os.scandir", side_effect=_deny_c):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_tree), "-o", str(output)])
    assert exc_info.value.code == 126
    assert "Failed to read directory" in capsys.readouterr().err
    assert not output.exists()


def test_permission_warn_continues(sample_tree, capsys):
    with patch("dirtree.file_system_tree.tree_walker.os.scandir", side_effect=_deny_c):
        main([str(sample_tree), "-P", "warn"])
    captured = capsys.readouterr()
    assert captured.out == "project/\n├── a/\n├── c/\n└── b.txt\n"
    assert "skipping unreadable directory" in captured.err


def test_permission_ignore_is_silent(sample_tree, capsys):
    with patch("dirtree.file_system_tree.tree_walker.os.scandir", side_effect=_deny_c):
        main([str(sample_tree), "-P", "ignore"])
    assert capsys.readouterr().err == ""


def test_verbose_logs_to_stderr(sample_tree, tmp_path, capsys):
    main([str(sample_tree), "-v", "--log-format", "json", "-o", str(tmp_path / "tree.txt")])
    captured = capsys.readouterr()
    assert '"event": "wrote output file"' in captured.err
    assert captured.out == ""


def test_summary_stdout_with_output_file(sample_tree, tmp_path, capsys):
    output = tmp_path / "tree.txt"
    main([str(sample_tree), "-s", "stdout", "-o", str(output)])
    assert "Directories" not in output.read_text(encoding="utf-8")
    assert output.read_text(encoding="utf-8").endswith("└── b.txt\n")
    assert capsys.readouterr().out == "Directories: 2\nFiles: 2\n"
