"""Unit tests for sibling ordering."""

from dirtree.file_system_tree.sorting import sort_entries, sort_key


def _sort(entries):
    return sort_entries(entries, name=lambda e: e[0], is_dir=lambda e: e[1])


def test_directories_before_files():
    entries = [("b.txt", False), ("z", True), ("a.txt", False), ("m", True)]
    assert _sort(entries) == [("m", True), ("z", True), ("a.txt", False), ("b.txt", False)]


def test_case_insensitive_with_stable_tie_break():
    entries = [("b", False), ("B", False), ("a", False), ("C", False)]
    assert [name for name, _ in _sort(entries)] == ["a", "B", "b", "C"]


def test_order_independent_of_input_order():
    entries = [("src", True), ("README.md", False), ("docs", True), ("setup.py", False), ("Makefile", False)]
    expected = _sort(entries)
    assert _sort(list(reversed(entries))) == expected
    assert [name for name, _ in expected] == ["docs", "src", "Makefile", "README.md", "setup.py"]


def test_directory_named_like_file():
    # A directory sorts first even if its name sorts after the file's
    assert sort_key("zzz", True) < sort_key("aaa", False)


def test_non_ascii_names():
    entries = [("Äpfel", False), ("apfel", False), ("zebra", False)]
    assert [name for name, _ in _sort(entries)] == ["apfel", "zebra", "Äpfel"]
