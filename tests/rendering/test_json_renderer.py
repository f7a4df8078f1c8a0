"""Tests for the JSON renderer."""

import json

from dirtree.file_system_tree.traversal_policy import TraversalPolicy
from dirtree.file_system_tree.tree_walker import TreeWalker
from dirtree.rendering.json_renderer import JSONTreeRenderer


def test_sample_tree(sample_tree):
    walker = TreeWalker(TraversalPolicy(sample_tree))
    document = json.loads(JSONTreeRenderer().render(walker.root_name, walker.walk()))
    assert document == {
        "name": "project",
        "type": "directory",
        "children": [
            {"name": "a", "type": "directory", "children": []},
            {"name": "c", "type": "directory", "children": [{"name": "z.txt", "type": "file"}]},
            {"name": "b.txt", "type": "file"},
        ],
    }


def test_deep_nesting_returns_to_shallower_level(tmp_path):
    (tmp_path / "a" / "b" / "c").mkdir(parents=True)
    (tmp_path / "a" / "b" / "c" / "deep.txt").write_text("")
    (tmp_path / "z.txt").write_text("")

    walker = TreeWalker(TraversalPolicy(tmp_path))
    document = JSONTreeRenderer().build(walker.root_name, walker.walk())
    assert [child["name"] for child in document["children"]] == ["a", "z.txt"]
    c = document["children"][0]["children"][0]["children"][0]
    assert c["children"] == [{"name": "deep.txt", "type": "file"}]


def test_non_ascii_names_kept(tmp_path):
    (tmp_path / "résumé.txt").write_text("")
    walker = TreeWalker(TraversalPolicy(tmp_path))
    assert "résumé.txt" in JSONTreeRenderer().render(walker.root_name, walker.walk())


def test_indent():
    output = JSONTreeRenderer(indent=None).render("root", [])
    assert output == '{"name": "root", "type": "directory", "children": []}'
