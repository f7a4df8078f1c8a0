"""Tests for the mermaid-structure tool."""

from dirtree.tools.mermaid_structure import run_mermaid_structure_tool


def _text(result):
    return result["content"][0]["text"]


def test_writes_diagram(sample_tree, tmp_path):
    output = tmp_path / "structure.md"
    result = run_mermaid_structure_tool({"directoryPath": str(sample_tree), "fullPathToOutput": str(output)})

    assert "isError" not in result
    content = output.read_text(encoding="utf-8")
    assert content.startswith("```mermaid\nflowchart TD\n    root[project/]\n")
    assert content.endswith("\n```")
    assert "    root_c --> root_c_z_txt" in content
    assert _text(result).startswith(f"Mermaid diagram saved to {output.resolve()}.")


def test_output_forced_to_markdown(sample_tree, tmp_path):
    result = run_mermaid_structure_tool(
        {"directoryPath": str(sample_tree), "fullPathToOutput": str(tmp_path / "structure.txt")}
    )
    expected = tmp_path / "structure.md"
    assert expected.exists()
    assert not (tmp_path / "structure.txt").exists()
    assert str(expected.resolve()) in _text(result)


def test_diagram_default_exclusions(project_tree, tmp_path):
    output = tmp_path / "structure.md"
    run_mermaid_structure_tool({"directoryPath": str(project_tree), "fullPathToOutput": str(output)})
    content = output.read_text(encoding="utf-8")
    assert "node_modules" not in content
    assert "root_public[public/]" in content
    # Substring matching takes "*.woff2" literally
    assert "font.woff2" in content


def test_glob_mode(project_tree, tmp_path):
    output = tmp_path / "structure.md"
    run_mermaid_structure_tool(
        {"directoryPath": str(project_tree), "matchMode": "glob", "fullPathToOutput": str(output)}
    )
    content = output.read_text(encoding="utf-8")
    assert "font.woff2" not in content
    assert "root_public[public/]" in content
    assert "node_modules" not in content


def test_invalid_input(tmp_path):
    result = run_mermaid_structure_tool({"directoryPath": str(tmp_path), "maxDepth": "x", "fullPathToOutput": "o"})
    assert result["isError"] is True
    assert _text(result) == "Error: Invalid input: Expected integer at 'maxDepth'"
