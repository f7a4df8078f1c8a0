"""Test configuration and fixtures for dirtree."""

import logging

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def restore_dirtree_logger():
    """Undo logging configuration done by a test (e.g. through the CLI)."""
    package_logger = logging.getLogger("dirtree")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def sample_tree(tmp_path):
    """Root with b.txt, an empty directory a/ and c/ containing z.txt."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "b.txt").write_text("b")
    (root / "a").mkdir()
    (root / "c").mkdir()
    (root / "c" / "z.txt").write_text("z")
    return root


@pytest.fixture
def project_tree(tmp_path):
    """A small project with directories that the default exclusions hide."""
    root = tmp_path / "webapp"
    root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "components").mkdir()
    (root / "src" / "components" / "Button.tsx").write_text("export {}")
    (root / "src" / "index.ts").write_text("export {}")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "react").mkdir()
    (root / "node_modules" / "react" / "index.js").write_text("")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main")
    (root / "dist").mkdir()
    (root / "dist" / "bundle.js").write_text("")
    (root / "public").mkdir()
    (root / "public" / "font.woff2").write_bytes(b"\x00")
    (root / "package.json").write_text("{}")
    (root / "README.md").write_text("# webapp")
    return root
