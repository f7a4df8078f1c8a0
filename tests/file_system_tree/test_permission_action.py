"""Unit tests for the permission_action module."""

from dirtree.file_system_tree.permission_action import PermissionAction


def test_permission_action_enum():
    """Test the PermissionAction enum values."""
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.WARN == "warn"
    assert PermissionAction.RAISE == "raise"

    assert PermissionAction("ignore") is PermissionAction.IGNORE
    assert PermissionAction("warn") is PermissionAction.WARN
    assert PermissionAction("raise") is PermissionAction.RAISE


def test_permission_action_comparison():
    """Test comparing PermissionAction enum with strings."""
    assert "warn" == PermissionAction.WARN
    assert PermissionAction.IGNORE != "raise"
    assert PermissionAction.RAISE != "warn"
