"""Tests for applying a planned release through the I/O layer."""

from unittest.mock import Mock

from wags_tags.exceptions import GitOperationError
from wags_tags.models import VersionInfo
from wags_tags.plan_executor import execute_release


def make_info(mutable_tag="dev"):
    return VersionInfo(
        current_version="v0.0.7",
        immutable_tag="v0.0.8-dev",
        mutable_tag=mutable_tag,
        branch="develop",
        environment="dev",
    )


def make_io_layer(dry_run=False):
    io_layer = Mock()
    io_layer.dry_run = dry_run
    io_layer.create_tag.return_value = not dry_run
    io_layer.push_tag.return_value = not dry_run
    return io_layer


def test_creates_and_pushes_both_tags():
    io_layer = make_io_layer()

    result = execute_release(make_info(), io_layer)

    assert result.success
    assert result.tags_created == ["v0.0.8-dev", "dev"]
    assert result.tags_pushed == ["v0.0.8-dev", "dev"]
    io_layer.create_tag.assert_any_call("v0.0.8-dev", message="Release v0.0.8-dev", force=False)
    io_layer.create_tag.assert_any_call("dev", message=None, force=True)
    io_layer.push_tag.assert_any_call("v0.0.8-dev", force=False)
    io_layer.push_tag.assert_any_call("dev", force=True)


def test_no_mutable_tag():
    io_layer = make_io_layer()

    result = execute_release(make_info(mutable_tag=None), io_layer)

    assert result.success
    assert result.tags_created == ["v0.0.8-dev"]
    assert io_layer.create_tag.call_count == 1


def test_custom_tags_override_plan():
    io_layer = make_io_layer()

    result = execute_release(make_info(), io_layer, immutable_tag="v0.1.0-dev", mutable_tag="")

    assert result.tags_created == ["v0.1.0-dev"]
    io_layer.create_tag.assert_called_once_with("v0.1.0-dev", message="Release v0.1.0-dev", force=False)


def test_git_failure_stops_execution():
    io_layer = make_io_layer()
    io_layer.push_tag.side_effect = GitOperationError("Failed to push tag v0.0.8-dev: rejected")

    result = execute_release(make_info(), io_layer)

    assert not result.success
    assert result.tags_created == ["v0.0.8-dev"]
    assert result.tags_pushed == []
    assert result.errors == ["Execution failed: Failed to push tag v0.0.8-dev: rejected"]
    assert io_layer.create_tag.call_count == 1


def test_dry_run_records_nothing():
    io_layer = make_io_layer(dry_run=True)

    result = execute_release(make_info(), io_layer)

    assert result.success
    assert result.dry_run
    assert result.tags_created == []
    assert io_layer.create_tag.call_count == 2
