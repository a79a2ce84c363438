"""Plan executor - applies the tags of a planned release."""

import logging
from typing import Optional

from .exceptions import GitOperationError
from .io_layer import IOLayer
from .message_generation import generate_tag_message
from .models import ExecutionResult, VersionInfo

logger = logging.getLogger(__name__)


def execute_release(
    info: VersionInfo,
    io_layer: IOLayer,
    immutable_tag: Optional[str] = None,
    mutable_tag: Optional[str] = None,
) -> ExecutionResult:
    """
    Create and push the tags of a release.

    The immutable tag is created annotated and pushed normally; the mutable
    tag is force-moved to HEAD and force-pushed. Git failures stop the
    execution and are reported in the result.

    Args:
        info: Planned release
        io_layer: I/O layer performing the git commands
        immutable_tag: Override for info.immutable_tag
        mutable_tag: Override for info.mutable_tag
    """
    immutable_tag = immutable_tag or info.immutable_tag
    if mutable_tag is None:
        mutable_tag = info.mutable_tag

    result = ExecutionResult(success=True, dry_run=io_layer.dry_run)

    try:
        _apply_tag(io_layer, result, immutable_tag, generate_tag_message(immutable_tag), force=False)
        if mutable_tag:
            _apply_tag(io_layer, result, mutable_tag, None, force=True)
        else:
            logger.debug("Release has no mutable tag")
    except GitOperationError as e:
        result.success = False
        result.errors.append(f"Execution failed: {e}")

    return result


def _apply_tag(io_layer: IOLayer, result: ExecutionResult, tag: str, message: Optional[str], force: bool):
    """Create a tag and push it."""
    logger.debug(f"Tagging {tag}{' (forced)' if force else ''}")
    if io_layer.create_tag(tag, message=message, force=force):
        result.tags_created.append(tag)
    if io_layer.push_tag(tag, force=force):
        result.tags_pushed.append(tag)
