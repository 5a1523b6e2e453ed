"""Resource grouper: partitions path items into one group per resource page."""

import logging
import re
from collections.abc import Iterable

from swagger_markdown.errors import OperationError
from swagger_markdown.parser.base import Operation, PathItem

from .context import RenderContext

logger = logging.getLogger(__name__)

VERSION_SEGMENT = "/v{version}/"
RESOURCE_SEGMENT_INDEX = 2


def primary_operation(path_item: PathItem) -> tuple[str, Operation] | None:
    """The first declared operation of a path item, or None when it has none."""
    for method, operation in path_item.operations.items():
        return method, operation
    return None


def group_key(path_item: PathItem) -> str:
    """Group key of a path item, decided by its first declared operation."""
    primary = primary_operation(path_item)
    if primary is None:
        return ""
    method, operation = primary

    if operation.tags is None:
        raise OperationError(
            "operation declares no tags array", method, path_item.path, operation.operation_id,
        )
    if operation.tags:
        return safe_key(operation.tags[0])

    key = resource_name_from_path(path_item.path)
    logger.debug("%s has no tags, grouped by path as '%s'", path_item.path, key)
    return safe_key(key)


def safe_key(name: str) -> str:
    """Lowercased group key usable as a file name inside the output directory."""
    key = re.sub(r"[/\\]+", "-", name.strip().lower())
    return key.lstrip(".")


def resource_name_from_path(path: str) -> str:
    """Derive a resource name from a URI template such as ``/v{version}/api/shop/widgets``."""
    segments = path.replace(VERSION_SEGMENT, "").split("/")
    if len(segments) > RESOURCE_SEGMENT_INDEX and segments[RESOURCE_SEGMENT_INDEX]:
        return segments[RESOURCE_SEGMENT_INDEX].lower()
    remaining = [segment for segment in segments if segment]
    return remaining[-1].lower() if remaining else ""


def group_path_items(entries: Iterable[tuple[str, PathItem]]) -> dict[str, list[PathItem]]:
    """Group ``(uri template, path item)`` entries by resource.

    Every path item lands in exactly one group. Keys keep first-encounter
    order and items keep document order within their group.
    """
    groups: dict[str, list[PathItem]] = {}
    for uri, path_item in entries:
        item = path_item.model_copy(update={"path": uri})
        groups.setdefault(group_key(item), []).append(item)
    return groups


def group_title(path_items: list[PathItem], context: RenderContext) -> str:
    """Display title of a group: the primary tag's ``x-title``, else the operationId prefix."""
    primary = primary_operation(path_items[0]) if path_items else None
    if primary is None:
        return ""
    _, operation = primary
    fallback = operation.operation_id.split("_")[0]

    tag = context.tag(operation.tags[0]) if operation.tags else None
    if tag is None:
        return fallback
    return (tag.x_title or "").strip() or fallback


def group_description(path_items: list[PathItem], context: RenderContext) -> str:
    primary = primary_operation(path_items[0]) if path_items else None
    if primary is None:
        return ""
    _, operation = primary
    tag = context.tag(operation.tags[0]) if operation.tags else None
    if tag is None:
        return ""
    return (tag.description or "").strip()
