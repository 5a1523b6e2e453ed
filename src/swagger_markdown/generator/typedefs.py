"""Type definitions page: every model returned by a successful response."""

import logging

from swagger_markdown.markdown import Block, Heading, render_blocks
from swagger_markdown.parser.base import PathItem, Schema

from .context import RenderContext
from .tables import model_block

logger = logging.getLogger(__name__)


def _schema_ref(schema: Schema | None) -> str | None:
    if schema is None:
        return None
    if schema.ref:
        return schema.ref
    if schema.items is not None:
        return schema.items.ref
    return None


def collect_response_models(groups: dict[str, list[PathItem]]) -> list[str]:
    """Distinct ``$ref`` strings of all 2xx response schemas, sorted."""
    refs = set()
    for path_items in groups.values():
        for path_item in path_items:
            for operation in path_item.operations.values():
                for status_code, response in (operation.responses or {}).items():
                    if not status_code.startswith("2"):
                        continue
                    ref = _schema_ref(response.schema_)
                    if ref:
                        refs.add(ref)
    return sorted(refs)


def model_name(ref: str) -> str:
    return ref.split("/")[-1]


def type_definition_blocks(refs: list[str], context: RenderContext) -> list[Block]:
    blocks: list[Block] = [Heading(2, "Type Definitions")]
    for ref in sorted(refs):
        name = model_name(ref)
        blocks.append(Heading(3, f"{name} Model"))
        table = model_block(name, context)
        if table is None:
            logger.warning("No documented fields for %s", ref)
            continue
        blocks.append(table)
    return blocks


def render_type_definitions(refs: list[str], context: RenderContext) -> str:
    return render_blocks(type_definition_blocks(refs, context))
