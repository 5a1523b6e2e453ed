"""Parameter and model tables."""

import logging

from swagger_markdown.markdown import Table, code_span
from swagger_markdown.parser.base import Parameter, Schema

from .context import RenderContext

logger = logging.getLogger(__name__)

TABLE_HEADERS = ("Parameter", "Type", "Description")
SPACER = "&nbsp;"


def schema_type_name(schema: Schema | None) -> str | None:
    """Direct ``type`` of a schema, else the name its ``$ref`` points at."""
    if schema is None:
        return None
    return schema.type or schema.ref_name


def field_type(field: Schema | Parameter) -> str:
    """``string(64) email`` style description of a primitive type."""
    text = field.type or ""
    if field.max_length:
        text += f"({field.max_length})"
    if field.format:
        text += f" {field.format}"
    return text


def _name_cell(name: str, required: bool) -> str:
    return code_span(name if required else f"{name} (optional)")


def query_parameters_block(parameters: list[Parameter], context: RenderContext) -> Table | None:
    if not parameters:
        return None
    ordered = sorted(parameters, key=lambda p: not p.required)
    rows = [
        (_name_cell(p.name, p.required), code_span(p.type or ""), p.description or "")
        for p in ordered
    ]
    rows.append((SPACER, SPACER, context.pagination_hint))
    return Table(TABLE_HEADERS, tuple(rows))


def query_parameters_table(parameters: list[Parameter], context: RenderContext) -> str:
    """Required parameters first, declaration order kept within each bucket."""
    block = query_parameters_block(parameters, context)
    return block.render() if block else ""


def body_parameters_block(parameter: Parameter | None, context: RenderContext) -> Table | None:
    if parameter is None:
        return None
    type_name = schema_type_name(parameter.schema_)
    definition = context.definition(type_name)
    if definition is None or not definition.properties:
        logger.debug("Body parameter '%s' has no documented type (%s)", parameter.name, type_name)
        return None

    required = set(definition.required)
    names = sorted(definition.properties, key=lambda name: (name not in required, name))
    rows = []
    for name in names:
        field = definition.properties[name]
        type_cell = code_span(field_type(field)) if field.type else code_span(field.ref_name or "")
        rows.append((_name_cell(name, name in required), type_cell, field.description or ""))
    return Table(TABLE_HEADERS, tuple(rows))


def body_parameters_table(parameter: Parameter | None, context: RenderContext) -> str:
    """Fields of the body's type, required first, then by name."""
    block = body_parameters_block(parameter, context)
    return block.render() if block else ""


def model_anchor(type_name: str) -> str:
    return f"#{type_name.lower()}-model"


def model_block(type_name: str, context: RenderContext) -> Table | None:
    definition = context.definition(type_name)
    if definition is None or not definition.properties:
        return None
    rows = []
    for name, field in definition.properties.items():
        if field.type:
            type_cell = code_span(field_type(field))
        else:
            ref_name = field.ref_name or ""
            type_cell = f"[{code_span(ref_name)}]({model_anchor(ref_name)})"
        rows.append((code_span(name), type_cell, field.description or ""))
    return Table(TABLE_HEADERS, tuple(rows))


def model_table(type_name: str, context: RenderContext) -> str:
    """Table of a definition for the type definitions page, fields in declaration order."""
    block = model_block(type_name, context)
    return block.render() if block else ""
