"""Endpoint renderer: the Markdown section for one HTTP operation."""

import json
from typing import Any

from swagger_markdown.errors import OperationError
from swagger_markdown.markdown import Block, CodeBlock, Heading, Paragraph, render_blocks
from swagger_markdown.parser.base import Operation, Parameter, PathItem, Response

from .context import RenderContext
from .samples import RequestDescriptor, render_sample
from .tables import body_parameters_block, query_parameters_block

QUERY_INDENT = " " * 8
NO_CONTENT = "204"


def query_parameters(operation: Operation) -> list[Parameter]:
    return [p for p in operation.parameters if p.location == "query"]


def body_parameter(operation: Operation, context: RenderContext) -> Parameter | None:
    """First body parameter, carrying its type's example when the schema is a ``$ref``."""
    body = next((p for p in operation.parameters if p.location == "body"), None)
    if body is None or body.schema_ is None:
        return body
    definition = context.definition(body.schema_.ref_name)
    if definition is None or definition.example is None:
        return body
    return body.model_copy(update={"example": definition.example})


def formatted_uri(path_item: PathItem, context: RenderContext) -> str:
    return path_item.path.replace("{version}", context.version)


def positive_response(method: str, operation: Operation, path: str = "") -> Response:
    """First 2xx response in declaration order, with its status code attached."""
    if operation.responses is None:
        raise OperationError("operation declares no responses", method, path, operation.operation_id)
    for status_code, response in operation.responses.items():
        if status_code.startswith("2"):
            return response.model_copy(update={"status_code": status_code})
    raise OperationError("operation declares no 2xx response", method, path, operation.operation_id)


def response_example(response: Response) -> Any:
    """Example payload of the first content type listed, or None."""
    if not response.examples:
        return None
    return next(iter(response.examples.values()))


def build_request(method: str, path_item: PathItem, context: RenderContext) -> RequestDescriptor:
    operation = path_item.operations[method]
    return RequestDescriptor(
        uri=formatted_uri(path_item, context),
        method=method.upper(),
        headers=dict(context.default_headers),
        query=query_parameters(operation),
        body=body_parameter(operation, context),
    )


def endpoint_line(method: str, path_item: PathItem, context: RenderContext) -> str:
    operation = path_item.operations[method]
    line = f"{method.upper()} {formatted_uri(path_item, context)}"

    params = [f"{p.name}={{{p.name.replace('.', '')}}}" for p in query_parameters(operation)]
    if params:
        line += f"?\n{QUERY_INDENT}" + f"\n{QUERY_INDENT}&".join(params)

    if operation.x_permission:
        line += f" {operation.x_permission}"
    return line


def response_blocks(method: str, path_item: PathItem) -> list[Block]:
    operation = path_item.operations[method]
    response = positive_response(method, operation, path_item.path)

    lines = [f"HTTP/1.1 {response.status_code} {response.description}".rstrip()]
    if operation.produces:
        lines.append(f"Content-Type: {operation.produces[0]}")
    blocks: list[Block] = [Heading(4, "Example Response"), CodeBlock("http", "\n".join(lines))]

    if response.status_code != NO_CONTENT:
        example = response_example(response)
        if example is not None:
            blocks.append(CodeBlock("json", json.dumps(example, indent=2, ensure_ascii=False, default=str)))
    return blocks


def endpoint_blocks(method: str, path_item: PathItem, context: RenderContext) -> list[Block]:
    """Sections of one operation, in page order."""
    operation = path_item.operations[method]
    blocks: list[Block] = [Heading(3, operation.x_title or operation.operation_id)]

    description = operation.description or operation.summary or ""
    if description:
        blocks.append(Paragraph(description))

    blocks.append(CodeBlock("endpoint", endpoint_line(method, path_item, context)))

    blocks.append(Heading(4, "Example Request"))
    request = build_request(method, path_item, context)
    for language in context.languages:
        blocks.append(CodeBlock(language, render_sample(language, request)))

    query_table = query_parameters_block(request.query, context)
    if query_table is not None:
        blocks.append(query_table)
    body_table = body_parameters_block(request.body, context)
    if body_table is not None:
        blocks.append(body_table)

    blocks.extend(response_blocks(method, path_item))
    return blocks


def render_endpoint(method: str, path_item: PathItem, context: RenderContext) -> str:
    return render_blocks(endpoint_blocks(method, path_item, context))
