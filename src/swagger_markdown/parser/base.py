"""Data models for a parsed Swagger 2.0 document.

Field names follow Python conventions; the Swagger spelling of each key
(``in``, ``operationId``, ``x-title``, ``$ref`` ...) is kept as the alias so
documents validate straight from their parsed JSON.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_METHODS = ("head", "options", "get", "post", "put", "patch", "delete")


class SwaggerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Schema(SwaggerModel):
    """A property or schema descriptor, either a primitive or a ``$ref``."""

    type: str | None = None
    format: str | None = None
    max_length: int | None = Field(default=None, alias="maxLength")
    description: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    items: "Schema | None" = None

    @property
    def ref_name(self) -> str | None:
        """Last segment of the ``$ref`` pointer, e.g. ``Widget``."""
        if not self.ref:
            return None
        return self.ref.split("/")[-1] or None


class Parameter(SwaggerModel):
    """A single operation parameter."""

    name: str
    location: str = Field(default="", alias="in")  # query / body / path / header
    required: bool = False
    type: str | None = None
    format: str | None = None
    max_length: int | None = Field(default=None, alias="maxLength")
    description: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None


class Response(SwaggerModel):
    description: str = ""
    schema_: Schema | None = Field(default=None, alias="schema")
    examples: dict[str, Any] | None = None
    status_code: str = ""


class Operation(SwaggerModel):
    """One HTTP method on one path."""

    operation_id: str = Field(default="", alias="operationId")
    x_title: str | None = Field(default=None, alias="x-title")
    description: str | None = None
    summary: str | None = None
    x_permission: str | None = Field(default=None, alias="x-permission")
    parameters: list[Parameter] = []
    responses: dict[str, Response] | None = None
    produces: list[str] = []
    consumes: list[str] = []
    tags: list[str] | None = None

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_str(cls, value: Any) -> Any:
        # YAML documents yield integer status codes
        if isinstance(value, dict):
            return {str(code): resp for code, resp in value.items()}
        return value


class PathItem(SwaggerModel):
    """All operations declared under one URI template.

    ``path`` is not part of the document; the grouper attaches it.
    ``operations`` keeps the document's declaration order.
    """

    path: str = ""
    operations: dict[str, Operation] = {}


class TypeDefinition(SwaggerModel):
    properties: dict[str, Schema] = {}
    required: list[str] = []
    example: Any = None


class Tag(SwaggerModel):
    name: str
    description: str | None = None
    x_title: str | None = Field(default=None, alias="x-title")


class Info(SwaggerModel):
    title: str = ""
    version: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ApiDocument(SwaggerModel):
    """Top-level Swagger 2.0 document."""

    swagger: str
    info: Info
    host: str | None = None
    schemes: list[str] = []
    tags: list[Tag] = []
    definitions: dict[str, TypeDefinition] = {}
    paths: dict[str, PathItem]

    @field_validator("swagger", mode="before")
    @classmethod
    def _swagger_as_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("paths", mode="before")
    @classmethod
    def _collect_operations(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        paths = {}
        for uri, item in value.items():
            if not isinstance(item, dict):
                paths[uri] = item
                continue
            operations = {
                method.lower(): operation
                for method, operation in item.items()
                if method.lower() in HTTP_METHODS
            }
            paths[uri] = {"operations": operations}
        return paths

    def path_entries(self) -> list[tuple[str, PathItem]]:
        """(uri template, path item) pairs in document order."""
        return list(self.paths.items())
