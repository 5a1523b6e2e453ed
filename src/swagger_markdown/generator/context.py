"""Read-only lookups shared by every renderer during one run."""

import re

from pydantic import BaseModel, ConfigDict

from swagger_markdown.config import GeneratorConfig
from swagger_markdown.parser.base import ApiDocument, Tag, TypeDefinition


class RenderContext(BaseModel):
    """Built once per run and passed explicitly into each renderer."""

    model_config = ConfigDict(frozen=True)

    version: str = ""
    tags: dict[str, Tag] = {}
    definitions: dict[str, TypeDefinition] = {}
    languages: tuple[str, ...] = ()
    pagination_hint: str = ""
    default_headers: dict[str, str] = {}

    @classmethod
    def from_document(cls, document: ApiDocument, config: GeneratorConfig | None = None) -> "RenderContext":
        config = config or GeneratorConfig()
        return cls(
            version=numeric_version(document.info.version),
            # first declaration wins for duplicate tag names
            tags={tag.name: tag for tag in reversed(document.tags)},
            definitions=document.definitions,
            languages=config.languages,
            pagination_hint=config.pagination_hint,
            default_headers=config.default_headers,
        )

    def tag(self, name: str) -> Tag | None:
        return self.tags.get(name)

    def definition(self, type_name: str | None) -> TypeDefinition | None:
        if not type_name:
            return None
        return self.definitions.get(type_name)


def numeric_version(version: str) -> str:
    """``v2`` / ``V2`` -> ``2``."""
    return re.sub(r"^[vV]", "", version.strip())
