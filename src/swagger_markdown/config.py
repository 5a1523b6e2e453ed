"""Generator settings shared by the CLI and the rendering pass."""

from pydantic import BaseModel, ConfigDict, field_validator

from swagger_markdown.generator.samples import supported_languages

DEFAULT_HEADERS = {
    "Authorization": "Bearer {Token}",
    "Accept": "application/json",
    "Content-Type": "application/json",
}

DEFAULT_PAGINATION_HINT = "[See search and pagination for more parameters](#search)"

TYPEDEFS_FILENAME = "typedefs.md"


class GeneratorConfig(BaseModel):
    """Options for one generation run."""

    model_config = ConfigDict(frozen=True)

    languages: tuple[str, ...] = tuple(supported_languages())
    pagination_hint: str = DEFAULT_PAGINATION_HINT
    default_headers: dict[str, str] = DEFAULT_HEADERS

    @field_validator("languages")
    @classmethod
    def _known_languages(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        known = supported_languages()
        unknown = [code for code in value if code not in known]
        if unknown:
            raise ValueError(f"unsupported languages: {', '.join(unknown)} (known: {', '.join(known)})")
        return value
