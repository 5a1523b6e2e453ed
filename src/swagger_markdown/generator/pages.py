"""Page assembly and writing: one Markdown page per resource group plus type definitions."""

import logging
from pathlib import Path

from swagger_markdown.config import TYPEDEFS_FILENAME, GeneratorConfig
from swagger_markdown.markdown import Block, Heading, Paragraph, render_blocks
from swagger_markdown.parser.base import HTTP_METHODS, ApiDocument, PathItem
from swagger_markdown.parser.swagger import load_document

from .context import RenderContext
from .endpoint import endpoint_blocks
from .grouper import group_description, group_path_items, group_title
from .typedefs import collect_response_models, render_type_definitions

logger = logging.getLogger(__name__)


def render_group_page(path_items: list[PathItem], context: RenderContext) -> str:
    """Group heading and description followed by every operation of every path item."""
    blocks: list[Block] = [Heading(2, group_title(path_items, context))]
    description = group_description(path_items, context)
    if description:
        blocks.append(Paragraph(description))

    for path_item in path_items:
        for method in HTTP_METHODS:
            if method in path_item.operations:
                blocks.extend(endpoint_blocks(method, path_item, context))
    return render_blocks(blocks)


def write_page(output_dir: Path, file_name: str, content: str) -> Path:
    """Write ``content`` to ``file_name`` inside the resolved ``output_dir``."""
    target = Path(output_dir).expanduser().resolve() / file_name
    target.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", target, len(content))
    return target


class MarkdownGenerator:
    """Renders a Swagger document into Markdown reference pages."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    def generate(self, document: ApiDocument) -> dict[str, str]:
        """Render every page.

        Returns a dict of {filename: markdown}, group pages in document
        order followed by the type definitions page.
        """
        context = RenderContext.from_document(document, self.config)
        groups = group_path_items(document.path_entries())

        pages: dict[str, str] = {}
        for key, path_items in groups.items():
            if not key:
                logger.warning(
                    "Skipping %d path(s) without operations: %s",
                    len(path_items), ", ".join(item.path for item in path_items),
                )
                continue
            logger.info("Rendering group '%s' (%d paths)", key, len(path_items))
            pages[f"{key}.md"] = render_group_page(path_items, context)

        refs = collect_response_models(groups)
        logger.info("Rendering %d type definitions", len(refs))
        pages[TYPEDEFS_FILENAME] = render_type_definitions(refs, context)
        return pages

    def emit(self, doc_path: Path, output_dir: Path) -> list[Path]:
        """Load ``doc_path`` and write its pages into ``output_dir``.

        Every page is rendered before the first one is written, so an
        invalid operation leaves the output directory untouched.
        """
        document = load_document(doc_path)
        pages = self.generate(document)
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        return [write_page(output_dir, name, content) for name, content in pages.items()]
