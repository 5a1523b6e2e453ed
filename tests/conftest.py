from pathlib import Path

import pytest

from swagger_markdown.config import GeneratorConfig
from swagger_markdown.generator.context import RenderContext
from swagger_markdown.generator.grouper import group_path_items
from swagger_markdown.parser.swagger import load_document

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def widgets_document():
    return load_document(FIXTURES / "widgets.json")


@pytest.fixture
def widgets_context(widgets_document):
    return RenderContext.from_document(widgets_document, GeneratorConfig(languages=("curl",)))


@pytest.fixture
def widgets_groups(widgets_document):
    return group_path_items(widgets_document.path_entries())
