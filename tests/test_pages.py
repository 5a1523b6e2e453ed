import json
from pathlib import Path

import pytest

from swagger_markdown.config import GeneratorConfig
from swagger_markdown.errors import OperationError
from swagger_markdown.generator.pages import MarkdownGenerator, render_group_page, write_page

FIXTURES = Path(__file__).parent / "fixtures"


class TestRenderGroupPage:
    def test_heading_description_and_operation_order(self, widgets_groups, widgets_context):
        page = render_group_page(widgets_groups["widgets"], widgets_context)
        assert page.startswith("## Widget Catalogue\n\nCreate, list and delete widgets.\n\n### Widgets_List\n")
        positions = [page.index(title) for title in ("### Widgets_List", "### Create a widget", "### Widgets_Delete")]
        assert positions == sorted(positions)

    def test_fixed_method_order_within_path_item(self, widgets_context):
        from swagger_markdown.parser.base import Operation, PathItem

        ok = {"200": {"description": "OK"}}
        item = PathItem(path="/t", operations={
            "delete": Operation.model_validate({"operationId": "T_Delete", "tags": ["T"], "responses": ok}),
            "get": Operation.model_validate({"operationId": "T_Get", "tags": ["T"], "responses": ok}),
        })
        page = render_group_page([item], widgets_context)
        assert page.index("### T_Get") < page.index("### T_Delete")

    def test_group_without_description(self, widgets_groups, widgets_context):
        page = render_group_page(widgets_groups["health"], widgets_context)
        assert page.startswith("## Health\n\n### Health_Get\n")


class TestWritePage:
    def test_resolves_relative_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "out").mkdir()
        target = write_page(Path("out/../out"), "a.md", "# A\n")
        assert target == tmp_path.resolve() / "out" / "a.md"
        assert target.read_text(encoding="utf-8") == "# A\n"

    def test_last_write_wins(self, tmp_path):
        write_page(tmp_path, "a.md", "first")
        write_page(tmp_path, "a.md", "second")
        assert (tmp_path / "a.md").read_text(encoding="utf-8") == "second"

    def test_missing_dir_raises(self, tmp_path):
        with pytest.raises(OSError):
            write_page(tmp_path / "missing", "a.md", "x")


class TestMarkdownGenerator:
    def test_generate_pages(self, widgets_document):
        pages = MarkdownGenerator(GeneratorConfig(languages=("curl",))).generate(widgets_document)
        assert list(pages) == ["widgets.md", "orders.md", "health.md", "typedefs.md"]
        assert pages["typedefs.md"].startswith("## Type Definitions\n")
        assert "```cs" not in pages["widgets.md"]

    def test_generate_is_deterministic(self, widgets_document):
        generator = MarkdownGenerator()
        assert generator.generate(widgets_document) == generator.generate(widgets_document)

    def test_empty_group_skipped(self):
        from swagger_markdown.parser.swagger import parse_document

        doc = parse_document({
            "swagger": "2.0",
            "info": {"title": "T"},
            "paths": {
                "/v{version}/empty": {"parameters": []},
                "/v{version}/things": {"get": {"operationId": "Things_List", "tags": ["Things"], "responses": {"200": {}}}},
            },
        })
        assert list(MarkdownGenerator().generate(doc)) == ["things.md", "typedefs.md"]

    def test_emit_writes_files(self, tmp_path):
        output = tmp_path / "docs" / "api"
        written = MarkdownGenerator().emit(FIXTURES / "widgets.json", output)
        assert sorted(p.name for p in written) == ["health.md", "orders.md", "typedefs.md", "widgets.md"]
        assert all(p.parent == output.resolve() for p in written)
        assert (output / "orders.md").read_text(encoding="utf-8").startswith("## Orders\n\nWidget orders.\n")

    def test_emit_writes_nothing_on_operation_error(self, tmp_path):
        raw = json.loads((FIXTURES / "widgets.json").read_text(encoding="utf-8"))
        del raw["paths"]["/v{version}/orders"]["get"]["responses"]
        doc_path = tmp_path / "broken.json"
        doc_path.write_text(json.dumps(raw), encoding="utf-8")
        output = tmp_path / "out"

        with pytest.raises(OperationError, match="Orders_List"):
            MarkdownGenerator().emit(doc_path, output)
        assert not output.exists()
