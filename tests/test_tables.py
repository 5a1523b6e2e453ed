from swagger_markdown.generator.context import RenderContext
from swagger_markdown.generator.tables import (
    body_parameters_table,
    field_type,
    model_table,
    query_parameters_table,
    schema_type_name,
)
from swagger_markdown.parser.base import Parameter, Schema, TypeDefinition

HINT = "&nbsp;|&nbsp;|[See search and pagination for more parameters](#search)"


def _query(name, required=False, type="string", description=None) -> Parameter:
    return Parameter(name=name, location="query", required=required, type=type, description=description)


def _body(ref) -> Parameter:
    return Parameter(name="body", location="body", schema=Schema(ref=ref))


class TestQueryParametersTable:
    def test_empty(self, widgets_context):
        assert query_parameters_table([], widgets_context) == ""

    def test_required_first_stable(self, widgets_context):
        params = [
            _query("page", type="integer", description="Page"),
            _query("id", required=True, description="Id"),
            _query("q", description="Search"),
            _query("kind", required=True),
        ]
        assert query_parameters_table(params, widgets_context).split("\n") == [
            "Parameter | Type | Description",
            "---|---|---",
            "`id`|`string`|Id",
            "`kind`|`string`|",
            "`page (optional)`|`integer`|Page",
            "`q (optional)`|`string`|Search",
            HINT,
        ]

    def test_custom_pagination_hint(self):
        context = RenderContext(pagination_hint="[Paging](#paging)")
        table = query_parameters_table([_query("id", required=True)], context)
        assert table.endswith("&nbsp;|&nbsp;|[Paging](#paging)")


class TestBodyParametersTable:
    def test_widget_fields_sorted(self, widgets_context):
        assert body_parameters_table(_body("#/definitions/Widget"), widgets_context).split("\n") == [
            "Parameter | Type | Description",
            "---|---|---",
            "`name`|`string(64)`|Display name",
            "`color (optional)`|`string`|",
            "`id (optional)`|`integer int64`|Identifier",
            "`owner (optional)`|`User`|Owning user",
        ]

    def test_name_sort_is_case_sensitive(self):
        context = RenderContext(definitions={
            "Thing": TypeDefinition(properties={"b": Schema(type="string"), "B": Schema(type="string"), "a": Schema(type="string")}),
        })
        rows = body_parameters_table(_body("#/definitions/Thing"), context).split("\n")[2:]
        assert [row.split("|")[0] for row in rows] == ["`B (optional)`", "`a (optional)`", "`b (optional)`"]

    def test_unknown_type(self, widgets_context):
        assert body_parameters_table(_body("#/definitions/Gizmo"), widgets_context) == ""

    def test_no_body(self, widgets_context):
        assert body_parameters_table(None, widgets_context) == ""

    def test_primitive_schema(self, widgets_context):
        param = Parameter(name="body", location="body", schema=Schema(type="string"))
        assert body_parameters_table(param, widgets_context) == ""


class TestModelTable:
    def test_declaration_order_and_links(self, widgets_context):
        assert model_table("Widget", widgets_context).split("\n") == [
            "Parameter | Type | Description",
            "---|---|---",
            "`name`|`string(64)`|Display name",
            "`id`|`integer int64`|Identifier",
            "`color`|`string`|",
            "`owner`|[`User`](#user-model)|Owning user",
        ]

    def test_missing_definition(self, widgets_context):
        assert model_table("Gizmo", widgets_context) == ""

    def test_definition_without_properties(self):
        context = RenderContext(definitions={"Empty": TypeDefinition(example={"a": 1})})
        assert model_table("Empty", context) == ""
        assert body_parameters_table(_body("#/definitions/Empty"), context) == ""


class TestHelpers:
    def test_schema_type_name(self):
        assert schema_type_name(Schema(type="string")) == "string"
        assert schema_type_name(Schema(ref="#/definitions/Widget")) == "Widget"
        assert schema_type_name(None) is None

    def test_field_type_qualifiers(self):
        assert field_type(Schema(type="string", max_length=10, format="email")) == "string(10) email"
        assert field_type(Schema(type="boolean")) == "boolean"
