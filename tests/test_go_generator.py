import pytest

from yapi_struct.codegen import generate_code, generate_from_document, quick_generate
from yapi_struct.codegen.core.errors import (
    DuplicateFieldError,
    IllegalFieldNameError,
    StructureError,
    UnknownTypeError,
)
from yapi_struct.codegen.languages.go import GoGenerator, create_go_generator

from conftest import make_api


def _render(schema, path="/user", **options):
    api = make_api(path=path, req=schema)
    generator = create_go_generator(options)
    return generator.render(api.request_body())


class TestGoGeneratorRender:
    def test_flat_object_with_required_field(self):
        schema = {
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "required": ["id"],
        }
        assert _render(schema) == (
            "// title: Create user\n"
            "// method: POST    path: /user\n"
            "type UserReqDto struct {\n"
            '\tId int `json:"id" binding:"required"`\n'
            "}"
        )

    def test_array_of_objects_becomes_slice_of_structs(self):
        schema = {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {"name": {"type": "string"}},
                    },
                }
            },
        }
        code = _render(schema)
        assert "\tTags []struct {\n" in code
        assert '\t\tName string `json:"name"`\n' in code
        assert '\t} `json:"tags"`\n' in code

    def test_marker_characters_are_stripped_from_names(self):
        schema = {
            "type": "object",
            "properties": {"* nodeNetwork": {"type": "string"}},
        }
        assert '\tNodeNetwork string `json:"nodeNetwork"`\n' in _render(schema)

    def test_array_of_primitives(self):
        schema = {
            "type": "object",
            "properties": {
                "ids": {"type": "array", "items": {"type": "integer"}},
                "grid": {
                    "type": "array",
                    "items": {"type": "array", "items": {"type": "string"}},
                },
            },
        }
        code = _render(schema)
        assert '\tIds []int `json:"ids"`\n' in code
        assert '\tGrid [][]string `json:"grid"`\n' in code

    def test_root_array_of_primitives(self):
        schema = {"type": "array", "items": {"type": "string"}}
        assert _render(schema).endswith("type UserReqDto []string")

    def test_empty_object(self):
        schema = {"type": "object", "properties": {}}
        assert _render(schema).endswith("type UserReqDto struct {\n}")

    def test_nested_object_indentation(self):
        schema = {
            "type": "object",
            "properties": {
                "a": {
                    "type": "object",
                    "properties": {
                        "b": {
                            "type": "object",
                            "properties": {"c": {"type": "boolean"}},
                        }
                    },
                }
            },
        }
        code = _render(schema)
        assert "\t\t\tC bool `json:\"c\"`\n\t\t} `json:\"b\"`\n\t} `json:\"a\"`\n}" in code

    def test_description_becomes_trailing_comment(self):
        schema = {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "user id\nprimary key"},
                "name": {"type": "string", "description": ""},
            },
        }
        code = _render(schema)
        assert '\tId int `json:"id"` // user id primary key\n' in code
        assert '\tName string `json:"name"`\n' in code

    def test_array_comment_comes_from_element(self):
        schema = {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "description": "ignored",
                    "items": {"type": "string", "description": "a tag"},
                }
            },
        }
        assert '\tTags []string `json:"tags"` // a tag\n' in _render(schema)

    def test_fields_keep_document_order(self):
        schema = {
            "type": "object",
            "properties": {"b": {"type": "string"}, "a": {"type": "string"}},
        }
        code = _render(schema)
        assert code.index("\tB ") < code.index("\tA ")

    def test_sort_fields(self):
        schema = {
            "type": "object",
            "properties": {"b": {"type": "string"}, "a": {"type": "string"}},
        }
        code = _render(schema, sort_fields=True)
        assert code.index("\tA ") < code.index("\tB ")

    def test_without_tags_or_comments(self):
        schema = {
            "type": "object",
            "properties": {"id": {"type": "integer", "description": "user id"}},
            "required": ["id"],
        }
        code = _render(schema, generate_json_tags=False, add_comments=False)
        assert "\tId int\n" in code

    def test_custom_primitive_names(self):
        schema = {
            "type": "object",
            "properties": {"price": {"type": "number"}},
        }
        assert "\tPrice float64 " in _render(schema, number_type="float64")

    def test_response_suffix(self):
        api = make_api(path="/user/list", res={"type": "string"})
        code = GoGenerator().render(api.response_body())
        assert "type User/listRespRto string" in code

    def test_body_without_schema_renders_nothing(self):
        api = make_api(req={"type": "object"})
        body = api.request_body()
        body.field = None
        assert GoGenerator().render(body) == ""

    @pytest.mark.parametrize(
        "schema, error",
        [
            ({"type": "object", "properties": {"d": {"type": "date"}}}, UnknownTypeError),
            ({"type": "object", "properties": {"**": {"type": "string"}}}, IllegalFieldNameError),
            (
                {"type": "object", "properties": {"id": {"type": "string"}, "Id": {"type": "string"}}},
                DuplicateFieldError,
            ),
            ({"type": "object", "properties": {"tags": {"type": "array"}}}, StructureError),
        ],
    )
    def test_fatal_schema_problems(self, schema, error):
        with pytest.raises(error):
            _render(schema)


class TestGoGeneratorGenerate:
    def test_package_declaration_comes_first(self):
        api = make_api(req={"type": "object", "properties": {}})
        generator = create_go_generator({"package_name": "dto"})
        code = generator.generate(list(api.bodies()))
        assert code.startswith("package dto\n\n// title: Create user\n")
        assert code.endswith("}\n")

    def test_no_bodies_generate_nothing(self):
        assert GoGenerator().generate([]) == ""

    def test_failed_generation_has_no_partial_code(self):
        good = make_api(path="/a", req={"type": "object", "properties": {}})
        bad = make_api(path="/b", req={"type": "date"})
        bodies = list(good.bodies()) + list(bad.bodies())

        result = generate_code(GoGenerator(), bodies)

        assert not result.success
        assert result.code == ""
        assert isinstance(result.exception, UnknownTypeError)
        assert "date" in result.error_message

    def test_duplicate_declaration_names_warn(self):
        bodies = [
            body
            for _ in range(2)
            for body in make_api(path="/a", req={"type": "string"}).bodies()
        ]
        result = generate_code(GoGenerator(), bodies)
        assert result.success
        assert "Declaration name AReqDto is generated 2 times" in result.warnings

    def test_metadata(self, export_bytes):
        result = generate_from_document(export_bytes)
        assert result.metadata["language"] == "go"
        assert result.metadata["declaration_count"] == 4
        assert result.metadata["api_count"] == 3
        assert result.metadata["request_count"] == 1
        assert result.metadata["response_count"] == 3


class TestGenerateFromDocument:
    def test_matches_expected_output(self, export_bytes, expected_go):
        result = generate_from_document(export_bytes)
        assert result.success, result.error_message
        assert result.warnings == []
        assert result.code == expected_go

    def test_classification_filter(self, export_bytes):
        result = generate_from_document(export_bytes, classification="Order")
        assert result.code.count("type ") == 1
        assert "type Order/infoRespRto struct {" in result.code

    def test_path_filter(self, export_bytes):
        result = generate_from_document(export_bytes, path="/user/list")
        assert result.code.startswith("// title: List users\n")
        assert "type User/listRespRto []struct {" in result.code

    def test_unknown_classification(self, export_bytes):
        result = generate_from_document(export_bytes, classification="Missing")
        assert not result.success
        assert "'User', 'Order'" in result.error_message

    def test_golang_alias(self, export_bytes, expected_go):
        assert generate_from_document(export_bytes, language="golang").code == expected_go


class TestQuickGenerate:
    def test_dict_schema(self):
        code = quick_generate(
            {"type": "object", "properties": {"ok": {"type": "boolean"}}},
            name="/status",
        )
        assert "type StatusReqDto struct {\n" in code
        assert '\tOk bool `json:"ok"`\n' in code

    def test_raises_generation_error(self):
        with pytest.raises(UnknownTypeError):
            quick_generate({"type": "date"})
