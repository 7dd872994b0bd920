import pytest

from yapi_struct.codegen.core.errors import GeneratorError, TemplateError
from yapi_struct.codegen.core.templates import comment_lines, create_template_engine
from yapi_struct.codegen.languages.go import GoGenerator

from conftest import make_api


class TestCommentLines:
    def test_prefixes_each_line(self):
        assert comment_lines("a\n\nb") == "// a\n//\n// b"

    def test_no_trailing_whitespace(self):
        assert comment_lines("title: ") == "// title:"
        assert comment_lines("method:     path: ") == "// method:     path:"


class TestTemplateEngine:
    def test_renders_from_directory(self, tmp_path):
        (tmp_path / "field.j2").write_text("{{ name | upper_first }} {{ doc | comment }}")
        engine = create_template_engine(tmp_path)

        assert engine.render_template("field.j2", {"name": "nodeNetwork", "doc": "x"}) == (
            "NodeNetwork // x"
        )

    def test_missing_template(self, tmp_path):
        with pytest.raises(TemplateError, match="missing.j2"):
            create_template_engine(tmp_path).render_template("missing.j2", {})

    def test_missing_directory(self, tmp_path):
        with pytest.raises(TemplateError, match="Template directory not found"):
            create_template_engine(tmp_path / "nope")

    def test_template_errors_are_generator_errors(self):
        assert issubclass(TemplateError, GeneratorError)


class TestGoTemplates:
    def test_json_tag(self):
        context = {"key": "id", "required": True, "required_tag": 'binding:"required"'}
        assert GoGenerator().render_template("json_tag.go.j2", context) == (
            '`json:"id" binding:"required"`'
        )

    def test_package(self):
        assert GoGenerator().render_template("package.go.j2", {"package_name": "dto"}) == (
            "package dto"
        )

    def test_empty_header_values_leave_no_trailing_space(self):
        api = make_api(path="", method="", title="", req={"type": "string"})
        code = GoGenerator().render(api.request_body())

        assert code == "// title:\n// method:     path:\ntype ReqDto string"
        assert not any(line.endswith(" ") for line in code.split("\n"))
