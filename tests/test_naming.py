import pytest

from yapi_struct.codegen.core.errors import IllegalFieldNameError
from yapi_struct.codegen.core.naming import (
    declaration_name,
    find_identifier,
    sanitize_identifier,
    upper_first,
)


class TestSanitizeIdentifier:
    def test_strips_leading_marker(self):
        assert sanitize_identifier("* nodeNetwork") == "nodeNetwork"

    def test_strips_surrounding_whitespace_and_punctuation(self):
        assert sanitize_identifier("  (user_id)  ") == "user_id"

    def test_keeps_first_run_only(self):
        assert sanitize_identifier("page size") == "page"

    def test_digits_and_underscore_are_word_characters(self):
        assert sanitize_identifier("_v2") == "_v2"

    @pytest.mark.parametrize("raw", ["", "*", "  - ", "用户"])
    def test_no_identifier_is_fatal(self, raw):
        with pytest.raises(IllegalFieldNameError) as exc_info:
            sanitize_identifier(raw)
        assert exc_info.value.raw_name == raw

    @pytest.mark.parametrize("raw", ["* nodeNetwork", "id", " a-b ", "x.y"])
    def test_idempotent(self, raw):
        once = sanitize_identifier(raw)
        assert sanitize_identifier(once) == once

    def test_find_identifier_returns_none(self):
        assert find_identifier("**") is None


class TestUpperFirst:
    def test_only_first_letter_changes(self):
        assert upper_first("nodeNetwork") == "NodeNetwork"
        assert upper_first("iD") == "ID"

    def test_empty(self):
        assert upper_first("") == ""


class TestDeclarationName:
    def test_strips_leading_separator(self):
        assert declaration_name("/user", "ReqDto") == "UserReqDto"

    def test_separator_stripped_exactly_once(self):
        assert declaration_name("//user", "RespRto") == "/userRespRto"

    def test_path_without_separator(self):
        assert declaration_name("user", "ReqDto") == "UserReqDto"

    def test_nested_path_keeps_inner_separators(self):
        assert declaration_name("/user/list", "RespRto") == "User/listRespRto"

    def test_deterministic(self):
        assert declaration_name("/a", "X") == declaration_name("/a", "X")
