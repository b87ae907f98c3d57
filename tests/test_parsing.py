import pytest

from design_studio.errors import ResponseShapeError
from design_studio.parsing import ParsePolicy, parse_json_outcome, parse_json_response


class TestParseJsonResponse:
    def test_valid_json_is_parsed(self):
        assert parse_json_response(' {"a": 1}\n', ParsePolicy.fail(), label="t") == {"a": 1}

    def test_fail_policy_raises_with_raw_details(self):
        with pytest.raises(ResponseShapeError) as excinfo:
            parse_json_response("not json", ParsePolicy.fail(), label="Brand analysis")
        assert excinfo.value.details == "not json"
        assert "Brand analysis" in excinfo.value.message
        assert excinfo.value.status_code == 500

    def test_code_fences_are_not_stripped(self):
        with pytest.raises(ResponseShapeError):
            parse_json_response('```json\n{"a": 1}\n```', ParsePolicy.fail(), label="t")

    def test_fallback_raw(self):
        result = parse_json_response("free text", ParsePolicy.fallback_raw(), label="t")
        assert result == {"rawResponse": "free text"}

    def test_none_text_falls_back_to_empty_raw(self):
        assert parse_json_response(None, ParsePolicy.fallback_raw(), label="t") == {"rawResponse": ""}

    def test_substitute_returns_a_copy(self):
        default = ["#000000"]
        result = parse_json_response("nope", ParsePolicy.substitute(default), label="t")
        assert result == default
        result.append("#FFFFFF")
        assert default == ["#000000"]

    def test_unexpected_type_follows_policy(self):
        policy = ParsePolicy.substitute(["#111111"])
        assert parse_json_response('{"x": 1}', policy, label="t", expect=list) == ["#111111"]
        with pytest.raises(ResponseShapeError):
            parse_json_response("[1, 2]", ParsePolicy.fail(), label="t", expect=dict)

    def test_expected_type_passes(self):
        assert parse_json_response('["#1"]', ParsePolicy.fail(), label="t", expect=list) == ["#1"]

    def test_mixed_item_types_follow_policy(self):
        policy = ParsePolicy.substitute(["#111111"])
        result = parse_json_response('["#000000", 5]', policy, label="t", expect=list, expect_items=str)
        assert result == ["#111111"]


class TestParseJsonOutcome:
    def test_parsed_value_is_flagged(self):
        value, parsed = parse_json_outcome('{"rawResponse": "x"}', ParsePolicy.fallback_raw(), label="t", expect=dict)
        assert value == {"rawResponse": "x"}
        assert parsed is True

    def test_fallback_value_is_flagged(self):
        value, parsed = parse_json_outcome("x", ParsePolicy.fallback_raw(), label="t", expect=dict)
        assert value == {"rawResponse": "x"}
        assert parsed is False
