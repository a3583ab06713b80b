import pytest

from livr import RuleDescriptorError
from livr.core.parser import parse_field_rules, parse_rule


class TestParseRule:
    def test_bare_name(self):
        assert parse_rule("required") == ("required", ())

    def test_scalar_argument_is_wrapped(self):
        assert parse_rule({"min_length": 4}) == ("min_length", (4,))

    def test_list_argument_kept(self):
        assert parse_rule({"min_length": [4]}) == ("min_length", (4,))
        assert parse_rule({"length_between": [1, 9]}) == ("length_between", (1, 9))

    def test_nested_list_argument_kept_as_single_arg(self):
        assert parse_rule({"one_of": [["a", "b"]]}) == ("one_of", (["a", "b"],))

    def test_mapping_argument_is_wrapped(self):
        nested = {"city": "required"}
        assert parse_rule({"nested_object": nested}) == ("nested_object", (nested,))

    def test_multi_key_descriptor_rejected(self):
        with pytest.raises(RuleDescriptorError):
            parse_rule({"min_length": 1, "max_length": 5})

    def test_empty_descriptor_rejected(self):
        with pytest.raises(RuleDescriptorError):
            parse_rule({})

    def test_non_string_name_rejected(self):
        with pytest.raises(RuleDescriptorError):
            parse_rule(42)
        with pytest.raises(RuleDescriptorError):
            parse_rule({1: "x"})


class TestParseFieldRules:
    def test_single_name_wrapped(self):
        assert parse_field_rules("required") == [("required", ())]

    def test_single_mapping_wrapped(self):
        assert parse_field_rules({"max_length": 3}) == [("max_length", (3,))]

    def test_sequence_order_preserved(self):
        parsed = parse_field_rules(["required", {"min_length": 2}, "email"])
        assert [name for name, _ in parsed] == ["required", "min_length", "email"]

    def test_empty_and_none(self):
        assert parse_field_rules([]) == []
        assert parse_field_rules(None) == []

    def test_unsupported_field_spec(self):
        with pytest.raises(RuleDescriptorError):
            parse_field_rules(3.14)
