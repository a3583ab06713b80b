import pytest

from livr import RuleNotRegisteredError, Validator, ValidatorOptions, passed
from livr.utils.logger import SilentLogger


def make_validator(rules) -> Validator:
    return Validator(rules, ValidatorOptions(), logger=SilentLogger())


class TestNestedObject:
    RULES = {
        "address": [
            "required",
            {"nested_object": {"city": "required", "zip": "positive_integer"}},
        ]
    }

    def test_success_drops_undeclared_nested_keys(self):
        validator = make_validator(self.RULES)
        result = validator.validate({"address": {"city": "Kyiv", "zip": "01001", "x": 1}})
        assert result == {"address": {"city": "Kyiv", "zip": "01001"}}

    def test_nested_error_map(self):
        validator = make_validator(self.RULES)
        assert validator.validate({"address": {"zip": "abc"}}) is False
        assert validator.get_errors() == {
            "address": {"city": "REQUIRED", "zip": "NOT_POSITIVE_INTEGER"}
        }

    def test_non_mapping_value(self):
        validator = make_validator(self.RULES)
        validator.validate({"address": "Main st."})
        assert validator.get_errors() == {"address": "FORMAT_ERROR"}

    def test_unknown_nested_rule_fails_compilation(self):
        validator = make_validator({"a": {"nested_object": {"b": "unknown_rule"}}})
        with pytest.raises(RuleNotRegisteredError):
            validator.prepare()


class TestListOf:
    def test_flat_and_nested_forms(self):
        for rules in (
            {"ids": {"list_of": ["required", "positive_integer"]}},
            {"ids": {"list_of": [["required", "positive_integer"]]}},
        ):
            validator = make_validator(rules)
            assert validator.validate({"ids": [1, 2]}) == {"ids": [1, 2]}
            assert validator.validate({"ids": [1, 0]}) is False
            assert validator.get_errors() == {"ids": [None, "NOT_POSITIVE_INTEGER"]}

    def test_single_rule(self):
        validator = make_validator({"tags": {"list_of": "to_lc"}})
        assert validator.validate({"tags": ["A", "b"]}) == {"tags": ["a", "b"]}

    def test_non_list_value(self):
        validator = make_validator({"ids": {"list_of": "integer"}})
        validator.validate({"ids": "1,2"})
        assert validator.get_errors() == {"ids": "FORMAT_ERROR"}


class TestListOfObjects:
    def test_errors_aligned_with_items(self):
        validator = make_validator(
            {"items": {"list_of_objects": {"sku": "required", "qty": "positive_integer"}}}
        )
        data = {"items": [{"sku": "A", "qty": 1}, {"qty": 2}, "oops"]}
        assert validator.validate(data) is False
        assert validator.get_errors() == {
            "items": [None, {"sku": "REQUIRED"}, "FORMAT_ERROR"]
        }

    def test_success(self):
        validator = make_validator({"items": {"list_of_objects": {"sku": "required"}}})
        result = validator.validate({"items": [{"sku": "A", "extra": 1}]})
        assert result == {"items": [{"sku": "A"}]}


class TestOr:
    RULES = {"contact": {"or": ["email", {"like": "^\\+\\d+$"}]}}

    def test_any_alternative_passes(self):
        validator = make_validator(self.RULES)
        assert validator.validate({"contact": "a@b.com"}) == {"contact": "a@b.com"}
        assert validator.validate({"contact": "+380"}) == {"contact": "+380"}

    def test_last_error_reported(self):
        validator = make_validator(self.RULES)
        assert validator.validate({"contact": "nope"}) is False
        assert validator.get_errors() == {"contact": "WRONG_FORMAT"}

    def test_alternative_replacement_kept(self):
        validator = make_validator({"a": {"or": [["integer"], ["trim", "to_uc"]]}})
        assert validator.validate({"a": " x "}) == {"a": "X"}


class TestMetaRulesUseInstanceRegistry:
    def test_instance_rule_inside_nested_object(self):
        def upper_only(registry):
            def validator(value, record):
                if value != value.upper():
                    return "NOT_UPPER"
                return passed(value)

            return validator

        validator = make_validator({"a": {"nested_object": {"b": "upper_only"}}})
        validator.register_rules({"upper_only": upper_only})
        assert validator.validate({"a": {"b": "OK"}}) == {"a": {"b": "OK"}}
        assert validator.validate({"a": {"b": "no"}}) is False
        assert validator.get_errors() == {"a": {"b": "NOT_UPPER"}}
