import pytest

from livr import (
    RuleArgumentError,
    RuleDescriptorError,
    RuleNotRegisteredError,
    RuleRegistry,
    get_default_registry,
)
from livr.core.compiler import build_validator, compile_field, compile_rules


class TestBuildValidator:
    def test_builder_receives_args_then_registry(self):
        received = []

        def builder(*args):
            received.append(args)
            return lambda value, record: None

        registry = RuleRegistry({"rule": builder})
        build_validator("rule", (1, "two"), registry)
        assert received == [(1, "two", registry)]

    def test_unknown_rule(self):
        with pytest.raises(RuleNotRegisteredError):
            build_validator("is_positive_unregistered", (), RuleRegistry())

    def test_wrong_arity_becomes_argument_error(self):
        with pytest.raises(RuleArgumentError) as exc_info:
            build_validator("min_length", (), get_default_registry(), field="name")
        assert exc_info.value.name == "min_length"
        assert exc_info.value.field == "name"

    def test_bad_argument_value_becomes_argument_error(self):
        with pytest.raises(RuleArgumentError):
            build_validator("max_length", ("ten",), get_default_registry())

    def test_invalid_regex_becomes_argument_error(self):
        with pytest.raises(RuleArgumentError):
            build_validator("like", ("[bad",), get_default_registry())

    def test_unsafe_regex_becomes_argument_error(self):
        with pytest.raises(RuleArgumentError) as exc_info:
            build_validator("like", ("(a+)+",), get_default_registry())
        assert "unsafe" in exc_info.value.reason

    def test_builder_must_return_callable(self):
        registry = RuleRegistry({"broken": lambda registry: "not a function"})
        with pytest.raises(RuleArgumentError):
            build_validator("broken", (), registry)


class TestCompileRules:
    def test_one_pipeline_per_field_in_declared_order(self):
        pipelines = compile_rules(
            {"b": "required", "a": ["required", {"min_length": 2}], "c": []},
            get_default_registry(),
        )
        assert list(pipelines) == ["b", "a", "c"]
        assert len(pipelines["b"]) == 1
        assert len(pipelines["a"]) == 2
        assert pipelines["c"] == ()

    def test_pipelines_do_not_leak_between_fields(self):
        pipelines = compile_rules(
            {
                "first": ["required", "email", "trim"],
                "second": "required",
                "third": ["required", "trim"],
            },
            get_default_registry(),
        )
        assert [len(p) for p in pipelines.values()] == [3, 1, 2]

    def test_unknown_rule_aborts_compilation(self):
        with pytest.raises(RuleNotRegisteredError) as exc_info:
            compile_rules(
                {"name": "required", "age": "is_positive_unregistered"},
                get_default_registry(),
            )
        assert exc_info.value.name == "is_positive_unregistered"

    def test_rules_must_be_mapping(self):
        with pytest.raises(RuleDescriptorError):
            compile_rules(["required"], get_default_registry())  # type: ignore[arg-type]

    def test_compile_field(self):
        pipeline = compile_field(["required", "integer"], get_default_registry())
        assert len(pipeline) == 2
        assert all(callable(v) for v in pipeline)


class TestLengthArguments:
    @pytest.mark.parametrize(
        "name,args",
        [
            ("min_length", (2.5,)),
            ("max_length", ("3.5",)),
            ("length_equal", (1.1,)),
            ("length_between", (1, 4.5)),
        ],
    )
    def test_fractional_bound_rejected(self, name, args):
        with pytest.raises(RuleArgumentError):
            build_validator(name, args, get_default_registry(), field="a")

    def test_whole_float_and_numeric_string_accepted(self):
        registry = get_default_registry()
        assert callable(build_validator("min_length", (2.0,), registry))
        assert callable(build_validator("max_length", ("3",), registry))
