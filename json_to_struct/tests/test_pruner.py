#!/usr/bin/env python3

import sys

import pytest

from json_to_struct.pipeline.analyzer import (
    ANY,
    FLOAT,
    INT,
    STRING,
    FieldDef,
    SliceType,
    StructType,
    prune,
)
from json_to_struct.pipeline.errors import InvalidSpecError, NestingTooDeepError, TypeMismatchError, UnknownFieldError


@pytest.fixture
def struct_ir():
    return StructType(
        {
            "a": FieldDef(INT),
            "b": FieldDef(STRING, optional=True),
            "items": FieldDef(
                SliceType(
                    StructType(
                        {
                            "sku": FieldDef(STRING),
                            "price": FieldDef(FLOAT),
                        }
                    )
                )
            ),
            "meta": FieldDef(StructType({"x": FieldDef(INT), "y": FieldDef(INT)})),
        }
    )


class TestPrune:
    """Test cases for applying selection specs"""

    def test_drop_unselected_fields(self):
        ir = StructType({"a": FieldDef(INT), "b": FieldDef(STRING, optional=True)})

        assert prune(ir, {"of": {"a": True}}) == StructType({"a": FieldDef(INT)})

    def test_false_and_none_drop(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"a": True, "b": False, "meta": None}})

        assert list(pruned.fields) == ["a"]

    def test_unselected_field_may_be_unknown_when_false(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"a": True, "missing": False}})

        assert list(pruned.fields) == ["a"]

    def test_field_order_matches_ir(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"meta": True, "b": True, "a": True}})

        assert list(pruned.fields) == ["a", "b", "meta"]

    def test_kept_field_is_unchanged(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"b": True}})

        assert pruned.fields["b"] == FieldDef(STRING, optional=True)

    def test_empty_selection_keeps_nothing(self, struct_ir):
        assert prune(struct_ir, {"of": {}}) == StructType({})

    def test_nested_struct_selection(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"meta": {"of": {"y": True}}}})

        assert pruned == StructType({"meta": FieldDef(StructType({"y": FieldDef(INT)}))})

    def test_slice_selection_applies_to_element(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"items": {"type": "slice", "of": {"price": True}}}})

        assert pruned.fields["items"] == FieldDef(SliceType(StructType({"price": FieldDef(FLOAT)})))

    def test_top_level_slice(self):
        ir = SliceType(StructType({"a": FieldDef(INT), "b": FieldDef(INT)}))

        assert prune(ir, {"type": "slice", "of": {"b": True}}) == SliceType(StructType({"b": FieldDef(INT)}))

    def test_force_type_from_dict(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"meta": {"forceType": {"type": "any"}}}})

        assert pruned.fields["meta"] == FieldDef(ANY)

    def test_force_type_from_node(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"a": {"forceType": FLOAT}}})

        assert pruned.fields["a"] == FieldDef(FLOAT)

    def test_force_type_then_select(self, struct_ir):
        forced = {"type": "struct", "fields": {"p": {"of": {"type": "int"}}, "q": {"of": {"type": "bool"}, "optional": True}}}

        pruned = prune(struct_ir, {"of": {"meta": {"forceType": forced, "of": {"p": True}}}})

        assert pruned.fields["meta"] == FieldDef(StructType({"p": FieldDef(INT)}))

    def test_force_optional(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"a": {"forceOptional": True}}})

        assert pruned.fields["a"] == FieldDef(INT, optional=True)

    def test_force_optional_false_keeps_optionality(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"b": {"forceOptional": False}}})

        assert pruned.fields["b"].optional is True

    def test_input_is_not_mutated(self, struct_ir):
        before = struct_ir.to_dict()

        prune(struct_ir, {"of": {"a": {"forceOptional": True}, "meta": {"of": {"x": True}}}})
        prune(struct_ir, {"of": {"b": True}})

        assert struct_ir.to_dict() == before

    def test_pruned_tree_is_read_only(self, struct_ir):
        pruned = prune(struct_ir, {"of": {"meta": True}})

        with pytest.raises(TypeError):
            pruned.fields["meta"].type_ref.fields["z"] = FieldDef(STRING)
        with pytest.raises(TypeError):
            del pruned.fields["meta"]
        assert list(struct_ir.fields["meta"].type_ref.fields) == ["x", "y"]


class TestPruneErrors:
    """Test cases for pruning contract violations"""

    def test_unknown_field(self, struct_ir):
        with pytest.raises(UnknownFieldError):
            prune(struct_ir, {"of": {"nope": True}})

    def test_unknown_nested_field(self, struct_ir):
        with pytest.raises(UnknownFieldError):
            prune(struct_ir, {"of": {"meta": {"of": {"z": True}}}})

    def test_slice_with_struct_spec(self, struct_ir):
        with pytest.raises(TypeMismatchError):
            prune(struct_ir, {"of": {"items": {"of": {"sku": True}}}})

    def test_top_level_slice_with_struct_spec(self):
        with pytest.raises(TypeMismatchError):
            prune(SliceType(StructType({})), {"of": {}})

    def test_struct_with_slice_spec(self, struct_ir):
        with pytest.raises(TypeMismatchError):
            prune(struct_ir, {"type": "slice", "of": {}})

    def test_primitive_with_struct_spec(self, struct_ir):
        with pytest.raises(TypeMismatchError):
            prune(struct_ir, {"of": {"a": {"of": {}}}})

    def test_slice_of_primitives_with_selection(self):
        with pytest.raises(TypeMismatchError):
            prune(SliceType(INT), {"type": "slice", "of": {}})

    @pytest.mark.parametrize("spec", [{}, {"of": None}, {"of": ["a"]}, None, "a"])
    def test_missing_selection(self, struct_ir, spec):
        with pytest.raises(InvalidSpecError):
            prune(struct_ir, spec)

    def test_unknown_spec_type(self, struct_ir):
        with pytest.raises(InvalidSpecError):
            prune(struct_ir, {"type": "map", "of": {}})

    def test_invalid_field_selection(self, struct_ir):
        with pytest.raises(InvalidSpecError):
            prune(struct_ir, {"of": {"a": "yes"}})

    def test_invalid_force_type(self, struct_ir):
        with pytest.raises(InvalidSpecError):
            prune(struct_ir, {"of": {"a": {"forceType": {"type": "union"}}}})

    def test_spec_too_deep(self):
        ir = StructType({})
        spec = {"of": {}}
        for _ in range(2 * sys.getrecursionlimit()):
            ir = StructType({"child": FieldDef(ir)})
            spec = {"of": {"child": spec}}

        with pytest.raises(NestingTooDeepError):
            prune(ir, spec)


if __name__ == "__main__":
    pytest.main([__file__])
