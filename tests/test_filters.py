"""Tests for filter extraction and the reverse conversion."""

from __future__ import annotations

from restquery import Filter, Operator
from restquery._filters import base_field, extract, partition, reserved_keys, to_rest
from tests.conftest import SAMPLE_LIST_PARAMS


class TestExtract:
    def test_bare_value(self) -> None:
        assert extract({"status": "published"}) == [
            {"field": "status", "op": "==", "value": "published"}
        ]

    def test_operator(self) -> None:
        assert extract({"amount": {"gte": "100"}}) == [
            {"field": "amount", "op": ">=", "value": "100"}
        ]

    def test_multiple_operators_on_same_field(self) -> None:
        filters = extract({"amount": {"gte": "10", "lte": "100"}})
        assert len(filters) == 2
        assert {"field": "amount", "op": ">=", "value": "10"} in filters
        assert {"field": "amount", "op": "<=", "value": "100"} in filters

    def test_multiple_fields(self) -> None:
        filters = extract({"status": "active", "priority": {"gt": "5"}})
        assert len(filters) == 2
        assert {"field": "status", "op": "==", "value": "active"} in filters
        assert {"field": "priority", "op": ">", "value": "5"} in filters

    def test_list_value(self) -> None:
        assert extract({"status": {"in": ["draft", "published"]}}) == [
            {"field": "status", "op": "in", "value": ["draft", "published"]}
        ]

    def test_bracket_list_is_unwrapped(self) -> None:
        assert extract(SAMPLE_LIST_PARAMS) == [
            {"field": "status", "op": "in", "value": ["draft", "published"]}
        ]

    def test_nested_mapping_with_several_keys_passes_through(self) -> None:
        value = {"foo": "bar", "baz": "qux"}
        assert extract({"meta": {"in": value}}) == [
            {"field": "meta", "op": "in", "value": value}
        ]

    def test_single_named_key_is_not_unwrapped(self) -> None:
        value = {"0": ["a", "b"]}
        assert extract({"tags": {"in": value}}) == [
            {"field": "tags", "op": "in", "value": value}
        ]

    def test_empty_key_without_list_is_not_unwrapped(self) -> None:
        value = {"": "draft"}
        assert extract({"status": {"in": value}}) == [
            {"field": "status", "op": "in", "value": value}
        ]

    def test_bare_list_is_equality(self) -> None:
        assert extract({"tags": ["a", "b"]}) == [
            {"field": "tags", "op": "==", "value": ["a", "b"]}
        ]

    def test_excludes_pagination_keys(self) -> None:
        params = {
            "status": "active",
            "limit": "10",
            "after": "abc",
            "before": "xyz",
            "page": "2",
            "page_size": "25",
            "offset": "50",
        }
        filters = extract(params)
        assert [f["field"] for f in filters] == ["status"]

    def test_excludes_sort_key(self) -> None:
        filters = extract({"status": "active", "sort": "-created_at"})
        assert [f["field"] for f in filters] == ["status"]

    def test_unknown_operator_passes_through(self) -> None:
        assert extract({"amount": {"bad_op": "100"}}) == [
            {"field": "amount", "op": "bad_op", "value": "100"}
        ]

    def test_search_operator(self) -> None:
        assert extract({"name": {"search": "john"}}) == [
            {"field": "name", "op": "=~", "value": "john"}
        ]

    def test_empty(self) -> None:
        assert extract({}) == []


class TestPartition:
    def test_returns_filters_and_extras(self) -> None:
        filters, extras = partition({"name": "Fido", "custom": "value"}, frozenset({"name"}))
        assert filters == [{"field": "name", "op": "==", "value": "Fido"}]
        assert extras == {"custom": "value"}

    def test_none_allows_every_field(self) -> None:
        filters, extras = partition({"name": "Fido", "age": "5"}, None)
        assert len(filters) == 2
        assert extras == {}

    def test_operators_on_filterable_field(self) -> None:
        filters, extras = partition(
            {"amount": {"gte": "10", "lte": "100"}}, frozenset({"amount"})
        )
        assert len(filters) == 2
        assert extras == {}

    def test_bracketed_key_uses_base_field(self) -> None:
        filters, extras = partition({"amount[gte]": "10"}, frozenset({"amount"}))
        assert filters == [{"field": "amount[gte]", "op": "==", "value": "10"}]
        assert extras == {}

    def test_extras_keep_their_shape(self) -> None:
        params = {"name": "Fido", "internal_code": "ABC123", "opts": {"x": "1"}}
        _, extras = partition(params, frozenset({"name"}))
        assert extras == {"internal_code": "ABC123", "opts": {"x": "1"}}

    def test_reserved_keys_in_neither(self) -> None:
        params = {"name": "Fido", "sort": "-created_at", "limit": "10", "page": "2"}
        filters, extras = partition(params, frozenset({"name", "sort", "limit"}))
        assert filters == [{"field": "name", "op": "==", "value": "Fido"}]
        assert extras == {}

    def test_empty_filterable_set(self) -> None:
        filters, extras = partition({"name": "Fido", "age": "5"}, frozenset())
        assert filters == []
        assert extras == {"name": "Fido", "age": "5"}


class TestBaseField:
    def test_plain(self) -> None:
        assert base_field("status") == "status"

    def test_bracketed(self) -> None:
        assert base_field("amount[gte]") == "amount"
        assert base_field("status[in][]") == "status"


class TestToRest:
    def test_none(self) -> None:
        assert to_rest(None) == {}

    def test_empty(self) -> None:
        assert to_rest([]) == {}

    def test_equality_is_bare(self) -> None:
        assert to_rest([Filter(field="status", op="==", value="active")]) == {"status": "active"}

    def test_operator_is_bracketed(self) -> None:
        assert to_rest([Filter(field="amount", op=">=", value=100)]) == {"amount[gte]": 100}

    def test_multiple_filters(self) -> None:
        result = to_rest(
            [
                Filter(field="status", value="active"),
                Filter(field="amount", op=Operator.GTE, value=100),
            ]
        )
        assert result == {"status": "active", "amount[gte]": 100}

    def test_list_value(self) -> None:
        result = to_rest([Filter(field="status", op="in", value=["draft", "published"])])
        assert result == {"status[in]": ["draft", "published"]}

    def test_unknown_operator(self) -> None:
        assert to_rest([Filter(field="x", op="between", value="1")]) == {"x[between]": "1"}

    def test_accepts_mappings(self) -> None:
        records = extract({"deleted_at": {"empty": "true"}, "name": {"ilike": "%fi%"}})
        assert to_rest(records) == {"deleted_at[empty]": "true", "name[ilike]": "%fi%"}


class TestReservedKeys:
    def test_union_of_pagination_and_sort(self) -> None:
        assert reserved_keys() == {
            "limit", "after", "before", "page", "page_size", "offset", "sort",
        }
