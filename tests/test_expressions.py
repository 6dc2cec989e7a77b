"""
Tests for odata_query.expressions module.
"""

import dataclasses

import pytest

from odata_query.core.operators import FilterOperator
from odata_query.expressions.filter import Filter
from odata_query.expressions.order_by import OrderBy


class TestComparisons:
    """Tests for the binary comparison constructors."""

    @pytest.mark.parametrize(
        "method,op",
        [
            (Filter.eq, "eq"),
            (Filter.ne, "ne"),
            (Filter.gt, "gt"),
            (Filter.lt, "lt"),
            (Filter.ge, "ge"),
            (Filter.le, "le"),
        ],
    )
    def test_operator_and_encoding(self, method, op):
        assert str(method("Name", "Milk")) == f"Name {op} 'Milk'"
        assert str(method("Price", 2.55)) == f"Price {op} 2.55"
        assert str(method("Deleted", None)) == f"Deleted {op} null"

    def test_eq_string(self):
        assert str(Filter.eq("Name", "Milk")) == "Name eq 'Milk'"

    def test_ne_string(self):
        assert str(Filter.ne("Name", "Bread")) == "Name ne 'Bread'"

    def test_numbers(self):
        assert str(Filter.gt("Price", 10)) == "Price gt 10"
        assert str(Filter.lt("Price", 5.5)) == "Price lt 5.5"
        assert str(Filter.ge("Rating", 4)) == "Rating ge 4"
        assert str(Filter.le("Rating", 2.3)) == "Rating le 2.3"

    def test_boolean(self):
        assert str(Filter.eq("IsActive", True)) == "IsActive eq true"

    def test_quote_escaping(self):
        assert str(Filter.eq("Name", "O'Reilly")) == "Name eq 'O''Reilly'"

    def test_field_passes_through(self):
        # no validation of field names
        assert str(Filter.eq("Bad Field!", 1)) == "Bad Field! eq 1"


class TestLogical:
    """Tests for and_/or_/combine."""

    def test_and(self, milk_filter):
        assert str(milk_filter) == "Name eq 'Milk' and Price lt 2.55"

    def test_or(self):
        f = Filter.or_(Filter.gt("Rating", 4), Filter.lt("Price", 3.5))
        assert str(f) == "Rating gt 4 or Price lt 3.5"

    def test_no_parentheses_added(self):
        inner = Filter.or_(Filter.eq("A", 1), Filter.eq("B", 2))
        f = Filter.and_(inner, Filter.eq("C", 3))
        assert str(f) == "A eq 1 or B eq 2 and C eq 3"

    def test_operators_match_classmethods(self):
        a, b = Filter.eq("A", 1), Filter.eq("B", 2)
        assert (a & b) == Filter.and_(a, b)
        assert (a | b) == Filter.or_(a, b)

    def test_operands_are_not_mutated(self):
        a, b = Filter.eq("A", 1), Filter.eq("B", 2)
        Filter.and_(a, b)
        assert str(a) == "A eq 1"
        assert str(b) == "B eq 2"

    def test_combine(self):
        filters = [Filter.eq("A", 1), Filter.eq("B", 2), Filter.eq("C", 3)]
        assert str(Filter.combine(filters)) == "A eq 1 and B eq 2 and C eq 3"
        assert str(Filter.combine(filters, FilterOperator.OR)) == "A eq 1 or B eq 2 or C eq 3"
        assert str(Filter.combine(filters, "or")) == "A eq 1 or B eq 2 or C eq 3"

    def test_combine_single_and_empty(self):
        assert str(Filter.combine([Filter.eq("A", 1)])) == "A eq 1"
        assert str(Filter.combine([])) == ""

    def test_combine_accepts_generator(self):
        f = Filter.combine(Filter.eq("A", v) for v in (1, 2))
        assert str(f) == "A eq 1 and A eq 2"


class TestMembership:
    """Tests for in_list / in_collection."""

    def test_in_list(self):
        assert str(Filter.in_list("Name", ["Milk", "Cheese"])) == "Name in ('Milk','Cheese')"

    def test_in_list_mixed_values(self):
        f = Filter.in_list("Code", [1, "O'Neil", None, True])
        assert str(f) == "Code in (1,'O''Neil',null,true)"

    def test_in_list_empty(self):
        assert str(Filter.in_list("Name", [])) == "Name in ()"

    def test_in_collection_is_verbatim(self):
        f = Filter.in_collection("Name", "RelevantProductNames")
        assert str(f) == "Name in RelevantProductNames"


class TestLambda:
    """Tests for any/all."""

    def test_any(self):
        f = Filter.any("Products", "item", Filter.eq("item/Type", "Active"))
        assert str(f) == "Products/any(item:item/Type eq 'Active')"

    def test_all(self):
        f = Filter.all("Products", "p", Filter.gt("p/Price", 1))
        assert str(f) == "Products/all(p:p/Price gt 1)"

    def test_nested_condition(self):
        cond = Filter.eq("d/Type", "A") & Filter.lt("d/Qty", 5)
        f = Filter.any("Details", "d", cond)
        assert str(f) == "Details/any(d:d/Type eq 'A' and d/Qty lt 5)"


class TestBulkEquality:
    """Tests for eq_list / eq_map."""

    def test_eq_list_defaults_to_or(self):
        f = Filter.eq_list("Status", ["OPEN", "HOLD"])
        assert str(f) == "Status eq 'OPEN' or Status eq 'HOLD'"

    def test_eq_list_and(self):
        f = Filter.eq_list("Tag", [1, 2], FilterOperator.AND)
        assert str(f) == "Tag eq 1 and Tag eq 2"

    def test_eq_list_empty(self):
        assert str(Filter.eq_list("Status", [])) == ""

    def test_eq_map_defaults_to_and(self):
        f = Filter.eq_map({"Name": "Milk", "Price": 2.55})
        assert str(f) == "Name eq 'Milk' and Price eq 2.55"

    def test_eq_map_or(self):
        f = Filter.eq_map({"Name": "Milk", "Brand": None}, "or")
        assert str(f) == "Name eq 'Milk' or Brand eq null"


class TestContains:
    """Tests for contains."""

    def test_contains(self):
        assert str(Filter.contains("Name", "ilk")) == "contains(Name,'ilk')"
        assert str(Filter.contains("Name", "it's")) == "contains(Name,'it''s')"


class TestFilterValue:
    """Value semantics of Filter."""

    def test_frozen(self):
        f = Filter.eq("A", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.expression = "B eq 2"

    def test_equality_by_text(self):
        assert Filter.eq("A", 1) == Filter("A eq 1")
        assert hash(Filter.eq("A", 1)) == hash(Filter("A eq 1"))


class TestOrderBy:
    """Tests for OrderBy."""

    def test_asc(self):
        assert str(OrderBy.asc("Name")) == "Name asc"

    def test_desc(self):
        assert str(OrderBy.desc("Price")) == "Price desc"

    def test_prejoined_fields(self):
        assert str(OrderBy.asc("Name,Price")) == "Name,Price asc"

    def test_combine(self):
        o = OrderBy.combine([OrderBy.asc("Name"), OrderBy.desc("Price")])
        assert str(o) == "Name asc,Price desc"

    def test_frozen(self):
        o = OrderBy.asc("Name")
        with pytest.raises(dataclasses.FrozenInstanceError):
            o.expression = "x"
