"""
odata_query.expressions.filter - $filter expression builder
============================================================

Builds OData v4 boolean predicates as finished text fragments.

A Filter is an opaque rendered string, not a parse tree: combining two
filters concatenates their text with the operator and never adds
parentheses. Grouping is decided by the caller through nesting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from odata_query.core.encoding import encode_value, join_csv
from odata_query.core.operators import FilterOperator, OperatorLike, resolve_operator


@dataclass(frozen=True)
class Filter:
    """
    Immutable OData $filter fragment.

    Build instances with the classmethods below rather than directly.

    Attributes
    ----------
    expression : str
        The rendered predicate text

    Examples
    --------
    >>> f = Filter.and_(Filter.eq("Name", "Milk"), Filter.lt("Price", 2.55))
    >>> str(f)
    "Name eq 'Milk' and Price lt 2.55"
    >>> str(Filter.eq("Name", "Milk") | Filter.eq("Name", "Cheese"))
    "Name eq 'Milk' or Name eq 'Cheese'"
    """
    expression: str

    def __str__(self) -> str:
        return self.expression

    def __and__(self, other: "Filter") -> "Filter":
        return Filter.and_(self, other)

    def __or__(self, other: "Filter") -> "Filter":
        return Filter.or_(self, other)

    # ---------------- comparisons ----------------

    @classmethod
    def _compare(cls, field: str, op: str, value: Any) -> "Filter":
        return cls(f"{field} {op} {encode_value(value)}")

    @classmethod
    def eq(cls, field: str, value: Any) -> "Filter":
        """Equality, e.g. ``Name eq 'Milk'``."""
        return cls._compare(field, "eq", value)

    @classmethod
    def ne(cls, field: str, value: Any) -> "Filter":
        """Non-equality, e.g. ``Name ne 'Milk'``."""
        return cls._compare(field, "ne", value)

    @classmethod
    def gt(cls, field: str, value: Any) -> "Filter":
        """Greater than, e.g. ``Price gt 2.55``."""
        return cls._compare(field, "gt", value)

    @classmethod
    def lt(cls, field: str, value: Any) -> "Filter":
        """Less than, e.g. ``Price lt 2.55``."""
        return cls._compare(field, "lt", value)

    @classmethod
    def ge(cls, field: str, value: Any) -> "Filter":
        """Greater than or equal."""
        return cls._compare(field, "ge", value)

    @classmethod
    def le(cls, field: str, value: Any) -> "Filter":
        """Less than or equal."""
        return cls._compare(field, "le", value)

    # ---------------- logical ----------------

    @classmethod
    def and_(cls, left: "Filter", right: "Filter") -> "Filter":
        """Join two filters with ``and``. No parentheses are added."""
        return cls(f"{left.expression} and {right.expression}")

    @classmethod
    def or_(cls, left: "Filter", right: "Filter") -> "Filter":
        """Join two filters with ``or``. No parentheses are added."""
        return cls(f"{left.expression} or {right.expression}")

    @classmethod
    def combine(
        cls,
        filters: Iterable["Filter"],
        operator: OperatorLike = FilterOperator.AND,
    ) -> "Filter":
        """
        Join any number of filters with the same operator.

        Parameters
        ----------
        filters : iterable of Filter
            Fragments in output order
        operator : FilterOperator or str
            ``and`` (default) or ``or``

        Returns
        -------
        Filter
            The joined fragment; empty when ``filters`` is empty

        Examples
        --------
        >>> str(Filter.combine([Filter.eq("A", 1), Filter.eq("B", 2)], "or"))
        'A eq 1 or B eq 2'
        """
        sep = f" {resolve_operator(operator).value} "
        return cls(sep.join(f.expression for f in filters))

    # ---------------- membership ----------------

    @classmethod
    def in_list(cls, field: str, values: Iterable[Any]) -> "Filter":
        """
        Match a field against a literal list.

        Examples
        --------
        >>> str(Filter.in_list("Name", ["Milk", "Cheese"]))
        "Name in ('Milk','Cheese')"
        """
        return cls(f"{field} in ({join_csv(encode_value(v) for v in values)})")

    @classmethod
    def in_collection(cls, field: str, collection: str) -> "Filter":
        """
        Match a field against a named collection or sub-expression.

        The collection reference is emitted verbatim, without quoting.

        Examples
        --------
        >>> str(Filter.in_collection("Name", "RelevantProductNames"))
        'Name in RelevantProductNames'
        """
        return cls(f"{field} in {collection}")

    # ---------------- lambda operators ----------------

    @classmethod
    def any(cls, collection: str, variable: str, condition: "Filter") -> "Filter":
        """
        Lambda ``any`` over a collection property.

        Field references inside ``condition`` must already carry the
        lambda variable prefix, e.g. ``item/Type``.

        Examples
        --------
        >>> str(Filter.any("Products", "item", Filter.eq("item/Type", "Active")))
        "Products/any(item:item/Type eq 'Active')"
        """
        return cls(f"{collection}/any({variable}:{condition.expression})")

    @classmethod
    def all(cls, collection: str, variable: str, condition: "Filter") -> "Filter":
        """Lambda ``all`` over a collection property. See :meth:`any`."""
        return cls(f"{collection}/all({variable}:{condition.expression})")

    # ---------------- bulk equality ----------------

    @classmethod
    def eq_list(
        cls,
        field: str,
        values: Iterable[Any],
        operator: OperatorLike = FilterOperator.OR,
    ) -> "Filter":
        """
        Repeat an equality check on one field for every value.

        Examples
        --------
        >>> str(Filter.eq_list("Status", ["OPEN", "HOLD"]))
        "Status eq 'OPEN' or Status eq 'HOLD'"
        """
        return cls.combine((cls.eq(field, v) for v in values), operator)

    @classmethod
    def eq_map(
        cls,
        values: Mapping[str, Any],
        operator: OperatorLike = FilterOperator.AND,
    ) -> "Filter":
        """
        Equality check per field of a mapping, in mapping order.

        Examples
        --------
        >>> str(Filter.eq_map({"Name": "Milk", "Price": 2.55}))
        "Name eq 'Milk' and Price eq 2.55"
        """
        return cls.combine((cls.eq(k, v) for k, v in values.items()), operator)

    # ---------------- functions ----------------

    @classmethod
    def contains(cls, field: str, value: Any) -> "Filter":
        """``contains(field,value)``, e.g. ``contains(Name,'ilk')``."""
        return cls(f"contains({field},{encode_value(value)})")
