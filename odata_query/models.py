"""
odata_query.models - Pydantic models for structured query input
================================================================

JSON-shaped request models that turn plain data (e.g. a decoded request
body or a file) into Filter / OrderBy / ODataQuery values.

Validation is about shape only: required keys per operator and
non-negative paging. Field names are never checked against a schema.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from odata_query.core.operators import FilterOperator
from odata_query.expressions.filter import Filter
from odata_query.expressions.order_by import OrderBy
from odata_query.query.builder import ODataQuery

logger = logging.getLogger("odata_query.models")


FilterOp = Literal[
    "eq", "ne", "gt", "lt", "ge", "le",
    "in", "in_collection", "contains",
    "any", "all",
    "eq_list", "eq_map",
    "and", "or",
]

_COMPARISONS = {
    "eq": Filter.eq,
    "ne": Filter.ne,
    "gt": Filter.gt,
    "lt": Filter.lt,
    "ge": Filter.ge,
    "le": Filter.le,
    "contains": Filter.contains,
}

# keys each op needs besides "op"
_REQUIRED: Dict[str, tuple] = {
    **{op: ("field",) for op in _COMPARISONS},
    "in": ("field", "values"),
    "in_collection": ("field", "collection"),
    "any": ("collection", "variable", "condition"),
    "all": ("collection", "variable", "condition"),
    "eq_list": ("field", "values"),
    "eq_map": ("mapping",),
    "and": ("filters",),
    "or": ("filters",),
}


class FilterSpec(BaseModel):
    """
    Declarative $filter node.

    Leaf nodes carry ``field`` and ``value``/``values``; ``and``/``or``
    nodes carry nested ``filters``; ``any``/``all`` carry ``collection``,
    ``variable`` and a nested ``condition``.
    """

    op: FilterOp = Field(
        ...,
        description="Filter operator",
        json_schema_extra={"example": "eq"},
    )
    field: Optional[str] = Field(
        default=None,
        description="Property path, e.g. Name or item/Type",
        json_schema_extra={"example": "Name"},
    )
    value: Any = Field(
        default=None,
        description="Literal for comparisons and contains; null renders as null",
        json_schema_extra={"example": "Milk"},
    )
    values: Optional[List[Any]] = Field(
        default=None,
        description="Literals for in / eq_list",
        json_schema_extra={"example": ["Milk", "Cheese"]},
    )
    collection: Optional[str] = Field(
        default=None,
        description="Collection reference for in_collection, or collection path for any/all",
        json_schema_extra={"example": "Products"},
    )
    variable: Optional[str] = Field(
        default=None,
        description="Lambda variable for any/all",
        json_schema_extra={"example": "item"},
    )
    condition: Optional["FilterSpec"] = Field(
        default=None,
        description="Lambda body for any/all",
    )
    filters: Optional[List["FilterSpec"]] = Field(
        default=None,
        description="Operands for and / or",
    )
    mapping: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Field to literal mapping for eq_map",
        json_schema_extra={"example": {"Name": "Milk", "Price": 2.55}},
    )
    operator: Optional[FilterOperator] = Field(
        default=None,
        description="Join operator for eq_list (default or) and eq_map (default and)",
    )

    @model_validator(mode="after")
    def check_required(self) -> "FilterSpec":
        missing = [k for k in _REQUIRED[self.op] if getattr(self, k) is None]
        if missing:
            raise ValueError(f"op '{self.op}' requires: {', '.join(missing)}")
        if self.op in ("and", "or") and not self.filters:
            raise ValueError(f"op '{self.op}' requires at least one filter")
        return self

    def to_filter(self) -> Filter:
        """Build the Filter this node describes."""
        op = self.op
        if op in _COMPARISONS:
            return _COMPARISONS[op](self.field, self.value)
        if op == "in":
            return Filter.in_list(self.field, self.values)
        if op == "in_collection":
            return Filter.in_collection(self.field, self.collection)
        if op == "any":
            return Filter.any(self.collection, self.variable, self.condition.to_filter())
        if op == "all":
            return Filter.all(self.collection, self.variable, self.condition.to_filter())
        if op == "eq_list":
            return Filter.eq_list(self.field, self.values, self.operator or FilterOperator.OR)
        if op == "eq_map":
            return Filter.eq_map(self.mapping, self.operator or FilterOperator.AND)
        return Filter.combine([f.to_filter() for f in self.filters], op)


class OrderBySpec(BaseModel):
    """One $orderby sort key."""

    field: str = Field(
        ...,
        description="Property to sort by",
        json_schema_extra={"example": "Price"},
    )
    direction: Literal["asc", "desc"] = Field(
        default="asc",
        description="Sort direction",
        json_schema_extra={"example": "desc"},
    )

    def to_order_by(self) -> OrderBy:
        if self.direction == "desc":
            return OrderBy.desc(self.field)
        return OrderBy.asc(self.field)


class QueryRequest(BaseModel):
    """
    Structured OData query request.

    Examples
    --------
    >>> req = QueryRequest.model_validate({
    ...     "filter": {"op": "eq", "field": "Name", "value": "Milk"},
    ...     "order_by": [{"field": "Price", "direction": "desc"}],
    ...     "top": 10,
    ... })
    >>> str(req.to_query())
    "$filter=Name eq 'Milk'&$orderby=Price desc&$top=10"
    """

    search: Optional[str] = Field(
        default=None,
        description="Free-text $search",
        json_schema_extra={"example": "Milk"},
    )
    filter: Optional[FilterSpec] = Field(
        default=None,
        description="Declarative $filter tree",
    )
    order_by: List[OrderBySpec] = Field(
        default_factory=list,
        description="Sort keys for $orderby, highest priority first",
    )
    select: Optional[List[str]] = Field(
        default=None,
        description="Fields for $select",
        json_schema_extra={"example": ["Name", "Price"]},
    )
    expand: Optional[List[str]] = Field(
        default=None,
        description="Navigation properties for $expand",
        json_schema_extra={"example": ["Category"]},
    )
    top: Optional[int] = Field(
        default=None,
        ge=0,
        description="$top",
        json_schema_extra={"example": 10},
    )
    skip: Optional[int] = Field(
        default=None,
        ge=0,
        description="$skip",
        json_schema_extra={"example": 0},
    )
    count: Optional[bool] = Field(
        default=None,
        description="$count",
        json_schema_extra={"example": True},
    )

    @classmethod
    def from_json(cls, text: str) -> "QueryRequest":
        """Parse and validate a JSON document."""
        return cls.model_validate_json(text)

    def to_query(self) -> ODataQuery:
        """Build the ODataQuery this request describes."""
        order_by: Optional[OrderBy] = None
        if len(self.order_by) == 1:
            order_by = self.order_by[0].to_order_by()
        elif self.order_by:
            order_by = OrderBy.combine(o.to_order_by() for o in self.order_by)

        query = ODataQuery(
            search=self.search,
            filter=self.filter.to_filter() if self.filter is not None else None,
            order_by=order_by,
            select=self.select,
            expand=self.expand,
            top=self.top,
            skip=self.skip,
            count=self.count,
        )
        logger.debug(f"to_query: options={list(query.to_map())}")
        return query


FilterSpec.model_rebuild()
