"""
odata_query.expressions.order_by - $orderby expression builder
===============================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from odata_query.core.encoding import join_csv


@dataclass(frozen=True)
class OrderBy:
    """
    Immutable OData $orderby fragment.

    Examples
    --------
    >>> str(OrderBy.desc("Price"))
    'Price desc'
    >>> str(OrderBy.combine([OrderBy.asc("Name"), OrderBy.desc("Price")]))
    'Name asc,Price desc'
    """
    expression: str

    def __str__(self) -> str:
        return self.expression

    @classmethod
    def asc(cls, field: str) -> "OrderBy":
        """Sort by a field in ascending order (e.g. ``Price asc``)."""
        return cls(f"{field} asc")

    @classmethod
    def desc(cls, field: str) -> "OrderBy":
        """Sort by a field in descending order (e.g. ``Price desc``)."""
        return cls(f"{field} desc")

    @classmethod
    def combine(cls, order_bys: Iterable["OrderBy"]) -> "OrderBy":
        """Join several sort keys with a comma, highest priority first."""
        return cls(join_csv(o.expression for o in order_bys))
