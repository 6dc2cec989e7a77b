"""
odata_query.core.operators - Logical join operators
====================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union


class FilterOperator(str, Enum):
    """Logical operator used to join several filter fragments."""

    AND = "and"
    OR = "or"

    def __str__(self) -> str:
        return self.value


OperatorLike = Union[FilterOperator, Literal["and", "or"]]


def resolve_operator(operator: OperatorLike) -> FilterOperator:
    """Accept either a FilterOperator or its string value ("and"/"or")."""
    if isinstance(operator, FilterOperator):
        return operator
    return FilterOperator(operator)
