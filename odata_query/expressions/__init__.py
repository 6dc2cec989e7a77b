"""
odata_query.expressions - Filter and ordering fragments
========================================================

- Filter: $filter predicate builder
- OrderBy: $orderby sort key builder

"""

from odata_query.expressions.filter import Filter
from odata_query.expressions.order_by import OrderBy

__all__ = [
    "Filter",
    "OrderBy",
]
