"""
odata_query.core - Encoding primitives
=======================================

Shared building blocks for the expression and query builders:

- encode_value: the single point of OData value formatting
- escape_odata_literal: single-quote doubling
- join_csv: comma joining for $select / $expand
- percent_encode: URI-component encoding
- FilterOperator: logical join operators

"""

from odata_query.core.encoding import (
    encode_value,
    escape_odata_literal,
    join_csv,
    percent_encode,
)
from odata_query.core.operators import FilterOperator, resolve_operator

__all__ = [
    "encode_value",
    "escape_odata_literal",
    "join_csv",
    "percent_encode",
    "FilterOperator",
    "resolve_operator",
]
