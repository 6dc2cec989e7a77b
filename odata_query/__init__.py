"""
OData Query Builder (odata_query)
=================================

Declarative builder for OData v4 query strings. Filter predicates, sort
keys, field selections and paging bounds go in; a query string usable
as the query component of a request URI comes out.

Usage
-----
>>> from odata_query import Filter, OrderBy, ODataQuery
>>>
>>> query = ODataQuery(
...     filter=Filter.and_(Filter.eq("Name", "Milk"), Filter.lt("Price", 2.55)),
...     order_by=OrderBy.desc("Price"),
...     select=["Name", "Price"],
...     top=10,
...     count=True,
... )
>>> str(query)
"$filter=Name eq 'Milk' and Price lt 2.55&$orderby=Price desc&$select=Name,Price&$top=10&$count=true"
>>> url = "https://host/odata/Products?" + query.to_encoded_string()

Subpackages
-----------
- odata_query.core: value encoding and operators
- odata_query.expressions: Filter and OrderBy fragments
- odata_query.query: ODataQuery aggregator
- odata_query.models: pydantic models for JSON-shaped input

"""

__version__ = "0.3.0"

from odata_query.core import (
    FilterOperator,
    encode_value,
    escape_odata_literal,
    percent_encode,
)
from odata_query.expressions import Filter, OrderBy
from odata_query.query import ODataQuery, nested_expand

__all__ = [
    # Version
    "__version__",
    # Encoding
    "FilterOperator",
    "encode_value",
    "escape_odata_literal",
    "percent_encode",
    # Builders
    "Filter",
    "OrderBy",
    "ODataQuery",
    "nested_expand",
]
