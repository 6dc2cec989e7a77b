"""
odata_query.query - Query option aggregation
=============================================

- ODataQuery: holds the system query options and serializes them
- nested_expand: renders an $expand item with nested options

"""

from odata_query.query.builder import ODataQuery, nested_expand

__all__ = [
    "ODataQuery",
    "nested_expand",
]
