"""
Pytest configuration and shared fixtures.
"""

import pytest

from odata_query import Filter, ODataQuery, OrderBy


@pytest.fixture
def milk_filter():
    """Name eq 'Milk' and Price lt 2.55"""
    return Filter.and_(Filter.eq("Name", "Milk"), Filter.lt("Price", 2.55))


@pytest.fixture
def full_query(milk_filter):
    """A query with every option set."""
    return ODataQuery(
        search="Milk and Eggs",
        filter=milk_filter,
        order_by=OrderBy.desc("Price"),
        select=["Name", "Price"],
        expand=["Category", "Supplier"],
        top=5,
        skip=2,
        count=True,
    )


@pytest.fixture
def sample_request():
    """Sample QueryRequest JSON document."""
    return """{
  "search": "Bakery",
  "filter": {
    "op": "and",
    "filters": [
      {"op": "eq", "field": "Name", "value": "Milk"},
      {"op": "lt", "field": "Price", "value": 2.55}
    ]
  },
  "order_by": [{"field": "Price", "direction": "desc"}],
  "select": ["Name", "Price"],
  "top": 10,
  "count": true
}"""
