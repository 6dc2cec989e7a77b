"""
Example: Basic usage of odata_query
===================================

This example shows how to build OData query strings declaratively.
"""

from odata_query import Filter, ODataQuery, OrderBy, nested_expand


def example_filter_and_paging():
    """Filter, sort, select and page in one query."""

    query = ODataQuery(
        filter=Filter.and_(
            Filter.eq("Name", "Milk"),
            Filter.lt("Price", 2.55),
        ),
        order_by=OrderBy.desc("Price"),
        select=["Name", "Price"],
        expand=["Category"],
        top=10,
        count=True,
    )

    print("Plain:  ", query)
    print("Encoded:", query.to_encoded_string())
    print("Map:    ", query.to_map())

    # Next page, same options
    print("Page 2: ", query.replace(skip=10))


def example_nested_expand():
    """Per-navigation-property options inside $expand."""

    query = ODataQuery(
        select=["Name", "Price"],
        expand=[
            nested_expand(
                "Category",
                ODataQuery(select=["Type"]),
                ODataQuery(order_by=OrderBy.asc("DateCreated")),
            ),
        ],
    )
    # $select=Name,Price&$expand=Category($select=Type;$orderby=DateCreated asc)
    print(query)


def example_membership_and_lambdas():
    """in, any/all and bulk equality helpers."""

    print(ODataQuery(filter=Filter.in_list("Name", ["Milk", "Cheese", "Donut"])))
    print(ODataQuery(filter=Filter.in_collection("Name", "RelevantProductNames")))
    print(ODataQuery(filter=Filter.any("Products", "item", Filter.eq("item/Type", "Active"))))
    print(ODataQuery(filter=Filter.eq_list("Status", ["OPEN", "HOLD"])))

    # Grouping is up to the caller: nothing is parenthesized automatically
    grouped = Filter.and_(
        Filter(f"({Filter.eq('A', 1) | Filter.eq('B', 2)})"),
        Filter.eq("C", 3),
    )
    print(grouped)  # (A eq 1 or B eq 2) and C eq 3


def example_request_model():
    """Build a query from JSON-shaped input."""
    from odata_query.models import QueryRequest

    req = QueryRequest.model_validate({
        "search": "Bakery",
        "filter": {"op": "contains", "field": "Name", "value": "bread"},
        "order_by": [{"field": "Name"}],
        "top": 5,
        "skip": 10,
    })
    print(req.to_query().to_encoded_string())


if __name__ == "__main__":
    example_filter_and_paging()
    example_nested_expand()
    example_membership_and_lambdas()
    example_request_model()
