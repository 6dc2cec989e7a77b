"""
odata_query.query.builder - OData query option aggregator
==========================================================

Collects the optional system query options ($search, $filter, $orderby,
$select, $expand, $top, $skip, $count) and serializes them into a
query string, either raw or percent-encoded.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from odata_query.core.encoding import join_csv, percent_encode
from odata_query.expressions.filter import Filter
from odata_query.expressions.order_by import OrderBy

logger = logging.getLogger("odata_query.query")


@dataclass(frozen=True)
class ODataQuery:
    """
    Declarative OData v4 query options.

    Every option is independently optional. An option left as ``None``
    (or an empty ``select``/``expand``) is omitted from the output.

    Parameters
    ----------
    search : str, optional
        Free-text ``$search`` value, passed through verbatim
    filter : Filter, optional
        ``$filter`` predicate
    order_by : OrderBy, optional
        ``$orderby`` sort key(s)
    select : sequence of str, optional
        Fields for ``$select``
    expand : sequence of str, optional
        Navigation properties for ``$expand``, may carry nested options
    top : int, optional
        ``$top``
    skip : int, optional
        ``$skip``
    count : bool, optional
        ``$count``

    Examples
    --------
    >>> query = ODataQuery(
    ...     filter=Filter.and_(Filter.eq("Name", "Milk"), Filter.lt("Price", 2.55)),
    ...     order_by=OrderBy.desc("Price"),
    ...     top=10,
    ...     count=True,
    ... )
    >>> str(query)
    "$filter=Name eq 'Milk' and Price lt 2.55&$orderby=Price desc&$top=10&$count=true"
    >>> query.to_encoded_string()
    "$filter=Name%20eq%20'Milk'%20and%20Price%20lt%202.55&$orderby=Price%20desc&$top=10&$count=true"
    """
    search: Optional[str] = None
    filter: Optional[Filter] = None
    order_by: Optional[OrderBy] = None
    select: Optional[Sequence[str]] = None
    expand: Optional[Sequence[str]] = None
    top: Optional[int] = None
    skip: Optional[int] = None
    count: Optional[bool] = None

    def __post_init__(self) -> None:
        # freeze caller-supplied lists so later mutation cannot leak into output
        for name in ("select", "expand"):
            value = getattr(self, name)
            if isinstance(value, str):
                object.__setattr__(self, name, (value,) if value else ())
            elif value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    # ---------------- parameter map ----------------

    def _params(self) -> Dict[str, str]:
        p: Dict[str, str] = {}
        if self.search is not None:
            p["$search"] = self.search
        if self.filter is not None:
            p["$filter"] = str(self.filter)
        if self.order_by is not None:
            p["$orderby"] = str(self.order_by)
        if self.select:
            p["$select"] = join_csv(self.select)
        if self.expand:
            p["$expand"] = join_csv(self.expand)
        if self.top is not None:
            p["$top"] = str(int(self.top))
        if self.skip is not None:
            p["$skip"] = str(int(self.skip))
        if self.count is not None:
            p["$count"] = "true" if self.count else "false"
        return p

    def to_map(self) -> Dict[str, str]:
        """
        Return the query options as an ordered mapping.

        Keys are the OData option names (``$filter``, ``$top``, ...) in
        fixed declaration order, values are unencoded strings. A new
        dict is returned on every call.

        Examples
        --------
        >>> ODataQuery(filter=Filter.eq("Name", "Milk"), top=10).to_map()
        {'$filter': "Name eq 'Milk'", '$top': '10'}
        """
        return self._params()

    # ---------------- string forms ----------------

    def to_string(self, separator: str = "&") -> str:
        """
        Render the raw query string, values left unencoded.

        Parameters
        ----------
        separator : str
            Separator between options; ``&`` for a URL query, ``;`` for
            options nested inside ``$expand``

        Returns
        -------
        str
            ``$key=value`` pairs, or ``""`` when no option is set.
            No leading ``?`` is added.
        """
        params = self._params()
        out = separator.join(f"{k}={v}" for k, v in params.items())
        logger.debug(f"to_string: keys={list(params)}")
        return out

    def to_encoded_string(self) -> str:
        """
        Render the query string with every value percent-encoded.

        Keys are left as-is. Returns ``""`` when no option is set.
        """
        params = self._params()
        out = "&".join(f"{k}={percent_encode(v)}" for k, v in params.items())
        logger.debug(f"to_encoded_string: keys={list(params)}")
        return out

    def build(self) -> str:
        """Alias for :meth:`to_encoded_string`."""
        return self.to_encoded_string()

    def __str__(self) -> str:
        return self.to_string()

    # ---------------- derivation ----------------

    def replace(self, **changes: Any) -> "ODataQuery":
        """
        Return a copy with some options changed.

        Examples
        --------
        >>> page = ODataQuery(top=50, skip=0)
        >>> str(page.replace(skip=50))
        '$top=50&$skip=50'
        """
        return dataclasses.replace(self, **changes)


def nested_expand(navigation: str, *queries: ODataQuery) -> str:
    """
    Render an ``$expand`` item carrying nested query options.

    The options of all given queries are joined with ``;`` inside
    parentheses after the navigation property. Queries without any
    option contribute nothing; with no options at all the bare
    navigation property is returned.

    Parameters
    ----------
    navigation : str
        Navigation property name, e.g. "Category"
    *queries : ODataQuery
        Nested options for that navigation property

    Returns
    -------
    str
        Item suitable for ``ODataQuery(expand=[...])``

    Examples
    --------
    >>> nested_expand(
    ...     "Category",
    ...     ODataQuery(select=["Type"]),
    ...     ODataQuery(order_by=OrderBy.asc("DateCreated")),
    ... )
    'Category($select=Type;$orderby=DateCreated asc)'
    """
    parts: Tuple[str, ...] = tuple(q.to_string(separator=";") for q in queries)
    inner = ";".join(p for p in parts if p)
    if not inner:
        return navigation
    return f"{navigation}({inner})"
