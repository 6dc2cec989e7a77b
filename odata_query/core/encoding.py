"""
odata_query.core.encoding - OData literal and URI encoding
===========================================================

Helpers shared by every builder in the package:

- encode_value: render a Python value as an OData literal
- escape_odata_literal: double embedded single quotes
- join_csv: comma-join field names
- percent_encode: URI-component encoding for query values
"""

from __future__ import annotations

from typing import Any, Iterable
from urllib.parse import quote


def escape_odata_literal(value: str) -> str:
    """
    Escape a string value for use inside an OData string literal.

    Parameters
    ----------
    value : str
        The value to escape

    Returns
    -------
    str
        Value with every single quote doubled

    Examples
    --------
    >>> escape_odata_literal("O'Reilly")
    "O''Reilly"
    """
    return value.replace("'", "''")


def encode_value(value: Any) -> str:
    """
    Render a value as an OData literal.

    Strings are single-quoted and escaped, ``None`` becomes ``null``,
    booleans become ``true``/``false`` and everything else uses ``str()``.

    Examples
    --------
    >>> encode_value("Milk")
    "'Milk'"
    >>> encode_value(None)
    'null'
    >>> encode_value(2.55)
    '2.55'
    """
    if isinstance(value, str):
        return f"'{escape_odata_literal(value)}'"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_csv(items: Iterable[str]) -> str:
    """Join items with a bare comma, no spaces added."""
    return ",".join(items)


def percent_encode(value: str) -> str:
    """
    Percent-encode a query value as a URI component.

    Letters, digits and ``-_.!~*'()`` are left as-is; everything else,
    including spaces, commas, slashes and ``$``, is encoded.

    Examples
    --------
    >>> percent_encode("Name eq 'Milk'")
    "Name%20eq%20'Milk'"
    """
    return quote(value, safe="-_.!~*'()")
