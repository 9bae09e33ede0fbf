"""Normalization of flexible caller inputs into World Bank wire parameters."""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

ALL = "all"

# Composite key syntax of the API: "USA;CAN" for lists, "2010:2020" for ranges
LIST_SEPARATOR = ";"
DATE_SEPARATOR = ":"

MaybeArray = Union[str, Sequence[str], None]


def concat_strings(
    value: MaybeArray = None,
    default: Optional[str] = None,
    sep: str = LIST_SEPARATOR,
) -> Optional[str]:
    """
    Collapse a string, a list of strings or nothing into one wire string.

    Args:
        value: A single value, a list of values, or None
        default: Returned when value is None or an empty list
        sep: Separator placed between list items

    Returns:
        The normalized string, or ``default`` (possibly None)

    Examples:
        >>> concat_strings(["USA", "CAN"])
        'USA;CAN'
        >>> concat_strings(["2010", "2020"], sep=":")
        '2010:2020'
        >>> concat_strings([], default="all")
        'all'
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value
    items: List[str] = list(value)
    if not items:
        return default
    return sep.join(items)
