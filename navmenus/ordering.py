"""
Sibling ordering by the ``order`` property.

Sorting is stable: items with equal keys keep their relative order. Items
without a numeric order follow the ordered ones, in insertion order.
"""

import math
from decimal import Decimal
from numbers import Real

_UNORDERED = (1, 0)


def order_key(item):
    order = item.order
    if isinstance(order, bool):
        return _UNORDERED
    if isinstance(order, str):
        try:
            order = float(order)
        except ValueError:
            return _UNORDERED
    if not isinstance(order, (Real, Decimal)) or math.isnan(order):
        return _UNORDERED
    return (0, order)


def order_items(items, enabled=False):
    if not enabled:
        return list(items)
    return sorted(items, key=order_key)
