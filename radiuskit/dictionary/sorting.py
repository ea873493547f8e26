"""In-place stable sorting of dictionary entries."""

from __future__ import annotations

import functools
from itertools import zip_longest

from radiuskit.dictionary.model import Attribute, Value, Vendor


def _compare_oids(a: Attribute, b: Attribute) -> int:
    for x, y in zip_longest(a.oid, b.oid, fillvalue=0):
        if x != y:
            return -1 if x < y else 1
    return 0


def sort_attributes(attrs: list[Attribute]) -> None:
    """Sort attributes by OID, missing trailing parts counting as zero."""
    attrs.sort(key=functools.cmp_to_key(_compare_oids))


def sort_values(values: list[Value]) -> None:
    """Sort values by number, keeping the order of equal numbers."""
    values.sort(key=lambda value: value.number)


def sort_vendors(vendors: list[Vendor]) -> None:
    """Sort vendors by number, keeping the order of equal numbers."""
    vendors.sort(key=lambda vendor: vendor.number)