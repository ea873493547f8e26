"""Lookup and merge helpers for dictionaries."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from radiuskit.dictionary.errors import DictionaryError
from radiuskit.dictionary.model import OID, Attribute, Dictionary, Value, Vendor


class MergeError(DictionaryError):
    """Raised when two dictionaries cannot be merged."""


def attribute_by_name(attrs: Iterable[Attribute], name: str) -> Attribute | None:
    """Return the first attribute with the given name."""
    return next((attr for attr in attrs if attr.name == name), None)


def attribute_by_oid(attrs: Iterable[Attribute], oid) -> Attribute | None:
    """Return the first attribute with the given OID."""
    wanted = OID(oid)
    return next((attr for attr in attrs if attr.oid == wanted), None)


def values_by_attribute(values: Iterable[Value], attribute: str) -> list[Value]:
    """Return every value defined for the named attribute."""
    return [value for value in values if value.attribute == attribute]


def vendor_by_name(vendors: Iterable[Vendor], name: str) -> Vendor | None:
    """Return the first vendor with the given name."""
    return next((vendor for vendor in vendors if vendor.name == name), None)


def vendor_by_number(vendors: Iterable[Vendor], number: int) -> Vendor | None:
    """Return the first vendor with the given number."""
    return next((vendor for vendor in vendors if vendor.number == number), None)


def _find_attribute(attrs: list[Attribute], attr: Attribute) -> Attribute | None:
    return attribute_by_name(attrs, attr.name) or attribute_by_oid(attrs, attr.oid)


def merge(d1: Dictionary, d2: Dictionary) -> Dictionary:
    """Combine two dictionaries into a new one, refusing any conflicts."""
    for attr in d2.attributes:
        if _find_attribute(d1.attributes, attr) is not None:
            raise MergeError(f"duplicate attribute {attr.name} ({attr.oid})")

    for vendor in d2.vendors:
        by_name = vendor_by_name(d1.vendors, vendor.name)
        by_number = vendor_by_number(d1.vendors, vendor.number)
        if by_name is not by_number:
            raise MergeError(f"conflicting vendor: {vendor.name} ({vendor.number})")
        if by_name is None:
            continue
        for attr in vendor.attributes:
            if _find_attribute(by_name.attributes, attr) is not None:
                raise MergeError(
                    f"duplicate vendor attribute {attr.name} ({attr.oid})"
                )

    vendors = list(d1.vendors)
    for vendor in d2.vendors:
        for index, existing in enumerate(vendors):
            if existing.number == vendor.number:
                vendors[index] = replace(
                    existing,
                    attributes=[*existing.attributes, *vendor.attributes],
                    values=[*existing.values, *vendor.values],
                )
                break
        else:
            vendors.append(vendor)

    return Dictionary(
        attributes=[*d1.attributes, *d2.attributes],
        values=[*d1.values, *d2.values],
        vendors=vendors,
    )