"""Registry of vendor attribute name and type mappers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from radiuskit.dictionary.model import AttributeType

ValueStringFunc = Callable[[int], str]
ValueNumberFunc = Callable[[str], int]
TypeMapper = Callable[[int], Tuple[str, AttributeType, Optional[ValueStringFunc]]]
NameMapper = Callable[[str], Tuple[int, AttributeType, Optional[ValueNumberFunc]]]


@dataclass(frozen=True)
class NameType:
    """Name and type of an attribute, with a mapper from numbers to names."""

    name: str
    type: AttributeType
    value_map_func: Optional[ValueStringFunc] = None


@dataclass(frozen=True)
class OIDType:
    """Type number and type of an attribute, with a mapper from names to numbers."""

    oid: int
    type: AttributeType
    value_map_func: Optional[ValueNumberFunc] = None


@dataclass(frozen=True)
class _Mappers:
    type_mapper: TypeMapper
    name_mapper: NameMapper


_vendor_mappers: dict[int, _Mappers] = {}


def register_vendor(vendor_id: int, type_mapper: TypeMapper, name_mapper: NameMapper) -> None:
    """Register the mapper functions of a vendor."""
    if type_mapper is None or name_mapper is None:
        raise ValueError(f"dictionary for vendor id {vendor_id} has no mapper functions")
    _vendor_mappers[vendor_id] = _Mappers(type_mapper, name_mapper)


def get_oid_mapper(vendor_id: int) -> TypeMapper | None:
    """Return the type mapper of a registered vendor, or None."""
    mappers = _vendor_mappers.get(vendor_id)
    return None if mappers is None else mappers.type_mapper


def get_name_mapper(vendor_id: int) -> NameMapper | None:
    """Return the name mapper of a registered vendor, or None."""
    mappers = _vendor_mappers.get(vendor_id)
    return None if mappers is None else mappers.name_mapper


def find_vsa_type_by_name(
    name: str,
) -> tuple[int, int, AttributeType, Optional[ValueNumberFunc]] | None:
    """Find (vendor ID, type, attribute type, value mapper) of a vendor attribute.

    Returns None when no registered vendor knows the name.
    """
    for vendor_id, mappers in _vendor_mappers.items():
        oid, attr_type, value_map = mappers.name_mapper(name)
        if oid > 0:
            return vendor_id, oid, attr_type, value_map
    return None