import pytest

from radiuskit.attributemap import (
    NameType,
    OIDType,
    find_vsa_type_by_name,
    get_name_mapper,
    get_oid_mapper,
    register_vendor,
)
from radiuskit.dictionary.model import AttributeType


def _value_string(value):
    return {1: "Full"}[value]


def _value_number(name):
    return {"Full": 1}[name]


_BY_TYPE = {7: NameType("Acme-Mode", AttributeType.INTEGER, _value_string)}
_BY_NAME = {"Acme-Mode": OIDType(7, AttributeType.INTEGER, _value_number)}


def _type_mapper(t):
    entry = _BY_TYPE.get(t)
    if entry is None:
        return "", AttributeType.OCTETS, None
    return entry.name, entry.type, entry.value_map_func


def _name_mapper(name):
    entry = _BY_NAME.get(name)
    if entry is None:
        return -1, AttributeType.OCTETS, None
    return entry.oid, entry.type, entry.value_map_func


def test_register_and_get_mappers():
    register_vendor(64001, _type_mapper, _name_mapper)
    assert get_oid_mapper(64001) is _type_mapper
    assert get_name_mapper(64001) is _name_mapper
    assert get_oid_mapper(64001)(7) == ("Acme-Mode", AttributeType.INTEGER, _value_string)


def test_unknown_vendor_has_no_mappers():
    assert get_oid_mapper(64999) is None
    assert get_name_mapper(64999) is None


def test_register_without_mapper_raises():
    with pytest.raises(ValueError):
        register_vendor(64002, None, _name_mapper)
    assert get_name_mapper(64002) is None


def test_find_vsa_type_by_name():
    register_vendor(64003, _type_mapper, _name_mapper)
    found = find_vsa_type_by_name("Acme-Mode")
    assert found is not None
    vendor_id, oid, attr_type, value_map = found
    assert vendor_id in (64001, 64003)
    assert oid == 7
    assert attr_type is AttributeType.INTEGER
    assert value_map("Full") == 1


def test_find_vsa_type_by_unknown_name():
    register_vendor(64004, _type_mapper, _name_mapper)
    assert find_vsa_type_by_name("No-Such-Attribute") is None


def test_name_and_oid_types_hold_their_fields():
    name_type = NameType("Acme-Mode", AttributeType.INTEGER, _value_string)
    oid_type = OIDType(7, AttributeType.INTEGER, _value_number)
    assert name_type.value_map_func(1) == "Full"
    assert oid_type.value_map_func("Full") == 1
    assert (oid_type.oid, oid_type.type) == (7, AttributeType.INTEGER)