from radiuskit.dictionary.model import OID, Attribute, AttributeType, Value, Vendor
from radiuskit.dictionary.sorting import sort_attributes, sort_values, sort_vendors


def _attr(name, *oid):
    return Attribute(name, OID(oid), AttributeType.STRING)


def test_sort_attributes_order():
    attrs = [_attr("a", 3), _attr("b", 1, 2), _attr("c", 1), _attr("d", 1, 0)]
    sort_attributes(attrs)
    assert [a.name for a in attrs] == ["c", "d", "b", "a"]


def test_sort_attributes_is_ordered():
    attrs = [_attr("x", 200), _attr("y", 26, 9), _attr("z", 5), _attr("w", 26, 1)]
    sort_attributes(attrs)
    firsts = [a.oid[0] for a in attrs]
    assert firsts == sorted(firsts)


def test_sort_values_stable():
    values = [Value("Mode", "Half", 2), Value("Mode", "Full", 1), Value("Mode", "Both", 2)]
    sort_values(values)
    assert [v.number for v in values] == [1, 2, 2]
    assert [v.name for v in values][1:] == ["Half", "Both"]


def test_sort_vendors():
    vendors = [Vendor("B", 32473), Vendor("A", 9), Vendor("C", 311)]
    sort_vendors(vendors)
    numbers = [v.number for v in vendors]
    assert numbers == sorted(numbers)
    assert {v.name for v in vendors} == {"A", "B", "C"}