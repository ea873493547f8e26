"""A collection of wire-encoded RADIUS attributes keyed by type."""

from __future__ import annotations

from radiuskit.attribute import NoAttributeError

TYPE_INVALID = -1
"""A type that can stand for an invalid RADIUS attribute type."""


class AttributeParseError(ValueError):
    """Raised when a buffer of wire-encoded attributes is malformed."""


class Attributes(dict):
    """Map of attribute types to the list of values received for each type."""

    def add(self, key: int, value: bytes) -> None:
        """Append a value to the entries of the given type."""
        self.setdefault(key, []).append(bytes(value))

    def delete(self, key: int) -> None:
        """Remove every value of the given type."""
        self.pop(key, None)

    def get(self, key: int) -> bytes | None:
        """Return the first value of the given type, or None."""
        values = dict.get(self, key)
        return values[0] if values else None

    def lookup(self, key: int) -> bytes:
        """Return the first value of the given type or raise NoAttributeError."""
        values = dict.get(self, key)
        if not values:
            raise NoAttributeError()
        return values[0]

    def set(self, key: int, value: bytes) -> None:
        """Replace every value of the given type with a single value."""
        self[key] = [bytes(value)]

    def _wire_types(self) -> list[int]:
        return sorted(typ for typ in self if 1 <= typ <= 255)

    def wire_size(self) -> int:
        """Return the encoded size in bytes; raise ValueError on an oversized value."""
        size = 0
        for typ in self._wire_types():
            for value in self[typ]:
                if len(value) > 255:
                    raise ValueError("attribute value too long")
                size += 2 + len(value)
        return size

    def encode(self) -> bytes:
        """Encode the attributes in ascending type order."""
        out = bytearray()
        for typ in self._wire_types():
            for value in self[typ]:
                if len(value) > 255:
                    continue
                out += bytes([typ, (2 + len(value)) & 0xFF])
                out += value
        return bytes(out)


def parse_attributes(b: bytes) -> Attributes:
    """Parse wire-encoded attributes into a new Attributes mapping."""
    attrs = Attributes()
    data = memoryview(bytes(b))
    while data:
        if len(data) < 2:
            raise AttributeParseError("short buffer")
        length = data[1]
        if length > len(data) or length < 2:
            raise AttributeParseError("invalid attribute length")
        attrs.add(data[0], bytes(data[2:length]))
        data = data[length:]
    return attrs