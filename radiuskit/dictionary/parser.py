"""Parser for FreeRADIUS-style dictionary files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import IO, Iterable

from radiuskit.dictionary.errors import (
    BeginVendorIncludeError,
    DictionaryError,
    DuplicateAttributeError,
    DuplicateAttributeFlagError,
    DuplicateVendorError,
    InvalidAttributeEncryptTypeError,
    InvalidEndVendorError,
    InvalidOIDError,
    InvalidVendorFormatError,
    NestedVendorBlockError,
    ParseError,
    RecursiveIncludeError,
    UnclosedVendorBlockError,
    UnknownAttributeFlagError,
    UnknownAttributeTypeError,
    UnknownLineError,
    UnknownVendorError,
    UnmatchedEndVendorError,
)
from radiuskit.dictionary.helpers import attribute_by_name, vendor_by_name
from radiuskit.dictionary.model import (
    OID,
    Attribute,
    AttributeType,
    Dictionary,
    Value,
    Vendor,
)

_TYPES = {str(attr_type): attr_type for attr_type in AttributeType}
_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int32(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f'invalid number "{text}"')
    number = int(text)
    if not -(2**31) <= number < 2**31:
        raise ValueError(f'number out of range "{text}"')
    return number


def _name_of(f) -> str:
    return str(getattr(f, "name", "<input>"))


def _strip_newline(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def parse_oid(s: str) -> OID | None:
    """Parse a dotted OID such as "26.9.1"; return None when it is malformed."""
    parts: list[int] = []
    for i, ch in enumerate(s):
        if ch == ".":
            if i == 0 or i + 1 == len(s) or not "0" <= s[i + 1] <= "9":
                return None
            parts.append(0)
        elif "0" <= ch <= "9":
            if i == 0:
                parts.append(0)
            parts[-1] = parts[-1] * 10 + int(ch)
        else:
            return None
    return OID(parts) if parts else None


@dataclass
class FileSystemOpener:
    """Opens dictionary files, resolving relative names against ``root``."""

    root: str = ""

    def open_file(self, name: str) -> IO[str]:
        """Open the named file for reading; its ``name`` is the absolute path."""
        path = name if os.path.isabs(name) else os.path.join(self.root, name)
        return open(
            os.path.abspath(path),
            encoding="utf-8",
            errors="surrogateescape",
            newline="\n",
        )


@dataclass
class Parser:
    """Reads dictionary files, following $INCLUDE lines through ``opener``.

    With ``ignore_identical_attributes`` an attribute defined twice in exactly
    the same way is accepted instead of raising a duplicate error.
    """

    opener: FileSystemOpener = field(default_factory=FileSystemOpener)
    ignore_identical_attributes: bool = False

    def parse(self, f: Iterable[str]) -> Dictionary:
        """Parse an open dictionary file into a new Dictionary."""
        dictionary = Dictionary()
        self._parse(dictionary, {_name_of(f)}, f)
        return dictionary

    def parse_file(self, filename: str) -> Dictionary:
        """Open and parse the named dictionary file."""
        with self.opener.open_file(filename) as f:
            return self.parse(f)

    def _parse(self, dictionary: Dictionary, parsed: set[str], f) -> None:
        filename = _name_of(f)
        vendor_block: Vendor | None = None
        line_no = 0
        for line_no, raw in enumerate(f, 1):
            text = _strip_newline(raw)
            line = text.split("#", 1)[0]
            if not line:
                continue
            try:
                vendor_block = self._parse_line(
                    dictionary, parsed, line.split(), text, vendor_block
                )
            except ParseError:
                raise
            except (DictionaryError, ValueError, OSError) as exc:
                raise ParseError(exc, filename, line_no) from exc

        if vendor_block is not None:
            raise ParseError(UnclosedVendorBlockError(), filename, line_no)

    def _parse_line(
        self,
        dictionary: Dictionary,
        parsed: set[str],
        fields: list[str],
        text: str,
        vendor_block: Vendor | None,
    ) -> Vendor | None:
        keyword = fields[0] if fields else ""
        count = len(fields)

        if keyword == "ATTRIBUTE" and count in (4, 5):
            attr = self._parse_attribute(fields)
            target = dictionary if vendor_block is None else vendor_block
            existing = attribute_by_name(target.attributes, attr.name)
            if existing is not None:
                if self.ignore_identical_attributes and attr == existing:
                    return vendor_block
                raise DuplicateAttributeError(attr)
            target.attributes.append(attr)

        elif keyword == "VALUE" and count == 4:
            value = Value(
                attribute=fields[1], name=fields[2], number=_parse_int32(fields[3])
            )
            target = dictionary if vendor_block is None else vendor_block
            target.values.append(value)

        elif keyword == "VENDOR" and count in (3, 4):
            vendor = self._parse_vendor(fields)
            if any(
                v.name == vendor.name or v.number == vendor.number
                for v in dictionary.vendors
            ):
                raise DuplicateVendorError(vendor)
            dictionary.vendors.append(vendor)

        elif keyword == "BEGIN-VENDOR" and count == 2:
            if vendor_block is not None:
                raise NestedVendorBlockError()
            vendor = vendor_by_name(dictionary.vendors, fields[1])
            if vendor is None:
                raise UnknownVendorError(fields[1])
            return vendor

        elif keyword == "END-VENDOR" and count == 2:
            if vendor_block is None:
                raise UnmatchedEndVendorError()
            if vendor_block.name != fields[1]:
                raise InvalidEndVendorError(fields[1])
            return None

        elif keyword == "$INCLUDE" and count == 2:
            if vendor_block is not None:
                raise BeginVendorIncludeError()
            with self.opener.open_file(fields[1]) as included:
                included_name = _name_of(included)
                if included_name in parsed:
                    raise RecursiveIncludeError(included_name)
                parsed.add(included_name)
                try:
                    self._parse(dictionary, parsed, included)
                finally:
                    parsed.discard(included_name)

        else:
            raise UnknownLineError(text)

        return vendor_block

    def _parse_attribute(self, fields: list[str]) -> Attribute:
        oid = parse_oid(fields[2])
        if not oid:
            raise InvalidOIDError(fields[2])

        type_name = fields[3]
        size = None
        lowered = type_name.lower()
        if lowered in _TYPES:
            attr_type = _TYPES[lowered]
        elif len(type_name) > 8 and lowered.startswith("octets[") and type_name.endswith("]"):
            try:
                size = _parse_int32(type_name[7:-1])
            except ValueError:
                raise UnknownAttributeTypeError(type_name) from None
            attr_type = AttributeType.OCTETS
        else:
            raise UnknownAttributeTypeError(type_name)

        attr = Attribute(name=fields[1], oid=oid, type=attr_type, size=size)

        if len(fields) >= 5:
            for flag in fields[4].split(","):
                if flag.startswith("encrypt="):
                    if attr.flag_encrypt is not None:
                        raise DuplicateAttributeFlagError(flag)
                    encrypt_type = flag[len("encrypt="):]
                    try:
                        attr.flag_encrypt = _parse_int32(encrypt_type)
                    except ValueError:
                        raise InvalidAttributeEncryptTypeError(encrypt_type) from None
                elif flag == "has_tag":
                    if attr.flag_has_tag is not None:
                        raise DuplicateAttributeFlagError(flag)
                    attr.flag_has_tag = True
                elif flag == "concat":
                    if attr.flag_concat is not None:
                        raise DuplicateAttributeFlagError(flag)
                    attr.flag_concat = True
                else:
                    raise UnknownAttributeFlagError(flag)

        return attr

    def _parse_vendor(self, fields: list[str]) -> Vendor:
        vendor = Vendor(name=fields[1], number=_parse_int32(fields[2]))
        if len(fields) == 4:
            fmt = fields[3]
            if (
                not fmt.startswith("format=")
                or len(fmt) != 10
                or fmt[8] != ","
                or fmt[7] not in "124"
            ):
                raise InvalidVendorFormatError(fmt)
            vendor.type_octets = int(fmt[7])
            vendor.length_octets = (ord(fmt[9]) - ord("0")) & 0xFF
        return vendor