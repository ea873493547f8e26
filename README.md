# radiuskit

Tools for working with RADIUS (RFC 2865, RFC 2866) in plain Python:

- building, encoding and parsing RADIUS packets,
- computing and checking request and response authenticators,
- converting attribute values to and from their wire form, including hiding
  and recovering `User-Password` (RFC 2865) and `Tunnel-Password` (RFC 2868),
- an asyncio UDP client that sends a request, resends it and waits for an
  authentic reply,
- a parser for FreeRADIUS dictionary files, with merge, lookup and sort helpers,
- a readable dump of packets for debugging.

The package has no runtime dependencies.

## Installation

```
pip install radiuskit
```

For the test suite:

```
pip install "radiuskit[test]"
pytest
```

## Packets

```python
from radiuskit.code import Code
from radiuskit.packet import new, parse, is_authentic_response

secret = b"secret"

request = new(Code.ACCESS_REQUEST, secret)   # random identifier and authenticator
wire = request.encode()

decoded = parse(wire, secret)
reply = decoded.response(Code.ACCESS_ACCEPT)
reply_wire = reply.encode()

assert is_authentic_response(reply_wire, wire, secret)
```

`Packet` is a dataclass with `code`, `identifier`, `authenticator`, `secret`
and `attributes`. `Packet.encode` fills in the authenticator the packet code
calls for: the stored one for Access-Request and Status-Server, one computed
over a zero authenticator for Accounting-, Disconnect- and CoA-Request, and a
response authenticator for replies. It raises `PacketError` when an attribute
is too long, the packet would exceed `MAX_PACKET_LENGTH` (4095 bytes) or the
code is unknown. `parse` raises `PacketError` (or `AttributeParseError`) for
malformed input. `is_authentic_request` checks accounting, disconnect and CoA
requests.

`radiuskit.code.Code` lists the standard packet codes; `str(Code.ACCESS_ACCEPT)`
is `"Access-Accept"`, and `code_name(99)` gives `"Code(99)"` for codes it does
not know.

## Attribute values

Attribute values are byte strings. The functions in `radiuskit.attribute`
convert between those bytes and Python values and raise `ValueError` on bad
lengths or ranges:

```python
from radiuskit import attribute

attribute.integer(attribute.new_integer(42))        # 42
attribute.string(attribute.new_string("alice"))     # "alice"

authenticator = bytes(16)
hidden = attribute.new_user_password(b"password", b"secret", authenticator)
attribute.user_password(hidden, b"secret", authenticator)   # b"password"
```

There are pairs for IPv4 and IPv6 addresses (`ip_addr`, `ipv6_addr`, returning
`ipaddress` objects), IPv6 prefixes (`ipv6_prefix`, returning an
`IPv6Network`), 8-byte interface identifiers (`ifid`), dates (`date`, an aware
UTC `datetime`), 16-, 32- and 64-bit integers, TLVs, vendor-specific values and
tunnel passwords (`new_tunnel_password` / `tunnel_password`, without the tag).

`radiuskit.attributes.Attributes` is a `dict` of attribute type to a list of
values:

```python
from radiuskit.attributes import Attributes, parse_attributes

attrs = Attributes()
attrs.add(1, b"alice")
attrs.get(1)              # b"alice"; None when the type is absent
attrs.lookup(1)           # b"alice"; raises NoAttributeError when absent
parse_attributes(attrs.encode()).get(1)
```

`set` replaces every value of a type, `delete` removes them, and `encode`
writes types 1 to 255 in ascending order.

## Client

```python
import asyncio
from radiuskit.client import Client

client = Client(retry=1.0, max_packet_errors=10)
reply = await asyncio.wait_for(client.exchange(request, "127.0.0.1:1812"), timeout=10)
```

`Client` fields:

- `net`: `"udp"` (default), `"udp4"` or `"udp6"`,
- `retry`: seconds between resends; zero or less sends only once (default 0),
- `max_packet_errors`: how many malformed or unverifiable replies are ignored
  before the last error is raised; zero ignores them all (default 0),
- `insecure_skip_verify`: accept replies without checking their authenticator.

A reply that fails verification too often raises `NonAuthenticResponseError`.
The exchange has no timeout of its own; wrap it in `asyncio.wait_for` or
cancel it. The module-level `exchange` uses `DEFAULT_CLIENT`, which resends
every second and tolerates ten bad replies. The address may be `"host:port"`,
`"[v6addr]:port"` or a `(host, port)` tuple.

## Dictionaries

```python
from radiuskit.dictionary.parser import FileSystemOpener, Parser
from radiuskit.dictionary.helpers import attribute_by_name, merge

parser = Parser(opener=FileSystemOpener(root="/usr/share/freeradius"))
base = parser.parse_file("dictionary.rfc2865")
accounting = parser.parse_file("dictionary.rfc2866")
combined = merge(base, accounting)

attribute_by_name(combined.attributes, "User-Name")
```

The parser understands `ATTRIBUTE` (with `octets[N]` sizes and the `encrypt=`,
`has_tag` and `concat` flags), `VALUE`, `VENDOR` (with `format=t,l`),
`BEGIN-VENDOR` / `END-VENDOR` and `$INCLUDE`. With
`ignore_identical_attributes=True` an attribute defined twice in exactly the
same way is accepted.

Parse failures raise `ParseError`, whose `filename`, `line` and `inner`
attributes name the place and the specific cause (`UnknownAttributeTypeError`,
`DuplicateAttributeError`, `UnclosedVendorBlockError`,
`RecursiveIncludeError` and so on, all in `radiuskit.dictionary.errors`).
`merge` raises `MergeError` on duplicate attributes or conflicting vendors.

`radiuskit.dictionary.model` holds the `Dictionary`, `Attribute`, `Value`,
`Vendor`, `OID` and `AttributeType` types; `radiuskit.dictionary.sorting`
sorts attributes by OID and values and vendors by number, in place.

`radiuskit.naming.identifier` turns dictionary names into identifiers, for
example `"3GPP-RAT-Type"` becomes `"ThreeGPPRATType"`.

`radiuskit.attributemap` is a registry where vendor attribute mappers can be
recorded with `register_vendor` and looked up with `get_oid_mapper`,
`get_name_mapper` and `find_vsa_type_by_name`.

## Debugging

```python
from radiuskit.debug import Config, dump_string

print(dump_string(Config(dictionary=combined), decoded))
```

prints the packet code and identifier, then one line per attribute using the
dictionary's names, value names, addresses and dates where it knows them, and
hexadecimal otherwise. `dump` writes the same text to any file-like object.

## What it does not do

- There is no RADIUS server; only the client side of an exchange.
- There are no command-line tools and no code generator for dictionaries.
- No dictionary is bundled: parse your own FreeRADIUS dictionary files.
- There are no ready-made per-attribute helpers (such as a typed `User-Name`
  accessor); work with attribute type numbers and the `radiuskit.attribute`
  functions.