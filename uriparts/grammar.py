"""
Regular expressions for the ABNF rules in `Appendix A of RFC 3986`_.

Rules are named as in the RFC, lower-cased with hyphens replaced by
underscores. ``get_regex()`` looks them up by their RFC names and returns a
pattern which must match the whole string:

>>> bool(get_regex("IPv4address").match("192.168.0.1"))
True
>>> bool(get_regex("IPv4address").match("192.168.0.256"))
False

.. _Appendix A of RFC 3986: https://tools.ietf.org/html/rfc3986#appendix-A
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Mapping

from typing_extensions import Literal as TypingLiteral

from uriparts.constants import GENERAL_DELIMITERS, SUB_DELIMITERS
from uriparts.regexbuilder import (
    Choice,
    Literal,
    OneOrMore,
    Optional,
    Regex,
    Repeat,
    Sequence,
    Set,
    ZeroOrMore,
    anchored,
)

ALPHA = Set(("a", "z"), ("A", "Z"))
DIGIT = Set(("0", "9"))
HEXDIG = Set(("a", "f"), ("A", "F"), DIGIT)

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
sub_delims = Set(*SUB_DELIMITERS)

# gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
gen_delims = Set(*GENERAL_DELIMITERS)

reserved = Set(gen_delims, sub_delims)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
unreserved = Set(ALPHA, DIGIT, *"-._~")

# pct-encoded = "%" HEXDIG HEXDIG
pct_encoded = Sequence(Literal("%"), Repeat(HEXDIG, count=2))

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
pchar = Choice(pct_encoded, Set(unreserved, sub_delims, ":", "@"))

# query = *( pchar / "/" / "?" )
query = ZeroOrMore(Choice(pchar, Set("/", "?")))

# fragment = *( pchar / "/" / "?" )
fragment = query

# segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
segment_nz_nc = OneOrMore(Choice(pct_encoded, Set(unreserved, sub_delims, "@")))

segment_nz = OneOrMore(pchar)

segment = ZeroOrMore(pchar)

# *( "/" segment ), shared by all the path forms
_slash_segments = ZeroOrMore(Sequence(Literal("/"), segment))

# path-empty = 0<pchar>
path_empty = Literal("")

# path-rootless = segment-nz *( "/" segment )
path_rootless = Sequence(segment_nz, _slash_segments)

# path-noscheme = segment-nz-nc *( "/" segment )
path_noscheme = Sequence(segment_nz_nc, _slash_segments)

# path-absolute = "/" [ segment-nz *( "/" segment ) ]
path_absolute = Sequence(
    Literal("/"), Optional(Sequence(segment_nz, _slash_segments))
)

# path-abempty = *( "/" segment )
path_abempty = _slash_segments

path = Choice(path_abempty, path_absolute, path_noscheme, path_rootless, path_empty)

# reg-name = *( unreserved / pct-encoded / sub-delims )
reg_name = ZeroOrMore(Choice(pct_encoded, Set(unreserved, sub_delims)))

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
dec_octet = Choice(
    Sequence(Literal("25"), Set(("0", "5"))),
    Sequence(Literal("2"), Set(("0", "4")), DIGIT),
    Sequence(Literal("1"), Repeat(DIGIT, count=2)),
    Sequence(Set(("1", "9")), DIGIT),
    DIGIT,
)

ipv4address = Sequence(
    dec_octet, Literal("."), dec_octet, Literal("."), dec_octet, Literal("."), dec_octet
)

# h16 = 1*4HEXDIG
h16 = Repeat(HEXDIG, min=1, max=4)

# ls32 = ( h16 ":" h16 ) / IPv4address
ls32 = Choice(Sequence(h16, Literal(":"), h16), ipv4address)


def _h16_colon(count: int) -> Regex:
    """``count( h16 ":" )``"""
    return Repeat(Sequence(h16, Literal(":")), count=count)


def _compressed_prefix(max_colons: int) -> Regex:
    """``[ *max_colons( h16 ":" ) h16 ]``"""
    if max_colons == 0:
        return Optional(h16)
    return Optional(
        Sequence(Repeat(Sequence(h16, Literal(":")), min=0, max=max_colons), h16)
    )


_dcolon = Literal("::")

ipv6address = Choice(
    Sequence(_h16_colon(6), ls32),
    Sequence(_dcolon, _h16_colon(5), ls32),
    Sequence(_compressed_prefix(0), _dcolon, _h16_colon(4), ls32),
    Sequence(_compressed_prefix(1), _dcolon, _h16_colon(3), ls32),
    Sequence(_compressed_prefix(2), _dcolon, _h16_colon(2), ls32),
    Sequence(_compressed_prefix(3), _dcolon, h16, Literal(":"), ls32),
    Sequence(_compressed_prefix(4), _dcolon, ls32),
    Sequence(_compressed_prefix(5), _dcolon, h16),
    Sequence(_compressed_prefix(6), _dcolon),
)

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
ipvfuture = Sequence(
    Set("v", "V"),
    OneOrMore(HEXDIG),
    Literal("."),
    OneOrMore(Set(unreserved, sub_delims, ":")),
)

# IP-literal = "[" ( IPv6address / IPvFuture  ) "]"
ip_literal = Sequence(Literal("["), Choice(ipv6address, ipvfuture), Literal("]"))

port = ZeroOrMore(DIGIT)

# The RFC allows any string of digits as a port, but only 1-65535 are usable.
# Leading zeros and 0 itself are rejected.
port_number = Choice(
    Sequence(Literal("6553"), Set(("0", "5"))),
    Sequence(Literal("655"), Set(("0", "2")), DIGIT),
    Sequence(Literal("65"), Set(("0", "4")), Repeat(DIGIT, count=2)),
    Sequence(Literal("6"), Set(("0", "4")), Repeat(DIGIT, count=3)),
    Sequence(Set(("1", "5")), Repeat(DIGIT, count=4)),
    Sequence(Set(("1", "9")), Repeat(DIGIT, min=0, max=3)),
)

# host = IP-literal / IPv4address / reg-name
host = Choice(ip_literal, ipv4address, reg_name)

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
userinfo = ZeroOrMore(Choice(pct_encoded, Set(unreserved, sub_delims, ":")))

# authority = [ userinfo "@" ] host [ ":" port ]
authority = Sequence(
    Optional(Sequence(userinfo, Literal("@"))),
    host,
    Optional(Sequence(Literal(":"), port)),
)

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
scheme = Sequence(ALPHA, ZeroOrMore(Set(ALPHA, DIGIT, "+", "-", ".")))

_authority_and_path = Sequence(Literal("//"), authority, path_abempty)

relative_part = Choice(_authority_and_path, path_absolute, path_noscheme, path_empty)

relative_ref = Sequence(
    relative_part,
    Optional(Sequence(Literal("?"), query)),
    Optional(Sequence(Literal("#"), fragment)),
)

hier_part = Choice(_authority_and_path, path_absolute, path_rootless, path_empty)

absolute_uri = Sequence(
    scheme, Literal(":"), hier_part, Optional(Sequence(Literal("?"), query))
)

uri = Sequence(
    scheme,
    Literal(":"),
    hier_part,
    Optional(Sequence(Literal("?"), query)),
    Optional(Sequence(Literal("#"), fragment)),
)

uri_reference = Choice(uri, relative_ref)

RfcName = TypingLiteral[
    "URI",
    "hier-part",
    "URI-reference",
    "absolute-URI",
    "relative-ref",
    "relative-part",
    "scheme",
    "authority",
    "userinfo",
    "host",
    "port",
    "port-number",
    "IP-literal",
    "IPvFuture",
    "IPv6address",
    "h16",
    "ls32",
    "IPv4address",
    "dec-octet",
    "reg-name",
    "path",
    "path-abempty",
    "path-absolute",
    "path-noscheme",
    "path-rootless",
    "path-empty",
    "segment",
    "segment-nz",
    "segment-nz-nc",
    "pchar",
    "query",
    "fragment",
    "pct-encoded",
    "unreserved",
    "reserved",
    "gen-delims",
    "sub-delims",
    "HEXDIG",
    "ALPHA",
    "DIGIT",
]

_rfc_names: Mapping[RfcName, Regex] = {
    "URI": uri,
    "hier-part": hier_part,
    "URI-reference": uri_reference,
    "absolute-URI": absolute_uri,
    "relative-ref": relative_ref,
    "relative-part": relative_part,
    "scheme": scheme,
    "authority": authority,
    "userinfo": userinfo,
    "host": host,
    "port": port,
    "port-number": port_number,
    "IP-literal": ip_literal,
    "IPvFuture": ipvfuture,
    "IPv6address": ipv6address,
    "h16": h16,
    "ls32": ls32,
    "IPv4address": ipv4address,
    "dec-octet": dec_octet,
    "reg-name": reg_name,
    "path": path,
    "path-abempty": path_abempty,
    "path-absolute": path_absolute,
    "path-noscheme": path_noscheme,
    "path-rootless": path_rootless,
    "path-empty": path_empty,
    "segment": segment,
    "segment-nz": segment_nz,
    "segment-nz-nc": segment_nz_nc,
    "pchar": pchar,
    "query": query,
    "fragment": fragment,
    "pct-encoded": pct_encoded,
    "unreserved": unreserved,
    "reserved": reserved,
    "gen-delims": gen_delims,
    "sub-delims": sub_delims,
    "HEXDIG": HEXDIG,
    "ALPHA": ALPHA,
    "DIGIT": DIGIT,
}


@lru_cache(maxsize=None)
def get_regex(rule_name: RfcName) -> re.Pattern[str]:
    """
    Get a compiled regex which matches an entire string against the named rule
    from RFC 3986.
    """
    if rule_name not in _rfc_names:
        raise ValueError("Unknown rule name: {0}".format(rule_name))
    return anchored(_rfc_names[rule_name]).compile()


def matches(rule_name: RfcName, text: str) -> bool:
    return get_regex(rule_name).match(text) is not None


def is_uri(text: str) -> bool:
    """
    Checks if text matches the "URI" rule: a scheme is required, a fragment
    is allowed.
    """
    return matches("URI", text)


def is_uri_reference(text: str) -> bool:
    """
    Checks if text matches the "URI-reference" rule, which also admits
    relative references such as ``../a`` or ``//host/p``.
    """
    return matches("URI-reference", text)


def is_absolute_uri(text: str) -> bool:
    return matches("absolute-URI", text)


def is_relative_ref(text: str) -> bool:
    return matches("relative-ref", text)


__all__ = [
    "get_regex",
    "matches",
    "is_uri",
    "is_uri_reference",
    "is_absolute_uri",
    "is_relative_ref",
    "RfcName",
] + [n for (n, v) in list(locals().items()) if not n.startswith("_") and isinstance(v, Regex)]
