"""
Structural splitting of URI-references, based on the regular expression in
`Appendix B of RFC 3986`_, extended so the authority is split into its user
information, host and port.

No validation happens here: ``split()`` only finds where each component
would be if the string was a URI.

>>> split("http://user@example.com:8042/over/there?name=ferret#nose")
... # doctest: +NORMALIZE_WHITESPACE
RawComponents(scheme='http', userinfo='user', host='example.com', port='8042',
              path='/over/there', query='name=ferret', fragment='nose')

.. _Appendix B of RFC 3986: https://tools.ietf.org/html/rfc3986#appendix-B
"""
from __future__ import annotations

import logging
import re
from typing import NamedTuple

from typing_extensions import Final

from uriparts.exceptions import UnparseableStructureError
from uriparts.regexbuilder import (
    AnyChar,
    Capture,
    Choice,
    Literal,
    NegatedSet,
    OneOrMore,
    Optional,
    Sequence,
    ZeroOrMore,
    anchored,
)

__all__ = ["RawComponents", "split", "SPLIT_PATTERN"]

log = logging.getLogger(__name__)


class RawComponents(NamedTuple):
    """
    The undecoded, unvalidated pieces of a URI-reference.

    A component is None when the delimiter introducing it is absent, e.g.
    ``host`` is None without a ``//``, ``query`` is None without a ``?``.
    ``path`` is always present, possibly empty.
    """

    scheme: str | None = None
    userinfo: str | None = None
    host: str | None = None
    port: str | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None


# An IP-literal is taken whole so the colons inside it don't start the port.
_host = Choice(
    Sequence(Literal("["), ZeroOrMore(NegatedSet(*"/?#]")), Literal("]")),
    ZeroOrMore(NegatedSet(*"/?#:")),
)

# Runs up to the last @ of the authority
_userinfo = Capture(ZeroOrMore(NegatedSet(*"/?#")), name="userinfo")
_port = Capture(ZeroOrMore(NegatedSet(*"/?#")), name="port")

_authority = Sequence(
    Literal("//"),
    Optional(Sequence(_userinfo, Literal("@"))),
    Capture(_host, name="host"),
    Optional(Sequence(Literal(":"), _port)),
)

_uri_reference = Sequence(
    Optional(Sequence(Capture(OneOrMore(NegatedSet(*":/?#")), name="scheme"),
                      Literal(":"))),
    Optional(_authority),
    Capture(ZeroOrMore(NegatedSet(*"?#")), name="path"),
    Optional(Sequence(Literal("?"), Capture(ZeroOrMore(NegatedSet("#")), name="query"))),
    Optional(Sequence(Literal("#"), Capture(ZeroOrMore(AnyChar()), name="fragment"))),
)

SPLIT_PATTERN: Final = anchored(_uri_reference).compile(re.DOTALL)


def split(text: str) -> RawComponents:
    """
    Split ``text`` into the seven raw components of a URI-reference.

    Raises:
        UnparseableStructureError: if ``text`` isn't shaped like a
            URI-reference at all.
    """
    match = SPLIT_PATTERN.match(text)
    if match is None:
        raise UnparseableStructureError.from_text(text)

    raw = RawComponents(**match.groupdict())
    log.debug("split %r into %r", text, raw)
    return raw
