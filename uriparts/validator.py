"""
Validation and normalization of the raw components produced by
``uriparts.splitter.split``.

Components are checked one at a time, in URI order, against the rules of
RFC 3986 section 3. The first component to fail raises; nothing is repaired.
"""
from __future__ import annotations

import logging
from typing import Sequence

from uriparts import grammar, percent
from uriparts.constants import Component
from uriparts.exceptions import (
    AuthorityWithoutHostError,
    MalformedComponentError,
    PortWithoutHostError,
)
from uriparts.splitter import RawComponents
from uriparts.uri import URI

__all__ = ["validate"]

log = logging.getLogger(__name__)


def _check(component: Component, rules: Sequence[grammar.RfcName], value: str) -> None:
    if not any(grammar.matches(rule, value) for rule in rules):
        log.debug("rejected %s %r, expected one of: %s", component, value, rules)
        raise MalformedComponentError(component, value)


def _decode_host(raw_host: str) -> str:
    if raw_host.startswith("["):
        return raw_host
    return percent.decode(raw_host)


def validate(raw: RawComponents) -> URI:
    """
    Create a URI from raw components, validating each against RFC 3986.

    Empty components are treated the same as absent ones, except that an
    empty host still marks the presence of an authority (as in
    ``file:///etc/hosts``).

    Raises:
        MalformedComponentError: if a component doesn't match its grammar rule.
        AuthorityWithoutHostError: if user information is given without a host.
        PortWithoutHostError: if a port is given without a host.
    """
    scheme = canonical_scheme = None
    user_information = raw_userinfo = None
    host = raw_host = None
    port = None
    query = fragment = None
    # An empty URI is a valid relative reference
    is_absolute, is_relative = False, True
    has_authority = False

    if raw.scheme:
        _check("scheme", ("scheme",), raw.scheme)
        scheme = raw.scheme
        canonical_scheme = raw.scheme.lower()
        is_absolute, is_relative = True, False

    if raw.userinfo:
        _check("userinfo", ("userinfo",), raw.userinfo)
        raw_userinfo = raw.userinfo
        user_information = percent.decode(raw.userinfo)
        has_authority = True

    if raw.host:
        _check("host", ("host",), raw.host)
        raw_host = raw.host
        host = _decode_host(raw.host)
        has_authority = True
    elif has_authority:
        raise AuthorityWithoutHostError(
            "User information given without a host: {0!r}".format(raw.userinfo)
        )
    elif raw.host is not None:
        raw_host = host = ""

    # An empty port is left unset, there's no default port lookup
    if raw.port:
        _check("port", ("port-number",), raw.port)
        if not has_authority:
            raise PortWithoutHostError(
                "Port given without a host: {0!r}".format(raw.port)
            )
        port = int(raw.port)

    # Any of the four path forms, whatever precedes the path
    if raw.path:
        _check("path", ("path",), raw.path)

    if raw.query:
        _check("query", ("query",), raw.query)
        query = raw.query

    if raw.fragment:
        _check("fragment", ("fragment",), raw.fragment)
        fragment = raw.fragment
        is_absolute, is_relative = False, False

    return URI(
        scheme=scheme,
        canonical_scheme=canonical_scheme,
        user_information=user_information,
        raw_userinfo=raw_userinfo,
        host=host,
        raw_host=raw_host,
        port=port,
        path=raw.path,
        query=query,
        fragment=fragment,
        is_absolute=is_absolute,
        is_relative=is_relative,
    )
