from __future__ import annotations

import logging

from importlib_metadata import version

from uriparts.exceptions import (
    AuthorityWithoutHostError,
    MalformedComponentError,
    PortWithoutHostError,
    UnparseableStructureError,
    UriError,
)
from uriparts.grammar import (
    is_absolute_uri,
    is_relative_ref,
    is_uri,
    is_uri_reference,
)
from uriparts.percent import decode, decode_bytes, encode, encode_bytes
from uriparts.splitter import RawComponents, split
from uriparts.uri import URI, Failed, Parsed, ParseResult, parse, try_parse
from uriparts.validator import validate

__version__ = version("uriparts")

__all__ = [
    "URI",
    "parse",
    "try_parse",
    "Parsed",
    "Failed",
    "ParseResult",
    "split",
    "validate",
    "RawComponents",
    "encode",
    "decode",
    "encode_bytes",
    "decode_bytes",
    "is_uri",
    "is_uri_reference",
    "is_absolute_uri",
    "is_relative_ref",
    "UriError",
    "UnparseableStructureError",
    "MalformedComponentError",
    "AuthorityWithoutHostError",
    "PortWithoutHostError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
