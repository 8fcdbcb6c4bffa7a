from __future__ import annotations

import string

from typing_extensions import Final, Literal

# RFC 3986 section 2.3
UNRESERVED_CHARACTERS: Final = string.ascii_letters + string.digits + "-._~"
# RFC 3986 section 2.2
SUB_DELIMITERS: Final = "!$&'()*+,;="
GENERAL_DELIMITERS: Final = ":/?#[]@"

MIN_PORT: Final = 1
MAX_PORT: Final = 65535

Component = Literal[
    "scheme", "userinfo", "host", "port", "path", "query", "fragment"
]

COMPONENTS: Final[tuple[Component, ...]] = (
    "scheme",
    "userinfo",
    "host",
    "port",
    "path",
    "query",
    "fragment",
)
