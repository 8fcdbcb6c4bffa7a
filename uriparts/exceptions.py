from __future__ import annotations

from typing_extensions import Literal

from uriparts.constants import Component

ErrorKind = Literal[
    "unparseable",
    "malformed-component",
    "authority-without-host",
    "port-without-host",
]


class UriError(ValueError):
    kind: ErrorKind


class UnparseableStructureError(UriError):
    kind: ErrorKind = "unparseable"

    @classmethod
    def from_text(cls, text: str) -> UnparseableStructureError:
        return cls("Failed to split a URI from the string: {0!r}".format(text))


class MalformedComponentError(UriError):
    kind: ErrorKind = "malformed-component"
    component: Component
    value: str

    def __init__(self, component: Component, value: str) -> None:
        super(MalformedComponentError, self).__init__(
            "Invalid {0}: {1!r}".format(component, value)
        )
        self.component = component
        self.value = value

    def __reduce__(self) -> tuple[type[MalformedComponentError], tuple[str, str]]:
        return type(self), (self.component, self.value)


class AuthorityWithoutHostError(UriError):
    kind: ErrorKind = "authority-without-host"


class PortWithoutHostError(UriError):
    kind: ErrorKind = "port-without-host"
