"""Field annotations under named namespaces.

A field's binding annotation lives in its dataclass ``metadata``, keyed
by namespace.  Several namespaces coexist on one field, so the same
record can be bound from a query string and from a form with different
keys::

    @dataclass
    class Search:
        term: str = field(default="", metadata=tags(q="term", form="search_term"))
        page: int = field(default=1, metadata=tags(q="page,omitempty"))
        secret: str = field(default="", metadata=tags(q="-"))

Each annotation value is ``key`` or ``key,<modifiers>``.  Only the key
is used for binding; modifiers are parsed into ``TagOptions`` and kept
for callers that want them.
"""

from collections.abc import Mapping
from dataclasses import dataclass


def tags(**namespaces: str) -> dict[str, str]:
    """Build a dataclass ``metadata`` mapping from namespace keywords."""
    return dict(namespaces)


@dataclass(frozen=True, slots=True)
class TagOptions:
    """Modifiers that follow the key in an annotation value."""

    names: tuple[str, ...] = ()

    def contains(self, name: str) -> bool:
        """True if *name* is one of the modifiers."""
        return name in self.names

    def __bool__(self) -> bool:
        return bool(self.names)


def parse_tag(value: str, separator: str = ",") -> tuple[str, TagOptions]:
    """Split an annotation value into its key and modifiers.

    ``parse_tag("page,omitempty") == ("page", TagOptions(("omitempty",)))``
    """
    key, _, rest = value.partition(separator)
    if not rest:
        return key, TagOptions()
    names = tuple(name for name in rest.split(separator) if name)
    return key, TagOptions(names)


def lookup_tag(metadata: Mapping[str, object], namespace: str) -> str:
    """Return the raw annotation under *namespace*, or ``""`` if absent.

    Non-string metadata under the namespace is treated as absent.
    """
    value = metadata.get(namespace, "")
    return value if isinstance(value, str) else ""
