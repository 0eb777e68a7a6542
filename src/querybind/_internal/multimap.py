"""MultiValueMapping protocol and value lookup for binding input.

Binding accepts two shapes of parsed query data:

- a plain ``Mapping[str, Sequence[str]]`` such as ``parse_qs()`` output
  (a bare ``str`` value counts as a single value)
- any multi-valued mapping exposing ``get_list``, structurally matched
  by ``MultiValueMapping`` (framework ``QueryParams``/``FormData`` types)
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Structurally compatible with ``Mapping[str, str]`` plus ``get_list``.
    Defined with explicit dunder methods because Protocols cannot
    inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


type Values = Mapping[str, Sequence[str] | str] | MultiValueMapping


def lookup(values: Values, key: str) -> Sequence[str] | None:
    """Return every value for *key* in order, or None if *key* is absent.

    A present key may map to an empty sequence.  The returned sequence
    belongs to the caller's mapping and must not be mutated.
    """
    if key not in values:
        return None
    if isinstance(values, MultiValueMapping):
        return values.get_list(key)
    found = values[key]
    if isinstance(found, str):
        return (found,)
    return found
