"""Binding parsed query values onto dataclass fields.

Populates dataclass fields from a parsed query multi-map, converting
string values to the annotated field types.  Which query key feeds which
field is declared per field under a caller-chosen namespace::

    from dataclasses import dataclass, field
    from urllib.parse import parse_qs

    from querybind import bind, tags

    @dataclass
    class Search:
        name: str = field(default="", metadata=tags(q="name"))
        count: int = field(default=0, metadata=tags(q="count"))
        tag: list[str] = field(default_factory=list, metadata=tags(q="tag"))

    search = Search()
    bound = bind(parse_qs("name=John+Doe&count=42&tag=x&tag=y"), search, "q")
    # bound == ["name", "count", "tag"]

Conversion failures never abort a bind.  A malformed scalar leaves the
field as it was (booleans become ``False``); a malformed sequence element
holds the element type's zero value.  The key is reported either way,
since the result lists what was *attempted*.  Unsupported field types are
skipped and not reported.
"""

import dataclasses
import logging
from collections.abc import Sequence
from typing import Any

from querybind._internal.multimap import Values, lookup
from querybind.config import DEFAULT_CONFIG, BindConfig
from querybind.errors import NotAStructError
from querybind.fields import FieldBinding, describe
from querybind.kinds import Kind, Scalar

logger = logging.getLogger("querybind.binder")

# Marks "conversion failed, keep what is there"
_UNCHANGED = object()


class Binder:
    """Binds multi-map values onto dataclasses under one ``BindConfig``.

    Holds no per-call state, so one instance can be shared freely.
    The module-level ``bind()`` and ``extract()`` use a default binder.
    """

    __slots__ = ("config",)

    def __init__(self, config: BindConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    def __repr__(self) -> str:
        return f"Binder({self.config!r})"

    def bind(self, values: Values, target: Any, tag_name: str) -> list[str]:
        """Populate *target*'s annotated fields in place.

        Args:
            values: Parsed query data, key -> ordered values.
            target: A dataclass instance.
            tag_name: Metadata namespace holding each field's binding key.

        Returns:
            Keys of the fields that were matched and attempted, in field
            declaration order.

        Raises:
            NotAStructError: *target* is not a dataclass instance.  Nothing
                is mutated.
        """
        if isinstance(target, type) or not dataclasses.is_dataclass(target):
            raise NotAStructError(target)

        bound: list[str] = []
        for entry in describe(type(target), tag_name, config=self.config):
            if not entry.settable:
                continue
            found = lookup(values, entry.key)
            if found is None:
                continue
            if entry.kind is None:
                _log_unsupported(entry)
                continue

            attempted, value = self._convert(entry, entry.kind, found)
            if value is not _UNCHANGED:
                setattr(target, entry.name, value)
            if attempted:
                bound.append(entry.key)

        return bound

    def extract[T](self, cls: type[T], values: Values, tag_name: str) -> tuple[T, list[str]]:
        """Create a new *cls* instance from *values*.

        Works for frozen and slotted dataclasses.  Fields that are not
        bound, or whose scalar conversion fails, take their dataclass
        default.

        Returns:
            The new instance and the bound keys, in declaration order.

        Raises:
            NotAStructError: *cls* is not a dataclass type.
            TypeError: A required field (no default) was not bound.
        """
        kwargs: dict[str, Any] = {}
        bound: list[str] = []

        for entry in describe(cls, tag_name, config=self.config):
            if not entry.field.init or entry.name.startswith("_"):
                continue
            found = lookup(values, entry.key)
            if found is None:
                continue
            if entry.kind is None:
                _log_unsupported(entry)
                continue

            attempted, value = self._convert(entry, entry.kind, found)
            if value is not _UNCHANGED:
                kwargs[entry.name] = value
            if attempted:
                bound.append(entry.key)

        return cls(**kwargs), bound

    # -- Conversion --

    def _convert(
        self, entry: FieldBinding, kind: Kind, found: Sequence[str]
    ) -> tuple[bool, Any]:
        """Convert *found* for one field.

        Returns ``(attempted, value)`` where *value* may be ``_UNCHANGED``.
        """
        scalar = kind.scalar
        if scalar is None:
            first = found[0] if found else ""
            try:
                data = first.encode(self.config.encoding)
            except UnicodeEncodeError as exc:
                logger.debug("%s=%r not bound to %s: %s", entry.key, first, entry.name, exc)
                return True, _UNCHANGED
            return True, bytearray(data) if kind.container is bytearray else data

        if kind.shape == "sequence":
            items = [_element(entry, scalar, text) for text in found]
            container = kind.container or list
            return bool(items), container(items)

        first = found[0] if found else ""
        return True, _scalar(entry, scalar, first)


def _scalar(entry: FieldBinding, scalar: Scalar, text: str) -> Any:
    try:
        return scalar.parse(text)
    except ValueError as exc:
        logger.debug("%s=%r not bound to %s: %s", entry.key, text, entry.name, exc)
        return scalar.zero if scalar.lenient else _UNCHANGED


def _element(entry: FieldBinding, scalar: Scalar, text: str) -> Any:
    try:
        return scalar.parse(text)
    except ValueError as exc:
        logger.debug("%s=%r element of %s set to %r: %s", entry.key, text, entry.name, scalar.zero, exc)
        return scalar.zero


def _log_unsupported(entry: FieldBinding) -> None:
    logger.debug(
        "%s: field %s has unsupported type %r, skipped",
        entry.key,
        entry.name,
        entry.field.type,
    )


_default = Binder()


def bind(values: Values, target: Any, tag_name: str, *, config: BindConfig | None = None) -> list[str]:
    """Populate *target*'s annotated fields in place; see ``Binder.bind``."""
    binder = Binder(config) if config is not None else _default
    return binder.bind(values, target, tag_name)


def extract[T](
    cls: type[T], values: Values, tag_name: str, *, config: BindConfig | None = None
) -> tuple[T, list[str]]:
    """Create a new *cls* instance from *values*; see ``Binder.extract``."""
    binder = Binder(config) if config is not None else _default
    return binder.extract(cls, values, tag_name)
