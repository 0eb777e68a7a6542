"""Field descriptor table for a dataclass under one annotation namespace.

``describe()`` walks the dataclass fields once, in declaration order, and
returns a ``FieldBinding`` for every field that carries a usable
annotation.  The binder works from this table instead of re-reading
annotations per field.
"""

import dataclasses
import logging
import sys
import typing
from dataclasses import dataclass
from typing import Any

from querybind.config import DEFAULT_CONFIG, BindConfig
from querybind.errors import NotAStructError
from querybind.kinds import Kind, classify
from querybind.tagging import TagOptions, lookup_tag, parse_tag

logger = logging.getLogger("querybind.binder")


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """One annotated dataclass field.

    ``kind`` is None when the declared type is not bindable; such
    entries stay in the table so callers can see what was skipped.
    ``settable`` is False for private (``_``-prefixed) fields and for
    every field of a frozen dataclass.
    """

    name: str
    key: str
    options: TagOptions
    kind: Kind | None
    settable: bool
    field: dataclasses.Field[Any]

    @property
    def supported(self) -> bool:
        return self.kind is not None


def _resolve_hints(cls: type) -> dict[str, Any]:
    """Resolve annotations, one field at a time if the class as a whole fails.

    ``get_type_hints`` fails on the first forward reference it cannot
    resolve, typically a name imported only under ``TYPE_CHECKING``.
    Each field is then resolved on its own against the module and class
    namespaces, so only the unresolvable fields are missing from the
    result and classify as unsupported.
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError):
        pass

    module = sys.modules.get(cls.__module__)
    globalns = vars(module) if module is not None else {}
    localns = dict(vars(cls))
    hints: dict[str, Any] = {}

    for f in dataclasses.fields(cls):
        holder = type(cls.__name__, (), {"__annotations__": {f.name: f.type}})
        try:
            hints.update(typing.get_type_hints(holder, globalns=globalns, localns=localns, include_extras=True))
        except (NameError, TypeError, AttributeError) as exc:
            logger.debug("%s.%s: annotation %r not resolved: %s", cls.__qualname__, f.name, f.type, exc)

    return hints


def describe(
    cls: type, tag_name: str, *, config: BindConfig = DEFAULT_CONFIG
) -> tuple[FieldBinding, ...]:
    """Build the binding table for dataclass *cls* under *tag_name*.

    Fields without an annotation in the namespace, with an empty key, or
    annotated with the exclusion sentinel are left out entirely.

    Raises:
        NotAStructError: *cls* is not a dataclass type.
    """
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        raise NotAStructError(cls, expected="dataclass type")

    hints = _resolve_hints(cls)
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    table: list[FieldBinding] = []

    for f in dataclasses.fields(cls):
        raw = lookup_tag(f.metadata, tag_name)
        if not raw or raw == config.exclude:
            continue
        key, options = parse_tag(raw, config.separator)
        if not key or key == config.exclude:
            continue
        table.append(
            FieldBinding(
                name=f.name,
                key=key,
                options=options,
                kind=classify(hints.get(f.name, f.type)),
                settable=not frozen and not f.name.startswith("_"),
                field=f,
            )
        )

    return tuple(table)
