"""querybind exception hierarchy.

Shared across the binder, the field table, and configuration so every
module raises and callers catch the same types.
"""


class QueryBindError(Exception):
    """Base for all querybind-specific errors."""


class ConfigurationError(QueryBindError, ValueError):
    """Raised when a ``BindConfig`` is invalid.

    Caught at construction time, before any binding happens.
    """


class NotAStructError(QueryBindError, TypeError):
    """The binding target is not record-shaped.

    ``bind()`` requires a dataclass instance; ``extract()`` and
    ``describe()`` require a dataclass type.  Raised before any field
    is touched, so the target is never partially mutated.
    """

    def __init__(self, target: object, expected: str = "dataclass instance") -> None:
        self.target_type: type = target if isinstance(target, type) else type(target)
        self.expected = expected
        name = getattr(self.target_type, "__qualname__", repr(self.target_type))
        super().__init__(f"Cannot bind values to {name}: expected a {expected}")
