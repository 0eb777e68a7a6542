"""Binding configuration.

BindConfig is a frozen dataclass, immutable after creation and shareable
between threads and binders.
"""

import codecs
from dataclasses import dataclass

from querybind.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class BindConfig:
    """Binding configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BindConfig(encoding="latin-1")
    """

    # Annotation format: ``key,opt1,opt2``
    separator: str = ","
    exclude: str = "-"  # Annotation value that marks a field as never bindable

    # Byte fields are filled from the first value encoded with this codec
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "BindConfig.separator must be a non-empty string"
            raise ConfigurationError(msg)
        if not self.exclude:
            msg = "BindConfig.exclude must be a non-empty string"
            raise ConfigurationError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            msg = f"BindConfig.encoding: unknown codec {self.encoding!r}"
            raise ConfigurationError(msg) from None


DEFAULT_CONFIG = BindConfig()
