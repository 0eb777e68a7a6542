"""querybind: bind parsed query strings onto dataclass fields.

Each field names its query key under a namespace of your choosing;
values are converted to the field's declared type.

Basic usage::

    from dataclasses import dataclass, field
    from urllib.parse import parse_qs

    from querybind import bind, tags

    @dataclass
    class Order:
        symbol: str = field(default="", metadata=tags(url="symbol"))
        tags: list[str] = field(default_factory=list, metadata=tags(url="tag"))

    order = Order()
    bound = bind(parse_qs("symbol=ABC&tag=x&tag=y"), order, "url")

Frozen dataclasses::

    from querybind import extract

    order, bound = extract(Order, parse_qs("symbol=ABC"), "url")
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "BindConfig",
    "Binder",
    "ConfigurationError",
    "FieldBinding",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "MultiValueMapping",
    "NotAStructError",
    "QueryBindError",
    "TagOptions",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "bind",
    "describe",
    "extract",
    "parse_tag",
    "tags",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BindConfig": "querybind.config",
    "Binder": "querybind.binder",
    "bind": "querybind.binder",
    "extract": "querybind.binder",
    "ConfigurationError": "querybind.errors",
    "NotAStructError": "querybind.errors",
    "QueryBindError": "querybind.errors",
    "FieldBinding": "querybind.fields",
    "describe": "querybind.fields",
    "Float32": "querybind.kinds",
    "Float64": "querybind.kinds",
    "Int8": "querybind.kinds",
    "Int16": "querybind.kinds",
    "Int32": "querybind.kinds",
    "Int64": "querybind.kinds",
    "UInt": "querybind.kinds",
    "UInt8": "querybind.kinds",
    "UInt16": "querybind.kinds",
    "UInt32": "querybind.kinds",
    "UInt64": "querybind.kinds",
    "MultiValueMapping": "querybind._internal.multimap",
    "TagOptions": "querybind.tagging",
    "parse_tag": "querybind.tagging",
    "tags": "querybind.tagging",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import querybind`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
