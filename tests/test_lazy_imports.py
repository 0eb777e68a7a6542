"""Tests for querybind.__init__: lazy import registry covers all public names."""

import pytest

import querybind


@pytest.mark.parametrize("name", querybind.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(querybind, name)
    assert obj is not None, f"querybind.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    """Every name in __all__ has a corresponding entry in _LAZY_IMPORTS."""
    missing = set(querybind.__all__) - set(querybind._LAZY_IMPORTS)
    assert not missing, (
        f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}. "
        f"Add them to _LAZY_IMPORTS in querybind/__init__.py."
    )


def test_lazy_registry_no_extras() -> None:
    """Every name in _LAZY_IMPORTS should be in __all__ (public API contract)."""
    extras = set(querybind._LAZY_IMPORTS) - set(querybind.__all__)
    assert not extras, (
        f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}. "
        f"Either add them to __all__ or remove from _LAZY_IMPORTS."
    )


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        querybind.__getattr__("ThisDoesNotExist")


def test_tags_is_the_helper_function() -> None:
    """``querybind.tags`` stays the metadata helper even after submodules load."""
    import querybind.binder  # noqa: F401

    assert callable(querybind.tags)
    assert querybind.tags(q="x") == {"q": "x"}


def test_top_level_bind() -> None:
    from dataclasses import dataclass, field

    @dataclass
    class Page:
        number: int = field(default=1, metadata=querybind.tags(q="page"))

    page = Page()
    assert querybind.bind({"page": ["3"]}, page, "q") == ["page"]
    assert page.number == 3


def test_sized_aliases_stay_annotated() -> None:
    """Sized numeric exports are ``Annotated`` aliases carrying a width marker."""
    from typing import Annotated, get_args, get_origin

    from querybind.kinds import Width

    assert get_origin(querybind.Int8) is Annotated
    assert get_args(querybind.Int8) == (int, Width(8))
    assert get_args(querybind.UInt) == (int, Width(64, signed=False))
    assert get_args(querybind.Float32) == (float, Width(32))


def test_version_is_pep440() -> None:
    assert querybind.__version__ == "0.1.0.dev0"
