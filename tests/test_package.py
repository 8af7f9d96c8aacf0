from __future__ import annotations

import types

import datadome


def test_public_names_are_importable() -> None:
    for name in datadome.__all__:
        assert hasattr(datadome, name), name


def test_public_api_lists_no_submodules() -> None:
    modules = [name for name in datadome.__all__ if isinstance(getattr(datadome, name, None), types.ModuleType)]

    assert modules == []


def test_star_import_exposes_the_public_api() -> None:
    namespace: dict = {}
    exec("from datadome import *", namespace)

    assert namespace["classify"]("08031234567").is_valid
    assert namespace["extract"]("0803 123 4567") == ["08031234567"]
