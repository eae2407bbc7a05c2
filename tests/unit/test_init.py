from __future__ import annotations

import httpwrap


def test_version() -> None:
    assert isinstance(httpwrap.__version__, str)


def test_all_exports_exist() -> None:
    for name in httpwrap.__all__:
        assert hasattr(httpwrap, name), name
