"""Test how parameter names are declared on and discovered from implementations"""

import pytest

from svclocator import inject
from svclocator.metadata import _get_meta, parameter_names_of


def test_params() -> None:
    @inject.params("$logger", "level")
    class Handler:
        def __init__(self, logger, level):
            pass

    assert parameter_names_of(Handler) == ("$logger", "level")


def test_params_on_factory() -> None:
    @inject.params("$logger")
    def make_handler(logger):
        return logger

    assert parameter_names_of(make_handler) == ("$logger",)


def test_params_empty() -> None:
    @inject.params()
    class NoArgs:
        def __init__(self, ignored=None):
            pass

    assert parameter_names_of(NoArgs) == ()


def test_params_invalid() -> None:
    with pytest.raises(TypeError):
        inject.params("$logger", "")
    with pytest.raises(TypeError):
        inject.params(None)


def test_source() -> None:
    @inject.source("function Handler($logger, level) {}")
    class Handler:
        pass

    assert parameter_names_of(Handler) == ("$logger", "level")


def test_source_custom_sigil_and_keyword() -> None:
    @inject.source("def handler(§logger, level):")
    def handler(logger, level):
        pass

    assert parameter_names_of(handler, keyword="def", sigil="§") == ("§logger", "level")
    assert parameter_names_of(handler) == ()


def test_source_malformed() -> None:
    @inject.source("function ($first, second = 2, third) {}")
    def partial(first, second=2, third=3):
        pass

    assert parameter_names_of(partial) == ("$first", "second")


def test_source_invalid() -> None:
    with pytest.raises(TypeError):
        inject.source(None)


def test_params_take_precedence_over_source() -> None:
    @inject.source("function ($a) {}")
    @inject.params("$b")
    class Both:
        pass

    assert parameter_names_of(Both) == ("$b",)


def test_explicit_names_take_precedence() -> None:
    @inject.params("$b")
    class Declared:
        pass

    assert parameter_names_of(Declared, ["$c", "d"]) == ("$c", "d")
    assert parameter_names_of(Declared, []) == ()


def test_signature_fallback() -> None:
    class Signature:
        def __init__(self, first, second=2, *args, third, **kwargs):
            pass

    def factory(a, b, /, c):
        pass

    assert parameter_names_of(Signature) == ("first", "second")
    assert parameter_names_of(factory) == ("a", "b", "c")
    assert parameter_names_of(lambda: None) == ()


def test_signature_unavailable() -> None:
    class Opaque:
        __signature__ = "not a signature"

        def __call__(self):
            pass

    assert parameter_names_of(Opaque()) == ()


def test_inherited_declarations() -> None:
    @inject.params("$server", "path")
    class Base:
        def __init__(self, server, path):
            pass

    class Inherits(Base):
        pass

    @inject.params("$server")
    class Overrides(Base):
        def __init__(self, server):
            super().__init__(server, "/")

    assert parameter_names_of(Inherits) == ("$server", "path")
    assert parameter_names_of(Overrides) == ("$server",)
    assert parameter_names_of(Base) == ("$server", "path")
    assert _get_meta(Overrides, include_bases=False) is not _get_meta(Base, include_bases=False)


def test_source_on_subclass_keeps_base_names() -> None:
    @inject.params("$server")
    class Base:
        pass

    @inject.source("function ($other) {}")
    class Child(Base):
        pass

    # names declared with params win, even when inherited
    assert parameter_names_of(Child) == ("$server",)
    assert _get_meta(Base).source is None


def test_dependency() -> None:
    assert inject.dependency("logger") == "$logger"
    assert inject.dependency("logger", sigil="§") == "§logger"
