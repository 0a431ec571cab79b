"""Unit tests for classpath scope filters."""

import pytest

from gwtdev.errors import ConfigError
from gwtdev.reactor.models import ArtifactScope
from gwtdev.reactor.scopes import ScopeFilter

S = ArtifactScope


@pytest.mark.parametrize(
    "name,expected",
    [
        ("compile", {S.SYSTEM, S.PROVIDED, S.COMPILE}),
        ("runtime", {S.COMPILE, S.RUNTIME}),
        ("compile+runtime", {S.SYSTEM, S.PROVIDED, S.COMPILE, S.RUNTIME}),
        ("runtime+system", {S.SYSTEM, S.COMPILE, S.RUNTIME}),
        ("test", {S.SYSTEM, S.PROVIDED, S.COMPILE, S.RUNTIME, S.TEST}),
    ],
)
def test_scope_expansion(name, expected):
    assert ScopeFilter.from_name(name).scopes == expected


def test_unknown_scope_raises():
    with pytest.raises(ConfigError, match="Invalid classpath scope: import"):
        ScopeFilter.from_name("import")


def test_includes(make_artifact):
    runtime = ScopeFilter.from_name("runtime")
    assert runtime.includes(make_artifact("a", scope=S.RUNTIME))
    assert not runtime.includes(make_artifact("a", scope=S.TEST))
    assert not runtime.includes(make_artifact("a", scope=S.PROVIDED))
