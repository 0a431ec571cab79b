"""Classpath scope filters.

A scope filter is named after the widest scope it admits and expands to the
exact set of artifact scopes it includes:

    compile          system, provided, compile
    runtime          compile, runtime
    compile+runtime  system, provided, compile, runtime
    runtime+system   system, compile, runtime
    test             system, provided, compile, runtime, test
"""

from dataclasses import dataclass
from typing import FrozenSet

from ..errors import ConfigError
from .models import Artifact, ArtifactScope

DEFAULT_CLASSPATH_SCOPE = "runtime"

_S = ArtifactScope

SCOPE_FILTERS: dict[str, FrozenSet[ArtifactScope]] = {
    "compile": frozenset({_S.SYSTEM, _S.PROVIDED, _S.COMPILE}),
    "runtime": frozenset({_S.COMPILE, _S.RUNTIME}),
    "compile+runtime": frozenset({_S.SYSTEM, _S.PROVIDED, _S.COMPILE, _S.RUNTIME}),
    "runtime+system": frozenset({_S.SYSTEM, _S.COMPILE, _S.RUNTIME}),
    "test": frozenset(ArtifactScope),
}


@dataclass(frozen=True)
class ScopeFilter:
    """Admits artifacts whose scope belongs to a named scope set."""

    name: str
    scopes: FrozenSet[ArtifactScope]

    @classmethod
    def from_name(cls, name: str) -> "ScopeFilter":
        """Create the filter for a scope name.

        Raises:
            ConfigError: If the name is not a known classpath scope.
        """
        scopes = SCOPE_FILTERS.get(name)
        if scopes is None:
            known = ", ".join(SCOPE_FILTERS)
            raise ConfigError(f"Invalid classpath scope: {name} (expected one of: {known})")
        return cls(name=name, scopes=scopes)

    def includes(self, artifact: Artifact) -> bool:
        return artifact.scope in self.scopes
