"""Key -> action resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from rtt.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Resolves key tokens against a registry, caching per revision."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._revision = -1
        self._cache: Dict[str, Optional[ResolutionMatch]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": token},
        ) as handle:
            match = self._lookup(token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", match=match)

    def reset(self) -> None:
        self._cache.clear()
        self._revision = -1

    def _lookup(self, token: str) -> Optional[ResolutionMatch]:
        revision = self._registry.revision()
        if revision != self._revision:
            self._cache.clear()
            self._revision = revision
        if token not in self._cache:
            binding = self._registry.binding_for(token)
            if binding is None:
                self._cache[token] = None
            else:
                action = self._registry.get_action(binding.action_id)
                self._cache[token] = ResolutionMatch(binding=binding, action=action)
        return self._cache[token]


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
