from __future__ import annotations

from typing import Dict, Generic, List, TypeVar


T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """Name -> factory table; ``kind`` only labels error messages."""

    def __init__(self, kind: str = "plugin") -> None:
        self.kind = kind
        self._factories: Dict[str, T] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def register(self, name: str, factory: T) -> None:
        if not name:
            raise ValueError(f"A {self.kind} needs a non-empty name.")
        if name in self._factories:
            raise ValueError(f"{self.kind.capitalize()} '{name}' is already registered.")
        self._factories[name] = factory

    def get(self, name: str) -> T:
        if name not in self._factories:
            raise KeyError(f"{self.kind.capitalize()} '{name}' is not registered.")
        return self._factories[name]

    def names(self) -> List[str]:
        return sorted(self._factories)
