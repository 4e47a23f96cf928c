# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal service registry.

    Keys are usually interface/use-case classes, or plain strings for
    infrastructure handles such as collections. Singletons are stored as-is;
    factories are called on every `get`.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a shared instance under `key`"""
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory under `key`"""
        self._factories[key] = factory

    def get(self, key: Hashable) -> Any:
        """
        Resolve `key`, preferring singletons over factories

        Raises:
            KeyError: If nothing is registered under `key`
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise KeyError(f"No dependency registered for {name}")
