"""Extensible, name-addressed collections of combinators.

``operators`` and ``getters`` are instances. Built-ins are fixed at import;
plugins may add new names but never replace an existing one.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from typing import Any

logger = logging.getLogger(__name__)

Combinator = Callable[..., Any]


class CombinatorNamespace(Mapping[str, Combinator]):
    """Attribute- and item-addressable registry of combinator factories."""

    def __init__(self, kind: str, builtins: Mapping[str, Combinator]) -> None:
        self._kind = kind
        self._items: dict[str, Combinator] = dict(builtins)
        self._builtin_names = frozenset(builtins)
        self._lock = threading.Lock()

    @property
    def kind(self) -> str:
        return self._kind

    def register(self, name: str, factory: Combinator) -> None:
        """Add *factory* under *name*.

        Raises:
            ValueError: *name* is already taken or not an identifier.
            TypeError: *factory* is not callable.
        """
        if not isinstance(name, str):
            msg = f"{self._kind} names must be strings, got {type(name).__name__}"
            raise TypeError(msg)
        if not callable(factory):
            msg = f"{self._kind} {name!r} must be callable, got {type(factory).__name__}"
            raise TypeError(msg)
        if not name.isidentifier() or name.startswith("_") or hasattr(type(self), name):
            msg = f"Invalid {self._kind} name: {name!r}"
            raise ValueError(msg)
        with self._lock:
            if name in self._items:
                msg = f"{self._kind} {name!r} is already registered"
                raise ValueError(msg)
            self._items[name] = factory
        logger.debug("Registered %s %s", self._kind, name)

    def unregister(self, name: str) -> None:
        """Remove a plugin-registered combinator. Built-ins cannot be removed."""
        if name in self._builtin_names:
            msg = f"Cannot unregister built-in {self._kind} {name!r}"
            raise ValueError(msg)
        with self._lock:
            self._items.pop(name, None)

    def is_builtin(self, name: str) -> bool:
        return name in self._builtin_names

    def __getattr__(self, name: str) -> Combinator:
        try:
            return self.__dict__["_items"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, name: str) -> Combinator:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(dict(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._items})

    def __repr__(self) -> str:
        return f"<{self._kind}s: {', '.join(self._items)}>"
