"""Deferred entity placeholders.

A :class:`Lazy` stands in for an entity that has not been loaded yet. Reading
any attribute forces the load, so code that only reads attributes never needs
to know it holds a placeholder.

:class:`BatchLoader` builds placeholders that load together: every item
registered against the same batch function before the first one is forced is
handed to that function in a single call.

Usage::

    def load_projects(ids, loader):
        for row in db.fetch_projects(ids):
            loader(row.id, Project(full_path=row.full_path))

    first = BatchLoader.for_(1).batch(load_projects)
    second = BatchLoader.for_(2).batch(load_projects)
    first.full_path   # one call to load_projects with [1, 2]

Items share a batch when they pass the same function object (or the same
``key=``). A lambda written inline at each call site is a new object every
time, so pass one shared function or an explicit key.
"""

import logging
import threading
from collections.abc import Callable, Hashable
from typing import Any

logger = logging.getLogger(__name__)

_UNSET = object()


class Lazy:
    """Transparent placeholder around a zero-argument loader.

    The loader runs at most once; its result is cached. Attribute access,
    equality, truthiness and ``repr`` go to the loaded value.
    """

    __slots__ = ("_loader", "_value", "_lock")

    def __init__(self, loader: Callable[[], Any]):
        self._loader = loader
        self._value = _UNSET
        self._lock = threading.RLock()

    def resolve(self) -> Any:
        """Load the value if needed and return it. Blocks until loaded."""
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._loader()
                    self._loader = None
        return self._value

    @property
    def is_resolved(self) -> bool:
        return self._value is not _UNSET

    # isinstance() against entity classes sees the loaded value's class.
    @property
    def __class__(self):
        return type(self.resolve())

    def __getattr__(self, name: str) -> Any:
        return getattr(self.resolve(), name)

    def __eq__(self, other: object) -> bool:
        return self.resolve() == unwrap(other)

    def __hash__(self) -> int:
        return hash(self.resolve())

    def __bool__(self) -> bool:
        return bool(self.resolve())

    def __str__(self) -> str:
        return str(self.resolve())

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return "<Lazy (pending)>"
        return f"<Lazy {self._value!r}>"


def is_lazy(obj: Any) -> bool:
    """Return True if *obj* is a deferred placeholder."""
    return issubclass(type(obj), Lazy)


def unwrap(obj: Any) -> Any:
    """Return the concrete object behind *obj*, forcing placeholders."""
    while issubclass(type(obj), Lazy):
        obj = obj.resolve()
    return obj


# ---------------------------------------------------------------------------
# Batch loading
# ---------------------------------------------------------------------------

BatchFunction = Callable[[list[Any], Callable[[Any, Any], None]], None]


class _Batch:
    """Items waiting on one batch function, loaded together on first use."""

    def __init__(self, fn: BatchFunction):
        self.fn = fn
        self.items: list[Hashable] = []
        self.results: dict[Hashable, Any] | None = None
        self._lock = threading.RLock()

    def add(self, item: Hashable) -> None:
        if item not in self.items:
            self.items.append(item)

    def load(self) -> dict[Hashable, Any]:
        with self._lock:
            if self.results is None:
                results: dict[Hashable, Any] = {}

                def loader(item: Hashable, value: Any) -> None:
                    results[item] = value

                logger.debug(
                    "Running batch %s for %d item(s)",
                    getattr(self.fn, "__qualname__", repr(self.fn)),
                    len(self.items),
                )
                self.fn(list(self.items), loader)
                self.results = results
        return self.results


class BatchLoader:
    """Collects items and returns placeholders that load them in batches.

    Open batches are held at class level until one of their placeholders is
    resolved. Placeholders that are never resolved keep their batch, and its
    items, alive until :meth:`clear` is called.
    """

    _open_batches: dict[Hashable, _Batch] = {}
    _registry_lock = threading.Lock()

    def __init__(self, item: Hashable):
        self._item = item

    @classmethod
    def for_(cls, item: Hashable) -> "BatchLoader":
        return cls(item)

    def batch(self, fn: BatchFunction, *, key: Hashable | None = None) -> Lazy:
        """Register the item against *fn* and return its placeholder.

        Args:
            fn: Called as ``fn(items, loader)`` with every pending item; it
                calls ``loader(item, value)`` for each item it can load.
            key: Groups items into the same batch. Defaults to *fn* itself.

        Items the batch function never passes to ``loader`` resolve to None.
        """
        batch_key = fn if key is None else key
        cls = type(self)
        with cls._registry_lock:
            current = cls._open_batches.get(batch_key)
            if current is None:
                current = _Batch(fn)
                cls._open_batches[batch_key] = current
            current.add(self._item)

        item = self._item

        def load() -> Any:
            with cls._registry_lock:
                if cls._open_batches.get(batch_key) is current:
                    del cls._open_batches[batch_key]
            return current.load().get(item)

        return Lazy(load)

    @classmethod
    def pending_count(cls, key: Hashable) -> int:
        """Number of items waiting on the batch registered under *key*."""
        with cls._registry_lock:
            current = cls._open_batches.get(key)
            return len(current.items) if current else 0

    @classmethod
    def clear(cls) -> None:
        """Drop all open batches without running them."""
        with cls._registry_lock:
            cls._open_batches.clear()
