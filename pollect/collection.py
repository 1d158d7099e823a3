from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

from .types import *
from .store import Store

# --- operation groups ---
from .extensions.query import _QueryOperations
from .extensions.filtering import _FilteringOperations
from .extensions.reshaping import _ReshapingOperations
from .extensions.combining import _CombiningOperations
from .extensions.slicing import _SlicingOperations
from .extensions.ordering import _OrderingOperations
from .extensions.stats import _StatsOperations
from .extensions.mutation import _MutationOperations
from .extensions.terminal import _TerminalOperations

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]

# --- abstract base class ---

class ICollection(ABC, Generic[T]):
    @abstractmethod
    def _get_store(self) -> Store:
        """get the backing store"""
        pass

# --- base collection implementation ---

class _BaseCollection(ICollection[T]):
    def __init__(self, items: Any = None, rng: RandomSource = None):
        """wrap a list, tuple, mapping or another collection; the top level is copied"""
        if isinstance(items, _BaseCollection):
            items = items.all()
        self._store = Store.from_items(items)
        self._rng = rng

    @classmethod
    def _wrap(cls, store: Store, rng: RandomSource = None) -> 'Collection[Any]':
        """adopt an already-built store without copying it"""
        instance = cls.__new__(cls)
        instance._store = store
        instance._rng = rng
        return instance

    def _get_store(self) -> Store:
        return self._store

    def _derive(self, store: Store) -> 'Collection[Any]':
        """wrap a freshly built store in a new collection sharing this one's random source"""
        if store.shape is not self._store.shape:
            logger.debug("derived %s-shaped collection from %s-shaped receiver",
                         store.shape.value, self._store.shape.value)
        return type(self)._wrap(store, self._rng)

    @property
    def _random_source(self) -> np.random.Generator:
        """the injected random source, built on first use from a seed or fresh entropy"""
        if not isinstance(self._rng, np.random.Generator):
            logger.debug("creating %s random source",
                         "seeded" if self._rng is not None else "entropy-seeded")
            self._rng = np.random.default_rng(self._rng)
        return self._rng

    @property
    def shape(self) -> Shape:
        return self._store.shape

    def __iter__(self) -> Iterator[T]:
        return iter(self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Collection({self._store.shape.value}, {self._store.raw!r})"

# --- main collection class ---

class Collection(
    _BaseCollection[T],
    _QueryOperations[T],
    _FilteringOperations[T],
    _ReshapingOperations[T],
    _CombiningOperations[T],
    _SlicingOperations[T],
    _OrderingOperations[T],
    _StatsOperations[T],
    _MutationOperations[T],
    _TerminalOperations[T]
):
    """a chainable, laravel-style collection over a list or a keyed mapping."""
    pass
