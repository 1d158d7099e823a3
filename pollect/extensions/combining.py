from __future__ import annotations
import typing
from itertools import zip_longest
from ..types import *
from ..store import Store, values_of, entries_of, coerce_key

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _CombiningOperations(Generic[T]):
    """transforms that bring a second collection, mapping or iterable into the receiver"""

    def merge(self: 'Collection[T]', other: Any) -> 'Collection[Any]':
        """
        a list gains other's values at its end. a map takes a key-wise union
        where other's values win on collisions.
        """
        store = self._get_store()
        if store.is_list:
            return self._derive(Store.rebuild_as_list(store.values() + values_of(other)))
        return self._derive(Store.rebuild_as_map(store.entries() + entries_of(other)))

    def union(self: 'Collection[T]', other: Any) -> 'Collection[Any]':
        """key-wise union where the receiver's values win on collisions"""
        store = self._get_store()
        if store.is_list:
            values = store.values()
            # positions the receiver already holds are kept, the rest come from other
            return self._derive(Store.rebuild_as_list(values + values_of(other)[len(values):]))
        data = dict(store.raw)
        for key, value in entries_of(other):
            data.setdefault(coerce_key(key), value)
        return self._derive(Store(Shape.MAP, data))

    def zip(self: 'Collection[T]', other: Any) -> 'Collection[List[Any]]':
        """list of [value, other_value] pairs by position; missing other values are none"""
        values = self._get_store().values()
        # zip_longest pads the shorter side with none; the receiver's length is authoritative
        pairs = [[value, other_value] for value, other_value in zip_longest(values, values_of(other))]
        return self._derive(Store.rebuild_as_list(pairs[:len(values)]))

    def combine(self: 'Collection[T]', values: Any) -> 'Collection[Any]':
        """map whose keys are the receiver's values and whose values are values, by position"""
        keys = self._get_store().values()
        others = values_of(values)
        return self._derive(Store.rebuild_as_map(
            (key, others[i] if i < len(others) else None) for i, key in enumerate(keys)))
