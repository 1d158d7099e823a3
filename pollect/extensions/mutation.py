from __future__ import annotations
import typing
import logging
from ..types import *
from ..resolvers import adapt_callback
from ..store import Store, store_of, coerce_key
from .slicing import _bounds

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


class _MutationOperations(Generic[T]):
    """
    in-place operations. these are the only ones that write to the receiver's store;
    they return the receiver for chaining unless they hand back an extracted value.
    """

    def push(self: 'Collection[T]', value: T) -> 'Collection[T]':
        """append a value to a list-shaped collection"""
        store = self._get_store()
        if store.is_map:
            logger.debug("rejected push() on a map-shaped collection")
            raise TypeError("push() requires a list-shaped collection; use put() to add a keyed value")
        store.raw.append(value)
        return self

    def prepend(self: 'Collection[T]', value: T, key: Optional[Key] = None) -> 'Collection[T]':
        """insert at the start; a map needs the key, which becomes its first entry. lists take no key."""
        store = self._get_store()
        if store.is_list:
            if key is not None:
                logger.debug("rejected prepend() key %r on a list-shaped collection", key)
                raise TypeError("prepend() on a list-shaped collection takes no key")
            store.raw.insert(0, value)
            return self
        if key is None:
            logger.debug("rejected prepend() without a key on a map-shaped collection")
            raise TypeError("prepend() on a map-shaped collection requires a key")
        first_key = coerce_key(key)
        rest = [(k, v) for k, v in store.entries() if k != first_key]
        store.replace(Store.rebuild_as_map([(first_key, value)] + rest))
        return self

    def put(self: 'Collection[T]', key: Key, value: T) -> 'Collection[T]':
        """insert or overwrite at key (map) or position (list)"""
        self._get_store().assign(key, value)
        return self

    def pop(self: 'Collection[T]') -> Optional[T]:
        """remove and return the last value, or none when empty"""
        store = self._get_store()
        if not len(store): return None
        if store.is_map:
            return store.raw.popitem()[1]
        return store.raw.pop()

    def shift(self: 'Collection[T]') -> Optional[T]:
        """remove and return the first value, or none when empty"""
        store = self._get_store()
        if not len(store): return None
        return store.remove(store.keys()[0])

    def forget(self: 'Collection[T]', key: Key) -> 'Collection[T]':
        """remove the entry at key; absent keys are ignored"""
        self._get_store().remove(key)
        return self

    def pull(self: 'Collection[T]', key: Key) -> Optional[T]:
        """remove and return the value at key, or none when absent"""
        removed = self._get_store().remove(key)
        return None if removed is MISSING else removed

    def splice(self: 'Collection[T]', offset: int, length: Optional[int] = None,
               replacement: Any = None) -> 'Collection[T]':
        """
        remove length entries (all remaining when omitted) from offset, splicing replacement in
        their place. returns the removed entries as a new collection; the receiver is modified.
        """
        store = self._get_store()
        entries = store.entries()
        start, stop = _bounds(len(entries), offset, length)
        removed = entries[start:stop]

        if store.is_map:
            inserted = store_of(replacement) if replacement is not None else Store(Shape.MAP, {})
            if not inserted.is_map:
                logger.debug("rejected non-mapping splice replacement %r", replacement)
                raise TypeError("splice() replacement for a map-shaped collection must be a mapping")
            store.replace(Store.rebuild_as_map(entries[:start] + inserted.entries() + entries[stop:]))
        else:
            inserted = [] if replacement is None else store_of(replacement).values()
            values = store.values()
            store.replace(Store.rebuild_as_list(values[:start] + inserted + values[stop:]))

        return self._derive(store.rebuild(removed))

    def transform(self: 'Collection[T]', selector: Selector) -> 'Collection[U]':
        """replace every value in place with selector(value, key)"""
        project = adapt_callback(selector, 2)
        store = self._get_store()
        for key, value in store.entries():
            store.raw[key] = project(value, key)
        return self

    def each(self: 'Collection[T]', action: Callable[..., Any]) -> 'Collection[T]':
        """
        call action(value, key) for each entry in order; an action returning exactly
        False stops the iteration. returns the receiver unchanged.
        """
        act = adapt_callback(action, 2)
        for key, value in self._get_store().entries():
            if act(value, key) is False:
                break
        return self

    def pipe(self: 'Collection[T]', func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the collection into an external function and returns its result verbatim.
        example: .pipe(lambda c: c.sum())
        """
        return func(self, *args, **kwargs)
