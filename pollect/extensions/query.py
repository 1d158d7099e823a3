from __future__ import annotations
import typing
from collections.abc import Mapping
from ..types import *
from ..resolvers import adapt_callback, read_property, has_property
from ..comparison import loose_equals, equality, contains_value

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _QueryOperations(Generic[T]):
    """read-only questions about a collection. none of these touch the store."""

    def count(self: 'Collection[T]') -> int:
        """number of entries"""
        return len(self._get_store())

    def is_empty(self: 'Collection[T]') -> bool:
        return self.count() == 0

    def is_not_empty(self: 'Collection[T]') -> bool:
        return not self.is_empty()

    def first(self: 'Collection[T]', predicate: Optional[Predicate] = None) -> Optional[T]:
        """first value, or the first satisfying predicate(value, key); none when there is no such value"""
        store = self._get_store()
        if predicate is None:
            values = store.values()
            return values[0] if values else None
        test = adapt_callback(predicate, 2)
        for key, value in store.entries():
            if test(value, key): return value
        return None

    def last(self: 'Collection[T]', predicate: Optional[Predicate] = None) -> Optional[T]:
        """last value, or the last satisfying predicate(value, key); none when there is no such value"""
        store = self._get_store()
        if predicate is None:
            values = store.values()
            return values[-1] if values else None
        test = adapt_callback(predicate, 2)
        for key, value in reversed(store.entries()):
            if test(value, key): return value
        return None

    def get(self: 'Collection[T]', key: Key, default: Any = None) -> Any:
        """
        value at key. when the key is absent the default is returned,
        or called (with no arguments) if it is callable.
        """
        store = self._get_store()
        stored = store.locate(key)
        if stored is not None:
            return store.raw[stored]
        return default() if callable(default) else default

    def has(self: 'Collection[T]', key: Key) -> bool:
        """
        whether key is present. a list of records answers for the records' own keys
        (true when at least one record carries the key); any other list answers by position.
        """
        store = self._get_store()
        if store.is_list:
            records = [value for value in store.values() if isinstance(value, Mapping)]
            if records:
                return any(has_property(record, key) for record in records)
        return store.locate(key) is not None

    def contains(self: 'Collection[T]', key_or_value: Any, value: Any = MISSING) -> bool:
        """
        contains(fn): any entry satisfies fn(value, key).
        contains(value): a list holds a loosely-equal value, a map holds the key.
        contains(key, value): the value stored at key (for a list, on any record) loosely equals value.
        """
        store = self._get_store()
        if value is not MISSING:
            if store.is_map:
                stored = store.locate(key_or_value)
                return stored is not None and loose_equals(store.raw[stored], value)
            return any(loose_equals(read_property(item, key_or_value, MISSING), value)
                       for item in store.values())

        if callable(key_or_value):
            test = adapt_callback(key_or_value, 2)
            return any(test(item, key) for key, item in store.entries())

        if store.is_map:
            return store.locate(key_or_value) is not None
        return contains_value(store.values(), key_or_value)

    def search(self: 'Collection[T]', value: Any, strict: bool = False) -> Union[Key, bool]:
        """
        key of the first entry equal to value (loose unless strict), or of the first
        entry satisfying a callback. returns false when nothing matches.
        """
        entries = self._get_store().entries()
        if callable(value):
            test = adapt_callback(value, 2)
            return next((key for key, item in entries if test(item, key)), False)
        equals = equality(strict)
        return next((key for key, item in entries if equals(item, value)), False)
