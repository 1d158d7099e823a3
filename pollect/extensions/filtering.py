from __future__ import annotations
import typing
import logging
from ..types import *
from ..resolvers import adapt_callback, resolve_accessor
from ..comparison import resolve_operator, strict_equals, contains_value, kind_of
from ..store import values_of, entries_of, coerce_key, is_key_safe

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


class _FilteringOperations(Generic[T]):
    """
    transforms that keep a subset of entries. the result keeps the receiver's shape:
    map keys survive, list positions are compacted.
    """

    def _keep(self: 'Collection[T]', test: Callable[[Any, Any], bool]) -> 'Collection[T]':
        store = self._get_store()
        return self._derive(store.rebuild((key, value) for key, value in store.entries() if test(value, key)))

    def filter(self: 'Collection[T]', predicate: Optional[Predicate] = None) -> 'Collection[T]':
        """keep entries where predicate(value, key) is true; without a predicate, keep truthy values"""
        if predicate is None:
            return self._keep(lambda value, key: bool(value))
        return self._keep(adapt_callback(predicate, 2))

    def reject(self: 'Collection[T]', predicate: Predicate) -> 'Collection[T]':
        """keep entries where predicate(value, key) is false"""
        test = adapt_callback(predicate, 2)
        return self._keep(lambda value, key: not test(value, key))

    def where(self: 'Collection[T]', key: Accessor, operator: Any = MISSING, value: Any = MISSING) -> 'Collection[T]':
        """
        keep entries whose resolved field satisfies the comparison.
        where(key, value) compares with loose equality; where(key, operator, value)
        accepts =, ==, ===, !=, <>, !==, <, <=, >, >=.
        """
        if operator is MISSING:
            logger.debug("rejected where() on %r without a value", key)
            raise TypeError("where() requires a value to compare against")
        if value is MISSING:
            operator, value = '==', operator
        test = resolve_operator(operator)
        resolve = resolve_accessor(key)
        return self._keep(lambda item, item_key: test(resolve(item, item_key), value))

    def where_strict(self: 'Collection[T]', key: Accessor, value: Any) -> 'Collection[T]':
        """where() with strict equality, whatever the values' kinds"""
        resolve = resolve_accessor(key)
        return self._keep(lambda item, item_key: strict_equals(resolve(item, item_key), value))

    def where_in(self: 'Collection[T]', key: Accessor, values: Iterable[Any]) -> 'Collection[T]':
        """keep entries whose resolved field is strictly equal to one of values"""
        candidates = values_of(values)
        resolve = resolve_accessor(key)
        return self._keep(lambda item, item_key: contains_value(candidates, resolve(item, item_key), strict=True))

    def where_in_loose(self: 'Collection[T]', key: Accessor, values: Iterable[Any]) -> 'Collection[T]':
        """keep entries whose resolved field is loosely equal to one of values"""
        candidates = values_of(values)
        resolve = resolve_accessor(key)
        return self._keep(lambda item, item_key: contains_value(candidates, resolve(item, item_key)))

    def unique(self: 'Collection[T]', accessor: Optional[Accessor] = None) -> 'Collection[T]':
        """keep the first entry per distinct (strictly compared) resolved value"""
        resolve = resolve_accessor(accessor)
        seen_hashable, seen_unhashable = set(), []

        def first_sighting(value, key):
            derived = resolve(value, key)
            try:
                # the kind tag keeps True and 1 apart, as strict equality does
                marker = (kind_of(derived), derived)
                if marker in seen_hashable: return False
                seen_hashable.add(marker)
                return True
            except TypeError:
                if any(strict_equals(derived, seen) for seen in seen_unhashable): return False
                seen_unhashable.append(derived)
                return True

        return self._keep(first_sighting)

    def diff(self: 'Collection[T]', other: Any) -> 'Collection[T]':
        """entries whose value is not (strictly) present in other"""
        others = values_of(other)
        return self._keep(lambda value, key: not contains_value(others, value, strict=True))

    def intersect(self: 'Collection[T]', other: Any) -> 'Collection[T]':
        """entries whose value is (strictly) present in other"""
        others = values_of(other)
        return self._keep(lambda value, key: contains_value(others, value, strict=True))

    def diff_keys(self: 'Collection[T]', other: Any) -> 'Collection[T]':
        """entries whose key does not appear in other"""
        other_keys = {coerce_key(key) for key, _ in entries_of(other)}
        return self._keep(lambda value, key: coerce_key(key) not in other_keys)

    def _project(self: 'Collection[T]', operation: str, keys: Any, keep: bool) -> 'Collection[T]':
        store = self._get_store()
        if not store.is_map:
            logger.debug("rejected %s() on a list-shaped collection", operation)
            raise TypeError(f"{operation}() requires a map-shaped collection")
        if isinstance(keys, (str, int)):
            keys = [keys]
        wanted = {coerce_key(key) for key in keys if is_key_safe(key)}
        return self._keep(lambda value, key: (key in wanted) == keep)

    def only(self: 'Collection[T]', keys: Iterable[Key]) -> 'Collection[T]':
        """keep only the named keys, in the receiver's order"""
        return self._project('only', keys, keep=True)

    def except_(self: 'Collection[T]', keys: Iterable[Key]) -> 'Collection[T]':
        """drop the named keys"""
        return self._project('except_', keys, keep=False)
