from __future__ import annotations
import typing
import math
import logging
from collections import defaultdict
from collections.abc import Mapping
from ..types import *
from ..resolvers import adapt_callback, resolve_accessor
from ..store import Store, coerce_key

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


def _children_of(value: Any) -> Optional[List[Any]]:
    """the nested values of a record, list or collection; none for a leaf"""
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    store = getattr(value, '_store', None)
    if isinstance(store, Store):
        return store.values()
    return None


def _spread(values: Iterable[Any]) -> List[Any]:
    """flatten exactly one level of list nesting, leaving everything else in place"""
    result = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(value)
        elif isinstance(getattr(value, '_store', None), Store):
            result.extend(value._store.values())
        else:
            result.append(value)
    return result


class _ReshapingOperations(Generic[T]):
    def map(self: 'Collection[T]', selector: Selector) -> 'Collection[U]':
        """replace each value with selector(value, key), keeping keys and shape"""
        project = adapt_callback(selector, 2)
        store = self._get_store()
        return self._derive(store.rebuild((key, project(value, key)) for key, value in store.entries()))

    def map_with_keys(self: 'Collection[T]', selector: Selector) -> 'Collection[Any]':
        """build a map from the (new_key, new_value) pair that selector(value, key) returns per entry"""
        project = adapt_callback(selector, 2)
        pairs = []
        for key, value in self._get_store().entries():
            result = project(value, key)
            if isinstance(result, Mapping):
                pairs.extend(result.items())
            elif isinstance(result, (list, tuple)) and len(result) == 2:
                pairs.append(tuple(result))
            else:
                logger.debug("map_with_keys callback returned %r", result)
                raise TypeError("map_with_keys() callback must return a (key, value) pair")
        return self._derive(Store.rebuild_as_map(pairs))

    def flat_map(self: 'Collection[T]', selector: Selector) -> 'Collection[Any]':
        """map each value then flatten the results one level into a list"""
        project = adapt_callback(selector, 2)
        mapped = [project(value, key) for key, value in self._get_store().entries()]
        return self._derive(Store.rebuild_as_list(_spread(mapped)))

    def pluck(self: 'Collection[T]', value_key: Accessor, index_key: Optional[Accessor] = None) -> 'Collection[Any]':
        """
        list of the resolved value_key per entry, or a map keyed by the resolved
        index_key when given (later entries win on key collisions).
        """
        entries = self._get_store().entries()
        resolve_value = resolve_accessor(value_key)
        if index_key is None:
            return self._derive(Store.rebuild_as_list(resolve_value(value, key) for key, value in entries))
        resolve_index = resolve_accessor(index_key)
        return self._derive(Store.rebuild_as_map(
            (resolve_index(value, key), resolve_value(value, key)) for key, value in entries))

    def group_by(self: 'Collection[T]', accessor: Accessor) -> 'Collection[List[T]]':
        """map from resolved key to the list of values sharing it, in original order"""
        resolve = resolve_accessor(accessor)
        groups = defaultdict(list)
        for key, value in self._get_store().entries():
            groups[coerce_key(resolve(value, key))].append(value)
        return self._derive(Store(Shape.MAP, dict(groups)))

    def key_by(self: 'Collection[T]', accessor: Accessor) -> 'Collection[T]':
        """map from resolved key to value; later entries overwrite earlier ones"""
        resolve = resolve_accessor(accessor)
        return self._derive(Store.rebuild_as_map(
            (resolve(value, key), value) for key, value in self._get_store().entries()))

    def flip(self: 'Collection[T]') -> 'Collection[Any]':
        """swap keys and values; every value must be usable as a key"""
        return self._derive(Store.rebuild_as_map((value, key) for key, value in self._get_store().entries()))

    def chunk(self: 'Collection[T]', size: int) -> 'Collection[List[T]]':
        """split into lists of at most size consecutive values"""
        if size <= 0:
            logger.debug("rejected chunk size %r", size)
            raise ValueError("chunk size must be positive")
        values = self._get_store().values()
        return self._derive(Store.rebuild_as_list(values[i:i + size] for i in range(0, len(values), size)))

    def collapse(self: 'Collection[T]') -> 'Collection[Any]':
        """flatten a collection of lists one level"""
        return self._derive(Store.rebuild_as_list(_spread(self._get_store().values())))

    def flatten(self: 'Collection[T]', depth: Union[int, float] = math.inf) -> 'Collection[Any]':
        """list of the leaf values found by descending into records and lists, up to depth levels"""
        if depth < 1:
            logger.debug("rejected flatten depth %r", depth)
            raise ValueError("flatten depth must be at least 1")

        def flatten_recursive(values, current_depth):
            result = []
            for value in values:
                children = _children_of(value)
                if children is None:
                    result.append(value)
                elif current_depth <= 1:
                    result.extend(children)
                else:
                    result.extend(flatten_recursive(children, current_depth - 1))
            return result

        return self._derive(Store.rebuild_as_list(flatten_recursive(self._get_store().values(), depth)))

    def values(self: 'Collection[T]') -> 'Collection[T]':
        """list of the values in iteration order"""
        return self._derive(Store.rebuild_as_list(self._get_store().values()))

    def keys(self: 'Collection[T]') -> 'Collection[Key]':
        """
        list of keys. a list of records yields every record key in first-seen order;
        any other list yields its positions.
        """
        store = self._get_store()
        if store.is_list:
            records = [value for value in store.values() if isinstance(value, Mapping)]
            if records:
                # dict.fromkeys is an order-preserving de-duplication
                return self._derive(Store.rebuild_as_list(dict.fromkeys(key for record in records for key in record)))
        return self._derive(Store.rebuild_as_list(store.keys()))
