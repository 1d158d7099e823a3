from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..types import *
from ..resolvers import adapt_callback, resolve_accessor
from ..comparison import compare_values
from ..store import Store

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


class _OrderingOperations(Generic[T]):
    """sorting and random reordering. all of these return a new collection of the same shape."""

    def sort(self: 'Collection[T]', comparer: Optional[Comparer] = None) -> 'Collection[T]':
        """
        sort values ascending, or by comparer(a, b) returning a negative, zero or positive number.
        map keys stay attached to their values.
        """
        compare = adapt_callback(comparer, 2) if comparer is not None else compare_values
        store = self._get_store()
        ordered = sorted(store.entries(), key=cmp_to_key(lambda left, right: compare(left[1], right[1])))
        return self._derive(store.rebuild(ordered))

    def _sort_by(self: 'Collection[T]', accessor: Accessor, descending: bool) -> 'Collection[T]':
        resolve = resolve_accessor(accessor)
        store = self._get_store()
        # resolve each sort key exactly once, then rely on sorted() being stable in both directions
        decorated = [(resolve(value, key), (key, value)) for key, value in store.entries()]
        decorated.sort(key=cmp_to_key(lambda left, right: compare_values(left[0], right[0])), reverse=descending)
        return self._derive(store.rebuild(entry for _, entry in decorated))

    def sort_by(self: 'Collection[T]', accessor: Accessor) -> 'Collection[T]':
        """stable ascending sort by the resolved key"""
        return self._sort_by(accessor, descending=False)

    def sort_by_desc(self: 'Collection[T]', accessor: Accessor) -> 'Collection[T]':
        """stable descending sort by the resolved key"""
        return self._sort_by(accessor, descending=True)

    def shuffle(self: 'Collection[T]') -> 'Collection[T]':
        """a uniformly random permutation drawn from the collection's random source"""
        store = self._get_store()
        entries = store.entries()
        order = self._random_source.permutation(len(entries))
        return self._derive(store.rebuild(entries[int(i)] for i in order))

    def random(self: 'Collection[T]', count: Optional[int] = None) -> Union[T, 'Collection[T]', None]:
        """
        one uniformly chosen value, or a new list collection of count values
        drawn without replacement. the receiver is left untouched.
        """
        values = self._get_store().values()
        rng = self._random_source
        if count is None:
            return values[int(rng.integers(len(values)))] if values else None
        if count < 0 or count > len(values):
            logger.debug("rejected random sample of %r from %d values", count, len(values))
            raise ValueError(f"cannot draw {count} values from a collection of {len(values)}")
        picks = rng.choice(len(values), size=count, replace=False)
        return self._derive(Store.rebuild_as_list(values[int(i)] for i in picks))
