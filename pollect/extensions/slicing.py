from __future__ import annotations
import typing
import logging
from ..types import *
from ..store import Store

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


def _bounds(size: int, offset: int, length: Optional[int]) -> Tuple[int, int]:
    """
    translate an (offset, length) window into [start, stop) positions.
    a negative offset counts from the end, a negative length stops that many entries before the end.
    """
    start = offset if offset >= 0 else max(size + offset, 0)
    start = min(start, size)
    if length is None:
        return start, size
    if length >= 0:
        return start, min(start + length, size)
    return start, max(size + length, start)


class _SlicingOperations(Generic[T]):
    def slice(self: 'Collection[T]', offset: int, length: Optional[int] = None) -> 'Collection[T]':
        """entries from offset onwards, length of them or all remaining ones; keeps the shape"""
        store = self._get_store()
        entries = store.entries()
        start, stop = _bounds(len(entries), offset, length)
        return self._derive(store.rebuild(entries[start:stop]))

    def take(self: 'Collection[T]', limit: int) -> 'Collection[T]':
        """the first limit entries, or the last abs(limit) entries when negative"""
        store = self._get_store()
        entries = store.entries()
        window = entries[:limit] if limit >= 0 else entries[limit:]
        return self._derive(store.rebuild(window))

    def reverse(self: 'Collection[T]') -> 'Collection[T]':
        """entries in reverse order; map keys stay attached to their values"""
        store = self._get_store()
        return self._derive(store.rebuild(reversed(store.entries())))

    def for_page(self: 'Collection[T]', page: int, per_page: int) -> 'Collection[T]':
        """list of the values on a 1-indexed page of per_page values"""
        if page < 1 or per_page < 1:
            logger.debug("rejected page %r of size %r", page, per_page)
            raise ValueError("page number and page size must be positive")
        values = self._get_store().values()
        return self._derive(Store.rebuild_as_list(values[(page - 1) * per_page:page * per_page]))

    def every(self: 'Collection[T]', step: int, offset: int = 0) -> List[T]:
        """every step-th value starting at offset, as a plain list"""
        if step < 1:
            logger.debug("rejected every() step %r", step)
            raise ValueError("step must be positive")
        return self._get_store().values()[offset::step]
