from __future__ import annotations
import typing
import numbers
import numpy as np
from functools import reduce
from ..types import *
from ..resolvers import adapt_callback, resolve_accessor
from ..comparison import is_number

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _all_integral(values: List[Any]) -> bool:
    return all(isinstance(value, numbers.Integral) for value in values)


class _StatsOperations(Generic[T]):
    def _get_numbers(self: 'Collection[T]', accessor: Optional[Accessor] = None) -> List[Union[int, float]]:
        """helper to extract the numeric resolved values; anything else does not take part"""
        resolve = resolve_accessor(accessor)
        resolved = (resolve(value, key) for key, value in self._get_store().entries())
        return [value for value in resolved if is_number(value)]

    def sum(self: 'Collection[T]', accessor: Optional[Accessor] = None) -> Union[int, float]:
        """calc sum; 0 when nothing numeric resolves. integer sums are exact."""
        values = self._get_numbers(accessor)
        if not values: return 0
        if _all_integral(values):
            return sum(int(value) for value in values)
        return np.sum(np.asarray(values, dtype=float)).item()

    def avg(self: 'Collection[T]', accessor: Optional[Accessor] = None) -> Optional[Union[int, float]]:
        """calc arithmetic mean; none when nothing numeric resolves"""
        values = self._get_numbers(accessor)
        if not values: return None
        if _all_integral(values):
            total = sum(int(value) for value in values)
            # whole means of integers stay exact
            return total // len(values) if total % len(values) == 0 else total / len(values)
        return float(np.mean(np.asarray(values, dtype=float)))

    def max(self: 'Collection[T]', accessor: Optional[Accessor] = None) -> Optional[Union[int, float]]:
        """find maximum; none when nothing numeric resolves"""
        values = self._get_numbers(accessor)
        return max(values) if values else None

    def min(self: 'Collection[T]', accessor: Optional[Accessor] = None) -> Optional[Union[int, float]]:
        """find minimum; none when nothing numeric resolves"""
        values = self._get_numbers(accessor)
        return min(values) if values else None

    def reduce(self: 'Collection[T]', reducer: Reducer, initial: Any = MISSING) -> Any:
        """
        fold entries left to right through reducer(carry, value, key).
        without an initial value the first value seeds the fold; an empty collection then yields none.
        """
        fold = adapt_callback(reducer, 3)
        entries = self._get_store().entries()
        if initial is MISSING:
            if not entries: return None
            (_, initial), entries = entries[0], entries[1:]
        return reduce(lambda carry, entry: fold(carry, entry[1], entry[0]), entries, initial)
