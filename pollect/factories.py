import typing
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection, RandomSource

def collect(items: Any = None, rng: 'RandomSource' = None) -> 'Collection[Any]':
    """
    create a collection from a list, tuple, mapping or another collection.
    rng seeds random() and shuffle(): an int seed, a numpy generator, or none for fresh entropy.
    """
    from .collection import Collection
    return Collection(items, rng=rng)

def empty(rng: 'RandomSource' = None) -> 'Collection[Any]':
    """create empty collection"""
    from .collection import Collection
    return Collection([], rng=rng)

def times(count: int, generator_func: Optional[Callable[[int], T]] = None) -> 'Collection[T]':
    """create a collection of generator_func(i) for i in 1..count, or of the numbers themselves"""
    from .collection import Collection
    if count < 1:
        return Collection([])
    numbers = range(1, count + 1)
    return Collection([generator_func(i) for i in numbers] if generator_func else list(numbers))

# --- aliases ---
pollect = collect
C = collect
