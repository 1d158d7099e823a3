"""
the dual-shape backing store.

a store is a tagged variant: LIST shape keeps an ordered python list whose keys are
positions, MAP shape keeps an insertion-ordered dict whose keys are strings.
every collection owns exactly one store; mutators write through it, transforms build a new one.
"""
import logging
import math
import numbers
from collections.abc import Mapping, Iterable as IterableABC
from .types import *

logger = logging.getLogger(__name__)


def is_key_safe(value: Any) -> bool:
    """whether a value can serve as a MAP key"""
    if isinstance(value, (str, bool)):
        return True
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Real):
        return math.isfinite(value)
    return False


def coerce_key(value: Any) -> str:
    """
    coerce a key-safe value to its MAP key form.
    integral numbers key as their decimal digits, so 8 and 8.0 both become '8'.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real) and math.isfinite(value):
        return str(int(value)) if float(value).is_integer() else repr(float(value))
    logger.debug("rejected non key-safe value %r", value)
    raise TypeError(f"value of type {type(value).__name__} cannot be used as a collection key")


def as_index(key: Any) -> Optional[int]:
    """read a key as a LIST position ('2' and 2 both address position 2), or none"""
    if isinstance(key, bool):
        return None
    if isinstance(key, numbers.Integral):
        return int(key)
    if isinstance(key, str) and key.isdigit():
        return int(key)
    if isinstance(key, float) and key.is_integer():
        return int(key)
    return None


class Store:
    """ordered (key, value) storage behind a collection"""

    __slots__ = ('shape', '_data')

    def __init__(self, shape: Shape, data: Union[List[Any], Dict[str, Any]]):
        self.shape = shape
        self._data = data

    # --- construction ---

    @classmethod
    def from_items(cls, items: Any) -> 'Store':
        """wrap raw input, inferring the shape from its native kind (top level is copied)"""
        if items is None:
            return cls(Shape.LIST, [])
        if isinstance(items, Store):
            return items.copy()
        if isinstance(items, Mapping):
            return cls.rebuild_as_map(items.items())
        if isinstance(items, (str, bytes)) or not isinstance(items, IterableABC):
            # a lone scalar becomes a single-item list
            return cls(Shape.LIST, [items])
        return cls.rebuild_as_list(items)

    @classmethod
    def rebuild_as_list(cls, values: Iterable[Any]) -> 'Store':
        return cls(Shape.LIST, list(values))

    @classmethod
    def rebuild_as_map(cls, pairs: Iterable[Tuple[Any, Any]]) -> 'Store':
        """build a MAP store from ordered pairs, last write wins on duplicate keys"""
        data = {}
        for key, value in pairs:
            data[coerce_key(key)] = value
        return cls(Shape.MAP, data)

    def rebuild(self, pairs: Iterable[Tuple[Any, Any]]) -> 'Store':
        """same-shape rebuild: MAP keeps keys, LIST compacts positions"""
        if self.shape is Shape.MAP:
            return Store.rebuild_as_map(pairs)
        return Store.rebuild_as_list(value for _, value in pairs)

    def copy(self) -> 'Store':
        return Store(self.shape, self._data.copy())

    # --- reading ---

    @property
    def is_map(self) -> bool: return self.shape is Shape.MAP

    @property
    def is_list(self) -> bool: return self.shape is Shape.LIST

    @property
    def raw(self) -> Union[List[Any], Dict[str, Any]]:
        return self._data

    def entries(self) -> List[Tuple[Key, Any]]:
        """the ordered (key, value) pairs; LIST keys are positions"""
        if self.shape is Shape.MAP:
            return list(self._data.items())
        return list(enumerate(self._data))

    def values(self) -> List[Any]:
        if self.shape is Shape.MAP:
            return list(self._data.values())
        return list(self._data)

    def keys(self) -> List[Key]:
        if self.shape is Shape.MAP:
            return list(self._data)
        return list(range(len(self._data)))

    def __len__(self) -> int:
        return len(self._data)

    def locate(self, key: Any) -> Optional[Key]:
        """the stored key that `key` addresses, or none when absent"""
        if self.shape is Shape.MAP:
            if not is_key_safe(key):
                return None
            stored = coerce_key(key)
            return stored if stored in self._data else None
        index = as_index(key)
        if index is not None and 0 <= index < len(self._data):
            return index
        return None

    def lookup(self, key: Any, default: Any = None) -> Any:
        stored = self.locate(key)
        if stored is None:
            return default
        return self._data[stored]

    # --- in-place writes, used only by mutators ---

    def assign(self, key: Any, value: Any) -> None:
        if self.shape is Shape.MAP:
            self._data[coerce_key(key)] = value
            return
        index = as_index(key)
        if index is None:
            raise TypeError(f"list-shaped collections are addressed by position, got {key!r}")
        if index == len(self._data):
            self._data.append(value)
        elif 0 <= index < len(self._data):
            self._data[index] = value
        else:
            logger.debug("rejected put at position %d of %d", index, len(self._data))
            raise IndexError(f"position {index} is past the end of the collection")

    def remove(self, key: Any) -> Any:
        """remove and return the value at key, or MISSING when absent"""
        stored = self.locate(key)
        if stored is None:
            return MISSING
        return self._data.pop(stored)

    def replace(self, other: 'Store') -> None:
        """swap in another store's contents, keeping this store's identity"""
        self.shape = other.shape
        self._data = other._data

    def __repr__(self) -> str:
        return f"Store(shape={self.shape!r}, size={len(self._data)})"


# --- helpers for operations that accept another collection, a mapping or a plain iterable ---

def store_of(items: Any) -> Store:
    """the store behind a collection, or a fresh store wrapping raw input"""
    store = getattr(items, '_store', None)
    if isinstance(store, Store):
        return store
    return Store.from_items(items)


def values_of(items: Any) -> List[Any]:
    return store_of(items).values()


def entries_of(items: Any) -> List[Tuple[Key, Any]]:
    return store_of(items).entries()
