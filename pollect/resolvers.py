"""
accessor resolution: turns "a key or a callback" into a uniform (value, key) -> derived function.
"""
import inspect
import logging
from collections.abc import Mapping
from functools import lru_cache
from .types import *

logger = logging.getLogger(__name__)

# plain values never expose their attributes as record properties
_SCALARS = (str, bytes, int, float, complex, type(None))


@lru_cache(maxsize=512)
def _positional_capacity(fn: Callable) -> Tuple[int, int]:
    """(required, accepted) positional parameter counts; accepted is -1 for *args"""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures (len, str, ...) take a single value
        return 1, 1

    required, accepted = 0, 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return required, -1
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            accepted += 1
            if param.default is param.empty:
                required += 1
    return required, accepted


def adapt_callback(fn: Callable, arg_count: int) -> Callable:
    """
    wraps fn so it can always be invoked with arg_count positional arguments.
    callbacks declaring fewer parameters receive only the leading ones, so both
    `lambda v: ...` and `lambda v, k: ...` work wherever (value, key) is passed.
    """
    if not callable(fn):
        raise TypeError(f"expected a callable, got {type(fn).__name__}")

    try:
        required, accepted = _positional_capacity(fn)
    except TypeError:
        # unhashable callables cannot go through the cache
        required, accepted = _positional_capacity.__wrapped__(fn)

    if required > arg_count:
        logger.debug("callback %r requires %d arguments, only %d supplied", fn, required, arg_count)
        raise TypeError(f"callback requires {required} positional arguments but only {arg_count} are supplied")

    if accepted == -1 or accepted >= arg_count:
        return fn
    return lambda *args: fn(*args[:accepted])


def read_property(item: Any, key: Key, default: Any = None) -> Any:
    """read a named property from a record; absent properties yield the default"""
    if isinstance(item, Mapping):
        if key in item:
            return item[key]
        # records built from json-like data may key numbers as strings and vice versa
        if isinstance(key, int) and not isinstance(key, bool) and str(key) in item:
            return item[str(key)]
        if isinstance(key, str) and key.isdigit() and int(key) in item:
            return item[int(key)]
        return default
    if isinstance(item, (list, tuple)):
        if isinstance(key, int) and not isinstance(key, bool):
            return item[key] if 0 <= key < len(item) else default
        if not hasattr(item, '_fields'):
            # only named tuples expose fields by name
            return default
    if isinstance(key, str) and not key.startswith('_') and not isinstance(item, _SCALARS):
        return getattr(item, key, default)
    return default


def has_property(item: Any, key: Key) -> bool:
    """whether a record carries the named property"""
    sentinel = MISSING
    return read_property(item, key, sentinel) is not sentinel


def resolve_accessor(accessor: Optional[Accessor]) -> Callable[[Any, Any], Any]:
    """
    produce a (value, key) -> derived value function.
    none resolves to the identity, a callable is adapted to the (value, key) signature,
    anything else is read as a property name on each record.
    """
    if accessor is None:
        return lambda value, key: value
    if callable(accessor):
        return adapt_callback(accessor, 2)
    return lambda value, key: read_property(value, accessor)
