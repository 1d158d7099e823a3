"""
equality and ordering rules shared by filtering, searching, set operations and sorting.

loose equality lets a numeric string match the number it spells ('100' == 100),
strict equality requires the same kind of value as well as the same value.
"""
import logging
import math
import numbers
from collections.abc import Mapping
from .types import *

logger = logging.getLogger(__name__)

_KIND_RANK = {'null': 0, 'bool': 1, 'number': 2, 'string': 3, 'list': 4, 'record': 5}


def is_number(value: Any) -> bool:
    """real numbers, excluding bools"""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def kind_of(value: Any) -> str:
    if value is None: return 'null'
    if isinstance(value, bool): return 'bool'
    if is_number(value): return 'number'
    if isinstance(value, str): return 'string'
    if isinstance(value, Mapping): return 'record'
    if isinstance(value, (list, tuple)): return 'list'
    return type(value).__name__


def to_number(value: Any) -> Optional[Union[int, float]]:
    """coerce a value to a number the way a loose comparison would, or none"""
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def strict_equals(a: Any, b: Any) -> bool:
    """same kind and same value"""
    return kind_of(a) == kind_of(b) and a == b


def loose_equals(a: Any, b: Any) -> bool:
    """equal after a single coercive comparison"""
    if strict_equals(a, b):
        return True
    if a is None or b is None:
        return False
    kind_a, kind_b = kind_of(a), kind_of(b)
    coercible = ('number', 'bool', 'string')
    if kind_a in coercible and kind_b in coercible and kind_a != kind_b:
        number_a, number_b = to_number(a), to_number(b)
        if number_a is None or number_b is None:
            return False
        return number_a == number_b
    return a == b


def _order(a: Any, b: Any) -> Optional[int]:
    """-1/0/1 when the two values are comparable, none otherwise"""
    if isinstance(a, str) and isinstance(b, str):
        return (a > b) - (a < b)
    kinds = {kind_of(a), kind_of(b)}
    if kinds <= {'number', 'bool', 'string'} and kinds & {'number', 'bool'}:
        number_a, number_b = to_number(a), to_number(b)
        if number_a is None or number_b is None:
            return None
        if isinstance(number_a, float) and math.isnan(number_a): return None
        if isinstance(number_b, float) and math.isnan(number_b): return None
        return (number_a > number_b) - (number_a < number_b)
    if kind_of(a) == kind_of(b) == 'list':
        for left, right in zip(a, b):
            result = compare_values(left, right)
            if result: return result
        return (len(a) > len(b)) - (len(a) < len(b))
    return None


def compare_values(a: Any, b: Any) -> int:
    """
    total ordering used by sort(), sort_by() and min/max style helpers.
    comparable values order naturally; otherwise values order by kind
    (none < bool < number < string < list < record < anything else).
    """
    result = _order(a, b)
    if result is not None:
        return result
    rank_a = _KIND_RANK.get(kind_of(a), len(_KIND_RANK))
    rank_b = _KIND_RANK.get(kind_of(b), len(_KIND_RANK))
    return (rank_a > rank_b) - (rank_a < rank_b)


def _relational(test: Callable[[int], bool]) -> Callable[[Any, Any], bool]:
    def compare(a: Any, b: Any) -> bool:
        result = _order(a, b)
        return result is not None and test(result)
    return compare


OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    '=': loose_equals,
    '==': loose_equals,
    '===': strict_equals,
    '!=': lambda a, b: not loose_equals(a, b),
    '<>': lambda a, b: not loose_equals(a, b),
    '!==': lambda a, b: not strict_equals(a, b),
    '<': _relational(lambda r: r < 0),
    '<=': _relational(lambda r: r <= 0),
    '>': _relational(lambda r: r > 0),
    '>=': _relational(lambda r: r >= 0),
}


def resolve_operator(operator: str) -> Callable[[Any, Any], bool]:
    try:
        return OPERATORS[operator]
    except (KeyError, TypeError):
        logger.debug("rejected comparison operator %r", operator)
        raise ValueError(f"unknown comparison operator '{operator}'") from None


def compare(a: Any, operator: str, b: Any) -> bool:
    """evaluate `a <operator> b` with the collection comparison rules"""
    return resolve_operator(operator)(a, b)


def equality(strict: bool) -> Callable[[Any, Any], bool]:
    return strict_equals if strict else loose_equals


def contains_value(values: Iterable[Any], needle: Any, strict: bool = False) -> bool:
    """membership test under loose or strict equality"""
    equals = equality(strict)
    return any(equals(candidate, needle) for candidate in values)
