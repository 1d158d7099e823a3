from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Union[str, int]
Predicate = Callable[..., bool]
Selector = Callable[..., U]
Accessor = Union[Key, Callable[..., Any]]
Comparer = Callable[[T, T], int]
Reducer = Callable[..., U]


class Shape(Enum):
    """backing shape of a collection"""
    LIST = 'list'
    MAP = 'map'

    def __repr__(self) -> str:
        return f"Shape.{self.name}"


class _Missing:
    """sentinel for 'argument not supplied', distinct from an explicit none"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"


MISSING: Any = _Missing()
