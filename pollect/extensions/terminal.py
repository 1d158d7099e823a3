from __future__ import annotations
import typing
import json
import numpy as np
import pandas as pd
from ..types import *
from ..resolvers import resolve_accessor
from ..store import Store

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _json_default(value: Any) -> Any:
    """encode values json does not know natively"""
    store = getattr(value, '_store', None)
    if isinstance(store, Store):
        return store.raw
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"object of type {type(value).__name__} is not json serializable")


def _text_of(value: Any) -> str:
    """the text a value contributes to implode()"""
    if value is None: return ''
    if isinstance(value, bool): return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer(): return str(int(value))
    return str(value)


class _TerminalOperations(Generic[T]):
    def all(self: 'Collection[T]') -> Union[List[T], Dict[str, T]]:
        """the underlying list or dict, in current order"""
        return self._get_store().raw

    def to_list(self: 'Collection[T]') -> List[T]:
        """convert to a list of values"""
        return self._get_store().values()

    def to_dict(self: 'Collection[T]') -> Dict[Key, T]:
        """convert to a dict; list positions become integer keys"""
        return dict(self._get_store().entries())

    def to_json(self: 'Collection[T]') -> str:
        """compact json of all(); object keys keep insertion order. nan and infinity raise ValueError"""
        return json.dumps(self.all(), separators=(',', ':'), ensure_ascii=False, allow_nan=False,
                          default=_json_default)

    def to_series(self: 'Collection[T]') -> pd.Series:
        """convert to pandas series, indexed by key for a map"""
        store = self._get_store()
        if store.is_map:
            return pd.Series(store.values(), index=store.keys(), dtype=object if not len(store) else None)
        return pd.Series(store.values(), dtype=object if not len(store) else None)

    def to_frame(self: 'Collection[T]') -> pd.DataFrame:
        """convert records to a pandas dataframe, indexed by key for a map"""
        store = self._get_store()
        if store.is_map:
            return pd.DataFrame(store.values(), index=store.keys())
        return pd.DataFrame(store.values())

    def implode(self: 'Collection[T]', key_or_glue: Any, glue: Optional[str] = None) -> str:
        """
        join values into a string. implode(glue) joins the values themselves,
        implode(key, glue) joins the value resolved from each record.
        """
        store = self._get_store()
        if glue is None:
            return key_or_glue.join(_text_of(value) for value in store.values())
        resolve = resolve_accessor(key_or_glue)
        return glue.join(_text_of(resolve(value, key)) for key, value in store.entries())
