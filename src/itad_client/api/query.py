from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional, Set, Tuple
from urllib.parse import parse_qsl, urlencode

# Multi-valued parameters are joined with a literal comma.
MULTI_VALUE_SEPARATOR = ","


class Query:
    """
    Ordered accumulator of query parameters.

    Endpoints contribute their own pairs first; the client appends
    credentials afterwards. Encoding happens once, in ``encode()``.
    """

    def __init__(self, pairs: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._pairs: List[Tuple[str, str]] = list(pairs or [])

    @classmethod
    def from_encoded(cls, query_string: str) -> "Query":
        return cls(parse_qsl(query_string, keep_blank_values=True))

    def append_pair(self, key: str, value: str) -> "Query":
        self._pairs.append((key, value))
        return self

    def extend(self, pairs: Iterable[Tuple[str, str]]) -> "Query":
        self._pairs.extend(pairs)
        return self

    @property
    def pairs(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def encode(self) -> str:
        return encode_pairs(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __repr__(self) -> str:
        keys = [k for k, _ in self._pairs]
        return f"Query(keys={keys})"


def encode_pairs(pairs: Iterable[Tuple[str, str]]) -> str:
    return urlencode(list(pairs), safe=MULTI_VALUE_SEPARATOR)


def scalar_to_str(value: Any, bool_as_int: bool = False) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        if bool_as_int:
            return "1" if value else "0"
        return "true" if value else "false"
    return str(value)


def join_multi_value(values: Iterable[Any]) -> str:
    """Join values into one parameter: stringified, de-duplicated, sorted."""
    return MULTI_VALUE_SEPARATOR.join(sorted({scalar_to_str(v) for v in values}))


def split_multi_value(value: str) -> Set[str]:
    if not value:
        return set()
    return set(value.split(MULTI_VALUE_SEPARATOR))


def encode_value(value: Any, bool_as_int: bool = False) -> Optional[str]:
    """
    Encode one field value, or return None when it must be left out.

    None and empty collections are never sent.
    """
    if value is None:
        return None
    if isinstance(value, (set, frozenset, list, tuple)):
        if not value:
            return None
        return join_multi_value(value)
    return scalar_to_str(value, bool_as_int=bool_as_int)
