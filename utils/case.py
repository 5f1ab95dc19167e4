"""
Shared case conversion between wire payloads (snake_case) and internal values (camelCase).
Uses Pydantic's alias_generators for consistency with schema aliases.
"""
import re
from collections.abc import Mapping
from datetime import date, time
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic.alias_generators import to_camel, to_snake

from utils.log import get_logger

_SEPARATORS = re.compile(r"[\W_]+")
_DIGIT_THEN_LETTER = re.compile(r"(\d)([a-z])")
_SCALARS = (str, bytes, bytearray, int, float, complex, date, time)


@runtime_checkable
class WireEncodable(Protocol):
    """Anything that knows how to produce its own plain representation."""

    def to_wire(self) -> Any: ...


def to_snake_key(s: str) -> str:
    """Convert a single key to snake_case (camelCase, PascalCase, kebab-case or spaced words)."""
    return "_".join(_DIGIT_THEN_LETTER.sub(r"\1_\2", to_snake(chunk)) for chunk in _SEPARATORS.split(s) if chunk)


def to_camel_key(s: str) -> str:
    """Convert a single snake_case key to camelCase (first letter lower)."""
    return to_camel(s)


def _convert_keys(obj: Any, convert_key: Callable[[str], str]) -> Any:
    if obj is None or isinstance(obj, _SCALARS):
        return obj
    if not isinstance(obj, type) and isinstance(obj, WireEncodable):
        return _convert_keys(obj.to_wire(), convert_key)
    if isinstance(obj, Mapping):
        out: dict = {}
        for key, value in obj.items():
            new_key = convert_key(key) if isinstance(key, str) else key
            if new_key in out:
                get_logger(__name__).warning("case_key_collision", key=key, converted=new_key)
            out[new_key] = _convert_keys(value, convert_key)
        return out
    if isinstance(obj, list):
        return [_convert_keys(x, convert_key) for x in obj]
    if isinstance(obj, tuple):
        return tuple(_convert_keys(x, convert_key) for x in obj)
    return obj


def to_snake_case(obj: Any) -> Any:
    """
    Recursively convert mapping keys to snake_case for outbound payloads.

    Scalars and dates pass through. Self-encodable values are unwrapped with
    ``to_wire()`` first and the result is converted. Lists and tuples keep their
    order and length. There is no cycle detection: a cyclic structure ends in
    RecursionError.
    """
    return _convert_keys(obj, to_snake_key)


def to_camel_case(obj: Any) -> Any:
    """Recursively convert mapping keys from snake_case to camelCase for payloads without a bespoke transform."""
    return _convert_keys(obj, to_camel_key)
