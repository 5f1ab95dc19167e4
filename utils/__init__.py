"""Shared utilities: key casing, timestamps and logging."""
from utils.case import WireEncodable, to_camel_case, to_camel_key, to_snake_case, to_snake_key
from utils.timestamps import format_timestamp, parse_timestamp, to_datetime

__all__ = [
    "WireEncodable",
    "to_camel_key",
    "to_snake_key",
    "to_camel_case",
    "to_snake_case",
    "format_timestamp",
    "parse_timestamp",
    "to_datetime",
]
