"""Utility functions for StratBot."""
from .params import ALL, DATE_SEPARATOR, LIST_SEPARATOR, concat_strings
from .parsing import ParseResult, parse_response, safe_parse
from .serialization import ModelEncoder, json_serialize

__all__ = [
    # Parameter normalization
    'ALL',
    'DATE_SEPARATOR',
    'LIST_SEPARATOR',
    'concat_strings',
    # Response validation
    'ParseResult',
    'parse_response',
    'safe_parse',
    # Serialization utilities
    'ModelEncoder',
    'json_serialize',
]
