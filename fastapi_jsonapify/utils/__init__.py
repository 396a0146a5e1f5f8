"""Identity, naming and query parameter helpers."""

from .identity import derived_identity, primary_key_of
from .naming import dasherize_keys, to_dash_case
from .query_params import parse_query_params, split_csv

__all__ = [
    "dasherize_keys",
    "derived_identity",
    "parse_query_params",
    "primary_key_of",
    "split_csv",
    "to_dash_case",
]
