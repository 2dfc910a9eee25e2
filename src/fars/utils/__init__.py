"""Shared helpers: logging setup, number coercion and data-directory resolution."""

from .logging import JsonFormatter, configure_logging
from .numbers import coerce_int
from .paths import DATA_DIR_ENV, resolve_data_dir

__all__ = [
    'JsonFormatter',
    'configure_logging',
    'coerce_int',
    'DATA_DIR_ENV',
    'resolve_data_dir',
]
