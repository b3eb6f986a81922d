from .responses import (
    ok,
    document,
    error,
    validation_error_response,
    store_error_response,
)
from .validation import missing_fields, validate_schema
from .db import transactional, delete_where, scoped
from .search import contains_ignore_case

__all__ = [
    'ok',
    'document',
    'error',
    'validation_error_response',
    'store_error_response',
    'missing_fields',
    'validate_schema',
    'transactional',
    'delete_where',
    'scoped',
    'contains_ignore_case',
]
