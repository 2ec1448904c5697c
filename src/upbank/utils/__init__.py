"""
Utility functions and classes for the Up integration.

This module provides helpers for request formatting, response handling,
date conversion and report ordering.
"""

from .api_utils import (
    parse_response,
    extract_error_details,
    build_query_params,
    validate_response
)
from .date_utils import DateFormatter
from .sorting import Pair, sort_by_value

__all__ = [
    # API utilities
    'parse_response',
    'extract_error_details',
    'build_query_params',
    'validate_response',

    # Date utilities
    'DateFormatter',

    # Sorting
    'Pair',
    'sort_by_value'
]
