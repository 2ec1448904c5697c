"""
Client library for the Up banking API.

This package provides an authenticated API client, typed resource models,
and report helpers that summarise transactions by category and payee.
"""

# Import API clients
from .api import (
    UpClient,
    APIError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    ResourceNotFoundError,
    ValidationError,
    ServerError
)

# Import models
from .models import (
    AccountResource,
    TransactionResource,
    MoneyObject,
    BASE_UNIT_DIVISOR
)

# Import utilities
from .utils import DateFormatter, Pair, sort_by_value

# Import services
from .services import ReportService

from .config import ConfigManager

__all__ = [
    # API clients
    'UpClient',

    # Error classes
    'APIError',
    'AuthenticationError',
    'ConfigurationError',
    'RateLimitError',
    'ResourceNotFoundError',
    'ValidationError',
    'ServerError',

    # Models
    'AccountResource',
    'TransactionResource',
    'MoneyObject',
    'BASE_UNIT_DIVISOR',

    # Utilities
    'DateFormatter',
    'Pair',
    'sort_by_value',

    # Services
    'ReportService',

    # Configuration
    'ConfigManager'
]
