"""
API clients for interacting with the Up banking API.
"""

# Import error classes
from .errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    ResourceNotFoundError,
    ValidationError,
    ServerError
)

# Import request handler
from .request_handler import RequestHandler

# Import base client
from .base_client import BaseAPIClient

# Import specialized API clients
from .accounts_api import AccountsAPI
from .transactions_api import TransactionsAPI

# Import Up client
from .up_client import UpClient

__all__ = [
    # Base classes
    'BaseAPIClient',
    'RequestHandler',

    # Error classes
    'APIError',
    'AuthenticationError',
    'ConfigurationError',
    'RateLimitError',
    'ResourceNotFoundError',
    'ValidationError',
    'ServerError',

    # Up client
    'UpClient',

    # Specialized API clients
    'AccountsAPI',
    'TransactionsAPI'
]
