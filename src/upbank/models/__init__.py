"""
Core data models for the Up integration.

This package contains Pydantic models for Up API resources.
"""

from .common import (
    UpModel,
    ResourceIdentifier,
    Relationship,
    ListRelationship,
    PaginationLinks,
    PingResponse
)

from .money import (
    MoneyObject,
    BASE_UNIT_DIVISOR,
    base_units_to_decimal,
    format_base_units
)

from .account import (
    AccountResource,
    AccountType,
    OwnershipType,
    ListAccountsResponse,
    GetAccountResponse
)

from .transaction import (
    TransactionResource,
    TransactionStatus,
    ListTransactionsResponse
)

__all__ = [
    # Shared models
    'UpModel',
    'ResourceIdentifier',
    'Relationship',
    'ListRelationship',
    'PaginationLinks',
    'PingResponse',

    # Money
    'MoneyObject',
    'BASE_UNIT_DIVISOR',
    'base_units_to_decimal',
    'format_base_units',

    # Account models
    'AccountResource',
    'AccountType',
    'OwnershipType',
    'ListAccountsResponse',
    'GetAccountResponse',

    # Transaction models
    'TransactionResource',
    'TransactionStatus',
    'ListTransactionsResponse'
]
