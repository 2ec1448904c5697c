"""
Accounts API client for interacting with the Up API.

This module provides a client for accessing account-related endpoints in the Up API.
"""

import logging
from typing import List, Optional, Union

from ..models.account import (
    AccountResource,
    AccountType,
    GetAccountResponse,
    ListAccountsResponse,
    OwnershipType
)
from .errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


class AccountsAPI:
    """
    API client for account-related endpoints in the Up API.
    """

    def __init__(self, client):
        """
        Initialize the AccountsAPI client.

        Args:
            client: The base client to use for API requests
        """
        self.client = client

    def get_accounts(self,
                     account_type: Optional[Union[str, AccountType]] = None,
                     ownership_type: Optional[Union[str, OwnershipType]] = None,
                     page_size: Optional[int] = None) -> List[AccountResource]:
        """
        Get every account, following pagination.

        Args:
            account_type: Only return accounts of this type
            ownership_type: Only return individual or joint accounts
            page_size: Number of accounts per page

        Returns:
            List[AccountResource]: List of accounts
        """
        params = {
            'filter[accountType]': account_type,
            'filter[ownershipType]': ownership_type,
            'page[size]': page_size
        }

        accounts: List[AccountResource] = []
        for _, page in self.client.iter_pages('accounts', params=params):
            accounts.extend(ListAccountsResponse.from_api_response(page).data)

        logger.debug(f"Fetched {len(accounts)} accounts")
        return accounts

    def get_account(self, account_id: str) -> AccountResource:
        """
        Get a single account by ID.

        Args:
            account_id: Account ID

        Returns:
            AccountResource: Account object

        Raises:
            ResourceNotFoundError: If account not found
        """
        try:
            response = self.client.get(f'accounts/{account_id}')
        except ResourceNotFoundError:
            logger.error(f"Account not found: {account_id}")
            raise
        return GetAccountResponse.from_api_response(response).data
