"""
Up API client.

This module provides the high-level client for the Up banking API, with
methods for checking connectivity and fetching accounts and transactions.
"""

import logging
from typing import Iterator, List, Optional, Union
from datetime import date

import structlog

from ..config import ConfigManager
from ..credentials import CredentialsManager
from ..models.account import AccountResource, AccountType, OwnershipType
from ..models.common import PingResponse
from ..models.transaction import TransactionResource, TransactionStatus
from .accounts_api import AccountsAPI
from .base_client import BaseAPIClient
from .errors import APIError
from .transactions_api import TransactionsAPI

DEFAULT_PING_TIMEOUT = 5


class UpClient(BaseAPIClient):
    """
    Client for interacting with the Up API.

    The token is taken from ``api_token`` or the ``API_TOKEN`` environment
    variable. Unless ``verify`` is false, the constructor pings the API so a
    bad token or unreachable server fails fast.
    """

    def __init__(self,
                 api_token: Optional[str] = None,
                 logger=None,
                 verify: bool = True,
                 **kwargs):
        """
        Initialize the Up API client.

        Args:
            api_token: Up personal access token
            logger: structlog-style logger used instead of the module logger
            verify: Ping the API before returning
            **kwargs: Additional arguments to pass to BaseAPIClient

        Raises:
            ConfigurationError: If no token is available
            APIError: If the ping fails
        """
        credentials = CredentialsManager(api_token)
        super().__init__(credentials.get_api_token(), **kwargs)

        self.logger = logger or structlog.wrap_logger(logging.getLogger(__name__))
        self.accounts_api = AccountsAPI(self)
        self.transactions_api = TransactionsAPI(self)

        if verify:
            try:
                self.ping(timeout=ConfigManager().get('api.ping_timeout', DEFAULT_PING_TIMEOUT))
            except APIError as e:
                self.close()
                raise e.__class__(f"error pinging API: {e.message}", e.status_code, e.details) from e

    def ping(self, timeout: Optional[float] = None) -> PingResponse:
        """
        Check that the API is reachable and the token is accepted.

        Returns:
            PingResponse: Ping metadata
        """
        response = self.get('util/ping', timeout=timeout)
        ping = PingResponse.from_api_response(response)
        self.logger.debug("ping", status=ping.meta.status_emoji)
        return ping

    def health_check(self) -> bool:
        """
        Check if the API is accessible.

        Returns:
            bool: True if API is accessible, False otherwise
        """
        try:
            self.ping()
            return True
        except APIError as e:
            self.logger.error("health check failed", error=str(e))
            return False

    # Account methods - delegate to accounts_api

    def get_accounts(self,
                     account_type: Optional[Union[str, AccountType]] = None,
                     ownership_type: Optional[Union[str, OwnershipType]] = None,
                     page_size: Optional[int] = None) -> List[AccountResource]:
        """
        Get every account.

        Returns:
            List[AccountResource]: List of accounts
        """
        self.logger.info("GetAccounts")
        return self.accounts_api.get_accounts(account_type, ownership_type, page_size)

    def get_account(self, account_id: str) -> AccountResource:
        """
        Get a single account by ID.

        Raises:
            ResourceNotFoundError: If account not found
        """
        self.logger.info("GetAccount", accountID=account_id)
        return self.accounts_api.get_account(account_id)

    # Transaction methods - delegate to transactions_api

    def get_transactions(self,
                         account_id: Optional[str] = None,
                         since: Optional[date] = None,
                         until: Optional[date] = None,
                         page_size: Optional[int] = None,
                         status: Optional[Union[str, TransactionStatus]] = None,
                         category: Optional[str] = None,
                         tag: Optional[str] = None) -> List[TransactionResource]:
        """
        Get every transaction matching the filters.

        Args:
            account_id: Restrict to one account; all accounts when omitted
            since: Only transactions created at or after this time
            until: Only transactions created before this time
            page_size: Number of transactions per page
            status: HELD or SETTLED
            category: Category ID
            tag: Tag ID

        Returns:
            List[TransactionResource]: List of transactions
        """
        self.logger.info("GetTransactions", accountID=account_id, since=since, until=until)
        return self.transactions_api.get_transactions(
            account_id,
            since=since,
            until=until,
            page_size=page_size,
            status=status,
            category=category,
            tag=tag
        )

    def iter_transactions(self, account_id: Optional[str] = None, **filters) -> Iterator[TransactionResource]:
        """Lazily yield transactions; see get_transactions for the filters"""
        self.logger.info("IterTransactions", accountID=account_id)
        return self.transactions_api.iter_transactions(account_id, **filters)
