"""
Transactions API client for interacting with the Up API.

This module provides a client for accessing transaction-related endpoints in
the Up API. Transaction lists are paginated; every page is fetched and the
results are concatenated in page order.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Union
from datetime import date

import structlog

from ..models.transaction import (
    ListTransactionsResponse,
    TransactionResource,
    TransactionStatus
)

logger = structlog.wrap_logger(logging.getLogger(__name__))


class TransactionsAPI:
    """
    API client for transaction-related endpoints in the Up API.
    """

    def __init__(self, client):
        """
        Initialize the TransactionsAPI client.

        Args:
            client: The base client to use for API requests
        """
        self.client = client
        self.logger = getattr(client, 'logger', None) or logger

    @staticmethod
    def build_params(since: Optional[date] = None,
                     until: Optional[date] = None,
                     page_size: Optional[int] = None,
                     status: Optional[Union[str, TransactionStatus]] = None,
                     category: Optional[str] = None,
                     tag: Optional[str] = None) -> Dict[str, Any]:
        """Map filter arguments to the API's bracketed query parameters"""
        return {
            'page[size]': page_size,
            'filter[status]': status,
            'filter[since]': since,
            'filter[until]': until,
            'filter[category]': category,
            'filter[tag]': tag
        }

    @staticmethod
    def endpoint_for(account_id: Optional[str] = None) -> str:
        if account_id:
            return f'accounts/{account_id}/transactions'
        return 'transactions'

    def iter_transactions(self,
                          account_id: Optional[str] = None,
                          since: Optional[date] = None,
                          until: Optional[date] = None,
                          page_size: Optional[int] = None,
                          status: Optional[Union[str, TransactionStatus]] = None,
                          category: Optional[str] = None,
                          tag: Optional[str] = None) -> Iterator[TransactionResource]:
        """
        Yield transactions page by page.

        Args:
            account_id: Restrict to one account; all accounts when omitted
            since: Only transactions created at or after this time
            until: Only transactions created before this time
            page_size: Number of transactions per page
            status: HELD or SETTLED
            category: Category ID
            tag: Tag ID

        Yields:
            TransactionResource: Transactions in API order
        """
        endpoint = self.endpoint_for(account_id)
        params = self.build_params(since, until, page_size, status, category, tag)

        for page_number, (url, page) in enumerate(self.client.iter_pages(endpoint, params=params), start=1):
            transactions = ListTransactionsResponse.from_api_response(page).data
            self.logger.debug(
                "getTransactions",
                url=url,
                page=page_number,
                transaction_count=len(transactions)
            )
            yield from transactions

    def get_transactions(self, account_id: Optional[str] = None, **filters) -> List[TransactionResource]:
        """
        Get every transaction matching the filters.

        Accepts the same arguments as ``iter_transactions``. A failure on any
        page fails the whole call.

        Returns:
            List[TransactionResource]: List of transactions
        """
        return list(self.iter_transactions(account_id, **filters))
