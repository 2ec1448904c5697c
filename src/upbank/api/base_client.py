"""
Base API client for Up API interactions.

This module provides the foundation for all API interactions with Up,
handling authentication, request formatting, pagination and error handling.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

import requests

from ..config import ConfigManager
from .request_handler import RequestHandler

# Setup logger
logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'https://api.up.com.au/api/v1'


class BaseAPIClient:
    """
    Base client for interacting with the Up API.

    This class provides the foundation for all API interactions, handling:
    - Bearer token authentication
    - Request formatting and execution
    - Error handling and retries
    - Following pagination links
    """

    def __init__(self,
                 api_token: str,
                 base_url: Optional[str] = None,
                 timeout: Optional[int] = None,
                 max_retries: Optional[int] = None,
                 retry_delay: Optional[float] = None):
        """
        Initialize the API client.

        Unset arguments fall back to ConfigManager values.

        Args:
            api_token: Up personal access token
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts for retryable failures
            retry_delay: Initial delay between retries (seconds)
        """
        config = ConfigManager()
        self.api_token = api_token
        self.base_url = (base_url or config.get('api.url', DEFAULT_API_URL)).rstrip('/')
        self.timeout = timeout if timeout is not None else config.get('api.timeout', 30)

        # Setup session with default headers
        self.session = requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {self.api_token}',
            'Accept': 'application/json'
        })

        self.request_handler = RequestHandler(
            session=self.session,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=max_retries if max_retries is not None else config.get('api.max_retries', 3),
            retry_delay=retry_delay if retry_delay is not None else config.get('api.retry_delay', 1)
        )

        logger.debug(f"Initialized API client with base URL: {self.base_url}")

    def get(self,
            endpoint: str,
            params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, Any]] = None,
            timeout: Optional[float] = None) -> Dict[str, Any]:
        """
        Make a GET request to the API.

        Args:
            endpoint: API endpoint or absolute URL
            params: Query parameters
            headers: Additional headers
            timeout: Request timeout

        Returns:
            Dict: Parsed response data
        """
        return self.request_handler.make_request('GET', endpoint, params, headers, timeout)

    def iter_pages(self,
                   endpoint: str,
                   params: Optional[Dict[str, Any]] = None) -> Iterator[Tuple[str, Dict[str, Any]]]:
        """
        Yield every page of a paginated collection.

        The first request uses ``params``; each following request is the
        page's ``links.next`` URL verbatim, since it already carries the
        query string. Iteration stops when ``links.next`` is null.

        Args:
            endpoint: API endpoint of the collection
            params: Query parameters for the first page

        Yields:
            Tuple[str, Dict]: Requested URL and parsed page body
        """
        page = self.get(endpoint, params=params)
        yield self.request_handler.build_url(endpoint), page

        next_url = (page.get('links') or {}).get('next')
        while next_url:
            page = self.get(next_url)
            yield next_url, page
            next_url = (page.get('links') or {}).get('next')

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
