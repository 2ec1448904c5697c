"""
API request handler for making HTTP requests.

This module provides a class for handling HTTP requests with retries
and error handling.
"""

import logging
import uuid
from typing import Any, Dict, Optional

import requests
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from ..utils.api_utils import (
    parse_response,
    build_query_params,
    validate_response
)
from .errors import (
    APIError,
    AuthenticationError,
    RateLimitError,
    ResourceNotFoundError,
    ServerError,
    ValidationError
)

# Setup logger
logger = logging.getLogger(__name__)

MAX_BACKOFF = 30


def _is_retryable(exc: BaseException) -> bool:
    """Retry transport failures, 429 and 5xx"""
    return isinstance(exc, (
        requests.ConnectionError,
        requests.Timeout,
        RateLimitError,
        ServerError
    ))


class RequestHandler:
    """
    Handler for making HTTP requests with retries and error handling.
    """

    def __init__(self,
                 session: requests.Session,
                 base_url: str,
                 timeout: int,
                 max_retries: int = 3,
                 retry_delay: float = 1):
        """
        Initialize the request handler.

        Args:
            session: Requests session with authentication headers
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts for retryable failures
            retry_delay: Initial delay between retries (seconds)
        """
        self.session = session
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay

    def _get_correlation_id(self) -> str:
        """Generate a unique correlation ID for request tracing"""
        return str(uuid.uuid4())

    def build_url(self, endpoint: str) -> str:
        """
        Resolve an endpoint against the base URL.

        Absolute URLs, such as pagination links, are used verbatim.
        """
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _handle_response_error(self, response: requests.Response,
                               error_details: Dict[str, Any]) -> None:
        """
        Handle error responses from the API.

        Args:
            response: Response object
            error_details: Details extracted from the response body

        Raises:
            AuthenticationError: For 401 errors
            ResourceNotFoundError: For 404 errors
            ValidationError: For 400 and 422 errors
            RateLimitError: For 429 errors
            ServerError: For 5xx errors
            APIError: For other errors
        """
        status_code = response.status_code
        error_message = error_details.get('message', 'Unknown error')
        detail = error_details.get('detail')
        if detail and isinstance(detail, str):
            error_message = f"{error_message}: {detail}"

        if status_code == 401:
            raise AuthenticationError(f"Authentication failed: {error_message}",
                                      status_code, error_details)
        elif status_code == 404:
            raise ResourceNotFoundError(f"Resource not found: {error_message}",
                                        status_code, error_details)
        elif status_code in (400, 422):
            raise ValidationError(f"Validation error: {error_message}",
                                  status_code, error_details)
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {error_message}",
                                 status_code, error_details)
        elif 500 <= status_code < 600:
            raise ServerError(f"Server error: {error_message}",
                              status_code, error_details)
        else:
            raise APIError(f"Expected HTTP 2xx but received {status_code}: {error_message}",
                           status_code, error_details)

    def _execute(self, method: str, url: str, params: Optional[Dict[str, str]],
                 headers: Dict[str, str], timeout: float) -> Dict[str, Any]:
        response = self.session.request(
            method=method,
            url=url,
            params=params,
            headers=headers,
            timeout=timeout
        )

        is_valid, error_details = validate_response(response)
        if not is_valid:
            self._handle_response_error(response, error_details)

        try:
            return parse_response(response)
        except ValueError as e:
            raise APIError(str(e), response.status_code) from e

    def make_request(self,
                     method: str,
                     endpoint: str,
                     params: Optional[Dict[str, Any]] = None,
                     headers: Optional[Dict[str, Any]] = None,
                     timeout: Optional[float] = None) -> Dict[str, Any]:
        """
        Make an HTTP request to the API, retrying transient failures.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint relative to the base URL, or an absolute URL
            params: Query parameters
            headers: Additional headers
            timeout: Request timeout (overrides default)

        Returns:
            Dict: Parsed response data

        Raises:
            APIError: For API and transport errors
        """
        correlation_id = self._get_correlation_id()

        url = self.build_url(endpoint)
        request_timeout = timeout or self.timeout
        request_headers = {'X-Correlation-ID': correlation_id}
        if headers:
            request_headers.update(headers)

        formatted_params = build_query_params(params or {}) or None

        logger.debug(f"API Request: {method} {url} | Correlation ID: {correlation_id}")
        if formatted_params:
            logger.debug(f"Query params: {formatted_params}")

        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=self.retry_delay, max=MAX_BACKOFF),
                retry=retry_if_exception(_is_retryable),
                reraise=True
            ):
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.warning(
                            f"Retrying {method} {url} (attempt {attempt.retry_state.attempt_number}"
                            f" of {self.max_retries}) | Correlation ID: {correlation_id}"
                        )
                    return self._execute(method, url, formatted_params,
                                         request_headers, request_timeout)
        except requests.RequestException as e:
            logger.error(f"Request error: {e}")
            raise APIError(f"Request failed: {str(e)}") from e
