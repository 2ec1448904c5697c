"""
API utilities for common request handling and error processing.

This module provides utilities for working with Up API requests and responses.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple
import requests
from datetime import date
from enum import Enum

from .date_utils import DateFormatter

# Setup logger
logger = logging.getLogger(__name__)


def parse_response(response: requests.Response) -> Dict[str, Any]:
    """
    Parse API response with error handling

    Args:
        response (requests.Response): Response object

    Returns:
        Dict[str, Any]: Parsed response data

    Raises:
        ValueError: If response cannot be parsed
    """
    try:
        if not response.text:
            return {}

        return response.json()
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse response: {e}")
        logger.debug(f"Response text: {response.text[:500]}...")
        raise ValueError(f"Invalid JSON response: {e}") from e


def extract_error_details(response: requests.Response) -> Dict[str, Any]:
    """
    Extract error details from response

    The Up API reports failures as a JSON:API ``errors`` array; the first
    entry is used.

    Args:
        response (requests.Response): Response object

    Returns:
        Dict[str, Any]: Error details
    """
    if not response.text:
        return {
            "status_code": response.status_code,
            "message": "Empty response"
        }

    try:
        data = response.json()
    except ValueError:
        return {
            "status_code": response.status_code,
            "message": "Unparseable error response",
            "detail": response.text[:500]
        }

    errors = data.get("errors") if isinstance(data, dict) else None
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        error = errors[0]
        return {
            "status_code": response.status_code,
            "message": error.get("title", "Unknown error"),
            "detail": error.get("detail", ""),
            "source": error.get("source", {})
        }

    # Generic error format
    return {
        "status_code": response.status_code,
        "message": "API error",
        "detail": data
    }


def build_query_params(params: Dict[str, Any]) -> Dict[str, str]:
    """
    Build query parameters with proper formatting

    None values are dropped and dates become RFC 3339 strings.

    Args:
        params (Dict[str, Any]): Raw parameters

    Returns:
        Dict[str, str]: Formatted parameters
    """
    formatted_params = {}

    for key, value in params.items():
        if value is None:
            continue

        if isinstance(value, bool):
            formatted_params[key] = str(value).lower()
        elif isinstance(value, Enum):
            formatted_params[key] = str(value.value)
        elif isinstance(value, (list, tuple)):
            formatted_params[key] = ",".join(str(item) for item in value)
        elif isinstance(value, date):
            formatted_params[key] = DateFormatter.format_datetime(value)
        else:
            formatted_params[key] = str(value)

    return formatted_params


def validate_response(
    response: requests.Response,
    expected_status_codes: Optional[List[int]] = None
) -> Tuple[bool, Optional[Dict[str, Any]]]:
    """
    Validate response status code and extract error details if needed

    Args:
        response (requests.Response): Response object
        expected_status_codes (List[int]): Accepted status codes, any 2xx when omitted

    Returns:
        Tuple[bool, Optional[Dict[str, Any]]]: (is_valid, error_details)
    """
    if expected_status_codes is None:
        is_valid = 200 <= response.status_code < 300
    else:
        is_valid = response.status_code in expected_status_codes
    if is_valid:
        return True, None

    error_details = extract_error_details(response)
    logger.error(f"API error: {error_details}")

    return False, error_details
