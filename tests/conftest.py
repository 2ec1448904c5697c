import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from upbank.config import ConfigManager

BASE_URL = "https://api.up.com.au/api/v1"
PING_URL = f"{BASE_URL}/util/ping"
PING_PAYLOAD = {"meta": {"id": "3b5d17a4-6778-48dc-ae7d-9f8aace2e2fc", "statusEmoji": "⚡️"}}


class FakeResponse:
    """Just enough of requests.Response for the client"""
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.headers: Dict[str, str] = {}

    def json(self):
        return json.loads(self.text)


class FakeAPI:
    """
    Routes requests by URL to queued responses.

    The last queued response for a URL is reused for any further calls.
    """
    def __init__(self):
        self.routes: Dict[str, List[Any]] = {}
        self.calls: List[Dict[str, Any]] = []

    def add(self, url: str, *responses) -> None:
        self.routes.setdefault(url, []).extend(responses)

    def request(self, session, method, url, params=None, headers=None, timeout=None, **kwargs):
        self.calls.append({
            'method': method,
            'url': url,
            'params': params,
            'headers': {**session.headers, **(headers or {})},
            'timeout': timeout
        })
        queue = self.routes.get(url)
        if not queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, Exception):
            raise response
        return response

    def calls_to(self, url: str) -> List[Dict[str, Any]]:
        return [call for call in self.calls if call['url'] == url]


@pytest.fixture(autouse=True)
def config_env(monkeypatch):
    """Known environment for every test"""
    monkeypatch.setenv("API_TOKEN", "up:yeah:test-token")
    monkeypatch.setenv("UP_API_RETRY_DELAY", "0")
    monkeypatch.setenv("UP_API_MAX_RETRIES", "3")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("UP_API_URL", raising=False)
    ConfigManager.reload()
    yield
    ConfigManager.reload()


@pytest.fixture
def fake_api(monkeypatch):
    api = FakeAPI()

    def request(session, method, url, **kwargs):
        return api.request(session, method, url, **kwargs)

    monkeypatch.setattr(requests.Session, "request", request)
    return api


@pytest.fixture
def client(fake_api):
    from upbank.api import UpClient

    fake_api.add(PING_URL, FakeResponse(200, PING_PAYLOAD))
    return UpClient()


def money(base_units: int, currency: str = "AUD") -> Dict[str, Any]:
    return {
        "currencyCode": currency,
        "value": f"{base_units / 100:.2f}",
        "valueInBaseUnits": base_units
    }


def make_account(account_id: str, name: str, balance: int = 0, account_type: str = "TRANSACTIONAL") -> Dict[str, Any]:
    return {
        "type": "accounts",
        "id": account_id,
        "attributes": {
            "displayName": name,
            "accountType": account_type,
            "ownershipType": "INDIVIDUAL",
            "balance": money(balance),
            "createdAt": "2023-01-10T09:00:00+11:00"
        },
        "relationships": {
            "transactions": {
                "links": {"related": f"{BASE_URL}/accounts/{account_id}/transactions"}
            }
        },
        "links": {"self": f"{BASE_URL}/accounts/{account_id}"}
    }


def make_transaction(transaction_id: str, amount: int, description: str = "Coffee Shop",
                     category: Optional[str] = None, account_id: str = "acc-1") -> Dict[str, Any]:
    return {
        "type": "transactions",
        "id": transaction_id,
        "attributes": {
            "status": "SETTLED",
            "rawText": None,
            "description": description,
            "message": None,
            "isCategorizable": True,
            "holdInfo": None,
            "roundUp": None,
            "cashback": None,
            "amount": money(amount),
            "foreignAmount": None,
            "cardPurchaseMethod": None,
            "settledAt": "2024-03-02T10:00:00+11:00",
            "createdAt": "2024-03-01T10:00:00+11:00",
            "transactionType": None,
            "note": None,
            "performingCustomer": {"displayName": "Bobby"},
            "deepLinkURL": f"up://transaction/{transaction_id}"
        },
        "relationships": {
            "account": {"data": {"type": "accounts", "id": account_id}},
            "transferAccount": {"data": None},
            "category": {"data": {"type": "categories", "id": category} if category else None},
            "parentCategory": {"data": None},
            "tags": {"data": []}
        },
        "links": {"self": f"{BASE_URL}/transactions/{transaction_id}"}
    }


def page(data: List[Dict[str, Any]], next_url: Optional[str] = None) -> Dict[str, Any]:
    return {"data": data, "links": {"prev": None, "next": next_url}}
