import logging
from datetime import datetime, timedelta, timezone

import pytest
import requests
import structlog

from upbank.api import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ServerError,
    UpClient
)
from upbank.models import AccountType, TransactionStatus

from conftest import (
    BASE_URL,
    PING_PAYLOAD,
    PING_URL,
    FakeResponse,
    make_account,
    make_transaction,
    page
)

AEDT = timezone(timedelta(hours=11))
TRANSACTIONS_URL = f"{BASE_URL}/transactions"


class RecordingLogger:
    """Collects structlog-style calls as (level, event, fields)"""
    def __init__(self):
        self.events = []

    def _log(self, level, event, **fields):
        self.events.append((level, event, fields))

    def debug(self, event, **fields):
        self._log("debug", event, **fields)

    def info(self, event, **fields):
        self._log("info", event, **fields)

    def warning(self, event, **fields):
        self._log("warning", event, **fields)

    def error(self, event, **fields):
        self._log("error", event, **fields)


def test_missing_token_raises(monkeypatch, fake_api):
    monkeypatch.delenv("API_TOKEN", raising=False)

    with pytest.raises(ConfigurationError, match="environment variable API_TOKEN not set"):
        UpClient()
    assert fake_api.calls == []


def test_explicit_token_wins_over_environment(fake_api):
    fake_api.add(PING_URL, FakeResponse(200, PING_PAYLOAD))

    UpClient(api_token="up:yeah:explicit")

    assert fake_api.calls[0]["headers"]["Authorization"] == "Bearer up:yeah:explicit"


def test_constructor_pings_with_short_timeout(fake_api):
    fake_api.add(PING_URL, FakeResponse(200, PING_PAYLOAD))

    UpClient()

    assert len(fake_api.calls) == 1
    assert fake_api.calls[0]["url"] == PING_URL
    assert fake_api.calls[0]["timeout"] == 5
    assert fake_api.calls[0]["headers"]["Authorization"] == "Bearer up:yeah:test-token"


def test_failed_ping_fails_construction(fake_api):
    fake_api.add(PING_URL, FakeResponse(401, {"errors": [{"title": "Not Authorized", "detail": "Bad token"}]}))

    with pytest.raises(AuthenticationError, match="error pinging API"):
        UpClient()


def test_failed_ping_closes_session(fake_api, monkeypatch):
    closed = []
    monkeypatch.setattr(requests.Session, "close", lambda session: closed.append(session))
    fake_api.add(PING_URL, FakeResponse(401, {"errors": [{"title": "Not Authorized"}]}))

    with pytest.raises(AuthenticationError):
        UpClient()

    assert len(closed) == 1


def test_verify_false_skips_ping(fake_api):
    UpClient(verify=False)

    assert fake_api.calls == []


def test_custom_base_url(fake_api):
    fake_api.add("http://localhost:8080/api/v1/util/ping", FakeResponse(200, PING_PAYLOAD))

    client = UpClient(base_url="http://localhost:8080/api/v1/")

    assert client.base_url == "http://localhost:8080/api/v1"


def test_ping_and_health_check(fake_api, client):
    assert client.ping().meta.status_emoji == "⚡️"
    assert client.health_check() is True


def test_health_check_reports_failure(fake_api, client):
    fake_api.routes[PING_URL] = [FakeResponse(500, {"errors": [{"title": "Down"}]})]

    assert client.health_check() is False


def test_get_accounts_follows_pagination(fake_api, client):
    second_page = f"{BASE_URL}/accounts?page%5Bafter%5D=abc&page%5Bsize%5D=1"
    fake_api.add(f"{BASE_URL}/accounts", FakeResponse(200, page([make_account("acc-1", "Spending")], second_page)))
    fake_api.add(second_page, FakeResponse(200, page([make_account("acc-2", "Savings", account_type="SAVER")])))

    accounts = client.get_accounts(page_size=1)

    assert [a.id for a in accounts] == ["acc-1", "acc-2"]
    assert accounts[1].attributes.account_type == AccountType.SAVER
    assert fake_api.calls_to(f"{BASE_URL}/accounts")[0]["params"] == {"page[size]": "1"}
    assert fake_api.calls_to(second_page)[0]["params"] is None


def test_get_accounts_filters(fake_api, client):
    fake_api.add(f"{BASE_URL}/accounts", FakeResponse(200, page([])))

    assert client.get_accounts(account_type=AccountType.SAVER, ownership_type="JOINT") == []
    assert fake_api.calls_to(f"{BASE_URL}/accounts")[0]["params"] == {
        "filter[accountType]": "SAVER",
        "filter[ownershipType]": "JOINT"
    }


def test_get_accounts_error_status(fake_api, client):
    fake_api.add(f"{BASE_URL}/accounts", FakeResponse(500, {"errors": [{"title": "Oops"}]}))

    with pytest.raises(ServerError):
        client.get_accounts()


def test_get_account(fake_api, client):
    fake_api.add(f"{BASE_URL}/accounts/acc-1", FakeResponse(200, {"data": make_account("acc-1", "Spending", 500)}))

    account = client.get_account("acc-1")

    assert account.display_name == "Spending"
    assert account.attributes.balance.value_in_base_units == 500


def test_get_transactions_for_all_accounts(fake_api, client):
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page([make_transaction("tx-1", -100)])))
    since = datetime(2024, 1, 1, tzinfo=AEDT)
    until = datetime(2024, 2, 1, tzinfo=AEDT)

    transactions = client.get_transactions(since=since, until=until, page_size=100,
                                           status=TransactionStatus.SETTLED)

    assert [t.id for t in transactions] == ["tx-1"]
    assert fake_api.calls_to(TRANSACTIONS_URL)[0]["params"] == {
        "page[size]": "100",
        "filter[status]": "SETTLED",
        "filter[since]": "2024-01-01T00:00:00+11:00",
        "filter[until]": "2024-02-01T00:00:00+11:00"
    }


def test_get_transactions_for_one_account(fake_api, client):
    url = f"{BASE_URL}/accounts/acc-9/transactions"
    fake_api.add(url, FakeResponse(200, page([make_transaction("tx-1", -100, account_id="acc-9")])))

    transactions = client.get_transactions("acc-9")

    assert transactions[0].account_id == "acc-9"
    assert fake_api.calls_to(url)[0]["params"] is None


def test_get_transactions_concatenates_pages_in_order(fake_api, client):
    page_two = f"{TRANSACTIONS_URL}?page%5Bafter%5D=two"
    page_three = f"{TRANSACTIONS_URL}?page%5Bafter%5D=three"
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page(
        [make_transaction("tx-1", -1), make_transaction("tx-2", -2)], page_two)))
    fake_api.add(page_two, FakeResponse(200, page([make_transaction("tx-3", -3)], page_three)))
    fake_api.add(page_three, FakeResponse(200, page([make_transaction("tx-4", 4)])))

    transactions = client.get_transactions(category="groceries", tag="holiday")

    assert [t.id for t in transactions] == ["tx-1", "tx-2", "tx-3", "tx-4"]
    assert [call["url"] for call in fake_api.calls[1:]] == [TRANSACTIONS_URL, page_two, page_three]
    assert fake_api.calls[1]["params"] == {"filter[category]": "groceries", "filter[tag]": "holiday"}


def test_get_transactions_fails_when_any_page_fails(fake_api):
    client = UpClient(verify=False, max_retries=1)
    page_two = f"{TRANSACTIONS_URL}?page%5Bafter%5D=two"
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page([make_transaction("tx-1", -1)], page_two)))
    fake_api.add(page_two, FakeResponse(500, {"errors": [{"title": "Internal Server Error"}]}))

    with pytest.raises(APIError):
        client.get_transactions()


def test_get_transactions_empty(fake_api, client):
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page([])))

    assert client.get_transactions() == []


def test_iter_transactions_is_lazy(fake_api, client):
    page_two = f"{TRANSACTIONS_URL}?page%5Bafter%5D=two"
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page([make_transaction("tx-1", -1)], page_two)))
    fake_api.add(page_two, FakeResponse(200, page([make_transaction("tx-2", -2)])))

    iterator = client.iter_transactions()
    first = next(iterator)

    assert first.id == "tx-1"
    assert fake_api.calls_to(page_two) == []
    assert [t.id for t in iterator] == ["tx-2"]


def test_injected_logger_receives_page_events(fake_api):
    fake_api.add(PING_URL, FakeResponse(200, PING_PAYLOAD))
    recorder = RecordingLogger()
    client = UpClient(logger=recorder)
    page_two = f"{TRANSACTIONS_URL}?page%5Bafter%5D=two"
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page(
        [make_transaction("tx-1", -1), make_transaction("tx-2", -2)], page_two)))
    fake_api.add(page_two, FakeResponse(200, page([make_transaction("tx-3", -3)])))

    client.get_transactions()

    assert ("info", "GetTransactions") in [(level, event) for level, event, _ in recorder.events]
    pages = [(level, fields) for level, event, fields in recorder.events if event == "getTransactions"]
    assert [level for level, _ in pages] == ["debug", "debug"]
    assert [(fields["url"], fields["transaction_count"]) for _, fields in pages] == [
        (TRANSACTIONS_URL, 2),
        (page_two, 1)
    ]


def test_default_logger_goes_through_stdlib_logging(fake_api, capsys, caplog):
    structlog.reset_defaults()
    caplog.set_level(logging.DEBUG, logger="upbank")
    fake_api.add(TRANSACTIONS_URL, FakeResponse(200, page([make_transaction("tx-1", -1)])))

    UpClient(verify=False).get_transactions()

    assert capsys.readouterr().out == ""
    messages = [record.getMessage() for record in caplog.records if record.name.startswith("upbank.api")]
    assert any("GetTransactions" in message for message in messages)
    assert any("getTransactions" in message for message in messages)
