"""
Report service for summarising transactions.

This module groups transactions by category and payee and renders the
plain-text reports printed by the command-line programs.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..models.money import format_base_units
from ..models.transaction import TransactionResource
from ..utils.date_utils import DateFormatter
from ..utils.sorting import Pair, sort_by_value

logger = logging.getLogger(__name__)

INCOME = "income"
UNCATEGORIZED = "uncategorized"
RULE = "-------------------------------- ----------------"


@dataclass
class PayeeTotal:
    name: str
    total: int = 0


@dataclass
class CategoryExpenses:
    """Expenses for one category, grouped by payee"""
    category: str
    payees: Dict[str, PayeeTotal] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(payee.total for payee in self.payees.values())

    def add(self, payee_name: str, amount: int) -> None:
        payee = self.payees.setdefault(payee_name, PayeeTotal(payee_name))
        payee.total += amount

    def sorted_payees(self) -> List[PayeeTotal]:
        """Payees by total, largest first"""
        return sorted(self.payees.values(), key=lambda p: (-p.total, p.name))


def category_totals(transactions: Iterable[TransactionResource]) -> Dict[str, int]:
    """
    Sum absolute amounts per category.

    Uncategorized money in is keyed ``income``; any other uncategorized
    transaction is keyed ``uncategorized``.
    """
    totals: Dict[str, int] = {}
    for transaction in transactions:
        value = transaction.amount_in_base_units
        category = transaction.category_id
        if category is None:
            category = INCOME if value > 0 else UNCATEGORIZED
        totals[category] = totals.get(category, 0) + abs(value)
    return totals


def expenses_by_category(transactions: Iterable[TransactionResource]) -> Dict[str, CategoryExpenses]:
    """
    Group money out by category, then by payee description.

    Money in is skipped.
    """
    report: Dict[str, CategoryExpenses] = {}
    for transaction in transactions:
        value = transaction.amount_in_base_units
        category = transaction.category_id or UNCATEGORIZED
        if value > 0:
            logger.debug(f"Skipping income: {transaction.description} ({value}) category={category}")
            continue

        expenses = report.setdefault(category, CategoryExpenses(category))
        expenses.add(transaction.description, -value)
    return report


def format_category_totals(totals: List[Pair]) -> str:
    lines = ["Category Totals"]
    lines.extend(f"{pair.key:<30} : {format_base_units(pair.value)}" for pair in totals)
    return "\n".join(lines) + "\n"


def format_expense_report(report: Dict[str, CategoryExpenses]) -> str:
    lines = ["Expense Category Totals", ""]
    for expenses in sorted(report.values(), key=lambda e: (-e.total, e.category)):
        lines.append(expenses.category)
        lines.append(RULE)
        for payee in expenses.sorted_payees():
            lines.append(f"{payee.name:<30} : {format_base_units(payee.total):>7}")
        lines.append(RULE)
        lines.append(f"{'total':>30} : {format_base_units(expenses.total):>7}")
        lines.append("")
    return "\n".join(lines) + "\n"


class ReportService:
    """
    Service that fetches transactions and builds category reports.
    """

    def __init__(self, client):
        """
        Initialize the report service.

        Args:
            client: UpClient used to fetch transactions
        """
        self.client = client

    def category_report(self,
                        since_months: int = 2,
                        until_months: int = 1,
                        now: Optional[datetime] = None) -> List[Pair]:
        """
        Category totals for a window of whole months before now.

        Args:
            since_months: Window start, in months before now
            until_months: Window end, in months before now
            now: Reference time, defaults to the current time

        Returns:
            List[Pair]: Category totals, largest first
        """
        if until_months >= since_months:
            raise ValueError("since_months must be greater than until_months")

        since = DateFormatter.months_ago(since_months, now)
        until = DateFormatter.months_ago(until_months, now)
        logger.info(f"Fetching transactions since {since.isoformat()} until {until.isoformat()}")

        transactions = self.client.get_transactions(since=since, until=until)
        return sort_by_value(category_totals(transactions))

    def expense_report(self,
                       months: int = 3,
                       page_size: int = 100,
                       now: Optional[datetime] = None) -> Dict[str, CategoryExpenses]:
        """
        Expenses by category and payee over the last few months.

        Args:
            months: How many months back to start
            page_size: Transactions per page
            now: Reference time, defaults to the current time

        Returns:
            Dict[str, CategoryExpenses]: Expenses keyed by category
        """
        since = DateFormatter.months_ago(months, now)
        logger.info(f"Fetching transactions since {since.isoformat()}")

        transactions = self.client.get_transactions(since=since, page_size=page_size)
        return expenses_by_category(transactions)
