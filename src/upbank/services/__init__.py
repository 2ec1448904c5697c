"""
Services for working with Up data.
"""

from .report_service import (
    ReportService,
    CategoryExpenses,
    PayeeTotal,
    category_totals,
    expenses_by_category,
    format_category_totals,
    format_expense_report
)

__all__ = [
    'ReportService',
    'CategoryExpenses',
    'PayeeTotal',
    'category_totals',
    'expenses_by_category',
    'format_category_totals',
    'format_expense_report'
]
