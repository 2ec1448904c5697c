import json
import functools

import click
import structlog

from ..api import APIError, ConfigurationError, UpClient
from ..config import ConfigManager
from ..services.report_service import (
    ReportService,
    format_category_totals,
    format_expense_report
)


def handle_api_errors(func):
    """Turn library errors into a clean CLI failure"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (APIError, ConfigurationError) as e:
            raise click.ClickException(str(e)) from e
    return wrapper


def make_client() -> UpClient:
    return UpClient(logger=structlog.get_logger("upbank"))


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug=False):
    """Up Bank API client"""
    ConfigManager().setup_logging(debug)
    if debug:
        click.echo("Debug logging enabled", err=True)


@cli.command()
@handle_api_errors
def fetch():
    """Print all accounts and transactions as JSON"""
    client = make_client()

    accounts = client.get_accounts()
    click.echo("Accounts")
    click.echo(json.dumps([a.to_api_dict() for a in accounts], indent=2))

    transactions = client.get_transactions()
    click.echo("Transactions")
    click.echo(json.dumps([t.to_api_dict() for t in transactions], indent=2))


@cli.command()
@handle_api_errors
def dump():
    """Log every account followed by its transactions"""
    client = make_client()
    logger = structlog.get_logger("upbank.dump")

    accounts = client.get_accounts()
    logger.info("accounts", accounts=[a.to_api_dict() for a in accounts])

    for account in accounts:
        transactions = client.get_transactions(account.id)
        logger.info(
            "transactions",
            account=account.display_name,
            transactions=[t.to_api_dict() for t in transactions]
        )


@cli.command('report-categories')
@click.option('--since-months', default=2, show_default=True, help='Window start, in months before now')
@click.option('--until-months', default=1, show_default=True, help='Window end, in months before now')
@handle_api_errors
def report_categories(since_months, until_months):
    """Total spending per category for a past month"""
    if until_months >= since_months:
        raise click.BadParameter("must be greater than --until-months", param_hint='--since-months')

    service = ReportService(make_client())
    totals = service.category_report(since_months, until_months)
    click.echo(format_category_totals(totals), nl=False)


@cli.command('report-expenses')
@click.option('--months', default=3, show_default=True, help='How many months back to report')
@click.option('--page-size', type=int, default=None, help='Transactions per page [default: UP_PAGE_SIZE or 100]')
@handle_api_errors
def report_expenses(months, page_size):
    """Spending per category broken down by payee"""
    if page_size is None:
        page_size = ConfigManager().get('reports.page_size', 100)

    service = ReportService(make_client())
    report = service.expense_report(months, page_size)
    click.echo(format_expense_report(report), nl=False)


if __name__ == '__main__':
    cli()
