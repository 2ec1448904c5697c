"""
Money data models for Up integration.
"""

from pydantic import Field
from typing import Annotated
from decimal import Decimal

from .common import UpModel

# Up reports amounts in cents
BASE_UNIT_DIVISOR = 100


def base_units_to_decimal(value: int) -> Decimal:
    """Convert an amount in base units to a Decimal value"""
    return Decimal(value) / BASE_UNIT_DIVISOR


def format_base_units(value: int) -> str:
    """Render an amount in base units with two decimal places"""
    return f"{base_units_to_decimal(value):.2f}"


class MoneyObject(UpModel):
    """Model for an Up money amount"""
    currency_code: Annotated[str, Field(alias="currencyCode", description="ISO 4217 currency code")]
    value: Annotated[str, Field(description="Amount formatted as a decimal string")]
    value_in_base_units: Annotated[int, Field(alias="valueInBaseUnits", description="Amount in the smallest unit, e.g. cents")]

    def get_decimal(self) -> Decimal:
        """Get the amount as a Decimal value"""
        return base_units_to_decimal(self.value_in_base_units)

    @property
    def is_outflow(self) -> bool:
        return self.value_in_base_units < 0
