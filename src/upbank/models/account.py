"""
Account data models for Up integration.

This module contains Pydantic models for Up account data structures.
"""

from pydantic import Field
from typing import Annotated, List, Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum

from .common import UpModel, LinksOnlyRelationship, PaginationLinks, SelfLink
from .money import MoneyObject


class AccountType(str, Enum):
    """Enum for Up account types"""
    SAVER = "SAVER"
    TRANSACTIONAL = "TRANSACTIONAL"
    HOME_LOAN = "HOME_LOAN"


class OwnershipType(str, Enum):
    """Enum for Up account ownership"""
    INDIVIDUAL = "INDIVIDUAL"
    JOINT = "JOINT"


class AccountAttributes(UpModel):
    display_name: Annotated[str, Field(alias="displayName", description="Account name")]
    account_type: Annotated[AccountType, Field(alias="accountType", description="Account type")]
    ownership_type: Annotated[OwnershipType, Field(alias="ownershipType", description="Individual or joint account")]
    balance: Annotated[MoneyObject, Field(description="Available balance")]
    created_at: Annotated[Optional[datetime], Field(alias="createdAt", description="When the account was opened")] = None


class AccountRelationships(UpModel):
    transactions: Annotated[Optional[LinksOnlyRelationship], Field(description="Link to the account's transactions")] = None


class AccountResource(UpModel):
    """Model for an Up account"""
    type: Annotated[str, Field(description="Resource type")] = "accounts"
    id: Annotated[str, Field(description="Account ID")]
    attributes: Annotated[AccountAttributes, Field(description="Account attributes")]
    relationships: Annotated[Optional[AccountRelationships], Field(description="Related resources")] = None
    links: Annotated[Optional[SelfLink], Field(description="Resource links")] = None

    @property
    def display_name(self) -> str:
        return self.attributes.display_name

    def get_balance_decimal(self) -> Decimal:
        """Get the balance as a Decimal value"""
        return self.attributes.balance.get_decimal()


class ListAccountsResponse(UpModel):
    """A page of accounts"""
    data: Annotated[List[AccountResource], Field(default_factory=list, description="Accounts on this page")]
    links: Annotated[PaginationLinks, Field(default_factory=PaginationLinks, description="Pagination links")]


class GetAccountResponse(UpModel):
    data: Annotated[AccountResource, Field(description="The requested account")]
