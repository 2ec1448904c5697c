"""
Transaction data models for Up integration.

This module contains Pydantic models for Up transaction data structures.
Amounts are signed: money leaving an account is negative.
"""

from pydantic import Field
from typing import Annotated, List, Optional
from datetime import datetime
from enum import Enum

from .common import (
    UpModel,
    ListRelationship,
    PaginationLinks,
    Relationship,
    SelfLink
)
from .money import MoneyObject


class TransactionStatus(str, Enum):
    """Enum for Up transaction statuses"""
    HELD = "HELD"
    SETTLED = "SETTLED"


class HoldInfo(UpModel):
    """Amount originally held before the transaction settled"""
    amount: Annotated[MoneyObject, Field(description="Held amount")]
    foreign_amount: Annotated[Optional[MoneyObject], Field(alias="foreignAmount", description="Held amount in foreign currency")] = None


class RoundUp(UpModel):
    amount: Annotated[MoneyObject, Field(description="Total round-up amount")]
    boost_portion: Annotated[Optional[MoneyObject], Field(alias="boostPortion", description="Extra boost added by the customer")] = None


class Cashback(UpModel):
    description: Annotated[str, Field(description="Why the cashback was paid")]
    amount: Annotated[MoneyObject, Field(description="Cashback amount")]


class CardPurchaseMethod(UpModel):
    method: Annotated[str, Field(description="Card method, e.g. CONTACTLESS")]
    card_number_suffix: Annotated[Optional[str], Field(alias="cardNumberSuffix", description="Last four digits of the card")] = None


class Note(UpModel):
    text: Annotated[str, Field(description="Note text")]


class Customer(UpModel):
    display_name: Annotated[str, Field(alias="displayName", description="Customer name")]


class TransactionAttributes(UpModel):
    status: Annotated[TransactionStatus, Field(description="HELD or SETTLED")]
    raw_text: Annotated[Optional[str], Field(alias="rawText", description="Original merchant text")] = None
    description: Annotated[str, Field(description="Short description, usually the payee")]
    message: Annotated[Optional[str], Field(description="Attached message")] = None
    is_categorizable: Annotated[bool, Field(alias="isCategorizable", description="Whether a category can be assigned")] = True
    hold_info: Annotated[Optional[HoldInfo], Field(alias="holdInfo", description="Hold details")] = None
    round_up: Annotated[Optional[RoundUp], Field(alias="roundUp", description="Round-up details")] = None
    cashback: Annotated[Optional[Cashback], Field(description="Cashback details")] = None
    amount: Annotated[MoneyObject, Field(description="Signed transaction amount")]
    foreign_amount: Annotated[Optional[MoneyObject], Field(alias="foreignAmount", description="Amount in foreign currency")] = None
    card_purchase_method: Annotated[Optional[CardPurchaseMethod], Field(alias="cardPurchaseMethod", description="Card purchase details")] = None
    settled_at: Annotated[Optional[datetime], Field(alias="settledAt", description="When the transaction settled")] = None
    created_at: Annotated[datetime, Field(alias="createdAt", description="When the transaction was created")]
    transaction_type: Annotated[Optional[str], Field(alias="transactionType", description="Transaction type label")] = None
    note: Annotated[Optional[Note], Field(description="Customer note")] = None
    performing_customer: Annotated[Optional[Customer], Field(alias="performingCustomer", description="Customer who made the transaction")] = None
    deep_link_url: Annotated[Optional[str], Field(alias="deepLinkURL", description="Link into the Up app")] = None


class TransactionRelationships(UpModel):
    account: Annotated[Relationship, Field(default_factory=Relationship, description="Owning account")]
    transfer_account: Annotated[Relationship, Field(default_factory=Relationship, alias="transferAccount", description="Counterpart account for transfers")]
    category: Annotated[Relationship, Field(default_factory=Relationship, description="Assigned category")]
    parent_category: Annotated[Relationship, Field(default_factory=Relationship, alias="parentCategory", description="Parent of the assigned category")]
    tags: Annotated[ListRelationship, Field(default_factory=ListRelationship, description="Attached tags")]


class TransactionResource(UpModel):
    """Model for an Up transaction"""
    type: Annotated[str, Field(description="Resource type")] = "transactions"
    id: Annotated[str, Field(description="Transaction ID")]
    attributes: Annotated[TransactionAttributes, Field(description="Transaction attributes")]
    relationships: Annotated[TransactionRelationships, Field(default_factory=TransactionRelationships, description="Related resources")]
    links: Annotated[Optional[SelfLink], Field(description="Resource links")] = None

    @property
    def category_id(self) -> Optional[str]:
        """Category ID, or None when the transaction is uncategorized"""
        data = self.relationships.category.data
        if data is None or not data.id:
            return None
        return data.id

    @property
    def account_id(self) -> Optional[str]:
        data = self.relationships.account.data
        return data.id if data else None

    @property
    def amount_in_base_units(self) -> int:
        return self.attributes.amount.value_in_base_units

    @property
    def description(self) -> str:
        return self.attributes.description


class ListTransactionsResponse(UpModel):
    """A page of transactions"""
    data: Annotated[List[TransactionResource], Field(default_factory=list, description="Transactions on this page")]
    links: Annotated[PaginationLinks, Field(default_factory=PaginationLinks, description="Pagination links")]
