"""Type definitions for the Moov SDK.

Field names are snake_case; the wire names (``transferID``, ``createdOn``...)
are kept as aliases. Unknown fields returned by the API are preserved so a
decoded resource dumps back to the same JSON.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class MoovModel(BaseModel):
    """Base model for API resources."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Amount(MoovModel):
    """Amount in the smallest unit of the currency (cents for USD)."""

    currency: str
    value: int


class AmountDecimal(MoovModel):
    """Amount as a decimal-formatted string, e.g. "12.34"."""

    currency: str
    value_decimal: str = Field(alias="valueDecimal")


# ==================== Accounts ====================


class Account(MoovModel):
    """Moov account."""

    account_id: str = Field(alias="accountID")
    account_type: Optional[str] = Field(default=None, alias="accountType")  # individual, business
    display_name: Optional[str] = Field(default=None, alias="displayName")
    foreign_id: Optional[str] = Field(default=None, alias="foreignID")
    profile: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, str] = Field(default_factory=dict)
    created_on: Optional[datetime] = Field(default=None, alias="createdOn")
    updated_on: Optional[datetime] = Field(default=None, alias="updatedOn")


class CreateAccount(MoovModel):
    """Request body for creating an account."""

    account_type: str = Field(alias="accountType")
    profile: dict[str, Any]
    foreign_id: Optional[str] = Field(default=None, alias="foreignID")
    metadata: Optional[dict[str, str]] = None


# ==================== Payment methods ====================


class PaymentMethod(MoovModel):
    """Payment method attached to an account."""

    payment_method_id: str = Field(alias="paymentMethodID")
    # moov-wallet, ach-debit-fund, ach-credit-standard, card-payment, rtp-credit...
    payment_method_type: str = Field(alias="paymentMethodType")
    wallet: Optional[dict[str, Any]] = None
    bank_account: Optional[dict[str, Any]] = Field(default=None, alias="bankAccount")
    card: Optional[dict[str, Any]] = None


# ==================== Transfers ====================


class TransferStatus(str, Enum):
    CREATED = "created"
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REVERSED = "reversed"
    QUEUED = "queued"
    CANCELED = "canceled"


class CreateTransferSource(MoovModel):
    payment_method_id: Optional[str] = Field(default=None, alias="paymentMethodID")
    # Set instead of a payment method to reuse the source of an earlier transfer
    transfer_id: Optional[str] = Field(default=None, alias="transferID")
    card_details: Optional[dict[str, Any]] = Field(default=None, alias="cardDetails")
    ach_details: Optional[dict[str, Any]] = Field(default=None, alias="achDetails")


class CreateTransferDestination(MoovModel):
    payment_method_id: str = Field(alias="paymentMethodID")
    card_details: Optional[dict[str, Any]] = Field(default=None, alias="cardDetails")
    ach_details: Optional[dict[str, Any]] = Field(default=None, alias="achDetails")


class CreateTransfer(MoovModel):
    """Request body for creating a transfer."""

    source: CreateTransferSource
    destination: CreateTransferDestination
    amount: Amount
    facilitator_fee: Optional[dict[str, Any]] = Field(default=None, alias="facilitatorFee")
    description: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    sales_tax_amount: Optional[Amount] = Field(default=None, alias="salesTaxAmount")


class Transfer(MoovModel):
    """A transfer as fully materialized by the API."""

    transfer_id: str = Field(alias="transferID")
    status: str  # created, pending, completed, failed, reversed, queued, canceled
    amount: Optional[Amount] = None
    source: Optional[dict[str, Any]] = None
    destination: Optional[dict[str, Any]] = None
    description: Optional[str] = None
    failure_reason: Optional[str] = Field(default=None, alias="failureReason")
    group_id: Optional[str] = Field(default=None, alias="groupID")
    facilitator_fee: Optional[dict[str, Any]] = Field(default=None, alias="facilitatorFee")
    moov_fee: Optional[int] = Field(default=None, alias="moovFee")
    moov_fee_decimal: Optional[str] = Field(default=None, alias="moovFeeDecimal")
    metadata: dict[str, str] = Field(default_factory=dict)
    created_on: Optional[datetime] = Field(default=None, alias="createdOn")
    completed_on: Optional[datetime] = Field(default=None, alias="completedOn")


class TransferStarted(MoovModel):
    """Handle for a transfer the API accepted but is still processing."""

    transfer_id: str = Field(alias="transferID")
    status: Optional[str] = None
    created_on: Optional[datetime] = Field(default=None, alias="createdOn")


# ==================== Sweeps ====================


class SweepConfigStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class SweepStatus(str, Enum):
    ACCRUING = "accruing"
    ACTION_REQUIRED = "action-required"
    CANCELED = "canceled"
    FAILED = "failed"
    PAID = "paid"
    PENDING = "pending"


class SweepConfig(MoovModel):
    """Sweep configuration for a wallet."""

    sweep_config_id: str = Field(alias="sweepConfigID")
    wallet_id: str = Field(alias="walletID")
    status: str  # enabled, disabled
    push_payment_method: Optional[dict[str, Any]] = Field(default=None, alias="pushPaymentMethod")
    pull_payment_method: Optional[dict[str, Any]] = Field(default=None, alias="pullPaymentMethod")
    statement_descriptor: Optional[str] = Field(default=None, alias="statementDescriptor")
    minimum_balance: Optional[str] = Field(default=None, alias="minimumBalance")
    locked_fields: Optional[list[str]] = Field(default=None, alias="lockedFields")
    created_on: Optional[datetime] = Field(default=None, alias="createdOn")
    updated_on: Optional[datetime] = Field(default=None, alias="updatedOn")


class CreateSweepConfig(MoovModel):
    """Request body for creating a sweep config.

    ``minimum_balance`` is the amount to keep in the wallet, as a decimal
    string with up to two places ("12.34"). It defaults to "0.00" server-side.
    """

    account_id: str = Field(exclude=True)
    wallet_id: str = Field(alias="walletID")
    status: SweepConfigStatus
    push_payment_method_id: str = Field(alias="pushPaymentMethodID")
    pull_payment_method_id: str = Field(alias="pullPaymentMethodID")
    # Overrides the default NACHA company entry description for sweep transfers
    statement_descriptor: Optional[str] = Field(default=None, alias="statementDescriptor")
    minimum_balance: Optional[str] = Field(default=None, alias="minimumBalance")


class UpdateSweepConfig(MoovModel):
    """Request body for updating a sweep config. Only set fields are sent."""

    account_id: str = Field(exclude=True)
    sweep_config_id: str = Field(exclude=True)
    status: Optional[SweepConfigStatus] = None
    push_payment_method_id: Optional[str] = Field(default=None, alias="pushPaymentMethodID")
    pull_payment_method_id: Optional[str] = Field(default=None, alias="pullPaymentMethodID")
    statement_descriptor: Optional[str] = Field(default=None, alias="statementDescriptor")
    minimum_balance: Optional[str] = Field(default=None, alias="minimumBalance")


class Sweep(MoovModel):
    """Accrual period of a wallet's balance that is swept to a payment method."""

    sweep_id: str = Field(alias="sweepID")
    status: str  # accruing, action-required, canceled, failed, paid, pending
    accrual_started_on: Optional[datetime] = Field(default=None, alias="accrualStartedOn")
    accrual_ended_on: Optional[datetime] = Field(default=None, alias="accrualEndedOn")
    accrued_amount: Optional[AmountDecimal] = Field(default=None, alias="accruedAmount")
    pending_transfers_amount: Optional[AmountDecimal] = Field(
        default=None, alias="pendingTransfersAmount"
    )
    residual_balance: Optional[AmountDecimal] = Field(default=None, alias="residualBalance")
    transfer_id: Optional[str] = Field(default=None, alias="transferID")
    transfer_amount: Optional[AmountDecimal] = Field(default=None, alias="transferAmount")
    statement_descriptor: Optional[str] = Field(default=None, alias="statementDescriptor")


# ==================== Receipts ====================


class CreateReceipt(MoovModel):
    """Request body for creating a receipt.

    Exactly one of ``email`` or ``email_account_id`` and one of the ``for_*``
    identifiers should be set; the API enforces this.
    """

    kind: str  # sale.customer.v1
    email: Optional[str] = None
    email_account_id: Optional[str] = Field(default=None, alias="emailAccountID")
    for_transfer_id: Optional[str] = Field(default=None, alias="forTransferID")
    for_schedule_id: Optional[str] = Field(default=None, alias="forScheduleID")
    for_occurrence_id: Optional[str] = Field(default=None, alias="forOccurrenceID")


class ReceiptSent(MoovModel):
    receipt_id: Optional[str] = Field(default=None, alias="receiptID")
    idempotency_key: Optional[str] = Field(default=None, alias="idempotencyKey")
    email: Optional[str] = None
    sent_on: Optional[datetime] = Field(default=None, alias="sentOn")


class Receipt(MoovModel):
    """Receipt for a transfer, schedule or occurrence."""

    id: str = Field(alias="receiptID")
    kind: str
    email: Optional[str] = None
    email_account_id: Optional[str] = Field(default=None, alias="emailAccountID")
    for_transfer_id: Optional[str] = Field(default=None, alias="forTransferID")
    for_schedule_id: Optional[str] = Field(default=None, alias="forScheduleID")
    for_occurrence_id: Optional[str] = Field(default=None, alias="forOccurrenceID")
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    created_on: Optional[datetime] = Field(default=None, alias="createdOn")
    disabled_on: Optional[datetime] = Field(default=None, alias="disabledOn")
    sent_for: Optional[list[ReceiptSent]] = Field(default=None, alias="sentFor")


# ==================== Errors ====================


class ErrorResponse(BaseModel):
    """API error response."""

    error: str
    details: Any = None
