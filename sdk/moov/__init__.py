"""Moov SDK - Python client for the Moov payments API."""

from moov.accounts import (
    with_account_count,
    with_account_email,
    with_account_foreign_id,
    with_account_name,
    with_account_skip,
    with_account_type,
)
from moov.call import (
    CallArg,
    CallBuilder,
    Endpoint,
    Request,
    accept_json,
    call_builder_fn,
    count,
    header,
    idempotency_key,
    json_body,
    query_param,
    skip,
    wait_for,
    with_timeout,
)
from moov.client import MoovClient
from moov.config import Settings
from moov.exceptions import (
    APIError,
    BadRequest,
    Conflict,
    CredentialsNotSet,
    FailedValidation,
    Forbidden,
    HTTPError,
    MalformedPath,
    MalformedResponse,
    MoovError,
    NotFound,
    RateLimited,
    ServerError,
    TransportError,
    Unauthorized,
)
from moov.outcome import Completed, Outcome, Started
from moov.payment_methods import with_payment_method_source_id, with_payment_method_type
from moov.receipts import receipt_by_transfer_id
from moov.sweeps import (
    with_sweep_count,
    with_sweep_skip,
    with_sweep_statement_descriptor,
    with_sweep_status,
)
from moov.transfers import (
    wait_for_rail_response,
    with_idempotency_key,
    with_transfer_account_ids,
    with_transfer_count,
    with_transfer_end_date,
    with_transfer_group,
    with_transfer_skip,
    with_transfer_start_date,
    with_transfer_status,
)
from moov.transport import CallResponse
from moov.types import (
    Account,
    Amount,
    AmountDecimal,
    CreateAccount,
    CreateReceipt,
    CreateSweepConfig,
    CreateTransfer,
    CreateTransferDestination,
    CreateTransferSource,
    PaymentMethod,
    Receipt,
    ReceiptSent,
    Sweep,
    SweepConfig,
    SweepConfigStatus,
    SweepStatus,
    Transfer,
    TransferStarted,
    TransferStatus,
    UpdateSweepConfig,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "MoovClient",
    "Settings",
    # Call construction
    "CallArg",
    "CallBuilder",
    "CallResponse",
    "Endpoint",
    "Request",
    "accept_json",
    "call_builder_fn",
    "count",
    "header",
    "idempotency_key",
    "json_body",
    "query_param",
    "skip",
    "wait_for",
    "with_timeout",
    # Outcomes
    "Outcome",
    "Completed",
    "Started",
    # Filters and per-endpoint options
    "with_account_count",
    "with_account_email",
    "with_account_foreign_id",
    "with_account_name",
    "with_account_skip",
    "with_account_type",
    "with_payment_method_source_id",
    "with_payment_method_type",
    "receipt_by_transfer_id",
    "with_sweep_count",
    "with_sweep_skip",
    "with_sweep_statement_descriptor",
    "with_sweep_status",
    "wait_for_rail_response",
    "with_idempotency_key",
    "with_transfer_account_ids",
    "with_transfer_count",
    "with_transfer_end_date",
    "with_transfer_group",
    "with_transfer_skip",
    "with_transfer_start_date",
    "with_transfer_status",
    # Exceptions
    "MoovError",
    "CredentialsNotSet",
    "MalformedPath",
    "MalformedResponse",
    "TransportError",
    "HTTPError",
    "APIError",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "Conflict",
    "FailedValidation",
    "RateLimited",
    "ServerError",
    # Types
    "Account",
    "Amount",
    "AmountDecimal",
    "CreateAccount",
    "CreateReceipt",
    "CreateSweepConfig",
    "CreateTransfer",
    "CreateTransferDestination",
    "CreateTransferSource",
    "PaymentMethod",
    "Receipt",
    "ReceiptSent",
    "Sweep",
    "SweepConfig",
    "SweepConfigStatus",
    "SweepStatus",
    "Transfer",
    "TransferStarted",
    "TransferStatus",
    "UpdateSweepConfig",
]
