"""Transfer endpoints.

Creating a transfer may finish synchronously or be accepted for asynchronous
processing depending on the payment rails involved, so ``create_transfer``
returns an ``Outcome`` rather than a plain ``Transfer``.

https://docs.moov.io/api/money-movement/transfers/
"""

import uuid
from datetime import datetime
from typing import Optional, Sequence, Union

from moov.call import (
    CallArg,
    Endpoint,
    accept_json,
    count,
    idempotency_key,
    json_body,
    prepend_args,
    query_param,
    skip,
    wait_for,
)
from moov.outcome import Outcome, resolve_outcome
from moov.resolve import completed_list_or_error, completed_object_or_error
from moov.transport import HTTPExecutor
from moov.types import CreateTransfer, Transfer, TransferStarted, TransferStatus

PATH_TRANSFERS = "/accounts/{accountID}/transfers"
PATH_TRANSFER = "/accounts/{accountID}/transfers/{transferID}"

CreateTransferArg = CallArg
ListTransferFilter = CallArg


def wait_for_rail_response() -> CreateTransferArg:
    """Have the API respond once the rail has processed the transfer.

    Against a synchronous rail this turns the ``Started`` outcome into a
    ``Completed`` one.
    """
    return wait_for("rail-response")


def with_idempotency_key(key: str) -> CreateTransferArg:
    """Use ``key`` instead of a generated idempotency key."""
    return idempotency_key(key)


def with_transfer_status(status: Union[TransferStatus, str]) -> ListTransferFilter:
    return query_param("status", status)


def with_transfer_start_date(start: datetime) -> ListTransferFilter:
    return query_param("startDateTime", start.isoformat())


def with_transfer_end_date(end: datetime) -> ListTransferFilter:
    return query_param("endDateTime", end.isoformat())


def with_transfer_group(group_id: str) -> ListTransferFilter:
    return query_param("groupID", group_id)


def with_transfer_account_ids(account_ids: Sequence[str]) -> ListTransferFilter:
    return query_param("accountIDs", ",".join(account_ids))


def with_transfer_skip(n: int) -> ListTransferFilter:
    return skip(n)


def with_transfer_count(n: int) -> ListTransferFilter:
    return count(n)


class TransfersAPI(HTTPExecutor):
    """Transfer operations."""

    def create_transfer(
        self,
        partner_account_id: str,
        create: CreateTransfer,
        *args: CreateTransferArg,
    ) -> Outcome[Transfer, TransferStarted]:
        """Move money between two payment methods.

        Args:
            partner_account_id: Account of the partner facilitating the transfer
            create: Source, destination and amount of the transfer
            *args: ``wait_for_rail_response``, ``with_idempotency_key``

        Returns:
            ``Completed(Transfer)`` if the API finished the transfer, or
            ``Started(TransferStarted)`` if it is still processing

        Raises:
            HTTPError: If the API rejected the transfer
            MalformedResponse: If the response didn't match its status
        """
        resp = self.call_http(
            Endpoint("POST", PATH_TRANSFERS, partner_account_id),
            *prepend_args(args, accept_json(), idempotency_key(str(uuid.uuid4())), json_body(create)),
            operation="creating transfer",
        )
        return resolve_outcome(resp, Transfer, TransferStarted)

    def get_transfer(self, account_id: str, transfer_id: str) -> Optional[Transfer]:
        resp = self.call_http(
            Endpoint("GET", PATH_TRANSFER, account_id, transfer_id),
            accept_json(),
            operation="getting transfer",
        )
        return completed_object_or_error(resp, Transfer)

    def list_transfers(self, account_id: str, *filters: ListTransferFilter) -> list[Transfer]:
        """List transfers involving an account.

        Args:
            account_id: Account to list transfers for
            *filters: ``with_transfer_status``, ``with_transfer_start_date``,
                ``with_transfer_end_date``, ``with_transfer_group``,
                ``with_transfer_account_ids``, ``with_transfer_skip``,
                ``with_transfer_count``

        Returns:
            Transfers in the order returned by the API
        """
        resp = self.call_http(
            Endpoint("GET", PATH_TRANSFERS, account_id),
            *prepend_args(filters, accept_json()),
            operation="listing transfers",
        )
        return completed_list_or_error(resp, Transfer)
