"""Receipt endpoints.

https://docs.moov.io/api/money-movement/receipts/
"""

from moov.call import CallArg, Endpoint, accept_json, json_body, prepend_args, query_param
from moov.resolve import completed_list_or_error
from moov.transport import HTTPExecutor
from moov.types import CreateReceipt, Receipt

PATH_RECEIPTS = "/receipts"

ListReceiptsFilter = CallArg


def receipt_by_transfer_id(transfer_id: str) -> ListReceiptsFilter:
    """Only return receipts created for ``transfer_id``."""
    return query_param("id", transfer_id)


class ReceiptsAPI(HTTPExecutor):
    """Receipt operations."""

    def create_receipt(self, create: CreateReceipt) -> list[Receipt]:
        """Create a receipt for a transfer, schedule or occurrence.

        The API accepts a batch, so the receipt is posted as a one-element
        array and the created receipts come back as a list.

        Args:
            create: Receipt to create

        Returns:
            The created receipts
        """
        resp = self.call_http(
            Endpoint("POST", PATH_RECEIPTS),
            accept_json(),
            json_body([create]),
            operation="creating receipt",
        )
        return completed_list_or_error(resp, Receipt)

    def list_receipts(self, *filters: ListReceiptsFilter) -> list[Receipt]:
        """List receipts, e.g. ``list_receipts(receipt_by_transfer_id(transfer_id))``."""
        resp = self.call_http(
            Endpoint("GET", PATH_RECEIPTS),
            *prepend_args(filters, accept_json()),
            operation="listing receipts",
        )
        return completed_list_or_error(resp, Receipt)
