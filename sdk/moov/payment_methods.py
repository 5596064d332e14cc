"""Payment method endpoints."""

from typing import Optional

from moov.call import CallArg, Endpoint, accept_json, prepend_args, query_param
from moov.resolve import completed_list_or_error, completed_object_or_error
from moov.transport import HTTPExecutor
from moov.types import PaymentMethod

PATH_PAYMENT_METHODS = "/accounts/{accountID}/payment-methods"
PATH_PAYMENT_METHOD = "/accounts/{accountID}/payment-methods/{paymentMethodID}"

ListPaymentMethodsFilter = CallArg


def with_payment_method_source_id(source_id: str) -> ListPaymentMethodsFilter:
    """Only return payment methods backed by a wallet, card or bank account ID."""
    return query_param("sourceID", source_id)


def with_payment_method_type(payment_method_type: str) -> ListPaymentMethodsFilter:
    return query_param("paymentMethodType", payment_method_type)


class PaymentMethodsAPI(HTTPExecutor):
    """Payment method operations."""

    def list_payment_methods(
        self,
        account_id: str,
        *filters: ListPaymentMethodsFilter,
    ) -> list[PaymentMethod]:
        resp = self.call_http(
            Endpoint("GET", PATH_PAYMENT_METHODS, account_id),
            *prepend_args(filters, accept_json()),
            operation="listing payment methods",
        )
        return completed_list_or_error(resp, PaymentMethod)

    def get_payment_method(self, account_id: str, payment_method_id: str) -> Optional[PaymentMethod]:
        resp = self.call_http(
            Endpoint("GET", PATH_PAYMENT_METHOD, account_id, payment_method_id),
            accept_json(),
            operation="getting payment method",
        )
        return completed_object_or_error(resp, PaymentMethod)
