"""Account endpoints."""

from typing import Optional

from moov.call import CallArg, Endpoint, accept_json, count, json_body, prepend_args, query_param, skip
from moov.resolve import completed_list_or_error, completed_object_or_error
from moov.transport import HTTPExecutor
from moov.types import Account, CreateAccount

PATH_ACCOUNTS = "/accounts"
PATH_ACCOUNT = "/accounts/{accountID}"

ListAccountFilter = CallArg


def with_account_name(name: str) -> ListAccountFilter:
    return query_param("name", name)


def with_account_email(email: str) -> ListAccountFilter:
    return query_param("email", email)


def with_account_type(account_type: str) -> ListAccountFilter:
    return query_param("type", account_type)


def with_account_foreign_id(foreign_id: str) -> ListAccountFilter:
    return query_param("foreignID", foreign_id)


def with_account_skip(n: int) -> ListAccountFilter:
    return skip(n)


def with_account_count(n: int) -> ListAccountFilter:
    return count(n)


class AccountsAPI(HTTPExecutor):
    """Account operations."""

    def create_account(self, create: CreateAccount) -> Optional[Account]:
        resp = self.call_http(
            Endpoint("POST", PATH_ACCOUNTS),
            accept_json(),
            json_body(create),
            operation="creating account",
        )
        return completed_object_or_error(resp, Account)

    def get_account(self, account_id: str) -> Optional[Account]:
        resp = self.call_http(
            Endpoint("GET", PATH_ACCOUNT, account_id),
            accept_json(),
            operation="getting account",
        )
        return completed_object_or_error(resp, Account)

    def list_accounts(self, *filters: ListAccountFilter) -> list[Account]:
        resp = self.call_http(
            Endpoint("GET", PATH_ACCOUNTS),
            *prepend_args(filters, accept_json()),
            operation="listing accounts",
        )
        return completed_list_or_error(resp, Account)
