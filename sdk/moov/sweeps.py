"""Sweep config and sweep endpoints.

https://docs.moov.io/api/money-movement/sweeps/
"""

from typing import Optional, Union

from moov.call import (
    CallArg,
    Endpoint,
    accept_json,
    count,
    json_body,
    prepend_args,
    query_param,
    skip,
)
from moov.resolve import completed_list_or_error, completed_object_or_error
from moov.transport import HTTPExecutor
from moov.types import CreateSweepConfig, Sweep, SweepConfig, SweepStatus, UpdateSweepConfig

PATH_SWEEP_CONFIGS = "/accounts/{accountID}/sweep-configs"
PATH_SWEEP_CONFIG = "/accounts/{accountID}/sweep-configs/{sweepConfigID}"
PATH_SWEEPS = "/accounts/{accountID}/wallets/{walletID}/sweeps"
PATH_SWEEP = "/accounts/{accountID}/wallets/{walletID}/sweeps/{sweepID}"

ListSweepsFilter = CallArg


def with_sweep_status(status: Union[SweepStatus, str]) -> ListSweepsFilter:
    return query_param("status", status)


def with_sweep_statement_descriptor(statement_descriptor: str) -> ListSweepsFilter:
    return query_param("statementDescriptor", statement_descriptor)


def with_sweep_skip(n: int) -> ListSweepsFilter:
    return skip(n)


def with_sweep_count(n: int) -> ListSweepsFilter:
    return count(n)


class SweepsAPI(HTTPExecutor):
    """Sweep operations."""

    def list_sweep_configs(self, account_id: str) -> list[SweepConfig]:
        """List sweep configs associated with an account."""
        resp = self.call_http(
            Endpoint("GET", PATH_SWEEP_CONFIGS, account_id),
            accept_json(),
            operation="listing sweep configs",
        )
        return completed_list_or_error(resp, SweepConfig)

    def get_sweep_config(self, account_id: str, sweep_config_id: str) -> Optional[SweepConfig]:
        """Retrieve a sweep config."""
        resp = self.call_http(
            Endpoint("GET", PATH_SWEEP_CONFIG, account_id, sweep_config_id),
            accept_json(),
            operation="getting sweep config",
        )
        return completed_object_or_error(resp, SweepConfig)

    def create_sweep_config(self, create: CreateSweepConfig) -> Optional[SweepConfig]:
        """Create a sweep config for a wallet.

        Args:
            create: Sweep config to create; ``create.account_id`` selects the account

        Returns:
            The created sweep config
        """
        resp = self.call_http(
            Endpoint("POST", PATH_SWEEP_CONFIGS, create.account_id),
            accept_json(),
            json_body(create),
            operation="creating sweep config",
        )
        return completed_object_or_error(resp, SweepConfig)

    def update_sweep_config(self, update: UpdateSweepConfig) -> Optional[SweepConfig]:
        """Update a sweep config. Fields left as None are not changed."""
        resp = self.call_http(
            Endpoint("PATCH", PATH_SWEEP_CONFIG, update.account_id, update.sweep_config_id),
            accept_json(),
            json_body(update),
            operation="updating sweep config",
        )
        return completed_object_or_error(resp, SweepConfig)

    def list_sweeps(
        self,
        account_id: str,
        wallet_id: str,
        *filters: ListSweepsFilter,
    ) -> list[Sweep]:
        """List sweeps associated with a wallet.

        Args:
            account_id: Account owning the wallet
            wallet_id: Wallet to list sweeps for
            *filters: ``with_sweep_status``, ``with_sweep_statement_descriptor``,
                ``with_sweep_skip``, ``with_sweep_count``

        Returns:
            Sweeps in the order returned by the API
        """
        resp = self.call_http(
            Endpoint("GET", PATH_SWEEPS, account_id, wallet_id),
            *prepend_args(filters, accept_json()),
            operation="listing sweeps",
        )
        return completed_list_or_error(resp, Sweep)

    def get_sweep(self, account_id: str, wallet_id: str, sweep_id: str) -> Optional[Sweep]:
        resp = self.call_http(
            Endpoint("GET", PATH_SWEEP, account_id, wallet_id, sweep_id),
            accept_json(),
            operation="getting sweep",
        )
        return completed_object_or_error(resp, Sweep)
