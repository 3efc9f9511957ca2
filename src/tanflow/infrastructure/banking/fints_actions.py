"""Banking actions executed through python-fints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Optional

from tanflow.domain.banking.entities import BankingAction

if TYPE_CHECKING:
    from fints.client import FinTS3PinTanClient, NeedTANResponse


class FinTsAction(BankingAction):
    """A BankingAction backed by one python-fints client call.

    The operation either returns the result or a NeedTANResponse, which is
    kept here until the TAN or decoupled confirmation resolved it.
    """

    def __init__(
        self,
        operation: Callable[[FinTS3PinTanClient], Any],
        description: str,
    ):
        super().__init__(description)
        self._operation = operation
        self._pending_response: Optional[NeedTANResponse] = None

    @property
    def pending_response(self) -> Optional[NeedTANResponse]:
        return self._pending_response

    def run(self, client: FinTS3PinTanClient) -> Any:
        return self._operation(client)

    def remember_pending_response(self, response: NeedTANResponse) -> None:
        self._pending_response = response

    def mark_completed(self, result: Any = None) -> None:
        self._pending_response = None
        super().mark_completed(result)


class LoginAction(FinTsAction):
    """Opens the standing dialog; the bank may ask for SCA right away."""

    def __init__(self) -> None:
        super().__init__(_open_dialog, "login")


class FetchAccountsAction(FinTsAction):
    """Fetch the SEPA accounts of the user."""

    def __init__(self) -> None:
        super().__init__(
            lambda client: client.get_sepa_accounts(),
            "fetch accounts",
        )


class FetchTransactionsAction(FinTsAction):
    """Fetch the booked transactions of one SEPA account."""

    def __init__(
        self,
        account: Any,
        start_date: date,
        end_date: Optional[date] = None,
    ):
        super().__init__(
            lambda client: client.get_transactions(account, start_date, end_date),
            f"fetch transactions for {getattr(account, 'iban', account)}",
        )
        self.account = account
        self.start_date = start_date
        self.end_date = end_date


def _open_dialog(client: FinTS3PinTanClient) -> Any:
    client.__enter__()
    return client.init_tan_response
