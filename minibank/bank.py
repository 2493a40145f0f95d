"""
Bank Module

The bank creates clients and accounts and is the only way to move money.
Every deposit or withdrawal is validated in a fixed order before the
account is touched:

    null amount -> invalid amount -> negative amount
    -> unknown client -> wrong account -> (withdrawal) insufficient funds

so a rejected call never changes a balance or a statement.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Optional, Type
import threading

from .accounts import Account
from .amounts import AmountLike, ZERO, to_amount, is_valid_amount
from .clients import Client
from .clock import Clock, SystemClock
from .config import MinibankConfig, get_config
from .events import EventDispatcher, EventPayload, DomainEvent
from .exceptions import InvalidArgumentError, InsufficientFundsError, BankError
from .logging_config import get_logger, log_action
from .operations import Operation

DEPOSIT = "deposit"
WITHDRAWAL = "withdrawal"


class BankInterface(ABC):
    """Operations every bank offers"""

    @abstractmethod
    def create_client(self) -> Client:
        """Create a new client without accounts"""
        pass

    @abstractmethod
    def create_account(self, client: Client) -> Account:
        """
        Open an account for a client

        Raises:
            InvalidArgumentError: If the client is unknown to this bank
        """
        pass

    @abstractmethod
    def deposit(self, client: Client, account: Account, amount: AmountLike) -> Operation:
        """
        Put money on an account

        Raises:
            InvalidArgumentError: If the amount is null, zero or negative, the
                client is unknown to this bank or the account is not the client's
        """
        pass

    @abstractmethod
    def withdrawal(self, client: Client, account: Account, amount: AmountLike) -> Operation:
        """
        Take money from an account

        Raises:
            InvalidArgumentError: Same cases as deposit
            InsufficientFundsError: If the balance is lower than the amount
        """
        pass


class Bank(BankInterface):
    """
    In-memory bank. Clients and accounts it hands out are the only ones it
    accepts back: a client is known only if it is the very object this bank
    registered under that id.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        event_dispatcher: Optional[EventDispatcher] = None,
        config: Optional[MinibankConfig] = None
    ):
        self.clock = clock or SystemClock()
        self.config = config or get_config()
        self._event_dispatcher = event_dispatcher
        self._clients: Dict[str, Client] = {}
        self._lock = threading.RLock()
        self.logger = get_logger("minibank.bank")

    def create_client(self) -> Client:
        client = Client()
        with self._lock:
            self._clients[client.id] = client

        log_action(self.logger, "info", f"Client created: {client.id}",
                   action="create_client", resource=client.id)
        self._publish(DomainEvent.CLIENT_CREATED, "client", client.id, {})
        return client

    def create_account(self, client: Client) -> Account:
        with self._lock:
            if not self._is_known_client(client):
                raise self._rejection("create_account", "Unable to create an account : Unknown client",
                                      entity_type="client", entity_id=getattr(client, 'id', None))

            account = Account(self.clock, self.config.statement_date_format)
            client._add_account(account)

        log_action(self.logger, "info", f"Account created: {account.id}",
                   action="create_account", resource=account.id,
                   extra={"client_id": client.id})
        self._publish(DomainEvent.ACCOUNT_CREATED, "account", account.id, {"client_id": client.id})
        return account

    def deposit(self, client: Client, account: Account, amount: AmountLike) -> Operation:
        with self._lock:
            money = self._check_amount(amount, DEPOSIT, account)
            self._check_client_and_account(client, account, DEPOSIT)
            operation = account._apply_deposit(money)

        self._record(DomainEvent.DEPOSIT_APPLIED, account, operation)
        return operation

    def withdrawal(self, client: Client, account: Account, amount: AmountLike) -> Operation:
        with self._lock:
            money = self._check_amount(amount, WITHDRAWAL, account)
            self._check_client_and_account(client, account, WITHDRAWAL)

            if account.get_balance() < money:
                raise self._rejection(WITHDRAWAL, "Unable to make a withdrawal : Insufficient account amount",
                                      entity_id=account.id, error_class=InsufficientFundsError)

            operation = account._apply_withdrawal(money)

        self._record(DomainEvent.WITHDRAWAL_APPLIED, account, operation)
        return operation

    def _is_known_client(self, client: object) -> bool:
        return isinstance(client, Client) and self._clients.get(client.id) is client

    def _check_amount(self, amount: Optional[AmountLike], operation: str, account: object) -> Decimal:
        """Check the amount is present, numeric, non-zero and positive; return it as Decimal"""
        prefix = f"Unable to make a {operation} : "
        entity_id = getattr(account, 'id', None)
        try:
            money = to_amount(amount)
        except InvalidArgumentError:
            raise self._rejection(operation, prefix + "Invalid amount", entity_id=entity_id) from None

        # is_zero() is False for NaN, which then fails the finiteness check
        if money is None or money.is_zero():
            raise self._rejection(operation, prefix + "Null amount", entity_id=entity_id)
        if not is_valid_amount(money):
            raise self._rejection(operation, prefix + "Invalid amount", entity_id=entity_id)
        if money < ZERO:
            raise self._rejection(operation, prefix + "Negative amount", entity_id=entity_id)
        return money

    def _check_client_and_account(self, client: Client, account: Account, operation: str) -> None:
        """Check the client belongs to this bank and the account to the client"""
        entity_id = getattr(account, 'id', None)
        if not self._is_known_client(client):
            raise self._rejection(operation, f"Unable to make a {operation} : Unknown client",
                                  entity_id=entity_id)
        if not client.has_account(account):
            raise self._rejection(operation, f"Unable to make a {operation} : Wrong account",
                                  entity_id=entity_id)

    def _rejection(self, operation: str, message: str, entity_type: str = "account",
                   entity_id: Optional[str] = None,
                   error_class: Type[BankError] = InvalidArgumentError) -> BankError:
        """Log and publish a refused request, returning the error for the caller to raise"""
        log_action(self.logger, "warning", message, action=operation, resource=entity_id)
        self._publish(DomainEvent.OPERATION_REJECTED, entity_type, entity_id or "unknown",
                      {"operation": operation, "reason": message, "error": error_class.__name__})
        return error_class(message)

    def _record(self, event_type: DomainEvent, account: Account, operation: Operation) -> None:
        if self.config.enable_audit_logging:
            log_action(self.logger, "info",
                       f"{operation.operation_type.name.capitalize()} applied on {account.id}: "
                       f"{operation.amount} (balance {operation.balance})",
                       action=operation.operation_type.name.lower(), resource=account.id,
                       extra=operation.to_dict())
        self._publish(event_type, "account", account.id, operation.to_dict())

    def _publish(self, event_type: DomainEvent, entity_type: str, entity_id: str, data: dict) -> None:
        if self._event_dispatcher is not None:
            self._event_dispatcher.publish(EventPayload(
                event_type=event_type,
                entity_type=entity_type,
                entity_id=entity_id,
                data=data
            ))
