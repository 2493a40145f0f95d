"""
Account Module

An account holds a Decimal balance and an append-only list of operations.
Only the Bank that created an account mutates it, after validating the
request.
"""

from decimal import Decimal, localcontext, MAX_PREC, MAX_EMAX, MIN_EMIN
from typing import List, Optional, Tuple
import threading
import uuid

from .amounts import ZERO
from .clock import Clock, SystemClock
from .operations import Operation, OperationType, DATE_FORMAT


class Account:
    """
    Bank account: balance plus chronological operation log
    """

    def __init__(self, clock: Optional[Clock] = None, date_format: str = DATE_FORMAT):
        self.id = str(uuid.uuid4())
        self._clock = clock or SystemClock()
        self._date_format = date_format
        self._balance = ZERO
        self._operations: List[Operation] = []
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, balance={self._balance})"

    def get_balance(self) -> Decimal:
        """Current balance"""
        with self._lock:
            return self._balance

    def get_operations(self) -> str:
        """Statement lines joined by newlines, oldest first; empty when no operations"""
        with self._lock:
            return "\n".join(
                operation.to_statement_line(self._date_format)
                for operation in self._operations
            )

    @property
    def operations(self) -> Tuple[Operation, ...]:
        """Snapshot of the operation records"""
        with self._lock:
            return tuple(self._operations)

    def _apply_deposit(self, amount: Decimal) -> Operation:
        return self._apply(OperationType.DEPOSIT, amount)

    def _apply_withdrawal(self, amount: Decimal) -> Operation:
        return self._apply(OperationType.WITHDRAWAL, amount)

    def _apply(self, operation_type: OperationType, amount: Decimal) -> Operation:
        with self._lock:
            # Exact arithmetic regardless of the ambient 28-digit context
            with localcontext() as ctx:
                ctx.prec = MAX_PREC
                ctx.Emax = MAX_EMAX
                ctx.Emin = MIN_EMIN
                if operation_type == OperationType.DEPOSIT:
                    new_balance = self._balance + amount
                else:
                    new_balance = self._balance - amount

            operation = Operation(
                operation_type=operation_type,
                date=self._clock.now(),
                amount=amount,
                balance=new_balance
            )
            self._operations.append(operation)
            self._balance = new_balance
            return operation
