"""
Account Operations Module

Immutable records of deposits and withdrawals, and their statement lines.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict

STATEMENT_FORMAT = "{type} - {date} - {amount} - {balance}"
DATE_FORMAT = "%d/%m/%Y"


class OperationType(Enum):
    """Kinds of account operations, valued by their statement code"""
    DEPOSIT = "D"
    WITHDRAWAL = "W"


@dataclass(frozen=True)
class Operation:
    """
    One applied deposit or withdrawal, with the balance it left behind
    """
    operation_type: OperationType
    date: datetime
    amount: Decimal
    balance: Decimal

    def to_statement_line(self, date_format: str = DATE_FORMAT) -> str:
        """
        Render as "<D|W> - <date> - <amount> - <balance>"

        Amounts use the canonical Decimal string, so 10000 prints as
        "10000" and 756.12 as "756.12".
        """
        return STATEMENT_FORMAT.format(
            type=self.operation_type.value,
            date=self.date.strftime(date_format),
            amount=self.amount,
            balance=self.balance
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            'operation_type': self.operation_type.name.lower(),
            'date': self.date.isoformat(),
            'amount': str(self.amount),
            'balance': str(self.balance)
        }
