#!/usr/bin/env python3
"""
Minibank Demo Entry Point

Opens an account, runs a few operations and prints the statement.
"""

import sys
from decimal import Decimal

from minibank.bank import Bank
from minibank.config import get_config
from minibank.events import get_global_dispatcher
from minibank.exceptions import BankError
from minibank.logging_config import setup_logging


def main() -> int:
    config = get_config()
    setup_logging(config.log_level, log_format=config.log_format, log_file=config.log_file)

    bank = Bank(event_dispatcher=get_global_dispatcher())
    client = bank.create_client()
    account = bank.create_account(client)

    try:
        bank.deposit(client, account, Decimal("10000"))
        bank.deposit(client, account, Decimal("756.12"))
        bank.withdrawal(client, account, Decimal("156"))
        bank.withdrawal(client, account, Decimal("1000000"))
    except BankError as e:
        print(f"Rejected: {e}")

    print(account.get_operations())
    print(f"Balance: {account.get_balance()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
