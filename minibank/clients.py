"""
Client Module

A client is the membership record of the accounts it owns.
"""

from typing import Dict, List
import threading
import uuid

from .accounts import Account


class Client:
    """Bank client owning a set of accounts"""

    def __init__(self):
        self.id = str(uuid.uuid4())
        self._accounts: Dict[str, Account] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Client(id={self.id!r}, accounts={len(self._accounts)})"

    def get_accounts(self) -> List[Account]:
        """Copy of the owned accounts; order is not guaranteed"""
        with self._lock:
            return list(self._accounts.values())

    def has_account(self, account: object) -> bool:
        """Check this very account object belongs to the client"""
        if not isinstance(account, Account):
            return False
        with self._lock:
            return self._accounts.get(account.id) is account

    def _add_account(self, account: Account) -> None:
        # Re-adding an owned account is a no-op
        with self._lock:
            self._accounts.setdefault(account.id, account)
