"""
Minimal Bank

Clients own accounts, accounts keep a Decimal balance and an append-only
statement of deposits and withdrawals. All mutations go through a Bank,
which validates amounts and ownership before touching an account.
"""

__version__ = "1.0.0"
