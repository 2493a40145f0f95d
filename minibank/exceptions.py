"""
Bank Exceptions

Two kinds of failure: bad input (InvalidArgumentError) and a business rule
refusing otherwise valid input (InvalidStateError).
"""


class BankError(Exception):
    """Base class for all bank errors"""
    pass


class InvalidArgumentError(BankError, ValueError):
    """
    Raised for malformed or unauthorized input:
    - null, zero, non-numeric or negative amount
    - client unknown to the bank
    - account not owned by the given client
    """
    pass


class InvalidStateError(BankError, RuntimeError):
    """Raised when a valid request breaks a business rule"""
    pass


class InsufficientFundsError(InvalidStateError):
    """Raised when a withdrawal exceeds the account balance"""
    pass
