"""
Ledger error taxonomy.

Account operations report failures as OperationResult values; these
exceptions exist for callers that call OperationResult.raise_for_status().
"""

from typing import Optional

from .currency import Money


class BankingError(ValueError):
    """Base class for ledger errors"""

    def __init__(self, message: str, amount: Optional[Money] = None,
                 balance: Optional[Money] = None):
        super().__init__(message)
        self.amount = amount
        self.balance = balance


class InvalidAmountError(BankingError):
    """Amount is zero or negative where a positive amount is required"""


class InsufficientFundsError(BankingError):
    """Amount exceeds the current balance"""


class UnsupportedAccountTypeError(BankingError):
    """Operation is not offered by this kind of account"""
