"""
Account Module

Checking and savings accounts with deposit, withdrawal and transfer, plus the
product-specific monthly operations (maintenance fee, interest accrual).

Operations never raise for business-rule failures. Each one returns an
OperationResult telling the caller what happened, the amount involved and the
balance left on the account.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, List, Optional

from .config import get_config
from .currency import Money, Currency, to_money
from .customers import Customer
from .errors import (
    BankingError, InvalidAmountError, InsufficientFundsError,
    UnsupportedAccountTypeError
)
from .logging_config import get_logger, log_action


logger = get_logger("digital_bank.accounts")


class ProductType(Enum):
    """Banking product types"""
    CHECKING = "checking"
    SAVINGS = "savings"


class OperationType(Enum):
    """Balance-changing operations"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"
    MAINTENANCE_FEE = "maintenance_fee"
    INTEREST_CREDIT = "interest_credit"


class OperationStatus(Enum):
    """Outcome of an account operation"""
    SUCCESS = "success"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    UNSUPPORTED_ACCOUNT_TYPE = "unsupported_account_type"


_ERRORS = {
    OperationStatus.INVALID_AMOUNT: InvalidAmountError,
    OperationStatus.INSUFFICIENT_FUNDS: InsufficientFundsError,
    OperationStatus.UNSUPPORTED_ACCOUNT_TYPE: UnsupportedAccountTypeError,
}


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of one account operation

    balance is the balance of the acting account after the attempt; on
    failure it equals the balance before the attempt.
    """
    operation: OperationType
    status: OperationStatus
    account_number: int
    amount: Money
    balance: Money
    destination_number: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    def raise_for_status(self) -> 'OperationResult':
        """Raise the matching BankingError if the operation failed"""
        if self.ok:
            return self
        error_class = _ERRORS.get(self.status, BankingError)
        raise error_class(
            f"{self.operation.value} on account {self.account_number} failed: "
            f"{self.status.value} (amount {self.amount.to_string()}, "
            f"balance {self.balance.to_string()})",
            amount=self.amount,
            balance=self.balance
        )


class AccountNumberSequence:
    """Hands out account numbers in creation order, starting at 1"""

    def __init__(self, start: int = 1):
        self._start = start
        self._next = start

    def next_number(self) -> int:
        number = self._next
        self._next += 1
        return number

    def peek(self) -> int:
        """Number the next account will receive"""
        return self._next

    def reset(self) -> None:
        self._next = self._start


# Used by accounts constructed without an explicit sequence
_default_sequence = AccountNumberSequence()


def get_default_sequence() -> AccountNumberSequence:
    """Get the process-wide fallback sequence"""
    return _default_sequence


def reset_default_sequence() -> None:
    """Restart the fallback sequence at 1"""
    _default_sequence.reset()


class BalanceBook:
    """
    Holds an account balance and applies raw credits and debits.
    Carries no business rules; Account decides when a movement is allowed.
    """

    def __init__(self, currency: Currency):
        self._balance = Money.zero(currency)

    @property
    def balance(self) -> Money:
        return self._balance

    def covers(self, amount: Money) -> bool:
        """Check if the balance is at least amount"""
        return amount <= self._balance

    def credit(self, amount: Money) -> Money:
        self._balance = self._balance + amount
        return self._balance

    def debit(self, amount: Money) -> Money:
        self._balance = self._balance - amount
        return self._balance


class Account(ABC):
    """
    Base account: owner, fixed branch code, sequential number and a balance.

    Subclasses set product_type and STATEMENT_TITLE and provide the
    product-specific statement lines.
    """

    product_type: ProductType
    STATEMENT_TITLE: str

    def __init__(
        self,
        owner: Customer,
        sequence: Optional[AccountNumberSequence] = None,
        branch_code: Optional[int] = None,
        currency: Optional[Currency] = None,
        enforce_positive_withdrawals: Optional[bool] = None
    ):
        settings = get_config()
        self._owner = owner
        self._branch_code = settings.branch_code if branch_code is None else branch_code
        self._number = (sequence or get_default_sequence()).next_number()
        self._currency = currency or Currency[settings.currency]
        self._book = BalanceBook(self._currency)
        if enforce_positive_withdrawals is None:
            enforce_positive_withdrawals = settings.enforce_positive_withdrawals
        self._enforce_positive_withdrawals = enforce_positive_withdrawals

        log_action(
            logger, "info", f"Opened {self.product_type.value} account {self._number}",
            action="account_opened", resource=self._resource,
            extra={"customer_id": owner.customer_id, "branch_code": self._branch_code}
        )

    @property
    def owner(self) -> Customer:
        return self._owner

    @property
    def branch_code(self) -> int:
        return self._branch_code

    @property
    def number(self) -> int:
        return self._number

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def balance(self) -> Money:
        return self._book.balance

    @property
    def _resource(self) -> str:
        return f"account:{self._number}"

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(number={self._number}, "
                f"owner={self._owner.name!r}, balance={self.balance.to_string()!r})")

    def deposit(self, amount) -> OperationResult:
        """
        Credit a positive amount to the account

        Args:
            amount: Money, Decimal, int, float or numeric string

        Returns:
            SUCCESS, or INVALID_AMOUNT when amount <= 0 or is not a finite
            number (balance unchanged)
        """
        raw = amount
        amount = self._parse_amount(raw)
        if amount is None:
            return self._unparseable(OperationType.DEPOSIT, raw)
        if not amount.is_positive():
            return self._rejected(OperationType.DEPOSIT, OperationStatus.INVALID_AMOUNT, amount)

        self._book.credit(amount)
        return self._succeeded(OperationType.DEPOSIT, amount)

    def withdraw(self, amount) -> OperationResult:
        """
        Debit an amount covered by the balance

        Zero and negative amounts are accepted unless the account enforces
        positive withdrawals, in which case they are INVALID_AMOUNT.

        Returns:
            SUCCESS, INSUFFICIENT_FUNDS or INVALID_AMOUNT (balance unchanged
            on failure)
        """
        raw = amount
        amount = self._parse_amount(raw)
        if amount is None:
            return self._unparseable(OperationType.WITHDRAWAL, raw)
        if not amount.is_positive():
            if self._enforce_positive_withdrawals:
                return self._rejected(OperationType.WITHDRAWAL, OperationStatus.INVALID_AMOUNT, amount)
            log_action(
                logger, "warning",
                f"Non-positive withdrawal of {amount.to_string()} accepted on account {self._number}",
                action="withdrawal", resource=self._resource,
                extra={"amount": str(amount.amount)}
            )

        if not self._book.covers(amount):
            return self._rejected(OperationType.WITHDRAWAL, OperationStatus.INSUFFICIENT_FUNDS, amount)

        self._book.debit(amount)
        return self._succeeded(OperationType.WITHDRAWAL, amount)

    def transfer(self, amount, destination: 'Account') -> OperationResult:
        """
        Move an amount from this account into destination

        Withdraws from this account, then deposits into destination. Both
        balances are left untouched when the transfer is rejected, and the
        sum of the two balances is the same before and after.

        Args:
            amount: Amount to move
            destination: Receiving account

        Returns:
            SUCCESS, INVALID_AMOUNT (amount <= 0) or INSUFFICIENT_FUNDS
        """
        if not isinstance(destination, Account):
            raise TypeError(f"Transfer destination must be an Account, got {type(destination).__name__}")

        raw = amount
        amount = self._parse_amount(raw)
        if amount is None:
            return self._unparseable(OperationType.TRANSFER, raw, destination)
        if not amount.is_positive():
            return self._rejected(OperationType.TRANSFER, OperationStatus.INVALID_AMOUNT,
                                  amount, destination)
        if not self._book.covers(amount):
            return self._rejected(OperationType.TRANSFER, OperationStatus.INSUFFICIENT_FUNDS,
                                  amount, destination)

        self.withdraw(amount)
        destination.deposit(amount)
        return self._succeeded(OperationType.TRANSFER, amount, destination)

    def statement_lines(self) -> List[str]:
        """Statement text: title, common fields, then product lines"""
        lines = [
            f"=== {self.STATEMENT_TITLE} ===",
            f"Titular: {self._owner.name}",
            f"Agência: {self._branch_code}",
            f"Número: {self._number}",
            f"Saldo: {self.balance.to_string()}",
        ]
        lines.extend(self._product_lines())
        return lines

    def print_statement(self, write: Callable[[str], None] = print) -> None:
        for line in self.statement_lines():
            write(line)

    @abstractmethod
    def _product_lines(self) -> List[str]:
        """Product-specific statement lines"""

    def _parse_amount(self, value) -> Optional[Money]:
        """Money for value, or None when value is not a finite number"""
        try:
            return to_money(value, self._currency)
        except ValueError:
            return None

    def _unparseable(self, operation: OperationType, value,
                     destination: Optional['Account'] = None) -> OperationResult:
        log_action(
            logger, "warning",
            f"{operation.value} on account {self._number} rejected: unusable amount {value!r}",
            action=operation.value, resource=self._resource,
            extra={"raw_amount": repr(value)}
        )
        return self._result(operation, OperationStatus.INVALID_AMOUNT,
                            Money.zero(self._currency), destination)

    def _succeeded(self, operation: OperationType, amount: Money,
                   destination: Optional['Account'] = None) -> OperationResult:
        result = self._result(operation, OperationStatus.SUCCESS, amount, destination)
        log_action(
            logger, "info",
            f"{operation.value} of {amount.to_string()} on account {self._number}",
            action=operation.value, resource=self._resource,
            extra=self._log_extra(result)
        )
        return result

    def _rejected(self, operation: OperationType, status: OperationStatus, amount: Money,
                  destination: Optional['Account'] = None) -> OperationResult:
        result = self._result(operation, status, amount, destination)
        log_action(
            logger, "warning",
            f"{operation.value} of {amount.to_string()} on account {self._number} rejected: {status.value}",
            action=operation.value, resource=self._resource,
            extra=self._log_extra(result)
        )
        return result

    def _result(self, operation: OperationType, status: OperationStatus, amount: Money,
                destination: Optional['Account'] = None) -> OperationResult:
        return OperationResult(
            operation=operation,
            status=status,
            account_number=self._number,
            amount=amount,
            balance=self.balance,
            destination_number=destination.number if destination is not None else None
        )

    @staticmethod
    def _log_extra(result: OperationResult) -> dict:
        extra = {
            "status": result.status.value,
            "amount": str(result.amount.amount),
            "balance": str(result.balance.amount),
        }
        if result.destination_number is not None:
            extra["destination_number"] = result.destination_number
        return extra


class CheckingAccount(Account):
    """Checking account charged a fixed monthly maintenance fee"""

    product_type = ProductType.CHECKING
    STATEMENT_TITLE = "Extrato Conta Corrente"

    def __init__(self, owner: Customer, sequence: Optional[AccountNumberSequence] = None,
                 maintenance_fee=None, **kwargs):
        super().__init__(owner, sequence, **kwargs)
        if maintenance_fee is None:
            maintenance_fee = get_config().maintenance_fee
        self._maintenance_fee = to_money(maintenance_fee, self.currency)

    @property
    def maintenance_fee(self) -> Money:
        return self._maintenance_fee

    def charge_maintenance_fee(self) -> OperationResult:
        """Subtract the monthly fee; no funds check, balance may go negative"""
        self._book.debit(self._maintenance_fee)
        return self._succeeded(OperationType.MAINTENANCE_FEE, self._maintenance_fee)

    def _product_lines(self) -> List[str]:
        return [f"Taxa de manutenção mensal: {self._maintenance_fee.to_string()}"]


class SavingsAccount(Account):
    """Savings account credited monthly interest on its balance"""

    product_type = ProductType.SAVINGS
    STATEMENT_TITLE = "Extrato Conta Poupança"

    def __init__(self, owner: Customer, sequence: Optional[AccountNumberSequence] = None,
                 interest_rate: Optional[Decimal] = None, **kwargs):
        super().__init__(owner, sequence, **kwargs)
        if interest_rate is None:
            interest_rate = get_config().monthly_interest_rate
        self._interest_rate = Decimal(str(interest_rate))

    @property
    def interest_rate(self) -> Decimal:
        """Monthly rate as a fraction, e.g. 0.004 for 0.4%"""
        return self._interest_rate

    def accrue_monthly_interest(self) -> OperationResult:
        """Credit balance x rate and report the credited interest"""
        interest = self.balance * self._interest_rate
        self._book.credit(interest)
        return self._succeeded(OperationType.INTEREST_CREDIT, interest)

    def _product_lines(self) -> List[str]:
        return [f"Taxa de juros mensal: {self._interest_rate * 100:.2f}%"]


def _unsupported(account: Account, operation: OperationType) -> OperationResult:
    return account._rejected(
        operation, OperationStatus.UNSUPPORTED_ACCOUNT_TYPE, Money.zero(account.currency)
    )


def charge_maintenance_fee(account: Account) -> OperationResult:
    """Charge the fee if account is a checking account, else UNSUPPORTED_ACCOUNT_TYPE"""
    if isinstance(account, CheckingAccount):
        return account.charge_maintenance_fee()
    return _unsupported(account, OperationType.MAINTENANCE_FEE)


def accrue_monthly_interest(account: Account) -> OperationResult:
    """Credit interest if account is a savings account, else UNSUPPORTED_ACCOUNT_TYPE"""
    if isinstance(account, SavingsAccount):
        return account.accrue_monthly_interest()
    return _unsupported(account, OperationType.INTEREST_CREDIT)
