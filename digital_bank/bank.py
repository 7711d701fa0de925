"""
Bank Module

Registry of accounts for one bank, the factory that opens accounts with the
bank's own number sequence, and the customer roster derived from the
registered accounts.
"""

from typing import Callable, Dict, List, Optional

from .accounts import (
    Account, AccountNumberSequence, CheckingAccount, SavingsAccount,
    OperationResult, charge_maintenance_fee, accrue_monthly_interest
)
from .config import BankConfig, get_config
from .currency import Currency
from .customers import Customer
from .logging_config import get_logger, log_action


class Bank:
    """
    Owns an ordered account registry.

    Registration performs no duplicate or ownership check; the same account
    may be registered twice and accounts may exist outside any bank.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        sequence: Optional[AccountNumberSequence] = None,
        config: Optional[BankConfig] = None
    ):
        self.config = config or get_config()
        self._name = name if name is not None else self.config.bank_name
        self.sequence = sequence or AccountNumberSequence()
        self._accounts: List[Account] = []
        self.logger = get_logger("digital_bank.bank")

    @property
    def name(self) -> str:
        return self._name

    @property
    def accounts(self) -> List[Account]:
        """Registered accounts in insertion order (a copy)"""
        return list(self._accounts)

    def register_account(self, account: Account) -> Account:
        """Append account to the registry"""
        self._accounts.append(account)
        log_action(
            self.logger, "info", f"Registered account {account.number} with {self._name}",
            action="account_registered", resource=f"account:{account.number}",
            extra={"customer_id": account.owner.customer_id}
        )
        return account

    def open_checking_account(self, customer: Customer) -> CheckingAccount:
        """Create a checking account numbered by this bank and register it"""
        account = CheckingAccount(
            customer,
            self.sequence,
            maintenance_fee=self.config.maintenance_fee,
            **self._account_settings()
        )
        self.register_account(account)
        return account

    def open_savings_account(self, customer: Customer) -> SavingsAccount:
        """Create a savings account numbered by this bank and register it"""
        account = SavingsAccount(
            customer,
            self.sequence,
            interest_rate=self.config.monthly_interest_rate,
            **self._account_settings()
        )
        self.register_account(account)
        return account

    def _account_settings(self) -> dict:
        return {
            "branch_code": self.config.branch_code,
            "currency": Currency[self.config.currency],
            "enforce_positive_withdrawals": self.config.enforce_positive_withdrawals,
        }

    def customers(self) -> List[Customer]:
        """
        Distinct account owners keyed by customer_id

        Ordered by first appearance in the account registry.
        """
        seen: Dict[str, Customer] = {}
        for account in self._accounts:
            seen.setdefault(account.owner.customer_id, account.owner)
        return list(seen.values())

    def accounts_for(self, customer: Customer) -> List[Account]:
        """Distinct registered accounts owned by customer, in registry order"""
        return [
            account for account in self._distinct_accounts()
            if account.owner.customer_id == customer.customer_id
        ]

    def roster_lines(self) -> List[str]:
        lines = [f"=== Clientes do {self._name} ==="]
        for customer in self.customers():
            lines.append(f"Nome: {customer.name} | CPF: {customer.tax_id}")
        return lines

    def list_customers(self, write: Callable[[str], None] = print) -> None:
        """Print the roster header and one line per distinct customer"""
        for line in self.roster_lines():
            write(line)

    def run_monthly_cycle(self) -> List[OperationResult]:
        """
        Charge the maintenance fee on every checking account and credit
        interest on every savings account, once per distinct account.

        Returns:
            One result per distinct account, in registry order
        """
        results = []
        for account in self._distinct_accounts():
            if isinstance(account, CheckingAccount):
                results.append(charge_maintenance_fee(account))
            elif isinstance(account, SavingsAccount):
                results.append(accrue_monthly_interest(account))

        log_action(
            self.logger, "info", f"Monthly cycle processed {len(results)} accounts",
            action="monthly_cycle", resource=f"bank:{self._name}",
            extra={"accounts": len(results)}
        )
        return results

    def _distinct_accounts(self) -> List[Account]:
        seen = set()
        distinct = []
        for account in self._accounts:
            if id(account) not in seen:
                seen.add(id(account))
                distinct.append(account)
        return distinct
