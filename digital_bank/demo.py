"""
Demonstration script: two customers, three accounts, a fixed sequence of
operations, then statements and the customer roster.
"""

from typing import Callable

from .accounts import AccountNumberSequence, charge_maintenance_fee, accrue_monthly_interest
from .bank import Bank
from .config import get_config
from .logging_config import setup_logging
from .customers import Customer
from .reporting import ConsoleReporter


def run_demo(write: Callable[[str], None] = print) -> Bank:
    """Run the scripted scenario, writing its output through write"""
    reporter = ConsoleReporter(write)
    bank = Bank("Banco Digital", sequence=AccountNumberSequence())

    joao = Customer("João da Silva", "123.456.789-00", "joao@example.com")
    maria = Customer("Maria Oliveira", "987.654.321-00", "maria@example.com")

    checking_joao = bank.open_checking_account(joao)
    savings_joao = bank.open_savings_account(joao)
    checking_maria = bank.open_checking_account(maria)

    reporter.report(checking_joao.deposit(1000))
    reporter.report(checking_joao.transfer(300, savings_joao))
    reporter.report(checking_maria.deposit(1500))
    reporter.report(checking_maria.transfer(500, checking_joao))

    reporter.report(charge_maintenance_fee(checking_joao))
    reporter.report(accrue_monthly_interest(savings_joao))

    write("")
    write("=== Extratos ===")
    write("")
    reporter.statements([checking_joao, savings_joao, checking_maria])

    write("")
    reporter.roster(bank)
    return bank


def main() -> None:
    settings = get_config()
    setup_logging(settings.log_level, settings.log_format)
    run_demo()


if __name__ == "__main__":
    main()
