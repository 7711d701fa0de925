"""
Test suite for console reporting

Tests the legacy console text produced for results, statements and the roster.
"""

import pytest
from decimal import Decimal

from digital_bank.accounts import (
    AccountNumberSequence, CheckingAccount, SavingsAccount,
    OperationResult, OperationStatus, OperationType,
    charge_maintenance_fee, accrue_monthly_interest
)
from digital_bank.bank import Bank
from digital_bank.currency import Money
from digital_bank.customers import Customer
from digital_bank.reporting import ConsoleReporter, format_result, UNSUPPORTED_MESSAGE


class TestFormatResult:
    """Test message selection per operation outcome"""

    def setup_method(self):
        self.sequence = AccountNumberSequence()
        self.owner = Customer("Ana", "111", "ana@example.com")
        self.checking = CheckingAccount(self.owner, self.sequence)
        self.savings = SavingsAccount(self.owner, self.sequence)

    def test_successful_movements_are_silent(self):
        assert format_result(self.checking.deposit(100)) is None
        assert format_result(self.checking.withdraw(10)) is None
        assert format_result(self.checking.transfer(10, self.savings)) is None

    @pytest.mark.parametrize("call, message", [
        (lambda a, b: a.deposit(0), "Valor de depósito inválido."),
        (lambda a, b: a.withdraw(1), "Saldo insuficiente para saque."),
        (lambda a, b: a.transfer(1, b), "Saldo insuficiente para transferência."),
        (lambda a, b: a.transfer(-1, b), "Valor de transferência inválido."),
    ])
    def test_failure_messages(self, call, message):
        assert format_result(call(self.checking, self.savings)) == message

    def test_strict_withdrawal_message(self):
        account = CheckingAccount(self.owner, self.sequence, enforce_positive_withdrawals=True)
        assert format_result(account.withdraw(0)) == "Valor de saque inválido."

    def test_fee_message(self):
        result = self.checking.charge_maintenance_fee()
        assert format_result(result) == "Taxa de manutenção de R$ 12.50 cobrada com sucesso."

    def test_interest_message(self):
        self.savings.deposit(300)
        result = self.savings.accrue_monthly_interest()
        assert format_result(result) == "Rendimento mensal de R$ 1.20 creditado com sucesso."

    def test_unsupported_message(self):
        assert format_result(charge_maintenance_fee(self.savings)) == UNSUPPORTED_MESSAGE
        assert format_result(accrue_monthly_interest(self.checking)) == UNSUPPORTED_MESSAGE


class TestConsoleReporter:
    """Test the writer-backed reporter"""

    def setup_method(self):
        self.lines = []
        self.reporter = ConsoleReporter(self.lines.append)
        self.bank = Bank("Banco Digital", sequence=AccountNumberSequence())
        self.owner = Customer("Ana", "111", "ana@example.com")

    def test_report_passes_result_through(self):
        account = self.bank.open_checking_account(self.owner)
        result = account.withdraw(5)

        assert self.reporter.report(result) is result
        assert self.lines == ["Saldo insuficiente para saque."]

    def test_report_all(self):
        account = self.bank.open_checking_account(self.owner)
        results = [account.deposit(10), account.deposit(-10), account.charge_maintenance_fee()]

        self.reporter.report_all(results)

        assert self.lines == [
            "Valor de depósito inválido.",
            "Taxa de manutenção de R$ 12.50 cobrada com sucesso.",
        ]

    def test_statements_separated_by_blank_line(self):
        first = self.bank.open_checking_account(self.owner)
        second = self.bank.open_savings_account(self.owner)

        self.reporter.statements([first, second])

        assert len(self.lines) == 13
        assert self.lines[6] == ""
        assert self.lines[7] == "=== Extrato Conta Poupança ==="

    def test_roster(self):
        self.bank.open_checking_account(self.owner)
        self.reporter.roster(self.bank)
        assert self.lines == ["=== Clientes do Banco Digital ===", "Nome: Ana | CPF: 111"]

    def test_default_writer_is_print(self, capsys):
        reporter = ConsoleReporter()
        reporter.report(OperationResult(
            operation=OperationType.DEPOSIT,
            status=OperationStatus.INVALID_AMOUNT,
            account_number=1,
            amount=Money(Decimal('0')),
            balance=Money(Decimal('0'))
        ))
        assert capsys.readouterr().out == "Valor de depósito inválido.\n"
