"""
Console Reporting Module

Turns operation results, statements and the customer roster into the
console text of the original ledger program. Operations themselves stay
silent; callers that want the legacy messages route results through a
ConsoleReporter.
"""

from typing import Callable, List, Optional

from .accounts import Account, OperationResult, OperationStatus, OperationType
from .bank import Bank


# Messages for rejected operations, keyed by (operation, status)
FAILURE_MESSAGES = {
    (OperationType.DEPOSIT, OperationStatus.INVALID_AMOUNT): "Valor de depósito inválido.",
    (OperationType.WITHDRAWAL, OperationStatus.INVALID_AMOUNT): "Valor de saque inválido.",
    (OperationType.WITHDRAWAL, OperationStatus.INSUFFICIENT_FUNDS): "Saldo insuficiente para saque.",
    (OperationType.TRANSFER, OperationStatus.INVALID_AMOUNT): "Valor de transferência inválido.",
    (OperationType.TRANSFER, OperationStatus.INSUFFICIENT_FUNDS): "Saldo insuficiente para transferência.",
}

UNSUPPORTED_MESSAGE = "Operação não disponível para este tipo de conta."


def format_result(result: OperationResult) -> Optional[str]:
    """
    Console message for a result, or None when the original program
    printed nothing (successful deposits, withdrawals and transfers)
    """
    if result.status == OperationStatus.UNSUPPORTED_ACCOUNT_TYPE:
        return UNSUPPORTED_MESSAGE

    if not result.ok:
        return FAILURE_MESSAGES[(result.operation, result.status)]

    if result.operation == OperationType.MAINTENANCE_FEE:
        return f"Taxa de manutenção de {result.amount.to_string()} cobrada com sucesso."
    if result.operation == OperationType.INTEREST_CREDIT:
        return f"Rendimento mensal de {result.amount.to_string()} creditado com sucesso."
    return None


class ConsoleReporter:
    """Writes ledger text through a write callable (print by default)"""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def report(self, result: OperationResult) -> OperationResult:
        """Write the message for result, if any, and pass result through"""
        message = format_result(result)
        if message is not None:
            self.write(message)
        return result

    def report_all(self, results: List[OperationResult]) -> List[OperationResult]:
        for result in results:
            self.report(result)
        return results

    def statement(self, account: Account) -> None:
        account.print_statement(self.write)

    def statements(self, accounts: List[Account]) -> None:
        """Statements separated by a blank line"""
        for index, account in enumerate(accounts):
            if index:
                self.write("")
            self.statement(account)

    def roster(self, bank: Bank) -> None:
        bank.list_customers(self.write)
