"""
Digital Bank Ledger

In-memory account ledger: customers, checking and savings accounts,
and a bank registry, with all amounts held as Decimal-backed Money.
"""

__version__ = "1.0.0"
