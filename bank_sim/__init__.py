"""
Bank Simulator

An in-memory retail bank with savings and checking accounts, a transaction
ledger and an interactive text menu.
"""

__version__ = "0.1.0"

from .models import Account, Customer, Transaction, AccountType, TransactionType
from .bank import Bank, TransactionResult, TransactionStatus
from .cli import main


def create_bank() -> Bank:
    """
    Create an empty Bank instance.

    Returns:
        Bank instance
    """
    return Bank()


__all__ = [
    "Account",
    "Customer",
    "Transaction",
    "AccountType",
    "TransactionType",
    "Bank",
    "TransactionResult",
    "TransactionStatus",
    "create_bank",
    "main"
]
