"""
Bank aggregate for the bank simulator.

This module contains the business logic for registering accounts, applying
deposits and withdrawals and keeping the transaction ledger.
"""

import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from .models import Account, AccountType, Transaction, TransactionType, to_decimal


class TransactionStatus(Enum):
    """Outcome of a transaction request."""
    SUCCESS = "success"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    OVERDRAFT_LIMIT_REACHED = "overdraft_limit_reached"
    INVALID_AMOUNT = "invalid_amount"


_STATUS_MESSAGES = {
    TransactionStatus.SUCCESS: "Transaction successful.",
    TransactionStatus.ACCOUNT_NOT_FOUND: "Account not found!",
    TransactionStatus.INSUFFICIENT_FUNDS: "Insufficient funds!",
    TransactionStatus.OVERDRAFT_LIMIT_REACHED: "Overdraft limit reached!",
    TransactionStatus.INVALID_AMOUNT: "Amount must be positive.",
}


@dataclass(frozen=True)
class TransactionResult:
    """Report returned for every transaction request."""

    status: TransactionStatus
    account_number: int
    amount: Decimal
    transaction_type: TransactionType
    transaction: Optional[Transaction] = None
    balance: Optional[Decimal] = None

    @property
    def success(self) -> bool:
        return self.status == TransactionStatus.SUCCESS

    @property
    def message(self) -> str:
        return _STATUS_MESSAGES[self.status]


class Bank:
    """Owns the accounts and the transaction ledger."""

    def __init__(self):
        """Initialize an empty bank."""
        self.accounts: Dict[int, Account] = {}
        self.transactions: List[Transaction] = []
        self.transaction_counter = 0
        self.logger = logging.getLogger(__name__)
        self._lock = threading.RLock()

    def add_account(self, account: Account) -> bool:
        """Register an account. Duplicate account numbers are rejected."""
        with self._lock:
            if account.account_number in self.accounts:
                self.logger.warning(
                    f"Account {account.account_number} already exists, not added"
                )
                return False

            self.accounts[account.account_number] = account
            self.logger.info(
                f"Account {account.account_number} added for {account.holder_name}."
            )
            return True

    def create_account(self, account_type: AccountType, account_number: int,
                       holder_name: str,
                       initial_balance: Decimal = Decimal('0.00')) -> Optional[Account]:
        """Create and register a new account."""
        account = Account(
            account_number=account_number,
            holder_name=holder_name,
            account_type=account_type,
            balance=initial_balance
        )

        if self.add_account(account):
            return account

        return None

    def get_account(self, account_number: int) -> Optional[Account]:
        """Get account by account number."""
        return self.accounts.get(account_number)

    def get_all_accounts(self) -> List[Account]:
        """Get all accounts in registration order."""
        return list(self.accounts.values())

    def get_balance(self, account_number: int) -> Optional[Decimal]:
        """Get account balance."""
        account = self.get_account(account_number)
        return account.get_balance() if account else None

    def make_transaction(self, account_number: int, amount: Decimal,
                         transaction_type: TransactionType) -> TransactionResult:
        """Apply a deposit or withdrawal and record it in the ledger on success."""
        amount = to_decimal(amount)
        transaction_type = TransactionType(transaction_type)

        with self._lock:
            account = self.get_account(account_number)
            if not account:
                self.logger.warning(f"Account {account_number} not found")
                return TransactionResult(TransactionStatus.ACCOUNT_NOT_FOUND,
                                         account_number, amount, transaction_type)

            if amount <= 0:
                self.logger.warning(
                    f"Rejected {transaction_type.value.lower()} of {amount} "
                    f"on account {account_number}"
                )
                return TransactionResult(TransactionStatus.INVALID_AMOUNT,
                                         account_number, amount, transaction_type,
                                         balance=account.balance)

            if transaction_type == TransactionType.DEPOSIT:
                account.deposit(amount)
            elif transaction_type == TransactionType.WITHDRAWAL and not account.withdraw(amount):
                if account.account_type == AccountType.SAVINGS:
                    status = TransactionStatus.INSUFFICIENT_FUNDS
                else:
                    status = TransactionStatus.OVERDRAFT_LIMIT_REACHED
                self.logger.warning(
                    f"Withdrawal of {amount} from account {account_number} refused: "
                    f"{status.value}"
                )
                return TransactionResult(status, account_number, amount,
                                         transaction_type, balance=account.balance)

            transaction = self._record_transaction(account_number, amount, transaction_type)
            return TransactionResult(TransactionStatus.SUCCESS, account_number, amount,
                                     transaction_type, transaction, account.balance)

    def deposit(self, account_number: int, amount: Decimal) -> TransactionResult:
        """Deposit money to an account."""
        return self.make_transaction(account_number, amount, TransactionType.DEPOSIT)

    def withdraw(self, account_number: int, amount: Decimal) -> TransactionResult:
        """Withdraw money from an account."""
        return self.make_transaction(account_number, amount, TransactionType.WITHDRAWAL)

    def _record_transaction(self, account_number: int, amount: Decimal,
                            transaction_type: TransactionType) -> Transaction:
        """Append a transaction to the ledger under the next id."""
        with self._lock:
            self.transaction_counter += 1
            transaction = Transaction(
                transaction_id=self.transaction_counter,
                account_number=account_number,
                amount=amount,
                transaction_type=transaction_type
            )
            self.transactions.append(transaction)

        self.logger.info(str(transaction))
        return transaction

    def list_transactions(self) -> List[Transaction]:
        """Get the ledger in append order."""
        return list(self.transactions)

    def get_account_history(self, account_number: int) -> List[Transaction]:
        """Get the ledger entries of one account."""
        return [txn for txn in self.transactions if txn.account_number == account_number]
