"""
Data models for the bank simulator.

This module contains the accounts, transactions and customers the bank works with,
together with the balance rules of each account type.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from enum import Enum


SAVINGS_INTEREST_RATE = Decimal('0.03')  # Bonus paid on every savings deposit
CHECKING_OVERDRAFT_LIMIT = Decimal('500')


def to_decimal(value) -> Decimal:
    """Convert int, float or str input to Decimal."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"


class TransactionType(Enum):
    """Types of ledger transactions."""
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


@dataclass
class Account:
    """Represents a bank account of one of the supported types."""

    account_number: int
    holder_name: str
    account_type: AccountType = AccountType.CHECKING
    balance: Decimal = Decimal('0.00')
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Initialize account after creation."""
        if self.created_at is None:
            self.created_at = datetime.now()

        self.account_type = AccountType(self.account_type)
        self.balance = to_decimal(self.balance)

    def __setattr__(self, name, value):
        if name in ('account_number', 'holder_name') and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed after account creation")
        super().__setattr__(name, value)

    @classmethod
    def savings(cls, account_number: int, holder_name: str,
                balance: Decimal = Decimal('0.00')) -> 'Account':
        """Create a savings account."""
        return cls(account_number, holder_name, AccountType.SAVINGS, balance)

    @classmethod
    def checking(cls, account_number: int, holder_name: str,
                 balance: Decimal = Decimal('0.00')) -> 'Account':
        """Create a checking account."""
        return cls(account_number, holder_name, AccountType.CHECKING, balance)

    @property
    def withdrawal_floor(self) -> Decimal:
        """Lowest balance a withdrawal may leave behind."""
        if self.account_type == AccountType.SAVINGS:
            return Decimal('0')
        return -CHECKING_OVERDRAFT_LIMIT

    def interest_for(self, amount: Decimal) -> Decimal:
        """Bonus credited on top of a deposit of the given amount."""
        amount = to_decimal(amount)
        if self.account_type == AccountType.SAVINGS:
            return amount * SAVINGS_INTEREST_RATE
        return Decimal('0')

    def can_withdraw(self, amount: Decimal) -> bool:
        """Check if withdrawal is possible without going below the floor."""
        return self.balance - to_decimal(amount) >= self.withdrawal_floor

    def deposit(self, amount: Decimal) -> None:
        """Deposit money to account.

        Savings accounts receive the interest bonus on every deposit. The amount
        is not validated here; callers are expected to pass positive values.
        """
        amount = to_decimal(amount)
        self.balance += amount + self.interest_for(amount)

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money from account."""
        amount = to_decimal(amount)

        if not self.can_withdraw(amount):
            return False

        self.balance -= amount
        return True

    def get_balance(self) -> Decimal:
        return self.balance


@dataclass(frozen=True)
class Transaction:
    """Represents a completed ledger entry."""

    transaction_id: int
    account_number: int
    amount: Decimal
    transaction_type: TransactionType
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Initialize transaction after creation."""
        if self.timestamp is None:
            object.__setattr__(self, 'timestamp', datetime.now())

        object.__setattr__(self, 'amount', to_decimal(self.amount))
        object.__setattr__(self, 'transaction_type', TransactionType(self.transaction_type))

    def __str__(self) -> str:
        return (f"Transaction {self.transaction_id}: {self.transaction_type.value} "
                f"of {self.amount} on {self.timestamp:%Y-%m-%d %H:%M:%S}")


@dataclass
class Customer:
    """Groups the accounts held by one customer."""

    customer_id: int
    name: str
    accounts: List[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        self.accounts.append(account)

    def total_balance(self) -> Decimal:
        """Sum of the balances of all accounts held by the customer."""
        return sum((account.balance for account in self.accounts), Decimal('0.00'))
