"""
Integration tests for the bank simulator.

These tests walk through complete scenarios against a single Bank instance.
"""

import pytest
from decimal import Decimal

from bank_sim import create_bank, Customer
from bank_sim.bank import TransactionStatus
from bank_sim.models import AccountType, TransactionType


class TestBankScenarios:
    """End-to-end banking scenarios."""

    @pytest.fixture
    def bank(self):
        """Create an empty Bank instance for testing."""
        return create_bank()

    def test_savings_deposit_with_interest(self, bank):
        """Savings #1 with 100.00, deposit 100: 100 + 100 * 1.03."""
        bank.create_account(AccountType.SAVINGS, 1, "Alice", Decimal('100.00'))

        result = bank.make_transaction(1, Decimal('100'), TransactionType.DEPOSIT)

        assert result.success is True
        assert bank.get_balance(1) == Decimal('203.00')
        ledger = bank.list_transactions()
        assert len(ledger) == 1
        assert ledger[0].transaction_id == 1

    def test_checking_overdraft_sequence(self, bank):
        """Checking #2 at 0.00: withdraw 400 succeeds, then 200 more fails."""
        bank.create_account(AccountType.SAVINGS, 1, "Alice", Decimal('100.00'))
        bank.create_account(AccountType.CHECKING, 2, "Bob", Decimal('0.00'))
        bank.deposit(1, Decimal('100'))

        first = bank.withdraw(2, Decimal('400'))
        assert first.success is True
        assert first.transaction.transaction_id == 2
        assert bank.get_balance(2) == Decimal('-400')

        second = bank.withdraw(2, Decimal('200'))
        assert second.status == TransactionStatus.OVERDRAFT_LIMIT_REACHED
        assert bank.get_balance(2) == Decimal('-400')
        assert len(bank.list_transactions()) == 2

    def test_savings_withdrawal_insufficient_funds(self, bank):
        bank.create_account(AccountType.SAVINGS, 3, "Carol", Decimal('50'))

        result = bank.withdraw(3, Decimal('60'))

        assert result.status == TransactionStatus.INSUFFICIENT_FUNDS
        assert result.message == "Insufficient funds!"
        assert bank.get_balance(3) == Decimal('50')
        assert bank.list_transactions() == []

    def test_unknown_account_balance(self, bank):
        bank.create_account(AccountType.CHECKING, 2, "Bob")
        bank.deposit(2, Decimal('10'))
        before = bank.list_transactions()

        assert bank.get_account(999) is None
        assert bank.get_balance(999) is None
        assert bank.list_transactions() == before

    def test_customer_view_follows_bank(self, bank):
        """Customer references see balance changes made through the bank."""
        savings = bank.create_account(AccountType.SAVINGS, 10, "Dana", Decimal('0'))
        checking = bank.create_account(AccountType.CHECKING, 11, "Dana", Decimal('0'))
        customer = Customer(1, "Dana")
        customer.add_account(savings)
        customer.add_account(checking)

        bank.deposit(10, Decimal('100'))
        bank.withdraw(11, Decimal('30'))

        assert customer.total_balance() == Decimal('73.00')
