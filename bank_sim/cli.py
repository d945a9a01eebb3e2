"""
CLI interface for the bank simulator.

This module provides the interactive text menu. It only parses console input and
prints results; every balance rule lives in the Bank and its accounts.
"""

import click
from decimal import Decimal, InvalidOperation
from typing import Optional

from .models import AccountType, TransactionType
from .bank import Bank
from .logging_config import LOG_LEVELS, setup_logging


MENU = """
----- Banking System Menu -----
1. Create Account
2. Deposit
3. Withdraw
4. View Account Balance
5. View All Transactions
6. Exit"""

ACCOUNT_TYPE_MENU = """
Select Account Type:
1. Savings Account
2. Checking Account"""

ACCOUNT_TYPE_CHOICES = {
    1: AccountType.SAVINGS,
    2: AccountType.CHECKING,
}


class BankCLI:
    """CLI wrapper for bank operations."""

    def __init__(self, bank: Optional[Bank] = None):
        """Initialize CLI with a bank instance."""
        self.bank = bank if bank is not None else Bank()

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"{amount:,.2f}"

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            clean_str = amount_str.replace(',', '').strip()
            amount = Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise ValueError(f"Invalid amount: {amount_str}")

        if not amount.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")

        return amount

    def parse_account_number(self, number_str: str) -> int:
        """Parse account number input."""
        try:
            return int(number_str.strip())
        except ValueError:
            raise ValueError(f"Invalid account number: {number_str}")


def prompt(text: str) -> str:
    return click.prompt(text, prompt_suffix=": ")


def create_account(bank_cli: BankCLI) -> None:
    """Ask for the account details and register the account."""
    click.echo(ACCOUNT_TYPE_MENU)
    try:
        account_type = ACCOUNT_TYPE_CHOICES[int(prompt("Enter your choice"))]
    except (ValueError, KeyError):
        click.echo("❌ Invalid account type.", err=True)
        return

    try:
        account_number = bank_cli.parse_account_number(prompt("Enter Account Number"))
        holder_name = prompt("Enter Account Holder Name").strip()
        initial_balance = bank_cli.parse_currency(prompt("Enter initial deposit amount"))
    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)
        return

    account = bank_cli.bank.create_account(
        account_type=account_type,
        account_number=account_number,
        holder_name=holder_name,
        initial_balance=initial_balance
    )

    if account:
        click.echo(f"✅ Account {account.account_number} added for {account.holder_name}.")
        click.echo(f"Type: {account.account_type.value}")
        click.echo(f"Balance: {bank_cli.format_currency(account.balance)}")
    else:
        click.echo(f"❌ Account {account_number} already exists.", err=True)


def perform_transaction(bank_cli: BankCLI, transaction_type: TransactionType) -> None:
    """Ask for an account and amount and apply the transaction."""
    label = transaction_type.value
    try:
        account_number = bank_cli.parse_account_number(
            prompt(f"\nEnter Account Number for {label}")
        )
        amount = bank_cli.parse_currency(prompt(f"Enter amount to {label}"))
    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)
        return

    result = bank_cli.bank.make_transaction(account_number, amount, transaction_type)
    if not result.success:
        click.echo(f"❌ {result.message}", err=True)
        return

    click.echo(f"✅ {result.message}")
    click.echo(f"Amount: {bank_cli.format_currency(result.amount)}")
    if transaction_type == TransactionType.DEPOSIT:
        account = bank_cli.bank.get_account(account_number)
        interest = account.interest_for(amount)
        if interest:
            click.echo(f"Interest: {bank_cli.format_currency(interest)}")
    click.echo(f"New Balance: {bank_cli.format_currency(result.balance)}")


def view_balance(bank_cli: BankCLI) -> None:
    """Show the balance of one account."""
    try:
        account_number = bank_cli.parse_account_number(
            prompt("\nEnter Account Number to view balance")
        )
    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)
        return

    account = bank_cli.bank.get_account(account_number)
    if not account:
        click.echo("❌ Account not found.", err=True)
        return

    click.echo(
        f"Account {account.account_number} belonging to {account.holder_name} "
        f"has a balance of {bank_cli.format_currency(account.get_balance())}"
    )


def show_transactions(bank_cli: BankCLI) -> None:
    """Print the ledger in append order."""
    transactions = bank_cli.bank.list_transactions()
    if not transactions:
        click.echo("No transactions to show.")
        return

    for txn in transactions:
        click.echo(str(txn))


def run_menu(bank_cli: BankCLI) -> None:
    """Run the menu loop until the user exits or input ends."""
    actions = {
        1: create_account,
        2: lambda c: perform_transaction(c, TransactionType.DEPOSIT),
        3: lambda c: perform_transaction(c, TransactionType.WITHDRAWAL),
        4: view_balance,
        5: show_transactions,
    }

    while True:
        click.echo(MENU)
        try:
            raw_choice = prompt("Enter your choice")
        except click.Abort:
            click.echo("\nExiting the banking system. Goodbye!")
            return

        try:
            choice = int(raw_choice)
        except ValueError:
            click.echo("Invalid choice. Please enter a number.", err=True)
            continue

        if choice == 6:
            click.echo("Exiting the banking system. Goodbye!")
            return

        action = actions.get(choice)
        if action is None:
            click.echo("Invalid choice. Try again.", err=True)
            continue

        try:
            action(bank_cli)
        except click.Abort:
            click.echo("\nExiting the banking system. Goodbye!")
            return


@click.group(invoke_without_command=True)
@click.option('--log-level', default='WARNING', envvar='BANK_SIM_LOG_LEVEL',
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Bank Simulator CLI"""
    setup_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI()

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@cli.command()
@click.pass_context
def menu(ctx):
    """Start the interactive banking menu."""
    run_menu(ctx.obj['cli'])


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
