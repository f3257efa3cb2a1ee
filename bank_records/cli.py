"""
CLI interface for the bank records system.

This module provides a command-line interface for building clients and
accounts and printing their details, including the sample walkthrough.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from .models import Date, Name, BankClient, BankAccount
from .validation import InvalidArgument


DATE_PATTERN = re.compile(r'^(-?\d+)-(\d{1,2})-(\d{1,2})$')


class BankCLI:
    """CLI helpers for parsing input and printing entities."""

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            clean_str = amount_str.replace('$', '').replace(',', '').strip()
            return Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise InvalidArgument(f"Invalid amount: {amount_str}")

    def parse_date(self, date_str: Optional[str]) -> Optional[Date]:
        """Parse a YYYY-MM-DD date, or return None for empty input."""
        if not date_str:
            return None

        match = DATE_PATTERN.match(date_str.strip())
        if not match:
            raise InvalidArgument(f"Invalid date: {date_str} (expected YYYY-MM-DD)")

        year, month, day = (int(part) for part in match.groups())
        return Date(year, month, day)

    def build_client(self, first_name: str, last_name: str, client_id: str,
                     birth: str, death: Optional[str], signup: str) -> BankClient:
        """Build a client from raw option values."""
        return BankClient(
            name=Name(first_name, last_name),
            birth_date=self.parse_date(birth),
            death_date=self.parse_date(death),
            signup_date=self.parse_date(signup),
            client_id=client_id
        )

    def echo_name(self, name: Name) -> None:
        """Print initials, full name and reversed name."""
        click.echo(f"Initials: {name.get_initials()}")
        click.echo(f"Full Name: {name.get_full_name()}")
        click.echo(f"Reversed Name: {name.get_reverse_name()}")


def client_options(func):
    """Attach the options shared by the client and account commands."""
    options = [
        click.option('--first-name', prompt='First name', help='Client first name'),
        click.option('--last-name', prompt='Last name', help='Client last name'),
        click.option('--client-id', prompt='Client ID', help='Client ID (6 or 7 characters)'),
        click.option('--birth', prompt='Birth date (YYYY-MM-DD)', help='Birth date'),
        click.option('--death', default=None, help='Death date (YYYY-MM-DD), omit if alive'),
        click.option('--signup', prompt='Signup date (YYYY-MM-DD)', help='Bank signup date'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Bank Records CLI"""
    logging.basicConfig(level=getattr(logging, log_level.upper()),
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI()


@cli.command()
@click.argument('year', type=int)
@click.argument('month', type=int)
@click.argument('day', type=int)
@click.pass_context
def weekday(ctx, year, month, day):
    """Print the day of the week for a date."""
    try:
        click.echo(Date(year, month, day).get_day_of_the_week())
    except InvalidArgument as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@click.argument('first_name')
@click.argument('last_name')
@click.pass_context
def name(ctx, first_name, last_name):
    """Print the initials, full name and reversed name."""
    bank_cli = ctx.obj['cli']

    try:
        bank_cli.echo_name(Name(first_name, last_name))
    except InvalidArgument as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@client_options
@click.pass_context
def client(ctx, first_name, last_name, client_id, birth, death, signup):
    """Show client details."""
    bank_cli = ctx.obj['cli']

    try:
        bank_client = bank_cli.build_client(first_name, last_name, client_id, birth, death, signup)
        click.echo(bank_client.get_details())
    except InvalidArgument as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@client_options
@click.option('--account-number', prompt='Account number', help='Account number (6 or 7 characters)')
@click.option('--opened', prompt='Opening date (YYYY-MM-DD)', help='Account opening date')
@click.option('--closed', default=None, help='Account closing date (YYYY-MM-DD), omit if open')
@click.option('--balance', default='0.00', help='Initial balance')
@click.option('--pin', type=int, prompt='PIN', help='Account PIN')
@click.option('--deposit', 'deposits', multiple=True, help='Amount to deposit (repeatable)')
@click.option('--withdraw', 'withdrawals', multiple=True, help='Amount to withdraw (repeatable)')
@click.option('--withdraw-pin', type=int, default=None, help='PIN used to verify withdrawals')
@click.pass_context
def account(ctx, first_name, last_name, client_id, birth, death, signup,
            account_number, opened, closed, balance, pin, deposits, withdrawals, withdraw_pin):
    """Show account details after applying deposits and withdrawals."""
    bank_cli = ctx.obj['cli']

    try:
        bank_client = bank_cli.build_client(first_name, last_name, client_id, birth, death, signup)
        bank_account = BankAccount(
            client=bank_client,
            account_number=account_number,
            account_opened=bank_cli.parse_date(opened),
            account_closed=bank_cli.parse_date(closed),
            balance=bank_cli.parse_currency(balance),
            pin=pin
        )

        for amount in deposits:
            bank_account.deposit(bank_cli.parse_currency(amount))
        for amount in withdrawals:
            bank_account.withdraw(bank_cli.parse_currency(amount), withdraw_pin)

        click.echo(bank_account.get_details())
    except InvalidArgument as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@click.pass_context
def demo(ctx):
    """Walk through the sample clients and accounts."""
    bank_cli = ctx.obj['cli']

    click.echo(Date(1977, 10, 31).get_day_of_the_week())
    click.echo(Date(2021, 3, 15).get_day_of_the_week())

    # Albert Einstein: deceased, account closed
    einstein_name = Name("Albert", "Einstein")
    bank_cli.echo_name(einstein_name)
    einstein_signup = Date(1900, 1, 1)
    einstein = BankClient(einstein_name, Date(1879, 3, 14), Date(1955, 4, 18), einstein_signup, "abc123")
    click.echo(einstein.get_details())
    einstein_account = BankAccount(einstein, "abc123", einstein_signup, Date(1950, 10, 14), 1000, 3141)
    click.echo(einstein_account.get_details())
    click.echo()

    click.echo("=== Nelson Mandela ===")
    mandela_name = Name("Nelson", "Mandela")
    bank_cli.echo_name(mandela_name)
    mandela_signup = Date(1994, 5, 10)
    mandela = BankClient(mandela_name, Date(1918, 7, 18), Date(2013, 12, 5), mandela_signup, "654321")
    click.echo(mandela.get_details())
    mandela_account = BankAccount(mandela, "654321", mandela_signup, None, 2000, 4664)
    mandela_account.withdraw(200)
    click.echo(mandela_account.get_details())
    click.echo()

    click.echo("=== Frida Kahlo ===")
    kahlo_name = Name("Frida", "Kahlo")
    bank_cli.echo_name(kahlo_name)
    kahlo_signup = Date(1940, 1, 1)
    kahlo_death = Date(1954, 7, 13)
    kahlo = BankClient(kahlo_name, Date(1907, 7, 6), kahlo_death, kahlo_signup, "frd123")
    click.echo(kahlo.get_details())
    kahlo_account = BankAccount(kahlo, "frd123", kahlo_signup, kahlo_death, 500, 1907)
    click.echo(kahlo_account.get_details())
    click.echo()

    click.echo("=== Jackie Chan ===")
    chan_name = Name("Jackie", "Chan")
    bank_cli.echo_name(chan_name)
    chan_signup = Date(1980, 10, 1)
    chan = BankClient(chan_name, Date(1954, 4, 7), None, chan_signup, "chan789")
    click.echo(chan.get_details())
    chan_account = BankAccount(chan, "chan789", chan_signup, None, 3000, 1954)
    chan_account.withdraw(500)
    click.echo(chan_account.get_details())


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
