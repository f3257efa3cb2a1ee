"""
Data models for the bank records system.

This module contains the four entities of the model: calendar dates, person
names, bank clients and bank accounts. Every entity validates its fields
once, at construction, and raises InvalidArgument on the first rule it
finds broken.
"""

import logging
import threading
from dataclasses import dataclass, field
from decimal import Context, Decimal, InvalidOperation, MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, localcontext
from typing import Optional

from .validation import InvalidArgument, validate_string


logger = logging.getLogger(__name__)

DAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday",
)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month of the given year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def _days_since_epoch(year: int, month: int, day: int) -> int:
    """
    Count days from 1970-01-01 to the given date.

    Works on 400-year eras with March as the first month of the year, so
    floor division keeps it valid for year zero and negative years.
    """
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * ((month + 9) % 12) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


@dataclass(frozen=True)
class Date:
    """Represents a calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        """Validate date parts."""
        for part, value in (("Year", self.year), ("Month", self.month), ("Day", self.day)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument(f"{part} must be an integer")

        if not 1 <= self.month <= 12:
            raise InvalidArgument(f"Month must be between 1 and 12, got {self.month}")

        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise InvalidArgument(
                f"Day must be between 1 and {max_day} for {MONTH_NAMES[self.month - 1]} {self.year}"
            )

    def get_day_of_the_week(self) -> str:
        """Name of the weekday this date falls on, e.g. "Monday"."""
        # 1970-01-01 was a Thursday
        return DAY_NAMES[(_days_since_epoch(self.year, self.month, self.day) + 4) % 7]

    def get_month_name(self) -> str:
        """Name of the month, e.g. "March"."""
        return MONTH_NAMES[self.month - 1]

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class Name:
    """Represents a person's first and last name."""

    MAX_NAME_LENGTH = 45
    ILLEGAL_SUBSTRING = "admin"

    first_name: str
    last_name: str

    def __post_init__(self):
        """Validate both name parts."""
        self._validate_name(self.first_name, "First name")
        self._validate_name(self.last_name, "Last name")

    @classmethod
    def _validate_name(cls, name: str, label: str) -> None:
        validate_string(name, label)

        if len(name) > cls.MAX_NAME_LENGTH:
            raise InvalidArgument(f"{label} exceeds maximum length of {cls.MAX_NAME_LENGTH}")

        if cls.ILLEGAL_SUBSTRING in name.lower():
            raise InvalidArgument(f"{label} contains illegal substring {cls.ILLEGAL_SUBSTRING}")

    @staticmethod
    def _capitalize(value: str) -> str:
        return value[0].upper() + value[1:].lower()

    def get_full_name(self) -> str:
        """Full name with each part capitalized, e.g. "Albert Einstein"."""
        return f"{self._capitalize(self.first_name)} {self._capitalize(self.last_name)}"

    def get_initials(self) -> str:
        """Upper-cased initials separated by periods, e.g. "A.E."."""
        return f"{self.first_name[0].upper()}.{self.last_name[0].upper()}."

    def get_reverse_name(self) -> str:
        """
        The "first last" string reversed character by character.

        The original casing is kept and the space is reversed along with
        the letters: "John Smith" becomes "htimS nhoJ".
        """
        return f"{self.first_name} {self.last_name}"[::-1]


@dataclass(frozen=True)
class BankClient:
    """Represents a client of the bank."""

    MIN_CLIENT_ID_LENGTH = 6
    MAX_CLIENT_ID_LENGTH = 7

    name: Name
    birth_date: Date
    death_date: Optional[Date]
    signup_date: Date
    client_id: str

    def __post_init__(self):
        """Validate client fields."""
        validate_string(self.client_id, "Client ID")

        if not self.MIN_CLIENT_ID_LENGTH <= len(self.client_id) <= self.MAX_CLIENT_ID_LENGTH:
            raise InvalidArgument(
                f"Client ID must be {self.MIN_CLIENT_ID_LENGTH} or {self.MAX_CLIENT_ID_LENGTH} characters"
            )

        if self.name is None:
            raise InvalidArgument("Name cannot be None")

        if self.birth_date is None:
            raise InvalidArgument("Birth date cannot be None")

        if self.signup_date is None:
            raise InvalidArgument("Signup date cannot be None")

    def is_alive(self) -> bool:
        """Check if the client has no recorded death date."""
        return self.death_date is None

    def get_details(self) -> str:
        """Summary line of the client and the day they joined the bank."""
        status = "alive" if self.is_alive() else "not alive"
        signup = self.signup_date

        # No space between day and year in the signup date
        return (
            f"{self.name.get_full_name()} client #{self.client_id} ({status}) "
            f"joined the bank on {signup.get_day_of_the_week().lower()}, "
            f"{signup.get_month_name().lower()} {signup.day},{signup.year}"
        )


def _to_decimal(value, label: str) -> Decimal:
    """Convert an amount to Decimal."""
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            raise InvalidArgument(f"{label} is not a valid amount: {value!r}")

    if not value.is_finite():
        raise InvalidArgument(f"{label} is not a valid amount: {value!r}")
    return value


def _exact_context(*values: Decimal) -> Context:
    """Decimal context wide enough to add, subtract and round to dollars without losing digits."""
    top = max(value.adjusted() for value in values)
    bottom = min(min(value.as_tuple().exponent for value in values), 0)
    return Context(prec=max(28, top - bottom + 2), rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _format_date(date: Date) -> str:
    return f"{date.get_day_of_the_week()} {date.get_month_name()} {date.day}, {date.year}"


@dataclass
class BankAccount:
    """
    Represents a bank account owned by a client.

    Each account holds its own lock, so accounts cannot be deep-copied or pickled.
    """

    MIN_ACCOUNT_NUMBER_LENGTH = 6
    MAX_ACCOUNT_NUMBER_LENGTH = 7

    client: BankClient
    account_number: str
    account_opened: Date
    account_closed: Optional[Date]
    balance: Decimal
    pin: int
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate account fields and normalize the balance."""
        if self.client is None:
            raise InvalidArgument("Client cannot be None")

        validate_string(self.account_number, "Account number")

        if not self.MIN_ACCOUNT_NUMBER_LENGTH <= len(self.account_number) <= self.MAX_ACCOUNT_NUMBER_LENGTH:
            raise InvalidArgument(
                f"Account number must be {self.MIN_ACCOUNT_NUMBER_LENGTH} or "
                f"{self.MAX_ACCOUNT_NUMBER_LENGTH} characters"
            )

        if self.account_opened is None:
            raise InvalidArgument("Account opened date cannot be None")

        self.balance = _to_decimal(self.balance, "Initial balance")
        if self.balance < 0:
            raise InvalidArgument("Initial balance cannot be negative")

    def is_closed(self) -> bool:
        """Check if the account has a closing date."""
        return self.account_closed is not None

    def deposit(self, amount) -> None:
        """
        Deposit money to the account.

        Args:
            amount: Amount in USD, must be positive

        Raises:
            InvalidArgument: If the amount is not positive or the account is closed
        """
        amount = _to_decimal(amount, "Deposit amount")

        with self._lock:
            if amount <= 0:
                logger.warning(f"Rejected deposit of {amount} to account {self.account_number}")
                raise InvalidArgument("Deposit amount must be positive")

            if self.is_closed():
                logger.warning(f"Rejected deposit to closed account {self.account_number}")
                raise InvalidArgument("Cannot deposit to a closed account")

            with localcontext(_exact_context(self.balance, amount)):
                self.balance += amount
            logger.debug(f"Deposited {amount} to account {self.account_number}, balance {self.balance}")

    def withdraw(self, amount, pin: Optional[int] = None) -> None:
        """
        Withdraw money from the account.

        When a PIN is given it must match the account PIN before any other
        rule is checked.

        Args:
            amount: Amount in USD, must be positive and not exceed the balance
            pin: Optional PIN to verify

        Raises:
            InvalidArgument: If the PIN is wrong, the amount is not positive,
                funds are insufficient or the account is closed
        """
        if pin is not None and pin != self.pin:
            logger.warning(f"Rejected withdrawal from account {self.account_number}: invalid PIN")
            raise InvalidArgument("Invalid PIN")

        amount = _to_decimal(amount, "Withdrawal amount")

        with self._lock:
            if amount <= 0:
                logger.warning(f"Rejected withdrawal of {amount} from account {self.account_number}")
                raise InvalidArgument("Withdrawal amount must be positive")

            if amount > self.balance:
                logger.warning(f"Rejected withdrawal of {amount} from account {self.account_number}: "
                               f"insufficient funds")
                raise InvalidArgument("Insufficient funds")

            if self.is_closed():
                logger.warning(f"Rejected withdrawal from closed account {self.account_number}")
                raise InvalidArgument("Cannot withdraw from a closed account")

            with localcontext(_exact_context(self.balance, amount)):
                self.balance -= amount
            logger.debug(f"Withdrew {amount} from account {self.account_number}, balance {self.balance}")

    def get_details(self) -> str:
        """Summary line of the account balance and its open/closed dates."""
        with localcontext(_exact_context(self.balance)):
            whole_dollars = self.balance.quantize(Decimal('1'), rounding=ROUND_HALF_UP)

        if self.is_closed():
            closing = f"closed {_format_date(self.account_closed)}"
        else:
            closing = "is still open"

        return (
            f"{self.client.name.get_full_name()} had ${whole_dollars:f} USD in account "
            f"#{self.account_number} which they opened on {_format_date(self.account_opened)} "
            f"and {closing}."
        )
