"""Locale-bound rendering of prize amounts and draw dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from functools import lru_cache
from typing import Any

from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency as babel_format_currency
from dateutil import parser as date_parser
from loguru import logger

from app.core.config import get_settings

_CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class FormatOptions:
    locale: str = "pt_BR"
    currency: str = "BRL"
    date_format: str = "short"
    date_separator: str = "/"

    @classmethod
    def from_settings(cls) -> "FormatOptions":
        settings = get_settings()
        return cls(
            locale=settings.display_locale,
            currency=settings.currency_code,
            date_format=settings.date_format,
        )


def _to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool):
        return None
    try:
        # Floats go through their shortest repr: 2.005 stays 2.005, not 2.00499...
        decimal_value = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not decimal_value.is_finite():
        return None
    return decimal_value


def _to_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date_parser.isoparse(str(value).strip()).date()
    except (ValueError, OverflowError):
        return None


class Formatter:
    """Currency and date rendering for a single locale."""

    def __init__(self, options: FormatOptions | None = None) -> None:
        self.options = options or FormatOptions()

    def format_currency(self, value: Any) -> str:
        if value is None:
            return ""
        amount = _to_decimal(value)
        if amount is None:
            logger.warning("Cannot format non-numeric amount: {!r}", value)
            return ""
        # Keep every integer digit plus the cents when quantizing large amounts.
        with localcontext() as context:
            context.prec = max(context.prec, amount.adjusted() + 3)
            rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
            return babel_format_currency(
                rounded,
                self.options.currency,
                locale=self.options.locale,
            )

    def format_date(self, value: Any) -> str:
        """Render ``value`` as a short local date.

        Strings that already contain the date separator are treated as
        pre-formatted and returned untouched. Strings that cannot be parsed
        are also returned as given.
        """

        if value is None or value == "":
            return ""
        if isinstance(value, str) and self.options.date_separator in value:
            return value
        parsed = _to_date(value)
        if parsed is None:
            logger.warning("Cannot parse draw date {!r}; rendering it unchanged", value)
            return str(value)
        return babel_format_date(
            parsed,
            format=self.options.date_format,
            locale=self.options.locale,
        )


@lru_cache
def get_formatter() -> Formatter:
    return Formatter(FormatOptions.from_settings())


def format_currency(value: Any) -> str:
    return get_formatter().format_currency(value)


def format_date(value: Any) -> str:
    return get_formatter().format_date(value)
