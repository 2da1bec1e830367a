"""Mini README: Parse-or-fail conversion of user supplied amounts.

Structure:
    * AmountValidationError - typed error naming the field that failed.
    * parse_amount - converts text, ``int`` or ``Decimal`` into finite ``Decimal`` values.

Amounts arrive as raw console text most of the time. Accepted text is an
optional sign, digits (optionally grouped with ``,`` every three digits) and
an optional ``.`` fraction. Exponents, ``NaN`` and ``Infinity`` are rejected
even though ``Decimal`` itself would accept them. Floats are rejected like any
other unsupported type, so fractions only arrive through the text rules above.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

AmountInput = Union[Decimal, int, str]

_AMOUNT_PATTERN = re.compile(r"^[+-]?(?:\d{1,3}(?:,\d{3})+|\d*)(?:\.\d*)?$")


class AmountValidationError(ValueError):
    """Raised when an amount cannot be converted to a finite decimal."""

    def __init__(self, field_name: str, raw_value: object) -> None:
        self.field_name = field_name
        self.raw_value = raw_value
        super().__init__(f"Invalid {field_name}. Please enter a valid number.")


def parse_amount(value: AmountInput, field_name: str = "amount") -> Decimal:
    """Return ``value`` as a finite ``Decimal`` or raise ``AmountValidationError``."""

    if isinstance(value, bool):
        raise AmountValidationError(field_name, value)
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, str):
        parsed = _parse_text(value, field_name)
    else:
        raise AmountValidationError(field_name, value)

    if not parsed.is_finite():
        LOGGER.debug("Rejected non-finite %s: %r", field_name, value)
        raise AmountValidationError(field_name, value)
    return parsed


def _parse_text(text: str, field_name: str) -> Decimal:
    """Validate the textual shape before handing it to ``Decimal``."""

    candidate = text.strip()
    if not any(character.isdigit() for character in candidate) or not _AMOUNT_PATTERN.match(candidate):
        LOGGER.debug("Rejected malformed %s text: %r", field_name, text)
        raise AmountValidationError(field_name, text)
    try:
        return Decimal(candidate.replace(",", ""))
    except InvalidOperation as error:
        raise AmountValidationError(field_name, text) from error
