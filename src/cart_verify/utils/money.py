"""
Price text normalization

Turns storefront price text ("$790", "790.00", "$1,234.56 *includes tax")
into whole-unit integer amounts. One convention only: optional currency
symbol, thousands separators, optional decimal point, no negatives.
"""

import logging
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from cart_verify.core.errors import ParseDegraded

logger = logging.getLogger(__name__)

# Everything except digits and '.' is dropped (symbols, separators, whitespace, labels)
_NON_NUMERIC = re.compile(r'[^\d.]')

# Longest leading decimal number, so "1.2.3" reads as 1.2
_NUMERIC_PREFIX = re.compile(r'\d+(?:\.\d*)?|\.\d+')

_DIGIT = re.compile(r'\d')

_WHOLE_UNIT = Decimal('1')


def parse_price(raw: Optional[str]) -> int:
    """
    Parse price text into an integer amount, rounded half-up.

    Never raises: text with no readable number is worth 0.

    Examples:
        parse_price("$790")       -> 790
        parse_price("790.50")     -> 791
        parse_price("$1,234.56")  -> 1235
        parse_price("free")       -> 0
    """
    digits = _NON_NUMERIC.sub('', raw or '')
    match = _NUMERIC_PREFIX.match(digits)
    if not match:
        if raw and raw.strip():
            logger.debug(f"PRICE: no number in {raw!r}, using 0")
        return 0
    return int(Decimal(match.group()).quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP))


def has_digits(raw: Optional[str]) -> bool:
    return bool(raw) and _DIGIT.search(raw) is not None


def parse_price_strict(raw: Optional[str]) -> int:
    """
    Like parse_price, but non-empty text without any digit raises ParseDegraded.

    Blank fields (None, "", whitespace) still read as 0, which is how an
    empty cart reports its total.
    """
    if raw and raw.strip() and not has_digits(raw):
        raise ParseDegraded(raw)
    return parse_price(raw)


def format_price(amount: int, symbol: str = '$') -> str:
    return f"{symbol}{amount:,}"
