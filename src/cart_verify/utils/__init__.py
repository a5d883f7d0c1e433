# Utils package
from .money import format_price, has_digits, parse_price, parse_price_strict
from .waiting import poll_until, wait_for_stable

__all__ = [
    'format_price',
    'has_digits',
    'parse_price',
    'parse_price_strict',
    'poll_until',
    'wait_for_stable',
]
