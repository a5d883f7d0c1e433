"""
cart_verify - storefront cart consistency checks
Price text normalization plus a cart model that checks total == sum(rows)
across adds and deletes
"""

from cart_verify.cart import CartConsistencyModel, CartDriver, CartSnapshot, LineItem
from cart_verify.core.errors import (
    AddToCartFailed,
    CartVerifyError,
    InvariantViolation,
    MalformedRow,
    NotFound,
    OutOfRange,
    ParseDegraded,
    SettlementTimeout,
)
from cart_verify.utils.money import parse_price, parse_price_strict

__all__ = [
    'CartConsistencyModel',
    'CartDriver',
    'CartSnapshot',
    'LineItem',
    'AddToCartFailed',
    'CartVerifyError',
    'InvariantViolation',
    'MalformedRow',
    'NotFound',
    'OutOfRange',
    'ParseDegraded',
    'SettlementTimeout',
    'parse_price',
    'parse_price_strict',
]

__version__ = '1.0.0'
