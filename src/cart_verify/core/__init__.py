# Core package
from .config import CartVerifyConfig, VerifySettings
from .errors import (
    AddToCartFailed,
    CartVerifyError,
    InvariantViolation,
    MalformedRow,
    NotFound,
    OutOfRange,
    ParseDegraded,
    SettlementTimeout,
)
from .logging_setup import configure_logging

__all__ = [
    'CartVerifyConfig',
    'VerifySettings',
    'AddToCartFailed',
    'CartVerifyError',
    'InvariantViolation',
    'MalformedRow',
    'NotFound',
    'OutOfRange',
    'ParseDegraded',
    'SettlementTimeout',
    'configure_logging',
]
