"""
Cart verification errors

OutOfRange, NotFound and SettlementTimeout are operational failures a caller
may retry once. InvariantViolation is the verification result itself and is
never retried or suppressed.
"""


class CartVerifyError(Exception):
    """Base class for all cart verification failures"""


class ParseDegraded(CartVerifyError, ValueError):
    """Price text contained no digit at all (strict parsing only)"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Price text {raw!r} does not contain a number")


class OutOfRange(CartVerifyError, IndexError):
    """Row position outside [0, count)"""

    def __init__(self, position: int, count: int):
        self.position = position
        self.count = count
        super().__init__(f"Position {position} out of range for cart with {count} item(s)")


class NotFound(CartVerifyError, LookupError):
    """Name or position lookup found nothing to act on"""

    def __init__(self, target):
        self.target = target
        super().__init__(f"No cart item matching {target!r}")


class SettlementTimeout(CartVerifyError, TimeoutError):
    """A wait for a visible postcondition exceeded its budget"""

    def __init__(self, description: str, timeout: float):
        self.description = description
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout:.1f}s waiting for: {description}")


class MalformedRow(CartVerifyError, ValueError):
    """A rendered cart row has no readable name"""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Cart row {position} has a blank name")


class AddToCartFailed(CartVerifyError):
    """The add-to-cart confirmation did not carry the expected message"""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected add-to-cart alert containing {expected!r}, got {actual!r}")


class InvariantViolation(CartVerifyError, AssertionError):
    """Reported cart total differs from the sum of its line items"""

    def __init__(self, snapshot):
        self.snapshot = snapshot
        lines = ', '.join(f"{item.name}={item.unit_price}" for item in snapshot.items) or 'no items'
        super().__init__(
            f"Cart total {snapshot.reported_total} != line item sum {snapshot.line_sum} ({lines})"
        )
