"""Pytest configuration and fixtures"""
import pytest

from cart_verify.cart.consistency import CartConsistencyModel
from cart_verify.core.config import VerifySettings

from fakes import FakeCartDriver


@pytest.fixture
def settings():
    """Fast settings for unit tests"""
    return VerifySettings(expect_timeout_ms=500, poll_interval_ms=10, action_timeout_ms=500)


@pytest.fixture
def empty_driver():
    return FakeCartDriver()


@pytest.fixture
def two_item_driver():
    return FakeCartDriver([("Sony vaio i5", "790"), ("Sony vaio i7", "790")])


@pytest.fixture
def mixed_driver():
    return FakeCartDriver([
        ("MacBook air", "700"),
        ("Dell i7 8gb", "700"),
        ("MacBook air", "700"),
        ("2017 Dell 15.6 Inch", "700"),
    ])


@pytest.fixture
def model(two_item_driver):
    return CartConsistencyModel(two_item_driver)
