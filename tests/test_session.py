"""
Tests for StorefrontSession wiring with mocked page objects
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cart_verify.cart.consistency import CartConsistencyModel
from cart_verify.core.errors import InvariantViolation
from cart_verify.session import AddedProduct, StorefrontSession

from fakes import FakeCartDriver


@pytest.fixture
def session(settings):
    session = StorefrontSession(MagicMock(), settings)
    session.catalog = AsyncMock()
    session.product = AsyncMock()
    session.product.wait_loaded.return_value = "Sony vaio i5"
    session.product.get_price.return_value = 790
    session.cart = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_add_product_navigates_and_acknowledges(session):
    added = await session.add_product("Sony vaio i5")

    assert added == AddedProduct("Sony vaio i5", 790)
    session.catalog.goto_home.assert_awaited_once()
    session.catalog.open_category.assert_awaited_once_with("Laptops")
    session.catalog.open_product_by_name.assert_awaited_once_with("Sony vaio i5")
    session.product.add_to_cart_expect_alert.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_product_by_index(session):
    added = await session.add_product_by_index(0, category="Laptops")

    assert added.price == 790
    session.catalog.open_product_by_index.assert_awaited_once_with(0)


@pytest.mark.asyncio
async def test_open_cart_checks_total(session):
    session.model = CartConsistencyModel(FakeCartDriver([("Sony vaio i5", "790")]))

    snapshot = await session.open_cart()

    session.cart.open.assert_awaited_once()
    assert snapshot.reported_total == 790


@pytest.mark.asyncio
async def test_open_cart_reports_mismatch(session):
    session.model = CartConsistencyModel(FakeCartDriver([("Sony vaio i5", "790")], total_override="1580"))

    with pytest.raises(InvariantViolation):
        await session.open_cart()


@pytest.mark.asyncio
async def test_clear_cart(session):
    driver = FakeCartDriver([("Sony vaio i5", "790"), ("Sony vaio i7", "790")])
    session.model = CartConsistencyModel(driver)

    assert await session.clear_cart() == 2
    assert driver.rows == []


def test_sessions_are_isolated(settings):
    first = StorefrontSession(MagicMock(), settings)
    second = StorefrontSession(MagicMock(), settings)
    assert first.cart is not second.cart
    assert first.model.driver is first.cart
