"""
Tests for the command-line runner
"""

import pytest

from cart_verify import main as main_module


@pytest.fixture
def recorded_runs(monkeypatch):
    runs = []

    async def fake_run_smoke(products, settings=None):
        runs.append((products, settings))
        return 0

    monkeypatch.setattr(main_module, "run_smoke", fake_run_smoke)
    return runs


def test_main_defaults_to_known_products(recorded_runs):
    assert main_module.main([]) == 0
    products, settings = recorded_runs[0]
    assert products == ["Sony vaio i5", "Sony vaio i7"]
    assert settings.base_url


def test_main_passes_product_names(recorded_runs):
    main_module.main(["MacBook air"])
    assert recorded_runs[0][0] == ["MacBook air"]


def test_exit_code_propagates(monkeypatch):
    async def failing_run(products, settings=None):
        return 1

    monkeypatch.setattr(main_module, "run_smoke", failing_run)
    assert main_module.main(["MacBook air"]) == 1
