"""
Shared fixtures: statement rows and settings isolation.
"""
import pytest

from core.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings():
    """Each test reads settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def march_rows():
    return [
        ["01/03/2024", "Card transaction: PAYPAL *SPOTIFY", "€9.99", ""],
        ["02/03/2024", "Payment received from MARIE CURIE", "", "25.00"],
        ["03/03/2024", "Direct debit: FREE MOBILE", "€19.99", ""],
    ]


@pytest.fixture
def april_rows():
    return [
        ["01/04/2024", "Payment to jean DUPONT", "€12.50", ""],
        ["02/04/2024", "Refund of the card transaction: fnac paris", "", "30.00"],
        ["03/04/2024", "Lydia fees", "€0.50", ""],
    ]
