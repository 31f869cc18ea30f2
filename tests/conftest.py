import pytest

from tf2sku.models import failure as failure_module


@pytest.fixture(autouse=True)
def clear_finalized_responses():
    """Clear the finalized responses set between tests.

    This prevents test isolation issues where Python reuses memory
    addresses for new objects, causing id() collisions with previously
    finalized responses.
    """
    failure_module._finalized_responses.clear()
    yield
    failure_module._finalized_responses.clear()


@pytest.fixture
def decorated_weapon_sku() -> str:
    """Professional killstreak unusual war paint, already in canonical order."""
    return "424;15;u703;w3;pk307;kt-3;ks-1;ke-2008"


@pytest.fixture
def spelled_sku() -> str:
    """Strange item with a strange part and two spells."""
    return "627;11;sp-28;footprints-2;voices"
