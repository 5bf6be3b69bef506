# tests/conftest.py
import pytest
from structlog.testing import capture_logs

from locale_bridge.core.domain.models import LocaleMapping, Store
from locale_bridge.core.registry import REGISTRY

@pytest.fixture(scope="session")
def registry():
    """The process-wide registry built from the compiled-in locale table."""
    return REGISTRY

@pytest.fixture
def sample_rows():
    """A small, valid locale table exercising proxies and store gaps."""
    return [
        LocaleMapping(unified="ar", name="Arabic", app_store="ar-SA", google_play="ar"),
        LocaleMapping(unified="en-US", name="English (United States)", app_store="en-US", google_play="en-US"),
        LocaleMapping(unified="id-ID", name="Indonesian", app_store="id", google_play="id"),
        LocaleMapping(unified="zu", name="Zulu", app_store=None, google_play="zu"),
    ]

@pytest.fixture
def sample_aliases():
    return {Store.GOOGLE_PLAY: {"in": "id-ID"}}

@pytest.fixture
def log_events():
    """Captures structlog events emitted during the test."""
    with capture_logs() as events:
        yield events
