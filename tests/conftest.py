import pytest
import structlog

from barcode1d.config import get_settings


@pytest.fixture(autouse=True)
def reset_library_state():
    """Drop cached settings and structlog configuration around each test."""
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
