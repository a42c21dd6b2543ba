"""Pytest configuration and fixtures."""

import pytest

from core import get_settings
from columns import ActionColumn
from pager import LinkPager, PagerConfig
from routing import RouteUrlGenerator


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def clear_settings_cache():
    """Settings are cached per process; reset them around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Column Fixtures
# ============================================================================

@pytest.fixture
def url_generator():
    """Default route URL generator."""
    return RouteUrlGenerator()


@pytest.fixture
def action_column(url_generator):
    """Action column with the builtin buttons under the admin controller."""
    return ActionColumn(url_generator, controller="admin")


@pytest.fixture
def stub_url_creator():
    """URL creator that ignores its arguments."""
    return lambda action, row, key, index: "http://test.com"


@pytest.fixture
def row():
    """A single grid row."""
    return {"id": 1}


# ============================================================================
# Pager Fixtures
# ============================================================================

@pytest.fixture
def page_url():
    """Page index to URL."""
    return lambda page: f"/items?page={page}"


@pytest.fixture
def link_pager(page_url):
    """Pager with default configuration."""
    return LinkPager(page_url)


@pytest.fixture
def pager_config():
    """Pager configuration with every boundary control shown."""
    return PagerConfig(first_page_label=True, last_page_label=True)
