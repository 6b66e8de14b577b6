"""
Root pytest configuration and fixtures for the eplite test suite.
"""

import os
from pathlib import Path
import sys

import pytest
import responses

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from eplite import EPLite  # noqa: E402
from eplite._http import HTTPClient  # noqa: E402
from eplite._types import Endpoint  # noqa: E402
from tests.utils.envelopes import API_KEY, API_ROOT, API_VERSION, BASE_URL  # noqa: E402


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def api_root():
    """URL prefix that operation names are appended to."""
    return API_ROOT


@pytest.fixture(autouse=True)
def clean_environment():
    """Strip ETHERPAD_* variables so tests never pick up a developer's config."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("ETHERPAD_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def http():
    return HTTPClient(api_key=API_KEY, endpoint=Endpoint.from_url(BASE_URL, API_VERSION))


@pytest.fixture
def client():
    with EPLite(api_key=API_KEY, base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def mock_requests():
    """Mock HTTP requests using responses library."""
    with responses.RequestsMock() as rsps:
        yield rsps
