import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def client():
    """Flask test client with a fresh ingredient store."""
    from app import app, reset_store
    app.config['TESTING'] = True
    reset_store()
    with app.test_client() as client:
        yield client


@pytest.fixture
def store(client):
    from app import get_store
    return get_store()
