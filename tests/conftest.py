import pytest
from fastapi.testclient import TestClient

from passgen.app import create_app


VALID_QUERY = {
    'length': '12',
    'useUppercase': 'true',
    'useLowercase': 'true',
    'useNumbers': 'true',
    'useSpecialChar': 'true',
}


@pytest.fixture
def valid_query():
    """A fresh copy of a query that passes every check."""
    return dict(VALID_QUERY)


@pytest.fixture
def client():
    """Client for the service with the default (pt_BR) messages."""
    return TestClient(create_app())


@pytest.fixture
def en_client():
    """Client for the service with English messages."""
    return TestClient(create_app(locale='en_US'))
