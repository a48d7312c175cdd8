"""
Pytest fixtures.

The environment is prepared before `main` is imported, because the module
builds the app at import time.
"""

import os

os.environ["CUSTOMER_STORE"] = "memory"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from customers.repository import InMemoryCustomerStore
from main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    return InMemoryCustomerStore()


@pytest.fixture
def client():
    # Entering the context runs the lifespan, which creates a fresh store.
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def ana():
    return {"name": "Ana", "email": "ana@x.com", "age": 30}
