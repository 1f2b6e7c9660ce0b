import itertools
import pytest
from fastapi.testclient import TestClient
from main import app
from core.context import AppContext, get_context

@pytest.fixture
def context():
    counter = itertools.count(1)
    return AppContext(next_id=lambda: f"id-{next(counter)}")

@pytest.fixture
def client(context):
    app.dependency_overrides[get_context] = lambda: context
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def taco():
    return {"name": "Taco", "description": "Spicy", "price": 5, "image_url": "http://x"}

@pytest.fixture
def order_data():
    return {"deliverTo": "123 Main", "mobileNumber": "555-0100", "dishes": [{"quantity": 2}]}
