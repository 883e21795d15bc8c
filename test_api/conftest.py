"""
Pytest Configuration and Fixtures for the Member Authentication API Tests

Test environment variables are set before the app is imported. MongoDB is
replaced by an in-memory database double injected through
``app.dependency_overrides``.
"""

import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
os.environ["SECRET_KEY"] = "test_secret_key_for_testing_purposes_only_12345"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "15"
os.environ["REFRESH_TOKEN_EXPIRE_DAYS"] = "30"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEVELOPMENT_ENV"] = "local"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="member_auth_logs_")


class InMemoryCollection:
    """Just enough of a motor collection for the auth core."""

    def __init__(self, unique=()):
        self.documents = []
        self.unique = unique

    @staticmethod
    def _resolve(doc, operand):
        if operand == "$$NOW":
            return datetime.now(timezone.utc)
        if isinstance(operand, str) and operand.startswith("$"):
            return doc.get(operand[1:])
        return operand

    def _evaluate(self, doc, expression):
        operator, (left, right) = next(iter(expression.items()))
        left, right = self._resolve(doc, left), self._resolve(doc, right)
        if left is None or right is None:
            return False
        if operator == "$gt":
            return left > right
        if operator == "$lt":
            return left < right
        raise NotImplementedError(operator)

    def _matches(self, doc, query):
        for key, value in query.items():
            if key == "$expr":
                if not self._evaluate(doc, value):
                    return False
            elif doc.get(key) != value:
                return False
        return True

    def seed(self, document):
        document = dict(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return document

    async def find_one(self, query):
        for doc in self.documents:
            if self._matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, document):
        for field in self.unique:
            if any(doc.get(field) == document.get(field) for doc in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error dup key: {{ {field}: {document.get(field)!r} }}")
        stored = self.seed(document)
        document["_id"] = stored["_id"]
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one_and_delete(self, query):
        for index, doc in enumerate(self.documents):
            if self._matches(doc, query):
                return self.documents.pop(index)
        return None

    async def count_documents(self, query):
        return sum(1 for doc in self.documents if self._matches(doc, query))

    async def create_index(self, keys, **kwargs):
        return "_".join(f"{name}_{direction}" for name, direction in keys)


class InMemoryDatabase:
    def __init__(self):
        self.collections = {
            "members": InMemoryCollection(unique=("email",)),
            "refresh_tokens": InMemoryCollection(unique=("token",)),
        }

    def __getitem__(self, name):
        return self.collections.setdefault(name, InMemoryCollection())


@pytest.fixture
def fake_db():
    """Fresh in-memory database per test."""
    return InMemoryDatabase()


@pytest.fixture
def test_app(fake_db):
    """Create test application with the database dependency overridden."""
    # Import app after setting environment variables
    from app import app
    from authentication.config.database import get_db

    app.dependency_overrides[get_db] = lambda: fake_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app):
    """Create test client for synchronous tests. Lifespan is not run, so no MongoDB is needed."""
    return TestClient(test_app)


@pytest.fixture
def db_member_data():
    return {
        "email": "branstark@gmail.com",
        "password": "mypassword",
        "name": "Bran Stark",
        "role": "admin",
    }


@pytest.fixture
def member_data():
    return {
        "email": "sousa.dfs@gmail.com",
        "password": "123456",
        "name": "Daniel Sousa",
    }


@pytest.fixture
def db_member(fake_db, db_member_data):
    """An existing member stored with a hashed password."""
    from authentication.helper.hashing import Hash

    document = dict(db_member_data)
    document["password"] = Hash.generate_hash(db_member_data["password"])
    document["created_at"] = datetime.now(timezone.utc)
    return fake_db["members"].seed(document)


@pytest.fixture
def stored_refresh_token(fake_db, db_member):
    """A live refresh token owned by ``db_member``."""
    token = f"{db_member['_id']}.c69d0435e62c9f4953af912442a3d064e20291f0d228c0552ed4be473e7d191ba40b18c2c47e8b9d"
    return fake_db["refresh_tokens"].seed({
        "token": token,
        "member_id": db_member["_id"],
        "member_email": db_member["email"],
        "expires": datetime.now(timezone.utc) + timedelta(days=1),
    })


@pytest.fixture
def provider_profile():
    from authentication.models.models import ProviderProfile

    return ProviderProfile(
        service="facebook",
        id="123",
        name="member",
        email="test@test.com",
        picture="test.jpg",
    )


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "stress: mark test as stress test")
