"""Shared pytest fixtures for all tests."""

import base64

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from fastapi.testclient import TestClient

from collab_backend.core.config import Settings
from collab_backend.main import create_app


def _b64url(value: int) -> str:
    return base64.urlsafe_b64encode(value.to_bytes(32, "big")).rstrip(b"=").decode("ascii")


@pytest.fixture(scope="session")
def private_jwk():
    """
    Generate an ES256 private key in JWK form.

    Returns:
        JWK dict with the private component
    """
    key = ec.generate_private_key(ec.SECP256R1())
    numbers = key.private_numbers()
    return {
        "kty": "EC",
        "crv": "P-256",
        "x": _b64url(numbers.public_numbers.x),
        "y": _b64url(numbers.public_numbers.y),
        "d": _b64url(numbers.private_value),
    }


@pytest.fixture
def db_path(tmp_path):
    """Path of the JSON database file inside a temp directory."""
    return tmp_path / "db.json"


@pytest.fixture
def settings(private_jwk, db_path, tmp_path):
    """Settings isolated from the environment and .env files."""
    return Settings(
        _env_file=None,
        auth_private_key=private_jwk,
        db_file=str(db_path),
        static_dir=str(tmp_path / "static"),
    )


@pytest.fixture
def client(settings):
    """FastAPI test client with the lifespan running."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def create_doc(client):
    """Create a document through the API and return its JSON."""
    def _create(**fields):
        response = client.post("/api/docs", json=fields)
        assert response.status_code == 201
        return response.json()
    return _create
