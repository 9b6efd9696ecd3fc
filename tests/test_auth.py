"""Tests for authentication."""
import pytest
from app.config import settings
from app.services.auth_service import AuthService
from app.utils.security import verify_password, create_access_token, create_refresh_token, decode_token

AUTH_URL = f"{settings.API_V1_PREFIX}/auth"


def test_password_hashing():
    """Test password hashing and verification."""
    password = "testpassword123"
    hashed = AuthService.hash_password(password)

    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password("wrongpassword", hashed)


def test_jwt_token_creation():
    """Test JWT token creation and decoding."""
    data = {"sub": "user123", "email": "test@example.com"}
    token = create_access_token(data)

    decoded = decode_token(token)
    assert decoded["sub"] == "user123"
    assert decoded["email"] == "test@example.com"
    assert decoded["type"] == "access"


def test_decode_rejects_garbage():
    with pytest.raises(ValueError):
        decode_token("not-a-token")


@pytest.mark.asyncio
async def test_authenticate_user(db_session, test_user):
    """Test user authentication."""
    user = await AuthService.authenticate_user(db_session, "test@example.com", "testpassword")
    assert user is not None
    assert user.email == "test@example.com"

    assert await AuthService.authenticate_user(db_session, "test@example.com", "wrongpassword") is None
    assert await AuthService.authenticate_user(db_session, "nonexistent@example.com", "password") is None


@pytest.mark.asyncio
async def test_login_and_me(client, test_user):
    response = client.post(
        f"{AUTH_URL}/login",
        data={"username": "test@example.com", "password": "testpassword"},
    )
    assert response.status_code == 200
    tokens = response.json()

    me = client.get(f"{AUTH_URL}/me", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "test@example.com"
    assert me.json()["roles"][0]["name"] == "admin"


@pytest.mark.asyncio
async def test_login_wrong_password(client, test_user):
    response = client.post(
        f"{AUTH_URL}/login",
        data={"username": "test@example.com", "password": "nope"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_token(client, test_user):
    refresh = create_refresh_token({"sub": str(test_user.id)})

    response = client.post(f"{AUTH_URL}/refresh", json={"refresh_token": refresh})

    assert response.status_code == 200
    assert decode_token(response.json()["access_token"])["sub"] == str(test_user.id)


@pytest.mark.asyncio
async def test_access_token_cannot_refresh(client, test_user):
    access = create_access_token({"sub": str(test_user.id)})

    response = client.post(f"{AUTH_URL}/refresh", json={"refresh_token": access})

    assert response.status_code == 401
