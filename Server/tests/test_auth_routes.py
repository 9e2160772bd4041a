"""
Tests for registration and login endpoints in Postboard Server
"""

from jose import jwt

UNAUTHORIZED_BODY = {"status": "Error", "msg": "Unauthorized"}


def test_register_returns_user_without_digest(client):
    """Registration echoes the created user but never the password or digest"""
    response = client.post(
        "/auth/register",
        json={"name": "John Doe", "email": "john@mail.com", "password": "1234"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "John Doe"
    assert body["email"] == "john@mail.com"
    assert isinstance(body["id"], int)
    assert "createdAt" in body
    assert "updatedAt" in body
    assert "password" not in body
    assert "password_hash" not in body


def test_register_duplicate_email_conflicts(client, registered_user):
    """A second registration with the same email is rejected by the database"""
    response = client.post(
        "/auth/register",
        json={"name": "Johnny", "email": registered_user["email"], "password": "abcd"}
    )

    assert response.status_code == 409
    assert response.json() == {"status": "Error", "msg": "Email already registered"}


def test_register_requires_all_fields(client):
    """Missing body fields are a validation error"""
    response = client.post("/auth/register", json={"email": "john@mail.com", "password": "1234"})

    assert response.status_code == 422


def test_login_returns_claims_and_token(client, config, registered_user):
    """Correct credentials give {user: {id, email}, token}"""
    response = client.post(
        "/auth/login",
        json={"email": registered_user["email"], "password": registered_user["password"]}
    )

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"user", "token"}
    assert set(body["user"]) == {"id", "email"}
    assert body["user"]["email"] == "john@mail.com"
    assert isinstance(body["token"], str)

    payload = jwt.decode(body["token"], config.jwt_secret, algorithms=[config.jwt_algorithm])
    assert payload == body["user"]


def test_login_wrong_password_is_unauthorized(client, registered_user):
    """A wrong password gives the uniform 401"""
    response = client.post(
        "/auth/login",
        json={"email": registered_user["email"], "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json() == UNAUTHORIZED_BODY
    assert response.headers["www-authenticate"] == "Bearer"


def test_login_unknown_email_matches_wrong_password(client, registered_user):
    """Unknown email and wrong password are indistinguishable"""
    unknown = client.post("/auth/login", json={"email": "nobody@mail.com", "password": "1234"})
    wrong = client.post("/auth/login", json={"email": registered_user["email"], "password": "nope"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == UNAUTHORIZED_BODY


def test_login_email_is_exact_match(client, registered_user):
    """Email lookup is delegated to the database and is case sensitive on SQLite"""
    response = client.post("/auth/login", json={"email": "JOHN@mail.com", "password": "1234"})

    assert response.status_code == 401


def test_tokens_from_another_secret_are_rejected(client, registered_user):
    """A token signed with a different secret never authorizes"""
    forged = jwt.encode({"id": 1, "email": registered_user["email"]}, "other-secret", algorithm="HS256")
    response = client.post(
        "/posts",
        json={"title": "Forged", "body": "Should not be created"},
        headers={"Authorization": f"Bearer {forged}"}
    )

    assert response.status_code == 401
    assert response.json() == UNAUTHORIZED_BODY
