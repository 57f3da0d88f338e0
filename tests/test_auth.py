def test_register_login_and_me(client):
    register = client.post("/auth/register", json={"email": "marta@example.com", "password": "secreto123"})
    assert register.status_code == 200
    user_id = register.json()["id"]

    login = client.post("/auth/login", data={"username": "marta@example.com", "password": "secreto123"})
    assert login.status_code == 200
    token = login.json()["access_token"]
    assert login.json()["token_type"] == "bearer"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json() == {"user_id": user_id}


def test_register_duplicate_email(client):
    payload = {"email": "marta@example.com", "password": "secreto123"}
    client.post("/auth/register", json=payload)

    response = client.post("/auth/register", json=payload)

    assert response.status_code == 400


def test_login_with_wrong_password(client):
    client.post("/auth/register", json={"email": "marta@example.com", "password": "secreto123"})

    response = client.post("/auth/login", data={"username": "marta@example.com", "password": "otra"})

    assert response.status_code == 401


def test_login_token_opens_dashboard(client):
    client.post("/auth/register", json={"email": "marta@example.com", "password": "secreto123"})
    token = client.post(
        "/auth/login", data={"username": "marta@example.com", "password": "secreto123"}
    ).json()["access_token"]

    response = client.get("/dashboard", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["balance"] == 0
