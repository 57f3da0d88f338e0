from datetime import datetime, timedelta

from app.utils.dates import utc_now

from factories import add_expense, add_income


def test_records_require_token(client):
    assert client.get("/expenses").status_code == 401
    assert client.post("/incomes", json={"amount": 10, "source": "salary"}).status_code == 401


def test_create_and_list_expenses(client, auth_headers):
    first = client.post(
        "/expenses",
        json={"amount": 12.5, "category": "food", "date": "2026-01-10T08:00:00", "icon": "🍔"},
        headers=auth_headers,
    )
    second = client.post(
        "/expenses",
        json={"amount": 40, "category": "transport", "date": "2026-01-12T08:00:00"},
        headers=auth_headers,
    )

    assert first.status_code == 201
    assert first.json()["category"] == "food"
    assert first.json()["icon"] == "🍔"
    assert second.status_code == 201

    listed = client.get("/expenses", headers=auth_headers).json()
    assert [e["category"] for e in listed] == ["transport", "food"]


def test_create_income_defaults_date_to_now(client, auth_headers):
    before = utc_now()
    response = client.post("/incomes", json={"amount": 900, "source": "salary"}, headers=auth_headers)

    assert response.status_code == 201
    created = datetime.fromisoformat(response.json()["date"].replace("Z", "+00:00"))
    assert created >= before - timedelta(seconds=1)


def test_timezone_aware_dates_stored_as_utc(client, auth_headers):
    response = client.post(
        "/incomes",
        json={"amount": 50, "source": "gift", "date": "2026-01-10T08:00:00-05:00"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["date"] == "2026-01-10T13:00:00Z"


def test_negative_amount_rejected(client, auth_headers):
    response = client.post("/expenses", json={"amount": -1, "category": "food"}, headers=auth_headers)

    assert response.status_code == 422


def test_update_expense(client, session, user, auth_headers):
    expense = add_expense(session, user, 10, "food", utc_now())

    response = client.put(f"/expenses/{expense.id}", json={"amount": 15}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["amount"] == 15
    assert response.json()["category"] == "food"


def test_update_rejects_null_required_fields(client, session, user, auth_headers):
    expense = add_expense(session, user, 10, "food", utc_now())

    for payload in ({"category": None}, {"amount": None}, {"date": None}):
        response = client.put(f"/expenses/{expense.id}", json=payload, headers=auth_headers)
        assert response.status_code == 422

    income = add_income(session, user, 10, "salary", utc_now())
    assert client.put(f"/incomes/{income.id}", json={"source": None}, headers=auth_headers).status_code == 422

    listed = client.get("/expenses", headers=auth_headers).json()
    assert listed[0]["category"] == "food"
    assert listed[0]["amount"] == 10


def test_update_can_clear_icon(client, session, user, auth_headers):
    expense = add_expense(session, user, 10, "food", utc_now(), icon="🍔")

    response = client.put(f"/expenses/{expense.id}", json={"icon": None}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["icon"] is None


def test_update_without_fields_is_rejected(client, session, user, auth_headers):
    income = add_income(session, user, 10, "salary", utc_now())

    response = client.put(f"/incomes/{income.id}", json={}, headers=auth_headers)

    assert response.status_code == 400


def test_delete_income(client, session, user, auth_headers):
    income = add_income(session, user, 10, "salary", utc_now())

    response = client.delete(f"/incomes/{income.id}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get("/incomes", headers=auth_headers).json() == []


def test_cannot_touch_records_of_other_users(client, session, other_user, auth_headers):
    expense = add_expense(session, other_user, 10, "food", utc_now())

    assert client.put(f"/expenses/{expense.id}", json={"amount": 1}, headers=auth_headers).status_code == 404
    assert client.delete(f"/expenses/{expense.id}", headers=auth_headers).status_code == 404
    assert client.get("/expenses", headers=auth_headers).json() == []
