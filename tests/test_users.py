import math


def _user_payload(pid="1001", email="jane@example.com", **overrides):
    payload = {
        "name": "  Jane Doe ",
        "email": email,
        "phone": "0801234567",
        "shift": 2,
        "pid": pid,
    }
    payload.update(overrides)
    return payload


def test_create_user(client, auth_headers):
    res = client.post("/api/users", json=_user_payload(email="Jane@Example.com"), headers=auth_headers)
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["name"] == "Jane Doe"
    assert data["email"] == "jane@example.com"
    assert data["shift"] == 2
    assert data["pid"] == "1001"


def test_create_user_accepts_legacy_keys(client, auth_headers):
    payload = _user_payload()
    del payload["pid"]
    payload.update({"PID": 2002, "shift": "3"})
    res = client.post("/api/users", json=payload, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["data"]["pid"] == "2002"
    assert res.json()["data"]["shift"] == 3


def test_create_user_duplicate_email(client, auth_headers, make_user):
    make_user("1", email="jane@example.com")
    res = client.post("/api/users", json=_user_payload(pid="2"), headers=auth_headers)
    assert res.status_code == 409
    body = res.json()
    assert body["message"] == "Email already exists"
    assert body["data"] == {"field": "email"}


def test_create_user_duplicate_pid(client, auth_headers, make_user):
    make_user("1001", email="other@example.com")
    res = client.post("/api/users", json=_user_payload(pid="1001"), headers=auth_headers)
    assert res.status_code == 409
    body = res.json()
    assert body["message"] == "PID already exists"
    assert body["data"] == {"field": "pid"}


def test_create_user_validation(client, auth_headers):
    cases = [
        _user_payload(shift=4),
        _user_payload(pid="12a"),
        _user_payload(phone="123"),
        _user_payload(email="nope"),
        {"name": "No fields"},
    ]
    for payload in cases:
        res = client.post("/api/users", json=payload, headers=auth_headers)
        assert res.status_code == 400, payload
        assert res.json()["success"] is False


def test_list_users_paginated(client, auth_headers, make_user):
    for i in range(7):
        make_user(str(100 + i))

    res = client.get("/api/users", params={"page": 2, "limit": 3}, headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert len(body["data"]) == 3
    assert body["pagination"] == {"page": 2, "limit": 3, "total": 7, "pages": math.ceil(7 / 3)}

    res = client.get("/api/users", params={"page": 0}, headers=auth_headers)
    assert res.status_code == 400

    res = client.get("/api/users", params={"page": 10**10, "limit": 10**10}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["error"] == "validation_error"


def test_get_user(client, auth_headers, make_user):
    user = make_user("555")
    res = client.get(f"/api/users/{user.id}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["pid"] == "555"

    res = client.get("/api/users/9999", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["message"] == "User not found"

    res = client.get("/api/users/not-a-number", headers=auth_headers)
    assert res.status_code == 400


def test_update_user_keeps_pid(client, auth_headers, make_user):
    user = make_user("777", shift=1)
    payload = _user_payload(pid="999", email="new@example.com", shift=3)
    res = client.put(f"/api/users/{user.id}", json=payload, headers=auth_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["pid"] == "777"
    assert data["shift"] == 3
    assert data["email"] == "new@example.com"


def test_update_user_email_conflict(client, auth_headers, make_user):
    make_user("1", email="taken@example.com")
    user = make_user("2", email="mine@example.com")
    res = client.put(
        f"/api/users/{user.id}",
        json=_user_payload(email="taken@example.com"),
        headers=auth_headers,
    )
    assert res.status_code == 409
    assert res.json()["message"] == "Email already exists"

    # Keeping one's own email is not a conflict
    res = client.put(
        f"/api/users/{user.id}",
        json=_user_payload(email="mine@example.com"),
        headers=auth_headers,
    )
    assert res.status_code == 200


def test_update_missing_user(client, auth_headers):
    res = client.put("/api/users/4242", json=_user_payload(), headers=auth_headers)
    assert res.status_code == 404


def test_delete_user(client, auth_headers, make_user):
    user = make_user("31", name="Bob", email="bob@example.com")
    res = client.delete(f"/api/users/{user.id}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"] == {"id": user.id, "name": "Bob", "email": "bob@example.com"}

    res = client.delete(f"/api/users/{user.id}", headers=auth_headers)
    assert res.status_code == 404


def test_user_stats(client, auth_headers, make_user):
    make_user("1", shift=3)
    make_user("2", shift=1)
    make_user("3", shift=3)

    res = client.get("/api/users-stats", headers=auth_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["total_users"] == 3
    assert data["shift_stats"] == [
        {"shift": 1, "label": "Morning", "count": 1},
        {"shift": 3, "label": "Night", "count": 2},
    ]
